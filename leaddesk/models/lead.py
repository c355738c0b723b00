from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Stage(str, Enum):
    FIRST_CONTACT = "first-contact"
    INTEREST = "interest"
    NEGOTIATION = "negotiation"
    CLOSING = "closing"


STAGE_ORDER = (Stage.FIRST_CONTACT, Stage.INTEREST, Stage.NEGOTIATION, Stage.CLOSING)

STAGE_LABELS = {
    Stage.FIRST_CONTACT: "First contact",
    Stage.INTEREST: "Showed interest",
    Stage.NEGOTIATION: "In negotiation",
    Stage.CLOSING: "Ready to close",
}


class Temperature(str, Enum):
    HOT = "hot"
    WARM = "warm"
    COLD = "cold"


DEFAULT_CONVERSION = 60
DEFAULT_NEXT_ACTION = "Make first contact"


class Lead(BaseModel):
    """
    A single sales lead. Instances are immutable; every change goes through
    `model_copy(update=...)` so the collection can be replaced wholesale.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., description="Opaque lead id, assigned on creation")
    name: str
    contact: str = ""
    propertyType: str = ""
    budget: str = ""  # display string, e.g. "R$ 800k"
    stage: Stage = Stage.FIRST_CONTACT
    lastInteractionAt: datetime
    nextAction: str = ""
    daysInStage: int = Field(0, ge=0)
    conversionProbability: int = Field(DEFAULT_CONVERSION, ge=0, le=100)
    notes: Optional[str] = None


class LeadCreate(BaseModel):
    """Quick-add form payload."""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(..., min_length=1, max_length=160)
    contact: str = Field(..., min_length=1, max_length=60)
    propertyType: str = Field(..., min_length=1, max_length=160)
    budget: str = Field(..., min_length=1, max_length=60)
    notes: Optional[str] = None


class LeadUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=160)
    contact: Optional[str] = Field(None, min_length=1, max_length=60)
    propertyType: Optional[str] = Field(None, min_length=1, max_length=160)
    budget: Optional[str] = Field(None, min_length=1, max_length=60)
    nextAction: Optional[str] = None
    daysInStage: Optional[int] = Field(None, ge=0)
    conversionProbability: Optional[int] = Field(None, ge=0, le=100)
    notes: Optional[str] = None

    @field_validator(
        "name", "contact", "propertyType", "budget",
        "nextAction", "daysInStage", "conversionProbability",
        mode="before",
    )
    @classmethod
    def _not_null(cls, v):
        # omit a field to leave it unchanged; only notes can be cleared
        if v is None:
            raise ValueError("field cannot be null")
        return v


class LeadView(Lead):
    # Derived on every read, never stored
    temperature: Temperature
    urgent: bool
    daysSinceContact: int
    contactStatus: str
    stageLabel: str
