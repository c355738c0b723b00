from __future__ import annotations

import re
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

from leaddesk.core import config
from leaddesk.models.lead import Lead, Stage, STAGE_ORDER

ActionType = Literal["call", "message", "advance"]

_NON_DIGITS = re.compile(r"\D")


class LeadAction(BaseModel):
    """A user action on one lead. Every action counts as a fresh contact."""
    type: ActionType


class ActionResult(BaseModel):
    lead: Lead
    link: Optional[str] = None  # external URI for call/message, opened by the client
    advanced: bool = False


def next_stage(stage: Stage) -> Optional[Stage]:
    idx = STAGE_ORDER.index(stage)
    if idx + 1 < len(STAGE_ORDER):
        return STAGE_ORDER[idx + 1]
    return None


def touch(lead: Lead, now: datetime) -> Lead:
    return lead.model_copy(update={"lastInteractionAt": now})


def advance_stage(lead: Lead, now: datetime) -> Lead:
    """
    Move the lead one stage forward and reset daysInStage.
    A closing-stage lead keeps its stage and counter; the contact time is
    refreshed either way, which also makes the lead hot again.
    """
    nxt = next_stage(lead.stage)
    if nxt is None:
        return touch(lead, now)
    return lead.model_copy(update={"stage": nxt, "daysInStage": 0, "lastInteractionAt": now})


def tel_link(contact: str) -> str:
    return f"tel:{contact}"


def whatsapp_link(contact: str, country_code: Optional[str] = None) -> str:
    code = config.WHATSAPP_COUNTRY_CODE if country_code is None else country_code
    return f"https://wa.me/{code}{_NON_DIGITS.sub('', contact)}"


def apply_action(lead: Lead, action: LeadAction, now: datetime) -> ActionResult:
    if action.type == "advance":
        updated = advance_stage(lead, now)
        return ActionResult(lead=updated, advanced=updated.stage != lead.stage)
    if action.type == "call":
        return ActionResult(lead=touch(lead, now), link=tel_link(lead.contact))
    if action.type == "message":
        return ActionResult(lead=touch(lead, now), link=whatsapp_link(lead.contact))
    raise ValueError(f"unknown action type: {action.type!r}")
