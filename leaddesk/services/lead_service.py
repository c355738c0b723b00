import logging
import uuid
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from leaddesk.models.lead import (
    DEFAULT_CONVERSION,
    DEFAULT_NEXT_ACTION,
    Lead,
    LeadCreate,
    LeadUpdate,
    LeadView,
    Stage,
)
from leaddesk.services import metrics, ranking, transitions
from leaddesk.services.seed import demo_leads
from leaddesk.services.temperature import utcnow
from leaddesk.services.transitions import ActionResult, LeadAction

logger = logging.getLogger("leaddesk.lead_service")

# In-memory lead store. Never mutated in place: every change swaps in a new tuple.
_leads: tuple = ()


class LeadNotFound(KeyError):
    def __init__(self, lead_id: str):
        super().__init__(lead_id)
        self.lead_id = lead_id


def _now() -> datetime:
    return utcnow()


def _replace(lead: Lead) -> None:
    global _leads
    _leads = tuple(lead if l.id == lead.id else l for l in _leads)


def _find(lead_id: Optional[str]) -> Optional[Lead]:
    if not lead_id:
        return None
    return next((l for l in _leads if l.id == lead_id), None)


# -------------------
# Store lifecycle
# -------------------
def reset(leads: Optional[Sequence[Lead]] = None) -> None:
    """Replace the whole collection (empty when `leads` is None)."""
    global _leads
    _leads = tuple(leads or ())
    logger.info("lead store reset count=%d", len(_leads))


def seed_demo(now: Optional[datetime] = None) -> None:
    reset(demo_leads(now or _now()))


# -------------------
# Lead access
# -------------------
def get_all_leads() -> List[Lead]:
    """Collection order (newest quick-add first)."""
    return list(_leads)


def get_lead(lead_id: str) -> Lead:
    lead = _find(lead_id)
    if lead is None:
        raise LeadNotFound(lead_id)
    return lead


def view_lead(lead_id: str, now: Optional[datetime] = None) -> LeadView:
    return ranking.annotate(get_lead(lead_id), now or _now())


# -------------------
# Mutations
# -------------------
def quick_add(data: LeadCreate, now: Optional[datetime] = None) -> Lead:
    global _leads
    lead = Lead(
        id=uuid.uuid4().hex,
        name=data.name,
        contact=data.contact,
        propertyType=data.propertyType,
        budget=data.budget,
        stage=Stage.FIRST_CONTACT,
        lastInteractionAt=now or _now(),
        nextAction=DEFAULT_NEXT_ACTION,
        daysInStage=0,
        conversionProbability=DEFAULT_CONVERSION,
        notes=data.notes or None,
    )
    _leads = (lead,) + _leads
    logger.info("quick_add id=%s name=%s", lead.id, lead.name)
    return lead


def update_lead(lead_id: str, changes: LeadUpdate, now: Optional[datetime] = None) -> Lead:
    """Merge the given fields; any update counts as a contact."""
    lead = get_lead(lead_id)
    fields = changes.model_dump(exclude_unset=True)
    fields["lastInteractionAt"] = now or _now()
    updated = Lead.model_validate({**lead.model_dump(), **fields})
    _replace(updated)
    logger.info("update_lead id=%s fields=%s", lead_id, sorted(fields))
    return updated


def apply_action(lead_id: str, action: LeadAction, now: Optional[datetime] = None) -> ActionResult:
    lead = get_lead(lead_id)
    result = transitions.apply_action(lead, action, now or _now())
    _replace(result.lead)
    logger.info(
        "action id=%s type=%s stage=%s->%s",
        lead_id, action.type, lead.stage.value, result.lead.stage.value,
    )
    return result


# -------------------
# Derived views
# -------------------
def ranked(temperature: ranking.TemperatureFilter = None, now: Optional[datetime] = None) -> List[LeadView]:
    return ranking.rank_leads(_leads, now or _now(), temperature)


def temperature_counts(now: Optional[datetime] = None) -> Dict[str, int]:
    return ranking.temperature_counts(ranking.annotate_all(_leads, now or _now()))


def dashboard(now: Optional[datetime] = None) -> metrics.DashboardMetrics:
    return metrics.dashboard(_leads, now or _now())


def funnel() -> List[metrics.StageSummary]:
    return metrics.stage_breakdown(_leads)
