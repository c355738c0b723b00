from __future__ import annotations

from datetime import datetime
from functools import cmp_to_key
from typing import Dict, Iterable, List, Optional, Union

from leaddesk.models.lead import Lead, LeadView, STAGE_LABELS, Temperature
from leaddesk.services.temperature import classify_days, contact_status, days_since

STALE_STAGE_DAYS = 7

TemperatureFilter = Optional[Union[Temperature, str]]


def is_urgent(lead: Lead, temperature: Temperature) -> bool:
    """Cold leads and leads parked in a stage for more than a week need attention first."""
    return temperature == Temperature.COLD or lead.daysInStage > STALE_STAGE_DAYS


def annotate(lead: Lead, now: datetime) -> LeadView:
    days = days_since(lead.lastInteractionAt, now)
    temperature = classify_days(days)
    return LeadView(
        **lead.model_dump(),
        temperature=temperature,
        urgent=is_urgent(lead, temperature),
        daysSinceContact=days,
        contactStatus=contact_status(days),
        stageLabel=STAGE_LABELS[lead.stage],
    )


def annotate_all(leads: Iterable[Lead], now: datetime) -> List[LeadView]:
    return [annotate(l, now) for l in leads]


def compare_leads(a: LeadView, b: LeadView) -> int:
    """
    Negative when `a` is more urgent than `b`.
      1) urgent before non-urgent
      2) hot before anything else
      3) higher conversion probability first
    """
    if a.urgent != b.urgent:
        return -1 if a.urgent else 1

    a_hot = a.temperature == Temperature.HOT
    b_hot = b.temperature == Temperature.HOT
    if a_hot != b_hot:
        return -1 if a_hot else 1

    return b.conversionProbability - a.conversionProbability


def _normalize_filter(temperature: TemperatureFilter) -> Optional[Temperature]:
    if temperature is None or temperature == "all":
        return None
    return Temperature(temperature)


def rank_leads(
    leads: Iterable[Lead],
    now: datetime,
    temperature: TemperatureFilter = None,
) -> List[LeadView]:
    """
    Rank the whole collection, then keep one temperature bucket if asked.
    Filtering after the sort keeps the relative order of retained leads.
    Raises ValueError for an unknown bucket name.
    """
    wanted = _normalize_filter(temperature)
    ranked = sorted(annotate_all(leads, now), key=cmp_to_key(compare_leads))
    if wanted is None:
        return ranked
    return [v for v in ranked if v.temperature == wanted]


def temperature_counts(views: Iterable[LeadView]) -> Dict[str, int]:
    counts = {"all": 0, **{t.value: 0 for t in Temperature}}
    for v in views:
        counts["all"] += 1
        counts[v.temperature.value] += 1
    return counts
