from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Dict, List, Sequence

from pydantic import BaseModel

from leaddesk.models.lead import Lead, LeadView, Stage, STAGE_LABELS, STAGE_ORDER, Temperature
from leaddesk.services.ranking import annotate_all

COMMISSION_RATE = 0.03
URGENT_MARKER = "URGENT"
URGENT_SHORTLIST_SIZE = 5

_NON_DIGITS = re.compile(r"\D")


class StageSummary(BaseModel):
    stage: Stage
    label: str
    count: int
    percentage: int
    totalValue: int
    leads: List[Lead] = []


class DashboardMetrics(BaseModel):
    activeCount: int
    hotCount: int
    needsAttentionCount: int
    closingCount: int
    averageConversion: int
    totalPipelineValue: int
    potentialCommission: int
    conversionRate: int
    stageCounts: Dict[str, int]
    stageBreakdown: List[StageSummary]
    urgentActions: List[LeadView]


def round_half_up(value: float) -> int:
    # 12.5 -> 13, unlike round()
    return int(math.floor(value + 0.5))


def percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    return round_half_up(part / whole * 100)


def parse_budget(budget: str) -> int:
    """
    Numeric magnitude of a budget string, in thousands.
    Every non-digit is dropped ("R$ 1.200k" -> 1200); no digits -> 0.
    """
    digits = _NON_DIGITS.sub("", budget or "")
    return int(digits) if digits else 0


def total_pipeline_value(leads: Sequence[Lead]) -> int:
    return sum(parse_budget(l.budget) for l in leads)


def average_conversion(leads: Sequence[Lead]) -> int:
    if not leads:
        return 0
    return round_half_up(sum(l.conversionProbability for l in leads) / len(leads))


def potential_commission(leads: Sequence[Lead]) -> int:
    """Flat commission over the probability-weighted pipeline."""
    weighted = total_pipeline_value(leads) * (average_conversion(leads) / 100)
    return round_half_up(weighted * COMMISSION_RATE)


def stage_counts(leads: Sequence[Lead]) -> Dict[str, int]:
    counts = {s.value: 0 for s in STAGE_ORDER}
    for l in leads:
        counts[l.stage.value] += 1
    return counts


def conversion_rate(leads: Sequence[Lead]) -> int:
    return percent(stage_counts(leads)[Stage.CLOSING.value], len(leads))


def urgent_shortlist(views: Sequence[LeadView]) -> List[LeadView]:
    """First matches in collection order; not re-ranked."""
    hits = [v for v in views if v.urgent or URGENT_MARKER in v.nextAction]
    return hits[:URGENT_SHORTLIST_SIZE]


def stage_breakdown(leads: Sequence[Lead]) -> List[StageSummary]:
    out: List[StageSummary] = []
    for stage in STAGE_ORDER:
        members = [l for l in leads if l.stage == stage]
        # sorted() is stable, equal probabilities keep collection order
        members = sorted(members, key=lambda l: l.conversionProbability, reverse=True)
        out.append(
            StageSummary(
                stage=stage,
                label=STAGE_LABELS[stage],
                count=len(members),
                percentage=percent(len(members), len(leads)),
                totalValue=total_pipeline_value(members),
                leads=members,
            )
        )
    return out


def dashboard(leads: Sequence[Lead], now: datetime) -> DashboardMetrics:
    views = annotate_all(leads, now)
    return DashboardMetrics(
        activeCount=len(leads),
        hotCount=sum(1 for v in views if v.temperature == Temperature.HOT),
        needsAttentionCount=sum(1 for v in views if v.urgent),
        closingCount=stage_counts(leads)[Stage.CLOSING.value],
        averageConversion=average_conversion(leads),
        totalPipelineValue=total_pipeline_value(leads),
        potentialCommission=potential_commission(leads),
        conversionRate=conversion_rate(leads),
        stageCounts=stage_counts(leads),
        stageBreakdown=stage_breakdown(leads),
        urgentActions=urgent_shortlist(views),
    )
