from datetime import timedelta
from functools import cmp_to_key

import pytest

from leaddesk.models.lead import Lead, Temperature
from leaddesk.services.ranking import annotate, annotate_all, compare_leads, rank_leads, temperature_counts


def _lead(now, lid, days_ago=0, days_in_stage=0, prob=50):
    return Lead(
        id=lid,
        name=f"Lead {lid}",
        lastInteractionAt=now - timedelta(days=days_ago),
        daysInStage=days_in_stage,
        conversionProbability=prob,
    )


def test_demo_ranking_order(leads, now):
    ranked = rank_leads(leads, now)
    assert [v.id for v in ranked] == ["3", "5", "4", "2", "8", "1", "6", "7"]


def test_urgent_beats_conversion(now):
    cold_low = _lead(now, "cold", days_ago=10, prob=5)
    stale_low = _lead(now, "stale", days_in_stage=8, prob=10)
    hot_high = _lead(now, "hot", prob=99)
    ranked = rank_leads([hot_high, cold_low, stale_low], now)
    assert [v.id for v in ranked] == ["stale", "cold", "hot"]


def test_hot_before_warm_when_not_urgent(now):
    warm_high = _lead(now, "warm", days_ago=4, prob=95)
    hot_low = _lead(now, "hot", days_ago=1, prob=10)
    assert [v.id for v in rank_leads([warm_high, hot_low], now)] == ["hot", "warm"]


def test_seven_days_in_stage_is_not_urgent(now):
    view = annotate(_lead(now, "a", days_in_stage=7), now)
    assert view.urgent is False
    assert annotate(_lead(now, "b", days_in_stage=8), now).urgent is True


def test_full_ties_keep_input_order(now):
    a, b, c = (_lead(now, x, prob=60) for x in "abc")
    assert [v.id for v in rank_leads([b, c, a], now)] == ["b", "c", "a"]


def test_comparator_is_antisymmetric_and_transitive(leads, now):
    views = annotate_all(leads, now)
    for a in views:
        for b in views:
            ab, ba = compare_leads(a, b), compare_leads(b, a)
            assert (ab < 0) == (ba > 0)
            for c in views:
                if ab <= 0 and compare_leads(b, c) <= 0:
                    assert compare_leads(a, c) <= 0
    assert sorted(views, key=cmp_to_key(compare_leads))[0].id == "3"


@pytest.mark.parametrize("bucket", ["hot", "warm", "cold", Temperature.HOT])
def test_filter_keeps_relative_order(leads, now, bucket):
    full = [v.id for v in rank_leads(leads, now)]
    filtered = rank_leads(leads, now, bucket)
    assert all(v.temperature == Temperature(bucket) for v in filtered)
    ids = [v.id for v in filtered]
    assert ids == [i for i in full if i in ids]


def test_filter_buckets(leads, now):
    assert [v.id for v in rank_leads(leads, now, "hot")] == ["4", "2", "8", "1", "6", "7"]
    assert [v.id for v in rank_leads(leads, now, "warm")] == ["3"]
    assert [v.id for v in rank_leads(leads, now, "cold")] == ["5"]
    assert len(rank_leads(leads, now, "all")) == 8


def test_unknown_filter_rejected(leads, now):
    with pytest.raises(ValueError):
        rank_leads(leads, now, "lukewarm")


def test_temperature_counts(leads, now):
    counts = temperature_counts(annotate_all(leads, now))
    assert counts == {"all": 8, "hot": 6, "warm": 1, "cold": 1}
    assert temperature_counts([]) == {"all": 0, "hot": 0, "warm": 0, "cold": 0}
