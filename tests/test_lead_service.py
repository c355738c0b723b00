from datetime import timedelta

import pytest

from leaddesk.models.lead import LeadCreate, LeadUpdate, Stage
from leaddesk.services import lead_service
from leaddesk.services.lead_service import LeadNotFound
from leaddesk.services.transitions import LeadAction


def _form(**over):
    data = {"name": "Bruno Reis", "contact": "(11) 90000-0000", "propertyType": "Loft", "budget": "R$ 500k"}
    data.update(over)
    return LeadCreate(**data)


def test_quick_add_defaults_and_prepends(now):
    lead = lead_service.quick_add(_form(notes="Prefers evenings"))
    assert lead.stage == Stage.FIRST_CONTACT
    assert lead.conversionProbability == 60
    assert lead.daysInStage == 0
    assert lead.lastInteractionAt == now
    assert lead.nextAction == "Make first contact"
    assert lead.notes == "Prefers evenings"
    all_leads = lead_service.get_all_leads()
    assert all_leads[0].id == lead.id
    assert len(all_leads) == 9


def test_quick_add_ids_are_unique():
    ids = {lead_service.quick_add(_form()).id for _ in range(5)}
    assert len(ids) == 5


def test_collection_is_replaced_not_mutated(now):
    before = lead_service.get_all_leads()
    lead_service.apply_action("1", LeadAction(type="advance"))
    after = lead_service.get_all_leads()
    assert before[0].stage == Stage.FIRST_CONTACT
    assert after[0].stage == Stage.INTEREST
    assert before[0] is not after[0]


def test_update_lead_merges_and_touches(now):
    later = now + timedelta(hours=3)
    updated = lead_service.update_lead("5", LeadUpdate(nextAction="Visit on Friday", conversionProbability=40), now=later)
    assert updated.nextAction == "Visit on Friday"
    assert updated.conversionProbability == 40
    assert updated.lastInteractionAt == later
    assert updated.name == "Roberto Mendes"
    assert lead_service.get_lead("5") == updated


def test_unknown_lead_raises():
    with pytest.raises(LeadNotFound):
        lead_service.get_lead("nope")
    with pytest.raises(KeyError):
        lead_service.apply_action("nope", LeadAction(type="call"))


def test_contact_action_warms_up_cold_lead():
    assert lead_service.view_lead("5").temperature.value == "cold"
    lead_service.apply_action("5", LeadAction(type="message"))
    view = lead_service.view_lead("5")
    assert view.temperature.value == "hot"
    assert view.daysInStage == 12


def test_reset_empty():
    lead_service.reset()
    assert lead_service.get_all_leads() == []
    assert lead_service.dashboard().averageConversion == 0
    assert lead_service.ranked() == []


def test_update_result_is_revalidated(now):
    updated = lead_service.update_lead("1", LeadUpdate(notes=None, daysInStage=3))
    assert updated.notes is None
    assert updated.daysInStage == 3
    assert lead_service.view_lead("1").stageLabel == "First contact"
