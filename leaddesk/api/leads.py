from __future__ import annotations

import logging
from typing import Dict, List, Literal

from fastapi import APIRouter, HTTPException, Query

from leaddesk.models.lead import LeadCreate, LeadUpdate, LeadView
from leaddesk.services import lead_service
from leaddesk.services.lead_service import LeadNotFound
from leaddesk.services.transitions import ActionResult, LeadAction

router = APIRouter()
logger = logging.getLogger("leaddesk.api.leads")

TemperatureQuery = Literal["all", "hot", "warm", "cold"]


def _not_found(lead_id: str) -> HTTPException:
    logger.warning("Lead %s not found", lead_id)
    return HTTPException(status_code=404, detail=f"Lead {lead_id} not found")


@router.get("/", response_model=List[LeadView])
async def get_leads(temperature: TemperatureQuery = Query("all")):
    """Leads ranked most urgent first, optionally limited to one temperature."""
    leads = lead_service.ranked(temperature)
    logger.info("Returning %d leads (temperature=%s)", len(leads), temperature)
    return leads


@router.get("/counts")
async def get_counts() -> Dict[str, int]:
    return lead_service.temperature_counts()


@router.post("/", response_model=LeadView, status_code=201)
async def add_lead(payload: LeadCreate):
    lead = lead_service.quick_add(payload)
    return lead_service.view_lead(lead.id)


@router.get("/{lead_id}", response_model=LeadView)
async def get_lead(lead_id: str):
    try:
        return lead_service.view_lead(lead_id)
    except LeadNotFound:
        raise _not_found(lead_id)


@router.patch("/{lead_id}", response_model=LeadView)
async def update_lead(lead_id: str, payload: LeadUpdate):
    try:
        lead_service.update_lead(lead_id, payload)
        return lead_service.view_lead(lead_id)
    except LeadNotFound:
        raise _not_found(lead_id)


@router.post("/{lead_id}/actions", response_model=ActionResult)
async def run_action(lead_id: str, action: LeadAction):
    """call / message / advance. Call and message return the link to open."""
    try:
        return lead_service.apply_action(lead_id, action)
    except LeadNotFound:
        raise _not_found(lead_id)
