from fastapi import APIRouter
from typing import List
import logging

from leaddesk.services import lead_service
from leaddesk.services.metrics import StageSummary

router = APIRouter()
logger = logging.getLogger("leaddesk.api.funnel")

@router.get("/", response_model=List[StageSummary])
async def get_funnel():
    funnel = lead_service.funnel()
    logger.info("Returning funnel: %s", {s.stage.value: s.count for s in funnel})
    return funnel
