from fastapi import APIRouter
import logging

from leaddesk.services import lead_service
from leaddesk.services.metrics import DashboardMetrics

router = APIRouter()
logger = logging.getLogger("leaddesk.api.kpis")

@router.get("/", response_model=DashboardMetrics)
async def get_kpis():
    kpis = lead_service.dashboard()
    logger.info(
        "Returning KPIs: active=%d hot=%d attention=%d",
        kpis.activeCount, kpis.hotCount, kpis.needsAttentionCount,
    )
    return kpis
