from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from leaddesk.api import funnel, health, kpis, leads
from leaddesk.core import config
from leaddesk.middleware.request_logger import RequestLoggerMiddleware
from leaddesk.services import lead_service

# ---- Logging config ---------------------------------------------------------
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s:%(lineno)d - %(message)s",
)
logger = logging.getLogger("leaddesk.main")
logger.info("Starting LeadDesk backend with LOG_LEVEL=%s", config.LOG_LEVEL)

# ---- FastAPI app ------------------------------------------------------------
app = FastAPI(title="LeadDesk Sales Assistant")
app.add_middleware(RequestLoggerMiddleware)

# ---- CORS -------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---- Routers ----------------------------------------------------------------
app.include_router(leads.router,  prefix="/leads",  tags=["Leads"])
app.include_router(kpis.router,   prefix="/kpis",   tags=["KPIs"])
app.include_router(funnel.router, prefix="/funnel", tags=["Funnel"])
app.include_router(health.router, prefix="/health", tags=["Health"])

logger.info("Routers registered.")

# ---- Startup ----------------------------------------------------------------
@app.on_event("startup")
def _startup() -> None:
    if config.SEED_DEMO:
        lead_service.seed_demo()
    logger.info("Startup completed. leads=%d", len(lead_service.get_all_leads()))
