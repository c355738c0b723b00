from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.routing import APIRoute

from leaddesk.services import lead_service

logger = logging.getLogger("leaddesk.api.health")
router = APIRouter()

_IMPLICIT_METHODS = {"HEAD", "OPTIONS"}


@router.get("/ping")
def ping():
    logger.info("GET /health/ping")
    return {"ok": True, "leads": len(lead_service.get_all_leads())}


@router.get("/routes")
def list_routes(request: Request):
    """API routes as `METHOD path` lines, docs and static routes excluded."""
    routes = sorted(
        f"{method} {r.path}"
        for r in request.app.routes
        if isinstance(r, APIRoute)
        for method in r.methods - _IMPLICIT_METHODS
    )
    logger.info("GET /health/routes count=%d", len(routes))
    return {"ok": True, "routes": routes}
