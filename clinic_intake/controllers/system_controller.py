# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints: health, readiness, metrics.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from clinic_intake.core.config import EmailConfig, settings
from clinic_intake.core.dependencies import get_email_config

router = APIRouter(tags=["System"])


@router.get("/health")
async def health_check():
    """Liveness probe."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
    }


@router.get("/health/ready")
async def readiness_check(config: EmailConfig = Depends(get_email_config)):
    """Readiness probe, degraded until an email API key is configured."""
    if not config.configured:
        return JSONResponse(
            status_code=503,
            content={
                "status": "degraded",
                "service": settings.SERVICE_NAME,
                "email_configured": False,
            },
        )
    return {"status": "ready", "service": settings.SERVICE_NAME, "email_configured": True}


@router.get("/metrics")
async def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
