# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Clinic Intake Service
=====================
Accepts appointment requests and contact-form inquiries from the clinic
website, validates them, and forwards each one as an email through the
Resend API. Nothing is stored.

Endpoints are served both at the root and under /api.

Port: 5000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from clinic_intake.controllers.intake_controller import router as intake_router
from clinic_intake.controllers.system_controller import router as system_router
from clinic_intake.core.config import settings
from clinic_intake.core.dependencies import get_email_config
from clinic_intake.core.errors import IntakeError, UnsupportedMethodError
from clinic_intake.core.logging import get_logger
from clinic_intake.middleware import MetricsMiddleware, RequestIDMiddleware
from clinic_intake.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    config = get_email_config()
    if config.configured:
        logger.info("%s v%s starting, notifications go to %s",
                    settings.SERVICE_NAME, settings.SERVICE_VERSION, config.recipient)
    else:
        logger.error("RESEND_API_KEY is missing, submissions will fail until it is set")
    yield
    logger.info("%s shutting down", settings.SERVICE_NAME)


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="Clinic Intake Service",
    description="Validates appointment and contact submissions and emails them to the clinic.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(system_router)
app.include_router(intake_router)
app.include_router(intake_router, prefix="/api")


# ── Error envelope ────────────────────────────────────────────────────────
def _error_response(status_code: int, error: str, details=None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.exception_handler(IntakeError)
async def intake_error_handler(request: Request, exc: IntakeError):
    return _error_response(exc.status_code, exc.message, exc.details, exc.headers)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        allow = (exc.headers or {}).get("Allow", "POST")
        logger.warning("%s %s rejected, allowed: %s", request.method, request.url.path, allow)
        return await intake_error_handler(request, UnsupportedMethodError(allow))
    return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)


# Runs outside the middleware stack: no X-Request-ID or CORS headers. The
# intake pipeline raises IntakeError for its own failures instead.
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception on %s", request.url.path,
                     extra={"request_id": req_id})
    return _error_response(500, "Internal Error")


# ── Entrypoint ────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
