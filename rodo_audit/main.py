import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from rodo_audit.config import settings
from rodo_audit.db.database import check_database, engine
from rodo_audit.routes.audit import router as audit_router
from rodo_audit.utils.logging_utils import SERVICE_NAME, configure_logging
from rodo_audit.utils.rate_limit import limiter
from rodo_audit.utils.security import SECURITY_HEADERS, limit_body_size, security_headers

configure_logging(settings.log_level, settings.environment)
logger = logging.getLogger(SERVICE_NAME)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("RODO backend starting", extra={"port": settings.port})
    yield
    engine.dispose()


app = FastAPI(title="RODO Compliance Audit", lifespan=lifespan)
app.state.limiter = limiter
allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(
    RateLimitExceeded,
    lambda request, exc: JSONResponse(status_code=429, content={"detail": "Rate limit exceeded", "code": "rate_limited"}),
)
app.add_middleware(SlowAPIMiddleware)
app.middleware("http")(limit_body_size)
app.middleware("http")(security_headers)


def _validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    errors = []
    for error in exc.errors():
        location = error.get("loc", ())
        errors.append(
            {
                "field": ".".join(str(part) for part in location[1:]),
                "message": error.get("msg", "Invalid value"),
                "location": str(location[0]) if location else "body",
            }
        )
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _validation_errors(exc)
    logger.info("Request validation failed", extra={"fields": [e["field"] for e in errors]})
    return JSONResponse(status_code=400, content={"errors": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", exc_info=exc, extra={"path": request.url.path})
    message = str(exc) if settings.environment == "development" else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "Something went wrong!", "message": message},
        headers=SECURITY_HEADERS,
    )


app.include_router(audit_router)


@app.get("/health")
def health() -> Dict[str, str]:
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": settings.environment,
    }


@app.get("/health/db")
def database_health() -> JSONResponse:
    if check_database():
        return JSONResponse(status_code=200, content={"status": "ok"})
    return JSONResponse(status_code=503, content={"status": "unavailable"})


def run() -> None:
    import uvicorn

    uvicorn.run("rodo_audit.main:app", host=settings.host, port=settings.port)
