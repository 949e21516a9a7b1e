import logging
from typing import Dict, Union

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from rodo_audit.models.schemas import AuditErrorResponse, AuditRequest, AuditResponse
from rodo_audit.services.audit_engine import AuditEngine
from rodo_audit.utils.rate_limit import current_rate_limit, limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/audit", tags=["audit"])
audit_engine = AuditEngine()

SUCCESS_MESSAGE = "GDPR audit completed successfully"
FAILURE_MESSAGE = "An error occurred during the audit"


@router.post("", response_model=AuditResponse, responses={500: {"model": AuditErrorResponse}})
@limiter.limit(current_rate_limit)
def run_audit(request: Request, payload: AuditRequest) -> Union[AuditResponse, JSONResponse]:
    audit_data = payload.model_dump()
    try:
        result = audit_engine.assess(audit_data)
    except Exception:
        logger.exception("Audit failed", extra={"industry": payload.industry, "employees": payload.employees})
        return JSONResponse(status_code=500, content=AuditErrorResponse(error=FAILURE_MESSAGE).model_dump())

    logger.info(
        "Audit completed",
        extra={
            "industry": payload.industry,
            "employees": payload.employees,
            "riskScore": result.riskScore,
            "riskLevel": result.riskLevel,
        },
    )
    return AuditResponse(companyName=payload.companyName, message=SUCCESS_MESSAGE, **result.model_dump())


@router.get("/health")
@limiter.limit(current_rate_limit)
def audit_health(request: Request) -> Dict[str, str]:
    return {"status": "Audit routes OK"}
