from typing import Any, List, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator

Industry = Literal["healthcare", "finance", "ecommerce", "marketing", "education", "it", "other"]
EmployeeRange = Literal["1-10", "11-50", "51-250", "250+"]
RiskLevel = Literal["LOW", "MEDIUM", "HIGH"]
Priority = Literal["CRITICAL", "HIGH"]

# entity-encodes / \ and ` as well as the usual HTML specials
HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "\"": "&quot;",
        "'": "&#x27;",
        "<": "&lt;",
        ">": "&gt;",
        "/": "&#x2F;",
        "\\": "&#x5C;",
        "`": "&#96;",
    }
)


class AuditRequest(BaseModel):
    companyName: str
    industry: Industry
    employees: EmployeeRange
    email: EmailStr
    dataTypes: Any = None
    hasPolicy: Any = None

    @field_validator("companyName")
    @classmethod
    def _clean_company_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("companyName must not be empty")
        return value.translate(HTML_ESCAPES)

    @field_validator("email")
    @classmethod
    def _normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class Recommendation(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    priority: Priority
    time: str


class AuditResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    riskScore: int
    riskLevel: RiskLevel
    recommendations: List[Recommendation]
    potentialFines: int


class AuditResponse(AuditResult):
    success: bool = True
    companyName: str
    message: str


class AuditErrorResponse(BaseModel):
    success: bool = False
    error: str
