import math
from types import MappingProxyType
from typing import Any, List, Mapping

from rodo_audit.models.schemas import AuditResult, Recommendation


class AuditEngine:
    """Additive GDPR exposure heuristic over the self-reported questionnaire.

    Every lookup table carries an explicit fallback for values it does not
    know, so the engine never rejects input the HTTP layer let through.
    """

    industry_points: Mapping[str, int] = MappingProxyType(
        {
            "healthcare": 40,
            "finance": 35,
            "ecommerce": 25,
            "marketing": 30,
            "education": 20,
            "it": 15,
            "other": 20,
        }
    )
    employee_points: Mapping[str, int] = MappingProxyType(
        {
            "1-10": 10,
            "11-50": 20,
            "51-250": 30,
            "250+": 40,
        }
    )
    data_type_points: Mapping[str, int] = MappingProxyType(
        {
            "health": 30,
            "financial": 25,
            "behavioral": 15,
            "basic": 10,
        }
    )
    policy_points: Mapping[str, int] = MappingProxyType(
        {
            "no": 30,
            "outdated": 20,
        }
    )

    default_industry_points = 20
    default_employee_points = 15
    default_data_type_points = 0
    default_policy_points = 0

    max_score = 100
    max_recommendations = 5
    baseline_fine = 50000
    fine_rounding = 1000

    def calculate_risk_score(self, audit_data: Mapping[str, Any]) -> int:
        score = self._lookup(self.industry_points, audit_data.get("industry"), self.default_industry_points)
        score += self._lookup(self.employee_points, audit_data.get("employees"), self.default_employee_points)

        data_types = audit_data.get("dataTypes")
        if isinstance(data_types, (list, tuple)):
            for data_type in data_types:
                score += self._lookup(self.data_type_points, data_type, self.default_data_type_points)

        score += self._lookup(self.policy_points, audit_data.get("hasPolicy"), self.default_policy_points)
        return min(score, self.max_score)

    @staticmethod
    def risk_level(score: int) -> str:
        if score < 30:
            return "LOW"
        if score < 60:
            return "MEDIUM"
        return "HIGH"

    def generate_recommendations(self, audit_data: Mapping[str, Any]) -> List[Recommendation]:
        has_policy = audit_data.get("hasPolicy")
        recommendations: List[Recommendation] = []

        if has_policy == "no":
            recommendations.append(
                Recommendation(
                    title="Create a privacy policy",
                    description="Having no privacy policy is a basic breach of the GDPR.",
                    priority="CRITICAL",
                    time="2-3 days",
                )
            )

        if has_policy == "outdated":
            recommendations.append(
                Recommendation(
                    title="Update the privacy policy",
                    description="An outdated policy can lead to fines.",
                    priority="HIGH",
                    time="1-2 days",
                )
            )

        recommendations.append(
            Recommendation(
                title="Create a register of processing activities",
                description="A mandatory document for companies that process personal data.",
                priority="HIGH",
                time="3-5 days",
            )
        )

        if len(recommendations) > self.max_recommendations:
            del recommendations[self.max_recommendations:]
        return recommendations

    def estimate_fine(self, score: int) -> int:
        # half-up, not banker's rounding: score 5 -> 3000
        thousands = (self.baseline_fine * score / 100) / self.fine_rounding
        return int(math.floor(thousands + 0.5)) * self.fine_rounding

    def assess(self, audit_data: Mapping[str, Any]) -> AuditResult:
        score = self.calculate_risk_score(audit_data)
        return AuditResult(
            riskScore=score,
            riskLevel=self.risk_level(score),
            recommendations=self.generate_recommendations(audit_data),
            potentialFines=self.estimate_fine(score),
        )

    @staticmethod
    def _lookup(table: Mapping[str, int], key: Any, default: int) -> int:
        if not isinstance(key, str):
            return default
        return table.get(key, default)
