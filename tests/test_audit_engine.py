import itertools

import pytest

from rodo_audit.services.audit_engine import AuditEngine

INDUSTRIES = ["healthcare", "finance", "ecommerce", "marketing", "education", "it", "other"]
EMPLOYEES = ["1-10", "11-50", "51-250", "250+"]


@pytest.fixture
def engine():
    return AuditEngine()


def test_score_is_industry_plus_employees_with_current_policy(engine):
    for industry, employees in itertools.product(INDUSTRIES, EMPLOYEES):
        score = engine.calculate_risk_score(
            {"industry": industry, "employees": employees, "dataTypes": [], "hasPolicy": "yes"}
        )
        expected = engine.industry_points[industry] + engine.employee_points[employees]
        assert score == min(expected, 100)


def test_unknown_or_missing_industry_counts_twenty(engine):
    base = {"employees": "1-10", "hasPolicy": "yes"}
    assert engine.calculate_risk_score({**base, "industry": "bogus"}) == 30
    assert engine.calculate_risk_score({**base, "industry": "other"}) == 30
    assert engine.calculate_risk_score(base) == 30


def test_unknown_employee_range_counts_fifteen(engine):
    assert engine.calculate_risk_score({"industry": "it", "employees": "1000+"}) == 30
    assert engine.calculate_risk_score({"industry": "it"}) == 30


def test_data_types_are_summed_with_duplicates_and_unknowns_ignored(engine):
    audit = {"industry": "it", "employees": "1-10", "dataTypes": ["basic", "basic", "genetic", "behavioral"]}
    assert engine.calculate_risk_score(audit) == 15 + 10 + 10 + 10 + 15


@pytest.mark.parametrize("data_types", [None, "health", {"health": True}, 42])
def test_non_sequence_data_types_contribute_nothing(engine, data_types):
    audit = {"industry": "it", "employees": "1-10", "dataTypes": data_types}
    assert engine.calculate_risk_score(audit) == 25


def test_score_grows_with_recognized_data_types(engine):
    previous = 0
    data_types = []
    for data_type in ["basic", "behavioral", "financial", "health", "basic"]:
        data_types.append(data_type)
        score = engine.calculate_risk_score({"industry": "it", "employees": "1-10", "dataTypes": list(data_types)})
        assert score >= previous
        previous = score


@pytest.mark.parametrize("has_policy, points", [("no", 30), ("outdated", 20), ("yes", 0), (None, 0), ("NO", 0)])
def test_policy_status_points(engine, has_policy, points):
    audit = {"industry": "it", "employees": "1-10", "hasPolicy": has_policy}
    assert engine.calculate_risk_score(audit) == 25 + points


def test_score_is_clamped_between_zero_and_hundred(engine):
    audit = {
        "industry": "healthcare",
        "employees": "250+",
        "dataTypes": ["health"] * 10,
        "hasPolicy": "no",
    }
    assert engine.calculate_risk_score(audit) == 100
    for industry, employees in itertools.product(INDUSTRIES + ["bogus", None], EMPLOYEES + ["?", None]):
        score = engine.calculate_risk_score({"industry": industry, "employees": employees, "hasPolicy": "outdated"})
        assert 0 <= score <= 100


@pytest.mark.parametrize("score, level", [(0, "LOW"), (29, "LOW"), (30, "MEDIUM"), (59, "MEDIUM"), (60, "HIGH"), (100, "HIGH")])
def test_risk_level_boundaries(engine, score, level):
    assert engine.risk_level(score) == level


def test_recommendations_for_missing_policy(engine):
    recommendations = engine.generate_recommendations({"hasPolicy": "no"})
    assert [r.priority for r in recommendations] == ["CRITICAL", "HIGH"]
    assert recommendations[0].title == "Create a privacy policy"
    assert recommendations[-1].title == "Create a register of processing activities"


def test_recommendations_for_outdated_policy(engine):
    recommendations = engine.generate_recommendations({"hasPolicy": "outdated"})
    assert [r.title for r in recommendations] == [
        "Update the privacy policy",
        "Create a register of processing activities",
    ]
    assert recommendations[0].time == "1-2 days"


@pytest.mark.parametrize("has_policy", ["yes", None, "maybe"])
def test_register_is_always_recommended(engine, has_policy):
    recommendations = engine.generate_recommendations({"hasPolicy": has_policy})
    assert len(recommendations) == 1
    assert recommendations[0].priority == "HIGH"
    assert recommendations[0].time == "3-5 days"


def test_recommendations_are_capped(engine, monkeypatch):
    monkeypatch.setattr(AuditEngine, "max_recommendations", 1)
    recommendations = engine.generate_recommendations({"hasPolicy": "no"})
    assert len(recommendations) == 1
    assert recommendations[0].priority == "CRITICAL"


@pytest.mark.parametrize("score, fine", [(0, 0), (1, 1000), (5, 3000), (50, 25000), (59, 30000), (100, 50000)])
def test_estimate_fine(engine, score, fine):
    assert engine.estimate_fine(score) == fine


def test_assess_end_to_end(engine):
    result = engine.assess(
        {
            "industry": "healthcare",
            "employees": "250+",
            "dataTypes": ["health", "financial"],
            "hasPolicy": "no",
        }
    )
    assert result.riskScore == 100
    assert result.riskLevel == "HIGH"
    assert result.potentialFines == 50000
    assert [r.priority for r in result.recommendations] == ["CRITICAL", "HIGH"]


def test_lookup_tables_are_read_only(engine):
    with pytest.raises(TypeError):
        engine.industry_points["healthcare"] = 0
