#!/usr/bin/env python3
"""
Builders for engine test inputs.

Each builder returns a fully valid model; keyword overrides replace fields.
Raw-record variants mirror what storage hands the engine.
"""
from datetime import datetime, timezone

from talent_match.models import (
    AssessmentSummary, CompensationRange, LearningModule, Location,
    Opportunity, Talent, TalentLearningProgress
)


COMPLETED_AT = datetime(2026, 9, 1, 12, 0, tzinfo=timezone.utc)


def make_assessment(**overrides) -> AssessmentSummary:
    data = dict(
        service_excellence=4.0,
        clienteling=4.0,
        operations=4.0,
        leadership_signals=4.0,
        completed_at=COMPLETED_AT,
    )
    data.update(overrides)
    return AssessmentSummary(**data)


def make_talent(**overrides) -> Talent:
    data = dict(
        id="talent-1",
        first_name="Camille",
        last_name="Durand",
        current_role_level="L3",
        current_store_tier="T2",
        current_location=Location(city="Paris", region="EMEA"),
        divisions={"leather_goods"},
        years_in_luxury=6,
        mobility="regional",
        timeline="active",
        target_role_levels={"L4"},
        target_locations=(),
        expected_compensation=CompensationRange(min=50000, max=60000, currency="EUR"),
        assessment_summary=make_assessment(),
    )
    data.update(overrides)
    return Talent(**data)


def make_opportunity(**overrides) -> Opportunity:
    data = dict(
        id="opp-1",
        title="Department Manager, Leather Goods",
        required_role_level="L4",
        store_tier="T2",
        division="leather_goods",
        required_experience_years=5,
        location=Location(city="Paris", region="EMEA"),
        compensation_range=CompensationRange(min=55000, max=65000, currency="EUR"),
        status="active",
        published_at=datetime(2026, 9, 15, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return Opportunity(**data)


def make_module(**overrides) -> LearningModule:
    data = dict(
        id="mod-1",
        title="Module",
        category="leadership",
        difficulty="intermediate",
        duration_minutes=30,
        content_type="video",
    )
    data.update(overrides)
    return LearningModule(**data)


def make_progress(module_id: str, status: str = "completed", talent_id: str = "talent-1", **overrides) -> TalentLearningProgress:
    data = dict(
        talent_id=talent_id,
        module_id=module_id,
        status=status,
        progress_pct=100 if status == "completed" else 0,
    )
    data.update(overrides)
    return TalentLearningProgress(**data)


RAW_TALENT_RECORD = {
    "id": "talent-raw",
    "firstName": "Aiko",
    "currentRoleLevel": "L2",
    "currentStoreTier": "T3",
    "currentLocation": {"city": "Tokyo", "region": "APAC"},
    "divisionsExpertise": ["watches", "high_jewelry"],
    "yearsInLuxury": "3.5",
    "mobility": "international",
    "timeline": "passive",
    "targetRoleLevels": ["L3"],
    "targetLocations": ["Singapore"],
    "expectedCompensation": {"minBase": 40000, "maxBase": 48000, "currency": "sgd"},
    "assessmentSummary": None,
    "profileCompletionPct": 80,
}
