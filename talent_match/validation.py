#!/usr/bin/env python3
"""
Structural validation for engine inputs.

Only impossible shapes are rejected here. Missing optional data is not an
error; the scorer and recommender degrade it to neutral defaults.
"""

from typing import Optional

from talent_match.exceptions import InvalidInputError
from talent_match.models import AssessmentDimension, CompensationRange, Opportunity, Talent


def validate_compensation_range(comp: Optional[CompensationRange], owner: str) -> None:
    """Reject negative bounds and inverted ranges. A missing bound is allowed."""
    if comp is None:
        return
    for bound in (comp.min, comp.max):
        if bound is not None and bound < 0:
            raise InvalidInputError(f"{owner}: compensation bounds must be non-negative ({comp.min}, {comp.max})")
    if comp.is_bounded and comp.min > comp.max:
        raise InvalidInputError(f"{owner}: compensation min {comp.min} exceeds max {comp.max}")


def validate_talent(talent: Talent, assessment_scale_max: float) -> None:
    owner = f"Talent {talent.id}"
    if talent.years_in_luxury is not None and talent.years_in_luxury < 0:
        raise InvalidInputError(f"{owner}: years_in_luxury cannot be negative ({talent.years_in_luxury})")

    validate_compensation_range(talent.expected_compensation, owner)

    summary = talent.assessment_summary
    if summary is not None:
        for dimension in AssessmentDimension:
            value = summary.score_for(dimension)
            if value is not None and not (0.0 <= value <= assessment_scale_max):
                raise InvalidInputError(
                    f"{owner}: {dimension.value}={value} outside [0, {assessment_scale_max}]"
                )


def validate_opportunity(opportunity: Opportunity) -> None:
    owner = f"Opportunity {opportunity.id}"
    if opportunity.required_experience_years < 0:
        raise InvalidInputError(
            f"{owner}: required_experience_years cannot be negative ({opportunity.required_experience_years})"
        )
    validate_compensation_range(opportunity.compensation_range, owner)
