#!/usr/bin/env python3
"""
Match Dimensions - One sub-score in [0, 1] per matching dimension.

Dimensions (key: rule):
- role_level_fit: target/current level hit, else decays per ordinal step
- store_tier_fit: exact tier, else decays per tier step
- division_overlap: Jaccard similarity of division sets
- experience_fit: linear ramp up to the required years
- location_fit: city, then region, then mobility
- timeline_fit: how actively the talent is looking
- assessment_fit: mean assessment score normalized to the 0-5 scale

Each function is pure. Data the talent has not supplied yields
config.neutral_score instead of zero so incomplete profiles are not
ranked below profiles that simply score low.
"""

from typing import Callable, Dict, Iterable, Optional

from talent_match.config_loader import ScorerConfig
from talent_match.models import Mobility, Opportunity, Talent

ROLE_LEVEL_FIT = "role_level_fit"
STORE_TIER_FIT = "store_tier_fit"
DIVISION_OVERLAP = "division_overlap"
EXPERIENCE_FIT = "experience_fit"
LOCATION_FIT = "location_fit"
TIMELINE_FIT = "timeline_fit"
ASSESSMENT_FIT = "assessment_fit"

# Fixed order; the weighted sum is accumulated in this order.
DIMENSIONS = (
    ROLE_LEVEL_FIT,
    STORE_TIER_FIT,
    DIVISION_OVERLAP,
    EXPERIENCE_FIT,
    LOCATION_FIT,
    TIMELINE_FIT,
    ASSESSMENT_FIT,
)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _decay(distance: int, step: float) -> float:
    return _clamp01(1.0 - step * distance)


def _norm(text: Optional[str]) -> str:
    return (text or "").strip().casefold()


def score_role_level_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    required = opportunity.required_role_level
    if required in talent.target_role_levels or required == talent.current_role_level:
        return 1.0

    known_levels = set(talent.target_role_levels)
    if talent.current_role_level is not None:
        known_levels.add(talent.current_role_level)
    if not known_levels:
        return config.neutral_score

    distance = min(abs(required.ordinal - level.ordinal) for level in known_levels)
    return _decay(distance, config.role_level_step)


def score_store_tier_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    if talent.current_store_tier is None or opportunity.store_tier is None:
        return config.neutral_score
    distance = abs(talent.current_store_tier.ordinal - opportunity.store_tier.ordinal)
    return _decay(distance, config.store_tier_step)


def score_division_overlap(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    if opportunity.division is None:
        return 1.0
    if not talent.divisions:
        return config.neutral_score

    required = {opportunity.division}
    intersection = talent.divisions & required
    union = talent.divisions | required
    return len(intersection) / len(union)


def score_experience_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    years = talent.years_in_luxury
    if years is None:
        return config.neutral_score

    required = opportunity.required_experience_years
    if required <= 0 or years >= required:
        return 1.0
    return _clamp01(years / required)


def _matches_any(value: str, candidates: Iterable[str]) -> bool:
    return bool(value) and any(value == c for c in candidates)


def score_location_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    if opportunity.location is None:
        return config.neutral_score

    opp_city = _norm(opportunity.location.city)
    opp_region = _norm(opportunity.location.region)
    targets = [_norm(t) for t in talent.target_locations]

    current = talent.current_location
    current_city = _norm(current.city) if current else ""
    current_region = _norm(current.region) if current else ""

    scores = config.location
    if _matches_any(opp_city, [current_city] + targets):
        return scores.same_city
    if _matches_any(opp_region, [current_region] + targets):
        return scores.same_region

    if talent.mobility == Mobility.RELOCATE:
        return scores.relocate
    if talent.mobility == Mobility.REGIONAL:
        return scores.regional
    return scores.local


def score_timeline_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    return float(getattr(config.timeline, talent.timeline.value))


def score_assessment_fit(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> float:
    # Opportunities carry no per-dimension requirements, so this is the
    # talent's overall level rather than a fit against the role.
    summary = talent.assessment_summary
    if summary is None:
        return config.neutral_score

    scores = summary.present_scores()
    if not scores:
        return config.neutral_score

    normalized = [s / config.assessment_scale_max for s in scores]
    return _clamp01(sum(normalized) / len(normalized))


DIMENSION_SCORERS: Dict[str, Callable[[Talent, Opportunity, ScorerConfig], float]] = {
    ROLE_LEVEL_FIT: score_role_level_fit,
    STORE_TIER_FIT: score_store_tier_fit,
    DIVISION_OVERLAP: score_division_overlap,
    EXPERIENCE_FIT: score_experience_fit,
    LOCATION_FIT: score_location_fit,
    TIMELINE_FIT: score_timeline_fit,
    ASSESSMENT_FIT: score_assessment_fit,
}


def calculate_breakdown(talent: Talent, opportunity: Opportunity, config: ScorerConfig) -> Dict[str, float]:
    """Score every dimension. Keys follow DIMENSIONS order."""
    return {
        name: _clamp01(float(DIMENSION_SCORERS[name](talent, opportunity, config)))
        for name in DIMENSIONS
    }
