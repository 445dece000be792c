#!/usr/bin/env python3
"""
Scoring Service - Score one talent against one opportunity.

Combines the seven dimension sub-scores (see dimensions.py) with the
configured weights into a 0-100 integer, and tags compensation alignment.

Pure: no clock, no I/O, no shared state. The same inputs and config always
produce the same Match.
"""

from datetime import datetime
from typing import Any, Dict, Optional
import logging
import math

from talent_match.config_loader import MatchingConfig
from talent_match.models import Opportunity, Talent, coerce
from talent_match.validation import validate_opportunity, validate_talent

from talent_match.scorer.compensation import CompensationAligner
from talent_match.scorer.dimensions import DIMENSIONS, calculate_breakdown
from talent_match.scorer.models import Match

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def combine_breakdown(breakdown: Dict[str, float], weights: Dict[str, float]) -> int:
    """Weighted sum of the breakdown, scaled to 0-100 and rounded.

    Accumulated with math.fsum in DIMENSIONS order so the result does not
    depend on dict ordering or float accumulation order.
    """
    total = math.fsum(breakdown[name] * weights[name] for name in DIMENSIONS)
    return max(0, min(100, _round_half_up(100.0 * total)))


class MatchScorer:
    """
    Service for scoring (talent, opportunity) pairs.

    Raises InvalidInputError only for structurally impossible input;
    incomplete talent data degrades to neutral sub-scores.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        self.aligner = CompensationAligner(self.config.compensation)

    def score(
        self,
        talent: Any,
        opportunity: Any,
        computed_at: Optional[datetime] = None
    ) -> Match:
        """Score a single pair.

        Args:
            talent: Talent or raw talent record
            opportunity: Opportunity or raw opportunity record
            computed_at: Optional stamp carried on the Match; never read from the clock

        Returns:
            Match with integer score and per-dimension breakdown
        """
        talent = coerce(Talent, talent)
        opportunity = coerce(Opportunity, opportunity)
        validate_talent(talent, self.config.scorer.assessment_scale_max)
        validate_opportunity(opportunity)

        scorer_config = self.config.scorer
        breakdown = calculate_breakdown(talent, opportunity, scorer_config)
        score = combine_breakdown(breakdown, scorer_config.weights.model_dump())

        alignment = self.aligner.align(talent.expected_compensation, opportunity.compensation_range)

        logger.debug(
            "Talent %s / opportunity %s: score=%d, comp=%s, breakdown=%s",
            talent.id, opportunity.id, score, alignment.value,
            {k: round(v, 3) for k, v in breakdown.items()}
        )

        return Match(
            talent_id=talent.id,
            opportunity_id=opportunity.id,
            score=score,
            breakdown=breakdown,
            compensation_alignment=alignment,
            engine_version=scorer_config.engine_version,
            computed_at=computed_at,
        )

    def meets_threshold(self, score: int) -> bool:
        """Whether a score is high enough to be worth persisting."""
        return score >= self.config.minimum_match_score
