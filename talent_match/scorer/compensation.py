#!/usr/bin/env python3
"""
Compensation Alignment - Tag a talent's expectation against a budgeted range.

The range is widened on both sides by a tolerance (a fraction of its width)
and the midpoint of the talent's expectation is placed against that band.
Only the tag is exposed so neither side's figures leak to the other.
No currency conversion is performed; mismatched currencies are `unknown`.
"""

from typing import Optional
import logging

from talent_match.config_loader import CompensationConfig
from talent_match.models import AlignmentKind, CompensationRange
from talent_match.validation import validate_compensation_range

logger = logging.getLogger(__name__)


class CompensationAligner:
    """Classifies expected compensation against an opportunity's range."""

    def __init__(self, config: Optional[CompensationConfig] = None):
        self.config = config or CompensationConfig()

    def align(
        self,
        expected: Optional[CompensationRange],
        budget: Optional[CompensationRange]
    ) -> AlignmentKind:
        """A side that is absent or missing a bound yields `unknown`.

        Args:
            expected: Talent's expected compensation, if shared
            budget: Opportunity's budgeted range, if published

        Returns:
            AlignmentKind tag

        Raises:
            InvalidInputError: if either range is inverted or negative
        """
        validate_compensation_range(expected, "Expected compensation")
        validate_compensation_range(budget, "Compensation range")

        if expected is None or budget is None:
            return AlignmentKind.UNKNOWN
        if not expected.is_bounded or not budget.is_bounded:
            logger.debug("Compensation range missing a bound; alignment unknown")
            return AlignmentKind.UNKNOWN

        if expected.currency != budget.currency:
            logger.debug(
                "Currency mismatch (%s vs %s); alignment unknown",
                expected.currency, budget.currency
            )
            return AlignmentKind.UNKNOWN

        tolerance = self.config.tolerance_fraction * budget.width
        lower = budget.min - tolerance
        upper = budget.max + tolerance
        midpoint = expected.midpoint

        if midpoint > upper:
            return AlignmentKind.ABOVE_RANGE
        if midpoint < lower:
            return AlignmentKind.BELOW_RANGE
        return AlignmentKind.WITHIN_RANGE
