#!/usr/bin/env python3
"""
Learning Models - Data structures for recommendation results.
"""

from dataclasses import dataclass
from typing import Optional

from talent_match.models import AssessmentDimension


@dataclass(frozen=True)
class DimensionGap:
    """Shortfall of one assessment dimension below the recommendation threshold."""
    dimension: AssessmentDimension
    score: float
    gap: float


@dataclass(frozen=True)
class Recommendation:
    """One recommended module, ranked from 1."""
    module_id: str
    reason: str
    rank: int
    dimension: Optional[AssessmentDimension] = None
    gap: float = 0.0
