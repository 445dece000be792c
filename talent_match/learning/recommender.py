#!/usr/bin/env python3
"""
Learning Recommender - Rank learning modules by assessment gaps.

Algorithm:
1. gap per dimension = max(0, threshold - score); unassessed dimensions have no gap
2. drop modules the talent has completed
3. candidates = modules training a dimension with a gap
4. order by gap (desc), distance from the difficulty the talent's role
   implies (asc), modules aimed at the talent's level first, duration (asc),
   module id
5. reason names the module's dimension
6. no gaps (or nothing left to train them) -> shortest not-started modules

Requires a completed assessment; without one the result is empty so the
caller can render an encouraging empty state.

Progress records are read-only input and are never created or changed here.
"""

from typing import Any, Dict, Iterable, List, Optional
import logging

from talent_match.config_loader import LearningConfig
from talent_match.models import (
    AssessmentDimension, AssessmentSummary, Difficulty, LearningModule,
    ProgressStatus, Talent, TalentLearningProgress, coerce
)

from talent_match.learning.catalog import ModuleCatalog
from talent_match.learning.models import DimensionGap, Recommendation

logger = logging.getLogger(__name__)


def calculate_gaps(summary: AssessmentSummary, threshold: float) -> List[DimensionGap]:
    """Dimensions scoring below threshold, largest gap first.

    Ties keep AssessmentDimension order.
    """
    gaps = []
    for dimension in AssessmentDimension:
        score = summary.score_for(dimension)
        if score is None:
            continue
        gap = max(0.0, threshold - score)
        if gap > 0:
            gaps.append(DimensionGap(dimension=dimension, score=score, gap=gap))
    gaps.sort(key=lambda g: -g.gap)
    return gaps


def _progress_by_module(talent_id: str, progress: Iterable[Any]) -> Dict[str, ProgressStatus]:
    statuses: Dict[str, ProgressStatus] = {}
    for record in progress:
        record = coerce(TalentLearningProgress, record)
        if record.talent_id != talent_id:
            continue
        statuses[record.module_id] = record.status
    return statuses


class LearningRecommender:
    """
    Produces ranked, reasoned module recommendations for one talent.
    """

    def __init__(self, config: Optional[LearningConfig] = None):
        self.config = config or LearningConfig()

    def implied_difficulty(self, talent: Talent) -> Difficulty:
        """Difficulty matching the talent's current role level."""
        level = talent.current_role_level
        implied = self.config.role_level_difficulty.get(level) if level else None
        return implied or self.config.default_difficulty

    def recommend(
        self,
        talent: Any,
        progress: Iterable[Any],
        catalog: Any,
        limit: Optional[int] = None
    ) -> List[Recommendation]:
        """Recommend modules for a talent.

        Args:
            talent: Talent or raw talent record
            progress: TalentLearningProgress records (other talents' records are ignored)
            catalog: ModuleCatalog or iterable of modules / module records
            limit: Maximum recommendations; defaults to config.max_recommendations

        Returns:
            Recommendations ranked from 1; empty without a completed assessment
        """
        talent = coerce(Talent, talent)
        if not isinstance(catalog, ModuleCatalog):
            catalog = ModuleCatalog(catalog)
        limit = self.config.max_recommendations if limit is None else limit

        summary = talent.assessment_summary
        if summary is None or not summary.is_completed:
            logger.debug("Talent %s has no completed assessment; no recommendations", talent.id)
            return []

        statuses = _progress_by_module(talent.id, progress)
        gaps = calculate_gaps(summary, self.config.gap_threshold)

        recommendations = self._recommend_for_gaps(talent, gaps, statuses, catalog, limit)
        if not recommendations:
            recommendations = self._recommend_fallback(statuses, catalog, limit)

        logger.info(
            "Talent %s: %d gap(s), %d recommendation(s)",
            talent.id, len(gaps), len(recommendations)
        )
        return recommendations

    def _recommend_for_gaps(
        self,
        talent: Talent,
        gaps: List[DimensionGap],
        statuses: Dict[str, ProgressStatus],
        catalog: ModuleCatalog,
        limit: int
    ) -> List[Recommendation]:
        if not gaps:
            return []

        gap_by_dimension = {g.dimension: g.gap for g in gaps}
        target = self.implied_difficulty(talent)

        candidates: List[LearningModule] = [
            m for m in catalog
            if statuses.get(m.id) != ProgressStatus.COMPLETED
            and m.dimension in gap_by_dimension
        ]
        candidates.sort(key=lambda m: (
            -gap_by_dimension[m.dimension],
            abs(m.difficulty.ordinal - target.ordinal),
            not m.targets_level(talent.current_role_level),
            m.duration_minutes,
            m.id,
        ))

        return [
            Recommendation(
                module_id=m.id,
                reason=self.config.gap_reason_template.format(dimension=m.dimension.label),
                rank=i,
                dimension=m.dimension,
                gap=gap_by_dimension[m.dimension],
            )
            for i, m in enumerate(candidates[:limit], start=1)
        ]

    def _recommend_fallback(
        self,
        statuses: Dict[str, ProgressStatus],
        catalog: ModuleCatalog,
        limit: int
    ) -> List[Recommendation]:
        not_started = [
            m for m in catalog
            if statuses.get(m.id, ProgressStatus.NOT_STARTED) == ProgressStatus.NOT_STARTED
        ]
        not_started.sort(key=lambda m: (m.duration_minutes, m.id))

        return [
            Recommendation(module_id=m.id, reason=self.config.fallback_reason, rank=i)
            for i, m in enumerate(not_started[:limit], start=1)
        ]
