#!/usr/bin/env python3
"""
Match Ranking - Score a set of candidates and order the results.

Ordering is fully deterministic: score (desc), then opportunity recency
(newer first, undated last), then opportunity id. Duplicate snapshots of the
same opportunity collapse to the best-ranked one.

Post-ranking ResultPolicy can be applied to filter and truncate results.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Tuple
import logging

from talent_match.config_loader import MatchingConfig, ResultPolicy
from talent_match.models import Opportunity, Talent, coerce

from talent_match.scorer.models import Match
from talent_match.scorer.service import MatchScorer

logger = logging.getLogger(__name__)


def _recency_key(opportunity: Opportunity) -> Tuple[int, float]:
    """Sort key placing newer opportunities first and undated ones last."""
    stamp: Optional[datetime] = opportunity.recency
    if stamp is None:
        return (1, 0.0)
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=timezone.utc)
    return (0, -stamp.timestamp())


def _apply_result_policy(
    results: List[Match],
    policy: Optional[ResultPolicy]
) -> List[Match]:
    """Apply ResultPolicy to filter and truncate results.

    Args:
        results: List of matches (already sorted)
        policy: ResultPolicy to apply, or None for no filtering

    Returns:
        Filtered and truncated results
    """
    if policy is None:
        return results

    filtered = results

    if policy.min_score > 0:
        filtered = [m for m in filtered if m.score >= policy.min_score]

    if policy.top_k is not None:
        filtered = filtered[:policy.top_k]

    return filtered


def _dedupe(matches: Iterable[Match], key_index: int) -> List[Match]:
    seen = set()
    unique = []
    for match in matches:
        key = match.key[key_index]
        if key in seen:
            logger.warning("Dropping duplicate match for %s", key)
            continue
        seen.add(key)
        unique.append(match)
    return unique


class MatchRanker:
    """
    Applies MatchScorer across candidate sets. Has no side effects;
    persisting the returned matches is the caller's job.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[MatchScorer] = None
    ):
        self.config = config or MatchingConfig()
        self.scorer = scorer or MatchScorer(self.config)

    def rank(
        self,
        talent: Any,
        opportunities: Iterable[Any],
        result_policy: Optional[ResultPolicy] = None
    ) -> List[Match]:
        """Rank opportunities for one talent.

        Args:
            talent: Talent or raw talent record
            opportunities: Opportunities or raw records; non-active ones are skipped
            result_policy: Optional policy for post-ranking filtering/truncation

        Returns:
            Matches sorted by score, recency, then opportunity id
        """
        talent = coerce(Talent, talent)
        candidates = [coerce(Opportunity, o) for o in opportunities]
        active = [o for o in candidates if o.is_active]

        scored: List[Tuple[Match, Opportunity]] = [
            (self.scorer.score(talent, opp), opp) for opp in active
        ]
        scored.sort(key=lambda pair: (-pair[0].score, _recency_key(pair[1]), pair[1].id))

        ranked = _dedupe((m for m, _ in scored), key_index=1)

        if result_policy:
            ranked = _apply_result_policy(ranked, result_policy)

        logger.info(
            "Ranked %d/%d active opportunities for talent %s (returning %d)",
            len(active), len(candidates), talent.id, len(ranked)
        )
        return ranked

    def rank_talents(
        self,
        opportunity: Any,
        talents: Iterable[Any],
        result_policy: Optional[ResultPolicy] = None
    ) -> List[Match]:
        """Rank talents for one opportunity (the employer-side view).

        Returns an empty list when the opportunity is not active.
        """
        opportunity = coerce(Opportunity, opportunity)
        if not opportunity.is_active:
            logger.info("Opportunity %s is %s; no talents ranked", opportunity.id, opportunity.status.value)
            return []

        matches = [self.scorer.score(coerce(Talent, t), opportunity) for t in talents]
        matches.sort(key=lambda m: (-m.score, m.talent_id))
        ranked = _dedupe(matches, key_index=0)

        if result_policy:
            ranked = _apply_result_policy(ranked, result_policy)

        logger.info("Ranked %d talents for opportunity %s", len(ranked), opportunity.id)
        return ranked

