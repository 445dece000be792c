#!/usr/bin/env python3
"""
Engine Facade - In-process entry points for callers (HTTP handlers, jobs).

Callers fetch records, call in, and persist what comes back. Every function
accepts typed models or raw records and is a pure function of its arguments.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from talent_match.config_loader import AppConfig, ResultPolicy
from talent_match.models import AlignmentKind, CompensationRange, coerce

from talent_match.learning import LearningRecommender, Recommendation
from talent_match.scorer import CompensationAligner, Match, MatchRanker, MatchScorer


def _config(config: Optional[AppConfig]) -> AppConfig:
    return config or AppConfig()


def score_match(
    talent: Any,
    opportunity: Any,
    config: Optional[AppConfig] = None,
    computed_at: Optional[datetime] = None
) -> Match:
    """Score one talent against one opportunity."""
    return MatchScorer(_config(config).matching).score(talent, opportunity, computed_at=computed_at)


def rank_matches(
    talent: Any,
    opportunities: Iterable[Any],
    config: Optional[AppConfig] = None,
    policy: Optional[ResultPolicy] = None
) -> List[Match]:
    """Score and order active opportunities for one talent."""
    return MatchRanker(_config(config).matching).rank(talent, opportunities, result_policy=policy)


def rank_talents(
    opportunity: Any,
    talents: Iterable[Any],
    config: Optional[AppConfig] = None,
    policy: Optional[ResultPolicy] = None
) -> List[Match]:
    """Score and order talents for one active opportunity."""
    return MatchRanker(_config(config).matching).rank_talents(opportunity, talents, result_policy=policy)


def align_compensation(
    expected: Optional[Any],
    budget: Optional[Any],
    config: Optional[AppConfig] = None
) -> AlignmentKind:
    """Tag a compensation expectation against a budgeted range."""
    expected = coerce(CompensationRange, expected) if expected is not None else None
    budget = coerce(CompensationRange, budget) if budget is not None else None
    return CompensationAligner(_config(config).matching.compensation).align(expected, budget)


def recommend_modules(
    talent: Any,
    progress: Iterable[Any],
    modules: Iterable[Any],
    config: Optional[AppConfig] = None
) -> List[Recommendation]:
    """Recommend learning modules from assessment gaps."""
    return LearningRecommender(_config(config).learning).recommend(talent, progress, modules)
