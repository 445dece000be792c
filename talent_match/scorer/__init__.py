#!/usr/bin/env python3
"""
Scoring Module - Rule-based talent/opportunity matching.

Public API:
- MatchScorer: Scores one (talent, opportunity) pair
- MatchRanker: Scores and orders a candidate set
- CompensationAligner: Tags compensation expectations against a range
- Match: Dataclass for scored match results

Split into focused, single-responsibility modules:

- models.py: Data structures (Match)
- dimensions.py: The seven dimension sub-scores
- compensation.py: Compensation alignment tagging
- service.py: MatchScorer (weighted combination)
- ranking.py: MatchRanker (filtering, ordering, deduplication, ResultPolicy)
"""

from talent_match.scorer.compensation import CompensationAligner
from talent_match.scorer.models import Match
from talent_match.scorer.ranking import MatchRanker
from talent_match.scorer.service import MatchScorer

__all__ = ['MatchScorer', 'MatchRanker', 'CompensationAligner', 'Match']
