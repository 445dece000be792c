"""Talent Match - matching and learning recommendation engine for luxury-retail talent."""
from talent_match.exceptions import EngineException, InvalidInputError, ConfigurationError
from talent_match.models import (
    Talent, Opportunity, LearningModule, TalentLearningProgress,
    CompensationRange, AssessmentSummary, Location, AlignmentKind
)
from talent_match.scorer import Match, MatchScorer, MatchRanker, CompensationAligner
from talent_match.learning import ModuleCatalog, LearningRecommender, Recommendation
from talent_match.engine import (
    score_match, rank_matches, rank_talents, align_compensation, recommend_modules
)

__all__ = [
    'score_match', 'rank_matches', 'rank_talents', 'align_compensation', 'recommend_modules',
    'MatchScorer', 'MatchRanker', 'CompensationAligner', 'LearningRecommender', 'ModuleCatalog',
    'Talent', 'Opportunity', 'LearningModule', 'TalentLearningProgress',
    'CompensationRange', 'AssessmentSummary', 'Location', 'AlignmentKind',
    'Match', 'Recommendation',
    'EngineException', 'InvalidInputError', 'ConfigurationError',
]
