"""Learning Module - Catalog and gap-driven module recommendations."""
from talent_match.learning.catalog import ModuleCatalog, group_modules_by_category, format_category
from talent_match.learning.models import DimensionGap, Recommendation
from talent_match.learning.recommender import LearningRecommender, calculate_gaps

__all__ = [
    'ModuleCatalog', 'LearningRecommender', 'Recommendation', 'DimensionGap',
    'calculate_gaps', 'group_modules_by_category', 'format_category'
]
