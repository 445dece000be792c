import yaml
import os
from typing import Dict, Optional
from pydantic import BaseModel, Field, ValidationError, model_validator

from talent_match.exceptions import ConfigurationError
from talent_match.models import Difficulty, RoleLevel

WEIGHT_SUM_TOLERANCE = 1e-9


class DimensionWeights(BaseModel):
    """Weights for each dimension in the match score. Must sum to 1.0."""
    role_level_fit: float = 0.20
    store_tier_fit: float = 0.15
    division_overlap: float = 0.15
    experience_fit: float = 0.15
    location_fit: float = 0.10
    timeline_fit: float = 0.10
    assessment_fit: float = 0.15

    @model_validator(mode='after')
    def _check_sum(self) -> 'DimensionWeights':
        values = self.model_dump()
        negative = [k for k, v in values.items() if v < 0]
        if negative:
            raise ValueError(f"Dimension weights must be non-negative: {negative}")
        total = sum(values.values())
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Dimension weights must sum to 1.0 (got {total:.6f})")
        return self


class LocationScores(BaseModel):
    """Location fit by proximity, then by mobility when regions differ."""
    same_city: float = 1.0
    same_region: float = 0.6
    relocate: float = 0.3
    regional: float = 0.1
    local: float = 0.0


class TimelineScores(BaseModel):
    active: float = 1.0
    passive: float = 0.6
    not_looking: float = 0.1


class ScorerConfig(BaseModel):
    """
    Configuration for the MatchScorer.

    Every constant the scoring formula uses lives here so it can be tuned
    and unit-tested independently of the algorithm.
    """
    weights: DimensionWeights = Field(default_factory=DimensionWeights)

    # Decay per ordinal step away from the required level / tier
    role_level_step: float = 0.25
    store_tier_step: float = 0.40

    location: LocationScores = Field(default_factory=LocationScores)
    timeline: TimelineScores = Field(default_factory=TimelineScores)

    # Substituted when the talent has not supplied the data a dimension needs
    neutral_score: float = 0.5

    assessment_scale_max: float = 5.0

    engine_version: str = "v1.0"


class CompensationConfig(BaseModel):
    """Compensation alignment band: range widened by a fraction of its width."""
    tolerance_fraction: float = 0.10


class ResultPolicy(BaseModel):
    """Post-ranking result filtering and truncation policy.

    Applied after sorting to filter and truncate results.
    """
    min_score: int = 0  # 0-100, filter threshold
    top_k: Optional[int] = None  # None = no truncation


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.
    """
    scorer: ScorerConfig = Field(default_factory=ScorerConfig)
    compensation: CompensationConfig = Field(default_factory=CompensationConfig)

    # Matches below this score are not worth persisting
    minimum_match_score: int = 40

    result_policy: ResultPolicy = Field(default_factory=ResultPolicy)


class LearningConfig(BaseModel):
    """
    Configuration for the LearningRecommender.
    """
    gap_threshold: float = 3.5  # on the 0-5 assessment scale
    max_recommendations: int = 3

    # Difficulty a talent's current role level implies
    role_level_difficulty: Dict[RoleLevel, Difficulty] = Field(default_factory=lambda: {
        RoleLevel.L1: Difficulty.BEGINNER,
        RoleLevel.L2: Difficulty.BEGINNER,
        RoleLevel.L3: Difficulty.INTERMEDIATE,
        RoleLevel.L4: Difficulty.INTERMEDIATE,
        RoleLevel.L5: Difficulty.ADVANCED,
        RoleLevel.L6: Difficulty.ADVANCED,
        RoleLevel.L7: Difficulty.ADVANCED,
        RoleLevel.L8: Difficulty.ADVANCED,
    })
    default_difficulty: Difficulty = Difficulty.INTERMEDIATE

    gap_reason_template: str = "Strengthen your {dimension} skills"
    fallback_reason: str = "Keep sharpening your skills"

    # Optional YAML catalog overriding the packaged seed modules
    catalog_file: Optional[str] = None


class AppConfig(BaseModel):
    log_level: str = "INFO"
    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    learning: LearningConfig = Field(default_factory=LearningConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from another directory), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    env_log_level = os.environ.get("LOG_LEVEL")
    if env_log_level:
        data['log_level'] = env_log_level

    env_catalog_file = os.environ.get("LEARNING_CATALOG_FILE")
    if env_catalog_file:
        if 'learning' not in data or data['learning'] is None:
            data['learning'] = {}
        data['learning']['catalog_file'] = env_catalog_file

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {e}") from e
