#!/usr/bin/env python3
"""
Engine Models - Typed snapshots of the records the engine consumes.

Records arrive from storage as loosely shaped dicts (snake_case from the
database, camelCase from the web layer). Each model accepts either spelling,
ignores unknown keys, and is frozen once built. Use `coerce()` to turn a raw
record into a model; validation failures surface as InvalidInputError.

Structural cross-field checks (inverted ranges, negative years) live in
talent_match.validation so they raise InvalidInputError at scoring time
rather than pydantic errors at construction time.
"""

from datetime import datetime
from enum import Enum
from typing import Any, FrozenSet, Optional, Tuple, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic.alias_generators import to_camel

from talent_match.exceptions import InvalidInputError


class RoleLevel(str, Enum):
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"
    L4 = "L4"
    L5 = "L5"
    L6 = "L6"
    L7 = "L7"
    L8 = "L8"

    @property
    def ordinal(self) -> int:
        return int(self.value[1:])


class StoreTier(str, Enum):
    T1 = "T1"
    T2 = "T2"
    T3 = "T3"
    T4 = "T4"
    T5 = "T5"

    @property
    def ordinal(self) -> int:
        return int(self.value[1:])


class Division(str, Enum):
    FASHION = "fashion"
    LEATHER_GOODS = "leather_goods"
    SHOES = "shoes"
    BEAUTY = "beauty"
    FRAGRANCE = "fragrance"
    WATCHES = "watches"
    HIGH_JEWELRY = "high_jewelry"
    EYEWEAR = "eyewear"
    ACCESSORIES = "accessories"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class Mobility(str, Enum):
    LOCAL = "local"
    REGIONAL = "regional"
    RELOCATE = "relocate"


class Timeline(str, Enum):
    ACTIVE = "active"
    PASSIVE = "passive"
    NOT_LOOKING = "not_looking"


class OpportunityStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    FILLED = "filled"
    CANCELLED = "cancelled"


class Difficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def ordinal(self) -> int:
        return list(Difficulty).index(self)


class ContentType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"
    EXERCISE = "exercise"
    QUIZ = "quiz"


class ProgressStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AssessmentDimension(str, Enum):
    SERVICE_EXCELLENCE = "service_excellence"
    CLIENTELING = "clienteling"
    OPERATIONS = "operations"
    LEADERSHIP_SIGNALS = "leadership_signals"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class AlignmentKind(str, Enum):
    WITHIN_RANGE = "within_range"
    ABOVE_RANGE = "above_range"
    BELOW_RANGE = "below_range"
    UNKNOWN = "unknown"


# Learning categories that train an assessment dimension. Anything else
# (product_knowledge, soft_skills) is a general category.
CATEGORY_DIMENSIONS = {
    "service_excellence": AssessmentDimension.SERVICE_EXCELLENCE,
    "clienteling": AssessmentDimension.CLIENTELING,
    "operations": AssessmentDimension.OPERATIONS,
    "leadership": AssessmentDimension.LEADERSHIP_SIGNALS,
    "leadership_signals": AssessmentDimension.LEADERSHIP_SIGNALS,
}


class EngineModel(BaseModel):
    """Base for all input snapshots."""
    model_config = ConfigDict(
        frozen=True,
        extra='ignore',
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CompensationRange(EngineModel):
    """Compensation band. Either bound may be missing on a partly filled profile."""
    min: Optional[float] = Field(default=None, validation_alias=AliasChoices("min", "min_base", "minBase"))
    max: Optional[float] = Field(default=None, validation_alias=AliasChoices("max", "max_base", "maxBase"))
    currency: str = "EUR"

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.strip().upper()

    @property
    def is_bounded(self) -> bool:
        return self.min is not None and self.max is not None

    @property
    def width(self) -> float:
        return self.max - self.min

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2.0


class Location(EngineModel):
    city: Optional[str] = None
    region: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        # Profiles store the location as free text, usually just the city
        if isinstance(data, str):
            return {"city": data.strip() or None}
        return data


class AssessmentSummary(EngineModel):
    service_excellence: Optional[float] = None
    clienteling: Optional[float] = None
    operations: Optional[float] = None
    leadership_signals: Optional[float] = None
    completed_at: Optional[datetime] = None

    def score_for(self, dimension: AssessmentDimension) -> Optional[float]:
        return getattr(self, dimension.value)

    def present_scores(self) -> Tuple[float, ...]:
        """Scores for the dimensions that have been assessed, in dimension order."""
        values = (self.score_for(d) for d in AssessmentDimension)
        return tuple(v for v in values if v is not None)

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None


_CAREER_PREFERENCE_FIELDS = ("mobility", "timeline", "target_role_levels", "target_locations")


class Talent(EngineModel):
    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    current_role_level: Optional[RoleLevel] = None
    current_store_tier: Optional[StoreTier] = None
    current_location: Optional[Location] = None
    divisions: FrozenSet[Division] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("divisions", "divisions_expertise", "divisionsExpertise"),
    )
    years_in_luxury: Optional[float] = None

    mobility: Mobility = Mobility.LOCAL
    timeline: Timeline = Timeline.PASSIVE
    target_role_levels: FrozenSet[RoleLevel] = Field(default_factory=frozenset)
    target_locations: Tuple[str, ...] = ()

    expected_compensation: Optional[CompensationRange] = None
    assessment_summary: Optional[AssessmentSummary] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_nested_profile(cls, data: Any) -> Any:
        """Flatten the stored profile shape.

        Storage keeps mobility, timeline and targets under `career_preferences`
        and a single expected figure under `compensation_profile.expectations`.
        Top-level keys win when both are present.
        """
        if not isinstance(data, dict):
            return data
        prefs = data.get("career_preferences") or data.get("careerPreferences")
        comp_profile = data.get("compensation_profile") or data.get("compensationProfile")
        if not isinstance(prefs, dict) and not isinstance(comp_profile, dict):
            return data

        data = dict(data)
        if isinstance(prefs, dict):
            for name in _CAREER_PREFERENCE_FIELDS:
                camel = to_camel(name)
                if name in data or camel in data:
                    continue
                if name in prefs:
                    data[name] = prefs[name]
                elif camel in prefs:
                    data[name] = prefs[camel]

        if isinstance(comp_profile, dict) and not (
            "expected_compensation" in data or "expectedCompensation" in data
        ):
            expected = comp_profile.get("expectations")
            if expected is not None:
                data["expected_compensation"] = {
                    "min": expected,
                    "max": expected,
                    "currency": comp_profile.get("currency") or "EUR",
                }
        return data

    @field_validator("mobility", mode="before")
    @classmethod
    def _coerce_mobility(cls, v: Any) -> Any:
        # Older profiles recorded how far a talent would move; anything beyond
        # the region means they will relocate.
        if isinstance(v, str) and v.strip().lower() in ("national", "international"):
            return Mobility.RELOCATE
        return v


class Opportunity(EngineModel):
    id: str
    title: Optional[str] = None
    required_role_level: RoleLevel = Field(
        validation_alias=AliasChoices("required_role_level", "requiredRoleLevel", "role_level", "roleLevel"),
    )
    store_tier: Optional[StoreTier] = None
    division: Optional[Division] = None
    required_experience_years: float = 0.0
    location: Optional[Location] = None
    compensation_range: Optional[CompensationRange] = None
    status: OpportunityStatus = OpportunityStatus.DRAFT
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @field_validator("required_experience_years", mode="before")
    @classmethod
    def _none_is_zero(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @property
    def recency(self) -> Optional[datetime]:
        return self.published_at or self.created_at

    @property
    def is_active(self) -> bool:
        return self.status == OpportunityStatus.ACTIVE


class LearningModule(EngineModel):
    id: str
    title: str = ""
    description: Optional[str] = None
    category: str
    difficulty: Difficulty = Difficulty.BEGINNER
    duration_minutes: int = 0
    content_type: ContentType = ContentType.ARTICLE
    content_url: Optional[str] = None
    target_role_levels: FrozenSet[RoleLevel] = Field(default_factory=frozenset)

    @property
    def dimension(self) -> Optional[AssessmentDimension]:
        return CATEGORY_DIMENSIONS.get(self.category)

    def targets_level(self, level: Optional[RoleLevel]) -> bool:
        """True when the module is aimed at `level`. Untargeted modules suit every level."""
        return level is None or not self.target_role_levels or level in self.target_role_levels


class TalentLearningProgress(EngineModel):
    talent_id: str
    module_id: str
    status: ProgressStatus = ProgressStatus.NOT_STARTED
    progress_pct: int = 0


M = TypeVar("M", bound=EngineModel)


def coerce(model_cls: Type[M], record: Any) -> M:
    """Return `record` as an instance of `model_cls`.

    Instances pass through untouched; mappings and attribute-style objects
    are validated. Shape errors are raised as InvalidInputError.
    """
    if isinstance(record, model_cls):
        return record
    try:
        if isinstance(record, dict):
            return model_cls.model_validate(record)
        return model_cls.model_validate(record, from_attributes=True)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid {model_cls.__name__} record: {e}") from e
