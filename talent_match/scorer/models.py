#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from talent_match.models import AlignmentKind


@dataclass(frozen=True)
class Match:
    """Scored (talent, opportunity) pair.

    Derived, never hand-edited. Identified by (talent_id, opportunity_id);
    recomputation with unchanged inputs yields the same score and breakdown,
    so callers can upsert by key.
    """
    talent_id: str
    opportunity_id: str
    score: int
    breakdown: Mapping[str, float]
    compensation_alignment: AlignmentKind = AlignmentKind.UNKNOWN
    engine_version: str = "v1.0"
    computed_at: Optional[datetime] = None

    def __post_init__(self):
        # Read-only view so a shared Match cannot be edited in place
        object.__setattr__(self, 'breakdown', MappingProxyType(dict(self.breakdown)))

    @property
    def key(self) -> tuple:
        return (self.talent_id, self.opportunity_id)

    def to_record(self, computed_at: Optional[datetime] = None) -> Dict[str, Any]:
        """Plain JSON-native dict for persisting the match.

        Args:
            computed_at: Stamp to record; defaults to the match's own stamp
        """
        stamp = computed_at or self.computed_at
        return {
            'talent_id': self.talent_id,
            'opportunity_id': self.opportunity_id,
            'score': int(self.score),
            'dimension_breakdown': {k: float(v) for k, v in self.breakdown.items()},
            'compensation_alignment': self.compensation_alignment.value,
            'engine_version': self.engine_version,
            'computed_at': stamp.isoformat() if stamp else None,
        }
