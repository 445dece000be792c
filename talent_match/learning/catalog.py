#!/usr/bin/env python3
"""
Module Catalog - Immutable registry of learning modules.

The catalog is static configuration data: the packaged modules.yaml seed,
or any YAML file of the same shape. It is never queried live.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple
import logging
import os

import yaml

from talent_match.exceptions import InvalidInputError
from talent_match.models import AssessmentDimension, LearningModule, RoleLevel, coerce

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "modules.yaml")


class ModuleCatalog:
    """Read-only, id-unique collection of LearningModules in load order."""

    def __init__(self, modules: Iterable[Any]):
        coerced = tuple(coerce(LearningModule, m) for m in modules)

        by_id: Dict[str, LearningModule] = {}
        for module in coerced:
            if module.id in by_id:
                raise InvalidInputError(f"Duplicate learning module id: {module.id!r}")
            by_id[module.id] = module

        self._modules: Tuple[LearningModule, ...] = coerced
        self._by_id = by_id

    @classmethod
    def from_yaml(cls, path: Optional[str] = None) -> "ModuleCatalog":
        """Load a catalog from YAML (`modules:` list, or a bare list).

        Args:
            path: YAML file; defaults to the packaged seed catalog
        """
        path = path or DEFAULT_CATALOG_PATH
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        records = data.get("modules", []) if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise InvalidInputError(f"Catalog {path} must hold a list of modules")

        catalog = cls(records)
        logger.info("Loaded %d learning modules from %s", len(catalog), path)
        return catalog

    @classmethod
    def default(cls) -> "ModuleCatalog":
        return cls.from_yaml(DEFAULT_CATALOG_PATH)

    def __iter__(self) -> Iterator[LearningModule]:
        return iter(self._modules)

    def __len__(self) -> int:
        return len(self._modules)

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._by_id

    @property
    def modules(self) -> Tuple[LearningModule, ...]:
        return self._modules

    def get(self, module_id: str) -> Optional[LearningModule]:
        return self._by_id.get(module_id)

    def by_category(self, category: str) -> List[LearningModule]:
        return [m for m in self._modules if m.category == category]

    def for_dimension(self, dimension: AssessmentDimension) -> List[LearningModule]:
        """Modules whose category trains the given assessment dimension."""
        return [m for m in self._modules if m.dimension == dimension]

    def for_role_level(self, level: RoleLevel) -> List[LearningModule]:
        """Modules aimed at a role level; modules without targets suit every level."""
        return [m for m in self._modules if m.targets_level(level)]


def group_modules_by_category(modules: Iterable[LearningModule]) -> Dict[str, List[LearningModule]]:
    """Group modules by category, keeping first-seen category order."""
    groups: Dict[str, List[LearningModule]] = {}
    for module in modules:
        groups.setdefault(module.category, []).append(module)
    return groups


def format_category(category: str) -> str:
    """'product_knowledge' -> 'Product Knowledge'"""
    return " ".join(word.capitalize() for word in category.split("_"))
