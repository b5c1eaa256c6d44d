"""Template substitution context."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from extscaffold.contracts.config import ExtensionConfig
from extscaffold.contracts.exceptions import MissingDependencyError
from extscaffold.plan.archetypes import ArchetypeDefinition


@dataclass(frozen=True)
class DependencyFormatter:
    """The ``dep(name)`` template helper.

    Renders ``"name": "version"`` for manifest dependency tables. A name
    missing from the version table is an error, never an empty value.
    """

    versions: tuple[tuple[str, str], ...]

    @classmethod
    def from_mapping(cls, versions: Mapping[str, str]) -> DependencyFormatter:
        return cls(versions=tuple(sorted(versions.items())))

    def __call__(self, name: str) -> str:
        version = dict(self.versions).get(name)
        if version is None:
            raise MissingDependencyError(name)
        return f"{json.dumps(name)}: {json.dumps(version)}"


def substitution_context(config: ExtensionConfig, definition: ArchetypeDefinition) -> dict[str, Any]:
    context = config.model_dump(mode="json")
    context["dep"] = DependencyFormatter.from_mapping(config.dependency_versions)
    context["dev_dependencies"] = list(definition.dev_dependencies)
    context["scripts"] = dict(definition.scripts)
    return context
