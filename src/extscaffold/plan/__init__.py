"""Template plan construction."""

from extscaffold.plan.archetypes import ARCHETYPES, ArchetypeDefinition
from extscaffold.plan.builder import SAMPLE_PROVIDER_SOURCE, TemplatePlanBuilder
from extscaffold.plan.context import DependencyFormatter, substitution_context
from extscaffold.plan.inspect import detect_package_manager, inspect_existing_project, read_manifest

__all__ = [
    "ARCHETYPES",
    "SAMPLE_PROVIDER_SOURCE",
    "ArchetypeDefinition",
    "DependencyFormatter",
    "TemplatePlanBuilder",
    "detect_package_manager",
    "inspect_existing_project",
    "read_manifest",
    "substitution_context",
]
