import pytest

from extscaffold.contracts.config import ExtensionConfig
from extscaffold.contracts.exceptions import MissingDependencyError
from extscaffold.plan.archetypes import ARCHETYPES
from extscaffold.plan.context import DependencyFormatter, substitution_context


def test_dependency_formatter_renders_json_pair() -> None:
    dep = DependencyFormatter.from_mapping({"@types/vscode": "^1.54.0"})

    assert dep("@types/vscode") == '"@types/vscode": "^1.54.0"'


def test_dependency_formatter_raises_for_unknown_name() -> None:
    dep = DependencyFormatter.from_mapping({})

    with pytest.raises(MissingDependencyError, match="left-pad"):
        dep("left-pad")


def test_dependency_formatters_compare_by_value() -> None:
    first = DependencyFormatter.from_mapping({"a": "1", "b": "2"})
    second = DependencyFormatter.from_mapping({"b": "2", "a": "1"})

    assert first == second


def test_substitution_context_exposes_answers(service_config: ExtensionConfig) -> None:
    context = substitution_context(service_config, ARCHETYPES[service_config.archetype])

    assert context["identifier"] == "sample-ext"
    assert context["display_name"] == "Sample Ext"
    assert context["package_manager"] == "npm"
    assert context["archetype"] == "ext-command-web"
    assert context["scripts"]["compile-web"].startswith("webpack")
