import pytest

from extscaffold.contracts.config import Archetype, ExtensionConfig
from extscaffold.contracts.exceptions import ConfigError, MissingDependencyError
from extscaffold.contracts.plan import CopyVerbatim, CopyWithSubstitution, DeleteIf, MergeDocument
from extscaffold.contracts.prompt import field_equals
from extscaffold.plan.archetypes import SERVICE_DEV_DEPENDENCIES, WEB_SCRIPTS
from extscaffold.plan.builder import SAMPLE_PROVIDER_SOURCE, TemplatePlanBuilder


def _update_config(dependency_versions: dict[str, str]) -> ExtensionConfig:
    return ExtensionConfig(
        archetype=Archetype.UPDATE_WITH_WEB_SUPPORT,
        identifier="legacy-ext",
        display_name="Legacy Ext",
        dependency_versions=dependency_versions,
    )


def test_build_is_deterministic(service_config: ExtensionConfig) -> None:
    builder = TemplatePlanBuilder()

    assert builder.build(service_config) == builder.build(service_config)


def test_service_plan_layout(service_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(service_config)

    assert plan.archetype is Archetype.NEW_SERVICE_EXTENSION
    assert plan.template_dir == "ext-command-web"
    assert plan.project_dir == "sample-ext"
    assert plan.install_dependencies is True
    assert plan.operations[0] == CopyVerbatim(src="ext-command-web/vscode", dst="sample-ext/.vscode")
    assert plan.operations[-1] == CopyVerbatim(src="ext-command-web/eslintrc.json", dst="sample-ext/.eslintrc.json")

    templated = [op.dst for op in plan.operations if isinstance(op, CopyWithSubstitution)]
    assert templated == [
        "sample-ext/README.md",
        "sample-ext/CHANGELOG.md",
        "sample-ext/vsc-extension-quickstart.md",
        "sample-ext/tsconfig.json",
        "sample-ext/src/web/extension.ts",
        "sample-ext/build/web-extension.webpack.config.js",
        "sample-ext/package.json",
    ]


def test_service_plan_gitignore_follows_init_git(service_config: ExtensionConfig) -> None:
    with_git = TemplatePlanBuilder().build(service_config)
    without_git = TemplatePlanBuilder().build(service_config.model_copy(update={"init_git": False}))

    assert "sample-ext/.gitignore" in with_git.written_paths
    assert "sample-ext/.gitignore" not in without_git.written_paths


def test_service_context_carries_dependency_helper(service_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(service_config)
    manifest = next(
        op for op in plan.operations if isinstance(op, CopyWithSubstitution) and op.dst.endswith("package.json")
    )

    assert manifest.context["identifier"] == "sample-ext"
    assert manifest.context["dev_dependencies"] == list(SERVICE_DEV_DEPENDENCIES)
    assert manifest.context["dep"]("webpack") == f'"webpack": "{service_config.dependency_versions["webpack"]}"'


def test_renderer_plan_deletes_sample_provider_when_not_requested(renderer_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(renderer_config)

    deletes = [op for op in plan.operations if isinstance(op, DeleteIf)]
    assert deletes == [
        DeleteIf(
            path=f"json-renderer-ext/{SAMPLE_PROVIDER_SOURCE}",
            predicate=field_equals("include_sample_provider", False),
        )
    ]
    assert deletes[0].predicate.evaluate(renderer_config)


def test_renderer_plan_keeps_sample_provider_when_requested(renderer_config: ExtensionConfig) -> None:
    config = renderer_config.model_copy(update={"include_sample_provider": True, "sample_file_extension": ".nb"})
    plan = TemplatePlanBuilder().build(config)

    delete = next(op for op in plan.operations if isinstance(op, DeleteIf))
    assert not delete.predicate.evaluate(config)


def test_renderer_plan_subtree_copy_precedes_templates(renderer_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(renderer_config)
    destinations = [getattr(op, "dst", None) for op in plan.operations]

    assert destinations.index("json-renderer-ext/src") < destinations.index("json-renderer-ext/src/client/index.ts")


def test_renderer_plan_vcs_files_gated_on_init_git(renderer_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(renderer_config)
    no_git = TemplatePlanBuilder().build(renderer_config.model_copy(update={"init_git": False}))

    assert {"json-renderer-ext/.gitignore", "json-renderer-ext/.gitattributes"} <= set(plan.written_paths)
    assert "json-renderer-ext/.gitattributes" not in no_git.written_paths


def test_update_plan_has_exactly_three_operations(dependency_versions: dict[str, str]) -> None:
    plan = TemplatePlanBuilder().build(_update_config(dependency_versions))

    assert plan.project_dir == "."
    assert len(plan.operations) == 3
    first, second, merge = plan.operations
    assert first == CopyWithSubstitution(
        src="ext-command-web/src/web/extension.ts", dst="src/web/extension.ts", context=first.context
    )
    assert second.dst == "build/web-extension.webpack.config.js"
    assert isinstance(merge, MergeDocument)
    assert merge.path == "package.json"
    assert merge.patch == {
        "browser": "./dist/web/extension.js",
        "scripts": WEB_SCRIPTS,
        "devDependencies": {
            "ts-loader": dependency_versions["ts-loader"],
            "webpack": dependency_versions["webpack"],
            "webpack-cli": dependency_versions["webpack-cli"],
        },
    }


def test_update_plan_does_not_need_engine_version(dependency_versions: dict[str, str]) -> None:
    plan = TemplatePlanBuilder().build(_update_config(dependency_versions))

    assert plan.archetype is Archetype.UPDATE_WITH_WEB_SUPPORT


def test_missing_dependency_names_the_dependency(service_config: ExtensionConfig) -> None:
    versions = dict(service_config.dependency_versions)
    del versions["mocha"]

    with pytest.raises(MissingDependencyError) as exc_info:
        TemplatePlanBuilder().build(service_config.model_copy(update={"dependency_versions": versions}))

    assert exc_info.value.dependency == "mocha"


@pytest.mark.parametrize(
    "update",
    [{"archetype": None}, {"identifier": ""}, {"engine_version": ""}],
)
def test_unfinished_configuration_is_rejected(service_config: ExtensionConfig, update: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        TemplatePlanBuilder().build(service_config.model_copy(update=update))


def test_service_plan_targets_the_web_host_only(service_config: ExtensionConfig) -> None:
    plan = TemplatePlanBuilder().build(service_config)
    destinations = [op.dst for op in plan.operations if isinstance(op, (CopyVerbatim, CopyWithSubstitution))]

    assert "sample-ext/src/web/extension.ts" in destinations
    assert "sample-ext/build/web-extension.webpack.config.js" in destinations
    assert not any("/src/node/" in dst or "node-extension" in dst for dst in destinations)
