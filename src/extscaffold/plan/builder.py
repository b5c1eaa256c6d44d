"""Template plan construction."""

from __future__ import annotations

from collections.abc import Callable

from extscaffold.contracts.config import Archetype, ExtensionConfig
from extscaffold.contracts.exceptions import ConfigError, MissingDependencyError
from extscaffold.contracts.plan import (
    CopyVerbatim,
    CopyWithSubstitution,
    DeleteIf,
    FileOperation,
    MergeDocument,
    TemplatePlan,
)
from extscaffold.contracts.prompt import field_equals
from extscaffold.plan.archetypes import ARCHETYPES, WEB_BROWSER_ENTRY, ArchetypeDefinition
from extscaffold.plan.context import substitution_context
from extscaffold.plan.inspect import MANIFEST_NAME

SAMPLE_PROVIDER_SOURCE = "src/extension/testProvider.ts"

_SERVICE_TEMPLATED = (
    "README.md",
    "CHANGELOG.md",
    "vsc-extension-quickstart.md",
    "tsconfig.json",
    "src/web/extension.ts",
    "build/web-extension.webpack.config.js",
    "package.json",
)

_RENDERER_TEMPLATED = (
    "package.json",
    "README.md",
    "src/client/index.ts",
    "src/extension/extension.ts",
)

_WEB_UPDATE_TEMPLATED = (
    "src/web/extension.ts",
    "build/web-extension.webpack.config.js",
)

OperationBuilder = Callable[[ExtensionConfig, ArchetypeDefinition], list[FileOperation]]


def _service_operations(config: ExtensionConfig, definition: ArchetypeDefinition) -> list[FileOperation]:
    root = config.identifier
    context = substitution_context(config, definition)

    ops: list[FileOperation] = [
        CopyVerbatim(src=definition.src("vscode"), dst=f"{root}/.vscode"),
        CopyVerbatim(src=definition.src("src/test"), dst=f"{root}/src/test"),
        CopyVerbatim(src=definition.src("vscodeignore"), dst=f"{root}/.vscodeignore"),
    ]
    if config.init_git:
        ops.append(CopyVerbatim(src=definition.src("gitignore"), dst=f"{root}/.gitignore"))
    ops.extend(
        CopyWithSubstitution(src=definition.src(name), dst=f"{root}/{name}", context=context)
        for name in _SERVICE_TEMPLATED
    )
    ops.append(CopyVerbatim(src=definition.src("eslintrc.json"), dst=f"{root}/.eslintrc.json"))
    return ops


def _renderer_operations(config: ExtensionConfig, definition: ArchetypeDefinition) -> list[FileOperation]:
    root = config.identifier
    context = substitution_context(config, definition)

    ops: list[FileOperation] = [
        CopyVerbatim(src=definition.src("src"), dst=f"{root}/src"),
        CopyVerbatim(src=definition.src("vscode"), dst=f"{root}/.vscode"),
        CopyVerbatim(src=definition.src("tsconfig.json"), dst=f"{root}/tsconfig.json"),
        CopyVerbatim(src=definition.src("vscodeignore"), dst=f"{root}/.vscodeignore"),
        CopyVerbatim(src=definition.src("webpack.config.js"), dst=f"{root}/webpack.config.js"),
        CopyVerbatim(src=definition.src("eslintrc.json"), dst=f"{root}/.eslintrc.json"),
        CopyVerbatim(src=definition.src("gitkeep"), dst=f"{root}/src/extension/types/.gitkeep"),
        CopyVerbatim(src=definition.src("gitkeep"), dst=f"{root}/src/test/types/.gitkeep"),
    ]
    # Overwrites the raw copies made by the ``src`` subtree copy above.
    ops.extend(
        CopyWithSubstitution(src=definition.src(name), dst=f"{root}/{name}", context=context)
        for name in _RENDERER_TEMPLATED
    )
    ops.append(
        DeleteIf(
            path=f"{root}/{SAMPLE_PROVIDER_SOURCE}",
            predicate=field_equals("include_sample_provider", False),
        )
    )
    if config.init_git:
        ops.append(CopyVerbatim(src=definition.src("gitignore"), dst=f"{root}/.gitignore"))
        ops.append(CopyVerbatim(src=definition.src("gitattributes"), dst=f"{root}/.gitattributes"))
    return ops


def _web_update_operations(config: ExtensionConfig, definition: ArchetypeDefinition) -> list[FileOperation]:
    context = substitution_context(config, definition)

    ops: list[FileOperation] = [
        CopyWithSubstitution(src=definition.src(name), dst=name, context=context) for name in _WEB_UPDATE_TEMPLATED
    ]
    ops.append(
        MergeDocument(
            path=MANIFEST_NAME,
            patch={
                "browser": WEB_BROWSER_ENTRY,
                "scripts": dict(definition.scripts),
                "devDependencies": {
                    name: config.dependency_versions[name] for name in definition.dev_dependencies
                },
            },
        )
    )
    return ops


_OPERATION_BUILDERS: dict[Archetype, OperationBuilder] = {
    Archetype.NEW_SERVICE_EXTENSION: _service_operations,
    Archetype.NEW_RENDERER_EXTENSION: _renderer_operations,
    Archetype.UPDATE_WITH_WEB_SUPPORT: _web_update_operations,
}


class TemplatePlanBuilder:
    """Map a finalized configuration to its ordered file operations.

    ``build`` is pure: the same configuration, dependency table and engine
    version always produce an equal plan.
    """

    def build(self, config: ExtensionConfig) -> TemplatePlan:
        """Build the plan for ``config.archetype``.

        Raises:
            ConfigError: The configuration is not finalized.
            MissingDependencyError: The archetype needs a dependency that has
                no entry in ``config.dependency_versions``.
        """
        if config.archetype is None:
            raise ConfigError("archetype has not been chosen")
        if not config.identifier:
            raise ConfigError("identifier has not been set")
        if config.archetype.creates_project and not config.engine_version:
            raise ConfigError("engine version has not been resolved")

        definition = ARCHETYPES[config.archetype]
        for name in definition.dev_dependencies:
            if name not in config.dependency_versions:
                raise MissingDependencyError(name)

        operations = _OPERATION_BUILDERS[config.archetype](config, definition)
        return TemplatePlan(
            archetype=config.archetype,
            template_dir=definition.template_dir,
            project_dir=config.project_dir,
            operations=tuple(operations),
            install_dependencies=bool(definition.dev_dependencies),
        )
