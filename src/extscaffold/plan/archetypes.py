"""Fixed per-archetype data: template directories, dependencies and scripts."""

from __future__ import annotations

from dataclasses import dataclass, field

from extscaffold.contracts.config import Archetype

WEB_BROWSER_ENTRY = "./dist/web/extension.js"
WEB_WEBPACK_CONFIG = "./build/web-extension.webpack.config.js"

WEB_SCRIPTS: dict[str, str] = {
    "compile-web": f"webpack --devtool nosources-source-map --config {WEB_WEBPACK_CONFIG}",
    "watch-web": (
        f"webpack --watch --devtool nosources-source-map --info-verbosity verbose --config {WEB_WEBPACK_CONFIG}"
    ),
    "package-web": f"webpack --mode production --watch --config {WEB_WEBPACK_CONFIG}",
}

SERVICE_SCRIPTS: dict[str, str] = {
    "test": "node ./out/test/runTests.js",
    "pretest": "tsc -p ./",
    "vscode:prepublish": "npm run package-web",
    **WEB_SCRIPTS,
    "lint": "eslint src --ext ts",
}

RENDERER_SCRIPTS: dict[str, str] = {
    "vscode:prepublish": "npm run compile && node out/test/checkNoTestProvider.js",
    "compile": "npm run compile:extension && npm run compile:client",
    "compile:extension": "tsc -b",
    "compile:client": "webpack --info-verbosity verbose --mode production",
    "lint": "eslint src --ext ts",
    "watch": 'concurrently -r "npm:watch:*"',
    "watch:extension": "tsc -b --watch",
    "watch:client": "webpack --info-verbosity verbose --mode development --watch",
    "dev": "concurrently -r npm:watch:extension npm:dev:client",
    "dev:client": "webpack-dev-server",
    "pretest": "npm run compile && npm run lint",
    "test": "node ./out/test/runTest.js",
    "updatetypes": (
        "cd src/extension/types && vscode-dts dev && vscode-dts master"
        " && cd ../../test/types && vscode-dts dev && vscode-dts master"
    ),
    "postinstall": "npm run updatetypes",
}

SERVICE_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@types/vscode",
    "@types/glob",
    "@types/mocha",
    "@types/node",
    "eslint",
    "@typescript-eslint/parser",
    "@typescript-eslint/eslint-plugin",
    "glob",
    "mocha",
    "typescript",
    "vscode-test",
    "ts-loader",
    "webpack",
    "webpack-cli",
)

RENDERER_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@types/glob",
    "@types/mocha",
    "@types/node",
    "@types/webpack-env",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
    "@types/vscode-notebook-renderer",
    "concurrently",
    "css-loader",
    "eslint",
    "fork-ts-checker-webpack-plugin",
    "glob",
    "mocha",
    "style-loader",
    "ts-loader",
    "typescript",
    "vscode-dts",
    "vscode-notebook-error-overlay",
    "vscode-test",
    "webpack",
    "webpack-cli",
    "webpack-dev-server",
)

WEB_UPDATE_DEV_DEPENDENCIES: tuple[str, ...] = ("ts-loader", "webpack", "webpack-cli")


@dataclass(frozen=True)
class ArchetypeDefinition:
    archetype: Archetype
    template_dir: str
    dev_dependencies: tuple[str, ...]
    scripts: dict[str, str] = field(default_factory=dict)

    def src(self, relative: str) -> str:
        return f"{self.template_dir}/{relative}"


ARCHETYPES: dict[Archetype, ArchetypeDefinition] = {
    Archetype.NEW_SERVICE_EXTENSION: ArchetypeDefinition(
        archetype=Archetype.NEW_SERVICE_EXTENSION,
        template_dir="ext-command-web",
        dev_dependencies=SERVICE_DEV_DEPENDENCIES,
        scripts=SERVICE_SCRIPTS,
    ),
    Archetype.NEW_RENDERER_EXTENSION: ArchetypeDefinition(
        archetype=Archetype.NEW_RENDERER_EXTENSION,
        template_dir="ext-notebook-renderer",
        dev_dependencies=RENDERER_DEV_DEPENDENCIES,
        scripts=RENDERER_SCRIPTS,
    ),
    # Reuses the web extension sources; the manifest is patched, not templated.
    Archetype.UPDATE_WITH_WEB_SUPPORT: ArchetypeDefinition(
        archetype=Archetype.UPDATE_WITH_WEB_SUPPORT,
        template_dir="ext-command-web",
        dev_dependencies=WEB_UPDATE_DEV_DEPENDENCIES,
        scripts=WEB_SCRIPTS,
    ),
}
