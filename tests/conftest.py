"""Shared test fixtures for extscaffold tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from extscaffold.contracts.config import Archetype, ExtensionConfig, PackageManager
from extscaffold.providers.versions import load_bundled_dependency_versions

ENGINE_VERSION = "^1.56.0-insider"


@pytest.fixture
def dependency_versions() -> dict[str, str]:
    """The bundled dependency table."""
    return load_bundled_dependency_versions()


@pytest.fixture
def service_config(dependency_versions: dict[str, str]) -> ExtensionConfig:
    """Finalized answers for a new web extension."""
    return ExtensionConfig(
        archetype=Archetype.NEW_SERVICE_EXTENSION,
        identifier="sample-ext",
        display_name="Sample Ext",
        description="d",
        init_git=True,
        package_manager=PackageManager.NPM,
        dependency_versions=dependency_versions,
        engine_version=ENGINE_VERSION,
    )


@pytest.fixture
def renderer_config(dependency_versions: dict[str, str]) -> ExtensionConfig:
    """Finalized answers for a new notebook renderer without the sample provider."""
    return ExtensionConfig(
        archetype=Archetype.NEW_RENDERER_EXTENSION,
        identifier="json-renderer-ext",
        display_name="Cool JSON Renderer",
        description="",
        init_git=True,
        package_manager=PackageManager.YARN,
        renderer_id="json-renderer",
        renderer_display_name="JSON Renderer",
        renderer_mime_types=["application/json"],
        include_sample_provider=False,
        dependency_versions=dependency_versions,
        engine_version=ENGINE_VERSION,
    )


@pytest.fixture
def existing_project(tmp_path: Path) -> Path:
    """An extension project folder with a minimal manifest."""
    manifest = {
        "name": "legacy-ext",
        "displayName": "Legacy Ext",
        "description": "An older extension",
        "version": "1.2.3",
        "publisher": "someone",
        "engines": {"vscode": "^1.50.0"},
        "main": "./out/extension.js",
        "scripts": {"compile": "tsc -p ./"},
        "devDependencies": {"typescript": "^4.0.0"},
    }
    (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2) + "\n", encoding="utf-8")
    return tmp_path
