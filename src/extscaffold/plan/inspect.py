"""Precondition checks for updating an existing extension project."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from extscaffold.contracts.config import ExtensionConfig, PackageManager
from extscaffold.contracts.exceptions import PreconditionError
from extscaffold.prompt.validators import validate_identifier

_LOG = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
YARN_LOCK = "yarn.lock"

_OPEN_EXISTING = "Please open an existing extension project folder first."


def detect_package_manager(project_root: Path) -> PackageManager:
    """yarn when its lock file is present, npm otherwise."""
    if (project_root / YARN_LOCK).exists():
        return PackageManager.YARN
    return PackageManager.NPM


def read_manifest(project_root: Path) -> dict[str, Any]:
    path = project_root / MANIFEST_NAME
    if not path.is_file():
        raise PreconditionError(f"No {MANIFEST_NAME} found in {project_root}. {_OPEN_EXISTING}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PreconditionError(f"Unable to read {path}: {exc}. {_OPEN_EXISTING}") from exc
    if not isinstance(payload, dict):
        raise PreconditionError(f"{path} must contain a JSON object. {_OPEN_EXISTING}")
    return payload


def inspect_existing_project(config: ExtensionConfig, project_root: Path) -> ExtensionConfig:
    """Validate the target project and derive the fields the wizard never asks.

    Nothing is written. The returned configuration carries the manifest's
    identity and the package manager implied by the lock file.

    Raises:
        PreconditionError: The manifest is missing, has no ``engines.vscode``,
            or its name does not pass the identifier grammar.
    """
    manifest = read_manifest(project_root)
    engines = manifest.get("engines")
    if not isinstance(engines, dict) or not engines.get("vscode"):
        raise PreconditionError(f"{MANIFEST_NAME} has no engines.vscode entry. {_OPEN_EXISTING}")

    name = manifest.get("name")
    if not isinstance(name, str) or not name.strip():
        raise PreconditionError(f"{MANIFEST_NAME} has no name. {_OPEN_EXISTING}")
    name = name.strip()
    verdict = validate_identifier(name)
    if verdict is not True:
        raise PreconditionError(f"{MANIFEST_NAME} name {name!r} is not a valid extension identifier: {verdict}.")

    display_name = manifest.get("displayName")
    description = manifest.get("description")
    package_manager = detect_package_manager(project_root)
    _LOG.debug("existing project %s uses %s", name, package_manager.value)

    return config.model_copy(
        update={
            "identifier": name,
            "display_name": display_name if isinstance(display_name, str) and display_name else name,
            "description": description if isinstance(description, str) else "",
            "package_manager": package_manager,
        }
    )
