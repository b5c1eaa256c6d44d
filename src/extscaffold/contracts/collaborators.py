"""Interfaces of the external collaborators the engine drives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from extscaffold.contracts.config import PackageManager


class VersionProvider(ABC):
    @abstractmethod
    async def dependency_versions(self) -> dict[str, str]:
        """Return the dependency name to version mapping.

        Raises:
            ProviderError: The table cannot be produced.
        """

    @abstractmethod
    async def latest_engine_version(self) -> str:
        """Return the engine compatibility range for new manifests.

        Raises:
            ProviderError: The version cannot be resolved.
        """


class FileOperations(ABC):
    """Byte-moving primitives behind the four plan operation kinds."""

    @abstractmethod
    def copy(self, src: str, dst: str) -> None: ...

    @abstractmethod
    def copy_template(self, src: str, dst: str, context: Mapping[str, Any]) -> None: ...

    @abstractmethod
    def delete(self, path: str) -> None: ...

    @abstractmethod
    def merge_json(self, path: str, patch: Mapping[str, Any]) -> None: ...


class DependencyInstaller(ABC):
    @abstractmethod
    async def install(self, package_manager: PackageManager, cwd: Path) -> None:
        """Install the project's dependencies.

        Raises:
            InstallError: The tool is missing or exited with a failure.
        """


class VcsInitializer(ABC):
    @abstractmethod
    async def init(self, cwd: Path) -> bool:
        """Initialize a repository in *cwd*; return whether it succeeded."""
