"""Dependency installer and repository initializer backed by subprocesses."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from extscaffold.contracts.collaborators import DependencyInstaller, VcsInitializer
from extscaffold.contracts.config import PackageManager
from extscaffold.contracts.exceptions import InstallError

_LOG = logging.getLogger(__name__)

INSTALL_COMMANDS: dict[PackageManager, tuple[str, ...]] = {
    PackageManager.NPM: ("npm", "install"),
    PackageManager.YARN: ("yarn", "install"),
}

COMPILE_WEB_COMMAND = "run compile-web"


class SubprocessInstaller(DependencyInstaller):
    """Run the selected package manager with inherited stdio."""

    async def install(self, package_manager: PackageManager, cwd: Path) -> None:
        cmd = INSTALL_COMMANDS[package_manager]
        _LOG.debug("Running: %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            process = await asyncio.create_subprocess_exec(*cmd, cwd=str(cwd))
        except OSError as exc:
            raise InstallError(f"Failed to execute {cmd[0]}: {exc}", command=cmd) from exc

        returncode = await process.wait()
        if returncode != 0:
            raise InstallError(f"{' '.join(cmd)} exited with status {returncode}", command=cmd)


class GitInitializer(VcsInitializer):
    """``git init --quiet``; failures are logged, never raised."""

    async def init(self, cwd: Path) -> bool:
        try:
            process = await asyncio.create_subprocess_exec(
                "git",
                "init",
                "--quiet",
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            _LOG.warning("Failed to execute git: %s", exc)
            return False

        _, stderr = await process.communicate()
        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            _LOG.warning("git init failed in %s: %s", cwd, details or f"status {process.returncode}")
            return False
        return True
