from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from extscaffold.contracts.config import PackageManager
from extscaffold.contracts.exceptions import InstallError
from extscaffold.providers.installer import GitInitializer, SubprocessInstaller


class _MockProcess:
    def __init__(self, returncode: int, stdout: bytes = b"", stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stdout = stdout
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return self._stdout, self._stderr

    async def wait(self) -> int:
        return self.returncode


# ---------------------------------------------------------------------------
# SubprocessInstaller
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("package_manager", "expected"),
    [(PackageManager.NPM, ("npm", "install")), (PackageManager.YARN, ("yarn", "install"))],
)
async def test_installer_runs_package_manager_in_project(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    package_manager: PackageManager,
    expected: tuple[str, ...],
) -> None:
    seen: dict[str, Any] = {}

    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        seen["args"] = args
        seen["cwd"] = kwargs["cwd"]
        return _MockProcess(returncode=0)

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    await SubprocessInstaller().install(package_manager, tmp_path)

    assert seen["args"] == expected
    assert seen["cwd"] == str(tmp_path)


@pytest.mark.asyncio
async def test_installer_raises_on_nonzero_exit(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=1)

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(InstallError, match="exited with status 1") as exc_info:
        await SubprocessInstaller().install(PackageManager.NPM, tmp_path)

    assert exc_info.value.command == ("npm", "install")


@pytest.mark.asyncio
async def test_installer_raises_when_binary_missing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise FileNotFoundError("yarn")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    with pytest.raises(InstallError, match="Failed to execute yarn"):
        await SubprocessInstaller().install(PackageManager.YARN, tmp_path)


# ---------------------------------------------------------------------------
# GitInitializer
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_git_init_success(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        assert args == ("git", "init", "--quiet")
        return _MockProcess(returncode=0)

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GitInitializer().init(tmp_path) is True


@pytest.mark.asyncio
async def test_git_init_failure_is_logged_not_raised(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        return _MockProcess(returncode=128, stderr=b"fatal: not allowed")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GitInitializer().init(tmp_path) is False
    assert "fatal: not allowed" in caplog.text


@pytest.mark.asyncio
async def test_git_missing_is_logged_not_raised(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    async def _mock_create_subprocess_exec(*args: Any, **kwargs: Any) -> _MockProcess:
        raise OSError("git missing")

    monkeypatch.setattr("asyncio.create_subprocess_exec", _mock_create_subprocess_exec)

    assert await GitInitializer().init(tmp_path) is False
