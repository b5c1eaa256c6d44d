from __future__ import annotations

import ast
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "src" / "extscaffold"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_contracts_import_only_contracts() -> None:
    files = _collect_python_files(PACKAGE_ROOT / "contracts")
    violations = _find_forbidden_imports(
        files,
        (
            "extscaffold.cli",
            "extscaffold.engine",
            "extscaffold.fileops",
            "extscaffold.plan",
            "extscaffold.prompt",
            "extscaffold.providers",
            "extscaffold.progress",
        ),
    )
    assert not violations, f"contracts import implementation modules: {violations}"


def test_components_do_not_import_engine_or_cli() -> None:
    files: list[Path] = []
    for component in ("prompt", "plan", "fileops", "providers"):
        files.extend(_collect_python_files(PACKAGE_ROOT / component))
    violations = _find_forbidden_imports(files, ("extscaffold.engine", "extscaffold.cli"))
    assert not violations, f"components import higher layers: {violations}"


def test_engine_uses_file_operations_contract_only() -> None:
    files = _collect_python_files(PACKAGE_ROOT / "engine")
    violations = _find_forbidden_imports(files, ("extscaffold.cli", "extscaffold.fileops", "extscaffold.progress"))
    assert not violations, f"engine imports concrete adapters or the cli layer: {violations}"
