"""Local filesystem implementation of the file-operation collaborator.

Template sources are resolved against the bundled ``templates/`` directory
and rendered with Jinja2. Destinations are resolved against the run's
destination root and may not escape it.
"""

from __future__ import annotations

import json
import logging
import re
import shutil
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound, UndefinedError

from extscaffold.contracts.collaborators import FileOperations
from extscaffold.contracts.exceptions import TemplateError
from extscaffold.fileops.merge import deep_merge

_LOG = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ROOT = Path(__file__).resolve().parent.parent / "templates"


class LocalFileOperations(FileOperations):
    def __init__(self, destination: Path, template_root: Path | None = None) -> None:
        self.destination = Path(destination)
        self.template_root = Path(template_root) if template_root is not None else DEFAULT_TEMPLATE_ROOT
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_root)),
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )
        self.env.filters["json"] = _json_filter
        self.written: list[Path] = []

    # -- FileOperations ----------------------------------------------------

    def copy(self, src: str, dst: str) -> None:
        source = self._source(src)
        target = self._target(dst)
        if source.is_dir():
            shutil.copytree(source, target, dirs_exist_ok=True)
            self.written.extend(sorted(path for path in target.rglob("*") if path.is_file()))
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            self.written.append(target)
        _LOG.debug("copied %s -> %s", src, target)

    def copy_template(self, src: str, dst: str, context: Mapping[str, Any]) -> None:
        try:
            template = self.env.get_template(src)
        except TemplateNotFound as exc:
            raise TemplateError(f"template not found: {src}") from exc
        try:
            content = template.render(**context)
        except UndefinedError as exc:
            raise TemplateError(f"template {src} references an unknown variable: {exc.message}") from exc

        target = self._target(dst)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        self.written.append(target)
        _LOG.debug("rendered %s -> %s", src, target)

    def delete(self, path: str) -> None:
        target = self._target(path)
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink(missing_ok=True)
        self.written = [
            written for written in self.written if written != target and target not in written.parents
        ]
        _LOG.debug("deleted %s", target)

    def merge_json(self, path: str, patch: Mapping[str, Any]) -> None:
        target = self._target(path)
        existing: dict[str, Any] = {}
        indent: int | str = 2
        if target.exists():
            raw = target.read_text(encoding="utf-8")
            try:
                loaded = json.loads(raw)
            except json.JSONDecodeError as exc:
                raise TemplateError(f"cannot merge into invalid JSON document: {target}") from exc
            if not isinstance(loaded, dict):
                raise TemplateError(f"cannot merge into non-object JSON document: {target}")
            existing = loaded
            indent = _detect_indent(raw)

        merged = deep_merge(existing, patch)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(merged, indent=indent, ensure_ascii=False) + "\n", encoding="utf-8")
        self.written.append(target)
        _LOG.debug("merged %d key(s) into %s", len(patch), target)

    # -- helpers -------------------------------------------------------------

    def _source(self, src: str) -> Path:
        source = self.template_root / src
        if not source.exists():
            raise TemplateError(f"template not found: {src}")
        return source

    def _target(self, dst: str) -> Path:
        root = self.destination.resolve()
        target = (root / dst).resolve()
        if target != root and root not in target.parents:
            raise TemplateError(f"destination escapes the project root: {dst}")
        return target


def _detect_indent(raw: str) -> int | str:
    for line in raw.splitlines()[1:]:
        match = re.match(r"^(\s+)\S", line)
        if match:
            whitespace = match.group(1)
            return "\t" if whitespace.startswith("\t") else len(whitespace)
    return 2


def _json_filter(value: Any) -> str:
    """JSON-encode a value without HTML escaping."""
    return json.dumps(value, ensure_ascii=False)
