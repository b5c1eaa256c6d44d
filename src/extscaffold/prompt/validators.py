"""Answer validators and normalizers.

Validators follow questionary's ``validate`` contract: they return ``True``
for an acceptable answer and an error message otherwise.

Identifier grammar::

    identifier := run ("-" run)*        at most 214 characters
    run        := [a-z0-9]+

Lowercase letters and digits, with single hyphens between runs; no leading,
trailing or doubled hyphens.
"""

from __future__ import annotations

import re
from collections.abc import Callable

IDENTIFIER_MAX_LENGTH = 214

_IDENTIFIER_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")
_MIME_SEPARATOR_RE = re.compile(r",\s*")


def slugify(display_name: str) -> str:
    """Derive a grammar-conforming identifier from a display name.

    Returns ``""`` when the name has no letters or digits.
    """
    return _NON_SLUG_RE.sub("-", display_name.lower()).strip("-")[:IDENTIFIER_MAX_LENGTH].rstrip("-")


def validate_identifier(value: str) -> bool | str:
    candidate = value.strip()
    if not candidate:
        return "Identifier is required"
    if len(candidate) > IDENTIFIER_MAX_LENGTH:
        return f"Identifier must be at most {IDENTIFIER_MAX_LENGTH} characters"
    if not _IDENTIFIER_RE.match(candidate):
        return "Use lowercase letters, digits and single hyphens (e.g. my-extension)"
    return True


def validate_file_extension(value: str) -> bool | str:
    candidate = value.strip()
    if len(candidate) < 2 or not candidate.startswith(".") or re.search(r"[\s/\\]", candidate):
        return 'Extension should be given in the form ".ext"'
    return True


def parse_mime_types(value: str) -> list[str]:
    """Split a comma-separated answer into an ordered list of mime types."""
    return [part.strip() for part in _MIME_SEPARATOR_RE.split(value) if part.strip()]


def validate_mime_types(value: str) -> bool | str:
    if not parse_mime_types(value):
        return "Enter at least one mime type"
    return True


def require(label: str) -> Callable[[str], bool | str]:
    """Build a validator rejecting blank answers."""

    def _validate(value: str) -> bool | str:
        return bool(value.strip()) or f"{label} is required"

    return _validate
