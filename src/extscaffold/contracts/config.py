"""Configuration contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class Archetype(StrEnum):
    """Project shapes the wizard can produce."""

    NEW_SERVICE_EXTENSION = "ext-command-web"
    NEW_RENDERER_EXTENSION = "ext-notebook-renderer"
    UPDATE_WITH_WEB_SUPPORT = "ext-command-web-update"

    @property
    def creates_project(self) -> bool:
        return self is not Archetype.UPDATE_WITH_WEB_SUPPORT


NEW_PROJECT_ARCHETYPES = tuple(archetype for archetype in Archetype if archetype.creates_project)


class PackageManager(StrEnum):
    NPM = "npm"
    YARN = "yarn"


RENDERER_FIELDS = frozenset(
    {
        "renderer_id",
        "renderer_display_name",
        "renderer_mime_types",
        "sample_file_extension",
    }
)


class ExtensionConfig(BaseModel):
    """Answer set for one wizard run.

    Built up one accepted answer at a time by
    :class:`~extscaffold.prompt.accumulator.ConfigAccumulator`; every update
    produces a new instance.
    """

    archetype: Archetype | None = None
    identifier: str = ""
    display_name: str = ""
    description: str = ""
    init_git: bool = False
    package_manager: PackageManager = PackageManager.NPM

    renderer_id: str | None = None
    renderer_display_name: str | None = None
    renderer_mime_types: list[str] | None = None
    include_sample_provider: bool = False
    sample_file_extension: str | None = None

    dependency_versions: dict[str, str] = Field(default_factory=dict)
    engine_version: str = ""

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_archetype_fields(self) -> ExtensionConfig:
        if self.archetype is not Archetype.NEW_RENDERER_EXTENSION:
            present = sorted(name for name in RENDERER_FIELDS if getattr(self, name) is not None)
            if present or self.include_sample_provider:
                raise ValueError(f"renderer fields are only valid for {Archetype.NEW_RENDERER_EXTENSION.value}")
        if self.sample_file_extension is not None:
            if not self.include_sample_provider:
                raise ValueError("sample_file_extension requires include_sample_provider")
            if not self.sample_file_extension.startswith("."):
                raise ValueError('sample_file_extension must be given in the form ".ext"')
        return self

    @property
    def project_dir(self) -> str:
        """Destination-relative directory the archetype writes into."""
        if self.archetype is None or not self.archetype.creates_project:
            return "."
        return self.identifier


class GeneratorSettings(BaseModel):
    """Run settings gathered from the command line."""

    destination: Path = Field(default_factory=Path.cwd)
    answers_path: Path | None = None
    offline: bool = False
    channel: str = "insider"
    skip_install: bool = False
    release_feed_url: str = "https://update.code.visualstudio.com/api/releases"
    request_timeout: float = Field(default=10.0, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_channel(self) -> GeneratorSettings:
        if self.channel not in {"stable", "insider"}:
            raise ValueError("channel must be one of: stable, insider")
        return self
