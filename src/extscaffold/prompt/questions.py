"""Declarative question table.

Each archetype maps to a fixed, ordered tuple of questions. Order is a
dependency order: derived defaults only read fields asked earlier.
"""

from __future__ import annotations

from extscaffold.contracts.config import NEW_PROJECT_ARCHETYPES, Archetype, ExtensionConfig, PackageManager
from extscaffold.contracts.prompt import Choice, PromptKind, QuestionSpec, field_equals, field_in
from extscaffold.prompt.validators import (
    parse_mime_types,
    require,
    slugify,
    validate_file_extension,
    validate_identifier,
    validate_mime_types,
)

ARCHETYPE_CHOICES: tuple[Choice, ...] = (
    Choice("New Web Extension (TypeScript)", Archetype.NEW_SERVICE_EXTENSION),
    Choice("New Notebook Renderer (TypeScript)", Archetype.NEW_RENDERER_EXTENSION),
    Choice("Add Web bits to existing extension (TypeScript)", Archetype.UPDATE_WITH_WEB_SUPPORT),
)

ARCHETYPE_QUESTION = QuestionSpec(
    field="archetype",
    kind=PromptKind.SELECT,
    message="What type of extension do you want to create?",
    choices=ARCHETYPE_CHOICES,
    default=Archetype.NEW_SERVICE_EXTENSION,
    parse=Archetype,
)


def _identifier_default(config: ExtensionConfig) -> str:
    return config.identifier or slugify(config.display_name)


_NEW_PROJECT_GATE = field_in("archetype", NEW_PROJECT_ARCHETYPES)

DISPLAY_NAME = QuestionSpec(
    field="display_name",
    kind=PromptKind.TEXT,
    message="What's the name of your extension?",
    default="",
)

IDENTIFIER = QuestionSpec(
    field="identifier",
    kind=PromptKind.TEXT,
    message="What's the identifier of your extension?",
    default="",
    default_from=_identifier_default,
    validate=validate_identifier,
)

DESCRIPTION = QuestionSpec(
    field="description",
    kind=PromptKind.TEXT,
    message="What's the description of your extension?",
    default="",
)

INIT_GIT = QuestionSpec(
    field="init_git",
    kind=PromptKind.CONFIRM,
    message="Initialize a git repository?",
    default=True,
    gate=_NEW_PROJECT_GATE,
)

RENDERER_ID = QuestionSpec(
    field="renderer_id",
    kind=PromptKind.TEXT,
    message="What's the ID for your renderer?",
    default_from=lambda config: config.identifier,
    validate=require("Renderer ID"),
)

RENDERER_DISPLAY_NAME = QuestionSpec(
    field="renderer_display_name",
    kind=PromptKind.TEXT,
    message="What's your renderer display name?",
    default_from=lambda config: config.display_name,
    validate=require("Renderer display name"),
)

RENDERER_MIME_TYPES = QuestionSpec(
    field="renderer_mime_types",
    kind=PromptKind.TEXT,
    message="What mime types will your renderer handle? (separate multiple by commas)",
    default="application/json",
    validate=validate_mime_types,
    parse=parse_mime_types,
)

INCLUDE_SAMPLE_PROVIDER = QuestionSpec(
    field="include_sample_provider",
    kind=PromptKind.CONFIRM,
    message="Should we generate a test notebook content provider and kernel?",
    default=False,
)

SAMPLE_FILE_EXTENSION = QuestionSpec(
    field="sample_file_extension",
    kind=PromptKind.TEXT,
    message="What file extension should the content provider handle?",
    default=".sample-json-notebook",
    validate=validate_file_extension,
    gate=field_equals("include_sample_provider", True),
)

PACKAGE_MANAGER = QuestionSpec(
    field="package_manager",
    kind=PromptKind.SELECT,
    message="Which package manager to use?",
    choices=tuple(Choice(manager.value, manager) for manager in PackageManager),
    default=PackageManager.NPM,
    parse=PackageManager,
    gate=_NEW_PROJECT_GATE,
)

_IDENTITY = (DISPLAY_NAME, IDENTIFIER, DESCRIPTION)

QUESTION_TABLE: dict[Archetype, tuple[QuestionSpec, ...]] = {
    Archetype.NEW_SERVICE_EXTENSION: (*_IDENTITY, INIT_GIT, PACKAGE_MANAGER),
    Archetype.NEW_RENDERER_EXTENSION: (
        *_IDENTITY,
        INIT_GIT,
        RENDERER_ID,
        RENDERER_DISPLAY_NAME,
        RENDERER_MIME_TYPES,
        INCLUDE_SAMPLE_PROVIDER,
        SAMPLE_FILE_EXTENSION,
        PACKAGE_MANAGER,
    ),
    # Identity comes from the existing manifest; the package manager is derived.
    Archetype.UPDATE_WITH_WEB_SUPPORT: (),
}
