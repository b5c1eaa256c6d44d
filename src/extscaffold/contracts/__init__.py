"""Public contracts for extscaffold."""

from extscaffold.contracts.collaborators import DependencyInstaller, FileOperations, VcsInitializer, VersionProvider
from extscaffold.contracts.config import (
    NEW_PROJECT_ARCHETYPES,
    Archetype,
    ExtensionConfig,
    GeneratorSettings,
    PackageManager,
)
from extscaffold.contracts.exceptions import (
    AnswerValidationError,
    ConfigError,
    ExtScaffoldError,
    InstallError,
    MissingDependencyError,
    PreconditionError,
    PromptAborted,
    ProviderError,
    TemplateError,
)
from extscaffold.contracts.plan import (
    CopyVerbatim,
    CopyWithSubstitution,
    DeleteIf,
    FileOperation,
    MergeDocument,
    TemplatePlan,
)
from extscaffold.contracts.progress import NullPhaseProgress, PhaseProgress
from extscaffold.contracts.prompt import Choice, Gate, Prompter, PromptKind, QuestionSpec, field_equals, field_in

__all__ = [
    "NEW_PROJECT_ARCHETYPES",
    "AnswerValidationError",
    "Archetype",
    "Choice",
    "ConfigError",
    "CopyVerbatim",
    "CopyWithSubstitution",
    "DeleteIf",
    "DependencyInstaller",
    "ExtScaffoldError",
    "ExtensionConfig",
    "FileOperation",
    "FileOperations",
    "Gate",
    "GeneratorSettings",
    "InstallError",
    "MergeDocument",
    "MissingDependencyError",
    "NullPhaseProgress",
    "PackageManager",
    "PhaseProgress",
    "PreconditionError",
    "PromptAborted",
    "PromptKind",
    "Prompter",
    "ProviderError",
    "QuestionSpec",
    "TemplateError",
    "TemplatePlan",
    "VcsInitializer",
    "VersionProvider",
    "field_equals",
    "field_in",
]
