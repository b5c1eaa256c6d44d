"""Exception hierarchy for extscaffold."""

from __future__ import annotations


class ExtScaffoldError(Exception):
    """Base exception for all extscaffold errors."""


class ConfigError(ExtScaffoldError):
    """Configuration assembly or settings failure."""


class AnswerValidationError(ConfigError, ValueError):
    """A submitted answer failed validation and was not recorded."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class PromptAborted(ExtScaffoldError):
    """The prompting mechanism was cancelled or gave up."""


class PreconditionError(ExtScaffoldError):
    """The destination does not satisfy the archetype's requirements."""


class TemplateError(ExtScaffoldError):
    """Template plan construction or rendering failure."""


class MissingDependencyError(TemplateError):
    """A template asked for a dependency with no known version."""

    def __init__(self, dependency: str) -> None:
        super().__init__(f"Module {dependency} is not listed in the dependency version table")
        self.dependency = dependency


class ProviderError(ExtScaffoldError):
    """Version lookup failure."""


class InstallError(ExtScaffoldError):
    """Dependency installation failure."""

    def __init__(self, message: str, *, command: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.command = command
