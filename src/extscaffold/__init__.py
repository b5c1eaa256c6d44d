"""Public API surface for extscaffold."""

__version__ = "0.1.0"

from extscaffold.contracts.collaborators import DependencyInstaller, FileOperations, VcsInitializer, VersionProvider
from extscaffold.contracts.config import Archetype, ExtensionConfig, GeneratorSettings, PackageManager
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
from extscaffold.contracts.plan import TemplatePlan
from extscaffold.engine import ExecutionDriver, PlanExecutor, RunState
from extscaffold.fileops import LocalFileOperations
from extscaffold.plan import TemplatePlanBuilder
from extscaffold.prompt import ConfigAccumulator, PromptSequencer, PromptSession, QuestionaryPrompter, ScriptedPrompter
from extscaffold.providers import (
    GitInitializer,
    ReleaseFeedVersionProvider,
    StaticVersionProvider,
    SubprocessInstaller,
)

__all__ = [
    "AnswerValidationError",
    "Archetype",
    "ConfigAccumulator",
    "ConfigError",
    "DependencyInstaller",
    "ExecutionDriver",
    "ExtScaffoldError",
    "ExtensionConfig",
    "FileOperations",
    "GeneratorSettings",
    "GitInitializer",
    "InstallError",
    "LocalFileOperations",
    "MissingDependencyError",
    "PackageManager",
    "PlanExecutor",
    "PreconditionError",
    "PromptAborted",
    "PromptSequencer",
    "PromptSession",
    "ProviderError",
    "QuestionaryPrompter",
    "ReleaseFeedVersionProvider",
    "RunState",
    "ScriptedPrompter",
    "StaticVersionProvider",
    "SubprocessInstaller",
    "TemplateError",
    "TemplatePlan",
    "TemplatePlanBuilder",
    "VcsInitializer",
    "VersionProvider",
    "__version__",
]
