"""Phase driver for one generator run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from extscaffold.contracts.collaborators import DependencyInstaller, FileOperations, VcsInitializer, VersionProvider
from extscaffold.contracts.config import Archetype, ExtensionConfig, GeneratorSettings
from extscaffold.contracts.exceptions import (
    ConfigError,
    InstallError,
    PreconditionError,
    PromptAborted,
    ProviderError,
    TemplateError,
)
from extscaffold.contracts.plan import TemplatePlan
from extscaffold.contracts.progress import NullPhaseProgress, PhaseProgress
from extscaffold.contracts.prompt import Prompter
from extscaffold.engine.executor import WRITE_PHASE, PlanExecutor
from extscaffold.engine.summary import build_summary
from extscaffold.plan.builder import TemplatePlanBuilder
from extscaffold.plan.inspect import inspect_existing_project
from extscaffold.prompt.accumulator import ConfigAccumulator
from extscaffold.prompt.sequencer import PromptSequencer, PromptSession

_LOG = logging.getLogger(__name__)

INITIALIZE_PHASE = "Initialize"
INSTALL_PHASE = "Install"
FINALIZE_PHASE = "Finalize"


@dataclass(frozen=True)
class RunState:
    """Snapshot handed from one phase to the next.

    Once ``aborted`` is set every later phase passes the state through
    untouched.
    """

    config: ExtensionConfig = field(default_factory=ExtensionConfig)
    aborted: bool = False
    reason: str | None = None
    error: Exception | None = None
    plan: TemplatePlan | None = None
    install_error: InstallError | None = None
    git_initialized: bool = False
    summary: tuple[str, ...] = ()

    def abort(self, error: Exception) -> RunState:
        if self.aborted:
            return self
        return replace(self, aborted=True, reason=str(error), error=error)


class ExecutionDriver:
    """Run Initialize, Prompt, Plan&Write, Install and Finalize in order."""

    def __init__(
        self,
        settings: GeneratorSettings,
        versions: VersionProvider,
        prompter: Prompter,
        file_ops: FileOperations,
        installer: DependencyInstaller,
        vcs: VcsInitializer,
        *,
        builder: TemplatePlanBuilder | None = None,
        sequencer: PromptSequencer | None = None,
        progress: PhaseProgress | None = None,
        max_attempts: int | None = None,
    ) -> None:
        self._settings = settings
        self._versions = versions
        self._prompter = prompter
        self._file_ops = file_ops
        self._installer = installer
        self._vcs = vcs
        self._builder = builder or TemplatePlanBuilder()
        self._sequencer = sequencer or PromptSequencer()
        self._progress = progress or NullPhaseProgress()
        self._max_attempts = max_attempts

    async def run(self) -> RunState:
        state = RunState()
        state = await self.initialize(state)
        state = await self.prompt(state)
        state = self.write(state)
        state = await self.install(state)
        state = await self.finalize(state)
        if state.aborted:
            _LOG.debug("run aborted: %s", state.reason)
        return state

    async def initialize(self, state: RunState) -> RunState:
        if state.aborted:
            return state
        self._progress.phase_start(INITIALIZE_PHASE)
        try:
            dependency_versions = await self._versions.dependency_versions()
            engine_version = await self._versions.latest_engine_version()
        except ProviderError as exc:
            self._progress.phase_error(INITIALIZE_PHASE, exc)
            return state.abort(exc)
        self._progress.phase_done(INITIALIZE_PHASE)
        _LOG.debug("engine version %s, %d known dependencies", engine_version, len(dependency_versions))
        config = state.config.model_copy(
            update={"dependency_versions": dependency_versions, "engine_version": engine_version}
        )
        return replace(state, config=config)

    async def prompt(self, state: RunState) -> RunState:
        if state.aborted:
            return state
        session = PromptSession(self._prompter, self._sequencer, max_attempts=self._max_attempts)
        try:
            answers = await session.run(ConfigAccumulator(config=state.config))
        except (PromptAborted, ConfigError) as exc:
            return state.abort(exc)
        return replace(state, config=answers.config)

    def write(self, state: RunState) -> RunState:
        if state.aborted:
            return state
        config = state.config
        try:
            if config.archetype is Archetype.UPDATE_WITH_WEB_SUPPORT:
                config = inspect_existing_project(config, self._settings.destination)
            plan = self._builder.build(config)
        except (PreconditionError, ConfigError, TemplateError) as exc:
            return state.abort(exc)

        state = replace(state, config=config, plan=plan)
        self._progress.phase_start(WRITE_PHASE, total=len(plan.operations))
        try:
            PlanExecutor(self._file_ops, self._progress).execute(plan, config)
        except (TemplateError, OSError) as exc:
            self._progress.phase_error(WRITE_PHASE, exc)
            return state.abort(exc)
        self._progress.phase_done(WRITE_PHASE)
        return state

    async def install(self, state: RunState) -> RunState:
        if state.aborted or state.plan is None:
            return state
        if not state.plan.install_dependencies:
            return state
        if self._settings.skip_install:
            _LOG.debug("dependency install skipped")
            return state

        cwd = self._settings.destination / state.plan.project_dir
        self._progress.phase_start(INSTALL_PHASE)
        try:
            await self._installer.install(state.config.package_manager, cwd)
        except InstallError as exc:
            self._progress.phase_error(INSTALL_PHASE, exc)
            return replace(state, install_error=exc)
        self._progress.phase_done(INSTALL_PHASE)
        return state

    async def finalize(self, state: RunState) -> RunState:
        if state.aborted or state.plan is None:
            return state
        config = state.config
        git_initialized = False
        self._progress.phase_start(FINALIZE_PHASE)
        if config.archetype is not None and config.archetype.creates_project and config.init_git:
            git_initialized = await self._vcs.init(self._settings.destination / state.plan.project_dir)
        self._progress.phase_done(FINALIZE_PHASE)

        summary = build_summary(config, state.plan, self._settings, state.install_error)
        return replace(state, git_initialized=git_initialized, summary=tuple(summary))
