"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from extscaffold.cli.parser import build_parser
from extscaffold.contracts.collaborators import VersionProvider
from extscaffold.contracts.config import GeneratorSettings
from extscaffold.contracts.exceptions import (
    ConfigError,
    PreconditionError,
    PromptAborted,
    ProviderError,
)
from extscaffold.contracts.prompt import Prompter
from extscaffold.engine.driver import ExecutionDriver, RunState
from extscaffold.fileops.local import LocalFileOperations
from extscaffold.progress import RichPhaseProgress
from extscaffold.prompt.prompters import QuestionaryPrompter, ScriptedPrompter, load_answers
from extscaffold.providers.installer import GitInitializer, SubprocessInstaller
from extscaffold.providers.versions import ReleaseFeedVersionProvider, StaticVersionProvider

WELCOME = "Welcome to the [bold]Visual Studio Code Insiders Extension[/] generator!"


def build_settings(args: argparse.Namespace) -> GeneratorSettings:
    try:
        return GeneratorSettings(
            destination=Path(args.destination).resolve(),
            answers_path=Path(args.answers) if args.answers else None,
            offline=args.offline,
            channel=args.channel,
            skip_install=args.skip_install,
        )
    except ValidationError as exc:
        raise ConfigError(f"invalid settings: {exc}") from exc


def build_prompter(settings: GeneratorSettings) -> Prompter:
    if settings.answers_path is not None:
        return ScriptedPrompter(load_answers(settings.answers_path))
    return QuestionaryPrompter()


def build_version_provider(settings: GeneratorSettings) -> VersionProvider:
    if settings.offline:
        return StaticVersionProvider()
    return ReleaseFeedVersionProvider(
        channel=settings.channel,
        feed_url=settings.release_feed_url,
        timeout=settings.request_timeout,
    )


def build_driver(settings: GeneratorSettings, console: Console) -> ExecutionDriver:
    return ExecutionDriver(
        settings,
        build_version_provider(settings),
        build_prompter(settings),
        LocalFileOperations(settings.destination),
        SubprocessInstaller(),
        GitInitializer(),
        progress=RichPhaseProgress(console),
    )


def exit_code_for(state: RunState) -> int:
    """Map a finished run to the process exit status."""
    if not state.aborted:
        return 5 if state.install_error is not None else 0
    error = state.error
    if isinstance(error, PromptAborted):
        return 2
    if isinstance(error, (PreconditionError, ConfigError)):
        return 3
    if isinstance(error, ProviderError):
        return 4
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    console = Console(stderr=True)
    try:
        settings = build_settings(args)
        driver = build_driver(settings, console)
        console.print(WELCOME)
        state = asyncio.run(driver.run())
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except KeyboardInterrupt:
        print("\nAborted.")
        return 2
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if state.aborted:
        if isinstance(state.error, PromptAborted):
            print("Aborted.")
        else:
            print(f"error: {state.reason}", file=sys.stderr)
        return exit_code_for(state)

    if state.install_error is not None:
        print(f"error: {state.install_error}", file=sys.stderr)
    print("\n".join(state.summary))
    return exit_code_for(state)


__all__ = ["build_driver", "build_settings", "exit_code_for", "main"]
