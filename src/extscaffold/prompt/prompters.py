"""Prompter implementations."""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from extscaffold.contracts.exceptions import ConfigError, PromptAborted
from extscaffold.contracts.prompt import Prompter, PromptKind, QuestionSpec


class QuestionaryPrompter(Prompter):
    """Interactive prompter backed by questionary.

    Questions are awaited with ``ask_async`` so they share the driver's event
    loop. ``None`` from questionary means the user pressed Ctrl-C.
    ``prompt_kwargs`` (``input``/``output``) are handed to every prompt.
    """

    def __init__(self, **prompt_kwargs: Any) -> None:
        self._prompt_kwargs = prompt_kwargs

    async def ask(self, question: QuestionSpec, default: Any) -> Any:
        import questionary

        if question.kind is PromptKind.SELECT:
            prompt = questionary.select(
                question.message,
                choices=[questionary.Choice(choice.title, value=choice.value) for choice in question.choices],
                default=default,
                **self._prompt_kwargs,
            )
        elif question.kind is PromptKind.CONFIRM:
            prompt = questionary.confirm(question.message, default=bool(default), **self._prompt_kwargs)
        else:
            prompt = questionary.text(
                question.message,
                default="" if default is None else str(default),
                validate=question.validate or (lambda _value: True),
                **self._prompt_kwargs,
            )

        answer = await prompt.ask_async()
        if answer is None:
            raise PromptAborted("Aborted.")
        return answer

    def report_invalid(self, question: QuestionSpec, message: str) -> None:
        print(f"error: {message}", file=sys.stderr)


class ScriptedPrompter(Prompter):
    """Answers questions from a mapping; absent fields take the default.

    Nobody can be asked again, so a rejected answer ends the session with a
    :class:`ConfigError`.
    """

    def __init__(self, answers: Mapping[str, Any]) -> None:
        self._answers = dict(answers)
        self.asked: list[str] = []

    async def ask(self, question: QuestionSpec, default: Any) -> Any:
        self.asked.append(question.field)
        return self._answers.get(question.field, default)

    def report_invalid(self, question: QuestionSpec, message: str) -> None:
        raise ConfigError(f"answer for {question.field} rejected: {message}")


def load_answers(path: Path) -> dict[str, Any]:
    """Read a JSON object of pre-filled answers."""
    if not path.is_file():
        raise ConfigError(f"answers file not found: {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading answers file: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in answers file: {path}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"answers file root must be an object: {path}")
    return payload
