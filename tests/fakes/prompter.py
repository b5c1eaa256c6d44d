"""Prompter fake that replays a fixed sequence of raw answers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from extscaffold.contracts.exceptions import PromptAborted
from extscaffold.contracts.prompt import Prompter, QuestionSpec

ABORT = object()


class SequencePrompter(Prompter):
    """Answers questions in order; ``ABORT`` in the sequence cancels.

    Running out of answers takes the question's default.
    """

    def __init__(self, answers: Iterable[Any] = ()) -> None:
        self._answers = list(answers)
        self.asked: list[str] = []
        self.defaults: dict[str, Any] = {}
        self.rejections: list[tuple[str, str]] = []

    async def ask(self, question: QuestionSpec, default: Any) -> Any:
        self.asked.append(question.field)
        self.defaults[question.field] = default
        if not self._answers:
            return default
        answer = self._answers.pop(0)
        if answer is ABORT:
            raise PromptAborted("Aborted.")
        return answer

    def report_invalid(self, question: QuestionSpec, message: str) -> None:
        self.rejections.append((question.field, message))
