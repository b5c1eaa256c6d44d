"""Prompt sequencing over the declarative question table."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from extscaffold.contracts.config import Archetype
from extscaffold.contracts.exceptions import AnswerValidationError, PromptAborted
from extscaffold.contracts.prompt import Prompter, QuestionSpec
from extscaffold.prompt.accumulator import ConfigAccumulator
from extscaffold.prompt.questions import ARCHETYPE_QUESTION, QUESTION_TABLE

_LOG = logging.getLogger(__name__)


class PromptSequencer:
    """Decide which question comes next for an accumulator snapshot."""

    def __init__(
        self,
        table: Mapping[Archetype, tuple[QuestionSpec, ...]] | None = None,
        archetype_question: QuestionSpec = ARCHETYPE_QUESTION,
    ) -> None:
        self._table = table if table is not None else QUESTION_TABLE
        self._archetype_question = archetype_question

    def next(self, state: ConfigAccumulator) -> QuestionSpec | None:
        config = state.config
        if config.archetype is None:
            return self._archetype_question
        for question in self._table.get(config.archetype, ()):
            if question.field in state.answered:
                continue
            if not question.is_enabled(config):
                continue
            return question
        return None

    def remaining(self, state: ConfigAccumulator) -> list[str]:
        """Fields still eligible to be asked, in order."""
        if state.config.archetype is None:
            return [self._archetype_question.field]
        return [
            question.field
            for question in self._table.get(state.config.archetype, ())
            if question.field not in state.answered and question.is_enabled(state.config)
        ]


class PromptSession:
    """Drive a sequencer to completion against a prompter.

    A rejected answer re-issues the same question. Cancellation, or running
    out of ``max_attempts`` on one question, raises :class:`PromptAborted`
    and no further question is asked.
    """

    def __init__(
        self,
        prompter: Prompter,
        sequencer: PromptSequencer | None = None,
        *,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._prompter = prompter
        self._sequencer = sequencer or PromptSequencer()
        self._max_attempts = max_attempts

    async def run(self, state: ConfigAccumulator) -> ConfigAccumulator:
        while (question := self._sequencer.next(state)) is not None:
            state = await self._ask_until_valid(question, state)
        return state

    async def _ask_until_valid(self, question: QuestionSpec, state: ConfigAccumulator) -> ConfigAccumulator:
        attempts = 0
        default = question.resolve_default(state.config)
        while True:
            attempts += 1
            raw = await self._prompter.ask(question, default)
            try:
                return state.apply(question.field, question.accept(raw))
            except AnswerValidationError as exc:
                _LOG.debug("rejected answer for %s: %s", question.field, exc)
                if self._max_attempts is not None and attempts >= self._max_attempts:
                    raise PromptAborted(f"no valid answer for {question.field} after {attempts} attempts") from exc
                self._prompter.report_invalid(question, str(exc))
