"""Prompt contracts: question specs, gates and the prompter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel

from extscaffold.contracts.config import ExtensionConfig
from extscaffold.contracts.exceptions import AnswerValidationError

Validator = Callable[[Any], bool | str]


class PromptKind(StrEnum):
    TEXT = "text"
    SELECT = "select"
    CONFIRM = "confirm"


class Gate(BaseModel):
    """Declarative predicate over a configuration field.

    Holds when the field's current value is one of ``one_of``. Used both to
    skip questions and to decide ``delete-if`` operations.
    """

    field: str
    one_of: tuple[Any, ...]

    model_config = {"frozen": True}

    def evaluate(self, config: ExtensionConfig) -> bool:
        return getattr(config, self.field) in self.one_of


def field_equals(field: str, value: Any) -> Gate:
    return Gate(field=field, one_of=(value,))


def field_in(field: str, values: tuple[Any, ...]) -> Gate:
    return Gate(field=field, one_of=tuple(values))


@dataclass(frozen=True)
class Choice:
    title: str
    value: Any


@dataclass(frozen=True)
class QuestionSpec:
    """One entry of the question table."""

    field: str
    kind: PromptKind
    message: str
    choices: tuple[Choice, ...] = ()
    default: Any = None
    default_from: Callable[[ExtensionConfig], Any] | None = None
    validate: Validator | None = None
    parse: Callable[[Any], Any] | None = None
    gate: Gate | None = None

    def is_enabled(self, config: ExtensionConfig) -> bool:
        return self.gate is None or self.gate.evaluate(config)

    def resolve_default(self, config: ExtensionConfig) -> Any:
        if self.default_from is not None:
            derived = self.default_from(config)
            if derived not in (None, ""):
                return derived
        return self.default

    def accept(self, raw: Any) -> Any:
        """Validate and normalize a raw answer.

        Raises:
            AnswerValidationError: The answer must not be recorded.
        """
        if self.kind is PromptKind.TEXT:
            if isinstance(raw, (list, tuple)):
                raw = ", ".join(str(item) for item in raw)
            raw = "" if raw is None else str(raw).strip()
        elif self.kind is PromptKind.CONFIRM and not isinstance(raw, bool):
            raise AnswerValidationError(f"{self.field} expects yes or no", field=self.field)
        elif self.kind is PromptKind.SELECT and raw not in {choice.value for choice in self.choices}:
            raise AnswerValidationError(f"{raw!r} is not a valid choice for {self.field}", field=self.field)

        if self.validate is not None:
            verdict = self.validate(raw)
            if verdict is not True:
                message = verdict if isinstance(verdict, str) else f"invalid value for {self.field}"
                raise AnswerValidationError(message, field=self.field)
        return self.parse(raw) if self.parse is not None else raw


class Prompter(ABC):
    """Mechanism that puts a question to the user."""

    @abstractmethod
    async def ask(self, question: QuestionSpec, default: Any) -> Any:
        """Return the raw answer.

        Raises:
            PromptAborted: The session was cancelled.
        """

    def report_invalid(self, question: QuestionSpec, message: str) -> None:
        """Tell the user why an answer was rejected before it is asked again."""
        del question, message
