"""Immutable answer accumulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from extscaffold.contracts.config import ExtensionConfig
from extscaffold.contracts.exceptions import AnswerValidationError, ConfigError
from extscaffold.prompt.validators import validate_identifier

_LOG = logging.getLogger(__name__)

_ENVIRONMENT_FIELDS = frozenset({"dependency_versions", "engine_version"})


@dataclass(frozen=True)
class ConfigAccumulator:
    """Configuration snapshot plus the set of fields already answered.

    Every write goes through :meth:`apply`, which returns a new accumulator
    and leaves the receiver untouched.
    """

    config: ExtensionConfig = field(default_factory=ExtensionConfig)
    answered: frozenset[str] = frozenset()

    def apply(self, name: str, value: Any) -> ConfigAccumulator:
        """Record one accepted answer.

        Raises:
            ConfigError: The write is out of order or names an unknown field.
            AnswerValidationError: The value violates the configuration rules.
        """
        if name not in ExtensionConfig.model_fields or name in _ENVIRONMENT_FIELDS:
            raise ConfigError(f"{name} is not an answerable field")
        if name in self.answered:
            raise ConfigError(f"{name} has already been answered")
        if name != "archetype" and self.config.archetype is None:
            raise ConfigError(f"archetype must be chosen before {name}")

        if name == "identifier":
            verdict = validate_identifier(str(value))
            if verdict is not True:
                raise AnswerValidationError(str(verdict), field=name)
            value = str(value).strip()

        payload = self.config.model_dump()
        payload[name] = value
        try:
            config = ExtensionConfig.model_validate(payload)
        except ValidationError as exc:
            messages = "; ".join(error["msg"] for error in exc.errors())
            raise AnswerValidationError(f"invalid {name}: {messages}", field=name) from exc

        _LOG.debug("accepted %s=%r", name, value)
        return ConfigAccumulator(config=config, answered=self.answered | {name})
