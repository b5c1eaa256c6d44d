"""Question sequencing, validation and answer accumulation."""

from extscaffold.prompt.accumulator import ConfigAccumulator
from extscaffold.prompt.prompters import QuestionaryPrompter, ScriptedPrompter, load_answers
from extscaffold.prompt.questions import ARCHETYPE_QUESTION, QUESTION_TABLE
from extscaffold.prompt.sequencer import PromptSequencer, PromptSession
from extscaffold.prompt.validators import (
    parse_mime_types,
    slugify,
    validate_file_extension,
    validate_identifier,
)

__all__ = [
    "ARCHETYPE_QUESTION",
    "QUESTION_TABLE",
    "ConfigAccumulator",
    "PromptSequencer",
    "PromptSession",
    "QuestionaryPrompter",
    "ScriptedPrompter",
    "load_answers",
    "parse_mime_types",
    "slugify",
    "validate_file_extension",
    "validate_identifier",
]
