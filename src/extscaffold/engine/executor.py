"""Ordered execution of a template plan."""

from __future__ import annotations

import logging

from extscaffold.contracts.collaborators import FileOperations
from extscaffold.contracts.config import ExtensionConfig
from extscaffold.contracts.plan import CopyVerbatim, CopyWithSubstitution, DeleteIf, MergeDocument, TemplatePlan
from extscaffold.contracts.progress import NullPhaseProgress, PhaseProgress

_LOG = logging.getLogger(__name__)

WRITE_PHASE = "Write"


class PlanExecutor:
    def __init__(self, file_ops: FileOperations, progress: PhaseProgress | None = None) -> None:
        self._file_ops = file_ops
        self._progress = progress or NullPhaseProgress()

    def execute(self, plan: TemplatePlan, config: ExtensionConfig) -> None:
        """Run every operation in order; the first failure stops the run."""
        for op in plan.operations:
            if isinstance(op, CopyVerbatim):
                self._file_ops.copy(op.src, op.dst)
            elif isinstance(op, CopyWithSubstitution):
                self._file_ops.copy_template(op.src, op.dst, op.context)
            elif isinstance(op, DeleteIf):
                if op.predicate.evaluate(config):
                    self._file_ops.delete(op.path)
                else:
                    _LOG.debug("kept %s", op.path)
            elif isinstance(op, MergeDocument):
                self._file_ops.merge_json(op.path, op.patch)
            else:  # pragma: no cover
                raise TypeError(f"unsupported operation: {op!r}")
            self._progress.item_done(WRITE_PHASE)
