"""Template plan contracts."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from extscaffold.contracts.config import Archetype
from extscaffold.contracts.prompt import Gate


class CopyVerbatim(BaseModel):
    kind: Literal["copy-verbatim"] = "copy-verbatim"
    src: str
    dst: str

    model_config = {"frozen": True}


class CopyWithSubstitution(BaseModel):
    kind: Literal["copy-with-substitution"] = "copy-with-substitution"
    src: str
    dst: str
    context: dict[str, Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class DeleteIf(BaseModel):
    kind: Literal["delete-if"] = "delete-if"
    path: str
    predicate: Gate

    model_config = {"frozen": True}


class MergeDocument(BaseModel):
    kind: Literal["merge-document"] = "merge-document"
    path: str
    patch: dict[str, Any]

    model_config = {"frozen": True}


FileOperation = Annotated[
    CopyVerbatim | CopyWithSubstitution | DeleteIf | MergeDocument,
    Field(discriminator="kind"),
]


class TemplatePlan(BaseModel):
    """Ordered file operations for one finalized configuration.

    ``src`` paths are relative to the template root; every destination path is
    relative to the destination root. Operations run strictly in order.
    """

    archetype: Archetype
    template_dir: str
    project_dir: str
    operations: tuple[FileOperation, ...]
    install_dependencies: bool = True

    model_config = {"frozen": True}

    @property
    def written_paths(self) -> list[str]:
        paths: list[str] = []
        for op in self.operations:
            if isinstance(op, (CopyVerbatim, CopyWithSubstitution)):
                paths.append(op.dst)
            elif isinstance(op, MergeDocument):
                paths.append(op.path)
        return paths
