"""File-operation collaborator implementations."""

from extscaffold.fileops.local import DEFAULT_TEMPLATE_ROOT, LocalFileOperations
from extscaffold.fileops.merge import deep_merge

__all__ = ["DEFAULT_TEMPLATE_ROOT", "LocalFileOperations", "deep_merge"]
