"""Data models for shell-ps1."""

from .repository import (
    BranchDescriptor,
    Described,
    Detached,
    Ecosystem,
    Named,
    RepositoryContext,
    RepositoryOperation,
    RepositoryState,
    StatusFlag,
    STATUS_ORDER,
    ToolchainHint,
)
from .segment import Segment

__all__ = [
    "BranchDescriptor",
    "Described",
    "Detached",
    "Ecosystem",
    "Named",
    "RepositoryContext",
    "RepositoryOperation",
    "RepositoryState",
    "StatusFlag",
    "STATUS_ORDER",
    "ToolchainHint",
    "Segment",
]
