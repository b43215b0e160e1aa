"""Repository context models and related enums"""
from enum import Enum, Flag
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Named:
    """HEAD is on a branch."""
    name: str


@dataclass(frozen=True)
class Detached:
    """HEAD points directly at a commit."""
    short_hash: str


@dataclass(frozen=True)
class Described:
    """Neither a branch nor a commit could be read from HEAD."""
    text: str


BranchDescriptor = Union[Named, Detached, Described]


class StatusFlag(Flag):
    """Working tree change categories."""
    ADDED = 1
    DELETED = 2
    MODIFIED = 4
    UNTRACKED = 8
    CONFLICTED = 16

    @classmethod
    def none(cls) -> "StatusFlag":
        return cls(0)


# Rendering order and symbol of each category
STATUS_ORDER: Tuple[Tuple[StatusFlag, str], ...] = (
    (StatusFlag.CONFLICTED, "!"),
    (StatusFlag.ADDED, "A"),
    (StatusFlag.DELETED, "D"),
    (StatusFlag.MODIFIED, "M"),
    (StatusFlag.UNTRACKED, "?"),
)


class RepositoryState(Enum):
    """Multi-step operation state of a repository, including sub-variants."""
    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert-sequence"
    CHERRY_PICK = "cherry-pick"
    CHERRY_PICK_SEQUENCE = "cherry-pick-sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase-interactive"
    REBASE_MERGE = "rebase-merge"
    APPLY_MAILBOX = "apply-mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply-mailbox-or-rebase"


class RepositoryOperation(Enum):
    """Label shown for an in-progress repository operation."""
    MERGE = "merge"
    REVERT = "revert"
    CHERRY_PICK = "cherry-pick"
    BISECT = "bisect"
    REBASE = "rebase"
    AM = "am"


class Ecosystem(Enum):
    """Toolchains that can contribute a hint."""
    RUST = "rust"
    JAVA = "java"


@dataclass(frozen=True)
class ToolchainHint:
    """Resolved compiler/runtime identity of a project."""
    ecosystem: Ecosystem
    icon: str
    version: str


@dataclass(frozen=True)
class RepositoryContext:
    """Everything the prompt shows about the current repository."""
    branch: BranchDescriptor
    status: StatusFlag = field(default_factory=StatusFlag.none)
    operation: Optional[RepositoryOperation] = None
    toolchains: List[ToolchainHint] = field(default_factory=list)
