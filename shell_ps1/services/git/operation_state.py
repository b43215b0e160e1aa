"""Detecting in-progress merges, rebases and other multi-step operations"""
import os
from typing import Optional, Union

import git

from shell_ps1.models.repository import RepositoryOperation, RepositoryState
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)

# Every sub-variant collapses to one label; CLEAN has none.
OPERATION_LABELS = {
    RepositoryState.CLEAN: None,
    RepositoryState.MERGE: RepositoryOperation.MERGE,
    RepositoryState.REVERT: RepositoryOperation.REVERT,
    RepositoryState.REVERT_SEQUENCE: RepositoryOperation.REVERT,
    RepositoryState.CHERRY_PICK: RepositoryOperation.CHERRY_PICK,
    RepositoryState.CHERRY_PICK_SEQUENCE: RepositoryOperation.CHERRY_PICK,
    RepositoryState.BISECT: RepositoryOperation.BISECT,
    RepositoryState.REBASE: RepositoryOperation.REBASE,
    RepositoryState.REBASE_INTERACTIVE: RepositoryOperation.REBASE,
    RepositoryState.REBASE_MERGE: RepositoryOperation.REBASE,
    RepositoryState.APPLY_MAILBOX: RepositoryOperation.AM,
    RepositoryState.APPLY_MAILBOX_OR_REBASE: RepositoryOperation.AM,
}


def read_repository_state(git_dir: Union[str, os.PathLike]) -> RepositoryState:
    """Read the operation state from the marker files git keeps in ``git_dir``.

    The checks run in git's own precedence order, so e.g. a rebase that
    stopped on a merge conflict is reported as a rebase.
    """
    def has_file(*parts: str) -> bool:
        return os.path.isfile(os.path.join(git_dir, *parts))

    def has_dir(*parts: str) -> bool:
        return os.path.isdir(os.path.join(git_dir, *parts))

    if has_file("rebase-merge", "interactive"):
        return RepositoryState.REBASE_INTERACTIVE
    if has_dir("rebase-merge"):
        return RepositoryState.REBASE_MERGE
    if has_file("rebase-apply", "rebasing"):
        return RepositoryState.REBASE
    if has_file("rebase-apply", "applying"):
        return RepositoryState.APPLY_MAILBOX
    if has_dir("rebase-apply"):
        return RepositoryState.APPLY_MAILBOX_OR_REBASE
    if has_file("MERGE_HEAD"):
        return RepositoryState.MERGE
    if has_file("REVERT_HEAD"):
        if has_file("sequencer", "todo"):
            return RepositoryState.REVERT_SEQUENCE
        return RepositoryState.REVERT
    if has_file("CHERRY_PICK_HEAD"):
        if has_file("sequencer", "todo"):
            return RepositoryState.CHERRY_PICK_SEQUENCE
        return RepositoryState.CHERRY_PICK
    if has_file("BISECT_LOG"):
        return RepositoryState.BISECT
    return RepositoryState.CLEAN


def operation_label(repo: git.Repo) -> Optional[RepositoryOperation]:
    """Label of the operation in progress in ``repo``, or None when quiescent."""
    state = read_repository_state(repo.git_dir)
    if state is not RepositoryState.CLEAN:
        logger.debug(f"Repository state: {state.value}")
    return OPERATION_LABELS[state]
