"""Naming the current checkout of a repository"""
from typing import Optional

import git

from shell_ps1.constants import SHORT_HASH_LENGTH, UNKNOWN_BRANCH
from shell_ps1.models.repository import BranchDescriptor, Described, Detached, Named
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)

BRANCH_PREFIX = "refs/heads/"


def resolve_branch(repo: git.Repo) -> BranchDescriptor:
    """Name the current checkout.

    Reading HEAD is tried first. ``git describe`` is only consulted when HEAD
    cannot be read, e.g. in a repository without commits, and it falls back
    to the "(unknown)" sentinel itself, so a descriptor is always returned.
    """
    descriptor = branch_by_head(repo)
    if descriptor is not None:
        return descriptor
    return branch_by_describe(repo)


def branch_by_head(repo: git.Repo) -> Optional[BranchDescriptor]:
    """Resolve HEAD to a branch name or a short commit hash.

    Returns:
        Named or Detached, or None if HEAD does not point at a commit
    """
    try:
        head = repo.head
        if not head.is_valid():
            logger.debug("HEAD does not point at a commit")
            return None

        if head.is_detached:
            return Detached(head.object.hexsha[:SHORT_HASH_LENGTH])

        # Symbolic HEAD: follow it one level
        ref = head.reference
        if ref.path.startswith(BRANCH_PREFIX):
            return Named(ref.name)

        # Symbolic HEAD onto something that is not a branch
        return Detached(ref.object.hexsha[:SHORT_HASH_LENGTH])
    except Exception as e:
        logger.debug(f"Error reading HEAD: {e}")
        return None


def branch_by_describe(repo: git.Repo) -> Described:
    """Describe HEAD against all refs, accepting exact matches only."""
    try:
        text = repo.git.describe("--all", "--candidates=0")
    except git.exc.GitError as e:
        logger.debug(f"git describe failed: {e}")
        return Described(UNKNOWN_BRANCH)

    text = text.strip()
    return Described(text or UNKNOWN_BRANCH)
