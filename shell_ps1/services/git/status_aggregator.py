"""Folding working tree changes into a small set of flags"""
from typing import Iterable

import git

from shell_ps1.models.repository import StatusFlag
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)

# Porcelain XY pairs for unmerged paths
CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})
UNTRACKED_CODE = "??"
IGNORED_CODE = "!!"

# Single column change code -> category. Unchanged (" ") and copied ("C")
# paths contribute nothing.
CHANGE_FLAGS = {
    "A": StatusFlag.ADDED,
    "D": StatusFlag.DELETED,
    "M": StatusFlag.MODIFIED,
    "R": StatusFlag.MODIFIED,
    "T": StatusFlag.MODIFIED,
}


def classify_change(code: str) -> StatusFlag:
    """Map one porcelain column to its category (or no flag)."""
    return CHANGE_FLAGS.get(code, StatusFlag.none())


def classify_record(xy: str) -> StatusFlag:
    """Map a porcelain XY pair to the categories it contributes.

    X is the HEAD vs index change and Y is the index vs working tree change;
    both are counted.
    """
    if xy in CONFLICT_CODES:
        return StatusFlag.CONFLICTED
    if xy == UNTRACKED_CODE:
        return StatusFlag.UNTRACKED
    if xy == IGNORED_CODE or len(xy) != 2:
        return StatusFlag.none()
    return classify_change(xy[0]) | classify_change(xy[1])


def aggregate(codes: Iterable[str]) -> StatusFlag:
    """OR together the categories of every change record."""
    flags = StatusFlag.none()
    for xy in codes:
        flags |= classify_record(xy)
    return flags


def scan_working_tree(repo: git.Repo) -> StatusFlag:
    """Scan the working tree of ``repo``.

    Returns:
        StatusFlag, empty when the tree is clean or the scan failed
    """
    try:
        output = repo.git.status("--porcelain", "--untracked-files=normal")
    except Exception as e:
        logger.debug(f"Error reading working tree status: {e}")
        return StatusFlag.none()

    return aggregate(line[:2] for line in output.splitlines() if line)
