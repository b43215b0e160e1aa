"""Git-related services for shell-ps1."""

from .branch_resolver import resolve_branch, branch_by_head, branch_by_describe
from .status_aggregator import scan_working_tree, aggregate, classify_record
from .operation_state import operation_label, read_repository_state

__all__ = [
    "resolve_branch",
    "branch_by_head",
    "branch_by_describe",
    "scan_working_tree",
    "aggregate",
    "classify_record",
    "operation_label",
    "read_repository_state",
]
