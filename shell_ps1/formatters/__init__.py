"""Formatting utilities for shell-ps1.

This package turns resolved facets into prompt segments:
- branch: Branch descriptor formatting
- status: Working tree status token and alert/neutral color
- repository: Toolchains, branch, status and operation in prompt order
"""

# Branch formatters
from .branch import format_branch, format_branch_name

# Status formatters
from .status import format_status, format_status_token, get_status_style_type

# Repository formatters
from .repository import format_operation, format_repository, format_toolchain

__all__ = [
    # Branch
    "format_branch",
    "format_branch_name",
    # Status
    "format_status",
    "format_status_token",
    "get_status_style_type",
    # Repository
    "format_operation",
    "format_repository",
    "format_toolchain",
]
