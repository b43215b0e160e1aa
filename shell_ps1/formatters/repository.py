"""Repository context formatting utilities."""

from typing import List

from shell_ps1.constants import SEGMENT_COLORS, SegmentStyleType
from shell_ps1.models.repository import (
    Ecosystem,
    RepositoryContext,
    RepositoryOperation,
    ToolchainHint,
)
from shell_ps1.models.segment import Segment
from .branch import format_branch
from .status import format_status

TOOLCHAIN_STYLES = {
    Ecosystem.RUST: SegmentStyleType.RUST,
    Ecosystem.JAVA: SegmentStyleType.JAVA,
}


def format_toolchain(hint: ToolchainHint) -> Segment:
    return Segment(
        icon=hint.icon,
        info=hint.version,
        color=SEGMENT_COLORS[TOOLCHAIN_STYLES[hint.ecosystem]],
    )


def format_operation(operation: RepositoryOperation) -> Segment:
    return Segment(info=operation.value, color=SEGMENT_COLORS[SegmentStyleType.OPERATION])


def format_repository(context: RepositoryContext) -> List[Segment]:
    """
    Format a repository context as prompt segments.

    Args:
        context: Resolved repository context

    Returns:
        Toolchain hints, then the branch, then the status token and the
        operation label when present
    """
    segments = [format_toolchain(hint) for hint in context.toolchains]
    segments.append(format_branch(context.branch))

    status = format_status(context.status)
    if status is not None:
        segments.append(status)

    if context.operation is not None:
        segments.append(format_operation(context.operation))

    return segments
