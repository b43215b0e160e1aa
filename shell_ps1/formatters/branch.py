"""Branch descriptor formatting utilities."""

from shell_ps1.constants import SEGMENT_COLORS, SegmentStyleType
from shell_ps1.models.repository import BranchDescriptor, Described, Detached, Named
from shell_ps1.models.segment import Segment


def format_branch_name(descriptor: BranchDescriptor) -> str:
    """Text shown for a branch descriptor."""
    if isinstance(descriptor, Named):
        return descriptor.name
    if isinstance(descriptor, Detached):
        return descriptor.short_hash
    return descriptor.text


def format_branch(descriptor: BranchDescriptor) -> Segment:
    """Branch segment; detached commits use a different color than branch names."""
    if isinstance(descriptor, Detached):
        style_type = SegmentStyleType.DETACHED
    else:
        style_type = SegmentStyleType.BRANCH
    return Segment(info=format_branch_name(descriptor), color=SEGMENT_COLORS[style_type])
