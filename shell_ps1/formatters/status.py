"""Working tree status formatting utilities."""

from typing import Optional

from shell_ps1.constants import SEGMENT_COLORS, SegmentStyleType
from shell_ps1.models.repository import STATUS_ORDER, StatusFlag
from shell_ps1.models.segment import Segment


def format_status_token(flags: StatusFlag) -> str:
    """
    Format status flags as a bracketed token.

    Args:
        flags: Aggregated working tree flags

    Returns:
        Symbols in fixed order (! A D M ?) between brackets, or "" when clean

    Example:
        "[!M]" for a conflict plus modified files, "[M?]" for modified and untracked files
    """
    if not flags:
        return ""
    symbols = "".join(symbol for flag, symbol in STATUS_ORDER if flag in flags)
    return f"[{symbols}]"


def get_status_style_type(flags: StatusFlag) -> str:
    """Alert when anything is conflicted, neutral otherwise."""
    if StatusFlag.CONFLICTED in flags:
        return SegmentStyleType.STATUS_ALERT
    return SegmentStyleType.STATUS_NEUTRAL


def format_status(flags: StatusFlag) -> Optional[Segment]:
    """Status segment, or None for a clean working tree."""
    if not flags:
        return None
    return Segment(
        info=format_status_token(flags),
        color=SEGMENT_COLORS[get_status_style_type(flags)],
    )
