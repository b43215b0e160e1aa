"""Wall-clock segment."""

from datetime import datetime
from typing import Optional

from shell_ps1.constants import SEGMENT_STYLES, SegmentStyleType
from shell_ps1.models.segment import Segment


def current_time(fmt: str = "%H:%M:%S", now: Optional[datetime] = None) -> Segment:
    """Local time, dimmed."""
    now = now or datetime.now()
    return Segment(info=now.strftime(fmt), style=SEGMENT_STYLES[SegmentStyleType.CLOCK])
