"""Ambient prompt segments: clock, directory, battery and load.

Each collector does a single lookup and returns a Segment, or None when
there is nothing to show.
"""

from .clock import current_time
from .directory import current_dir
from .battery import battery_status
from .load import load_factor

__all__ = ["current_time", "current_dir", "battery_status", "load_factor"]
