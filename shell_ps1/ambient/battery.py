"""Battery charge segment."""

import math
from typing import Optional

import psutil

from shell_ps1.constants import (
    ICON_CHARGING,
    ICON_ON_BATTERY,
    SEGMENT_STYLES,
    SegmentStyleType,
)
from shell_ps1.models.segment import Segment
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)


def format_time_left(seconds: int) -> str:
    """Format seconds as " 1h 05m 09s", dropping the hours when there are none."""
    hours, rest = divmod(int(seconds), 3600)
    mins, secs = divmod(rest, 60)
    text = f" {hours}h" if hours > 0 else ""
    return f"{text} {mins:02}m {secs:02}s"


def battery_status() -> Optional[Segment]:
    """Charge level and time left, unless there is no battery or it is full."""
    try:
        battery = psutil.sensors_battery()
    except Exception as e:
        logger.debug(f"Error reading battery sensors: {e}")
        return None

    if battery is None:
        return None

    charge = math.ceil(battery.percent)
    if charge >= 100:
        return None

    # psutil has no charging flag; plugged in below full counts as charging
    if battery.power_plugged:
        icon = ICON_CHARGING
    elif battery.power_plugged is False:
        icon = ICON_ON_BATTERY
    else:
        # Power source unknown
        return None

    info = f"{charge}%"
    secs_left = battery.secsleft
    if (
        not battery.power_plugged
        and secs_left not in (psutil.POWER_TIME_UNKNOWN, psutil.POWER_TIME_UNLIMITED)
        and secs_left >= 0
    ):
        info += format_time_left(secs_left)

    return Segment(icon=icon, info=info, style=SEGMENT_STYLES[SegmentStyleType.BATTERY])
