"""System load segment."""

from typing import Optional

import psutil

from shell_ps1.constants import LOAD_ICONS
from shell_ps1.models.segment import Segment
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)


def physical_cores() -> int:
    return psutil.cpu_count(logical=False) or psutil.cpu_count() or 1


def load_icon(factor: float) -> Optional[str]:
    """Icon for a load-per-core factor; None while the machine keeps up."""
    for threshold, icon in LOAD_ICONS:
        if factor > threshold:
            return icon
    return None


def load_factor() -> Optional[Segment]:
    """One-minute load average per physical core, shown only when congested."""
    try:
        load = psutil.getloadavg()[0]
    except (OSError, AttributeError) as e:
        logger.debug(f"Error reading load average: {e}")
        return None

    icon = load_icon(load / physical_cores())
    if icon is None:
        return None
    return Segment(icon=icon)
