"""Current directory segment."""

import os
from pathlib import Path
from typing import Optional, Union

from shell_ps1.constants import SEGMENT_COLORS, SYMBOL_HOME, SegmentStyleType
from shell_ps1.models.segment import Segment
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)


def display_path(cwd: Union[str, os.PathLike], home: Optional[Union[str, os.PathLike]] = None) -> str:
    """Abbreviate ``cwd`` relative to the home directory.

    Example:
        "~" for the home directory itself, "~/src/app" below it and the
        absolute path anywhere else
    """
    cwd = Path(cwd)
    if home is not None:
        try:
            rel = cwd.relative_to(home)
        except ValueError:
            return str(cwd)
        rel = rel.as_posix()
        if rel in ("", "."):
            return SYMBOL_HOME
        return f"{SYMBOL_HOME}/{rel}"
    return str(cwd)


def current_dir(home: Optional[Union[str, os.PathLike]] = None) -> Optional[Segment]:
    """Working directory with the home prefix abbreviated, in green."""
    try:
        cwd = os.getcwd()
    except OSError as e:
        # The directory was removed from under the shell
        logger.debug(f"Error reading current directory: {e}")
        return None

    if home is None:
        try:
            home = Path.home()
        except RuntimeError:
            home = None

    return Segment(
        info=display_path(cwd, home),
        color=SEGMENT_COLORS[SegmentStyleType.DIRECTORY],
    )
