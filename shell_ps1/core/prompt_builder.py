"""Core functionality for shell-ps1"""

import sys
from typing import List, Optional, Union

from rich.console import Console
from rich.text import Text

from shell_ps1.ambient import battery_status, current_dir, current_time, load_factor
from shell_ps1.config import Config
from shell_ps1.constants import (
    SEGMENT_COLORS,
    SYMBOL_CONTINUATION,
    SYMBOL_PROMPT,
    SegmentStyleType,
)
from shell_ps1.formatters import format_repository
from shell_ps1.models.segment import Segment
from shell_ps1.services.context_service import RepositoryContextService
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)


def make_console(file=None) -> Console:
    """Console writing raw ANSI for the shell to print as the prompt."""
    return Console(
        file=file or sys.stdout,
        force_terminal=True,
        color_system="256",
        highlight=False,
        emoji=False,
        markup=False,
    )


class PromptBuilder:
    """Builds the primary (PS1) and continuation (PS2) prompts."""

    def __init__(self, config: Union[Config, dict, None] = None):
        """Initialize PromptBuilder.

        Args:
            config: Configuration dict or Config object (default: from environment)
        """
        if config is None:
            self.config = Config.from_env()
        elif isinstance(config, dict):
            self.config = Config.from_dict(config)
        else:
            self.config = config
        self.context_service = RepositoryContextService(self.config)

    def repository_segments(self) -> List[Segment]:
        """Segments for the repository the shell is in, if any."""
        context = self.context_service.resolve()
        if context is None:
            return []
        return format_repository(context)

    def segments(self) -> List[Segment]:
        """Every PS1 segment in display order; absent facets are skipped."""
        candidates: List[Optional[Segment]] = [
            current_time(self.config.time_format),
            battery_status(),
            current_dir(),
        ]
        candidates.extend(self.repository_segments())
        candidates.append(load_factor())
        return [segment for segment in candidates if segment is not None]

    def build_ps1(self) -> Text:
        """Primary prompt: a blank line, the status line, then the prompt symbol."""
        line = Text(" ").join(segment.to_text() for segment in self.segments())
        return Text.assemble("\n", line, "\n", SYMBOL_PROMPT)

    def build_ps2(self) -> Text:
        """Continuation prompt."""
        return Text(SYMBOL_CONTINUATION, style=SEGMENT_COLORS[SegmentStyleType.CONTINUATION])

    def render(self, continuation: bool = False, console: Optional[Console] = None) -> None:
        """Write the requested prompt without a trailing newline."""
        console = console or make_console()
        prompt = self.build_ps2() if continuation else self.build_ps1()
        console.print(prompt, end="", soft_wrap=True)
