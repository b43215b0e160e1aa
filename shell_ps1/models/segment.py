"""Prompt segment model."""

from dataclasses import dataclass
from typing import Optional

from rich.text import Text


@dataclass(frozen=True)
class Segment:
    """One space-separated piece of the prompt line."""

    info: Optional[str] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    style: Optional[str] = None

    def to_text(self) -> Text:
        """Render the segment as Rich text: the icon, then the styled info."""
        text = Text()
        if self.icon:
            text.append(self.icon)
            if self.info:
                text.append(" ")
        if self.info:
            rich_style = " ".join(part for part in (self.style, self.color) if part)
            text.append(self.info, style=rich_style or None)
        return text

    def __str__(self) -> str:
        return self.to_text().plain
