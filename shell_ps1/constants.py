"""Shared constants for shell-ps1."""

from typing import Dict, Tuple


# Palette (xterm 256-color indexes, as Rich color names)
BLUE = "color(33)"
CYAN = "color(37)"
VIOLET = "color(61)"
GREEN = "color(64)"
RED = "color(124)"
PURPLE = "color(125)"
YELLOW = "color(136)"
ORANGE = "color(166)"

DIM = "dim"


# Style types for prompt segments
class SegmentStyleType:
    """Style types for prompt segments."""

    CLOCK = "clock"
    BATTERY = "battery"
    DIRECTORY = "directory"
    BRANCH = "branch"
    DETACHED = "detached"
    STATUS_NEUTRAL = "status-neutral"
    STATUS_ALERT = "status-alert"
    OPERATION = "operation"
    RUST = "rust"
    JAVA = "java"
    CONTINUATION = "continuation"


# Presentation table: segment type -> color
SEGMENT_COLORS: Dict[str, str] = {
    SegmentStyleType.DIRECTORY: GREEN,
    SegmentStyleType.BRANCH: VIOLET,
    SegmentStyleType.DETACHED: PURPLE,
    SegmentStyleType.STATUS_NEUTRAL: BLUE,
    SegmentStyleType.STATUS_ALERT: RED,
    SegmentStyleType.OPERATION: PURPLE,
    SegmentStyleType.RUST: ORANGE,
    SegmentStyleType.JAVA: CYAN,
    SegmentStyleType.CONTINUATION: YELLOW,
}

SEGMENT_STYLES: Dict[str, str] = {
    SegmentStyleType.CLOCK: DIM,
    SegmentStyleType.BATTERY: DIM,
}


# Symbol constants
SYMBOL_PROMPT = "∵ "
SYMBOL_CONTINUATION = "→ "
SYMBOL_HOME = "~"

ICON_RUST = "🦀"
ICON_JAVA = "☕️"
ICON_CHARGING = "⚡️"
ICON_ON_BATTERY = "🔋"

# Load factor thresholds, highest first: (load per physical core, icon)
LOAD_ICONS: Tuple[Tuple[float, str], ...] = (
    (4.0, "😰"),
    (3.0, "😥"),
    (2.0, "😓"),
    (1.0, "😅"),
)


# Branch resolution
SHORT_HASH_LENGTH = 9
UNKNOWN_BRANCH = "(unknown)"


# Toolchain markers
RUST_MARKER = "Cargo.toml"
JAVA_MARKERS: Tuple[str, ...] = (
    "build.gradle",
    "pom.xml",
    "build.gradle.kts",
    "build.sbt",
    "build.xml",
    ".java-version",
)

