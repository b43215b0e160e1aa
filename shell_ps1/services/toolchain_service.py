"""Service for detecting project toolchains in a working tree"""

import os
from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING

from shell_ps1.constants import ICON_JAVA, ICON_RUST, JAVA_MARKERS, RUST_MARKER
from shell_ps1.exceptions import ProbeError
from shell_ps1.models.repository import Ecosystem, ToolchainHint
from shell_ps1.utils.process import run_exec
from shell_ps1.logging_config import get_logger

if TYPE_CHECKING:
    from shell_ps1.config import Config

logger = get_logger(__name__)


class ToolchainService:
    """Service for reporting the Rust compiler and Java runtime of a project."""

    def __init__(self, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
        """
        self.config = config
        self.rustc = config.get("rustc", "rustc")
        self.java_home = config.get("java_home")
        self.probe_timeout = config.get("probe_timeout")

    def detect(self, workdir: Union[str, os.PathLike]) -> List[ToolchainHint]:
        """Collect every toolchain hint for the project rooted at ``workdir``."""
        hints = []
        for probe in (self.rust_version, self.java_version):
            hint = probe(workdir)
            if hint is not None:
                hints.append(hint)
        return hints

    def rust_version(self, workdir: Union[str, os.PathLike]) -> Optional[ToolchainHint]:
        """Report `rustc --version` when the project has a Cargo manifest."""
        if not has_file(workdir, RUST_MARKER):
            return None

        try:
            result = run_exec([self.rustc, "--version"], timeout=self.probe_timeout)
        except ProbeError as e:
            logger.debug(f"Error probing rustc: {e}")
            return None

        if not result.success:
            logger.debug(f"{self.rustc} --version exited with {result.exit_code}")
            return None

        version = parse_rustc_version(result.stdout)
        if version is None:
            logger.debug(f"Unrecognised rustc output: {result.stdout!r}")
            return None

        return ToolchainHint(Ecosystem.RUST, ICON_RUST, version)

    def java_version(self, workdir: Union[str, os.PathLike]) -> Optional[ToolchainHint]:
        """Report the JAVA_HOME directory name when the project has a Java build file."""
        if not any(has_file(workdir, marker) for marker in JAVA_MARKERS):
            return None

        if not self.java_home:
            logger.debug("Java project found but JAVA_HOME is not set")
            return None

        label = java_home_label(self.java_home)
        if label is None:
            return None

        return ToolchainHint(Ecosystem.JAVA, ICON_JAVA, label)


def has_file(workdir: Union[str, os.PathLike], name: str) -> bool:
    """Check that ``name`` exists in ``workdir`` and is a regular file."""
    return Path(workdir, name).is_file()


def parse_rustc_version(output: str) -> Optional[str]:
    """Second token of the first line, e.g. ``rustc 1.79.0 (129f3b996 2024-06-10)``."""
    lines = output.splitlines()
    if not lines:
        return None
    tokens = lines[0].split()
    if len(tokens) < 2:
        return None
    return tokens[1]


def java_home_label(java_home: Union[str, os.PathLike]) -> Optional[str]:
    """Name of the JDK directory, following JAVA_HOME if it is a symlink."""
    path = Path(java_home)
    try:
        if path.is_symlink():
            path = path.resolve()
    except (OSError, RuntimeError) as e:
        logger.debug(f"Error resolving JAVA_HOME {java_home}: {e}")
        return None

    name = path.name
    if not name or name == "..":
        return None
    return name
