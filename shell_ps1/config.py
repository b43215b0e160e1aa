"""Configuration handling for shell-ps1"""

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from shell_ps1.exceptions import ConfigError
from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)

TRUTHY_VALUES = ("1", "true", "yes", "on")
DISABLED_TIMEOUT_VALUES = ("0", "none", "off")


@dataclass
class Config:
    """Configuration for shell-ps1 with validation.

    Everything comes from the environment; there is no config file.
    """

    # Toolchain probes
    rustc: str = "rustc"
    java_home: Optional[str] = None
    probe_timeout: Optional[float] = 2.0  # seconds, None = wait forever

    # Presentation
    time_format: str = "%H:%M:%S"

    # Diagnostics
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_rustc()
        self._validate_probe_timeout()
        self._validate_time_format()

    def _validate_rustc(self):
        """Validate rustc is not empty."""
        if not self.rustc or not self.rustc.strip():
            raise ConfigError("rustc", "compiler command cannot be empty")
        self.rustc = self.rustc.strip()

    def _validate_probe_timeout(self):
        """Validate probe_timeout is a positive, finite number when set."""
        if self.probe_timeout is None:
            return
        if not math.isfinite(self.probe_timeout) or self.probe_timeout <= 0:
            raise ConfigError("probe_timeout", f"must be a positive number, got {self.probe_timeout}")

    def _validate_time_format(self):
        """Validate time_format is not empty."""
        if not self.time_format:
            raise ConfigError("time_format", "cannot be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Create Config from environment variables.

        Each variable is validated on its own. An invalid value is logged and
        replaced by that field's default, leaving the other fields untouched.
        """
        if environ is None:
            environ = os.environ

        raw = {}
        if "RUSTC" in environ:
            raw["rustc"] = environ["RUSTC"]
        if environ.get("JAVA_HOME"):
            raw["java_home"] = environ["JAVA_HOME"]
        if "SHELL_PS1_TIME_FORMAT" in environ:
            raw["time_format"] = environ["SHELL_PS1_TIME_FORMAT"]
        if "SHELL_PS1_PROBE_TIMEOUT" in environ:
            raw["probe_timeout"] = environ["SHELL_PS1_PROBE_TIMEOUT"]

        values = {}
        for key, value in raw.items():
            try:
                if key == "probe_timeout":
                    value = _parse_timeout(value)
                values[key] = getattr(cls(**{key: value}), key)
            except ConfigError as e:
                logger.debug(f"{e}; using default {key}")
        values["debug"] = environ.get("SHELL_PS1_DEBUG", "").strip().lower() in TRUTHY_VALUES

        return cls(**values)

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "rustc": self.rustc,
            "java_home": self.java_home,
            "probe_timeout": self.probe_timeout,
            "time_format": self.time_format,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"rustc", "java_home", "probe_timeout", "time_format", "debug"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)


def _parse_timeout(raw: str) -> Optional[float]:
    value = raw.strip().lower()
    if value in DISABLED_TIMEOUT_VALUES:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigError("probe_timeout", f"not a number: '{raw}'") from None
