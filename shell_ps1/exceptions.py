"""Custom exceptions for shell-ps1"""

from typing import Optional


class ShellPs1Error(Exception):
    """Base exception for all shell-ps1 errors."""
    pass


class ProbeError(ShellPs1Error):
    """Exception raised when an external probe (e.g. `rustc --version`) fails."""

    def __init__(self, operation: str, message: Optional[str] = None):
        self.operation = operation
        self.message = message

        error_msg = f"Probe '{operation}' failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class ConfigError(ShellPs1Error, ValueError):
    """Exception raised for invalid configuration values."""

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"Invalid value for '{key}': {message}")
