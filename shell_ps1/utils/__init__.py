"""Utility functions for shell-ps1."""

from .process import ProcessResult, run_exec

__all__ = ["ProcessResult", "run_exec"]
