"""Prompt assembly for shell-ps1."""

from .prompt_builder import PromptBuilder, make_console

__all__ = ["PromptBuilder", "make_console"]
