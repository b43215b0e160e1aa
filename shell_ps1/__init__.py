"""
shell-ps1 - A git-aware shell prompt renderer
"""

from .__version__ import __version__
from .core import PromptBuilder
from .cli.main import main

__all__ = ["PromptBuilder", "main", "__version__"]
