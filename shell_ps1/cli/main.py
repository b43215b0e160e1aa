"""Entry point for the shell-ps1 console script"""

import sys
from typing import List, Optional

from rich.text import Text

from shell_ps1.config import Config
from shell_ps1.constants import SYMBOL_PROMPT
from shell_ps1.core import PromptBuilder, make_console
from shell_ps1.logging_config import get_logger, setup_logging
from .args import parse_args

logger = get_logger(__name__)


def load_config() -> Config:
    """Config from the environment; invalid values fall back to their defaults."""
    return Config.from_env()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    setup_logging()
    config = load_config()
    if config.debug:
        setup_logging(debug=True)
        logger.debug(f"Configuration: {config.to_dict()}")

    console = make_console()
    try:
        PromptBuilder(config).render(continuation=parsed_args.continuation, console=console)
    except Exception as e:
        # The shell still needs a prompt
        logger.debug(f"Error rendering prompt: {e}", exc_info=True)
        console.print(Text(SYMBOL_PROMPT), end="", soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
