"""Opening the git repository the prompt is rendered in"""
import os
from typing import Optional, Union

import git

from shell_ps1.logging_config import get_logger

logger = get_logger(__name__)


def acquire(path: Optional[Union[str, os.PathLike]] = None) -> Optional[git.Repo]:
    """Open the repository containing ``path``.

    GitPython searches upward through parent directories. With no path it
    honours ``$GIT_DIR`` and otherwise starts at the current directory.

    Returns:
        git.Repo, or None when there is no usable repository
    """
    try:
        return git.Repo(path, search_parent_directories=True)
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
        logger.debug(f"No git repository found: {e!r}")
    except Exception as e:
        logger.debug(f"Error opening git repository: {e}")
    return None
