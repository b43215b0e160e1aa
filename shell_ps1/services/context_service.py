"""Service resolving the repository part of the prompt"""

import os
from typing import Optional, Union, TYPE_CHECKING

from shell_ps1.models.repository import RepositoryContext
from shell_ps1.services.repository_service import acquire
from shell_ps1.services.git import operation_label, resolve_branch, scan_working_tree
from shell_ps1.services.toolchain_service import ToolchainService
from shell_ps1.logging_config import get_logger

if TYPE_CHECKING:
    from shell_ps1.config import Config

logger = get_logger(__name__)


class RepositoryContextService:
    """Service for summarising the repository the shell is in."""

    def __init__(self, config: Union["Config", dict]):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
        """
        self.config = config
        self.toolchain_service = ToolchainService(config)

    def resolve(self, path: Optional[Union[str, os.PathLike]] = None) -> Optional[RepositoryContext]:
        """Resolve every repository facet for ``path`` (default: current directory).

        Returns:
            RepositoryContext, or None when there is no repository
        """
        repo = acquire(path)
        if repo is None:
            return None

        try:
            workdir = repo.working_tree_dir
            toolchains = self.toolchain_service.detect(workdir) if workdir else []
            context = RepositoryContext(
                branch=resolve_branch(repo),
                status=scan_working_tree(repo),
                operation=operation_label(repo),
                toolchains=toolchains,
            )
        finally:
            repo.close()

        logger.debug(f"Repository context: {context}")
        return context
