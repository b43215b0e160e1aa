"""Services for shell-ps1."""

from .repository_service import acquire
from .toolchain_service import ToolchainService
from .context_service import RepositoryContextService

__all__ = ["acquire", "ToolchainService", "RepositoryContextService"]
