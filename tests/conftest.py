"""Pytest fixtures for shell-ps1 tests"""
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock

import pytest
import git


def _configure_user(repo):
    """Configure git user for commits."""
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
        writer.set_value("commit", "gpgsign", "false")


def commit_file(repo, name: str, content: str, message: str):
    """Write a file in the working tree and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment out of repository discovery and probes."""
    for var in ("GIT_DIR", "GIT_WORK_TREE", "RUSTC", "JAVA_HOME",
                "SHELL_PS1_DEBUG", "SHELL_PS1_PROBE_TIMEOUT", "SHELL_PS1_TIME_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def restore_root_logger():
    """Put the root logger back after a test reconfigures it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a mock configuration dictionary."""
    return {
        'rustc': 'rustc',
        'java_home': None,
        'probe_timeout': 2.0,
        'time_format': '%H:%M:%S',
        'debug': False,
    }


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository without any commits."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    yield repo

    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure_user(repo)

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def conflicting_branches(git_repo):
    """Create main and feature branches that both change README.md."""
    repo = git_repo

    repo.git.checkout('-b', 'feature')
    commit_file(repo, "README.md", "feature side\n", "Change README on feature")

    repo.git.checkout('main')
    commit_file(repo, "README.md", "main side\n", "Change README on main")

    yield repo


@pytest.fixture
def mock_git_repo():
    """Create a mock Git repository object."""
    repo = Mock(spec=git.Repo)
    repo.working_dir = "/fake/repo/path"
    repo.working_tree_dir = "/fake/repo/path"
    repo.git_dir = "/fake/repo/path/.git"
    repo.git = Mock()
    repo.head = Mock()
    return repo
