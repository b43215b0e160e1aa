"""Tests for repository operation state detection"""
from pathlib import Path

import pytest
import git

from shell_ps1.models.repository import RepositoryOperation, RepositoryState
from shell_ps1.services.git.operation_state import (
    OPERATION_LABELS,
    operation_label,
    read_repository_state,
)
from shell_ps1.services.git.status_aggregator import scan_working_tree
from shell_ps1.models.repository import StatusFlag


def _touch(git_dir, *parts):
    path = Path(git_dir, *parts)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("")


class TestReadRepositoryState:
    """Test marker file precedence."""

    def test_clean(self, git_repo):
        """Test a quiescent repository has no label."""
        assert read_repository_state(git_repo.git_dir) == RepositoryState.CLEAN
        assert operation_label(git_repo) is None

    @pytest.mark.parametrize("markers,expected", [
        ([("rebase-merge", "interactive")], RepositoryState.REBASE_INTERACTIVE),
        ([("rebase-merge", "head-name")], RepositoryState.REBASE_MERGE),
        ([("rebase-apply", "rebasing")], RepositoryState.REBASE),
        ([("rebase-apply", "applying")], RepositoryState.APPLY_MAILBOX),
        ([("rebase-apply", "patch")], RepositoryState.APPLY_MAILBOX_OR_REBASE),
        ([("MERGE_HEAD",)], RepositoryState.MERGE),
        ([("REVERT_HEAD",)], RepositoryState.REVERT),
        ([("REVERT_HEAD",), ("sequencer", "todo")], RepositoryState.REVERT_SEQUENCE),
        ([("CHERRY_PICK_HEAD",)], RepositoryState.CHERRY_PICK),
        ([("CHERRY_PICK_HEAD",), ("sequencer", "todo")], RepositoryState.CHERRY_PICK_SEQUENCE),
        ([("BISECT_LOG",)], RepositoryState.BISECT),
    ])
    def test_marker_files(self, temp_dir, markers, expected):
        """Test each marker file maps to its state."""
        for parts in markers:
            _touch(temp_dir, *parts)
        assert read_repository_state(temp_dir) == expected

    def test_rebase_wins_over_merge(self, temp_dir):
        """Test a rebase stopped on a merge conflict is still a rebase."""
        _touch(temp_dir, "rebase-merge", "head-name")
        _touch(temp_dir, "MERGE_HEAD")
        assert read_repository_state(temp_dir) == RepositoryState.REBASE_MERGE


class TestOperationLabels:
    """Test collapsing states into labels."""

    def test_every_state_has_a_label_entry(self):
        """Test no state is left unmapped."""
        assert set(OPERATION_LABELS) == set(RepositoryState)

    def test_labels_in_alphabet(self):
        """Test only the six labels, or none, are produced."""
        labels = {label.value for label in OPERATION_LABELS.values() if label is not None}
        assert labels == {"merge", "revert", "cherry-pick", "bisect", "rebase", "am"}
        assert OPERATION_LABELS[RepositoryState.CLEAN] is None

    @pytest.mark.parametrize("state,expected", [
        (RepositoryState.REVERT_SEQUENCE, RepositoryOperation.REVERT),
        (RepositoryState.CHERRY_PICK_SEQUENCE, RepositoryOperation.CHERRY_PICK),
        (RepositoryState.REBASE_INTERACTIVE, RepositoryOperation.REBASE),
        (RepositoryState.REBASE_MERGE, RepositoryOperation.REBASE),
        (RepositoryState.APPLY_MAILBOX_OR_REBASE, RepositoryOperation.AM),
    ])
    def test_sub_variants_collapse(self, state, expected):
        """Test sub-variants share their family's label."""
        assert OPERATION_LABELS[state] == expected


class TestRealOperations:
    """Test operations started with the git command line."""

    def test_merge_conflict(self, conflicting_branches):
        """Test a conflicted merge is labelled merge."""
        repo = conflicting_branches
        with pytest.raises(git.exc.GitCommandError):
            repo.git.merge('feature')

        assert operation_label(repo) == RepositoryOperation.MERGE

    def test_rebase_conflict(self, conflicting_branches):
        """Test a rebase stopped on a conflict is labelled rebase and flagged conflicted."""
        repo = conflicting_branches
        repo.git.checkout('feature')
        with pytest.raises(git.exc.GitCommandError):
            repo.git.rebase('main')

        assert operation_label(repo) == RepositoryOperation.REBASE
        assert StatusFlag.CONFLICTED in scan_working_tree(repo)

    def test_bisect(self, git_repo):
        """Test a running bisect is labelled bisect."""
        git_repo.git.bisect('start')
        assert operation_label(git_repo) == RepositoryOperation.BISECT

        git_repo.git.bisect('reset')
        assert operation_label(git_repo) is None
