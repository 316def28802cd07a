"""Tests for repository state inspection."""

import pytest

from conftest import FakeVcs

from pages_deploy.api.exceptions import QueryError, RepositoryIdentityError
from pages_deploy.core.repository_inspector import RepositoryInspector


def test_snapshot_fields():
    vcs = FakeVcs(changes=["index.html", "app-main.js"], branch="main")
    status = RepositoryInspector(vcs, "finance-dashboard").inspect()

    assert status.has_uncommitted_changes
    assert status.changed_paths == ("index.html", "app-main.js")
    assert status.current_branch == "main"
    assert status.is_expected_repository
    assert vcs.operations == ["status", "branch", "remote_url"]


def test_clean_tree():
    status = RepositoryInspector(FakeVcs(), "finance-dashboard").inspect()
    assert not status.has_uncommitted_changes
    assert status.changed_paths == ()


def test_inspect_is_not_cached():
    vcs = FakeVcs()
    inspector = RepositoryInspector(vcs, "finance-dashboard")
    first = inspector.inspect()
    vcs.changes = ["new.js"]
    second = inspector.inspect()

    assert not first.has_uncommitted_changes
    assert second.changed_paths == ("new.js",)


def test_uses_configured_remote():
    vcs = FakeVcs()
    RepositoryInspector(vcs, "finance-dashboard", remote="upstream").inspect()
    assert ("remote_url", "upstream") in vcs.calls


@pytest.mark.parametrize("op", ["status", "branch", "remote_url"])
def test_any_query_failure_is_fatal(op):
    vcs = FakeVcs(failures={op: "fatal: not a git repository"})
    with pytest.raises(QueryError) as exc_info:
        RepositoryInspector(vcs, "finance-dashboard").inspect()
    assert "not a git repository" in str(exc_info.value)


def test_wrong_repository_is_rejected():
    vcs = FakeVcs(remote_url="git@github.com:someone/other-project.git")
    inspector = RepositoryInspector(vcs, "finance-dashboard")
    status = inspector.inspect()

    assert not status.is_expected_repository
    with pytest.raises(RepositoryIdentityError) as exc_info:
        inspector.ensure_expected(status)
    assert "other-project" in str(exc_info.value)


def test_identifier_match_is_substring():
    vcs = FakeVcs(remote_url="git@github.com:me/finance-dashboard-v2.git")
    inspector = RepositoryInspector(vcs, "finance-dashboard")
    inspector.ensure_expected(inspector.inspect())


def test_empty_remote_is_not_expected():
    status = RepositoryInspector(FakeVcs(remote_url=""), "finance-dashboard").inspect()
    assert not status.is_expected_repository
