"""Tests for the git backend's command construction and result parsing."""

import pytest

from conftest import ScriptedExecutor, failed, ok

from pages_deploy.api.exceptions import CommandError, NothingToCommitError
from pages_deploy.vcs.factory import VersionControlFactory
from pages_deploy.vcs.git import GitBackend, is_nothing_to_commit, parse_porcelain_line


@pytest.mark.parametrize("line, expected", [
    (" M index.html", "index.html"),
    ("?? app-debug.js", "app-debug.js"),
    ("A  sw.js", "sw.js"),
    ("R  old.js -> new.js", "new.js"),
    ('?? "with space.js"', "with space.js"),
])
def test_parse_porcelain_line(line, expected):
    assert parse_porcelain_line(line) == expected


def test_status_returns_one_path_per_line():
    executor = ScriptedExecutor({
        ("git", "status"): ok(" M index.html\n?? temp-fix-deps.js"),
    })
    assert GitBackend(executor).status_porcelain() == ["index.html", "temp-fix-deps.js"]
    assert executor.commands == [["git", "status", "--porcelain"]]


def test_branch_and_remote_queries():
    executor = ScriptedExecutor({
        ("git", "symbolic-ref"): ok("main"),
        ("git", "remote"): ok("https://github.com/me/finance-dashboard"),
    })
    backend = GitBackend(executor)

    assert backend.current_branch() == "main"
    assert backend.remote_url("origin") == "https://github.com/me/finance-dashboard"
    assert executor.commands[1] == ["git", "remote", "get-url", "origin"]


def test_force_stage_passes_path_after_separator():
    executor = ScriptedExecutor()
    GitBackend(executor).force_stage("-odd-name.js")
    assert executor.commands == [["git", "add", "-f", "--", "-odd-name.js"]]


@pytest.mark.parametrize("code, expected", [(0, False), (1, True)])
def test_has_staged_changes_uses_exit_code(code, expected):
    reply = ok() if code == 0 else failed("", code=1)
    executor = ScriptedExecutor({("git", "diff"): reply})
    assert GitBackend(executor).has_staged_changes() is expected


def test_has_staged_changes_other_exit_code_is_an_error():
    executor = ScriptedExecutor({("git", "diff"): failed("fatal: bad revision", code=128)})
    with pytest.raises(CommandError):
        GitBackend(executor).has_staged_changes()


def test_commit_nothing_to_commit_is_typed():
    executor = ScriptedExecutor({
        ("git", "commit"): failed("", output="On branch main\nnothing to commit, working tree clean"),
    })
    with pytest.raises(NothingToCommitError):
        GitBackend(executor).commit("msg")


def test_commit_other_failure_propagates():
    executor = ScriptedExecutor({("git", "commit"): failed("Please tell me who you are.")})
    with pytest.raises(CommandError) as exc_info:
        GitBackend(executor).commit("msg")
    assert not isinstance(exc_info.value, NothingToCommitError)


def test_push_command():
    executor = ScriptedExecutor()
    GitBackend(executor).push("origin", "main")
    assert executor.commands == [["git", "push", "origin", "main"]]


def test_is_nothing_to_commit():
    assert is_nothing_to_commit("nothing added to commit but untracked files present")
    assert not is_nothing_to_commit("error: failed to push some refs")
    assert not is_nothing_to_commit(None)


def test_factory_creates_git_backend():
    backend = VersionControlFactory.create("git", ScriptedExecutor())
    assert isinstance(backend, GitBackend)
    assert "git" in VersionControlFactory.get_supported_types()


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        VersionControlFactory.create("svn", ScriptedExecutor())
