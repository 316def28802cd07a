"""Shared test fixtures for pages-deploy."""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from pages_deploy.api.exceptions import CommandError
from pages_deploy.models.config import DeploymentConfig
from pages_deploy.models.result import ExecutionResult
from pages_deploy.vcs.base import VersionControl

MUTATING_OPS = {"stage_all", "force_stage", "commit", "push"}


class FakeVcs(VersionControl):
    """In-memory version-control backend that records every call.

    ``failures`` maps an operation name, or an ``(operation, argument)``
    pair, to the error text the call should fail with.
    """

    name = "fake"

    def __init__(self,
                 remote_url: str = "https://github.com/example/finance-dashboard",
                 branch: str = "main",
                 changes: Sequence[str] = (),
                 failures: Optional[Dict] = None):
        super().__init__(executor=None)
        self.remote = remote_url
        self.branch = branch
        self.changes = list(changes)
        self.failures = dict(failures or {})
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.staged: List[str] = []
        self.commits: List[str] = []
        self.pushes: List[Tuple[str, str]] = []

    def _call(self, op: str, arg: Optional[str] = None) -> None:
        self.calls.append((op, arg))
        text = self.failures.get((op, arg), self.failures.get(op))
        if text is not None:
            raise CommandError(f"fake {op} {arg or ''}".strip(), text)

    @property
    def operations(self) -> List[str]:
        return [op for op, _ in self.calls]

    @property
    def mutating_calls(self) -> List[Tuple[str, Optional[str]]]:
        return [call for call in self.calls if call[0] in MUTATING_OPS]

    def status_porcelain(self) -> List[str]:
        self._call("status")
        return list(self.changes)

    def current_branch(self) -> str:
        self._call("branch")
        return self.branch

    def remote_url(self, remote: str) -> str:
        self._call("remote_url", remote)
        return self.remote

    def stage_all(self) -> None:
        self._call("stage_all")
        self.staged.extend(self.changes)

    def force_stage(self, path: str) -> None:
        self._call("force_stage", path)
        self.staged.append(path)

    def has_staged_changes(self) -> bool:
        self._call("has_staged_changes")
        return bool(self.staged)

    def commit(self, message: str) -> None:
        self._call("commit", message)
        self.commits.append(message)
        self.staged = []

    def push(self, remote: str, branch: str) -> None:
        self._call("push", f"{remote}/{branch}")
        self.pushes.append((remote, branch))


class ScriptedExecutor:
    """Stands in for CommandExecutor; replies from a script keyed by command prefix."""

    def __init__(self, replies: Optional[Dict[Tuple[str, ...], ExecutionResult]] = None):
        self.replies = replies or {}
        self.commands: List[List[str]] = []

    def execute(self, args, check=True, env=None) -> ExecutionResult:
        args = list(args)
        self.commands.append(args)
        command = " ".join(args)

        result = ExecutionResult(command=command, succeeded=True, output="", return_code=0)
        for prefix, reply in self.replies.items():
            if tuple(args[:len(prefix)]) == prefix:
                result = reply
                break

        if not result.succeeded and check:
            raise CommandError(command, result.error_message or "", result.return_code, result.output)
        return result


def failed(error: str, code: int = 1, output: str = "") -> ExecutionResult:
    return ExecutionResult(command="", succeeded=False, output=output,
                           error_message=error, return_code=code)


def ok(output: str = "") -> ExecutionResult:
    return ExecutionResult(command="", succeeded=True, output=output, return_code=0)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site directory with a few deployable files."""
    for name in ("index.html", "app-main.js", "sw.js", "a.txt", "b.txt", "x.js", "y.js"):
        (tmp_path / name).write_text(f"// {name}\n")
    return tmp_path


@pytest.fixture
def make_config(site: Path):
    """Build a DeploymentConfig rooted in the site directory."""

    def _make(**kwargs) -> DeploymentConfig:
        kwargs.setdefault("repository_identifier", "finance-dashboard")
        kwargs.setdefault("working_dir", str(site))
        kwargs.setdefault("verification_urls", ("https://example.github.io/finance-dashboard/",))
        for key in ("required_files", "forced_files", "verification_urls"):
            if key in kwargs:
                kwargs[key] = tuple(kwargs[key])
        return DeploymentConfig(**kwargs)

    return _make


@pytest.fixture
def fake_vcs() -> FakeVcs:
    return FakeVcs()
