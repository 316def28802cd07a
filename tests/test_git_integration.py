"""End-to-end deployment against real git repositories."""

import shutil
import subprocess

import pytest

from pages_deploy.models.config import DeploymentConfig
from pages_deploy.models.result import PipelineStage, ReportStatus
from pages_deploy.services.deploy_service import deploy

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(cwd, *args):
    return subprocess.run(["git", *args], cwd=cwd, check=True,
                          capture_output=True, text=True).stdout


@pytest.fixture
def repo(tmp_path):
    """A working tree on main with an empty bare remote named after the site."""
    remote = tmp_path / "finance-dashboard.git"
    work = tmp_path / "work"
    remote.mkdir()
    work.mkdir()

    git(remote, "init", "--bare")
    git(work, "init")
    git(work, "checkout", "-b", "main")
    git(work, "config", "user.name", "Deploy Test")
    git(work, "config", "user.email", "deploy@example.com")
    git(work, "config", "commit.gpgsign", "false")
    git(work, "remote", "add", "origin", str(remote))

    (work / ".gitignore").write_text("temp-fix-deps.js\n")
    (work / "index.html").write_text("<html></html>\n")
    git(work, "add", ".")
    git(work, "commit", "-m", "Initial commit")

    return work, remote


def make_config(work, **kwargs):
    kwargs.setdefault("forced_files", ("temp-fix-deps.js",))
    return DeploymentConfig(
        repository_identifier="finance-dashboard",
        required_files=("index.html",),
        working_dir=str(work),
        **kwargs,
    )


def remote_files(remote):
    return git(remote, "ls-tree", "-r", "main", "--name-only").split()


def test_deploys_ignored_file_to_remote(repo):
    work, remote = repo
    (work / "temp-fix-deps.js").write_text("// shim\n")

    report = deploy(make_config(work), commit_message="Deploy shim")

    assert report.status == ReportStatus.SUCCESS, report.errors
    assert "temp-fix-deps.js" in remote_files(remote)
    assert git(work, "log", "-1", "--format=%s").strip() == "Deploy shim"
    assert (work / "deployment-report.json").exists()


def test_clean_tree_pushes_without_commit(repo):
    work, remote = repo
    head = git(work, "rev-parse", "HEAD").strip()

    report = deploy(make_config(work, forced_files=()))

    assert report.status == ReportStatus.SUCCESS, report.errors
    assert git(work, "rev-parse", "HEAD").strip() == head
    assert git(remote, "rev-parse", "main").strip() == head


def test_wrong_remote_aborts_before_staging(repo, tmp_path):
    work, _ = repo
    other = tmp_path / "unrelated.git"
    other.mkdir()
    git(other, "init", "--bare")
    git(work, "remote", "set-url", "origin", str(other))
    (work / "new-page.html").write_text("<p>new</p>\n")

    report = deploy(make_config(work))

    assert report.status == ReportStatus.FAILED
    assert report.failed_stage == PipelineStage.INSPECTING
    assert git(work, "diff", "--cached", "--name-only").strip() == ""
