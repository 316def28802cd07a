"""Tests for the PID deployment lock."""

import os

import pytest

from pages_deploy.api.exceptions import DeployLockError
from pages_deploy.core.deploy_lock import DeployLock


def test_lock_writes_pid_and_releases(tmp_path):
    path = tmp_path / "deploy.lock"

    with DeployLock(path) as lock:
        assert lock.is_held
        assert path.read_text() == str(os.getpid())

    assert not path.exists()


def test_second_holder_is_rejected(tmp_path):
    path = tmp_path / "deploy.lock"

    with DeployLock(path):
        with pytest.raises(DeployLockError) as exc_info:
            DeployLock(path).acquire()

    assert exc_info.value.pid == os.getpid()


def test_stale_lock_is_replaced(tmp_path):
    path = tmp_path / "deploy.lock"
    # PIDs are never this large on supported platforms
    path.write_text("999999999")

    with DeployLock(path):
        assert path.read_text() == str(os.getpid())


def test_unreadable_lock_is_replaced(tmp_path):
    path = tmp_path / "deploy.lock"
    path.write_text("not-a-pid")

    lock = DeployLock(path)
    lock.acquire()
    assert lock.is_held
    lock.release()


def test_release_without_acquire_leaves_file(tmp_path):
    path = tmp_path / "deploy.lock"
    path.write_text(str(os.getpid()))

    DeployLock(path).release()
    assert path.exists()
