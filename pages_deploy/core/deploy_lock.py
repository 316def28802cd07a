"""PID lock file rejecting concurrent deployments of one working tree"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..api.exceptions import DeployLockError

logger = logging.getLogger(__name__)


def _pid_alive(pid: int) -> bool:
    if pid <= 0:
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        return False
    except PermissionError:
        # Process exists but belongs to someone else
        return True
    except OSError:
        return False
    return True


class DeployLock:
    """Exclusive lock held for the duration of one deployment

    Usage:
        with DeployLock(".deploy.lock"):
            ...
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._held = False

    def read_pid(self) -> Optional[int]:
        """PID recorded in the lock file, if readable"""
        try:
            return int(self.path.read_text().strip())
        except (OSError, ValueError):
            return None

    def acquire(self) -> None:
        """
        Create the lock file

        A lock left behind by a dead process is replaced.

        Raises:
            DeployLockError: A live process holds the lock
        """
        for _ in range(2):
            try:
                fd = os.open(str(self.path), os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0o644)
            except FileExistsError:
                pid = self.read_pid()
                if pid is not None and _pid_alive(pid):
                    raise DeployLockError(str(self.path), pid)
                logger.warning(f"Removing stale deployment lock: {self.path}")
                try:
                    self.path.unlink()
                except FileNotFoundError:
                    pass
                continue

            with os.fdopen(fd, 'w') as f:
                f.write(str(os.getpid()))
            self._held = True
            logger.debug(f"Acquired deployment lock {self.path}")
            return

        raise DeployLockError(str(self.path))

    def release(self) -> None:
        """Remove the lock file if this process holds it"""
        if not self._held:
            return
        self._held = False
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        logger.debug(f"Released deployment lock {self.path}")

    @property
    def is_held(self) -> bool:
        return self._held

    def __enter__(self) -> 'DeployLock':
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()
