"""Commit and publish of the deployment"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from ..api.exceptions import CommandError, CommitError, NothingToCommitError, PublishError
from ..constants import DEFAULT_COMMIT_MESSAGE, DEFAULT_REMOTE
from ..models.result import RunAccumulator

if TYPE_CHECKING:
    from ..vcs.base import VersionControl

logger = logging.getLogger(__name__)


def default_commit_message(now: Optional[datetime] = None) -> str:
    """Build the commit message used when none is configured"""
    now = now or datetime.now(timezone.utc)
    return DEFAULT_COMMIT_MESSAGE.format(timestamp=now.isoformat(timespec='milliseconds'))


class CommitPublishController:
    """Create the deployment commit and push it"""

    def __init__(self,
                 vcs: 'VersionControl',
                 accumulator: RunAccumulator,
                 remote: str = DEFAULT_REMOTE):
        self.vcs = vcs
        self.accumulator = accumulator
        self.remote = remote

    def commit(self, message: Optional[str] = None) -> bool:
        """
        Commit staged changes

        An empty index is not an error: it is logged and skipped.

        Args:
            message: Commit message (default template when omitted)

        Returns:
            True if a commit was created, False for the no-op case

        Raises:
            CommitError: Any failure other than "nothing to commit"
        """
        message = message or default_commit_message()

        try:
            if not self.vcs.has_staged_changes():
                self._note_noop()
                return False
            self.vcs.commit(message)
        except NothingToCommitError:
            self._note_noop()
            return False
        except CommandError as e:
            raise CommitError(f"Failed to create commit: {e.error_text}") from e

        logger.info("Commit created successfully")
        return True

    def publish(self, branch: str) -> None:
        """
        Push a branch to the configured remote

        Raises:
            PublishError: The push failed
        """
        try:
            self.vcs.push(self.remote, branch)
        except CommandError as e:
            raise PublishError(
                f"Failed to push '{branch}' to '{self.remote}': {e.error_text}"
            ) from e
        logger.info(f"Pushed {branch} to {self.remote}")

    def _note_noop(self) -> None:
        logger.info("No changes to commit")
        self.accumulator.add_info("No changes to commit")
