"""Repository state inspection"""

import logging
from typing import TYPE_CHECKING

from ..api.exceptions import CommandError, QueryError, RepositoryIdentityError
from ..constants import DEFAULT_REMOTE, MSG_WRONG_REPOSITORY
from ..models.result import RepositoryStatus

if TYPE_CHECKING:
    from ..vcs.base import VersionControl

logger = logging.getLogger(__name__)


class RepositoryInspector:
    """Query working-tree status, branch and remote identity

    Every call to ``inspect`` takes a fresh snapshot; nothing is cached
    because the repository can change between calls.
    """

    def __init__(self,
                 vcs: 'VersionControl',
                 repository_identifier: str,
                 remote: str = DEFAULT_REMOTE):
        self.vcs = vcs
        self.repository_identifier = repository_identifier
        self.remote = remote

    def inspect(self) -> RepositoryStatus:
        """
        Take a snapshot of repository state

        Returns:
            RepositoryStatus

        Raises:
            QueryError: Any of the status, branch or remote queries failed
        """
        try:
            changed = self.vcs.status_porcelain()
        except CommandError as e:
            raise QueryError(f"Failed to query working-tree status: {e.error_text}") from e

        try:
            branch = self.vcs.current_branch()
        except CommandError as e:
            raise QueryError(f"Failed to query current branch: {e.error_text}") from e

        try:
            remote_url = self.vcs.remote_url(self.remote)
        except CommandError as e:
            raise QueryError(f"Failed to query URL of remote '{self.remote}': {e.error_text}") from e

        return RepositoryStatus(
            changed_paths=tuple(changed),
            current_branch=branch,
            remote_url=remote_url,
            repository_identifier=self.repository_identifier
        )

    def ensure_expected(self, status: RepositoryStatus) -> None:
        """
        Refuse to operate on the wrong repository

        Raises:
            RepositoryIdentityError: Remote URL does not contain the identifier
        """
        if not status.is_expected_repository:
            raise RepositoryIdentityError(MSG_WRONG_REPOSITORY.format(
                remote=self.remote,
                url=status.remote_url,
                identifier=self.repository_identifier
            ))
        logger.debug(f"Remote {status.remote_url} matches '{self.repository_identifier}'")
