"""Version-control backend abstract base class"""

from abc import ABC, abstractmethod
from typing import List

from ..core.command_executor import CommandExecutor


class VersionControl(ABC):
    """Logical version-control operations the deployment pipeline needs

    Read-only queries (status, branch, remote) must not change repository
    state. Mutating operations raise CommandError (or a subclass) when the
    underlying tool fails.
    """

    name = "abstract"

    def __init__(self, executor: CommandExecutor):
        """
        Initialize backend

        Args:
            executor: Runs the underlying tool's commands
        """
        self.executor = executor

    @abstractmethod
    def status_porcelain(self) -> List[str]:
        """
        Query working-tree status

        Returns:
            One entry per changed path
        """
        pass

    @abstractmethod
    def current_branch(self) -> str:
        """Get the checked-out branch name"""
        pass

    @abstractmethod
    def remote_url(self, remote: str) -> str:
        """Get the URL of a named remote"""
        pass

    @abstractmethod
    def stage_all(self) -> None:
        """Stage ordinary tracked and untracked changes"""
        pass

    @abstractmethod
    def force_stage(self, path: str) -> None:
        """Stage a single path even if ignore rules exclude it"""
        pass

    @abstractmethod
    def has_staged_changes(self) -> bool:
        """Check whether the index differs from the last commit"""
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        """
        Record staged changes

        Raises:
            NothingToCommitError: Nothing was staged
            CommandError: Any other failure
        """
        pass

    @abstractmethod
    def push(self, remote: str, branch: str) -> None:
        """Publish a branch to a named remote"""
        pass
