"""Git implementation of the version-control boundary"""

import logging
from typing import List

from .base import VersionControl
from ..api.exceptions import CommandError, NothingToCommitError
from ..constants import NOTHING_TO_COMMIT_MARKERS

logger = logging.getLogger(__name__)


def parse_porcelain_line(line: str) -> str:
    """
    Extract the path from a ``git status --porcelain`` line

    Args:
        line: Status line, e.g. `` M index.html`` or ``R  old.js -> new.js``

    Returns:
        Path of the changed file (the new name for renames)
    """
    path = line[3:] if len(line) > 3 else line.strip()
    if ' -> ' in path:
        path = path.split(' -> ', 1)[1]
    if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
        path = path[1:-1]
    return path


def is_nothing_to_commit(text: str) -> bool:
    """Check whether git output reports an empty commit"""
    lowered = (text or "").lower()
    return any(marker in lowered for marker in NOTHING_TO_COMMIT_MARKERS)


class GitBackend(VersionControl):
    """Version-control operations backed by the git CLI"""

    name = "git"

    def status_porcelain(self) -> List[str]:
        result = self.executor.execute(['git', 'status', '--porcelain'])
        return [parse_porcelain_line(line) for line in result.lines]

    def current_branch(self) -> str:
        # symbolic-ref works on an unborn branch; detached HEAD fails
        result = self.executor.execute(['git', 'symbolic-ref', '--short', 'HEAD'])
        return result.output.strip()

    def remote_url(self, remote: str) -> str:
        result = self.executor.execute(['git', 'remote', 'get-url', remote])
        return result.output.strip()

    def stage_all(self) -> None:
        self.executor.execute(['git', 'add', '.'])

    def force_stage(self, path: str) -> None:
        self.executor.execute(['git', 'add', '-f', '--', path])

    def has_staged_changes(self) -> bool:
        result = self.executor.execute(
            ['git', 'diff', '--cached', '--quiet', '--exit-code'],
            check=False
        )
        if result.return_code == 0:
            return False
        if result.return_code == 1:
            return True
        raise CommandError(result.command, result.error_message or "", result.return_code, result.output)

    def commit(self, message: str) -> None:
        try:
            self.executor.execute(['git', 'commit', '-m', message])
        except CommandError as e:
            if is_nothing_to_commit(e.error_text) or is_nothing_to_commit(e.output):
                logger.debug("git reported nothing to commit")
                raise NothingToCommitError() from e
            raise

    def push(self, remote: str, branch: str) -> None:
        self.executor.execute(['git', 'push', remote, branch])
