"""Precondition gate: required artifacts must exist before anything is staged"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from ..constants import EMOJI_ERROR, EMOJI_SUCCESS
from ..models.result import FileCheckReport

logger = logging.getLogger(__name__)


class PreconditionVerifier:
    """Check that a declared set of files exists on disk"""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path(".")

    def file_exists(self, path: str) -> bool:
        """
        Test existence of a single path

        Any filesystem error counts as missing.
        """
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.base_dir / candidate
        try:
            return candidate.exists()
        except (OSError, ValueError):
            return False

    def verify(self, paths: Iterable[str]) -> FileCheckReport:
        """
        Classify every path as present or missing

        Checking continues past the first miss so every missing file is
        reported.

        Args:
            paths: Paths in declared order, relative to base_dir

        Returns:
            FileCheckReport
        """
        checked = []
        present = set()
        missing = set()

        for path in paths:
            if path in present or path in missing:
                continue
            checked.append(path)
            if self.file_exists(path):
                present.add(path)
                logger.debug(f"{EMOJI_SUCCESS} {path}")
            else:
                missing.add(path)
                logger.error(f"{EMOJI_ERROR} {path} - MISSING")

        return FileCheckReport(
            checked=tuple(checked),
            present=frozenset(present),
            missing=frozenset(missing)
        )
