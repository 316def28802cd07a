"""Staging of ordinary changes and force-staged files"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ..api.exceptions import CommandError, StagingError
from ..constants import MSG_FILE_NOT_FOUND, MSG_STAGE_FAILED
from ..models.result import PipelineStage, RunAccumulator, StagingOutcome

if TYPE_CHECKING:
    from ..vcs.base import VersionControl

logger = logging.getLogger(__name__)


class StagingController:
    """Stage changes for the deployment commit

    A failure to stage one forced file is recorded and the rest of the
    batch still gets staged.
    """

    def __init__(self, vcs: 'VersionControl', accumulator: RunAccumulator):
        self.vcs = vcs
        self.accumulator = accumulator

    def stage_all(self) -> None:
        """
        Stage ordinary tracked and untracked changes

        Raises:
            StagingError: The staging command failed
        """
        try:
            self.vcs.stage_all()
        except CommandError as e:
            raise StagingError(f"Failed to stage changes: {e.error_text}") from e
        logger.info("Staged working-tree changes")

    def force_stage(self,
                    files: Iterable[str],
                    absent: Optional[Iterable[str]] = None) -> StagingOutcome:
        """
        Force-stage each file individually, in declared order

        Args:
            files: Files to stage despite ignore rules
            absent: Files already known not to exist; skipped with a warning

        Returns:
            StagingOutcome listing staged, skipped and failed files
        """
        absent = set(absent or ())
        outcome = StagingOutcome()

        for file in files:
            if file in absent:
                logger.warning(f"Skipping {file} - file not found")
                self.accumulator.add_warning(MSG_FILE_NOT_FOUND.format(file=file))
                outcome.skipped.append(file)
                continue

            try:
                self.vcs.force_stage(file)
            except CommandError as e:
                logger.error(f"Failed to add {file}: {e.error_text}")
                self.accumulator.add_error(
                    MSG_STAGE_FAILED.format(file=file, error=e.error_text),
                    PipelineStage.STAGING
                )
                outcome.failed.append(file)
                continue

            logger.info(f"Force added: {file}")
            outcome.staged.append(file)

        return outcome
