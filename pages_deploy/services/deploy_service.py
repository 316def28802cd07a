"""Deployment pipeline: verify, inspect, stage, commit, publish, report"""

import logging
from pathlib import Path
from typing import List, Optional

from ..api.exceptions import DeployToolError, PreconditionError
from ..core.deploy_lock import DeployLock
from ..core.precondition_verifier import PreconditionVerifier
from ..core.publish_controller import CommitPublishController
from ..core.report_builder import ReportBuilder
from ..core.repository_inspector import RepositoryInspector
from ..core.staging_controller import StagingController
from ..models.config import DeploymentConfig
from ..models.result import (
    DeploymentReport,
    FileCheckReport,
    PipelineStage,
    PipelineState,
    RepositoryStatus,
    RunAccumulator,
    StagingOutcome,
)
from ..utils.output import print_error, print_info, print_success, print_warning
from ..vcs.base import VersionControl
from ..vcs.factory import VersionControlFactory
from ..constants import ErrorCode, MSG_MISSING_FILES, MSG_REPORT_WRITE_FAILED

logger = logging.getLogger(__name__)

# Stage reported for a fatal error raised while in a given state
_STAGE_FOR_STATE = {
    PipelineState.START: PipelineStage.VERIFYING,
    PipelineState.VERIFYING: PipelineStage.VERIFYING,
    PipelineState.INSPECTING: PipelineStage.INSPECTING,
    PipelineState.STAGING: PipelineStage.STAGING,
    PipelineState.COMMITTING: PipelineStage.COMMITTING,
    PipelineState.PUBLISHING: PipelineStage.PUBLISHING,
    PipelineState.REPORTING: PipelineStage.REPORTING,
}


class DeploymentPipeline:
    """One deployment run

    A pipeline instance is single-use: ``run`` produces exactly one
    report. Fatal errors skip the remaining stages, but the report is
    always built and written.
    """

    def __init__(self,
                 config: DeploymentConfig,
                 vcs: Optional[VersionControl] = None):
        self.config = config
        self.vcs = vcs or VersionControlFactory.create_from_config(config)
        self.accumulator = RunAccumulator()

        self.verifier = PreconditionVerifier(config.root)
        self.inspector = RepositoryInspector(self.vcs, config.repository_identifier, config.remote)
        self.staging = StagingController(self.vcs, self.accumulator)
        self.publisher = CommitPublishController(self.vcs, self.accumulator, config.remote)
        self.report_builder = ReportBuilder(config, self.accumulator)

        self.state = PipelineState.START
        self.history: List[PipelineState] = [PipelineState.START]

        self.file_check: Optional[FileCheckReport] = None
        self.repository_status: Optional[RepositoryStatus] = None
        self.staging_outcome: Optional[StagingOutcome] = None
        self.committed: Optional[bool] = None
        self.report: Optional[DeploymentReport] = None
        self.report_path: Optional[Path] = None

    def run(self, commit_message: Optional[str] = None) -> DeploymentReport:
        """
        Execute the pipeline

        Args:
            commit_message: Overrides the configured/default commit message

        Returns:
            The persisted DeploymentReport
        """
        if self.state != PipelineState.START:
            raise DeployToolError("Deployment pipeline has already run", ErrorCode.PIPELINE_REUSED)

        aborted = False
        unexpected: Optional[BaseException] = None

        try:
            self._execute(commit_message or self.config.commit_message)
        except DeployToolError as e:
            aborted = True
            self._abort(e)
        except Exception as e:
            aborted = True
            unexpected = e
            self._abort(e)

        self._transition(PipelineState.REPORTING)
        report = self.report_builder.build()
        destination = self.config.resolve(self.config.report_path)
        try:
            self.report_path = self.report_builder.save(report, destination)
        except OSError as e:
            aborted = True
            self.accumulator.mark_fatal(
                PipelineStage.REPORTING,
                MSG_REPORT_WRITE_FAILED.format(path=destination, error=e)
            )
            report = self.report_builder.build()
            logger.error(f"Failed to write report to {destination}: {e}")
            print_error(f"Failed to write report to {destination}", e)
        self.report = report

        self._transition(PipelineState.ABORTED if aborted else PipelineState.SUCCEEDED)

        if unexpected is not None:
            raise unexpected

        return report

    def _execute(self, commit_message: Optional[str]) -> None:
        # Verify
        self._transition(PipelineState.VERIFYING)
        self.verify()

        # Inspect
        self._transition(PipelineState.INSPECTING)
        self.inspect()

        # Stage
        self._transition(PipelineState.STAGING)
        self.stage()

        # Commit
        self._transition(PipelineState.COMMITTING)
        self.committed = self.publisher.commit(commit_message)
        if self.committed:
            print_success("Commit created successfully")
        else:
            print_info("No changes to commit")

        # Publish
        self._transition(PipelineState.PUBLISHING)
        print_info(f"Pushing {self.config.branch} to {self.config.remote}...")
        self.publisher.publish(self.config.branch)
        print_success(f"Successfully pushed to {self.config.remote}/{self.config.branch}")

    def verify(self) -> FileCheckReport:
        """Precondition gate over required (and forced) files"""
        print_info("Verifying required files...")

        self.file_check = self.verifier.verify(self.config.checked_files)

        gate = set(self.config.gate_files)
        missing = [f for f in self.file_check.missing_in_order if f in gate]
        if missing:
            raise PreconditionError(MSG_MISSING_FILES.format(files=', '.join(missing)), missing)

        print_success(f"{len(self.file_check.present)} of {len(self.file_check.checked)} files present")
        return self.file_check

    def inspect(self) -> RepositoryStatus:
        """Snapshot repository state and confirm its identity"""
        print_info("Checking repository status...")

        status = self.inspector.inspect()
        self.repository_status = status
        self.inspector.ensure_expected(status)

        print_info(f"Current branch: {status.current_branch}")
        print_info(f"Changes detected: {'Yes' if status.has_uncommitted_changes else 'No'}")

        if status.current_branch != self.config.branch:
            message = (
                f"Current branch '{status.current_branch}' differs from "
                f"deployment branch '{self.config.branch}'"
            )
            print_warning(message)
            self.accumulator.add_warning(message)

        return status

    def stage(self) -> StagingOutcome:
        """Stage ordinary changes, then force-stage the allow-list"""
        print_info("Staging changes...")
        self.staging.stage_all()

        if self.config.forced_files:
            print_info("Force adding ignored files...")
        absent = self.file_check.missing if self.file_check else ()
        outcome = self.staging.force_stage(self.config.forced_files, absent)
        self.staging_outcome = outcome

        for file in outcome.staged:
            print_success(f"Force added: {file}")
        for file in outcome.skipped:
            print_warning(f"Skipping {file} - file not found")
        for file in outcome.failed:
            print_error(f"Failed to add {file}")

        return outcome

    def _abort(self, error: BaseException) -> None:
        stage = _STAGE_FOR_STATE.get(self.state, PipelineStage.REPORTING)
        message = str(error) or error.__class__.__name__
        self.accumulator.mark_fatal(stage, message)
        logger.debug(f"Aborting in stage {stage.value}: {message}")
        print_error(f"Deployment failed: {message}")

    def _transition(self, state: PipelineState) -> None:
        logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state
        self.history.append(state)


class DeployService:
    """Service entry point for running deployments"""

    def __init__(self, config: DeploymentConfig, vcs: Optional[VersionControl] = None):
        self.config = config
        self.vcs = vcs

    def create_pipeline(self) -> DeploymentPipeline:
        return DeploymentPipeline(self.config, vcs=self.vcs)

    def deploy(self, commit_message: Optional[str] = None) -> DeploymentReport:
        """
        Run one deployment while holding the working-tree lock

        Raises:
            DeployLockError: Another deployment of this tree is running
        """
        with DeployLock(self.config.lock_path):
            return self.create_pipeline().run(commit_message)

    def verify(self) -> FileCheckReport:
        """Run only the precondition gate"""
        return PreconditionVerifier(self.config.root).verify(self.config.checked_files)

    def status(self) -> RepositoryStatus:
        """Run only the repository inspection"""
        vcs = self.vcs or VersionControlFactory.create_from_config(self.config)
        return RepositoryInspector(vcs, self.config.repository_identifier, self.config.remote).inspect()


def deploy(config: DeploymentConfig,
           commit_message: Optional[str] = None,
           vcs: Optional[VersionControl] = None) -> DeploymentReport:
    """Convenience function to run a deployment"""
    return DeployService(config, vcs=vcs).deploy(commit_message)
