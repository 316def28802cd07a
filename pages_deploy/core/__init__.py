"""Core functionality for pages-deploy"""

from .command_executor import CommandExecutor
from .precondition_verifier import PreconditionVerifier
from .repository_inspector import RepositoryInspector
from .staging_controller import StagingController
from .publish_controller import CommitPublishController, default_commit_message
from .report_builder import ReportBuilder, load_report, next_steps_for
from .deploy_lock import DeployLock

__all__ = [
    "CommandExecutor",
    "PreconditionVerifier",
    "RepositoryInspector",
    "StagingController",
    "CommitPublishController",
    "default_commit_message",
    "ReportBuilder",
    "load_report",
    "next_steps_for",
    "DeployLock",
]
