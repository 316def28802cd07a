"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


class ReportStatus(Enum):
    """Final deployment status"""
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class PipelineStage(Enum):
    """Pipeline stages, in execution order"""
    VERIFYING = "verifying"
    INSPECTING = "inspecting"
    STAGING = "staging"
    COMMITTING = "committing"
    PUBLISHING = "publishing"
    REPORTING = "reporting"


class PipelineState(Enum):
    """States a pipeline run moves through"""
    START = "start"
    VERIFYING = "verifying"
    INSPECTING = "inspecting"
    STAGING = "staging"
    COMMITTING = "committing"
    PUBLISHING = "publishing"
    REPORTING = "reporting"
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelineState.SUCCEEDED, PipelineState.ABORTED)


@dataclass(frozen=True)
class ExecutionResult:
    """Result of a single external command"""
    command: str
    succeeded: bool
    output: str = ""
    error_message: Optional[str] = None
    return_code: Optional[int] = None

    @property
    def lines(self) -> List[str]:
        """Non-empty output lines"""
        return [line for line in self.output.splitlines() if line.strip()]


@dataclass(frozen=True)
class FileCheckReport:
    """Outcome of a precondition check over a set of paths"""
    checked: Tuple[str, ...] = ()
    present: FrozenSet[str] = frozenset()
    missing: FrozenSet[str] = frozenset()

    @property
    def success(self) -> bool:
        return not self.missing

    @property
    def missing_in_order(self) -> List[str]:
        """Missing paths in the order they were declared"""
        return [path for path in self.checked if path in self.missing]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'success': self.success,
            'present': [p for p in self.checked if p in self.present],
            'missing': self.missing_in_order,
        }


@dataclass(frozen=True)
class RepositoryStatus:
    """Snapshot of the working tree and its remote"""
    changed_paths: Tuple[str, ...]
    current_branch: str
    remote_url: str
    repository_identifier: str

    @property
    def has_uncommitted_changes(self) -> bool:
        return bool(self.changed_paths)

    @property
    def is_expected_repository(self) -> bool:
        if not self.remote_url or not self.repository_identifier:
            return False
        return self.repository_identifier in self.remote_url

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'has_uncommitted_changes': self.has_uncommitted_changes,
            'changed_paths': list(self.changed_paths),
            'current_branch': self.current_branch,
            'remote_url': self.remote_url,
            'is_expected_repository': self.is_expected_repository,
        }


@dataclass
class StagingOutcome:
    """Per-file results of force staging"""
    staged: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)


@dataclass
class RunAccumulator:
    """Errors and warnings collected over one pipeline run

    Append-only: stages add to it, nothing replaces or clears it.
    """
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    info: List[str] = field(default_factory=list)
    failed_stage: Optional[PipelineStage] = None
    error_stages: List[PipelineStage] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def add_error(self, message: str, stage: Optional[PipelineStage] = None) -> None:
        """Add an error"""
        self.errors.append(message)
        if stage is not None and stage not in self.error_stages:
            self.error_stages.append(stage)

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def add_info(self, message: str) -> None:
        """Add an informational note"""
        self.info.append(message)

    def mark_fatal(self, stage: PipelineStage, message: str) -> None:
        """Record the error that aborted the run"""
        if self.failed_stage is None:
            self.failed_stage = stage
        self.add_error(message, stage)


@dataclass(frozen=True)
class DeploymentReport:
    """Final, persisted deployment report"""
    status: ReportStatus
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()
    info: Tuple[str, ...] = ()
    verification_urls: Tuple[str, ...] = ()
    next_steps: Tuple[str, ...] = ()
    failed_stage: Optional[PipelineStage] = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec='milliseconds')
    )

    @property
    def is_success(self) -> bool:
        return self.status == ReportStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'timestamp': self.timestamp,
            'status': self.status.value,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
            'info': list(self.info),
            'verification_urls': list(self.verification_urls),
            'next_steps': list(self.next_steps),
            'failed_stage': self.failed_stage.value if self.failed_stage else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeploymentReport':
        """Create from dictionary"""
        failed_stage = data.get('failed_stage')
        return cls(
            status=ReportStatus(data['status']),
            errors=tuple(data.get('errors', [])),
            warnings=tuple(data.get('warnings', [])),
            info=tuple(data.get('info', [])),
            verification_urls=tuple(data.get('verification_urls', [])),
            next_steps=tuple(data.get('next_steps', [])),
            failed_stage=PipelineStage(failed_stage) if failed_stage else None,
            timestamp=data.get('timestamp', ''),
        )
