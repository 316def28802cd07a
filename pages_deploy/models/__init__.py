"""Data models for pages-deploy"""

from .config import DeploymentConfig
from .result import (
    ReportStatus,
    PipelineStage,
    PipelineState,
    ExecutionResult,
    FileCheckReport,
    RepositoryStatus,
    StagingOutcome,
    RunAccumulator,
    DeploymentReport,
)

__all__ = [
    # Config models
    "DeploymentConfig",

    # Result models
    "ReportStatus",
    "PipelineStage",
    "PipelineState",
    "ExecutionResult",
    "FileCheckReport",
    "RepositoryStatus",
    "StagingOutcome",
    "RunAccumulator",
    "DeploymentReport",
]
