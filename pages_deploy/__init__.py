"""pages-deploy - Release tool for statically hosted web applications.

Verifies required artifacts, confirms the repository, stages ordinary and
force-added files, commits, pushes, and writes a deployment report.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .services import ConfigService, DeploymentPipeline, DeployService, deploy

# Data models
from .models import (
    DeploymentConfig,
    DeploymentReport,
    ExecutionResult,
    FileCheckReport,
    PipelineStage,
    PipelineState,
    ReportStatus,
    RepositoryStatus,
)

# Exceptions
from .api.exceptions import (
    DeployToolError,
    ConfigError,
    CommandError,
    CommandTimeoutError,
    PreconditionError,
    RepositoryIdentityError,
    QueryError,
    StagingError,
    CommitError,
    NothingToCommitError,
    PublishError,
    DeployLockError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "ConfigService",
    "DeploymentPipeline",
    "DeployService",
    "deploy",

    # Data models
    "DeploymentConfig",
    "DeploymentReport",
    "ExecutionResult",
    "FileCheckReport",
    "PipelineStage",
    "PipelineState",
    "ReportStatus",
    "RepositoryStatus",

    # Exceptions
    "DeployToolError",
    "ConfigError",
    "CommandError",
    "CommandTimeoutError",
    "PreconditionError",
    "RepositoryIdentityError",
    "QueryError",
    "StagingError",
    "CommitError",
    "NothingToCommitError",
    "PublishError",
    "DeployLockError",
]
