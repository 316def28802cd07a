"""API layer for pages-deploy"""

from .exceptions import (
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
