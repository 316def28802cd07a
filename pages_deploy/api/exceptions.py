"""Exception definitions for pages-deploy"""

from typing import Optional

from ..constants import ErrorCode


class DeployToolError(Exception):
    """Base exception for pages-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(DeployToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class CommandError(DeployToolError):
    """External command exited with a failure"""

    def __init__(self,
                 command: str,
                 error_text: str,
                 return_code: Optional[int] = None,
                 output: str = "",
                 error_code: str = ErrorCode.COMMAND_FAILED):
        message = f"Command failed: {command}"
        if error_text:
            message = f"{message}: {error_text}"
        super().__init__(message, error_code)
        self.command = command
        self.error_text = error_text
        self.return_code = return_code
        self.output = output


class CommandTimeoutError(CommandError):
    """External command did not finish in time"""

    def __init__(self, command: str, timeout: float, output: str = ""):
        super().__init__(
            command,
            f"timed out after {timeout:g}s",
            output=output,
            error_code=ErrorCode.COMMAND_TIMEOUT
        )
        self.timeout = timeout


class PreconditionError(DeployToolError):
    """Required files are missing"""

    def __init__(self, message: str, missing=()):
        super().__init__(message, ErrorCode.REQUIRED_FILE_MISSING)
        self.missing = list(missing)


class RepositoryIdentityError(DeployToolError):
    """Working directory is not the expected repository"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.WRONG_REPOSITORY)


class QueryError(DeployToolError):
    """Repository state query failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.QUERY_FAILED)


class StagingError(DeployToolError):
    """Staging operation failed"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, ErrorCode.STAGING_FAILED)
        self.path = path


class CommitError(DeployToolError):
    """Commit operation error"""

    def __init__(self, message: str, error_code: str = ErrorCode.COMMIT_FAILED):
        super().__init__(message, error_code)


class NothingToCommitError(CommitError):
    """Nothing was staged, so there is nothing to commit"""

    def __init__(self, message: str = "Nothing to commit"):
        super().__init__(message, ErrorCode.NOTHING_TO_COMMIT)


class PublishError(DeployToolError):
    """Push operation error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.PUSH_FAILED)


class DeployLockError(DeployToolError):
    """Another deployment holds the lock"""

    def __init__(self, lock_path: str, pid: Optional[int] = None):
        if pid:
            message = f"Another deployment (pid {pid}) is running: {lock_path}"
        else:
            message = f"Deployment lock is held: {lock_path}"
        super().__init__(message, ErrorCode.DEPLOY_LOCKED)
        self.lock_path = lock_path
        self.pid = pid
