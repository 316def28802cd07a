"""Synchronous external command execution"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

from ..api.exceptions import CommandError, CommandTimeoutError
from ..models.result import ExecutionResult

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Run external commands and normalize their failures

    Commands block until they finish. Retries are left to callers.
    """

    def __init__(self,
                 cwd: Union[str, Path] = ".",
                 timeout: Optional[float] = None):
        """
        Initialize command executor

        Args:
            cwd: Working directory for every command
            timeout: Seconds before a command is killed (None waits forever)
        """
        self.cwd = Path(cwd)
        self.timeout = timeout

    def execute(self,
                args: Sequence[str],
                check: bool = True,
                env: Optional[Dict[str, str]] = None) -> ExecutionResult:
        """
        Execute a single command

        Args:
            args: Program and arguments (not passed through a shell)
            check: Raise CommandError on a non-zero exit

        Returns:
            ExecutionResult with stdout stripped of trailing whitespace

        Raises:
            CommandError: Command failed (only when check is True) or could not start
            CommandTimeoutError: Command exceeded the timeout
        """
        command = shlex.join(args)
        logger.debug(f"Executing: {command}")

        try:
            completed = subprocess.run(
                list(args),
                cwd=self.cwd,
                capture_output=True,
                text=True,
                env=env,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"Command timed out: {command}")
            raise CommandTimeoutError(command, self.timeout, _decode(e.stdout).rstrip())
        except (FileNotFoundError, PermissionError) as e:
            logger.error(f"Command could not start: {command}")
            raise CommandError(command, str(e))

        output = (completed.stdout or "").rstrip()

        if completed.returncode == 0:
            return ExecutionResult(
                command=command,
                succeeded=True,
                output=output,
                return_code=0
            )

        # git writes some failures (e.g. "nothing to commit") to stdout
        error_text = (completed.stderr or "").strip() or output
        result = ExecutionResult(
            command=command,
            succeeded=False,
            output=output,
            error_message=error_text,
            return_code=completed.returncode
        )

        if check:
            logger.debug(f"Command failed ({completed.returncode}): {command}: {error_text}")
            raise CommandError(command, error_text, completed.returncode, output)

        return result


def _decode(data: Union[bytes, str, None]) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode('utf-8', errors='replace')
    return data
