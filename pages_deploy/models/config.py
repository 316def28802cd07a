"""Configuration data models"""

import hashlib
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_BRANCH,
    DEFAULT_COMMAND_TIMEOUT,
    LOCK_FILE_PATTERN,
    DEFAULT_REMOTE,
    DEFAULT_REPORT_FILE,
    DEFAULT_VCS_BACKEND,
)


def _as_paths(value: Any, key: str) -> Tuple[str, ...]:
    """Normalize a YAML list of paths into a tuple of strings"""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"'{key}' must be a list, got {type(value).__name__}")
    return tuple(str(item) for item in value)


@dataclass(frozen=True)
class DeploymentConfig:
    """Immutable deployment configuration

    Created once at process start. Use ``with_overrides`` to derive a
    variant (for CLI flags) rather than mutating an instance.
    """

    repository_identifier: str
    branch: str = DEFAULT_BRANCH
    forced_files: Tuple[str, ...] = ()
    required_files: Tuple[str, ...] = ()
    verification_urls: Tuple[str, ...] = ()

    remote: str = DEFAULT_REMOTE
    commit_message: Optional[str] = None
    report_path: str = DEFAULT_REPORT_FILE
    command_timeout: Optional[float] = DEFAULT_COMMAND_TIMEOUT
    lock_file: Optional[str] = None
    strict_forced_files: bool = False
    working_dir: str = "."
    vcs: str = DEFAULT_VCS_BACKEND

    def __post_init__(self):
        """Validate configuration"""
        if not self.repository_identifier:
            raise ConfigError("'repository_identifier' is required")
        if not self.branch:
            raise ConfigError("'branch' cannot be empty")
        if not self.remote:
            raise ConfigError("'remote' cannot be empty")
        if self.command_timeout is not None and self.command_timeout <= 0:
            raise ConfigError("'command_timeout' must be positive")

    @property
    def root(self) -> Path:
        """Directory relative paths are resolved against"""
        return Path(self.working_dir)

    @property
    def gate_files(self) -> Tuple[str, ...]:
        """Files whose absence aborts the deployment"""
        if self.strict_forced_files:
            return self.checked_files
        return self.required_files

    @property
    def checked_files(self) -> Tuple[str, ...]:
        """Every file the verifier looks at: forced files first, then required"""
        return self.forced_files + tuple(
            f for f in self.required_files if f not in self.forced_files
        )

    def resolve(self, path: str) -> Path:
        """Resolve a configured path against the working directory"""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / candidate

    @property
    def lock_path(self) -> Path:
        """PID lock file guarding this working tree

        Defaults to a file in the system temp dir keyed on the working
        tree, so the lock never shows up as a change to stage.
        """
        if self.lock_file:
            return self.resolve(self.lock_file)
        digest = hashlib.sha1(str(self.root.resolve()).encode('utf-8')).hexdigest()[:12]
        return Path(tempfile.gettempdir()) / LOCK_FILE_PATTERN.format(digest=digest)

    def with_overrides(self, **overrides) -> 'DeploymentConfig':
        """Return a copy with the non-None overrides applied"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            'repository_identifier': self.repository_identifier,
            'branch': self.branch,
            'remote': self.remote,
            'required_files': list(self.required_files),
            'forced_files': list(self.forced_files),
            'verification_urls': list(self.verification_urls),
            'report_path': self.report_path,
            'command_timeout': self.command_timeout,
            'lock_file': self.lock_file,
            'strict_forced_files': self.strict_forced_files,
            'vcs': self.vcs,
        }

        if self.commit_message:
            data['commit_message'] = self.commit_message

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], working_dir: str = ".") -> 'DeploymentConfig':
        """Create from dictionary"""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        timeout = data.get('command_timeout', DEFAULT_COMMAND_TIMEOUT)
        if timeout is not None:
            try:
                timeout = float(timeout)
            except (TypeError, ValueError):
                raise ConfigError(f"Invalid command_timeout: {timeout!r}")

        return cls(
            repository_identifier=str(data.get('repository_identifier') or ''),
            branch=str(data.get('branch') or DEFAULT_BRANCH),
            remote=str(data.get('remote') or DEFAULT_REMOTE),
            forced_files=_as_paths(data.get('forced_files'), 'forced_files'),
            required_files=_as_paths(data.get('required_files'), 'required_files'),
            verification_urls=_as_paths(data.get('verification_urls'), 'verification_urls'),
            commit_message=data.get('commit_message'),
            report_path=str(data.get('report_path') or DEFAULT_REPORT_FILE),
            command_timeout=timeout,
            lock_file=data.get('lock_file'),
            strict_forced_files=bool(data.get('strict_forced_files', False)),
            working_dir=str(data.get('working_dir') or working_dir),
            vcs=str(data.get('vcs') or DEFAULT_VCS_BACKEND),
        )
