"""Version-control backend factory"""

from typing import Dict, List, Type

from .base import VersionControl
from .git import GitBackend
from ..constants import VcsBackend
from ..core.command_executor import CommandExecutor
from ..models.config import DeploymentConfig


class VersionControlFactory:
    """Factory for creating version-control backend instances"""

    # Registry of backends
    _backends: Dict[VcsBackend, Type[VersionControl]] = {
        VcsBackend.GIT: GitBackend,
    }

    @classmethod
    def create(cls, backend: str, executor: CommandExecutor) -> VersionControl:
        """Create a backend by name

        Args:
            backend: Backend name (e.g. "git")
            executor: Command executor the backend runs through

        Returns:
            Backend instance

        Raises:
            ValueError: If the backend is not supported
        """
        try:
            backend_type = VcsBackend(backend)
        except ValueError:
            raise ValueError(f"Invalid version-control backend: {backend}")

        if backend_type not in cls._backends:
            raise ValueError(f"Unsupported version-control backend: {backend}")

        return cls._backends[backend_type](executor)

    @classmethod
    def create_from_config(cls, config: DeploymentConfig) -> VersionControl:
        """Create a backend with an executor bound to the config's working directory"""
        executor = CommandExecutor(cwd=config.root, timeout=config.command_timeout)
        return cls.create(config.vcs, executor)

    @classmethod
    def register_backend(cls, backend: VcsBackend, backend_class: Type[VersionControl]):
        """Register a new backend type"""
        cls._backends[backend] = backend_class

    @classmethod
    def get_supported_types(cls) -> List[str]:
        return [b.value for b in cls._backends.keys()]
