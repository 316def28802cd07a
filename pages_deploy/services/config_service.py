"""Configuration management service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
import yaml

from ..api.exceptions import ConfigError
from ..models.config import DeploymentConfig
from ..constants import (
    CONFIG_SCHEMA,
    CONFIG_TEMPLATE,
    DEFAULT_BRANCH,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_REMOTE,
    DEFAULT_REPORT_FILE,
    ENV_BRANCH,
    ENV_CONFIG_PATH,
    ENV_REMOTE,
    ENV_TIMEOUT,
    PROJECT_CONFIG_FILE,
)

logger = logging.getLogger(__name__)


class ConfigService:
    """Load and create deployment configuration files

    Precedence, lowest first: built-in defaults, the YAML file,
    PAGES_DEPLOY_* environment variables, CLI overrides.
    """

    def __init__(self,
                 project_root: Union[str, Path] = ".",
                 config_path: Optional[Union[str, Path]] = None):
        """Initialize config service

        Args:
            project_root: Directory deployments run in
            config_path: Explicit config file (defaults to $PAGES_DEPLOY_CONFIG
                or .pages-deploy.yaml in project_root)
        """
        self.project_root = Path(project_root)
        if config_path is None:
            config_path = os.environ.get(ENV_CONFIG_PATH) or self.project_root / PROJECT_CONFIG_FILE
        self.config_path = Path(config_path)

    def load_raw(self) -> Dict[str, Any]:
        """Read the YAML file into a dictionary"""
        if not self.config_path.exists():
            raise ConfigError(
                f"Configuration file not found: {self.config_path}. "
                f"Run 'pages-deploy init' to create one."
            )

        with open(self.config_path, 'r', encoding='utf-8') as f:
            content = f.read()

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")

        self.validate(data)
        return data

    def validate(self, data: Dict[str, Any]) -> None:
        """Check raw configuration against CONFIG_SCHEMA

        Raises:
            ConfigError: A field is missing or has the wrong type
        """
        try:
            jsonschema.validate(data, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            location = ".".join(str(part) for part in e.absolute_path)
            if location:
                raise ConfigError(f"Invalid configuration in {self.config_path} at '{location}': {e.message}")
            raise ConfigError(f"Invalid configuration in {self.config_path}: {e.message}")

    def apply_environment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay PAGES_DEPLOY_* environment variables"""
        data = dict(data)

        if os.environ.get(ENV_BRANCH):
            data['branch'] = os.environ[ENV_BRANCH]
        if os.environ.get(ENV_REMOTE):
            data['remote'] = os.environ[ENV_REMOTE]
        if os.environ.get(ENV_TIMEOUT):
            data['command_timeout'] = os.environ[ENV_TIMEOUT]

        return data

    def load_config(self, **overrides) -> DeploymentConfig:
        """Load the deployment configuration

        Args:
            **overrides: CLI values; None means "not given"

        Returns:
            Immutable DeploymentConfig
        """
        data = self.apply_environment(self.load_raw())
        config = DeploymentConfig.from_dict(data, working_dir=str(self.project_root))
        config = config.with_overrides(**overrides)
        logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    def write_template(self,
                       repository_identifier: str,
                       branch: str = DEFAULT_BRANCH,
                       remote: str = DEFAULT_REMOTE,
                       force: bool = False) -> Path:
        """Write a starter configuration file

        Raises:
            ConfigError: File exists and force is not set
        """
        if self.config_path.exists() and not force:
            raise ConfigError(
                f"Configuration already exists: {self.config_path}. Use --force to overwrite."
            )

        content = CONFIG_TEMPLATE.format(
            repository_identifier=repository_identifier,
            branch=branch,
            remote=remote,
            report_path=DEFAULT_REPORT_FILE,
            command_timeout=DEFAULT_COMMAND_TIMEOUT
        )

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            f.write(content)

        logger.info(f"Configuration written to {self.config_path}")
        return self.config_path
