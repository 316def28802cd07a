"""Business logic services for pages-deploy"""

from .config_service import ConfigService
from .deploy_service import DeploymentPipeline, DeployService, deploy

__all__ = [
    "ConfigService",
    "DeploymentPipeline",
    "DeployService",
    "deploy",
]
