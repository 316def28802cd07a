"""Version-control backends for pages-deploy"""

from .base import VersionControl
from .git import GitBackend
from .factory import VersionControlFactory

__all__ = [
    'VersionControl',
    'GitBackend',
    'VersionControlFactory',
]
