"""CLI commands"""

from . import deploy
from . import verify
from . import status
from . import init
from . import report

__all__ = [
    "deploy",
    "verify",
    "status",
    "init",
    "report",
]
