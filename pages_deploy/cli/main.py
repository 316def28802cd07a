# pages_deploy/cli/main.py
"""Main CLI entry point for pages-deploy"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT
from ..models.config import DeploymentConfig
from ..services.config_service import ConfigService

from .commands import deploy, verify, status, init, report

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object with lazy configuration loading

    The configuration file is only read when a command asks for it, so
    commands like ``init`` work before a config exists.
    """

    def __init__(self, project_root: Path, config_path: Optional[Path] = None):
        self.project_root = project_root
        self.config_service = ConfigService(project_root, config_path)
        self.verbose: bool = False
        self.debug: bool = False

    def load_config(self, **overrides) -> DeploymentConfig:
        """Load the deployment configuration, applying CLI overrides"""
        return self.config_service.load_config(**overrides)


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all logging except the report')
@click.option('-C', '--project-root', type=click.Path(file_okay=False, path_type=Path),
              default='.', help='Directory to deploy from')
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Configuration file (default: .pages-deploy.yaml)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root, config_path):
    """Pages Deploy - Publish a static site from its repository

    Verifies required files, checks that you are in the right repository,
    stages changes (including force-added ignored files), commits, pushes,
    and writes a deployment report.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root, config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(verify.verify)
cli.add_command(status.status)
cli.add_command(init.init)
cli.add_command(report.report)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
