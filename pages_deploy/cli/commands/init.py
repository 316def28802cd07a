"""Initialize command for creating a deployment configuration"""

import sys

import click
from rich.markup import escape

from ...api.exceptions import ConfigError
from ...constants import DEFAULT_BRANCH, DEFAULT_REMOTE, EMOJI_SUCCESS
from ...utils.output import console, print_error


@click.command()
@click.option('--identifier', '-i', required=True,
              help='Substring the remote URL must contain (e.g. the repository name)')
@click.option('--branch', '-b', default=DEFAULT_BRANCH, show_default=True,
              help='Branch to push')
@click.option('--remote', '-r', default=DEFAULT_REMOTE, show_default=True,
              help='Remote to push to')
@click.option('--force', '-f', is_flag=True,
              help='Overwrite an existing configuration')
@click.pass_obj
def init(obj, identifier, branch, remote, force):
    """Create a .pages-deploy.yaml configuration

    Examples:
        pages-deploy init --identifier finance-dashboard
        pages-deploy init -i my-site --branch gh-pages
    """
    try:
        path = obj.config_service.write_template(
            repository_identifier=identifier,
            branch=branch,
            remote=remote,
            force=force
        )
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    console.print(f"{EMOJI_SUCCESS} Configuration created: {escape(str(path))}")
    console.print("\nNext steps:")
    console.print("1. List required_files and forced_files in the configuration")
    console.print("2. pages-deploy verify")
    console.print("3. pages-deploy deploy")
