"""Status command: show repository state without changing it"""

import sys

import click

from ...api.exceptions import DeployToolError
from ...services.deploy_service import DeployService
from ...utils.output import format_repository_status, print_error


@click.command()
@click.pass_obj
def status(obj):
    """Show branch, remote and pending changes

    Exits non-zero if the repository cannot be queried or is not the
    configured deployment repository.
    """
    try:
        config = obj.load_config()
        repo_status = DeployService(config).status()
    except DeployToolError as e:
        print_error(str(e))
        sys.exit(1)

    format_repository_status(repo_status)

    if not repo_status.is_expected_repository:
        print_error(f"Remote does not contain '{config.repository_identifier}'")
        sys.exit(1)
