"""Verify command: run only the precondition gate"""

import sys

import click

from ...api.exceptions import ConfigError
from ...services.deploy_service import DeployService
from ...utils.output import format_file_check, print_error, print_success, print_warning


@click.command()
@click.pass_obj
def verify(obj):
    """Check that required and forced files exist

    Nothing is staged or committed. Exits non-zero if a file that would
    abort a deployment is missing.
    """
    try:
        config = obj.load_config()
    except ConfigError as e:
        print_error(str(e))
        sys.exit(1)

    check = DeployService(config).verify()
    format_file_check(check)

    gate = set(config.gate_files)
    fatal = [f for f in check.missing_in_order if f in gate]
    skipped = [f for f in check.missing_in_order if f not in gate]

    for file in skipped:
        print_warning(f"{file} not found (would be skipped)")

    if fatal:
        print_error(f"Missing required files: {', '.join(fatal)}")
        sys.exit(1)

    print_success("All required files present")
