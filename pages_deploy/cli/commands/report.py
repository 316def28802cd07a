"""Report command: display a saved deployment report"""

import sys
from pathlib import Path

import click

from ...api.exceptions import ConfigError
from ...constants import DEFAULT_REPORT_FILE
from ...core.report_builder import load_report
from ...utils.output import format_report, print_error


@click.command()
@click.argument('path', required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def report(obj, path):
    """Show the last deployment report

    PATH defaults to the report_path in the configuration, or
    deployment-report.json in the project root.
    """
    if path is None:
        try:
            config = obj.load_config()
            path = config.resolve(config.report_path)
        except ConfigError:
            path = obj.project_root / DEFAULT_REPORT_FILE

    if not path.exists():
        print_error(f"No report found at {path}")
        sys.exit(1)

    try:
        saved = load_report(path)
    except (ValueError, KeyError) as e:
        print_error(f"Invalid report {path}", e)
        sys.exit(1)

    format_report(saved)
