"""Deploy command implementation"""

import sys

import click
from rich.markup import escape
from rich.panel import Panel

from ...api.exceptions import ConfigError, DeployLockError
from ...constants import EMOJI_ROCKET
from ...services.deploy_service import DeployService
from ...utils.output import console, format_report


@click.command()
@click.option('--message', '-m', default=None,
              help='Commit message (default: timestamped deploy message)')
@click.option('--branch', '-b', default=None,
              help='Branch to push (overrides config)')
@click.option('--remote', '-r', default=None,
              help='Remote to verify and push to (overrides config)')
@click.option('--timeout', '-t', type=click.FloatRange(min=0, min_open=True), default=None,
              help='Per-command timeout in seconds')
@click.option('--report-path', default=None,
              help='Where to write the JSON report')
@click.option('--strict-forced-files', is_flag=True, default=None,
              help='Abort when a forced file is missing instead of skipping it')
@click.pass_obj
def deploy(obj, message, branch, remote, timeout, report_path, strict_forced_files):
    """Verify, stage, commit and push the site

    Examples:
        pages-deploy deploy
        pages-deploy deploy -m "Release 3.1.0"
        pages-deploy -C site/ deploy --branch gh-pages
    """
    try:
        config = obj.load_config(
            branch=branch,
            remote=remote,
            command_timeout=timeout,
            report_path=report_path,
            strict_forced_files=strict_forced_files or None,
        )
    except ConfigError as e:
        console.print(Panel(f"[red]{escape(str(e))}[/red]", title="[bold red]Configuration Error[/bold red]",
                            border_style="red"))
        sys.exit(1)

    console.rule(f"{EMOJI_ROCKET} Deployment Manager")

    try:
        report = DeployService(config).deploy(message)
    except DeployLockError as e:
        console.print(Panel(f"[red]{escape(str(e))}[/red]", title="[bold red]Deployment Locked[/bold red]",
                            border_style="red"))
        sys.exit(1)

    format_report(report)

    if not report.is_success:
        sys.exit(1)
