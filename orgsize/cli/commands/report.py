"""
Report command implementation.

Thin wrapper around ReportService that handles CLI argument parsing
and delegates business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from orgsize.core.report_service import ReportService
from orgsize.rich_utils.ui_helpers import configure_logging


def report_command(
    org: Optional[str] = typer.Argument(None, help="npm organization to report on"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="CSV output file (default: package-sizes.csv)"),
    npmrc_path: Optional[str] = typer.Option(None, "--npmrc", help="npm config file holding the auth token (default: ~/.npmrc)"),
    registry: Optional[str] = typer.Option(None, "--registry", help="Registry base URL"),
    concurrency: Optional[int] = typer.Option(None, "--concurrency", help="Maximum concurrent lookups, 0 for unlimited"),
    no_progress: bool = typer.Option(False, "--no-progress", help="Hide the progress bar"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
):
    """Report the unpacked size of every package in an npm organization."""

    configure_logging(verbose=verbose)

    # Delegate to service layer
    report_service = ReportService()
    exit_code = report_service.execute_report(
        org=org,
        config_path=config_path,
        output=output,
        npmrc_path=npmrc_path,
        registry=registry,
        concurrency=concurrency,
        progress=False if no_progress else None,
    )

    # Exit with appropriate code
    if exit_code != 0:
        sys.exit(exit_code)
