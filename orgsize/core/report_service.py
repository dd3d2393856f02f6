"""
Report service implementation for orgsize.

Runs the linear reporting pipeline:
resolve credentials -> list packages -> fetch sizes -> sort -> write/print.
"""
import logging
from typing import Optional

from rich.console import Console

from orgsize.core.aggregator import SizeAggregator
from orgsize.core.config_manager import ConfigManager
from orgsize.core.credentials import CredentialResolver
from orgsize.core.reporter import Reporter
from orgsize.models import AggregationResult
from orgsize.registry.client import NpmRegistryClient
from orgsize.rich_utils.ui_helpers import get_console
from orgsize.utils.exceptions import SetupError


class ReportService:
    """Builds the package size report for one organization."""

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
        client_factory=NpmRegistryClient,
    ):
        self.config_manager = ConfigManager()
        self.console = console or get_console()
        self.err_console = err_console or get_console(stderr=True)
        self.client_factory = client_factory
        self.logger = logging.getLogger(self.__class__.__name__)

    def run(self, org: str, config: dict) -> AggregationResult:
        """Run the pipeline with a validated config. Setup errors propagate."""
        resolver = CredentialResolver(
            registry_url=config["registry"]["url"],
            npmrc_path=config["credentials"].get("npmrc_path"),
        )
        token = resolver.resolve()
        registry_config = self.config_manager.build_registry_config(config, token)

        with self.client_factory(registry_config) as client:
            packages = client.list_org_packages(org)
            self.console.print(f"🔍 Found {len(packages)} packages in organization {org}", style="cyan")

            aggregator = SizeAggregator(
                client,
                concurrency=registry_config.concurrency,
                console=self.console,
                show_progress=bool(config["output"].get("progress", True)),
            )
            result = aggregator.collect(packages)

        Reporter(self.console).render(result, config["output"]["csv_file"])
        return result

    def execute_report(
        self,
        org: Optional[str],
        config_path: Optional[str] = None,
        output: Optional[str] = None,
        npmrc_path: Optional[str] = None,
        registry: Optional[str] = None,
        concurrency: Optional[int] = None,
        progress: Optional[bool] = None,
    ) -> int:
        """Execute the report and return the process exit code."""
        if not org:
            self.err_console.print("Please provide the organization name as a command-line argument.")
            return 1

        try:
            config = self.config_manager.load(
                config_path,
                output=output,
                npmrc_path=npmrc_path,
                registry=registry,
                concurrency=concurrency,
                progress=progress,
            )
            self.run(org, config)
        except SetupError as e:
            self.err_console.print(f"❌ {e}")
            return 1
        except Exception as e:
            self.logger.error(f"Error during processing: {e}" if str(e) else "Error during processing: An unknown error occurred.")

        return 0
