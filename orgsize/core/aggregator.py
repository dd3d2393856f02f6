"""
Concurrent package size aggregation.

Fans out one size lookup per package over a bounded worker pool, ticks a
Rich progress bar once per finished lookup, and returns the successful
results sorted largest first.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Iterable, List, Optional

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from orgsize.models import AggregationResult, FetchOutcome, FetchStatus, PackageSizeInfo
from orgsize.registry.client import NpmRegistryClient


def sort_by_size(packages: Iterable[PackageSizeInfo]) -> List[PackageSizeInfo]:
    """Largest first; equal sizes ordered by name."""
    return sorted(packages, key=lambda info: (-info.raw_size, info.name))


class SizeAggregator:
    """Collects package sizes for an organization."""

    def __init__(
        self,
        client: NpmRegistryClient,
        concurrency: Optional[int] = None,
        console: Optional[Console] = None,
        show_progress: bool = True,
    ):
        self.client = client
        self.concurrency = client.config.concurrency if concurrency is None else concurrency
        self.console = console or Console()
        self.show_progress = show_progress
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = {"submitted": 0, "completed": 0}

    def _max_workers(self, package_count: int) -> int:
        # 0 keeps the one-request-per-package burst
        if self.concurrency == 0:
            return package_count
        return min(self.concurrency, package_count)

    def _fetch(self, package: str) -> FetchOutcome:
        try:
            return self.client.fetch_package_size(package)
        except Exception as e:
            self.logger.error(f"Failed to fetch size for package {package}: {e}")
            return FetchOutcome(package=package, status=FetchStatus.FAILED, error=str(e))

    def collect(self, packages: List[str]) -> AggregationResult:
        """Fetch every package's size and return the sorted successes."""
        self.stats = {"submitted": len(packages), "completed": 0}
        outcomes: List[FetchOutcome] = []

        if not packages:
            return AggregationResult(packages=[], outcomes=outcomes)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            disable=not self.show_progress,
            transient=True,
        ) as progress:
            workers = self._max_workers(len(packages))
            self.client.ensure_pool_size(workers)
            fetch_task = progress.add_task("Fetching package sizes...", total=len(packages))

            with ThreadPoolExecutor(max_workers=workers) as executor:
                future_to_package = {executor.submit(self._fetch, pkg): pkg for pkg in packages}

                for future in as_completed(future_to_package):
                    package = future_to_package[future]
                    try:
                        outcome = future.result()
                    except Exception as e:
                        outcome = FetchOutcome(package=package, status=FetchStatus.FAILED, error=str(e))

                    outcomes.append(outcome)
                    self.stats["completed"] += 1
                    progress.update(fetch_task, description=package)
                    progress.advance(fetch_task)

        kept = [outcome.info for outcome in outcomes if outcome.ok and outcome.info is not None]
        self.logger.info(f"Collected sizes for {len(kept)} of {len(packages)} packages")
        return AggregationResult(packages=sort_by_size(kept), outcomes=outcomes)
