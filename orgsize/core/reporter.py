"""
Report output for orgsize.

Writes the CSV file and renders the console table.
"""
import csv
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from orgsize.models import AggregationResult, FetchStatus, PackageSizeInfo


CSV_HEADER = ["Package Name", "Size (Bytes)", "Size (Pretty)"]


class Reporter:
    """Renders package sizes as CSV and as a Rich table."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write_csv(self, path: str, packages: List[PackageSizeInfo]) -> str:
        """Write header plus one row per package, in the given order."""
        with open(path, "w", encoding="utf-8", newline="") as fp:
            writer = csv.writer(fp, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for info in packages:
                writer.writerow([info.name, info.raw_size, info.size])
        return path

    def build_table(self, packages: List[PackageSizeInfo]) -> Table:
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("name", style="white", no_wrap=True)
        table.add_column("rawSize", justify="right", style="white")
        table.add_column("size", justify="right", style="white")
        for info in packages:
            table.add_row(info.name, str(info.raw_size), info.size)
        return table

    def print_table(self, packages: List[PackageSizeInfo]):
        self.console.print(self.build_table(packages))

    def print_summary(self, result: AggregationResult):
        self.console.print(
            f"📦 {len(result.packages)} of {result.total} packages reported "
            f"({result.count(FetchStatus.NOT_FOUND)} not found, "
            f"{result.count(FetchStatus.NO_SIZE)} without size, "
            f"{result.count(FetchStatus.FAILED)} failed)"
        )

    def render(self, result: AggregationResult, csv_path: str):
        self.write_csv(csv_path, result.packages)
        self.console.print(f"CSV file created: {csv_path}")
        self.print_table(result.packages)
        self.print_summary(result)
