import csv
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Optional

from rich.console import Console
from rich.markup import escape

from hcheck.diagnostics import Diagnostic
from hcheck.tour import format_path
from hcheck.validator import Reason

if TYPE_CHECKING:
    from hcheck.graph import Graph
    from hcheck.tour import Tour
    from hcheck.validator import ValidationResult


CSV_HEADER = ["graph", "tour", "nodes", "edges", "tour_nodes", "valid", "reason"]


class Reporter:
    """Reporter class for printing check progress to the rich console and logging verdicts to CSV."""

    def __init__(
        self,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        csv_path: Optional[str] = None,
        quiet: bool = False,
    ):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_console = error_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self.csv_path = Path(csv_path) if csv_path else None
        self.quiet = quiet
        self.csv_file = None
        self.csv_writer = None

    def start(self):
        """Open the CSV log, writing the header row if the file is new or empty."""
        if self.csv_path is None or self.csv_file is not None:
            return
        self.csv_path.parent.mkdir(parents=True, exist_ok=True)
        write_header = not self.csv_path.exists() or self.csv_path.stat().st_size == 0
        self.csv_file = open(self.csv_path, "a", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        if write_header:
            self.csv_writer.writerow(CSV_HEADER)

    def stop(self):
        """Close the CSV file."""
        if self.csv_file:
            self.csv_file.close()
            self.csv_file = None
            self.csv_writer = None

    def graph_loaded(self, graph: "Graph"):
        self.console.print(
            f"Graph has [cyan]{graph.node_count}[/cyan] nodes and [cyan]{graph.edge_count}[/cyan] edges"
        )

    def tour_loaded(self, tour: "Tour", show_path: bool = False):
        self.console.print(f"Tour has [cyan]{tour.node_count}[/cyan] nodes")
        if show_path and tour.node_count > 0:
            self.console.print(format_path(tour.sequence))

    def diagnostics(self, items: Iterable[Diagnostic]):
        """Print parse diagnostics to stderr."""
        for item in items:
            self.error_console.print(f"[yellow]{escape(str(item))}[/yellow]")

    def verdict(self, result: "ValidationResult"):
        """Print the reason for the validation outcome."""
        if self.quiet:
            return
        if result.is_path:
            self.console.print("[green]Valid Hamiltonian Path[/green]")
        if result.valid:
            self.console.print(f"[bold green]{result.message}[/bold green]")
        else:
            self.console.print(f"[bold red]{escape(result.message)}[/bold red]")

    def log(self, graph_file, tour_file, graph: "Graph", tour: "Tour", result: "ValidationResult"):
        """Append one verdict row to the CSV log, if one is configured."""
        if self.csv_writer is None:
            return
        self.csv_writer.writerow([
            str(graph_file),
            str(tour_file),
            graph.node_count,
            graph.edge_count,
            tour.node_count,
            int(result.valid),
            Reason(result.reason).name.lower(),
        ])
        self.csv_file.flush()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()
        return False
