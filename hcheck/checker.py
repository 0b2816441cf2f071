from typing import NamedTuple, Optional

from hcheck.graph import read_graph
from hcheck.reporter import Reporter
from hcheck.tour import read_tour
from hcheck.validator import ValidationResult, validate_tour

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FATAL = 2
EXIT_INVALID = 3


class Config(NamedTuple):
    graph_file: str
    tour_file: str
    verbose: bool = True
    strict: bool = False
    csv_path: Optional[str] = None
    show_path: bool = False


class HCChecker:
    def __init__(
        self,
        graph_file: str,
        tour_file: str,
        verbose: bool = True,
        strict: bool = False,  # non-zero exit code for invalid tours
        csv_path: Optional[str] = None,
        show_path: bool = False,
    ):
        self.graph = None
        self.tour = None
        self.result = None
        self.config = Config(
            graph_file=graph_file,
            tour_file=tour_file,
            verbose=verbose,
            strict=strict,
            csv_path=csv_path,
            show_path=show_path,
        )

    def load(self, reporter: Reporter):
        """Read the graph and tour files, reporting sizes and parse diagnostics."""
        self.graph = read_graph(self.config.graph_file)
        reporter.diagnostics(self.graph.diagnostics)
        reporter.graph_loaded(self.graph)

        self.tour = read_tour(self.config.tour_file)
        reporter.diagnostics(self.tour.diagnostics)
        reporter.tour_loaded(self.tour, show_path=self.config.show_path)

    def run(self, reporter: Reporter = None) -> ValidationResult:
        """Load both files and validate the tour against the graph.

        Args:
            reporter: Optional Reporter instance for output. If None, a default
                      reporter will be created from the config.
        """
        if reporter is None:
            reporter = Reporter(csv_path=self.config.csv_path, quiet=not self.config.verbose)

        reporter.start()
        try:
            self.load(reporter)
            self.result = validate_tour(self.tour, self.graph)
            reporter.verdict(self.result)
            reporter.log(self.config.graph_file, self.config.tour_file, self.graph, self.tour, self.result)
        finally:
            reporter.stop()

        return self.result

    def exit_code(self, result: ValidationResult = None) -> int:
        """Process exit status, 0 unless strict mode is on and the tour is invalid."""
        result = result or self.result
        if self.config.strict and (result is None or not result.valid):
            return EXIT_INVALID
        return EXIT_OK
