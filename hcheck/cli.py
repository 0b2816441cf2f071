import argparse
import sys

from rich.console import Console

from hcheck.checker import EXIT_FATAL, EXIT_USAGE, HCChecker
from hcheck.diagnostics import AllocationError

DESCRIPTION = "Checks if tour is a valid Hamiltonian Path/Cycle for a graph"
USAGE = "hc-check graphfile.hcp tourfile"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hc-check", description=DESCRIPTION, usage=USAGE)
    ap.add_argument("graph", nargs="?", help="Graph file in TSPLIB-like .hcp format")
    ap.add_argument("tour", nargs="?", help="Tour file in TSPLIB-like .tour format")
    ap.add_argument("-q", "--quiet", action="store_true", help="Do not print the verdict reason")
    ap.add_argument("--strict", action="store_true",
                    help="Exit with status 3 when the tour is not a Hamiltonian cycle")
    ap.add_argument("--csv", metavar="PATH", help="Append the verdict to a CSV log")
    ap.add_argument("--show-path", action="store_true", help="Print the tour sequence")
    return ap


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.graph is None or args.tour is None:
        print(DESCRIPTION + "\n")
        print("Usage:")
        print(USAGE + "\n")
        return EXIT_USAGE

    checker = HCChecker(
        args.graph,
        args.tour,
        verbose=not args.quiet,
        strict=args.strict,
        csv_path=args.csv,
        show_path=args.show_path,
    )
    try:
        result = checker.run()
    except AllocationError as e:
        Console(stderr=True, soft_wrap=True).print(f"[bold red]Fatal:[/bold red] {e}")
        return EXIT_FATAL

    return checker.exit_code(result)


if __name__ == "__main__":
    sys.exit(main())
