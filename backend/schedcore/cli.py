import argparse
import json
import logging
import sys
from typing import List, Optional

from .compare import run_all_algorithms
from .config import MAX_PROCESSES
from .datasets import load_processes
from .errors import ConfigurationError, SchedulingInvariantError
from .reporter import BannerReporter

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    # usage errors exit with 1, not argparse's 2
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="schedcore",
        description="Simulate FCFS, SJF, Priority and Round Robin scheduling over a process list.",
    )
    parser.add_argument("csv_file", help="process definitions: name,description,arrival,burst,priority")
    parser.add_argument("time_quantum", type=int, help="Round Robin time quantum (> 0)")
    parser.add_argument("--delay", type=float, default=0.0,
                        help="seconds of wall-clock pause per simulated time unit (default: 0)")
    parser.add_argument("--max-processes", type=int, default=MAX_PROCESSES,
                        help=f"records beyond this count are ignored (default: {MAX_PROCESSES})")
    parser.add_argument("--json", action="store_true", help="print results as JSON instead of banners")
    parser.add_argument("--gantt", action="store_true", help="open the pygame Gantt viewer afterwards")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.time_quantum <= 0:
        print("Time quantum must be greater than 0.", file=sys.stderr)
        return 1

    try:
        table = load_processes(args.csv_file, max_processes=args.max_processes)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1

    listener = None
    if not args.json:
        reporter = BannerReporter(sys.stdout, delay=args.delay)
        listener = reporter.emit

    try:
        results = run_all_algorithms(table, quantum=args.time_quantum, listener=listener)
    except ConfigurationError as exc:
        print(exc, file=sys.stderr)
        return 1
    except SchedulingInvariantError:
        logger.exception("internal scheduling error")
        return 2

    if args.json:
        json.dump([r.to_dict() for r in results], sys.stdout, indent=2)
        sys.stdout.write("\n")

    if args.gantt:
        from schedview.app import run as run_viewer

        run_viewer(results, table)

    return 0


if __name__ == "__main__":
    sys.exit(main())
