"""Command-line driver: read one puzzle, enumerate its solutions and print each one boxed."""

# solve_cli.py
# - Reads a puzzle from stdin (-i) or a file (-f PATH)
# - Parses it for the requested dimension (default 9)
# - Enumerates every solution and reports none / unique / multiple
#
# Usage:
#   python -m apps.cli.solve_cli -f puzzle.txt --workers 4
#   echo "0047000615..." | python -m apps.cli.solve_cli -i

import argparse
import logging
import sys
from pathlib import Path

from sudoku_engine import GridFormat, SudokuError, load_config, render_grid, solve_all

logger = logging.getLogger(__name__)


def read_puzzle(args) -> str:
    if args.stdin:
        return sys.stdin.read()
    return Path(args.file).read_text(encoding="utf-8")


def main(args) -> int:
    try:
        cfg = load_config(
            args.config,
            dimension=args.dimension,
            workers=args.workers,
            show_candidates=True if args.candidates else None,
        )
        text = read_puzzle(args)
        grid = GridFormat(cfg.dimension).parse(text)
    except (SudokuError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.debug("puzzle:\n%s", render_grid(grid, show_candidates=cfg.show_candidates))
    result = solve_all(grid, cfg)
    print(result.message)
    for solution in result.solutions:
        print()
        print(render_grid(solution, show_candidates=cfg.show_candidates))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate every solution of a Sudoku-style puzzle.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("-i", dest="stdin", action="store_true", help="Read a grid from standard input")
    src.add_argument("-f", dest="file", metavar="PATH", help="Read a grid from the specified file")
    ap.add_argument("--dimension", type=int, default=None, help="Grid side length (multiple of 3, default 9)")
    ap.add_argument("--workers", type=int, default=None, help="Worker processes (default: CPU count)")
    ap.add_argument("--config", type=str, default=None, help="YAML file with solver settings")
    ap.add_argument("--candidates", action="store_true", help="Draw open cells as candidate sets")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def cli(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(message)s",
        stream=sys.stderr,
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
