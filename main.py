import sys
import argparse
import logging

from pathgrid.app import App
from pathgrid.cell import parse_cell_key
from pathgrid.config import (
    GRID_COLS,
    GRID_ROWS,
    LOG_FORMAT,
    LOG_LEVEL,
    MIN_GRID_SIZE,
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Paint walls on a grid and find the shortest path with A*"
    )
    parser.add_argument(
        "--cols", type=int, default=GRID_COLS, help="Grid width in cells"
    )
    parser.add_argument(
        "--rows", type=int, default=GRID_ROWS, help="Grid height in cells"
    )
    parser.add_argument(
        "--heap",
        action="store_true",
        help="Use a binary heap for the open set instead of a linear scan",
    )
    parser.add_argument(
        "--start", type=parse_cell_key, help="Start cell as x,y"
    )
    parser.add_argument("--end", type=parse_cell_key, help="End cell as x,y")
    parser.add_argument(
        "--log-level", default=LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)"
    )
    args = parser.parse_args(argv)
    if args.cols < MIN_GRID_SIZE or args.rows < MIN_GRID_SIZE:
        parser.error(
            f"--cols and --rows must be at least {MIN_GRID_SIZE}"
        )
    for name in ("start", "end"):
        cell_id = getattr(args, name)
        if cell_id is None:
            continue
        x, y = cell_id
        if not (0 < x < args.cols - 1 and 0 < y < args.rows - 1):
            parser.error(f"--{name} must be inside the grid frame")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    app = App(
        cols=args.cols,
        rows=args.rows,
        heap=args.heap,
        start=args.start,
        end=args.end,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
