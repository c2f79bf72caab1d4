from __future__ import annotations
import argparse
import logging
import sys

from .config import PRESETS, apply_preset, setup_logging
from .errors import MocoError
from .frontier import build
from .io import read_segments, write_report
from .selector import check_count, run

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="mocoabm",
        description="Greedy hypervolume point sequence along a piecewise-linear bi-objective frontier",
    )
    p.add_argument("-n", dest="num", type=int, required=True, help="number of points to retrieve")
    p.add_argument("-f", dest="file", help="file with the segment list (stdin is used if not set)")
    p.add_argument("--preset", choices=sorted(PRESETS), default="default")
    ref = p.add_mutually_exclusive_group()
    ref.add_argument("--reference", nargs=2, type=float, metavar=("X", "Y"),
                     help="reference corner (default 0 0)")
    ref.add_argument("--nadir-reference", action="store_true",
                     help="use (leftmost x, lowest y) of the frontier as reference corner")
    p.add_argument("--rel-tolerance", type=float,
                   help="stop once the best contribution is <= this fraction of hv_max")
    p.add_argument("--no-header", action="store_true", help="omit the column header line")
    p.add_argument("--plot", help="write a PNG of the frontier and the selected points")
    p.add_argument("--anytime-plot", help="write a PNG of relative hypervolume vs points")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)
    cfg = apply_preset(args)
    logger.debug(f"Running with config: {cfg}")

    try:
        n = check_count(args.num)
        frontier = build(read_segments(args.file), reference=cfg["reference"])
        records = run(frontier, n, rel_tolerance=cfg["rel_tolerance"])
    except (MocoError, OSError) as e:
        logger.debug("run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    write_report(records, sys.stdout, header=not args.no_header)

    if args.plot or args.anytime_plot:
        from .viz import plot_anytime_curve, plot_selection
        if args.plot:
            plot_selection(frontier, records, args.plot)
        if args.anytime_plot:
            plot_anytime_curve(records, args.anytime_plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
