"""
Run defaults, presets and logging setup.

Library modules only read the constants below; handlers are installed by
`setup_logging`, which the command line (or a script) calls once.
"""
from __future__ import annotations
import logging
import sys
from typing import Optional

# reference corner every hypervolume is measured against
DEFAULT_REFERENCE = (0.0, 0.0)

# a gap is sterile once its best contribution is <= rel_tolerance * hv_max
DEFAULT_REL_TOLERANCE = 1e-12

REPORT_COLUMNS = ["index", "hv_contribution", "hv_current", "hv_relative", "point"]

LOG_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'

PRESETS = {
    "default": {
        "reference": DEFAULT_REFERENCE,
        "rel_tolerance": DEFAULT_REL_TOLERANCE,
    },
    # reference derived from the frontier itself: (leftmost x, lowest y)
    "nadir": {
        "reference": "nadir",
        "rel_tolerance": DEFAULT_REL_TOLERANCE,
    },
}


def apply_preset(args) -> dict:
    """
    Build a run config from `args.preset`, then let explicit command-line
    values win over the preset.
    """
    cfg = dict(PRESETS[getattr(args, "preset", None) or "default"])

    if getattr(args, "nadir_reference", False):
        cfg["reference"] = "nadir"
    if getattr(args, "reference", None) is not None:
        cfg["reference"] = tuple(float(v) for v in args.reference)
    if getattr(args, "rel_tolerance", None) is not None:
        cfg["rel_tolerance"] = float(args.rel_tolerance)

    return cfg


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Route 'mocoabm' log records to stderr (stdout is reserved for the report)
    and, when `log_file` is given, also to that file. Safe to call repeatedly.
    """
    logger = logging.getLogger("mocoabm")
    logger.setLevel(level)

    for old in list(logger.handlers):
        old.close()
        logger.removeHandler(old)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    fmt = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    for h in handlers:
        h.setLevel(level)
        h.setFormatter(fmt)
        logger.addHandler(h)

    logger.debug(f"logging to stderr{' and ' + log_file if log_file else ''} at level {logging.getLevelName(level)}")
