"""
Boundary I/O: segment input and the tab-separated report.

Input is a stream of whitespace-separated numbers read four at a time as
`u1 u2 v1 v2` (start point, end point), with no header. Line breaks carry no
meaning.
"""
from __future__ import annotations
import logging
import sys
from typing import IO, Iterable, Optional

import numpy as np
import pandas as pd

from .config import REPORT_COLUMNS
from .errors import InvalidFrontier
from .frontier import Segment
from .hypervolume import EmissionRecord

logger = logging.getLogger(__name__)


def parse_segments(text: str) -> list[Segment]:
    tokens = text.split()
    if len(tokens) % 4 != 0:
        raise InvalidFrontier(
            f"incomplete record: {len(tokens) % 4} coordinate(s) instead of 4",
            position=len(tokens) // 4,
        )

    values = np.empty(len(tokens), dtype=float)
    for i, tok in enumerate(tokens):
        try:
            values[i] = float(tok)
        except ValueError:
            raise InvalidFrontier(f"failed to parse coordinate {tok!r}", position=i // 4) from None

    return [Segment.from_coords(*row) for row in values.reshape(-1, 4)]


def read_segments(path: Optional[str] = None) -> list[Segment]:
    """Read segments from `path`, or from standard input when it is None."""
    if path is None:
        text = sys.stdin.read()
        source = "<stdin>"
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        source = path

    segments = parse_segments(text)
    logger.info(f"Read {len(segments)} segment(s) from {source}")
    return segments


def format_point(point) -> str:
    return ",".join(repr(float(v)) for v in point)


def records_to_frame(records: Iterable[EmissionRecord]) -> pd.DataFrame:
    rows = [
        {
            "index": r.index,
            "hv_contribution": r.contribution,
            "hv_current": r.hv_current,
            "hv_relative": r.hv_relative,
            "point": format_point(r.point),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def write_report(records: Iterable[EmissionRecord], stream: Optional[IO[str]] = None, header: bool = True) -> None:
    """
    Write one tab-separated line per record, in emission order:
      index, contribution, hv_current, hv_relative, "x,y"
    """
    if stream is None:
        stream = sys.stdout
    df = records_to_frame(records)
    df.to_csv(stream, sep="\t", index=False, header=header, lineterminator="\n")
