from __future__ import annotations


class MocoError(Exception):
    """Base class for every error raised by mocoabm."""


class InvalidFrontier(MocoError, ValueError):
    """
    Segment input that cannot describe an efficient frontier:
    empty, malformed, non-monotonic or crossing.

    `position` is the 0-based index of the offending segment, or None when the
    problem is not tied to one segment (empty input, bad reference corner).
    """

    def __init__(self, message: str, position: int | None = None):
        self.position = position
        if position is not None:
            message = f"segment {position}: {message}"
        super().__init__(message)


class InvalidCount(MocoError, ValueError):
    def __init__(self, count):
        self.count = count
        super().__init__(f"point count must be a positive integer, got {count!r}")


class Exhausted(MocoError):
    """
    Raised when every remaining gap is sterile, i.e. the curve is covered.
    Not a failure: callers stop and keep what was emitted so far.
    """

    def __init__(self, emitted: int = 0):
        self.emitted = emitted
        super().__init__(f"frontier fully covered after {emitted} point(s)")
