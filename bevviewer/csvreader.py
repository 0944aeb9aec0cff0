"""Reading detections and tracks from comma-separated files.

The first line of each file is a header and is ignored. Fields are separated
by commas; empty fields are skipped, so later values shift left. Numbers are
parsed leniently: the longest numeric prefix counts and anything unparsable
reads as zero.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator

from bevviewer.model import Detection, Detections, Track, Tracks

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _to_int(text: str) -> int:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def _to_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


_DETECTION_COLUMNS: tuple[tuple[str, Callable[[str], float | int]], ...] = (
    ("pos_x", _to_float),
    ("pos_y", _to_float),
    ("doppler", _to_float),
    ("quality", _to_int),
)

_TRACK_COLUMNS: tuple[tuple[str, Callable[[str], float | int]], ...] = (
    ("pos_x", _to_float),
    ("pos_y", _to_float),
    ("vel_x", _to_float),
    ("vel_y", _to_float),
    ("length", _to_float),
    ("width", _to_float),
    ("heading_rad", _to_float),
    ("id", _to_int),
)


def _rows(
    path: str | os.PathLike[str],
    columns: tuple[tuple[str, Callable[[str], float | int]], ...],
) -> Iterator[tuple[int, dict[str, float | int]]]:
    """Yield (frame, field values) for every data row of the file."""
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            tokens = [token for token in line.rstrip("\r\n").split(",") if token]
            if not tokens:
                continue
            frame = _to_int(tokens[0])
            values = {
                name: parse(token)
                for (name, parse), token in zip(columns, tokens[1:])
            }
            yield frame, values


def _group(rows, factory):
    frames: dict[int, list] = {}
    last_frame: int | None = None
    for frame, values in rows:
        frames.setdefault(frame, []).append(factory(**values))
        last_frame = frame
    return dict(sorted(frames.items())), last_frame


def read_detections(path: str | os.PathLike[str]) -> Detections:
    """Read detections: frame, x, y, doppler, quality.

    ``last_frame`` is the frame of the final data row. Raises OSError when
    the file cannot be opened.
    """
    frames, last_frame = _group(_rows(path, _DETECTION_COLUMNS), Detection)
    return Detections(frames=frames, last_frame=last_frame)


def read_tracks(path: str | os.PathLike[str]) -> Tracks:
    """Read tracks: frame, x, y, vx, vy, length, width, heading, id.

    ``last_frame`` is the frame of the final data row. Raises OSError when
    the file cannot be opened.
    """
    frames, last_frame = _group(_rows(path, _TRACK_COLUMNS), Track)
    return Tracks(frames=frames, last_frame=last_frame)