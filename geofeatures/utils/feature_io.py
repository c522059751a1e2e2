"""
Feature text files.

Format: one point per line, "x,y" followed by a newline, in feature order.
For line detectors that is start then end point of every segment.
"""

import logging
from typing import Iterable, List, Tuple

from ..exceptions import ExportError

logger = logging.getLogger(__name__)


def write_features(path, features: Iterable[Tuple[int, int]]):
    """
    Writes features to path.

    Raises ExportError if the file cannot be opened or a write fails
    partway. Text writes are buffered, so the flush and close are inside
    the guarded block too. The file handle is closed on every exit path.
    """
    path = str(path)
    try:
        out_file = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        logger.error("Could not open the file for writing: %s", path)
        raise ExportError(f"Could not open the file for writing: {path}") from exc

    try:
        with out_file:
            for x, y in features:
                out_file.write(f"{int(x)},{int(y)}\n")
            out_file.flush()
    except OSError as exc:
        logger.error("Failed to write data to file: %s", path)
        raise ExportError(f"Failed to write data to file: {path}") from exc

    logger.info("Features written to file successfully: %s", path)


def read_features(path) -> List[Tuple[int, int]]:
    """
    Parses a file written by write_features back into (x, y) pairs.

    Raises ValueError naming the path and line number for a line that is
    not two comma-separated integers.
    """
    path = str(path)
    features = []
    with open(path, "r", encoding="utf-8") as in_file:
        for line_no, line in enumerate(in_file, 1):
            line = line.strip()
            if not line:
                continue
            try:
                x, y = line.split(",")
                features.append((int(x), int(y)))
            except ValueError as exc:
                raise ValueError(f"{path}:{line_no}: expected 'x,y', got {line!r}") from exc
    return features
