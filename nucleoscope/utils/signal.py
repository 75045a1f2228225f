"""BigWig signal access."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

import numpy as np
import pyBigWig

from ..core.exceptions import FileReadError

logger = logging.getLogger(__name__)


class BigWigTrack:
    """
    Read-only view of a BigWig file.

    The underlying pyBigWig handle is seekable and stateful; share one
    instance between callers only if they run one after another.
    """

    def __init__(self, handle, path: str):
        self._handle = handle
        self.path = path

    @property
    def chroms(self) -> dict:
        return self._handle.chroms()

    def values(self, chrom: str, start: int, end: int) -> np.ndarray:
        """
        Per-base values over ``[start, end)``.

        Positions without data are NaN.
        """
        try:
            values = self._handle.values(chrom, start, end)
        except RuntimeError as e:
            raise FileReadError(
                f"Error querying {chrom}:{start}-{end} in {self.path}: {e}"
            ) from e
        return np.asarray(values, dtype=np.float32)

    def close(self) -> None:
        self._handle.close()


@contextmanager
def open_bigwig(bigwig_file: Union[str, Path]) -> Iterator[BigWigTrack]:
    """Open a BigWig file for the duration of a ``with`` block."""
    bigwig_file = str(bigwig_file)
    try:
        handle = pyBigWig.open(bigwig_file)
    except RuntimeError as e:
        raise FileReadError(f"Error opening BigWig file {bigwig_file}: {e}") from e
    if handle is None:
        raise FileReadError(f"Error opening BigWig file {bigwig_file}")
    if not handle.isBigWig():
        handle.close()
        raise FileReadError(f"Not a BigWig file: {bigwig_file}")

    track = BigWigTrack(handle, bigwig_file)
    logger.debug(f"Opened {bigwig_file} with chromosomes {list(track.chroms)}")
    try:
        yield track
    finally:
        track.close()
