"""Coordinate-wise averaging of signals over aligned windows."""

import logging
from typing import Iterable, Pattern

import numpy as np
import pandas as pd

from .globals import (
    DEFAULT_CHROM,
    PROMOTER_GC_WINDOW,
    PROMOTER_LENGTH,
    PROMOTER_SIGNAL_LENGTH,
    PROMOTER_UPSTREAM,
    TFBS_FLANK,
)
from .gtf import Strand
from ..utils.sequence import find_motif_centers, get_gc_content

logger = logging.getLogger(__name__)


class SignalAccumulator:
    """Running per-offset sum and observation count for equal-length windows."""

    def __init__(self, length: int, first_offset: int = 0):
        self.length = length
        self.first_offset = first_offset
        self.sums = np.zeros(length, dtype=np.float64)
        self.counts = np.zeros(length, dtype=np.int64)

    def add(self, values) -> None:
        """Add one window; NaN entries are treated as missing, not zero."""
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (self.length,):
            raise ValueError(f"Expected {self.length} values, got {values.shape[0]}")
        observed = ~np.isnan(values)
        self.sums[observed] += values[observed]
        self.counts[observed] += 1

    def mean(self) -> np.ndarray:
        means = np.full(self.length, np.nan)
        np.divide(self.sums, self.counts, out=means, where=self.counts > 0)
        return means

    def to_frame(self) -> pd.DataFrame:
        """Profile with one row per offset: ``offset``, ``mean``, ``count``."""
        return pd.DataFrame({
            'offset': np.arange(self.first_offset, self.first_offset + self.length),
            'mean': self.mean(),
            'count': self.counts,
        })


def aggregate_promoter_affinity(
    promoters: Iterable,
    bigwig,
    chrom: str = DEFAULT_CHROM,
    length: int = PROMOTER_SIGNAL_LENGTH
) -> pd.DataFrame:
    """
    Average a BigWig signal over promoter windows.

    Minus strand windows are reversed so that every row reads upstream to
    downstream. Offset 0 is the start codon.

    Args:
        promoters: PromoterRegion objects
        bigwig: Object with ``values(chrom, start, end)``, e.g. a BigWigTrack
        chrom: Chromosome name in the BigWig file
        length: Number of positions fetched per promoter

    Returns:
        DataFrame with columns offset, mean, count
    """
    acc = SignalAccumulator(length, first_offset=-PROMOTER_UPSTREAM)

    n_promoters = 0
    for promoter in promoters:
        affinity = np.asarray(
            bigwig.values(chrom, promoter.location, promoter.location + length),
            dtype=np.float64,
        )
        if promoter.strand is Strand.MINUS:
            affinity = affinity[::-1]
        acc.add(affinity)
        n_promoters += 1

    logger.info(f"Aggregated signal over {n_promoters} promoters")
    return acc.to_frame()


def aggregate_tfbs_affinity(
    promoters: Iterable,
    motif: Pattern,
    bigwig,
    chrom: str = DEFAULT_CHROM,
    flank: int = TFBS_FLANK
) -> pd.DataFrame:
    """
    Average a BigWig signal around motif matches in promoters.

    Windows are not reoriented for minus strand promoters.

    Args:
        promoters: PromoterRegion objects
        motif: Compiled bytes regex
        bigwig: Object with ``values(chrom, start, end)``
        chrom: Chromosome name in the BigWig file
        flank: Positions on each side of the motif centre

    Returns:
        DataFrame with columns offset (-flank..+flank), mean, count
    """
    acc = SignalAccumulator(2 * flank + 1, first_offset=-flank)

    n_sites = 0
    for promoter in promoters:
        for center in find_motif_centers(promoter, motif):
            if center - flank < 0:
                logger.debug(f"Skipping motif centre {center} closer than {flank} bp to {chrom} start")
                continue
            acc.add(bigwig.values(chrom, center - flank, center + flank + 1))
            n_sites += 1

    logger.info(f"Aggregated signal over {n_sites} sites of {motif.pattern!r}")
    return acc.to_frame()


def aggregate_promoter_gc(
    promoters: Iterable,
    window_size: int = PROMOTER_GC_WINDOW
) -> pd.DataFrame:
    """
    Average sliding-window GC content over strand-normalized promoters.

    Offsets are window centres relative to the start codon.
    """
    n_points = PROMOTER_LENGTH - window_size + 1
    acc = SignalAccumulator(n_points, first_offset=window_size // 2 - PROMOTER_UPSTREAM)

    for promoter in promoters:
        gc = np.fromiter(
            (fraction for _, fraction in get_gc_content(promoter.oriented_sequence(), window_size)),
            dtype=np.float64,
            count=n_points,
        )
        acc.add(gc)

    return acc.to_frame()
