"""Promoter windows anchored at start codons."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .exceptions import WindowOutOfBoundsError
from .globals import DEFAULT_CHROM, PROMOTER_DOWNSTREAM, PROMOTER_LENGTH, PROMOTER_UPSTREAM
from .gtf import FeatureType, GTFRecord, Strand, get_longest_transcripts, read_gtf_file
from ..utils.sequence import reverse_complement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromoterRegion:
    """
    Fixed-length window around a start codon.

    ``sequence`` is always stored in chromosomal (plus strand) order and
    ``location`` is its 0-based start on the chromosome.
    """
    sequence: bytes
    location: int
    strand: Strand

    def oriented_sequence(self) -> bytes:
        """Sequence read 5' to 3' on the transcript strand, ATG at offset 1000."""
        if self.strand is Strand.MINUS:
            return reverse_complement(self.sequence)
        return self.sequence


def _promoter_bounds(start_codon: GTFRecord) -> Tuple[int, int]:
    if start_codon.strand is Strand.PLUS:
        start = start_codon.start - PROMOTER_UPSTREAM - 1
        end = start_codon.start + PROMOTER_DOWNSTREAM
    else:
        start = start_codon.end - PROMOTER_DOWNSTREAM - 1
        end = start_codon.end + PROMOTER_UPSTREAM
    return start, end


def get_promoter_regions(
    sequence: bytes,
    records: Iterable[GTFRecord],
    transcripts: Iterable[GTFRecord]
) -> List[PromoterRegion]:
    """
    Cut a promoter window for the start codon of every selected transcript.

    Args:
        sequence: Chromosome sequence
        records: All parsed GTF records
        transcripts: Transcripts to keep, usually the longest per gene

    Returns:
        One PromoterRegion per matching start codon, in record order
    """
    selected = {t.transcript_id for t in transcripts}

    promoters = []
    for record in records:
        if record.feature_type is not FeatureType.START_CODON:
            continue
        if record.transcript_id not in selected:
            continue

        start, end = _promoter_bounds(record)
        if start < 0 or end > len(sequence):
            raise WindowOutOfBoundsError(
                f"Promoter of {record.transcript_id} spans [{start}, {end}), "
                f"outside the chromosome (length {len(sequence)})"
            )
        promoters.append(PromoterRegion(
            sequence=bytes(sequence[start:end]),
            location=start,
            strand=record.strand,
        ))

    assert all(len(p.sequence) == PROMOTER_LENGTH for p in promoters)
    return promoters


def load_promoter_regions(
    sequence: bytes,
    gtf_path: Union[str, Path],
    chrom: str = DEFAULT_CHROM
) -> List[PromoterRegion]:
    """Read annotations and build promoters of the longest protein-coding transcripts."""
    records = read_gtf_file(gtf_path, chrom=chrom)
    transcripts = get_longest_transcripts(records)
    logger.info(f"Selected {len(transcripts)} longest transcripts")

    promoters = get_promoter_regions(sequence, records, transcripts)
    logger.info(f"Built {len(promoters)} promoter regions")
    return promoters
