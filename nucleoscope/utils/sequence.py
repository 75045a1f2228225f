"""Sequence manipulation utilities."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Pattern, Tuple, Union

import pysam

from ..core.exceptions import FileReadError, UnexpectedFastaCountError

logger = logging.getLogger(__name__)

_COMPLEMENT_STR = str.maketrans('ACGTacgt', 'TGCAtgca')
_COMPLEMENT_BYTES = bytes.maketrans(b'ACGTacgt', b'TGCAtgca')


@dataclass(frozen=True)
class FastaRecord:
    """The single chromosome sequence of a run."""
    name: str
    description: str
    sequence: bytes

    def __len__(self) -> int:
        return len(self.sequence)


def read_fasta_record(fasta_file: Union[str, Path]) -> FastaRecord:
    """
    Read a FASTA file that holds exactly one record.

    Args:
        fasta_file: Path to FASTA file, plain or gzip-compressed

    Returns:
        FastaRecord with the upper-cased sequence as bytes

    Raises:
        FileReadError: file missing or unreadable
        UnexpectedFastaCountError: zero or more than one record
    """
    try:
        with pysam.FastxFile(str(fasta_file)) as fasta:
            records = iter(fasta)
            first = next(records, None)
            if first is None:
                raise UnexpectedFastaCountError(f"No FASTA record found in {fasta_file}")
            if next(records, None) is not None:
                raise UnexpectedFastaCountError(
                    f"Expected a single FASTA record in {fasta_file}, found more"
                )
            record = FastaRecord(
                name=first.name,
                description=first.comment or first.name,
                sequence=first.sequence.upper().encode('ascii'),
            )
    except (OSError, ValueError) as e:
        raise FileReadError(f"Error reading FASTA file {fasta_file}: {e}") from e

    logger.info(f"Read {record.name} ({len(record):,} bp) from {fasta_file}")
    return record


def reverse_complement(seq: Union[str, bytes]) -> Union[str, bytes]:
    """
    Get reverse complement of DNA sequence.

    Bases other than A, C, G and T keep their value but not their position.

    Args:
        seq: DNA sequence as str or bytes

    Returns:
        Reverse complement of the same type
    """
    if isinstance(seq, str):
        return seq.translate(_COMPLEMENT_STR)[::-1]
    return bytes(seq).translate(_COMPLEMENT_BYTES)[::-1]


def _count_gc(sequence: bytes, start: int, end: int) -> int:
    return sequence.count(b'G', start, end) + sequence.count(b'C', start, end)


def get_gc_content(
    sequence: Union[str, bytes],
    window_size: int,
    step: int = 1
) -> Iterator[Tuple[int, float]]:
    """
    Slide a window over a sequence and yield its GC fraction.

    Overlapping windows reuse the previous count, so only the bases that
    enter and leave the window are counted at each step.

    Args:
        sequence: DNA sequence
        window_size: Width of each window
        step: Distance between consecutive windows

    Yields:
        (window_center, gc_fraction) with center ``window_size // 2 + i * step``
    """
    if window_size <= 0 or step <= 0:
        raise ValueError(f"window_size and step must be positive, got {window_size} and {step}")
    if isinstance(sequence, str):
        sequence = sequence.encode('ascii')

    gc = None
    start = 0
    end = window_size
    while end <= len(sequence):
        if gc is None or step >= window_size:
            gc = _count_gc(sequence, start, end)
        else:
            gc += _count_gc(sequence, end - step, end) - _count_gc(sequence, start - step, start)
        yield window_size // 2 + start, gc / window_size
        start += step
        end += step


def find_motif_centers(promoter, motif: Pattern) -> Iterator[int]:
    """
    Yield the chromosomal centre of every motif match in a promoter.

    The promoter is scanned in chromosomal order whatever its strand. The
    centre is the promoter location shifted by half the matched length.

    Args:
        promoter: PromoterRegion to scan
        motif: Compiled bytes regex
    """
    for match in motif.finditer(promoter.sequence):
        yield promoter.location + (match.end() - match.start()) // 2
