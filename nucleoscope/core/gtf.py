"""Partial reader for GENCODE GTF annotations.

Only the columns and attributes needed to locate start codons of
protein-coding transcripts are parsed. See
https://www.gencodegenes.org/pages/data_format.html for the full layout.
"""

import gzip
import logging
import re
import zlib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Union

from .exceptions import (
    AttributeMissingError,
    FileReadError,
    MalformedRecordError,
    MalformedStrandError,
)
from .globals import DEFAULT_CHROM

logger = logging.getLogger(__name__)

GENE_ID_RE = re.compile(r'gene_id "(ENSG[^"]+)"')
TRANSCRIPT_ID_RE = re.compile(r'transcript_id "(ENST[^"]+)"')

# Column indices in a tab-separated GTF line
FEATURE_COL = 2
START_COL = 3
END_COL = 4
STRAND_COL = 6
ATTRIBUTES_COL = 8


class Strand(Enum):
    PLUS = '+'
    MINUS = '-'

    @classmethod
    def from_string(cls, value: str) -> 'Strand':
        try:
            return cls(value)
        except ValueError:
            raise MalformedStrandError(f"Invalid strand: {value!r}") from None


class FeatureType(Enum):
    GENE = 'gene'
    TRANSCRIPT = 'transcript'
    EXON = 'exon'
    CDS = 'CDS'
    UTR = 'UTR'
    START_CODON = 'start_codon'
    STOP_CODON = 'stop_codon'
    SELENOCYSTEINE = 'Selenocysteine'

    @classmethod
    def from_string(cls, value: str) -> 'FeatureType':
        try:
            return cls(value)
        except ValueError:
            raise MalformedRecordError(f"Couldn't parse feature type {value!r}") from None


@dataclass(frozen=True)
class GTFRecord:
    """A single GTF line reduced to the fields used downstream."""
    feature_type: FeatureType
    start: int
    end: int
    strand: Strand
    gene_id: str
    transcript_id: str

    @property
    def length(self) -> int:
        """Outer span of the feature; includes introns for transcripts."""
        return self.end - self.start


def _parse_coordinate(value: str, line: str) -> int:
    try:
        coord = int(value)
    except ValueError:
        raise MalformedRecordError(f"Non-numeric coordinate {value!r} in: {line!r}") from None
    if coord < 0:
        raise MalformedRecordError(f"Negative coordinate {coord} in: {line!r}")
    return coord


def parse_gtf_line(line: str) -> GTFRecord:
    """
    Parse one non-comment GTF line.

    Args:
        line: Tab-separated GTF line, with or without the trailing newline

    Returns:
        GTFRecord with feature type, coordinates, strand and identifiers

    Raises:
        MalformedRecordError: comment line, too few columns or bad coordinates
        MalformedStrandError: strand is neither '+' nor '-'
        AttributeMissingError: no ENSG gene_id or ENST transcript_id
    """
    if line.startswith('#'):
        raise MalformedRecordError("Cannot parse comments, please remove them beforehand")

    cols = line.rstrip('\r\n').split('\t')
    if len(cols) <= ATTRIBUTES_COL:
        raise MalformedRecordError(f"Syntax error, not valid GENCODE GTF: {line!r}")

    feature_type = FeatureType.from_string(cols[FEATURE_COL])
    start = _parse_coordinate(cols[START_COL], line)
    end = _parse_coordinate(cols[END_COL], line)
    if start > end:
        raise MalformedRecordError(f"Start {start} is after end {end} in: {line!r}")
    strand = Strand.from_string(cols[STRAND_COL])

    attributes = cols[ATTRIBUTES_COL]
    gene_match = GENE_ID_RE.search(attributes)
    if gene_match is None:
        raise AttributeMissingError(f"No gene_id attribute in: {line!r}")
    transcript_match = TRANSCRIPT_ID_RE.search(attributes)
    if transcript_match is None:
        raise AttributeMissingError(f"No transcript_id attribute in: {line!r}")

    return GTFRecord(
        feature_type=feature_type,
        start=start,
        end=end,
        strand=strand,
        gene_id=gene_match.group(1),
        transcript_id=transcript_match.group(1),
    )


def prefilter_pattern(chrom: str = DEFAULT_CHROM) -> re.Pattern:
    """Coarse line filter for protein-coding transcripts and start codons."""
    return re.compile(
        rf'^{re.escape(chrom)}\t(?:HAVANA|ENSEMBL)\t(?:transcript|start_codon)\t'
        r'.*gene_type "protein_coding";'
    )


def read_gtf_file(gtf_path: Union[str, Path], chrom: str = DEFAULT_CHROM) -> List[GTFRecord]:
    """
    Read the transcript and start codon records of protein-coding genes.

    Lines are matched against a cheap regex before parsing; most of a
    GENCODE file never reaches the parser.

    Args:
        gtf_path: Path to GTF file (can be gzipped, detected by '.gz')
        chrom: Chromosome to keep

    Returns:
        Records in file order
    """
    gtf_path = Path(gtf_path)
    pattern = prefilter_pattern(chrom)

    # Open file (handle gzip if needed)
    if gtf_path.suffix == '.gz':
        open_func = gzip.open
    else:
        open_func = open

    records = []
    n_lines = 0
    try:
        with open_func(gtf_path, 'rt') as f:
            for n_lines, line in enumerate(f, start=1):
                if line.startswith('#'):
                    continue
                if not pattern.match(line):
                    continue
                try:
                    records.append(parse_gtf_line(line))
                except MalformedRecordError as e:
                    raise type(e)(f"{gtf_path}:{n_lines}: {e}") from e
    except (OSError, EOFError, UnicodeDecodeError, zlib.error) as e:
        raise FileReadError(f"Error reading annotation file {gtf_path}: {e}") from e

    logger.info(f"Read {len(records)} records from {n_lines} lines of {gtf_path}")
    return records


def get_longest_transcripts(records: Iterable[GTFRecord]) -> List[GTFRecord]:
    """
    Pick the longest transcript of every gene.

    Ties keep the transcript seen first.
    """
    longest: Dict[str, GTFRecord] = {}

    for candidate in records:
        if candidate.feature_type is not FeatureType.TRANSCRIPT:
            continue
        current = longest.get(candidate.gene_id)
        if current is None or candidate.length > current.length:
            longest[candidate.gene_id] = candidate

    return list(longest.values())
