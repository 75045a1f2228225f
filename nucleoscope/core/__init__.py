"""Core pipeline for the nucleoscope package."""

from .exceptions import (
    NucleoscopeError,
    FileReadError,
    MalformedRecordError,
    MalformedStrandError,
    AttributeMissingError,
    UnexpectedFastaCountError,
    WindowOutOfBoundsError
)
from .gtf import (
    Strand,
    FeatureType,
    GTFRecord,
    parse_gtf_line,
    read_gtf_file,
    get_longest_transcripts
)
from .promoter import PromoterRegion, get_promoter_regions, load_promoter_regions
from .aggregation import (
    SignalAccumulator,
    aggregate_promoter_affinity,
    aggregate_tfbs_affinity,
    aggregate_promoter_gc
)

__all__ = [
    'NucleoscopeError',
    'FileReadError',
    'MalformedRecordError',
    'MalformedStrandError',
    'AttributeMissingError',
    'UnexpectedFastaCountError',
    'WindowOutOfBoundsError',
    'Strand',
    'FeatureType',
    'GTFRecord',
    'parse_gtf_line',
    'read_gtf_file',
    'get_longest_transcripts',
    'PromoterRegion',
    'get_promoter_regions',
    'load_promoter_regions',
    'SignalAccumulator',
    'aggregate_promoter_affinity',
    'aggregate_tfbs_affinity',
    'aggregate_promoter_gc'
]
