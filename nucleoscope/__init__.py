"""
nucleoscope: GC content and nucleosome positioning around promoters.

Reads a single chromosome sequence, its GENCODE annotation and an
MNase-seq BigWig track, and plots average profiles around the start codons
of protein-coding genes.
"""

__version__ = "0.1.0"

from .core import (
    NucleoscopeError,
    FileReadError,
    MalformedRecordError,
    MalformedStrandError,
    AttributeMissingError,
    UnexpectedFastaCountError,
    WindowOutOfBoundsError,
    Strand,
    FeatureType,
    GTFRecord,
    PromoterRegion,
    read_gtf_file,
    get_longest_transcripts,
    get_promoter_regions,
    load_promoter_regions,
    aggregate_promoter_affinity,
    aggregate_tfbs_affinity,
    aggregate_promoter_gc
)

from .utils import (
    read_fasta_record,
    reverse_complement,
    get_gc_content,
    find_motif_centers,
    open_bigwig
)

__all__ = [
    '__version__',

    # Exceptions
    'NucleoscopeError',
    'FileReadError',
    'MalformedRecordError',
    'MalformedStrandError',
    'AttributeMissingError',
    'UnexpectedFastaCountError',
    'WindowOutOfBoundsError',

    # Annotation and promoters
    'Strand',
    'FeatureType',
    'GTFRecord',
    'PromoterRegion',
    'read_gtf_file',
    'get_longest_transcripts',
    'get_promoter_regions',
    'load_promoter_regions',

    # Aggregation
    'aggregate_promoter_affinity',
    'aggregate_tfbs_affinity',
    'aggregate_promoter_gc',

    # Sequence and signal utilities
    'read_fasta_record',
    'reverse_complement',
    'get_gc_content',
    'find_motif_centers',
    'open_bigwig'
]
