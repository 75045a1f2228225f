"""Utility functions for the nucleoscope package."""

from .sequence import (
    FastaRecord,
    read_fasta_record,
    reverse_complement,
    get_gc_content,
    find_motif_centers
)

from .signal import BigWigTrack, open_bigwig

from .visualization import (
    plot_chromosome_gc,
    plot_promoter_gc,
    plot_promoter_affinity,
    plot_tfbs_affinity
)

__all__ = [
    # Sequence utilities
    'FastaRecord',
    'read_fasta_record',
    'reverse_complement',
    'get_gc_content',
    'find_motif_centers',

    # Signal utilities
    'BigWigTrack',
    'open_bigwig',

    # Visualization utilities
    'plot_chromosome_gc',
    'plot_promoter_gc',
    'plot_promoter_affinity',
    'plot_tfbs_affinity'
]
