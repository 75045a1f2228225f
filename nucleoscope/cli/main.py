"""Main CLI entry point for nucleoscope."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..core.aggregation import (
    aggregate_promoter_affinity,
    aggregate_promoter_gc,
    aggregate_tfbs_affinity,
)
from ..core.exceptions import NucleoscopeError
from ..core.globals import (
    DEFAULT_CHROM,
    DEFAULT_GC_WINDOW,
    GC_CONTENT_SVG,
    MOTIFS,
    NUCLEOSCOPE_OUTPUT_DIR,
    PROMOTER_AFFINITY_SVG,
    PROMOTER_GC_SVG,
)
from ..core.promoter import load_promoter_regions
from ..utils.sequence import read_fasta_record
from ..utils.signal import open_bigwig
from ..utils.visualization import (
    plot_chromosome_gc,
    plot_promoter_affinity,
    plot_promoter_gc,
    plot_tfbs_affinity,
)

# Set up logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=logging.INFO
)
logger = logging.getLogger(__name__)


def total_gc(args):
    """Plot GC content along the whole chromosome."""
    record = read_fasta_record(args.sequence)
    plot_chromosome_gc(
        record.sequence,
        args.window_size,
        output_file=args.output_dir / GC_CONTENT_SVG,
        title=record.description,
    )
    return 0


def promotor_gc(args):
    """Plot average GC content around start codons."""
    record = read_fasta_record(args.sequence)
    promoters = load_promoter_regions(record.sequence, args.annotations, chrom=args.chrom)
    profile = aggregate_promoter_gc(promoters)
    plot_promoter_gc(profile, output_file=args.output_dir / PROMOTER_GC_SVG)
    return 0


def promotor_nsome_affinity(args):
    """Plot average MNase-seq signal around start codons."""
    record = read_fasta_record(args.sequence)
    promoters = load_promoter_regions(record.sequence, args.annotations, chrom=args.chrom)
    with open_bigwig(args.mnase_seq) as bigwig:
        profile = aggregate_promoter_affinity(promoters, bigwig, chrom=args.chrom)
    plot_promoter_affinity(profile, output_file=args.output_dir / PROMOTER_AFFINITY_SVG)
    return 0


def tfbs_nsome_affinity(args):
    """Plot average MNase-seq signal around AP-1 and NF-Y motifs."""
    record = read_fasta_record(args.sequence)
    promoters = load_promoter_regions(record.sequence, args.annotations, chrom=args.chrom)
    with open_bigwig(args.mnase_seq) as bigwig:
        for tf_name, motif in MOTIFS.items():
            profile = aggregate_tfbs_affinity(promoters, motif, bigwig, chrom=args.chrom)
            plot_tfbs_affinity(profile, tf_name, output_file=args.output_dir / f"{tf_name}.svg")
    return 0


# Checked in this order; the first flag set wins
MODES = [
    ('total_gc', total_gc),
    ('promotor_gc', promotor_gc),
    ('promotor_nsome_affinity', promotor_nsome_affinity),
    ('tfbs_nsome_affinity', tfbs_nsome_affinity),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nucleoscope',
        description="Plot GC content and nucleosome affinity around promoters of a single chromosome"
    )

    parser.add_argument('sequence', type=Path, help='Chromosome sequence in FASTA format (.fa/.fa.gz)')
    parser.add_argument('annotations', type=Path, help='GENCODE annotations in GTF format (.gtf/.gtf.gz)')
    parser.add_argument('mnase_seq', type=Path, help='MNase-seq signal in BigWig format (.bigWig)')

    modes = parser.add_argument_group('plots', 'Exactly one plot is drawn per run')
    modes.add_argument(
        '--total-gc',
        action='store_true',
        help='GC content of the whole chromosome'
    )
    modes.add_argument(
        '--promotor-gc',
        action='store_true',
        help='Average GC content of promoters'
    )
    modes.add_argument(
        '--promotor-nsome-affinity',
        action='store_true',
        help='Average nucleosome affinity of promoters'
    )
    modes.add_argument(
        '--tfbs-nsome-affinity',
        action='store_true',
        help='Average nucleosome affinity around AP-1 and NF-Y binding sites'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        default=NUCLEOSCOPE_OUTPUT_DIR,
        help='Directory for SVG output (default: $NUCLEOSCOPE_OUTPUT_DIR or current directory)'
    )
    parser.add_argument(
        '--chrom',
        default=DEFAULT_CHROM,
        help=f'Chromosome name in the annotations and BigWig (default: {DEFAULT_CHROM})'
    )
    parser.add_argument(
        '--window-size',
        type=int,
        default=DEFAULT_GC_WINDOW,
        help=f'Base window size for --total-gc (default: {DEFAULT_GC_WINDOW})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug messages'
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger('nucleoscope').setLevel(logging.DEBUG)

    selected = [(name, func) for name, func in MODES if getattr(args, name)]
    if not selected:
        parser.print_usage(sys.stderr)
        logger.error("No plot selected, pass one of --total-gc, --promotor-gc, "
                     "--promotor-nsome-affinity or --tfbs-nsome-affinity")
        return 2
    if len(selected) > 1:
        logger.warning(f"Several plots selected, drawing only {selected[0][0].replace('_', '-')}")

    if args.window_size <= 0:
        parser.error(f"--window-size must be positive, got {args.window_size}")

    name, func = selected[0]
    try:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        return func(args)
    except (NucleoscopeError, OSError) as e:
        logger.error(f"Plotting {name.replace('_', '-')} failed: {e}")
        return 1


# Create cli alias for setuptools entry point
cli = main

if __name__ == '__main__':
    sys.exit(main())
