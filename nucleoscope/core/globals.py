"""Constants and configuration for nucleoscope."""

import os
import re
from pathlib import Path

DEFAULT_CHROM = "chr1"

# Promoter windows are anchored at the first base of the start codon
PROMOTER_UPSTREAM = 1000
PROMOTER_DOWNSTREAM = 100
PROMOTER_LENGTH = PROMOTER_UPSTREAM + PROMOTER_DOWNSTREAM + 1
PROMOTER_SIGNAL_LENGTH = PROMOTER_UPSTREAM + PROMOTER_DOWNSTREAM

PROMOTER_GC_WINDOW = 150
DEFAULT_GC_WINDOW = 5000
TFBS_FLANK = 500

MOTIFS = {
    'AP-1': re.compile(rb'TGA[CG]TCA'),
    'NF-Y': re.compile(rb'CCAAT|ATTGG'),
}

GC_CONTENT_SVG = "gc-content.svg"
PROMOTER_GC_SVG = "promotor-gc.svg"
PROMOTER_AFFINITY_SVG = "promotor-nsome-affinity.svg"

NUCLEOSCOPE_OUTPUT_DIR = Path(os.environ.get('NUCLEOSCOPE_OUTPUT_DIR', '.'))
