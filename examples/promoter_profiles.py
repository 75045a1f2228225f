#!/usr/bin/env python3
"""
Promoter profiles with the nucleoscope API.

Builds promoter windows once and reuses them for GC content, nucleosome
affinity and motif-centred affinity, printing a short summary of each.

Usage:
    python promoter_profiles.py chr1.fa.gz gencode.annotation.gtf.gz mnase.bigWig
"""

import sys

import nucleoscope
from nucleoscope.core.globals import MOTIFS

if len(sys.argv) != 4:
    print(__doc__)
    sys.exit(1)

fasta_file, gtf_file, bigwig_file = sys.argv[1:]

# Setup
record = nucleoscope.read_fasta_record(fasta_file)
print(f"Loaded {record.name}: {len(record):,} bp")

promoters = nucleoscope.load_promoter_regions(record.sequence, gtf_file)
n_minus = sum(p.strand is nucleoscope.Strand.MINUS for p in promoters)
print(f"{len(promoters)} promoters ({n_minus} on the minus strand)\n")

# 1. GC content
print("1. Promoter GC content")
gc = nucleoscope.aggregate_promoter_gc(promoters)
peak = gc.loc[gc['mean'].idxmax()]
print(f"   highest mean GC {peak['mean']:.3f} at {int(peak['offset']):+d} bp")

with nucleoscope.open_bigwig(bigwig_file) as bigwig:
    # 2. Nucleosome affinity around start codons
    print("\n2. Promoter nucleosome affinity")
    affinity = nucleoscope.aggregate_promoter_affinity(promoters, bigwig)
    depleted = affinity.loc[affinity['mean'].idxmin()]
    print(f"   lowest mean signal {depleted['mean']:.3f} at {int(depleted['offset']):+d} bp")

    # 3. Nucleosome affinity around binding sites
    print("\n3. TFBS nucleosome affinity")
    for tf_name, motif in MOTIFS.items():
        profile = nucleoscope.aggregate_tfbs_affinity(promoters, motif, bigwig)
        centre = profile.loc[profile['offset'] == 0].iloc[0]
        print(f"   {tf_name}: {int(centre['count'])} sites, signal at centre {centre['mean']:.3f}")
