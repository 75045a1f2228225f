#!/usr/bin/env python
"""Quick test script to verify nucleoscope installation."""

import sys
print("Testing nucleoscope installation...\n")

# Test imports
try:
    import nucleoscope
    print(f"✓ nucleoscope imported successfully (version {nucleoscope.__version__})")
except ImportError as e:
    print(f"✗ Failed to import nucleoscope: {e}")
    sys.exit(1)

# Test GTF parsing
try:
    from nucleoscope.core.gtf import parse_gtf_line
    record = parse_gtf_line(
        'chr1\tHAVANA\tstart_codon\t1001\t1003\t.\t+\t0\tgene_id "ENSG001"; transcript_id "ENST001";'
    )
    print("✓ GTF parsing works")
    print(f"  - {record.feature_type.value} of {record.transcript_id} at {record.start}-{record.end}")
except Exception as e:
    print(f"✗ Error parsing GTF: {e}")

# Test sequence utilities
try:
    seq = b"GCGCGCGCAAAA"
    gc = list(nucleoscope.get_gc_content(seq, 4, 4))
    rev_comp = nucleoscope.reverse_complement(seq)
    print("✓ Sequence utilities work")
    print(f"  - GC content of {seq.decode()}: {gc}")
    print(f"  - Reverse complement: {rev_comp.decode()}")
except Exception as e:
    print(f"✗ Error with sequence utilities: {e}")

# Check for file format libraries
print("\nFile format libraries:")
try:
    import pysam
    print(f"✓ pysam {pysam.__version__} available (FASTA)")
except ImportError:
    print("✗ pysam not available (needed to read FASTA)")

try:
    import pyBigWig
    print(f"✓ pyBigWig available (numpy support: {bool(pyBigWig.numpy)})")
except ImportError:
    print("✗ pyBigWig not available (needed to read MNase-seq tracks)")

print("\n✅ Basic installation test complete!")
print("\nNext steps:")
print("1. Download a chromosome FASTA, a GENCODE GTF and an MNase-seq BigWig")
print("2. Run 'nucleoscope chr1.fa.gz annotation.gtf.gz mnase.bigWig --promotor-gc'")
