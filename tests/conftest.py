"""Shared fixtures: a small synthetic chromosome with annotations and signal."""

import gzip
import random

import numpy as np
import pyBigWig
import pytest

CHROM_LENGTH = 10000


def gtf_line(feature, start, end, strand, gene_id, transcript_id,
             chrom='chr1', source='HAVANA', gene_type='protein_coding'):
    attributes = (
        f'gene_id "{gene_id}"; transcript_id "{transcript_id}"; '
        f'gene_type "{gene_type}"; gene_name "{gene_id}-NAME";'
    )
    return '\t'.join([chrom, source, feature, str(start), str(end), '.', strand, '.', attributes])


GTF_LINES = [
    '##description: synthetic annotation',
    '##provider: GENCODE',
    gtf_line('gene', 1500, 5000, '+', 'ENSG001', 'ENST001'),
    gtf_line('transcript', 1500, 5000, '+', 'ENSG001', 'ENST001'),
    gtf_line('exon', 1500, 2500, '+', 'ENSG001', 'ENST001'),
    gtf_line('start_codon', 2000, 2002, '+', 'ENSG001', 'ENST001'),
    gtf_line('transcript', 2100, 2600, '+', 'ENSG001', 'ENST002', source='ENSEMBL'),
    gtf_line('start_codon', 2100, 2102, '+', 'ENSG001', 'ENST002', source='ENSEMBL'),
    gtf_line('transcript', 6000, 8000, '-', 'ENSG002', 'ENST003'),
    gtf_line('start_codon', 7998, 8000, '-', 'ENSG002', 'ENST003'),
    gtf_line('transcript', 3000, 9000, '+', 'ENSG003', 'ENST004', gene_type='lncRNA'),
    gtf_line('transcript', 100, 9900, '+', 'ENSG004', 'ENST005', chrom='chr2'),
    gtf_line('start_codon', 100, 102, '+', 'ENSG004', 'ENST005', chrom='chr2'),
]


@pytest.fixture
def chromosome():
    """10 kb sequence with an ATG at each annotated start codon and a few motifs."""
    rng = random.Random(42)
    seq = bytearray(rng.choice(b'ACGT') for _ in range(CHROM_LENGTH))
    # Plus strand start codon at 1-based 2000
    seq[1999:2002] = b'ATG'
    # Minus strand start codon at 1-based 7998..8000, ATG read on the minus strand
    seq[7997:8000] = b'CAT'
    seq[1500:1507] = b'TGACTCA'
    seq[1700:1705] = b'CCAAT'
    seq[8500:8505] = b'ATTGG'
    return bytes(seq)


@pytest.fixture
def fasta_file(tmp_path, chromosome):
    path = tmp_path / 'chr1.fa'
    with open(path, 'w') as f:
        f.write('>chr1 synthetic chromosome 1\n')
        text = chromosome.decode('ascii')
        for i in range(0, len(text), 60):
            f.write(text[i:i + 60] + '\n')
    return path


@pytest.fixture
def gtf_file(tmp_path):
    path = tmp_path / 'annotation.gtf.gz'
    with gzip.open(path, 'wt') as f:
        f.write('\n'.join(GTF_LINES) + '\n')
    return path


@pytest.fixture
def bigwig_file(tmp_path):
    """Signal of 0.5 everywhere except a 1.0 plateau over [1500, 2500); no data past 9500."""
    path = tmp_path / 'mnase.bigWig'
    values = np.full(9500, 0.5)
    values[1500:2500] = 1.0

    bw = pyBigWig.open(str(path), 'w')
    bw.addHeader([('chr1', CHROM_LENGTH)])
    bw.addEntries('chr1', 0, values=[float(v) for v in values], span=1, step=1)
    bw.close()
    return path


class FakeBigWig:
    """In-memory stand-in for BigWigTrack backed by a numpy array."""

    def __init__(self, signal):
        self.signal = np.asarray(signal, dtype=np.float64)
        self.queries = []

    def values(self, chrom, start, end):
        self.queries.append((chrom, start, end))
        return self.signal[start:end].copy()


@pytest.fixture
def position_signal():
    """Signal whose value equals its own 0-based position."""
    return FakeBigWig(np.arange(CHROM_LENGTH, dtype=np.float64))


@pytest.fixture
def make_bigwig():
    return FakeBigWig
