"""Tests for SVG plot rendering."""

import numpy as np
import pandas as pd

from nucleoscope.utils.visualization import (
    plot_chromosome_gc,
    plot_promoter_affinity,
    plot_promoter_gc,
    plot_tfbs_affinity,
)


def _profile(first_offset, length, value):
    return pd.DataFrame({
        'offset': np.arange(first_offset, first_offset + length),
        'mean': np.full(length, value),
        'count': np.ones(length, dtype=int),
    })


class TestPlots:
    """Test that every plot writes an SVG file."""

    def test_chromosome_gc(self, tmp_path, chromosome):
        output = plot_chromosome_gc(chromosome, 50, output_file=tmp_path / 'gc-content.svg',
                                    title='synthetic chromosome 1')

        assert output == tmp_path / 'gc-content.svg'
        content = output.read_text()
        assert content.lstrip().startswith('<?xml')
        assert '<svg' in content

    def test_chromosome_gc_short_sequence(self, tmp_path):
        """Curves whose window exceeds the sequence are simply empty."""
        output = plot_chromosome_gc(b'ACGT' * 100, 10, output_file=tmp_path / 'short.svg')
        assert output.exists()

    def test_promoter_gc(self, tmp_path):
        output = plot_promoter_gc(_profile(-925, 952, 0.5), output_file=tmp_path / 'promotor-gc.svg')
        assert output.exists()

    def test_promoter_affinity(self, tmp_path):
        profile = _profile(-1000, 1100, 0.8)
        profile.loc[:10, 'mean'] = np.nan
        output = plot_promoter_affinity(profile, output_file=tmp_path / 'affinity.svg')
        assert output.exists()

    def test_tfbs_default_filename(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = plot_tfbs_affinity(_profile(-500, 1001, 1.2), 'AP-1')

        assert str(output) == 'AP-1.svg'
        assert (tmp_path / 'AP-1.svg').exists()
