"""SVG plots of GC content and nucleosome affinity profiles."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.ticker import FuncFormatter

from ..core.globals import GC_CONTENT_SVG, PROMOTER_AFFINITY_SVG, PROMOTER_GC_SVG
from .sequence import get_gc_content

logger = logging.getLogger(__name__)

GC_WINDOW_FACTORS = (1, 10, 100)


def _save_figure(fig, output_file: Union[str, Path]) -> Path:
    output_file = Path(output_file)
    fig.savefig(output_file, format='svg', bbox_inches='tight')
    plt.close(fig)
    logger.info(f"Wrote {output_file}")
    return output_file


def plot_chromosome_gc(
    sequence: bytes,
    window_size: int,
    output_file: Union[str, Path] = GC_CONTENT_SVG,
    title: Optional[str] = None
) -> Path:
    """
    Plot GC content along a chromosome at three window sizes.

    Curves use windows of ``window_size``, 10x and 100x that size, all
    sampled every ``window_size`` bases.

    Args:
        sequence: Chromosome sequence
        window_size: Smallest window size
        output_file: Path of the SVG to write
        title: Figure title, usually the FASTA description

    Returns:
        Path of the written file
    """
    fig, ax = plt.subplots(figsize=(16, 5))
    colors = sns.color_palette('YlGnBu', len(GC_WINDOW_FACTORS))

    for factor, color in zip(GC_WINDOW_FACTORS, colors):
        size = window_size * factor
        gc = pd.DataFrame(
            list(get_gc_content(sequence, size, step=window_size)),
            columns=['center', 'gc'],
        )
        ax.plot(gc['center'], gc['gc'], color=color, linewidth=1, label=f"{size / 1000:g}k")

    ax.set_xlim(0, len(sequence))
    ax.set_ylim(0, 0.75)
    ax.xaxis.set_major_formatter(FuncFormatter(lambda x, _: f"{x / 1e6:.0f}"))
    ax.yaxis.set_major_formatter(FuncFormatter(lambda y, _: f"{y * 100:.0f}"))
    ax.set_xlabel('Mbp')
    ax.set_ylabel('%GC')
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.legend(loc='lower right', frameon=True, edgecolor='black')
    if title:
        ax.set_title(title, fontsize=14)

    return _save_figure(fig, output_file)


def _plot_profile(
    profile: pd.DataFrame,
    xlim: Tuple[float, float],
    ylim: Tuple[float, float],
    xlabel: str,
    ylabel: str,
    title: str,
    output_file: Union[str, Path]
) -> Path:
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(profile['offset'], profile['mean'], color=sns.color_palette('YlGnBu', 3)[2], linewidth=1.5)
    ax.axvline(0, color='grey', linestyle='--', linewidth=0.8)

    ax.set_xlim(xlim)
    ax.set_ylim(ylim)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.spines['top'].set_visible(False)
    ax.spines['right'].set_visible(False)
    ax.grid(True, alpha=0.3, linestyle='--')

    return _save_figure(fig, output_file)


def plot_promoter_gc(
    profile: pd.DataFrame,
    output_file: Union[str, Path] = PROMOTER_GC_SVG
) -> Path:
    """Plot mean GC content against distance to the start codon."""
    return _plot_profile(
        profile,
        xlim=(-950, 50),
        ylim=(0.45, 0.60),
        xlabel='Distance to start codon (bp)',
        ylabel='GC content',
        title='Average promoter GC content',
        output_file=output_file,
    )


def plot_promoter_affinity(
    profile: pd.DataFrame,
    output_file: Union[str, Path] = PROMOTER_AFFINITY_SVG
) -> Path:
    """Plot mean MNase-seq signal against distance to the start codon."""
    return _plot_profile(
        profile,
        xlim=(-1000, 100),
        ylim=(0, 1.5),
        xlabel='Distance to start codon (bp)',
        ylabel='Nucleosome affinity',
        title='Average promoter nucleosome affinity',
        output_file=output_file,
    )


def plot_tfbs_affinity(
    profile: pd.DataFrame,
    tf_name: str,
    output_file: Optional[Union[str, Path]] = None
) -> Path:
    """Plot mean MNase-seq signal around binding sites of ``tf_name``."""
    if output_file is None:
        output_file = f"{tf_name}.svg"
    return _plot_profile(
        profile,
        xlim=(-500, 500),
        ylim=(0, 2.0),
        xlabel=f'Distance to {tf_name} motif (bp)',
        ylabel='Nucleosome affinity',
        title=f'Nucleosome affinity around {tf_name} sites',
        output_file=output_file,
    )
