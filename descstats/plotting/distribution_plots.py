"""Distribution visualization functions for labels and numeric attributes."""

import math

import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from descstats.analysis.class_distribution import ClassDistributionResult
from descstats.analysis.moments import SkewnessResult
from descstats.data.dataset import Dataset


def plot_class_distribution(
    result: ClassDistributionResult,
    figsize: tuple[int, int] = (8, 5),
    ax: Axes | None = None,
) -> Figure:
    """Bar chart of label counts, annotated with percentages."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    labels = [str(label) for label in result.counts.index]
    ax.bar(labels, result.counts.to_numpy(), color=sns.color_palette(n_colors=max(len(labels), 1)))
    for idx, (count, pct) in enumerate(zip(result.counts, result.percentages, strict=True)):
        ax.annotate(f"{pct:.1f}%", (idx, count), ha="center", va="bottom")
    ax.set_title(f"Class Distribution: {result.pretty_by_col.get(result.label_col, result.label_col)}")
    ax.set_ylabel("Count")
    fig.tight_layout()

    return fig


def plot_histograms(
    dataset: Dataset,
    columns: list[str] | None = None,
    n_cols: int = 3,
    bins: int = 20,
    figsize_per_plot: tuple[float, float] = (4.0, 3.0),
) -> Figure:
    """Plot a histogram with KDE for each numeric attribute.

    Args:
        dataset: Dataset to visualize
        columns: Numeric attributes to plot (defaults to all)
        n_cols: Number of subplot columns
        bins: Histogram bin count
        figsize_per_plot: Size of one subplot

    Returns:
        matplotlib Figure object
    """
    view = dataset.numeric_view(columns)
    cols = view.numeric_cols
    n_rows = max(math.ceil(len(cols) / n_cols), 1)

    fig, axes = plt.subplots(
        n_rows,
        n_cols,
        figsize=(figsize_per_plot[0] * n_cols, figsize_per_plot[1] * n_rows),
        squeeze=False,
    )
    flat_axes = axes.ravel()
    for ax, col in zip(flat_axes, cols, strict=False):
        values = view.df[col].dropna()
        sns.histplot(values, bins=bins, kde=len(values) > 1 and values.nunique() > 1, ax=ax)
        ax.set_title(view.pretty_by_col[col])
        ax.set_xlabel("")
    for ax in flat_axes[len(cols) :]:
        ax.set_visible(False)
    fig.tight_layout()

    return fig


def plot_skewness(
    result: SkewnessResult,
    figsize: tuple[int, int] = (8, 5),
    threshold: float = 1.0,
) -> Figure:
    """Horizontal bar chart of skewness per attribute with +/- ``threshold`` guides."""
    fig, ax = plt.subplots(figsize=figsize)
    ordered = result.values.sort_values()
    labels = [result.pretty_by_col.get(col, col) for col in ordered.index]
    colors = ["tab:blue" if v < 0 else "tab:red" for v in ordered]
    ax.barh(labels, ordered.to_numpy(), color=colors)
    ax.axvline(0, color="black", linewidth=1)
    for x in (-threshold, threshold):
        ax.axvline(x, color="tab:orange", linewidth=1.5, linestyle="--")
    ax.set_xlabel(f"Skewness (type {result.skew_type})")
    ax.set_title("Skewness by Attribute")
    fig.tight_layout()

    return fig
