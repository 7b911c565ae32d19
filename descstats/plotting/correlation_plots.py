"""Correlation visualization functions."""

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from descstats.analysis.correlation_analyzer import CorrelationResult


def plot_correlation_heatmap(
    result: CorrelationResult,
    figsize: tuple[int, int] = (10, 10),
    ax: Axes | None = None,
    **kwargs: object,
) -> Figure:
    """Plot the correlation matrix as an annotated heatmap (NaN cells are left blank)."""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    label_map = {col: result.pretty_by_col.get(col, col) for col in result.matrix.columns}

    sns.heatmap(
        result.matrix.rename(index=label_map, columns=label_map),
        annot=True,
        fmt=".2f",
        cmap="coolwarm",
        vmin=-1,
        vmax=1,
        ax=ax,
        square=True,
        cbar_kws={"shrink": 0.8},
        **kwargs,  # type: ignore[arg-type]
    )

    ax.set_xticklabels(
        ax.get_xticklabels(),
        rotation=45,
        ha="right",
        rotation_mode="anchor",
    )
    ax.tick_params(axis="y", rotation=0)
    ax.set_title("Pearson Correlation")
    fig.tight_layout()

    return fig


def _prettify_pair_columns(
    pairs: pd.DataFrame,
    pretty_by_col: dict[str, str],
) -> pd.DataFrame:
    """Attach pretty labels for plotting convenience."""
    return pairs.assign(
        pretty_pair=[
            f"{pretty_by_col.get(a, a)} vs {pretty_by_col.get(b, b)}"
            for a, b in zip(pairs["feature_a"], pairs["feature_b"], strict=True)
        ],
    )


def plot_top_correlated_pairs(
    result: CorrelationResult,
    n: int = 10,
    threshold: float | None = 0.8,
    figsize: tuple[int, int] = (10, 6),
) -> tuple[Figure, Figure]:
    """Plot top positively and negatively correlated attribute pairs.

    Args:
        result: CorrelationResult from CorrelationAnalyzer.
        n: Number of top correlated pairs to display in each plot.
        threshold: Optional reference line at this absolute correlation.
        figsize: Figure size for each plot.
    """
    pairs = _prettify_pair_columns(result.feature_pairs, result.pretty_by_col)
    positive = pairs[pairs["correlation"] > 0].nlargest(n, "abs_correlation")
    negative = pairs[pairs["correlation"] < 0].nlargest(n, "abs_correlation")

    figures = []
    for subset, color, sign, title in (
        (positive, "tab:red", 1, "Positive"),
        (negative, "tab:blue", -1, "Negative"),
    ):
        fig, ax = plt.subplots(figsize=figsize)
        if not subset.empty:
            sns.barplot(data=subset, x="correlation", y="pretty_pair", color=color, ax=ax)
        ax.set_title(f"Top {len(subset)} {title} Correlations")
        ax.set_xlabel("Pearson Correlation")
        ax.axvline(0, color="black", linewidth=1, linestyle="--")
        if threshold is not None:
            ax.axvline(sign * threshold, color="tab:orange", linewidth=2, linestyle="--")
        fig.tight_layout()
        figures.append(fig)

    return figures[0], figures[1]
