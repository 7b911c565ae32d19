"""Correlation analysis for numeric attributes."""

from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd

from descstats.data.views import DatasetView
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DisplayConfig

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class CorrelationResult:
    """Correlation analysis outputs grouped for plotting and reporting.

    Attributes:
        matrix: Symmetric pairwise-complete Pearson correlation matrix (rows/cols = attributes
            in view). Diagonal is 1.0; entries with fewer than two complete observations or
            zero variance are NaN.
        n_obs: Number of pairwise-complete observations behind each entry.
        pretty_by_col: Mapping from raw attribute names to presentation labels.
        feature_pairs: DataFrame with columns `feature_a`, `feature_b`, `correlation`,
            `abs_correlation`, `pair`; sorted by strongest absolute correlations.
    """

    matrix: pd.DataFrame
    n_obs: pd.DataFrame
    pretty_by_col: dict[str, str]
    feature_pairs: pd.DataFrame

    def to_frame(self) -> pd.DataFrame:
        return self.matrix.copy()

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(self.matrix)

    # ------------------------------------------------------------------ plotting shortcuts
    def plot_heatmap(self, **kwargs: object):
        """Plot correlation heatmap using the plotting helper."""
        from descstats.plotting.correlation_plots import plot_correlation_heatmap  # noqa: PLC0415

        return plot_correlation_heatmap(self, **kwargs)

    def plot_top_pairs(self, **kwargs: object):
        """Plot top positive/negative correlated pairs."""
        from descstats.plotting.correlation_plots import plot_top_correlated_pairs  # noqa: PLC0415

        return plot_top_correlated_pairs(self, **kwargs)


class CorrelationAnalyzer(BaseAnalyser):
    """Analyzer for pairwise-complete Pearson correlations between numeric attributes.

    Each entry uses only the rows where both attributes are present, as R's
    ``cor(x, use = "pairwise.complete.obs")``.

    Example:
        >>> from descstats.data import load_iris
        >>> corr = load_iris().make_correlation_analyzer().fit().result()
        >>> round(corr.matrix.loc["petal_length", "petal_width"], 4)
        0.9629
        >>> _ = corr.plot_heatmap(figsize=(8, 8))
    """

    min_periods = 2

    def __init__(self, view: DatasetView):
        """Initialize the correlation analyzer with a numeric dataset view."""
        self._view = view
        self._corr_mat: pd.DataFrame | None = None

    def get_correlation_matrix(self) -> pd.DataFrame:
        """Compute the Pearson correlation matrix via :meth:`pandas.DataFrame.corr`.

        The diagonal is set to 1.0 for every attribute with at least two values and the
        remaining entries are clipped to ``[-1, 1]`` to absorb floating point overshoot.
        """
        if self._corr_mat is None:
            features = self._view.features
            corr = features.corr(method="pearson", min_periods=self.min_periods).to_numpy(copy=True)
            corr = np.clip(corr, -1.0, 1.0)
            enough = features.notna().sum().to_numpy() >= self.min_periods
            idx = np.arange(len(features.columns))
            corr[idx, idx] = np.where(enough, 1.0, np.nan)
            self._corr_mat = pd.DataFrame(corr, index=features.columns, columns=features.columns)
        return self._corr_mat

    def get_pairwise_counts(self) -> pd.DataFrame:
        """Count rows where both attributes of each pair are present."""
        present = self._view.features.notna().astype(int)
        return present.T @ present

    def get_top_correlated_pairs(self, n: int = 20) -> pd.DataFrame:
        """Return the strongest absolute Pearson correlations between attribute pairs.

        The implementation vectorizes the symmetric matrix by masking the upper triangle
        (excluding the diagonal) using :func:`np.triu`, then stacks the remaining
        values for efficient sorting. NaN entries are dropped.
        """
        corr_matrix = self.get_correlation_matrix()
        if len(corr_matrix) < 2:
            return pd.DataFrame(columns=["feature_a", "feature_b", "correlation", "abs_correlation", "pair"])
        mask = np.triu(np.ones(corr_matrix.shape, dtype=bool), k=1)

        return (
            corr_matrix.where(mask)
            .rename_axis(index="feature_a")
            .melt(ignore_index=False, var_name="feature_b", value_name="correlation")
            .dropna()
            .reset_index()
            .assign(
                abs_correlation=lambda d: d.correlation.abs(),
                pair=lambda d: d.feature_a + " vs " + d.feature_b,
            )
            .sort_values("abs_correlation", ascending=False)
            .head(n)
            .reset_index(drop=True)
        )

    def fit(self) -> Self:
        """Compute correlation matrix."""
        self.get_correlation_matrix()

        return self

    def result(self, *, top_n_pairs: int = 20) -> CorrelationResult:
        if self._corr_mat is None:
            raise ValueError("Must call fit() before result()")

        return CorrelationResult(
            matrix=self._corr_mat.copy(),
            n_obs=self.get_pairwise_counts(),
            pretty_by_col=dict(self._view.pretty_by_col),
            feature_pairs=self.get_top_correlated_pairs(n=top_n_pairs),
        )
