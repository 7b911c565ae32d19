"""Frequency and proportion of each label of a categorical attribute."""

from dataclasses import dataclass
from typing import Self

import pandas as pd

from descstats.data.base_columns import AttributeKind
from descstats.data.views import DatasetView
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DisplayConfig

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class ClassDistributionResult:
    """Label counts and percentages of a categorical attribute.

    Attributes:
        label_col: Name of the categorical attribute.
        counts: Count per observed label, in level order. Zero-count levels are excluded.
        percentages: ``100 * count / n_observed`` per label; sums to 100.
        n_missing: Rows whose label is missing (excluded from counts and percentages).
        pretty_by_col: Mapping from column name to display label.
    """

    label_col: str
    counts: pd.Series
    percentages: pd.Series
    n_missing: int
    pretty_by_col: dict[str, str]

    @property
    def n_observed(self) -> int:
        return int(self.counts.sum())

    def as_dict(self) -> dict[object, tuple[int, float]]:
        """Mapping ``label -> (count, percentage)``."""
        return {label: (int(self.counts[label]), float(self.percentages[label])) for label in self.counts.index}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"count": self.counts, "percentage": self.percentages})

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(self.to_frame())

    def plot(self, **kwargs: object):
        """Plot label frequencies using the plotting helper."""
        from descstats.plotting.distribution_plots import plot_class_distribution  # noqa: PLC0415

        return plot_class_distribution(self, **kwargs)


class ClassDistributionAnalyzer(BaseAnalyser):
    """Tabulate a categorical label column, the equivalent of R's ``table`` and ``prop.table``.

    Example:
        >>> from descstats.data import load_iris
        >>> res = load_iris().make_class_distribution_analyzer("species").fit().result()
        >>> res.as_dict()["setosa"]
        (50, 33.33333333333333)
    """

    def __init__(self, view: DatasetView, label_col: str) -> None:
        """Initialize the analyzer.

        Args:
            view: Dataset view containing ``label_col``.
            label_col: Categorical attribute to tabulate.

        Raises:
            SchemaMismatchError: If ``label_col`` is not in the view.
            TypeMismatchError: If ``label_col`` is numeric.
        """
        view.schema.require(label_col, AttributeKind.CATEGORICAL)
        self._view = view
        self.label_col = label_col
        self._counts: pd.Series | None = None

    def fit(self) -> Self:
        """Count non-missing labels per level."""
        labels = self._view.df[self.label_col]
        counts = labels.value_counts(sort=False, dropna=True)
        self._counts = counts[counts > 0].astype(int).rename("count")
        return self

    def result(self) -> ClassDistributionResult:
        if self._counts is None:
            raise ValueError("Must call fit() before result()")

        total = int(self._counts.sum())
        percentages = (
            (self._counts / total * 100.0) if total else self._counts.astype(float)
        ).rename("percentage")
        return ClassDistributionResult(
            label_col=self.label_col,
            counts=self._counts.copy(),
            percentages=percentages,
            n_missing=int(self._view.df[self.label_col].isna().sum()),
            pretty_by_col=dict(self._view.pretty_by_col),
        )
