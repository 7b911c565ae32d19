"""Per-attribute summary table, the equivalent of R's ``summary()`` on a data frame."""

from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd

from descstats.data.views import DatasetView
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DisplayConfig

from .base_analyser import BaseAnalyser


NUMERIC_STATS: tuple[str, ...] = ("min", "q1", "median", "mean", "q3", "max", "missing")


@dataclass(frozen=True)
class SummaryTableResult:
    """Summary statistics for every attribute of a view.

    Attributes:
        numeric: One row per numeric attribute with columns ``min``, ``q1``, ``median``,
            ``mean``, ``q3``, ``max`` (NaN when no values are present) and ``missing``.
        level_counts: Per categorical attribute, the count of every declared level
            (zero-count levels included), in level order.
        categorical_missing: Missing-label count per categorical attribute.
        pretty_by_col: Mapping from column name to display label.
    """

    numeric: pd.DataFrame
    level_counts: dict[str, pd.Series]
    categorical_missing: pd.Series
    pretty_by_col: dict[str, str]

    def to_frame(self) -> pd.DataFrame:
        """Numeric statistics table."""
        return self.numeric.copy()

    def levels_frame(self) -> pd.DataFrame:
        """Long-format level counts with columns ``attribute``, ``level``, ``count``."""
        rows = [
            {"attribute": name, "level": level, "count": int(count)}
            for name, counts in self.level_counts.items()
            for level, count in counts.items()
        ]
        return pd.DataFrame(rows, columns=["attribute", "level", "count"])

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        parts: list[str] = []
        if not self.numeric.empty:
            parts.append(config.format_frame(self.numeric))
        for name, counts in self.level_counts.items():
            block = counts.to_frame(name="count")
            missing = int(self.categorical_missing.get(name, 0))
            parts.append(f"{name} (missing: {missing})\n{config.format_frame(block)}")
        return "\n\n".join(parts)


def _numeric_summary(values: pd.Series) -> dict[str, float]:
    present = values.dropna()
    if present.empty:
        stats = dict.fromkeys(NUMERIC_STATS[:-1], np.nan)
    else:
        # pandas' default "linear" interpolation, i.e. R's quantile type 7
        q1, median, q3 = present.quantile([0.25, 0.5, 0.75]).to_numpy()
        stats = {
            "min": float(present.min()),
            "q1": float(q1),
            "median": float(median),
            "mean": float(present.mean()),
            "q3": float(q3),
            "max": float(present.max()),
        }
    stats["missing"] = int(values.isna().sum())
    return stats


class SummaryTableAnalyzer(BaseAnalyser):
    """Summarize numeric attributes with the five-number summary plus mean, and categorical
    attributes with level counts.

    Missing values are excluded from numeric statistics and reported in the ``missing`` column.
    An empty or all-missing column yields NaN statistics rather than an error.
    """

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._numeric: pd.DataFrame | None = None
        self._level_counts: dict[str, pd.Series] | None = None

    def fit(self) -> Self:
        df = self._view.df
        numeric_cols = self._view.schema.numeric_names
        self._numeric = pd.DataFrame(
            [_numeric_summary(df[col]) for col in numeric_cols],
            index=pd.Index(numeric_cols, dtype=object),
            columns=list(NUMERIC_STATS),
        ).astype({"missing": int})
        self._level_counts = {
            col: df[col].value_counts(sort=False, dropna=True).astype(int).rename("count")
            for col in self._view.schema.categorical_names
        }
        return self

    def result(self) -> SummaryTableResult:
        if self._numeric is None or self._level_counts is None:
            raise ValueError("Must call fit() before result()")

        df = self._view.df
        categorical_cols = self._view.schema.categorical_names
        return SummaryTableResult(
            numeric=self._numeric.copy(),
            level_counts={col: counts.copy() for col, counts in self._level_counts.items()},
            categorical_missing=pd.Series(
                {col: int(df[col].isna().sum()) for col in categorical_cols},
                dtype=int,
            ),
            pretty_by_col=dict(self._view.pretty_by_col),
        )
