"""Per-attribute spread and asymmetry: sample standard deviation and skewness."""

from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd
from scipy import stats

from descstats.data.views import DatasetView
from descstats.errors import InsufficientDataError
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DisplayConfig

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class StdDevResult:
    """Sample standard deviation per numeric attribute.

    Attributes:
        values: Standard deviation with the ``N - 1`` denominator, indexed by attribute.
        n_obs: Number of non-missing values each deviation was computed from.
        pretty_by_col: Mapping from column name to display label.
    """

    values: pd.Series
    n_obs: pd.Series
    pretty_by_col: dict[str, str]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"std_dev": self.values, "n_obs": self.n_obs})

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(self.values)


@dataclass(frozen=True)
class SkewnessResult:
    """Skewness coefficient per numeric attribute.

    Attributes:
        values: Skewness indexed by attribute (0.0 for zero-variance attributes).
        n_obs: Number of non-missing values per attribute.
        skew_type: Convention used, see :class:`SkewnessAnalyzer`.
        pretty_by_col: Mapping from column name to display label.
    """

    values: pd.Series
    n_obs: pd.Series
    skew_type: int
    pretty_by_col: dict[str, str]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"skewness": self.values, "n_obs": self.n_obs})

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(self.values)

    def plot(self, **kwargs: object):
        """Plot skewness per attribute using the plotting helper."""
        from descstats.plotting.distribution_plots import plot_skewness  # noqa: PLC0415

        return plot_skewness(self, **kwargs)


class StdDevAnalyzer(BaseAnalyser):
    """Sample standard deviation of each numeric attribute, missing values removed.

    Example:
        >>> from descstats.data import load_iris
        >>> sd = load_iris().make_std_dev_analyzer().fit().result()
        >>> round(sd.values["sepal_length"], 4)
        0.8281
    """

    min_obs = 2

    def __init__(self, view: DatasetView) -> None:
        self._view = view
        self._values: pd.Series | None = None
        self._n_obs: pd.Series | None = None

    def fit(self) -> Self:
        """Compute deviations.

        Raises:
            InsufficientDataError: If an attribute has fewer than two non-missing values.
        """
        features = self._view.features
        n_obs = features.notna().sum().astype(int)
        short = n_obs[n_obs < self.min_obs]
        if not short.empty:
            raise InsufficientDataError(
                f"Standard deviation needs at least {self.min_obs} non-missing values; got {short.to_dict()}",
            )

        # constant columns are exactly 0, not a rounding residue
        constant = features.nunique(dropna=True) <= 1
        self._values = features.std(ddof=1).mask(constant, 0.0).rename("std_dev")
        self._n_obs = n_obs.rename("n_obs")
        return self

    def result(self) -> StdDevResult:
        if self._values is None or self._n_obs is None:
            raise ValueError("Must call fit() before result()")
        return StdDevResult(
            values=self._values.copy(),
            n_obs=self._n_obs.copy(),
            pretty_by_col=dict(self._view.pretty_by_col),
        )


class SkewnessAnalyzer(BaseAnalyser):
    r"""Skewness (third standardized moment) of each numeric attribute, missing values removed.

    With :math:`g_1 = m_3 / m_2^{3/2}` (population moments, ``scipy.stats.skew(bias=True)``):

    - ``skew_type=1``: :math:`g_1`
    - ``skew_type=2``: :math:`G_1 = g_1 \sqrt{n(n-1)} / (n-2)` (SAS/SPSS, needs :math:`n \ge 3`)
    - ``skew_type=3``: :math:`b_1 = g_1 ((n-1)/n)^{3/2}` (default; R ``e1071::skewness`` default)

    See [Joanes & Gill (1998)](https://doi.org/10.1111/1467-9884.00122) for the comparison of
    the three estimators. Zero-variance attributes get 0.0.
    """

    def __init__(self, view: DatasetView, skew_type: int = 3) -> None:
        """Initialize the analyzer.

        Args:
            view: Numeric dataset view.
            skew_type: Estimator convention, 1, 2 or 3.
        """
        if skew_type not in (1, 2, 3):
            raise ValueError(f"skew_type must be 1, 2 or 3, got {skew_type}")
        self._view = view
        self.skew_type = skew_type
        self._values: pd.Series | None = None
        self._n_obs: pd.Series | None = None

    def _skew(self, name: str, values: np.ndarray) -> float:
        n = len(values)
        min_obs = 3 if self.skew_type == 2 else 1
        if n < min_obs:
            raise InsufficientDataError(
                f"Skewness (type {self.skew_type}) of '{name}' needs at least {min_obs} non-missing values, got {n}",
            )
        # spread within rounding noise of the magnitude counts as zero variance
        if np.ptp(values) <= np.finfo(float).eps * max(np.abs(values).max(), 1.0):
            return 0.0

        g1 = float(stats.skew(values, bias=True))
        if not np.isfinite(g1):
            return 0.0
        if self.skew_type == 1:
            return g1
        if self.skew_type == 2:
            return g1 * np.sqrt(n * (n - 1)) / (n - 2)
        return g1 * ((n - 1) / n) ** 1.5

    def fit(self) -> Self:
        """Compute skewness.

        Raises:
            InsufficientDataError: If an attribute has no non-missing values
                (fewer than three for ``skew_type=2``).
        """
        features = self._view.features
        values = {col: self._skew(col, features[col].dropna().to_numpy(dtype=float)) for col in features.columns}
        self._values = pd.Series(values, index=features.columns, dtype=float, name="skewness")
        self._n_obs = features.notna().sum().astype(int).rename("n_obs")
        return self

    def result(self) -> SkewnessResult:
        if self._values is None or self._n_obs is None:
            raise ValueError("Must call fit() before result()")
        return SkewnessResult(
            values=self._values.copy(),
            n_obs=self._n_obs.copy(),
            skew_type=self.skew_type,
            pretty_by_col=dict(self._view.pretty_by_col),
        )
