"""Tests for StdDevAnalyzer and SkewnessAnalyzer."""

import numpy as np
import pandas as pd
import pytest
from scipy import stats

from descstats.analysis.moments import SkewnessAnalyzer, SkewnessResult, StdDevAnalyzer, StdDevResult
from descstats.data import Dataset, Schema
from descstats.errors import InsufficientDataError, TypeMismatchError


class TestStdDevAnalyzer:
    """Test sample standard deviation."""

    def test_sample_denominator(self, small_dataset: Dataset) -> None:
        result = small_dataset.make_std_dev_analyzer(["a"]).fit().result()
        assert isinstance(result, StdDevResult)
        assert result.values["a"] == pytest.approx(1.0)
        assert result.n_obs["a"] == 3

    def test_constant_column_is_zero(self) -> None:
        ds = Dataset(pd.DataFrame({"c": [0.1, 0.1, 0.1, 0.1]}))
        assert ds.make_std_dev_analyzer().fit().result().values["c"] == 0.0

    def test_missing_values_removed(self, mixed_frame: pd.DataFrame) -> None:
        result = Dataset(mixed_frame).make_std_dev_analyzer(["height"]).fit().result()
        assert result.values["height"] == pytest.approx(np.std([1.0, 2.0, 4.0, 5.0, 6.0], ddof=1))
        assert result.n_obs["height"] == 5

    def test_defaults_to_all_numeric(self, mixed_frame: pd.DataFrame) -> None:
        result = Dataset(mixed_frame).make_std_dev_analyzer().fit().result()
        assert list(result.values.index) == ["height", "weight", "constant"]

    def test_insufficient_data(self) -> None:
        schema = Schema.from_pairs([("a", "numeric")])
        ds = Dataset(pd.DataFrame({"a": [1.0, None, None]}), schema=schema)
        with pytest.raises(InsufficientDataError, match="at least 2"):
            ds.make_std_dev_analyzer().fit()

    def test_categorical_rejected(self, small_dataset: Dataset) -> None:
        with pytest.raises(TypeMismatchError):
            small_dataset.make_std_dev_analyzer(["b"])

    def test_result_before_fit(self, small_dataset: Dataset) -> None:
        with pytest.raises(ValueError, match=r"fit\(\)"):
            StdDevAnalyzer(small_dataset.numeric_view()).result()


class TestSkewnessAnalyzer:
    """Test skewness conventions and edge cases."""

    @pytest.fixture
    def skewed(self) -> Dataset:
        return Dataset(pd.DataFrame({"x": [1.0, 1.0, 2.0, 2.0, 3.0, 9.0, 15.0]}))

    def test_symmetric_is_zero(self) -> None:
        ds = Dataset(pd.DataFrame({"x": [-1.0, 0.0, 0.0, 1.0]}))
        result = ds.make_skewness_analyzer().fit().result()
        assert isinstance(result, SkewnessResult)
        assert result.values["x"] == pytest.approx(0.0, abs=1e-12)

    def test_zero_variance_is_zero(self) -> None:
        ds = Dataset(pd.DataFrame({"x": [4.0, 4.0, 4.0]}))
        assert ds.make_skewness_analyzer().fit().result().values["x"] == 0.0

    def test_rounding_noise_is_zero_variance(self) -> None:
        ds = Dataset(pd.DataFrame({"x": [0.1 + 0.2, 0.3, 0.3, 0.3]}))
        for skew_type in (1, 2, 3):
            assert ds.make_skewness_analyzer(skew_type=skew_type).fit().result().values["x"] == 0.0

    def test_results_do_not_share_state(self, skewed: Dataset) -> None:
        analyzer = skewed.make_skewness_analyzer().fit()
        first = analyzer.result()
        first.values.loc["x"] = 99.0
        assert analyzer.result().values["x"] != 99.0

    def test_type_1_matches_scipy(self, skewed: Dataset) -> None:
        values = skewed.df["x"].to_numpy()
        result = skewed.make_skewness_analyzer(skew_type=1).fit().result()
        assert result.values["x"] == pytest.approx(stats.skew(values, bias=True))

    def test_type_2_matches_scipy_unbiased(self, skewed: Dataset) -> None:
        values = skewed.df["x"].to_numpy()
        result = skewed.make_skewness_analyzer(skew_type=2).fit().result()
        assert result.values["x"] == pytest.approx(stats.skew(values, bias=False))

    def test_type_3_scaling(self, skewed: Dataset) -> None:
        values = skewed.df["x"].to_numpy()
        n = len(values)
        result = skewed.make_skewness_analyzer().fit().result()
        assert result.skew_type == 3
        assert result.values["x"] == pytest.approx(stats.skew(values, bias=True) * ((n - 1) / n) ** 1.5)
        assert result.values["x"] > 0

    def test_missing_values_removed(self, mixed_frame: pd.DataFrame) -> None:
        result = Dataset(mixed_frame).make_skewness_analyzer(["height"], skew_type=1).fit().result()
        assert result.values["height"] == pytest.approx(stats.skew([1.0, 2.0, 4.0, 5.0, 6.0], bias=True))
        assert result.n_obs["height"] == 5

    def test_no_values_insufficient(self) -> None:
        schema = Schema.from_pairs([("a", "numeric")])
        ds = Dataset(pd.DataFrame({"a": [None, None]}), schema=schema)
        with pytest.raises(InsufficientDataError):
            ds.make_skewness_analyzer().fit()

    def test_type_2_needs_three_values(self) -> None:
        ds = Dataset(pd.DataFrame({"a": [1.0, 2.0]}))
        with pytest.raises(InsufficientDataError, match="at least 3"):
            ds.make_skewness_analyzer(skew_type=2).fit()

    def test_invalid_type(self, skewed: Dataset) -> None:
        with pytest.raises(ValueError, match="skew_type"):
            SkewnessAnalyzer(skewed.numeric_view(), skew_type=4)

    def test_categorical_rejected(self, small_dataset: Dataset) -> None:
        with pytest.raises(TypeMismatchError):
            small_dataset.make_skewness_analyzer(["b"])
