"""Tests for CorrelationAnalyzer."""

import numpy as np
import pandas as pd
import pytest

from descstats.analysis.correlation_analyzer import CorrelationAnalyzer, CorrelationResult
from descstats.data import Dataset, DatasetView
from descstats.errors import TypeMismatchError


class TestCorrelationAnalyzer:
    """Test CorrelationAnalyzer functionality."""

    @pytest.fixture
    def sample_view(self) -> DatasetView:
        """Create a sample DatasetView for testing."""
        data = pd.DataFrame(
            {
                "feature1": [1.0, 2.0, 3.0, 4.0, 5.0],
                "feature2": [2.0, 4.0, 6.0, 8.0, 10.0],  # Perfect positive correlation
                "feature3": [5.0, 4.0, 3.0, 2.0, 1.0],  # Perfect negative correlation with feature1
                "feature4": [2.0, 1.0, 4.0, 3.0, 5.0],
            },
        )
        return Dataset(data).numeric_view()

    def test_get_correlation_matrix(self, sample_view: DatasetView) -> None:
        """Test getting correlation matrix."""
        corr_matrix = CorrelationAnalyzer(sample_view).get_correlation_matrix()

        assert corr_matrix.shape == (4, 4)
        assert np.allclose(np.diag(corr_matrix), 1.0)
        assert np.allclose(corr_matrix, corr_matrix.T)
        assert np.isclose(corr_matrix.loc["feature1", "feature2"], 1.0)
        assert np.isclose(corr_matrix.loc["feature1", "feature3"], -1.0)
        assert np.isclose(corr_matrix.loc["feature1", "feature4"], 0.8)

    def test_values_in_range(self, sample_view: DatasetView) -> None:
        corr_matrix = CorrelationAnalyzer(sample_view).get_correlation_matrix()
        assert ((corr_matrix >= -1.0) & (corr_matrix <= 1.0)).all().all()

    def test_get_top_correlated_pairs(self, sample_view: DatasetView) -> None:
        """Test getting top correlated pairs."""
        top_pairs = CorrelationAnalyzer(sample_view).get_top_correlated_pairs(n=3)

        assert len(top_pairs) == 3
        assert {"feature_a", "feature_b", "correlation", "abs_correlation", "pair"} <= set(top_pairs.columns)
        assert np.isclose(top_pairs.iloc[0]["abs_correlation"], 1.0)

    def test_pairs_cover_upper_triangle(self, sample_view: DatasetView) -> None:
        pairs = CorrelationAnalyzer(sample_view).get_top_correlated_pairs(n=100)
        assert len(pairs) == 6

    def test_fit_returns_self_and_result(self, sample_view: DatasetView) -> None:
        analyzer = CorrelationAnalyzer(sample_view)
        fitted = analyzer.fit()
        result = analyzer.result()

        assert fitted is analyzer
        assert isinstance(result, CorrelationResult)
        assert result.n_obs.loc["feature1", "feature2"] == 5

    def test_result_before_fit(self, sample_view: DatasetView) -> None:
        with pytest.raises(ValueError, match=r"fit\(\)"):
            CorrelationAnalyzer(sample_view).result()

    def test_results_do_not_share_state(self, sample_view: DatasetView) -> None:
        analyzer = CorrelationAnalyzer(sample_view).fit()
        analyzer.result().matrix.loc["feature1", "feature2"] = 5.0
        assert analyzer.result().matrix.loc["feature1", "feature2"] != 5.0

    def test_pairwise_complete_observations(self) -> None:
        """Each entry uses only rows where both attributes are present."""
        data = pd.DataFrame(
            {
                "feature1": [1.0, 2.0, np.nan, 4.0, 5.0],
                "feature2": [2.0, 4.0, 6.0, 8.0, 10.0],
                "feature3": [1.0, np.nan, 2.0, np.nan, 5.0],
            },
        )
        result = Dataset(data).make_correlation_analyzer().fit().result()

        assert np.isclose(result.matrix.loc["feature1", "feature2"], 1.0)
        assert result.n_obs.loc["feature1", "feature2"] == 4
        assert result.n_obs.loc["feature1", "feature3"] == 2

    def test_fewer_than_two_complete_rows_is_nan(self) -> None:
        data = pd.DataFrame(
            {
                "x": [1.0, 2.0, np.nan, np.nan],
                "y": [np.nan, np.nan, 3.0, 4.0],
            },
        )
        matrix = Dataset(data).make_correlation_analyzer().fit().result().matrix
        assert np.isnan(matrix.loc["x", "y"])
        assert np.isnan(matrix.loc["y", "x"])
        assert matrix.loc["x", "x"] == 1.0

    def test_constant_column_off_diagonal_nan(self) -> None:
        data = pd.DataFrame({"x": [1.0, 2.0, 3.0], "c": [7.0, 7.0, 7.0]})
        matrix = Dataset(data).make_correlation_analyzer().fit().result().matrix
        assert np.isnan(matrix.loc["x", "c"])
        assert matrix.loc["c", "c"] == 1.0

    def test_single_column_has_no_pairs(self) -> None:
        result = Dataset(pd.DataFrame({"x": [1.0, 2.0]})).make_correlation_analyzer().fit().result()
        assert result.matrix.shape == (1, 1)
        assert result.feature_pairs.empty

    def test_categorical_rejected(self, small_dataset: Dataset) -> None:
        with pytest.raises(TypeMismatchError):
            small_dataset.make_correlation_analyzer(["a", "b"])
