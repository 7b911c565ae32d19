"""Smoke tests for plotting helpers."""

import pandas as pd
import pytest
from matplotlib.figure import Figure

from descstats import DescriptiveSummaryEngine
from descstats.data import Dataset
from descstats.plotting import (
    plot_class_distribution,
    plot_correlation_heatmap,
    plot_histograms,
    plot_skewness,
    plot_top_correlated_pairs,
)
from descstats.utils.plotting_config import PlottingConfig


@pytest.fixture
def engine(iris_dataset: Dataset) -> DescriptiveSummaryEngine:
    return DescriptiveSummaryEngine(iris_dataset)


def test_correlation_heatmap(engine: DescriptiveSummaryEngine) -> None:
    fig = plot_correlation_heatmap(engine.correlation(), figsize=(6, 6))
    assert isinstance(fig, Figure)
    assert fig.axes[0].get_title() == "Pearson Correlation"


def test_top_correlated_pairs(engine: DescriptiveSummaryEngine) -> None:
    fig_pos, fig_neg = plot_top_correlated_pairs(engine.correlation(), n=3)
    assert isinstance(fig_pos, Figure)
    assert isinstance(fig_neg, Figure)


def test_class_distribution_plot(engine: DescriptiveSummaryEngine) -> None:
    fig = plot_class_distribution(engine.class_distribution("species"))
    assert isinstance(fig, Figure)
    assert "Species" in fig.axes[0].get_title()


def test_result_shortcuts(engine: DescriptiveSummaryEngine) -> None:
    assert isinstance(engine.correlation().plot_heatmap(figsize=(5, 5)), Figure)
    assert isinstance(engine.skewness().plot(), Figure)
    assert isinstance(engine.class_distribution("species").plot(), Figure)


def test_histograms_hide_unused_axes(iris_dataset: Dataset) -> None:
    fig = plot_histograms(iris_dataset, n_cols=3)
    visible = [ax for ax in fig.axes if ax.get_visible()]
    assert len(visible) == 4


def test_skewness_plot(engine: DescriptiveSummaryEngine) -> None:
    fig = plot_skewness(engine.skewness(), threshold=0.5)
    assert fig.axes[0].get_xlabel() == "Skewness (type 3)"


def test_plotting_config_restores_rcparams() -> None:
    import matplotlib as mpl

    before = mpl.rcParams["axes.titlesize"]
    with PlottingConfig(title_size=31).apply():
        assert mpl.rcParams["axes.titlesize"] == 31
    assert mpl.rcParams["axes.titlesize"] == before


def test_heatmap_with_nan_entries() -> None:
    ds = Dataset(pd.DataFrame({"x": [1.0, 2.0, 3.0], "c": [5.0, 5.0, 5.0]}))
    fig = DescriptiveSummaryEngine(ds).correlation().plot_heatmap(figsize=(4, 4))
    assert isinstance(fig, Figure)
