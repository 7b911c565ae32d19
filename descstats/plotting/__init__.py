"""Plotting utilities for summary results."""

from .correlation_plots import plot_correlation_heatmap, plot_top_correlated_pairs
from .distribution_plots import plot_class_distribution, plot_histograms, plot_skewness


__all__ = [
    "plot_class_distribution",
    "plot_correlation_heatmap",
    "plot_histograms",
    "plot_skewness",
    "plot_top_correlated_pairs",
]
