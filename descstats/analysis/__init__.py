"""Analyzers for the descriptive summaries."""

from .base_analyser import BaseAnalyser
from .class_distribution import ClassDistributionAnalyzer, ClassDistributionResult
from .correlation_analyzer import CorrelationAnalyzer, CorrelationResult
from .moments import SkewnessAnalyzer, SkewnessResult, StdDevAnalyzer, StdDevResult
from .structure import PeekResult, ShapeResult, TypeMapResult, peek, shape, type_map
from .summary_table import SummaryTableAnalyzer, SummaryTableResult


__all__ = [
    "BaseAnalyser",
    "ClassDistributionAnalyzer",
    "ClassDistributionResult",
    "CorrelationAnalyzer",
    "CorrelationResult",
    "PeekResult",
    "ShapeResult",
    "SkewnessAnalyzer",
    "SkewnessResult",
    "StdDevAnalyzer",
    "StdDevResult",
    "SummaryTableAnalyzer",
    "SummaryTableResult",
    "TypeMapResult",
    "peek",
    "shape",
    "type_map",
]
