"""Descriptive statistics toolbox: typed datasets and the eight classic summary views."""

from .data import Attribute, AttributeKind, Dataset, Schema, load_iris, load_pima
from .engine import DescriptiveReport, DescriptiveSummaryEngine, SummaryResult
from .errors import InsufficientDataError, SchemaMismatchError, SummaryError, TypeMismatchError


__all__ = [
    "Attribute",
    "AttributeKind",
    "Dataset",
    "DescriptiveReport",
    "DescriptiveSummaryEngine",
    "InsufficientDataError",
    "Schema",
    "SchemaMismatchError",
    "SummaryError",
    "SummaryResult",
    "TypeMismatchError",
    "load_iris",
    "load_pima",
]
