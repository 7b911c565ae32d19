"""Data module: attribute schema, datasets and the reference dataset definitions."""

from .base_columns import Attribute, AttributeKind, BaseColumn, ColumnMetadata, Schema
from .dataset import Dataset
from .iris_columns import IrisColumn
from .pima_columns import PimaColumn
from .reference import load_iris, load_pima
from .views import DatasetView


__all__ = [
    "Attribute",
    "AttributeKind",
    "BaseColumn",
    "ColumnMetadata",
    "Dataset",
    "DatasetView",
    "IrisColumn",
    "PimaColumn",
    "Schema",
    "load_iris",
    "load_pima",
]
