"""Task-specific views over dataset content."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd

from .base_columns import Schema


@dataclass(frozen=True)
class DatasetView:
    """Immutable snapshot of dataset data and related metadata.

    Attributes:
        df: Dataframe slice containing the selected attributes, all rows, missing values kept.
        schema: Sub-schema describing the columns of ``df`` in order.
        pretty_by_col: Mapping from column names to display-friendly labels.
    """

    df: pd.DataFrame
    """Dataframe slice containing the selected attributes."""
    schema: Schema
    pretty_by_col: Mapping[str, str]
    """Mapping from column names to display-friendly labels."""

    @property
    def numeric_cols(self) -> list[str]:
        return self.schema.numeric_names

    @property
    def features(self) -> pd.DataFrame:
        """Return view over numeric columns."""
        return self.df.loc[:, self.numeric_cols]

    @property
    def n_rows(self) -> int:
        return len(self.df)
