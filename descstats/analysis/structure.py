"""Structural views of a dataset: first rows, dimensions and declared attribute kinds."""

from dataclasses import dataclass

import pandas as pd

from descstats.data.base_columns import AttributeKind
from descstats.data.views import DatasetView
from descstats.utils.config import DEFAULT_DISPLAY_CFG, DisplayConfig


@dataclass(frozen=True)
class PeekResult:
    """First rows of a dataset, in insertion order.

    Attributes:
        rows: Copy of the leading rows.
        n_requested: Number of rows that was asked for (may exceed ``len(rows)``).
    """

    rows: pd.DataFrame
    n_requested: int

    def __len__(self) -> int:
        return len(self.rows)

    def to_frame(self) -> pd.DataFrame:
        return self.rows.copy()

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(self.rows)


@dataclass(frozen=True)
class ShapeResult:
    """Row and column count."""

    n_rows: int
    n_cols: int

    def as_tuple(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"rows": [self.n_rows], "columns": [self.n_cols]})

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:  # noqa: ARG002
        return f"{self.n_rows} rows x {self.n_cols} columns"


@dataclass(frozen=True)
class TypeMapResult:
    """Declared kind of every attribute, in schema order."""

    kinds: dict[str, AttributeKind]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"attribute": list(self.kinds), "kind": [str(k) for k in self.kinds.values()]})

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY_CFG) -> str:
        return config.format_frame(pd.Series({name: str(kind) for name, kind in self.kinds.items()}, dtype=object))


def peek(view: DatasetView, n: int = 6) -> PeekResult:
    """Return the first ``min(n, rows)`` rows.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    return PeekResult(rows=view.df.iloc[:n].copy(), n_requested=n)


def shape(view: DatasetView) -> ShapeResult:
    """Return ``(rows, columns)``; a dataset without attributes is ``(0, 0)``."""
    return ShapeResult(n_rows=view.n_rows, n_cols=len(view.schema))


def type_map(view: DatasetView) -> TypeMapResult:
    """Return the declared kind of each attribute."""
    return TypeMapResult(kinds={attr.name: attr.kind for attr in view.schema})
