"""Immutable, schema-typed dataset that all summaries read from."""

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pandas as pd

from descstats.errors import SchemaMismatchError, TypeMismatchError

from .base_columns import AttributeKind, Schema
from .views import DatasetView


if TYPE_CHECKING:
    from descstats.analysis.class_distribution import ClassDistributionAnalyzer
    from descstats.analysis.correlation_analyzer import CorrelationAnalyzer
    from descstats.analysis.moments import SkewnessAnalyzer, StdDevAnalyzer
    from descstats.analysis.summary_table import SummaryTableAnalyzer


logger = logging.getLogger(__name__)


class Dataset:
    """Ordered rows over a fixed attribute schema.

    The schema is checked exactly once, here: every attribute must be present as a
    column (and nothing else), numeric attributes must parse as numbers, and categorical
    attributes are stored as ``pandas.Categorical``. Missing values are kept as ``NaN``
    and never produced by coercion. The backing frame is private; ``df`` hands out copies.

    Example:
        >>> ds = Dataset.from_records([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}, {"a": 3, "b": "x"}])
        >>> ds.shape
        (3, 2)
        >>> ds.make_std_dev_analyzer(["a"]).fit().result().values["a"]
        1.0
    """

    def __init__(self, df: pd.DataFrame | None = None, schema: Schema | None = None) -> None:
        """Validate ``df`` against ``schema`` (inferred from dtypes when omitted).

        Args:
            df: Raw frame, one column per attribute. ``None`` creates an empty dataset.
            schema: Declared schema. Columns are reordered to schema order.

        Raises:
            SchemaMismatchError: If columns and schema attributes differ.
            TypeMismatchError: If a numeric attribute holds a value that is not a number.
        """
        if df is None:
            df = pd.DataFrame(columns=schema.names if schema is not None else [])
        schema = schema if schema is not None else Schema.infer(df)

        self._schema = schema
        self._df = self._validate(df, schema)
        logger.debug("Built dataset with shape %s and schema %s", self._df.shape, schema.names)

    @staticmethod
    def _validate(df: pd.DataFrame, schema: Schema) -> pd.DataFrame:
        columns = [str(col) for col in df.columns]
        duplicated = sorted({col for col in columns if columns.count(col) > 1})
        if duplicated:
            raise SchemaMismatchError(f"Frame has duplicate column names {duplicated}")
        missing = [name for name in schema.names if name not in columns]
        extra = [col for col in columns if col not in schema]
        if missing or extra:
            raise SchemaMismatchError(
                f"Frame does not match schema: missing columns {missing}, unexpected columns {extra}",
            )

        frame = df.set_axis(columns, axis=1).loc[:, schema.names].reset_index(drop=True)
        typed: dict[str, pd.Series] = {}
        for attr in schema:
            raw = frame[attr.name]
            if attr.kind is AttributeKind.NUMERIC:
                coerced = pd.to_numeric(raw, errors="coerce").astype(float)
                bad = raw[coerced.isna() & raw.notna()]
                if not bad.empty:
                    raise TypeMismatchError(
                        f"Numeric attribute '{attr.name}' holds non-numeric values {bad.unique()[:5].tolist()}",
                    )
                typed[attr.name] = coerced
            else:
                typed[attr.name] = raw.astype("category")
        return pd.DataFrame(typed, index=frame.index, columns=schema.names)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, schema: Schema | None = None) -> "Dataset":
        """Build a dataset from an in-memory frame."""
        return cls(df=df, schema=schema)

    @classmethod
    def from_records(cls, rows: Iterable[Mapping[str, Any]], schema: Schema | None = None) -> "Dataset":
        """Build a dataset from row mappings that all share the same keys.

        Raises:
            SchemaMismatchError: If rows carry different key sets.
        """
        rows = list(rows)
        keys = list(rows[0].keys()) if rows else (schema.names if schema is not None else [])
        for idx, row in enumerate(rows):
            if set(row.keys()) != set(keys):
                raise SchemaMismatchError(f"Row {idx} has keys {sorted(row.keys())}, expected {sorted(keys)}")
        return cls(df=pd.DataFrame.from_records(rows, columns=keys), schema=schema)

    @classmethod
    def from_csv(
        cls,
        filepath: str | Path,
        schema: Schema | None = None,
        rename: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> "Dataset":
        """Load a dataset from a CSV file.

        Args:
            filepath: Path to the CSV file.
            schema: Declared schema, inferred from the parsed dtypes when omitted.
            rename: Optional mapping from raw header names to schema names.
            **kwargs: Forwarded to :func:`pandas.read_csv`.
        """
        df = pd.read_csv(filepath, **kwargs)
        if rename:
            df = df.rename(columns=dict(rename))
        logger.debug("Read %d rows from %s", len(df), filepath)
        return cls(df=df, schema=schema)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def df(self) -> pd.DataFrame:
        """Copy of the typed backing frame."""
        return self._df.copy()

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._df), len(self._schema)

    @property
    def numeric_cols(self) -> list[str]:
        return self._schema.numeric_names

    def __len__(self) -> int:
        return len(self._df)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rows={len(self)}, attributes={self._schema.names})"

    def get_pretty_name(self, column_name: str) -> str:
        """Display label for a column (falls back to a title-cased name for unknown columns)."""
        if column_name in self._schema:
            return self._schema.attribute(column_name).label
        return column_name.replace("_", " ").title()

    def view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build an immutable dataset view for analyzers and plotting layers.

        Args:
            columns: Attributes to include in the view (defaults to all, in schema order).

        Raises:
            SchemaMismatchError: If a requested column is not in the schema.
        """
        names = list(columns) if columns is not None else self._schema.names
        sub_schema = self._schema.select(names)
        return DatasetView(
            df=self._df.loc[:, names].copy(),
            schema=sub_schema,
            pretty_by_col={attr.name: attr.label for attr in sub_schema},
        )

    def numeric_view(self, columns: Iterable[str] | None = None) -> DatasetView:
        """Build a view restricted to numeric attributes.

        Args:
            columns: Attributes to include (defaults to every numeric attribute).

        Raises:
            SchemaMismatchError: If a requested column is not in the schema.
            TypeMismatchError: If a requested column is categorical.
        """
        names = list(columns) if columns is not None else self.numeric_cols
        for name in names:
            self._schema.require(name, AttributeKind.NUMERIC)
        return self.view(names)

    def make_class_distribution_analyzer(self, label_col: str) -> "ClassDistributionAnalyzer":
        """Instantiate a class distribution analyzer for a categorical label column."""
        from descstats.analysis.class_distribution import ClassDistributionAnalyzer

        self._schema.require(label_col, AttributeKind.CATEGORICAL)
        return ClassDistributionAnalyzer(self.view([label_col]), label_col=label_col)

    def make_summary_table_analyzer(self, columns: Iterable[str] | None = None) -> "SummaryTableAnalyzer":
        """Instantiate a per-attribute summary table analyzer."""
        from descstats.analysis.summary_table import SummaryTableAnalyzer

        return SummaryTableAnalyzer(self.view(columns))

    def make_std_dev_analyzer(self, columns: Iterable[str] | None = None) -> "StdDevAnalyzer":
        """Instantiate a sample standard deviation analyzer over numeric columns."""
        from descstats.analysis.moments import StdDevAnalyzer

        return StdDevAnalyzer(self.numeric_view(columns))

    def make_skewness_analyzer(
        self,
        columns: Iterable[str] | None = None,
        skew_type: int = 3,
    ) -> "SkewnessAnalyzer":
        """Instantiate a skewness analyzer over numeric columns.

        Args:
            columns: Numeric columns (defaults to all numeric attributes).
            skew_type: Skewness convention, 1, 2 or 3 (see :class:`SkewnessAnalyzer`).
        """
        from descstats.analysis.moments import SkewnessAnalyzer

        return SkewnessAnalyzer(self.numeric_view(columns), skew_type=skew_type)

    def make_correlation_analyzer(self, columns: Iterable[str] | None = None) -> "CorrelationAnalyzer":
        """Instantiate a pairwise-complete Pearson correlation analyzer."""
        from descstats.analysis.correlation_analyzer import CorrelationAnalyzer

        return CorrelationAnalyzer(self.numeric_view(columns))
