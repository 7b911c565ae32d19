"""Attribute schema primitives and the base class for declared column enums."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from descstats.errors import SchemaMismatchError, TypeMismatchError


if TYPE_CHECKING:
    import pandas as pd


class AttributeKind(StrEnum):
    """Declared type of a dataset attribute."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


@dataclass(frozen=True)
class Attribute:
    """A named column with a declared kind and a fixed ordinal position.

    Attributes:
        name: Column name, unique within a schema.
        kind: Declared type of the values.
        position: 0-based position of the column in the schema.
        pretty_name: Human-readable label for reports and plots.
    """

    name: str
    kind: AttributeKind
    position: int
    pretty_name: str | None = None

    @property
    def label(self) -> str:
        """Display label (pretty name, falling back to a title-cased column name)."""
        return self.pretty_name or self.name.replace("_", " ").title()

    @property
    def is_numeric(self) -> bool:
        return self.kind is AttributeKind.NUMERIC


@dataclass(frozen=True)
class Schema:
    """Ordered, immutable collection of attributes.

    Positions are assigned from the order of ``attributes``; names must be unique.
    """

    attributes: tuple[Attribute, ...] = ()

    def __post_init__(self) -> None:
        names = [attr.name for attr in self.attributes]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise SchemaMismatchError(f"Duplicate attribute names in schema: {duplicates}")
        for position, attr in enumerate(self.attributes):
            if attr.position != position:
                raise SchemaMismatchError(
                    f"Attribute '{attr.name}' declares position {attr.position}, expected {position}",
                )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, AttributeKind | str]],
        pretty_names: dict[str, str] | None = None,
    ) -> Schema:
        """Build a schema from ``(name, kind)`` pairs in column order."""
        pretty_names = pretty_names or {}
        return cls(
            tuple(
                Attribute(name=name, kind=AttributeKind(kind), position=pos, pretty_name=pretty_names.get(name))
                for pos, (name, kind) in enumerate(pairs)
            ),
        )

    @classmethod
    def infer(cls, df: pd.DataFrame) -> Schema:
        """Infer a schema from a frame: numeric dtypes are NUMERIC, everything else CATEGORICAL.

        Booleans are treated as categorical labels.
        """
        from pandas.api.types import is_bool_dtype, is_numeric_dtype  # noqa: PLC0415

        return cls.from_pairs(
            (
                str(col),
                AttributeKind.NUMERIC
                if is_numeric_dtype(df[col]) and not is_bool_dtype(df[col])
                else AttributeKind.CATEGORICAL,
            )
            for col in df.columns
        )

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self.attributes)

    def __len__(self) -> int:
        return len(self.attributes)

    def __contains__(self, name: object) -> bool:
        return any(attr.name == name for attr in self.attributes)

    @property
    def names(self) -> list[str]:
        return [attr.name for attr in self.attributes]

    @property
    def numeric_names(self) -> list[str]:
        return [attr.name for attr in self.attributes if attr.is_numeric]

    @property
    def categorical_names(self) -> list[str]:
        return [attr.name for attr in self.attributes if not attr.is_numeric]

    def attribute(self, name: str) -> Attribute:
        """Look up an attribute by name.

        Raises:
            SchemaMismatchError: If no attribute has this name.
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr
        raise SchemaMismatchError(f"Attribute '{name}' not found in schema {self.names}")

    def require(self, name: str, kind: AttributeKind) -> Attribute:
        """Look up an attribute and check its declared kind.

        Raises:
            SchemaMismatchError: If no attribute has this name.
            TypeMismatchError: If the attribute has a different kind.
        """
        attr = self.attribute(name)
        if attr.kind is not kind:
            raise TypeMismatchError(f"Attribute '{name}' is {attr.kind}, expected {kind}")
        return attr

    def select(self, names: Iterable[str]) -> Schema:
        """Return a sub-schema with the given attributes, renumbered in the requested order."""
        picked = [self.attribute(name) for name in names]
        return Schema(
            tuple(
                Attribute(name=attr.name, kind=attr.kind, position=pos, pretty_name=attr.pretty_name)
                for pos, attr in enumerate(picked)
            ),
        )


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a declared dataset column.

    Attributes:
        kind: Declared attribute kind.
        pretty_name: Human-readable name for use in reports and plots.
        description: One-line description of the measurement.
    """

    original_name: str
    """Column name as it appears in the raw CSV file."""
    kind: AttributeKind
    pretty_name: str
    description: str = ""


class BaseColumn(StrEnum):
    """Base class for the column enums of the reference datasets.

    All derived column enums must define a LABEL member naming the class-label column
    and implement ``metadata()``. Member order is the column order of the dataset.
    """

    LABEL: str

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column.

        Raises:
            NotImplementedError: If not implemented by subclass.
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement metadata() method")

    @classmethod
    def schema(cls) -> Schema:
        """Declared schema in member order."""
        return Schema(
            tuple(
                Attribute(name=str(col), kind=col.kind, position=pos, pretty_name=col.pretty_name)
                for pos, col in enumerate(cls)
            ),
        )

    @classmethod
    def numeric_columns(cls) -> list[str]:
        return [str(col) for col in cls if col.kind is AttributeKind.NUMERIC]

    @classmethod
    def original_names(cls) -> dict[str, str]:
        """Mapping from raw CSV header to cleaned column name."""
        return {col.original_name: str(col) for col in cls}

    @property
    def pretty_name(self) -> str:
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str:
        return self.metadata().original_name

    @property
    def kind(self) -> AttributeKind:
        return self.metadata().kind
