"""Builders for the two reference datasets used throughout the examples."""

from pathlib import Path

import pandas as pd
from sklearn.datasets import load_iris as _sklearn_load_iris

from descstats.utils.paths import get_dataset_path

from .dataset import Dataset
from .iris_columns import IrisColumn
from .pima_columns import PimaColumn


def load_iris() -> Dataset:
    """Build the iris dataset from scikit-learn's bundled copy.

    150 rows, four numeric measurements and the categorical ``species`` label.
    """
    bunch = _sklearn_load_iris(as_frame=True)
    species = pd.Categorical.from_codes(bunch.target.to_numpy(), categories=list(bunch.target_names))
    df = bunch.data.rename(columns=IrisColumn.original_names()).assign(**{str(IrisColumn.SPECIES): species})
    return Dataset(df=df, schema=IrisColumn.schema())


def load_pima(csv_path: str | Path | None = None, *, has_header: bool = True) -> Dataset:
    """Load the Pima Indians diabetes dataset from CSV.

    Kaggle-style headers (``Pregnancies``, ``Outcome``, ...) are renamed to the declared
    column names; headers that already match are kept.

    Args:
        csv_path: Path to the CSV file (defaults to ``pima`` in the data directory).
        has_header: Set to False for the headerless UCI file; columns are then taken in
            declared order.
    """
    csv_path = get_dataset_path("pima") if csv_path is None else Path(csv_path)
    schema = PimaColumn.schema()
    if has_header:
        return Dataset.from_csv(csv_path, schema=schema, rename=PimaColumn.original_names())
    return Dataset.from_csv(csv_path, schema=schema, header=None, names=schema.names)
