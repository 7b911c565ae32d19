import os
from pathlib import Path
from typing import Literal


__all__ = ["DATA_DIR_ENV", "get_data_dir", "get_dataset_path"]


DATA_DIR_ENV = "DESCSTATS_DATA_DIR"

_DATASET_MAP: dict[str, str] = {
    "pima": "pima-indians-diabetes.csv",
}


def get_data_dir() -> Path:
    """Get the path to the data directory.

    Uses ``$DESCSTATS_DATA_DIR`` when set, otherwise ``_data`` next to the package.

    Returns:
        Path to the data directory

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    env_dir = os.environ.get(DATA_DIR_ENV)
    data_dir = Path(env_dir) if env_dir else Path(__file__).parents[2] / "_data"
    data_dir = data_dir.resolve()
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found at {data_dir} (set ${DATA_DIR_ENV} to override)")
    return data_dir


def get_dataset_path(filename: Literal["pima"] | str) -> Path:  # noqa: PYI051
    """Get the full path to a dataset file in the data directory.

    Args:
        filename: Key to known dataset or custom filename

    Returns:
        Full path to the dataset file

    Supported: pima-indians-diabetes.csv
    """
    ds_path = get_data_dir() / _DATASET_MAP.get(filename, filename)
    if not ds_path.exists():
        raise FileNotFoundError(f"Dataset file '{filename}' not found at {ds_path}")
    return ds_path
