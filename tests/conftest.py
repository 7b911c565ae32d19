"""Test configuration for descstats."""

from pathlib import Path
import sys

import matplotlib
import pandas as pd
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(autouse=True)
def _close_figures():
    """Close all figures after each test to keep memory flat."""
    import matplotlib.pyplot as plt

    yield
    plt.close("all")


@pytest.fixture(scope="session")
def iris_dataset():
    """Iris dataset built once per test session."""
    from descstats.data import load_iris

    return load_iris()


@pytest.fixture
def small_dataset():
    """Three-row dataset with one numeric and one categorical attribute."""
    from descstats.data import Dataset

    return Dataset.from_records([{"a": 1, "b": "x"}, {"a": 2, "b": "y"}, {"a": 3, "b": "x"}])


@pytest.fixture
def mixed_frame() -> pd.DataFrame:
    """Frame with missing values in both numeric and categorical columns."""
    return pd.DataFrame(
        {
            "height": [1.0, 2.0, None, 4.0, 5.0, 6.0],
            "weight": [2.0, 4.0, 6.0, None, 10.0, 12.0],
            "constant": [3.0] * 6,
            "group": ["a", "b", "a", None, "a", "b"],
        },
    )
