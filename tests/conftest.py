"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pytabstats import Dataset


# Motor Trend cars (R datasets::mtcars), the columns used across tests.
# Row order follows the R dataset.
MTCARS = {
    "mpg": [
        21.0, 21.0, 22.8, 21.4, 18.7, 18.1, 14.3, 24.4, 22.8, 19.2, 17.8,
        16.4, 17.3, 15.2, 10.4, 10.4, 14.7, 32.4, 30.4, 33.9, 21.5, 15.5,
        15.2, 13.3, 19.2, 27.3, 26.0, 30.4, 15.8, 19.7, 15.0, 21.4,
    ],
    "cyl": [
        6, 6, 4, 6, 8, 6, 8, 4, 4, 6, 6,
        8, 8, 8, 8, 8, 8, 4, 4, 4, 4, 8,
        8, 8, 8, 4, 4, 4, 8, 6, 8, 4,
    ],
    "vs": [
        0, 0, 1, 1, 0, 1, 0, 1, 1, 1, 1,
        0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 0,
        0, 0, 0, 1, 0, 1, 0, 0, 0, 1,
    ],
    "am": [
        1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0,
        0, 0, 0, 0, 0, 0, 1, 1, 1, 0, 0,
        0, 0, 0, 1, 1, 1, 1, 1, 1, 1,
    ],
}


@pytest.fixture
def mtcars_columns():
    """Fresh copy of the mtcars columns as plain lists."""
    return {name: list(values) for name, values in MTCARS.items()}


@pytest.fixture
def mtcars(mtcars_columns):
    """mtcars as a Dataset."""
    return Dataset.from_columns(mtcars_columns)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)
