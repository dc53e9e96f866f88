"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinreg.core.dataset import Dataset


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def perfect_line_data():
    """Five exactly collinear samples on y = 10x + 35."""
    x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
    y = np.array([45.0, 55.0, 65.0, 75.0, 85.0])
    return x, y


@pytest.fixture
def perfect_line_dataset(perfect_line_data):
    x, y = perfect_line_data
    return Dataset.from_arrays(x, y, x_label='Hours', y_label='Score')


@pytest.fixture
def noisy_line_data(rng):
    """Noisy samples around y = 3x - 2."""
    x = np.linspace(0.0, 10.0, 30)
    y = 3.0 * x - 2.0 + rng.standard_normal(30) * 0.5
    return x, y


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file under tmp_path and return its path."""
    def _write(text, name='data.csv', encoding='utf-8'):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write
