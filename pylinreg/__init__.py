"""
PyLinReg: simple linear regression for Python.

Fits a straight line to (x, y) samples with either closed-form least
squares or gradient descent, and predicts new outputs from the fit.

Submodules:
    core: Dataset, exceptions, result envelope, validation
    regression: Fitting strategies, fit(), RegressionSession
"""

__version__ = "0.1.0"

from pylinreg import core
from pylinreg import regression
from pylinreg.core import Dataset
from pylinreg.regression import (
    RegressionSession,
    fit,
)

__all__ = [
    "__version__",
    "core",
    "regression",
    "Dataset",
    "RegressionSession",
    "fit",
]
