"""
Simple linear regression: fit y = slope * x + intercept.

Public API:
    fit(x, y, ...) -> LineSolution
    RegressionSession: stateful dataset + strategy orchestration

Two strategies are available:
    - 'least_squares': closed-form ordinary least squares
    - 'gradient_descent': full-batch gradient descent

Example:
    >>> from pylinreg.regression import fit
    >>> result = fit([1, 2, 3], [2, 4, 6])
    >>> print(result.equation)
    >>> print(result.summary())
"""

from pylinreg.regression.solution import LineParams, LineSolution
from pylinreg.regression.strategies import (
    FittingStrategy,
    GradientDescentStrategy,
    LeastSquaresStrategy,
)
from pylinreg.regression.solvers import fit, make_strategy
from pylinreg.regression.session import RegressionSession, SessionState

__all__ = [
    "fit",
    "make_strategy",
    "RegressionSession",
    "SessionState",
    "FittingStrategy",
    "LeastSquaresStrategy",
    "GradientDescentStrategy",
    "LineSolution",
    "LineParams",
]
