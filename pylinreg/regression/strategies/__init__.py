"""
Fitting strategies.

Available strategies:
    LeastSquaresStrategy: closed-form ordinary least squares
    GradientDescentStrategy: full-batch gradient descent on the MSE
"""

from pylinreg.regression.strategies.base import FittingStrategy
from pylinreg.regression.strategies.least_squares import LeastSquaresStrategy
from pylinreg.regression.strategies.gradient_descent import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    GradientDescentStrategy,
)

__all__ = [
    "FittingStrategy",
    "LeastSquaresStrategy",
    "GradientDescentStrategy",
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_TOLERANCE",
]
