"""
Solver dispatch for line fitting.

This module provides the fit() function (one-call public API) and the
strategy factory shared with RegressionSession.
"""

from typing import Literal

from numpy.typing import ArrayLike

from pylinreg.core.dataset import Dataset
from pylinreg.core.exceptions import ValidationError
from pylinreg.core.validation import check_min_samples
from pylinreg.regression.solution import LineSolution
from pylinreg.regression.strategies import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    FittingStrategy,
    GradientDescentStrategy,
    LeastSquaresStrategy,
)


# Type alias for strategy selection
MethodChoice = Literal['least_squares', 'gradient_descent']

# Training floor enforced at the API boundary; strategies only need one.
MIN_TRAINING_SAMPLES = 2


def make_strategy(
    method: MethodChoice = 'least_squares',
    *,
    learning_rate: float = DEFAULT_LEARNING_RATE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> FittingStrategy:
    """
    Instantiate a fitting strategy by name.

    The optimizer settings only apply to 'gradient_descent'.

    Raises:
        ValidationError: If method is unknown or a setting is out of range
    """
    if method == 'least_squares':
        return LeastSquaresStrategy()

    elif method == 'gradient_descent':
        return GradientDescentStrategy(
            learning_rate=learning_rate,
            max_iterations=max_iterations,
            tolerance=tolerance,
        )

    else:
        raise ValidationError(f"Unknown method: {method!r}")


def fit(
    x: ArrayLike | Dataset,
    y: ArrayLike | None = None,
    *,
    method: MethodChoice = 'least_squares',
    learning_rate: float = DEFAULT_LEARNING_RATE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> LineSolution:
    """
    Fit a line y = slope * x + intercept in one call.

    Args:
        x: Predictor values, or a Dataset (then y must be omitted)
        y: Response values
        method: 'least_squares' (closed form) or 'gradient_descent'
        learning_rate, max_iterations, tolerance: gradient descent settings

    Returns:
        LineSolution with the fitted parameters and diagnostics

    Raises:
        ValidationError: If inputs are invalid
        InsufficientDataError: If fewer than two samples are given
        DegenerateDatasetError: If least squares sees a single distinct x

    Example:
        >>> from pylinreg.regression import fit
        >>> result = fit([1, 2, 3, 4, 5], [45, 55, 65, 75, 85])
        >>> result.equation
        'y = 10.0000 * x + 35.0000'
    """
    # === Build Dataset ===
    if isinstance(x, Dataset):
        if y is not None:
            raise ValidationError("y must be omitted when x is a Dataset")
        dataset = x
    else:
        if y is None:
            raise ValidationError("y required when x is not a Dataset")
        dataset = Dataset.from_arrays(x, y)

    check_min_samples(len(dataset), MIN_TRAINING_SAMPLES, 'fit')

    # === Train ===
    strategy = make_strategy(
        method,
        learning_rate=learning_rate,
        max_iterations=max_iterations,
        tolerance=tolerance,
    )
    result = strategy.train(dataset)

    return LineSolution(_result=result)
