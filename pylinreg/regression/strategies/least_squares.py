"""
Closed-form ordinary least squares for a single predictor.

Solves the normal equations in centered form:

    slope = sum((x - x_bar) * (y - y_bar)) / sum((x - x_bar)^2)
    intercept = y_bar - slope * x_bar

Two passes over the data: one for the means, one for the sums.
"""

import numpy as np
from numpy.typing import NDArray

from pylinreg.core.exceptions import DegenerateDatasetError
from pylinreg.regression.strategies.base import FitOutcome, FittingStrategy


class LeastSquaresStrategy(FittingStrategy):
    """Exact least squares fit. No configuration."""

    @property
    def name(self) -> str:
        return 'least_squares'

    def _fit(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> FitOutcome:
        # Compare extremes rather than the centered sum: the mean of
        # identical values can be off by one ulp.
        if x.min() == x.max():
            raise DegenerateDatasetError(
                f"All {x.shape[0]} x values equal {x[0]:g}; "
                f"the least squares slope is undefined",
                x_value=float(x[0]),
                n_observations=int(x.shape[0]),
            )

        x_mean = float(np.mean(x))
        y_mean = float(np.mean(y))

        dx = x - x_mean
        numerator = float(dx @ (y - y_mean))
        denominator = float(dx @ dx)

        slope = numerator / denominator
        intercept = y_mean - slope * x_mean

        return slope, intercept, {}, ()
