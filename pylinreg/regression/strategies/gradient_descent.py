"""
Batch gradient descent on the mean squared error.

Starting from slope = intercept = 0, each iteration evaluates the full
gradient

    d/d slope     = (2/n) * sum((slope * x + intercept - y) * x)
    d/d intercept = (2/n) * sum(slope * x + intercept - y)

and proposes a step of learning_rate times that gradient. When both
components of the proposed step are smaller than tolerance the run
stops as converged WITHOUT applying the step. Exhausting
max_iterations is not an error: the last committed parameters stand.

Divergence is not guarded against. A learning rate that is too large
lets the parameters grow without bound; the run still completes and
the Result carries a warning.
"""

import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinreg.core.validation import check_positive, check_positive_int
from pylinreg.regression.strategies.base import FitOutcome, FittingStrategy


DEFAULT_LEARNING_RATE = 0.01
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_TOLERANCE = 1e-6


class GradientDescentStrategy(FittingStrategy):
    """
    Iterative fit by full-batch gradient descent.

    Args:
        learning_rate: Step size multiplier, > 0
        max_iterations: Iteration budget, >= 1
        tolerance: Convergence threshold on the proposed step, > 0

    Raises:
        ValidationError: If any configuration value is out of range
    """

    def __init__(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ):
        super().__init__()
        self.set_parameters(learning_rate, max_iterations, tolerance)

    @property
    def name(self) -> str:
        return 'gradient_descent'

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def set_parameters(
        self,
        learning_rate: float,
        max_iterations: int,
        tolerance: float,
    ) -> None:
        """Reconfigure the optimizer. Takes effect on the next train()."""
        learning_rate = check_positive(learning_rate, 'learning_rate')
        max_iterations = check_positive_int(max_iterations, 'max_iterations')
        tolerance = check_positive(tolerance, 'tolerance')

        self._learning_rate = learning_rate
        self._max_iterations = max_iterations
        self._tolerance = tolerance

    def _fit(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> FitOutcome:
        n = x.shape[0]
        scale = 2.0 / n
        lr = self._learning_rate
        tol = self._tolerance

        slope = 0.0
        intercept = 0.0
        converged = False
        iterations = 0

        with np.errstate(over='ignore', invalid='ignore'):
            for iterations in range(1, self._max_iterations + 1):
                residual = slope * x + intercept - y
                slope_grad = scale * float(residual @ x)
                intercept_grad = scale * float(np.sum(residual))

                new_slope = slope - lr * slope_grad
                new_intercept = intercept - lr * intercept_grad

                if abs(new_slope - slope) < tol and abs(new_intercept - intercept) < tol:
                    converged = True
                    break

                slope = new_slope
                intercept = new_intercept

        info: dict[str, Any] = {
            'converged': converged,
            'iterations': iterations,
            'learning_rate': lr,
            'max_iterations': self._max_iterations,
            'tolerance': tol,
        }

        warnings = []
        if not converged:
            warnings.append(
                f"gradient descent did not converge within {iterations} "
                f"iterations (tolerance={tol:g})"
            )
        if not (math.isfinite(slope) and math.isfinite(intercept)):
            warnings.append(
                f"parameters are not finite; learning_rate={lr:g} is likely too large"
            )

        return slope, intercept, info, tuple(warnings)

    def __repr__(self) -> str:
        return (
            f"GradientDescentStrategy(learning_rate={self._learning_rate:g}, "
            f"max_iterations={self._max_iterations}, tolerance={self._tolerance:g})"
        )
