"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike

from pylinreg.core.result import Result


def format_equation(slope: float, intercept: float) -> str:
    """Render a fitted line as 'y = <slope> * x + <intercept>' with 4 decimals."""
    return f"y = {slope:.4f} * x + {intercept:.4f}"


@dataclass(frozen=True)
class LineParams:
    """
    Parameter payload for a fitted line.

    This is the immutable data computed by fitting strategies.
    """
    slope: float
    intercept: float
    mse: float
    rss: float
    tss: float
    n_observations: int


@dataclass
class LineSolution:
    """
    User-facing results of one training run.

    Wraps the strategy Result and provides accessors for the fitted
    line, goodness of fit and convergence metadata.
    """
    _result: Result[LineParams]

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def mse(self) -> float:
        return self._result.params.mse

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def n_observations(self) -> int:
        return self._result.params.n_observations

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def equation(self) -> str:
        return format_equation(self.slope, self.intercept)

    @property
    def converged(self) -> bool:
        """False only for an iterative run that exhausted its budget."""
        return bool(self._result.info.get('converged', True))

    @property
    def iterations(self) -> int | None:
        return self._result.info.get('iterations')

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def strategy_name(self) -> str:
        return self._result.strategy_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def result(self) -> Result[LineParams]:
        return self._result

    def predict(self, x: ArrayLike) -> Any:
        """Evaluate the fitted line at x (scalar or array)."""
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=np.float64) + self.intercept

    def summary(self) -> str:
        """Generate the regression results report."""
        lines = [
            "Regression Results",
            "=" * 60,
            f"Method: {self.strategy_name}",
            f"Observations: {self.n_observations}",
            f"Equation: {self.equation}",
            f"Slope: {self.slope:.6f}",
            f"Intercept: {self.intercept:.6f}",
            f"Mean Squared Error: {self.mse:.6f}",
            f"R-squared: {self.r_squared:.6f}",
        ]

        if self.iterations is not None:
            status = "yes" if self.converged else "no"
            lines.append(f"Converged: {status} ({self.iterations} iterations)")

        lines.append("-" * 60)
        for warning in self.warnings:
            lines.append(f"Warning: {warning}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LineSolution(slope={self.slope:.4f}, intercept={self.intercept:.4f}, "
            f"mse={self.mse:.4g}, strategy={self.strategy_name!r})"
        )
