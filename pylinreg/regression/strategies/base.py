"""
Fitting strategy contract.

A strategy turns a Dataset into a slope and an intercept. Concrete
strategies implement only _fit(); training bookkeeping (sample checks,
timing, error measures, the Result envelope) lives here so every
algorithm reports the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinreg.core.result import Result
from pylinreg.core.timing import Timer
from pylinreg.core.validation import check_min_samples
from pylinreg.regression.solution import LineParams, format_equation

if TYPE_CHECKING:
    from pylinreg.core.dataset import Dataset


FitOutcome = tuple[float, float, dict[str, Any], tuple[str, ...]]


class FittingStrategy(ABC):
    """
    Base class for line-fitting algorithms.

    slope, intercept and mse start at 0.0 and stay meaningless until
    train() succeeds. The strategy itself does not track whether it has
    been trained; RegressionSession does.
    """

    def __init__(self):
        self._slope = 0.0
        self._intercept = 0.0
        self._mse = 0.0
        self._result: Result[LineParams] | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier, e.g. 'least_squares'."""
        ...

    @abstractmethod
    def _fit(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> FitOutcome:
        """
        Compute line parameters for non-empty, equal-length x and y.

        Returns:
            (slope, intercept, info, warnings)
        """
        ...

    # === Fitted parameters ===

    @property
    def slope(self) -> float:
        return self._slope

    @property
    def intercept(self) -> float:
        return self._intercept

    @property
    def mse(self) -> float:
        """Mean squared error on the training data of the last train() call."""
        return self._mse

    @property
    def result(self) -> Result[LineParams] | None:
        """Envelope of the last successful train() call, if any."""
        return self._result

    # === Contract ===

    def train(self, dataset: Dataset) -> Result[LineParams]:
        """
        Fit the line to a dataset and recompute the training MSE.

        Deterministic: training twice on the same data gives the same
        parameters. If fitting fails the previous parameters are kept.

        Raises:
            InsufficientDataError: If the dataset is empty
        """
        check_min_samples(len(dataset), 1, f"{self.name} training")

        timer = Timer()
        timer.start()

        x = dataset.x
        y = dataset.y

        with timer.section('fit'):
            slope, intercept, info, warnings = self._fit(x, y)

        self._slope = slope
        self._intercept = intercept

        with timer.section('evaluate'):
            self._mse = self.evaluate_mse(dataset)
            n = x.shape[0]
            rss = self._mse * n
            tss = float(np.sum((y - np.mean(y)) ** 2))

        timer.stop()

        params = LineParams(
            slope=slope,
            intercept=intercept,
            mse=self._mse,
            rss=rss,
            tss=tss,
            n_observations=n,
        )

        self._result = Result(
            params=params,
            info={'method': self.name, **info},
            timing=timer.result(),
            strategy_name=self.name,
            warnings=warnings,
        )
        return self._result

    def predict(self, x: ArrayLike) -> Any:
        """
        Evaluate slope * x + intercept.

        No validation is done and extrapolation is not flagged. Scalars
        give a float, arrays are evaluated element-wise.
        """
        if np.ndim(x) == 0:
            return self._slope * x + self._intercept
        return self._slope * np.asarray(x, dtype=np.float64) + self._intercept

    def evaluate_mse(self, dataset: Any) -> float:
        """
        Mean squared error of the current parameters against any dataset.

        dataset may be anything exposing x and y sequences. Returns 0.0
        when it is empty or the sequences differ in length; that value is
        a sentinel, not evidence of a perfect fit.
        """
        x = np.asarray(dataset.x, dtype=np.float64)
        y = np.asarray(dataset.y, dtype=np.float64)

        if x.shape[0] == 0 or x.shape[0] != y.shape[0]:
            return 0.0

        with np.errstate(over='ignore', invalid='ignore'):
            errors = y - (self._slope * x + self._intercept)
            return float(np.mean(errors * errors))

    def describe(self) -> str:
        """The fitted equation, e.g. 'y = 10.0000 * x + 35.0000'."""
        return format_equation(self._slope, self._intercept)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"
