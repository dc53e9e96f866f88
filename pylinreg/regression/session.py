"""
RegressionSession: one dataset, at most one strategy, and the rules
that connect them.

The session enforces the lifecycle

    EMPTY -> DATA_LOADED -> STRATEGY_SELECTED -> TRAINED

Any dataset mutation or strategy selection drops back out of TRAINED,
so predictions always come from a model fitted to the current data.

A session is not thread-safe. Confine each instance to one caller.

Usage:
    session = RegressionSession()
    session.load_data("study_hours.csv")
    session.use_gradient_descent(learning_rate=0.02)
    session.train_model()
    session.predict(7.5)
    print(session.results())
"""

from __future__ import annotations

import enum
import os
from typing import TextIO

from pylinreg.core.dataset import Dataset, IngestReport
from pylinreg.core.exceptions import ModelNotTrainedError, NoStrategySelectedError
from pylinreg.core.validation import check_min_samples
from pylinreg.regression.solution import LineSolution
from pylinreg.regression.solvers import MIN_TRAINING_SAMPLES, make_strategy
from pylinreg.regression.strategies import (
    DEFAULT_LEARNING_RATE,
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_TOLERANCE,
    FittingStrategy,
)


class SessionState(enum.Enum):
    EMPTY = 'empty'
    DATA_LOADED = 'data_loaded'
    STRATEGY_SELECTED = 'strategy_selected'
    TRAINED = 'trained'


class RegressionSession:
    """
    Owns a Dataset and the active FittingStrategy.

    Constructed with an empty dataset, no strategy and untrained.
    """

    def __init__(self):
        self._dataset = Dataset()
        self._strategy: FittingStrategy | None = None
        self._solution: LineSolution | None = None
        self._trained = False

    # === State ===

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def state(self) -> SessionState:
        if self._trained:
            return SessionState.TRAINED
        if self._strategy is not None:
            return SessionState.STRATEGY_SELECTED
        if len(self._dataset) > 0:
            return SessionState.DATA_LOADED
        return SessionState.EMPTY

    @property
    def strategy(self) -> FittingStrategy | None:
        return self._strategy

    @property
    def dataset(self) -> Dataset:
        """A copy of the session's dataset; mutate through the session."""
        return self._dataset.copy()

    def _invalidate(self) -> None:
        self._trained = False
        self._solution = None

    # === Data ===

    def load_data(self, source: str | os.PathLike[str] | TextIO) -> IngestReport:
        """
        Replace the dataset with samples ingested from source.

        The trained state is cleared even if ingestion fails; a failed
        ingestion leaves the previous samples in place.

        Raises:
            IngestionError: If the source cannot be read
            EmptyDatasetError: If the source has no valid rows
        """
        try:
            return self._dataset.ingest(source)
        finally:
            self._invalidate()

    def add_point(self, x: float, y: float) -> None:
        """Append one sample and clear the trained state."""
        try:
            self._dataset.add_point(x, y)
        finally:
            self._invalidate()

    def set_labels(self, x_label: str, y_label: str) -> None:
        self._dataset.set_labels(x_label, y_label)

    # === Strategy selection ===

    def select_strategy(self, strategy: FittingStrategy) -> None:
        """Make strategy the active one, discarding the previous strategy."""
        self._strategy = strategy
        self._invalidate()

    def use_least_squares(self) -> None:
        self.select_strategy(make_strategy('least_squares'))

    def use_gradient_descent(
        self,
        learning_rate: float = DEFAULT_LEARNING_RATE,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> None:
        """
        Select gradient descent with the given settings.

        Raises:
            ValidationError: If a setting is out of range; the current
                strategy is kept in that case
        """
        strategy = make_strategy(
            'gradient_descent',
            learning_rate=learning_rate,
            max_iterations=max_iterations,
            tolerance=tolerance,
        )
        self.select_strategy(strategy)

    # === Training and prediction ===

    def train_model(self) -> LineSolution:
        """
        Train the active strategy on the current dataset.

        Raises:
            NoStrategySelectedError: If no strategy has been selected
            InsufficientDataError: If the dataset has fewer than two samples
            DegenerateDatasetError: If least squares sees a single distinct x
        """
        if self._strategy is None:
            raise NoStrategySelectedError(
                "No regression strategy selected. Call use_least_squares() "
                "or use_gradient_descent() first."
            )

        check_min_samples(len(self._dataset), MIN_TRAINING_SAMPLES, 'Training')

        self._invalidate()
        result = self._strategy.train(self._dataset)
        self._solution = LineSolution(_result=result)
        self._trained = True
        return self._solution

    def _require_trained(self) -> FittingStrategy:
        if not self._trained or self._strategy is None:
            raise ModelNotTrainedError("Model not trained. Call train_model() first.")
        return self._strategy

    def predict(self, x: float) -> float:
        """
        Predict y for x with the trained strategy.

        Raises:
            ModelNotTrainedError: If the session is not trained
        """
        return self._require_trained().predict(x)

    def is_extrapolation(self, x: float) -> bool:
        """True if x lies outside the x range the model was trained on."""
        self._require_trained()
        return not self._dataset.contains(x)

    @property
    def solution(self) -> LineSolution:
        self._require_trained()
        return self._solution

    @property
    def slope(self) -> float:
        return self._require_trained().slope

    @property
    def intercept(self) -> float:
        return self._require_trained().intercept

    # === Reports ===

    def results(self) -> str:
        """
        Regression results report.

        Raises:
            ModelNotTrainedError: If the session is not trained
        """
        self._require_trained()
        return self._solution.summary()

    def dataset_summary(self) -> str:
        """Dataset report; available in every state."""
        return self._dataset.summary()

    def __repr__(self) -> str:
        strategy = self._strategy.name if self._strategy is not None else None
        return (
            f"RegressionSession(state={self.state.value}, n={len(self._dataset)}, "
            f"strategy={strategy!r})"
        )
