"""
Exception hierarchy for PyLinReg.

All exceptions inherit from PyLinRegError so callers can catch any
library-specific failure with a single except clause. Each failure kind
of the regression engine has its own class, so callers branch on the
type rather than parsing messages.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinRegError(Exception):
    """Base exception for all PyLinReg errors."""
    pass


class ValidationError(PyLinRegError):
    """
    Input validation failed.

    Raised when user-provided inputs (sample values, strategy
    configuration, axis names) fail validation checks.
    """
    pass


class IngestionError(PyLinRegError):
    """
    A data source could not be read.

    Raised when the source cannot be opened or decoded. Row-level parse
    problems are not errors; see MalformedRowWarning.

    Attributes:
        source: Description of the source that failed (usually a path)
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class EmptyDatasetError(ValidationError):
    """
    Operation requires at least one sample but the dataset has none.

    Also raised by ingestion when a readable source yields zero valid rows.

    Attributes:
        source: Source that produced no rows, if raised by ingestion
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class InsufficientDataError(ValidationError):
    """
    Not enough samples to train.

    Attributes:
        n_required: Minimum number of samples needed
        n_available: Number of samples present
    """

    def __init__(
        self,
        message: str,
        n_required: int | None = None,
        n_available: int | None = None,
    ):
        super().__init__(message)
        self.n_required = n_required
        self.n_available = n_available


class NumericalError(PyLinRegError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during fitting.
    """
    pass


class DegenerateDatasetError(NumericalError):
    """
    The closed-form fit is undefined for this dataset.

    Raised by least squares when every x value is identical, so the
    centered sum of squares of x is zero and no unique slope exists.

    Attributes:
        x_value: The single distinct x value
        n_observations: Number of samples in the dataset
    """

    def __init__(
        self,
        message: str,
        x_value: float | None = None,
        n_observations: int | None = None,
    ):
        super().__init__(message)
        self.x_value = x_value
        self.n_observations = n_observations


class SessionStateError(PyLinRegError):
    """
    Operation is not allowed in the session's current state.

    Base class for lifecycle violations of RegressionSession.
    """
    pass


class NoStrategySelectedError(SessionStateError):
    """Training was requested before a fitting strategy was selected."""
    pass


class ModelNotTrainedError(SessionStateError):
    """Prediction or results were requested before a successful training run."""
    pass


class MalformedRowWarning(UserWarning):
    """
    A row of a data source was skipped during ingestion.

    Issued once per skipped row. Ingestion continues; it only fails if
    no valid row remains.
    """
    pass
