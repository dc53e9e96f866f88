"""
Core infrastructure for PyLinReg.

Shared abstractions used by the regression engine.

Key components:
    dataset: Dataset container and CSV ingestion
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and warning categories
    validation: Input validators
    timing: Section timer for training runs
"""

from pylinreg.core.dataset import Dataset, IngestReport, SkippedRow
from pylinreg.core.result import Result
from pylinreg.core.exceptions import (
    PyLinRegError,
    ValidationError,
    IngestionError,
    EmptyDatasetError,
    InsufficientDataError,
    NumericalError,
    DegenerateDatasetError,
    SessionStateError,
    NoStrategySelectedError,
    ModelNotTrainedError,
    MalformedRowWarning,
)

__all__ = [
    # Data
    "Dataset",
    "IngestReport",
    "SkippedRow",
    # Result
    "Result",
    # Exceptions
    "PyLinRegError",
    "ValidationError",
    "IngestionError",
    "EmptyDatasetError",
    "InsufficientDataError",
    "NumericalError",
    "DegenerateDatasetError",
    "SessionStateError",
    "NoStrategySelectedError",
    "ModelNotTrainedError",
    # Warnings
    "MalformedRowWarning",
]
