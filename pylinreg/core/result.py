"""
The envelope returned by FittingStrategy.train().

A training run produces more than a slope and an intercept: the
strategy that ran, how long each phase took, whether an iterative
method converged, and any notes worth showing the caller. Result keeps
those together, and LineSolution reads from it.

Notes:
    - P is the payload type; strategies use LineParams
    - info holds per-method extras ('converged', 'iterations', ...)
    - timing may be None when a Result is built by hand
    - Instances are frozen; a retrain produces a new Result
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Outcome of one training run.

    Attributes:
        params: Fitted line and its error measures
        info: Method name plus method-specific metadata
        timing: Seconds per phase ('fit', 'evaluate', 'total_seconds')
        strategy_name: Name of the strategy that trained, e.g. 'least_squares'
        warnings: Notes about a run that completed but may not be trusted,
            such as gradient descent stopping before convergence

    Example:
        >>> result = GradientDescentStrategy(max_iterations=50).train(dataset)
        >>> result.info['converged'], result.info['iterations']
        (False, 50)
        >>> result.has_warning('did not converge')
        True
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    strategy_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if any warning message contains substring."""
        return any(substring in w for w in self.warnings)
