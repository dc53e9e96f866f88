"""
Tests for LineSolution accessors and the results report.
"""

import numpy as np
import pytest

from pylinreg.core.result import Result
from pylinreg.regression import fit
from pylinreg.regression.solution import LineParams, LineSolution, format_equation


def _solution(info=None, warnings=(), **params):
    values = dict(slope=2.0, intercept=-1.0, mse=0.5, rss=2.0, tss=8.0, n_observations=4)
    values.update(params)
    return LineSolution(_result=Result(
        params=LineParams(**values),
        info=info or {'method': 'least_squares'},
        timing={'total_seconds': 0.001},
        strategy_name=(info or {}).get('method', 'least_squares'),
        warnings=warnings,
    ))


class TestAccessors:

    def test_parameters(self):
        solution = _solution()
        assert solution.slope == 2.0
        assert solution.intercept == -1.0
        assert solution.mse == 0.5
        assert solution.n_observations == 4

    def test_r_squared(self):
        assert _solution().r_squared == pytest.approx(0.75)

    def test_r_squared_constant_y(self):
        assert _solution(rss=0.0, tss=0.0).r_squared == 1.0
        assert _solution(rss=1.0, tss=0.0).r_squared == 0.0

    def test_perfect_fit_r_squared(self, perfect_line_data):
        assert fit(*perfect_line_data).r_squared == 1.0

    def test_closed_form_has_no_iterations(self):
        solution = _solution()
        assert solution.iterations is None
        assert solution.converged is True

    def test_iterative_metadata(self):
        solution = _solution(info={'method': 'gradient_descent', 'converged': False,
                                   'iterations': 1000})
        assert solution.iterations == 1000
        assert solution.converged is False

    def test_predict(self):
        solution = _solution()
        assert solution.predict(3) == 5.0
        np.testing.assert_array_equal(solution.predict([0, 1]), [-1.0, 1.0])


class TestSummary:

    def test_contents(self):
        text = _solution().summary()
        assert "Regression Results" in text
        assert "Method: least_squares" in text
        assert "Equation: y = 2.0000 * x + -1.0000" in text
        assert "R-squared: 0.750000" in text
        assert "Time:" in text
        assert "Converged" not in text

    def test_convergence_line(self):
        text = _solution(info={'method': 'gradient_descent', 'converged': True,
                               'iterations': 412}).summary()
        assert "Converged: yes (412 iterations)" in text

    def test_warnings_listed(self):
        text = _solution(warnings=("gradient descent did not converge",)).summary()
        assert "Warning: gradient descent did not converge" in text

    def test_repr(self):
        assert repr(_solution()) == (
            "LineSolution(slope=2.0000, intercept=-1.0000, mse=0.5, strategy='least_squares')"
        )


class TestFormatEquation:

    @pytest.mark.parametrize("slope, intercept, expected", [
        (10.0, 35.0, "y = 10.0000 * x + 35.0000"),
        (0.12345, -0.5, "y = 0.1235 * x + -0.5000"),
        (0.0, 0.0, "y = 0.0000 * x + 0.0000"),
    ])
    def test_format(self, slope, intercept, expected):
        assert format_equation(slope, intercept) == expected
