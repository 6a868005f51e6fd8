"""
Test quantile and area helpers.
"""

import numpy as np
import pytest

from chromsum.deconvolution.stats import calc_quantile, trapezoid_area


def test_median_even_length():
    assert calc_quantile([100.0, 100.1, 100.05, 100.2], 0.5) == pytest.approx(100.075)


def test_median_odd_length():
    assert calc_quantile([3.0, 1.0, 2.0], 0.5) == 2.0


def test_quantile_interpolates():
    assert calc_quantile([1.0, 2.0, 3.0, 4.0], 0.25) == pytest.approx(1.75)


def test_quantile_clamped():
    values = [5.0, 1.0, 3.0]
    assert calc_quantile(values, -1.0) == 1.0
    assert calc_quantile(values, 2.0) == 5.0


def test_quantile_empty_and_single():
    assert calc_quantile([], 0.5) == 0.0
    assert calc_quantile(np.array([7.5]), 0.9) == 7.5


def test_quantile_does_not_sort_input():
    values = np.array([3.0, 1.0, 2.0])
    calc_quantile(values, 0.5)
    np.testing.assert_array_equal(values, [3.0, 1.0, 2.0])


def test_trapezoid_area():
    area = trapezoid_area([0.0, 1.0, 2.0, 3.0], [10.0, 50.0, 30.0, 5.0])
    assert area == pytest.approx(87.5)


def test_trapezoid_irregular_steps():
    # 0.5 * (0 + 10) / 2 + 2.0 * (10 + 10) / 2
    assert trapezoid_area([0.0, 0.5, 2.5], [0.0, 10.0, 10.0]) == pytest.approx(22.5)


def test_trapezoid_repeated_retention_time():
    assert trapezoid_area([1.0, 1.0], [10.0, 20.0]) == 0.0


def test_trapezoid_short_input():
    assert trapezoid_area([], []) == 0.0
    assert trapezoid_area([1.0], [5.0]) == 0.0


def test_trapezoid_length_mismatch():
    with pytest.raises(ValueError):
        trapezoid_area([0.0, 1.0], [1.0])
