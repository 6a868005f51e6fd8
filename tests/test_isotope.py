"""
Test IsotopePattern.
"""

import pytest

from chromsum.deconvolution.constants import IsotopePatternStatus
from chromsum.deconvolution.isotope import IsotopePattern
from chromsum.deconvolution.rawdata import DataPoint


def test_isotope_pattern():
    pattern = IsotopePattern([500.0, 500.5, 501.0], [100.0, 60.0, 20.0], charge=2)

    assert pattern.number_of_isotopes() == 3
    assert pattern.highest_isotope() == DataPoint(500.0, 100.0)
    assert pattern.status == IsotopePatternStatus.DETECTED
    assert pattern.charge == 2


def test_empty_isotope_pattern():
    pattern = IsotopePattern([], [], status=IsotopePatternStatus.PREDICTED)
    assert pattern.number_of_isotopes() == 0
    assert pattern.highest_isotope() is None


def test_isotope_pattern_length_mismatch():
    with pytest.raises(ValueError):
        IsotopePattern([500.0], [1.0, 2.0])
