"""
Isotope pattern module.

This module contains the IsotopePattern class. Patterns are produced by a
deisotoping step outside this package and attached to resolved peaks.
"""

from typing import Optional

import numpy as np

from .constants import IsotopePatternStatus, UNKNOWN_CHARGE
from .rawdata import DataPoint


class IsotopePattern:
    """Class representing the isotopes of one compound."""

    __slots__ = ["mz", "intensity", "charge", "status", "description"]

    def __init__(
        self,
        mz_array,
        intensity_array,
        charge: int = UNKNOWN_CHARGE,
        status: IsotopePatternStatus = IsotopePatternStatus.DETECTED,
        description: str = "",
    ):
        """
        Initialize a new IsotopePattern instance.

        Args:
            mz_array: m/z values of the isotopes
            intensity_array: Intensities of the isotopes
            charge: Charge state, 0 if unknown
            status: Whether the pattern was detected or predicted
            description: Free text description
        """
        self.mz = np.array(mz_array, dtype=np.float64)
        self.intensity = np.array(intensity_array, dtype=np.float64)
        if self.mz.shape != self.intensity.shape:
            raise ValueError("Isotope m/z and intensity arrays differ in length")
        self.charge = int(charge)
        self.status = status
        self.description = description

    def number_of_isotopes(self) -> int:
        return int(self.mz.size)

    def highest_isotope(self) -> Optional[DataPoint]:
        """Get the most intense isotope, or None for an empty pattern."""
        if self.mz.size == 0:
            return None
        idx = int(np.argmax(self.intensity))
        return DataPoint(float(self.mz[idx]), float(self.intensity[idx]))

    def __repr__(self):
        return (
            f"IsotopePattern(isotopes={self.number_of_isotopes()}, charge={self.charge}, "
            f"status={self.status.value})"
        )
