"""
Chromatogram module.

This module contains the RawTrace protocol consumed by ResolvedPeak and the
Chromatogram class, an extracted-ion trace over a RawDataFile.
"""

import logging
from typing import Dict, Optional, Protocol

import numpy as np

from .constants import MS1_LEVEL
from .range import Range
from .rawdata import DataPoint, RawDataFile

logger = logging.getLogger(__name__)


class RawTrace(Protocol):
    """Read-only view of a chromatographic trace."""

    data_file: RawDataFile

    def get_scan_numbers(self, ms_level: int) -> np.ndarray:
        ...

    def get_data_point(self, scan_number: int) -> Optional[DataPoint]:
        ...

    def retention_time_of(self, scan_number: int) -> float:
        ...

    def get_raw_data_points_mz_range(self) -> Range:
        ...

    def precursor_charge_of(self, scan_number: int) -> int:
        ...


class Chromatogram:
    """
    Trace of one m/z channel across the scans of a raw data file.

    Scans without an entry in the data point map are missing samples.
    """

    def __init__(
        self,
        data_file: RawDataFile,
        data_points: Dict[int, DataPoint],
        mz_range: Optional[Range] = None,
    ):
        """
        Initialize a new Chromatogram instance.

        Args:
            data_file: Raw data file the trace was extracted from
            data_points: Mapping of scan number to the trace's data point in that scan
            mz_range: m/z extent of the trace; derived from the data points if omitted

        Raises:
            ValueError: If no m/z range is given and there are no data points
        """
        self.data_file = data_file
        self._data_points = {int(k): DataPoint(float(v[0]), float(v[1])) for k, v in data_points.items()}

        if mz_range is None:
            if not self._data_points:
                raise ValueError("Cannot derive an m/z range from an empty chromatogram")
            mz_values = [dp.mz for dp in self._data_points.values()]
            mz_range = Range(min(mz_values), max(mz_values))
        self._mz_range = mz_range

    @classmethod
    def extract(
        cls,
        data_file: RawDataFile,
        mz: float,
        tolerance: float,
        ms_level: int = MS1_LEVEL,
    ) -> "Chromatogram":
        """
        Build an extracted-ion chromatogram.

        In each scan of the requested level the most intense peak inside
        [mz - tolerance, mz + tolerance] becomes the trace's data point.
        The trace keeps the full tolerance window as its m/z range.

        Args:
            data_file: Raw data file to extract from
            mz: Target m/z
            tolerance: Half width of the extraction window
            ms_level: MS level of the scans to use

        Returns:
            Chromatogram over all scans of the level
        """
        window = Range(mz - tolerance, mz + tolerance)
        data_points = {}
        scan_numbers = data_file.get_scan_numbers(ms_level)
        for scan_number in scan_numbers:
            dp = data_file.get_scan(scan_number).most_intense_in(window)
            if dp is not None:
                data_points[int(scan_number)] = dp

        logger.debug(
            f"Extracted chromatogram at m/z {mz:.4f} +/- {tolerance}: "
            f"{len(data_points)} of {len(scan_numbers)} scans have data"
        )
        return cls(data_file, data_points, window)

    def get_scan_numbers(self, ms_level: int = MS1_LEVEL) -> np.ndarray:
        return self.data_file.get_scan_numbers(ms_level)

    def get_data_point(self, scan_number: int) -> Optional[DataPoint]:
        """Get the trace's data point in a scan, or None if the sample is missing."""
        return self._data_points.get(int(scan_number))

    def retention_time_of(self, scan_number: int) -> float:
        return self.data_file.retention_time_of(scan_number)

    def get_raw_data_points_mz_range(self) -> Range:
        return self._mz_range

    def precursor_charge_of(self, scan_number: int) -> int:
        return self.data_file.precursor_charge_of(scan_number)

    def set_data_point(self, scan_number: int, data_point: Optional[DataPoint]) -> None:
        """Replace or remove (None) the data point of a scan."""
        if data_point is None:
            self._data_points.pop(int(scan_number), None)
        else:
            self._data_points[int(scan_number)] = DataPoint(float(data_point[0]), float(data_point[1]))

    def __len__(self):
        return len(self._data_points)

    def __repr__(self):
        return f"Chromatogram(file={self.data_file.name!r}, mz_range={self._mz_range!r}, points={len(self)})"
