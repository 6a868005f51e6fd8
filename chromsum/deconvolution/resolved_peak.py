"""
Resolved peak module.

This module contains the ResolvedPeak class, the summary of one
chromatographic peak cut out of a chromatogram.
"""

import logging
from typing import Any, Dict, Optional, Union

import numpy as np

from .chromatogram import RawTrace
from .config import SummarizerConfig
from .constants import MEDIAN_QUANTILE, NO_FRAGMENT_SCAN, UNKNOWN_CHARGE, PeakStatus
from .fragment import FragmentScanSearch, get_fragment_search
from .isotope import IsotopePattern
from .range import Range
from .rawdata import DataPoint, RawDataFile
from .stats import calc_quantile, trapezoid_area

logger = logging.getLogger(__name__)


class ResolvedPeak:
    """
    Chromatographic peak built from a region of a chromatogram.

    The peak copies the region's scan numbers and data point values into its
    own numpy buffers (one m/z and one intensity array, index-aligned with the
    scan numbers) instead of keeping one object per data point, so that many
    peaks can be held in memory at once. Missing data points are stored as
    (0, 0).

    Everything except the isotope pattern and the charge is fixed at
    construction; the ranges are frozen and the buffers are read-only.
    The isotope pattern and the charge are set later by deisotoping and are
    not synchronized.
    """

    __slots__ = [
        "_data_file", "_scan_numbers", "_mz_values", "_intensity_values",
        "_mz", "_rt", "_height", "_area", "_representative_scan", "_fragment_scan",
        "_intensity_range", "_mz_range", "_rt_range", "_isotope_pattern", "_charge",
    ]

    def __init__(
        self,
        chromatogram: RawTrace,
        region_start: int,
        region_end: int,
        fragment_search: Optional[FragmentScanSearch] = None,
        config: Optional[Union[SummarizerConfig, Dict[str, Any]]] = None,
    ):
        """
        Initialize this peak from the data points of a chromatogram.

        Args:
            chromatogram: Trace to read the data points from
            region_start: Index of the first scan of the peak (inclusive) in
                the chromatogram's scan numbers
            region_end: Index of the last scan of the peak (inclusive)
            fragment_search: Strategy choosing the fragment scan; defaults to
                the one named in the configuration
            config: Configuration (optional)

        Raises:
            ValueError: If the region is not a valid index range of the chromatogram
        """
        if not isinstance(config, SummarizerConfig):
            config = SummarizerConfig(config)

        self._data_file: RawDataFile = chromatogram.data_file

        all_scan_numbers = chromatogram.get_scan_numbers(config["ms_level"])
        _check_region(region_start, region_end, len(all_scan_numbers))

        # Make an array of scan numbers of this peak
        self._scan_numbers = np.array(all_scan_numbers[region_start:region_end + 1], dtype=np.int64)
        num_scans = self._scan_numbers.size

        mz_values = np.zeros(num_scans, dtype=np.float64)
        intensity_values = np.zeros(num_scans, dtype=np.float64)
        rt_values = np.empty(num_scans, dtype=np.float64)

        # The chromatogram's m/z range is kept instead of the range of the
        # detected m/z values; in continuous data each m/z peak has a width
        # that the data points underestimate.
        self._mz_range: Range = chromatogram.get_raw_data_points_mz_range().copy()

        self._intensity_range: Optional[Range] = None
        self._rt_range: Optional[Range] = None

        # Set raw data point ranges, height, rt and representative scan
        self._height = float("-inf")
        self._rt = 0.0
        self._representative_scan = 0

        for i, scan_number in enumerate(self._scan_numbers):
            scan_number = int(scan_number)
            scan_rt = chromatogram.retention_time_of(scan_number)
            rt_values[i] = scan_rt

            dp = chromatogram.get_data_point(scan_number)
            if dp is None:
                continue

            mz_values[i] = dp.mz
            intensity_values[i] = dp.intensity

            if self._intensity_range is None:
                self._intensity_range = Range(dp.intensity)
                self._rt_range = Range(scan_rt)
            else:
                self._rt_range.extend(scan_rt)
                self._intensity_range.extend(dp.intensity)

            # Strict comparison keeps the first of equally intense scans
            if dp.intensity > self._height:
                self._height = float(dp.intensity)
                self._rt = float(scan_rt)
                self._representative_scan = scan_number

        # Median m/z, zero-filled slots of missing data points included
        self._mz = calc_quantile(mz_values, MEDIAN_QUANTILE)

        # Area over all consecutive scans, missing data points included
        self._area = trapezoid_area(rt_values, intensity_values)

        mz_values.flags.writeable = False
        intensity_values.flags.writeable = False
        self._scan_numbers.flags.writeable = False
        self._mz_values = mz_values
        self._intensity_values = intensity_values

        # Update fragment scan
        if fragment_search is None:
            fragment_search = get_fragment_search(
                config["fragment_search"], config["fragment_ms_level"]
            )
        self._fragment_scan = fragment_search.find_best_fragment_scan(
            self._data_file, self._rt_range, self._mz_range
        )

        self._isotope_pattern: Optional[IsotopePattern] = None
        self._charge = UNKNOWN_CHARGE
        if self._fragment_scan != NO_FRAGMENT_SCAN:
            precursor_charge = chromatogram.precursor_charge_of(self._fragment_scan)
            if precursor_charge > 0:
                self._charge = precursor_charge

        self._mz_range.freeze()
        if self._rt_range is not None:
            self._rt_range.freeze()
            self._intensity_range.freeze()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"Resolved peak {self}: scans {self._scan_numbers[0]}-{self._scan_numbers[-1]}, "
                f"height {self._height:.1f}, area {self._area:.2f}, fragment scan {self._fragment_scan}"
            )

    def get_data_point(self, scan_number: int) -> Optional[DataPoint]:
        """
        Get the data point of this peak in a given scan.

        Args:
            scan_number: Scan number

        Returns:
            DataPoint stored for the scan ((0, 0) for a missing data point),
            or None if the scan is not part of this peak
        """
        index = int(np.searchsorted(self._scan_numbers, scan_number))
        if index >= self._scan_numbers.size or self._scan_numbers[index] != scan_number:
            return None
        return DataPoint(float(self._mz_values[index]), float(self._intensity_values[index]))

    def get_mz(self) -> float:
        return self._mz

    def get_rt(self) -> float:
        return self._rt

    def get_height(self) -> float:
        return self._height

    def get_area(self) -> float:
        return self._area

    def get_scan_numbers(self) -> np.ndarray:
        return self._scan_numbers.copy()

    def get_mz_values(self) -> np.ndarray:
        """Read-only view of the m/z values, index-aligned with the scan numbers."""
        return self._mz_values

    def get_intensity_values(self) -> np.ndarray:
        """Read-only view of the intensities, index-aligned with the scan numbers."""
        return self._intensity_values

    def get_representative_scan_number(self) -> int:
        return self._representative_scan

    def get_most_intense_fragment_scan_number(self) -> int:
        return self._fragment_scan

    def get_raw_data_points_intensity_range(self) -> Optional[Range]:
        """Frozen intensity range of the present data points, None without data."""
        return self._intensity_range

    def get_raw_data_points_mz_range(self) -> Range:
        return self._mz_range

    def get_raw_data_points_rt_range(self) -> Optional[Range]:
        return self._rt_range

    def get_data_file(self) -> RawDataFile:
        return self._data_file

    def get_peak_status(self) -> PeakStatus:
        return PeakStatus.DETECTED

    def get_isotope_pattern(self) -> Optional[IsotopePattern]:
        return self._isotope_pattern

    def set_isotope_pattern(self, isotope_pattern: Optional[IsotopePattern]) -> None:
        self._isotope_pattern = isotope_pattern

    def get_charge(self) -> int:
        return self._charge

    def set_charge(self, charge: int) -> None:
        self._charge = charge

    mz = property(get_mz)
    rt = property(get_rt)
    height = property(get_height)
    area = property(get_area)
    representative_scan = property(get_representative_scan_number)
    fragment_scan = property(get_most_intense_fragment_scan_number)
    isotope_pattern = property(get_isotope_pattern, set_isotope_pattern)
    charge = property(get_charge, set_charge)

    def __len__(self):
        return int(self._scan_numbers.size)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the peak to a dictionary of its scalar values.

        Ranges that were never initialized (no data in the region) are
        reported as None.

        Returns:
            Dictionary keyed by the export column names
        """
        rt_range = self._rt_range.to_tuple() if self._rt_range is not None else (None, None)
        intensity_range = (
            self._intensity_range.to_tuple() if self._intensity_range is not None else (None, None)
        )
        return {
            "mz": self._mz,
            "rt": self._rt,
            "height": self._height,
            "area": self._area,
            "representative_scan": self._representative_scan,
            "fragment_scan": self._fragment_scan,
            "charge": self._charge,
            "mz_min": self._mz_range.min,
            "mz_max": self._mz_range.max,
            "rt_min": rt_range[0],
            "rt_max": rt_range[1],
            "intensity_min": intensity_range[0],
            "intensity_max": intensity_range[1],
            "num_scans": len(self),
            "status": self.get_peak_status().value,
        }

    def __str__(self):
        return peak_to_string(self)

    def __repr__(self):
        return (
            f"ResolvedPeak(mz={self._mz:.4f}, rt={self._rt:.4f}, height={self._height:.1f}, "
            f"scans={len(self)})"
        )


def peak_to_string(peak: ResolvedPeak) -> str:
    """Describe a peak by its m/z, retention time and data file."""
    return f"{peak.get_mz():.4f} m/z @{peak.get_rt():.2f} [{peak.get_data_file().name}]"


def _check_region(region_start, region_end, num_scans: int) -> None:
    for name, value in (("region_start", region_start), ("region_end", region_end)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{name} must be an integer index, got {value!r}")
    if region_start < 0 or region_end >= num_scans:
        raise ValueError(
            f"Region [{region_start}, {region_end}] is outside the chromatogram's {num_scans} scans"
        )
    if region_start > region_end:
        raise ValueError(f"Region start {region_start} is after region end {region_end}")
