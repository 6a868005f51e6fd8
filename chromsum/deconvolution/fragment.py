"""
Fragment scan search module.

This module contains the strategies that link a peak to the fragmentation
scan that best represents it.
"""

import logging
from typing import Optional, Protocol

from .constants import (
    MS2_LEVEL,
    NO_FRAGMENT_SCAN,
    BASE_PEAK_SEARCH,
    CLOSEST_APEX_SEARCH,
)
from .range import Range
from .rawdata import RawDataFile

logger = logging.getLogger(__name__)


class FragmentScanSearch(Protocol):
    """Strategy finding the best fragmentation scan inside an RT/m/z window."""

    def find_best_fragment_scan(
        self, data_file: RawDataFile, rt_range: Optional[Range], mz_range: Range
    ) -> int:
        ...


class BasePeakFragmentSearch:
    """
    Choose the fragmentation scan with the most intense base peak.

    Candidates are scans of the fragment MS level whose retention time lies
    in the RT window and whose precursor m/z lies in the m/z window.
    """

    def __init__(self, ms_level: int = MS2_LEVEL):
        self.ms_level = ms_level

    def find_best_fragment_scan(
        self, data_file: RawDataFile, rt_range: Optional[Range], mz_range: Range
    ) -> int:
        """
        Search the data file for the best fragmentation scan.

        Args:
            data_file: Raw data file holding the fragmentation scans
            rt_range: Retention time window, None if the peak has no data
            mz_range: Precursor m/z window

        Returns:
            Scan number of the best scan, or NO_FRAGMENT_SCAN
        """
        if rt_range is None:
            return NO_FRAGMENT_SCAN

        best_scan = NO_FRAGMENT_SCAN
        top_base_peak = 0.0

        for scan_number in data_file.get_scan_numbers(self.ms_level, rt_range):
            scan = data_file.get_scan(scan_number)
            if scan.precursor_mz is None or not mz_range.contains(scan.precursor_mz):
                continue

            base_peak = scan.base_peak()
            if base_peak is None:
                continue

            if base_peak.intensity > top_base_peak:
                best_scan = scan.scan_number
                top_base_peak = base_peak.intensity

        return best_scan


class ClosestApexFragmentSearch:
    """
    Choose the fragmentation scan closest in time to the middle of the RT window.

    Ties keep the earliest scan.
    """

    def __init__(self, ms_level: int = MS2_LEVEL):
        self.ms_level = ms_level

    def find_best_fragment_scan(
        self, data_file: RawDataFile, rt_range: Optional[Range], mz_range: Range
    ) -> int:
        if rt_range is None:
            return NO_FRAGMENT_SCAN

        center = rt_range.average()
        best_scan = NO_FRAGMENT_SCAN
        best_diff = float("inf")

        for scan_number in data_file.get_scan_numbers(self.ms_level, rt_range):
            scan = data_file.get_scan(scan_number)
            if scan.precursor_mz is None or not mz_range.contains(scan.precursor_mz):
                continue

            diff = abs(scan.rt - center)
            if diff < best_diff:
                best_scan = scan.scan_number
                best_diff = diff

        return best_scan


def get_fragment_search(method: str, ms_level: int = MS2_LEVEL) -> FragmentScanSearch:
    """
    Create a fragment scan search strategy by name.

    Raises:
        ValueError: If the method is unknown
    """
    if method == BASE_PEAK_SEARCH:
        return BasePeakFragmentSearch(ms_level)
    elif method == CLOSEST_APEX_SEARCH:
        return ClosestApexFragmentSearch(ms_level)
    else:
        raise ValueError(f"Unsupported fragment search method: {method}")
