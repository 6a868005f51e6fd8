"""
Raw data module.

This module contains the Scan and RawDataFile classes, an in-memory view of
an LC-MS run that serves scans by scan number, and the loader that fills it
from mzML through PyOpenMS.
"""

import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

import numpy as np
import pyopenms

from .constants import UNKNOWN_CHARGE
from .range import Range

logger = logging.getLogger(__name__)


class DataPoint(NamedTuple):
    """Single (m/z, intensity) measurement."""

    mz: float
    intensity: float


class Scan:
    """Class representing one scan of a raw data file."""

    __slots__ = [
        "scan_number", "ms_level", "rt", "precursor_mz", "precursor_charge",
        "mz", "intensity",
    ]

    def __init__(
        self,
        scan_number: int,
        ms_level: int,
        rt: float,
        mz_array=None,
        intensity_array=None,
        precursor_mz: Optional[float] = None,
        precursor_charge: int = UNKNOWN_CHARGE,
    ):
        """
        Initialize a new Scan instance.

        Args:
            scan_number: Scan identifier, unique within the file
            ms_level: MS level (1 for survey scans, 2 for fragmentation scans)
            rt: Retention time
            mz_array: m/z values of the scan's peaks
            intensity_array: Intensities of the scan's peaks
            precursor_mz: Precursor m/z of a fragmentation scan
            precursor_charge: Precursor charge, 0 if unknown
        """
        self.scan_number = int(scan_number)
        self.ms_level = int(ms_level)
        self.rt = float(rt)
        self.precursor_mz = None if precursor_mz is None else float(precursor_mz)
        self.precursor_charge = int(precursor_charge)

        mz_array = np.asarray(mz_array if mz_array is not None else [], dtype=np.float64)
        intensity_array = np.asarray(
            intensity_array if intensity_array is not None else [], dtype=np.float64
        )
        if mz_array.shape != intensity_array.shape:
            raise ValueError(
                f"Scan {scan_number}: m/z and intensity arrays differ in length"
            )
        self.mz = mz_array
        self.intensity = intensity_array

    @property
    def num_peaks(self) -> int:
        return int(self.mz.size)

    def base_peak(self) -> Optional[DataPoint]:
        """
        Get the most intense peak of the scan.

        Returns:
            DataPoint of the base peak, or None for an empty scan
        """
        if self.mz.size == 0:
            return None
        idx = int(np.argmax(self.intensity))
        return DataPoint(float(self.mz[idx]), float(self.intensity[idx]))

    def most_intense_in(self, mz_range: Range) -> Optional[DataPoint]:
        """
        Get the most intense peak within an m/z range.

        Returns:
            DataPoint of that peak, or None if no peak falls in the range
        """
        mask = (self.mz >= mz_range.min) & (self.mz <= mz_range.max)
        if not np.any(mask):
            return None
        candidates = np.flatnonzero(mask)
        idx = candidates[int(np.argmax(self.intensity[candidates]))]
        return DataPoint(float(self.mz[idx]), float(self.intensity[idx]))

    def __repr__(self):
        return (
            f"Scan(scan_number={self.scan_number}, ms_level={self.ms_level}, "
            f"rt={self.rt:.4f}, peaks={self.num_peaks})"
        )


class RawDataFile:
    """
    Ordered collection of scans keyed by scan number.

    Retention times are expected to be non-decreasing in scan number order.
    Scan numbers and retention times are cached per MS level as read-only
    arrays so that repeated lookups do not walk the whole file.
    """

    def __init__(self, name: str, scans: Optional[List[Scan]] = None):
        """
        Initialize a new RawDataFile instance.

        Args:
            name: File name used when describing peaks
            scans: Optional initial scans
        """
        self.name = name
        self._scans: Dict[int, Scan] = {}
        self._level_cache: Dict[Optional[int], Tuple[np.ndarray, np.ndarray, bool]] = {}
        for scan in scans or []:
            self.add_scan(scan)

    def add_scan(self, scan: Scan) -> None:
        """
        Add a scan to the file.

        Raises:
            ValueError: If a scan with the same number already exists
        """
        if scan.scan_number in self._scans:
            raise ValueError(f"Duplicate scan number {scan.scan_number} in {self.name}")
        self._scans[scan.scan_number] = scan
        self._level_cache.clear()

    def _level_index(self, ms_level: Optional[int]) -> Tuple[np.ndarray, np.ndarray, bool]:
        """
        Get the cached scan numbers and retention times of one MS level.

        Returns:
            Tuple of (scan numbers, retention times, whether the retention
            times are sorted), both arrays read-only
        """
        cached = self._level_cache.get(ms_level)
        if cached is None:
            numbers = np.array(
                [n for n in sorted(self._scans) if ms_level is None or self._scans[n].ms_level == ms_level],
                dtype=np.int64,
            )
            rts = np.array([self._scans[int(n)].rt for n in numbers], dtype=np.float64)
            rts_sorted = bool(np.all(np.diff(rts) >= 0))
            numbers.flags.writeable = False
            rts.flags.writeable = False
            cached = (numbers, rts, rts_sorted)
            self._level_cache[ms_level] = cached
        return cached

    def get_scan_numbers(self, ms_level: Optional[int] = None, rt_range: Optional[Range] = None) -> np.ndarray:
        """
        Get scan numbers in ascending order.

        Args:
            ms_level: Restrict to one MS level (optional)
            rt_range: Restrict to scans whose retention time lies in this range (optional)

        Returns:
            Read-only int64 array of scan numbers
        """
        numbers, rts, rts_sorted = self._level_index(ms_level)
        if rt_range is None:
            return numbers

        if rts_sorted:
            start_idx = np.searchsorted(rts, rt_range.min, side="left")
            end_idx = np.searchsorted(rts, rt_range.max, side="right")
            return numbers[start_idx:end_idx]

        selected = numbers[(rts >= rt_range.min) & (rts <= rt_range.max)]
        selected.flags.writeable = False
        return selected

    def get_scan(self, scan_number: int) -> Scan:
        """
        Get a scan by number.

        Raises:
            KeyError: If the file has no such scan
        """
        try:
            return self._scans[int(scan_number)]
        except KeyError:
            raise KeyError(f"Scan {scan_number} not found in {self.name}") from None

    def retention_time_of(self, scan_number: int) -> float:
        return self.get_scan(scan_number).rt

    def precursor_charge_of(self, scan_number: int) -> int:
        return self.get_scan(scan_number).precursor_charge

    def __len__(self):
        return len(self._scans)

    def __iter__(self):
        for number in self._level_index(None)[0]:
            yield self._scans[int(number)]

    def __repr__(self):
        return f"RawDataFile(name={self.name!r}, scans={len(self._scans)})"

    @classmethod
    def from_experiment(cls, exp: pyopenms.MSExperiment, name: str) -> "RawDataFile":
        """
        Build a raw data file from a PyOpenMS experiment.

        Scan numbers are taken from "scan=N" native IDs; spectra without one
        get their 1-based position in the experiment.

        Args:
            exp: Loaded MSExperiment
            name: File name

        Returns:
            RawDataFile holding one Scan per spectrum
        """
        data_file = cls(name)
        for index, spectrum in enumerate(exp):
            scan_number = _scan_number_from_native_id(spectrum.getNativeID(), index + 1)

            precursor_mz = None
            precursor_charge = UNKNOWN_CHARGE
            precursors = spectrum.getPrecursors()
            if precursors:
                precursor_mz = precursors[0].getMZ()
                precursor_charge = precursors[0].getCharge()

            mz_array, intensity_array = spectrum.get_peaks()
            data_file.add_scan(
                Scan(
                    scan_number,
                    spectrum.getMSLevel(),
                    spectrum.getRT(),
                    mz_array,
                    intensity_array,
                    precursor_mz=precursor_mz,
                    precursor_charge=precursor_charge,
                )
            )

        logger.debug(f"Built raw data file {name} with {len(data_file)} scans")
        return data_file


def _scan_number_from_native_id(native_id, fallback: int) -> int:
    if isinstance(native_id, bytes):
        native_id = native_id.decode("utf-8")
    if "scan=" in native_id:
        try:
            return int(native_id.split("scan=")[-1].split()[0])
        except ValueError:
            logger.warning(f"Cannot extract scan number from native ID: {native_id}")
    return fallback


def load_mzml(path: str) -> RawDataFile:
    """
    Load an mzML file into a RawDataFile.

    Args:
        path: Path of the mzML file

    Returns:
        RawDataFile named after the path; empty if the file has no spectra
    """
    exp = pyopenms.MSExperiment()
    pyopenms.MzMLFile().load(path, exp)

    if exp.empty():
        logger.warning(f"No spectra found in input file: {path}")

    return RawDataFile.from_experiment(exp, path)
