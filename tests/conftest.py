"""
Test configuration and fixtures for chromsum tests.
"""

import pytest
import numpy as np
from pyopenms import MSExperiment, MSSpectrum, Precursor

from chromsum.deconvolution.chromatogram import Chromatogram
from chromsum.deconvolution.range import Range
from chromsum.deconvolution.rawdata import DataPoint, RawDataFile, Scan

# MS1 scans 1, 3, 5, 7 with fragmentation scans in between
MS1_SCANS = [1, 3, 5, 7]
MS1_RTS = [0.0, 1.0, 2.0, 3.0]
MS1_MZS = [100.0, 100.1, 100.05, 100.2]
MS1_INTENSITIES = [10.0, 50.0, 30.0, 5.0]

# (scan number, rt, precursor m/z, precursor charge, base peak intensity)
MS2_SCANS = [
    (2, 0.5, 300.0, 1, 5000.0),  # precursor outside the m/z range
    (4, 1.5, 100.1, 2, 200.0),
    (6, 2.5, 100.1, 3, 500.0),
    (8, 3.5, 100.1, 4, 1000.0),  # outside the RT range of a full-region peak
]

TRACE_MZ_RANGE = (99.9, 100.3)


def _build_data_file(ms2_scans):
    data_file = RawDataFile("test.mzML")
    for number, rt, mz, intensity in zip(MS1_SCANS, MS1_RTS, MS1_MZS, MS1_INTENSITIES):
        # A second, unrelated ion in every survey scan
        data_file.add_scan(Scan(number, 1, rt, [mz, 250.0], [intensity, 1000.0]))
    for number, rt, precursor_mz, charge, base_peak in ms2_scans:
        data_file.add_scan(
            Scan(
                number, 2, rt, [150.0, 175.0], [base_peak / 2, base_peak],
                precursor_mz=precursor_mz, precursor_charge=charge,
            )
        )
    return data_file


@pytest.fixture
def data_file():
    """Raw data file with four survey scans and four fragmentation scans."""
    return _build_data_file(MS2_SCANS)


@pytest.fixture
def make_chromatogram(data_file):
    """Factory building a chromatogram over the test file, optionally with missing scans."""

    def factory(missing=(), intensities=None):
        intensities = intensities or MS1_INTENSITIES
        data_points = {
            number: DataPoint(mz, intensity)
            for number, mz, intensity in zip(MS1_SCANS, MS1_MZS, intensities)
            if number not in missing
        }
        return Chromatogram(data_file, data_points, Range(*TRACE_MZ_RANGE))

    return factory


@pytest.fixture
def chromatogram(make_chromatogram):
    """Chromatogram with a data point in every survey scan."""
    return make_chromatogram()


@pytest.fixture
def experiment():
    """PyOpenMS experiment holding the same scans as the data_file fixture."""
    exp = MSExperiment()
    scans = [(n, rt, mz, i, None) for n, rt, mz, i in zip(MS1_SCANS, MS1_RTS, MS1_MZS, MS1_INTENSITIES)]
    scans += [(n, rt, None, None, (pmz, z, bp)) for n, rt, pmz, z, bp in MS2_SCANS]
    for number, rt, mz, intensity, precursor_info in sorted(scans, key=lambda s: s[0]):
        spectrum = MSSpectrum()
        spectrum.setRT(rt)
        spectrum.setNativeID(f"controllerType=0 controllerNumber=1 scan={number}")
        if precursor_info is None:
            spectrum.setMSLevel(1)
            spectrum.set_peaks((np.array([mz, 250.0]), np.array([intensity, 1000.0])))
        else:
            precursor_mz, charge, base_peak = precursor_info
            spectrum.setMSLevel(2)
            precursor = Precursor()
            precursor.setMZ(precursor_mz)
            precursor.setCharge(charge)
            spectrum.setPrecursors([precursor])
            spectrum.set_peaks((np.array([150.0, 175.0]), np.array([base_peak / 2, base_peak])))
        exp.addSpectrum(spectrum)
    return exp


# Markers for different test categories
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "cli: marks tests that test CLI functionality")
    config.addinivalue_line("markers", "algorithm: marks tests that test algorithm functionality")
