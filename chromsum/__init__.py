"""
chromsum: Chromatographic peak summaries for LC-MS data.

This package builds compact, immutable summaries of chromatographic peaks
(m/z, apex retention time, height, area, ranges and fragment scan) from
regions of extracted-ion chromatograms.
"""

__version__ = "0.1.0"
__author__ = "BigBio Stack"
__license__ = "MIT"

# Import main classes
from .deconvolution.resolved_peak import ResolvedPeak
from .deconvolution.chromatogram import Chromatogram
from .deconvolution.core import PeakResolver
from . import deconvolution

__all__ = ["ResolvedPeak", "Chromatogram", "PeakResolver", "deconvolution"]
