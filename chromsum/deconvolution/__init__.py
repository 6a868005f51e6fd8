"""
deconvolution - summaries of chromatographic peaks resolved from LC-MS traces.

This package turns a region of a chromatogram into a ResolvedPeak holding the
peak's m/z, apex, height, area, ranges and fragment scan.
"""

__version__ = "0.1.0"


def __getattr__(name):
    if name == "ResolvedPeak":
        from .resolved_peak import ResolvedPeak

        return ResolvedPeak
    elif name == "PeakResolver":
        from .core import PeakResolver

        return PeakResolver
    elif name in ["Chromatogram", "RawTrace"]:
        from . import chromatogram

        return getattr(chromatogram, name)
    elif name in ["RawDataFile", "Scan", "DataPoint", "load_mzml"]:
        from . import rawdata

        return getattr(rawdata, name)
    elif name in ["BasePeakFragmentSearch", "ClosestApexFragmentSearch"]:
        from . import fragment

        return getattr(fragment, name)
    elif name == "IsotopePattern":
        from .isotope import IsotopePattern

        return IsotopePattern
    elif name == "Range":
        from .range import Range

        return Range
    elif name == "SummarizerConfig":
        from .config import SummarizerConfig

        return SummarizerConfig
    raise AttributeError(f"module 'deconvolution' has no attribute '{name}'")


__all__ = [
    "ResolvedPeak",
    "PeakResolver",
    "Chromatogram",
    "RawTrace",
    "RawDataFile",
    "Scan",
    "DataPoint",
    "load_mzml",
    "BasePeakFragmentSearch",
    "ClosestApexFragmentSearch",
    "IsotopePattern",
    "Range",
    "SummarizerConfig",
]
