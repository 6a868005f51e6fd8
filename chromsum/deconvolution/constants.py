"""
Constants and default configurations for chromsum peak summarization
"""

from enum import Enum

# MS levels
MS1_LEVEL = 1
MS2_LEVEL = 2

# Sentinel returned when no fragment scan matches a peak
NO_FRAGMENT_SCAN = -1

# Charge value meaning "unknown"
UNKNOWN_CHARGE = 0

# Representative m/z statistic
MEDIAN_QUANTILE = 0.5

# Fragment scan search strategies
BASE_PEAK_SEARCH = "base_peak"
CLOSEST_APEX_SEARCH = "closest_apex"
FRAGMENT_SEARCH_METHODS = (BASE_PEAK_SEARCH, CLOSEST_APEX_SEARCH)


class PeakStatus(Enum):
    """Origin of a peak's data."""

    UNKNOWN = "UNKNOWN"
    DETECTED = "DETECTED"


class IsotopePatternStatus(Enum):
    DETECTED = "DETECTED"
    PREDICTED = "PREDICTED"


# Output columns for exported peaks
EXPORT_COLUMNS = [
    "mz",
    "rt",
    "height",
    "area",
    "representative_scan",
    "fragment_scan",
    "charge",
    "mz_min",
    "mz_max",
    "rt_min",
    "rt_max",
    "intensity_min",
    "intensity_max",
    "num_scans",
    "status",
]

# Default configuration
DEFAULT_CONFIG = {
    # Trace settings
    "ms_level": MS1_LEVEL,
    "fragment_ms_level": MS2_LEVEL,
    "mz_tolerance": 0.01,
    # Summary settings
    "fragment_search": BASE_PEAK_SEARCH,
    # Performance settings
    "num_threads": 1,
}
