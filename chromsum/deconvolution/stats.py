"""
Statistics helpers for peak summarization.
"""

import numpy as np


def calc_quantile(values, q: float) -> float:
    """
    Calculate a quantile of the given values.

    Uses order statistics with linear interpolation between neighbouring
    order statistics for non-integral ranks, so the median of an even number
    of values is the mean of the two middle values.

    Args:
        values: Sequence of numbers
        q: Quantile, clamped to [0, 1]

    Returns:
        Quantile value, or 0.0 for an empty input
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return 0.0
    if values.size == 1:
        return float(values[0])
    q = min(max(q, 0.0), 1.0)
    return float(np.quantile(values, q))


def trapezoid_area(rts, intensities) -> float:
    """
    Integrate intensity over retention time with the trapezoidal rule.

    Every consecutive pair contributes
    (rt[i] - rt[i-1]) * (intensity[i] + intensity[i-1]) / 2.

    Args:
        rts: Retention times, one per point
        intensities: Intensities, one per point

    Returns:
        Area, 0.0 for fewer than two points

    Raises:
        ValueError: If the two arrays differ in length
    """
    rts = np.asarray(rts, dtype=np.float64)
    intensities = np.asarray(intensities, dtype=np.float64)
    if rts.shape != intensities.shape:
        raise ValueError(
            f"Retention time and intensity arrays differ in length: {rts.size} != {intensities.size}"
        )
    if rts.size < 2:
        return 0.0
    slices = np.diff(rts) * (intensities[1:] + intensities[:-1]) / 2.0
    return float(np.sum(slices))
