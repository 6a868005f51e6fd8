"""
Range module.

This module contains the Range class, a closed numeric interval used for the
m/z, retention time and intensity extents of a peak.
"""

from typing import Optional, Tuple


class Range:
    """
    Closed interval [min, max].

    Ranges are widened in place with extend() while a peak is being built.
    freeze() makes a range read-only; frozen ranges are hashable.
    """

    __slots__ = ["_min", "_max", "_frozen"]

    def __init__(self, min_value: float, max_value: Optional[float] = None):
        """
        Initialize a new Range instance.

        Args:
            min_value: Lower bound, or the single value of a zero-width range
            max_value: Upper bound (optional)

        Raises:
            ValueError: If min_value is greater than max_value
        """
        if max_value is None:
            max_value = min_value
        if min_value > max_value:
            raise ValueError(f"Range minimum {min_value} is greater than maximum {max_value}")
        self._min = float(min_value)
        self._max = float(max_value)
        self._frozen = False

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def contains(self, value: float) -> bool:
        """Check if a value lies within the range, bounds included."""
        return self._min <= value <= self._max

    def contains_range(self, other: "Range") -> bool:
        return self._min <= other.min and other.max <= self._max

    def is_overlapping(self, other: "Range") -> bool:
        return other.max >= self._min and other.min <= self._max

    def intersection(self, other: "Range") -> Optional["Range"]:
        """
        Get the overlap of two ranges.

        Returns:
            The common range, or None if the ranges are disjoint
        """
        if not self.is_overlapping(other):
            return None
        return Range(max(self._min, other.min), min(self._max, other.max))

    def freeze(self) -> "Range":
        """Make the range read-only and return it."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def extend(self, value: float) -> None:
        """
        Widen the range so that it includes value.

        Raises:
            ValueError: If the range is frozen
        """
        if self._frozen:
            raise ValueError(f"Cannot extend frozen range {self}")
        if value < self._min:
            self._min = float(value)
        if value > self._max:
            self._max = float(value)

    def extend_range(self, other: "Range") -> None:
        """Widen the range so that it includes another range."""
        self.extend(other.min)
        self.extend(other.max)

    def length(self) -> float:
        return self._max - self._min

    def average(self) -> float:
        return (self._min + self._max) / 2.0

    def copy(self) -> "Range":
        """Unfrozen copy of the range."""
        return Range(self._min, self._max)

    def to_tuple(self) -> Tuple[float, float]:
        return self._min, self._max

    def __eq__(self, other):
        if not isinstance(other, Range):
            return False
        return self._min == other.min and self._max == other.max

    def __hash__(self):
        if not self._frozen:
            raise TypeError("unhashable type: unfrozen Range")
        return hash((self._min, self._max))

    def __repr__(self):
        return f"Range({self._min}, {self._max})"

    def __str__(self):
        return f"{self._min} - {self._max}"
