"""
Core processing module for chromsum.

This module contains the PeakResolver, which turns the peak regions found by
an upstream peak detector into ResolvedPeak objects and writes them out.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple, Union, Dict, Any

from .chromatogram import RawTrace
from .config import SummarizerConfig
from .constants import EXPORT_COLUMNS
from .fragment import FragmentScanSearch, get_fragment_search
from .resolved_peak import ResolvedPeak

logger = logging.getLogger(__name__)


def parse_region(text: str) -> Tuple[int, int]:
    """
    Parse a region written as "START:END".

    Args:
        text: Region text, both indices inclusive

    Returns:
        Tuple of (start, end)

    Raises:
        ValueError: If the text is not two integers separated by a colon
    """
    parts = text.split(":")
    if len(parts) != 2:
        raise ValueError(f"Region must be written as START:END, got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Region bounds must be integers, got {text!r}") from None


class PeakResolver:
    """Builds resolved peaks for a list of regions of one chromatogram."""

    def __init__(
        self,
        chromatogram: RawTrace,
        config: Optional[Union[SummarizerConfig, Dict[str, Any]]] = None,
        fragment_search: Optional[FragmentScanSearch] = None,
    ):
        """
        Initialize the peak resolver.

        Args:
            chromatogram: Trace the regions refer to
            config: Configuration object or dictionary (optional)
            fragment_search: Fragment scan search strategy; defaults to the
                one named in the configuration
        """
        if not isinstance(config, SummarizerConfig):
            config = SummarizerConfig(config)
        self.config = config
        self.chromatogram = chromatogram
        self.fragment_search = fragment_search or get_fragment_search(
            config["fragment_search"], config["fragment_ms_level"]
        )
        self.peaks: List[ResolvedPeak] = []

    def _build_peak(self, region: Tuple[int, int]) -> ResolvedPeak:
        region_start, region_end = region
        return ResolvedPeak(
            self.chromatogram,
            region_start,
            region_end,
            fragment_search=self.fragment_search,
            config=self.config,
        )

    def resolve(self, regions: Iterable[Tuple[int, int]]) -> List[ResolvedPeak]:
        """
        Build one resolved peak per region.

        Peaks are returned in the order of the regions. With more than one
        thread the peaks are built concurrently; the chromatogram is only
        read. Any failure is raised to the caller.

        Args:
            regions: (start, end) index pairs, both inclusive

        Returns:
            List of resolved peaks
        """
        regions = list(regions)
        num_threads = self.config.get("num_threads", 1)
        logger.info(f"Resolving {len(regions)} peaks with {num_threads} thread(s)")

        if num_threads > 1 and len(regions) > 1:
            with ThreadPoolExecutor(max_workers=num_threads) as executor:
                peaks = list(executor.map(self._build_peak, regions))
        else:
            peaks = [self._build_peak(region) for region in regions]

        self.peaks = peaks
        logger.info(f"Resolved {len(peaks)} peaks")
        return peaks

    def get_results(self) -> List[ResolvedPeak]:
        """
        Get processing results.

        Returns:
            List of resolved peaks
        """
        return self.peaks

    def write_results(self, output_file: str) -> None:
        """
        Write the resolved peaks to a CSV file.

        Args:
            output_file: Output file path

        Raises:
            ValueError: If nothing was resolved yet or the format is not supported
        """
        logger.info(f"Starting to write results to file: {output_file}")

        if not self.peaks:
            raise ValueError("No peak data available. Please call resolve() method first.")

        file_extension = output_file.lower().split(".")[-1]
        if file_extension != "csv":
            raise ValueError(f"Unsupported file format: {file_extension}")

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(",".join(EXPORT_COLUMNS) + "\n")
            for peak in self.peaks:
                row = peak.to_dict()
                f.write(",".join(_format_value(row[column]) for column in EXPORT_COLUMNS) + "\n")

        logger.info(f"Results successfully written to: {output_file}")


def _format_value(value) -> str:
    if value is None:
        return ""
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)
