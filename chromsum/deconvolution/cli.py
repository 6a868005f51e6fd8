"""
Command line interface for chromatographic peak summaries
"""

import click
import os
import sys
import logging
import time
from typing import List, Tuple

from .config import SummarizerConfig
from .constants import FRAGMENT_SEARCH_METHODS, BASE_PEAK_SEARCH
from .chromatogram import Chromatogram
from .core import PeakResolver, parse_region
from .rawdata import load_mzml

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "-in",
    "--in-file",
    "in_file",
    required=True,
    type=click.Path(exists=True),
    help="Input spectrum file (mzML)"
)
@click.option(
    "-out",
    "--out-file",
    "out_file",
    required=True,
    type=click.Path(),
    help="Output file (csv)"
)
@click.option(
    "--mz",
    type=float,
    required=True,
    help="m/z of the extracted-ion chromatogram"
)
@click.option(
    "--mz-tolerance",
    type=float,
    default=0.01,
    help="Half width of the m/z extraction window (default: 0.01)"
)
@click.option(
    "--region",
    "regions",
    multiple=True,
    required=True,
    help="Peak region as START:END scan indices, both inclusive (repeatable)"
)
@click.option(
    "--fragment-search",
    type=click.Choice(list(FRAGMENT_SEARCH_METHODS)),
    default=BASE_PEAK_SEARCH,
    help="Fragment scan search method (default: base_peak)"
)
@click.option(
    "--threads",
    type=int,
    default=1,
    help="Number of threads to use (default: 1)"
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug mode"
)
@click.option(
    "--log-file",
    type=str,
    default=None,
    help="Log file path (only used in debug mode, default: {output_base}_debug.log)"
)
def summarize(
    in_file,
    out_file,
    mz,
    mz_tolerance,
    regions,
    fragment_search,
    threads,
    debug,
    log_file,
):
    """
    Summarize chromatographic peaks of an extracted-ion chromatogram.

    Each region is a pair of scan indices into the MS1 scans of the input
    file, as reported by a peak detector. One row per region is written to
    the output CSV file.
    """
    try:
        setup_logging(debug, log_file, out_file)

        tool = ChromSummarizer()
        exit_code = tool.run(
            in_file=in_file,
            out_file=out_file,
            mz=mz,
            mz_tolerance=mz_tolerance,
            regions=regions,
            fragment_search=fragment_search,
            threads=threads,
        )

        sys.exit(exit_code)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Error: {str(e)}", err=True)
        if debug:
            logger.error(f"Error: {str(e)}")
            import traceback

            logger.error(traceback.format_exc())
        sys.exit(1)


def setup_logging(debug, log_file, output):
    """Setup logging configuration"""
    # Configure log format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    formatter = logging.Formatter(log_format)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Configure console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Only configure file handler in debug mode
    if debug:
        output_base = os.path.splitext(output)[0]
        log_file_path = log_file or f"{output_base}_debug.log"

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set third-party library log levels
    logging.getLogger("numpy").setLevel(logging.WARNING)


class ChromSummarizer:
    """Main class for the peak summary command line tool"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.peaks = []

    def run(
        self,
        in_file: str,
        out_file: str,
        mz: float,
        mz_tolerance: float,
        regions: Tuple[str, ...],
        fragment_search: str,
        threads: int,
    ) -> int:
        """
        Summary workflow:
        1. Load the mzML file.
        2. Extract the chromatogram of the target m/z.
        3. Build a resolved peak for every region.
        4. Write the peaks to CSV.

        Returns:
            Exit code, 0 on success
        """
        config = SummarizerConfig(
            {
                "mz_tolerance": mz_tolerance,
                "fragment_search": fragment_search,
                "num_threads": threads,
            }
        )
        parsed_regions: List[Tuple[int, int]] = [parse_region(region) for region in regions]

        start_time = time.time()

        self.logger.info(f"Loading input file {in_file}...")
        data_file = load_mzml(in_file)
        if len(data_file) == 0:
            self.logger.error("No spectrum data found, process terminated.")
            return 1

        chromatogram = Chromatogram.extract(
            data_file, mz, config["mz_tolerance"], config["ms_level"]
        )
        self.logger.info(
            f"Extracted chromatogram at m/z {mz} with {len(chromatogram)} data points"
        )

        resolver = PeakResolver(chromatogram, config)
        self.peaks = resolver.resolve(parsed_regions)
        resolver.write_results(out_file)

        self.logger.info(f"Done in {time.time() - start_time:.2f} seconds")
        return 0


def main():
    """Main entry point"""
    summarize()


if __name__ == "__main__":
    main()
