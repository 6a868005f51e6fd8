#!/usr/bin/env python3
"""
chromsum CLI - command line interface for chromatographic peak summaries.
"""

import click

from chromsum import __version__
from chromsum.deconvolution.cli import summarize


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    chromsum: Chromatographic peak summaries for LC-MS data

    Available commands:
      summarize   Summarize peak regions of an extracted-ion chromatogram

    Examples:
      chromsum summarize -in run.mzML -out peaks.csv --mz 445.12 --region 10:25
    """
    pass


cli.add_command(summarize)


def main():
    """Main entry point"""
    cli()


if __name__ == "__main__":
    main()
