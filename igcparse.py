#!/usr/bin/env python3
"""
IGC record decoder

This script decodes IGC flight recorder files record by record and prints a
summary of each file or writes the decoded records as JSON.

Usage:
    python igcparse.py [-c config] [-k kinds] [-f summary|json] [-o outputFolder] file.igc [file2.igc ...]
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List

from igc_config import Config
from igc_parser import IgcParser
from igc_summary import fileSummary
from igc_writer import writeOutputFile
from igc_errors import IgcFileError
from igc_constants import DEFAULT_OUT_PATH, OUTPUT_JSON, OUTPUT_FORMATS, JSON_SUFFIX

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger('igcparse')


def output_path_for(config: Config, in_path: str) -> Path:
    """Path of the JSON file written for an input file"""
    out_path = Path(in_path).with_suffix(JSON_SUFFIX)
    if config.outPath and config.outPath != DEFAULT_OUT_PATH:
        out_path = Path(config.outPath) / out_path.name
    return out_path


def process_file(config: Config, in_path: str) -> bool:
    """Decode one IGC file and write its summary or JSON output"""
    logger.info(f"Processing {in_path}...")
    parser = IgcParser(config.selection)
    try:
        parsed = parser.parse_file(in_path)
    except IgcFileError as e:
        logger.error(f"{in_path} is not a valid IGC file: {e}")
        return False
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading {in_path}: {e}")
        return False

    failed = sum(len(parsed.errors(kind)) for kind in parsed)
    if failed:
        logger.warning(f"{failed} lines of {in_path} could not be decoded")

    if config.output == OUTPUT_JSON:
        out_path = output_path_for(config, in_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, 'w', encoding='utf-8') as json_file:
            writeOutputFile(config, json_file, parsed)
        logger.info(f"Successfully generated: {out_path}")
    else:
        print(fileSummary(parsed))

    return True


def process_files(config: Config, paths: List[str]) -> int:
    """Process a batch of files, returning how many succeeded"""
    succeeded = 0
    for in_path in paths:
        if process_file(config, in_path):
            succeeded += 1
    logger.info(f"Processing complete: {succeeded} of {len(paths)} files decoded.")
    return succeeded


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode IGC flight recorder files record by record',
        epilog='Example: python igcparse.py -k BH -f json vuelo.igc'
    )

    parser.add_argument('-c', '--config', default=None, help='Path to config file')
    parser.add_argument('-k', '--kinds', default=None, help='Record letters to collect, e.g. BH, or ALL')
    parser.add_argument('-f', '--format', default=None, choices=OUTPUT_FORMATS, help='Output: summary or json')
    parser.add_argument('-o', '--output', default=None, help='Folder to write JSON output files')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose output')
    parser.add_argument('trackfile', nargs='+', help='Path to one or more IGC files')
    args = parser.parse_args(argv)

    # Set log level based on verbose flag
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(args)
    succeeded = process_files(config, args.trackfile)
    return 0 if succeeded == len(args.trackfile) else 2


if __name__ == "__main__":
    try:
        sys.exit(main())
    except FileNotFoundError as e:
        logger.critical(f"File not found: {e.filename}")
        sys.exit(3)
    except ValueError as e:
        logger.critical(f"Invalid input: {e}")
        sys.exit(2)
    except Exception as e:
        logger.critical(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)
