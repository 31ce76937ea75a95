#!/usr/bin/env python3
"""
Configuration handling for the IGC record decoder

This module provides the record kind selection used by the parser and the
configuration of the command line tool. It handles command line arguments,
config file loading and defaults.
"""

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Union

from igc_model import RecordKind
from igc_constants import (
    DEFAULT_OUT_PATH,
    DEFAULT_KINDS,
    DEFAULT_OUTPUT,
    DEFAULT_JSON_INDENT,
    OUTPUT_FORMATS,
    CONFIG_SECTION_DEFAULTS,
    CONFIG_FILE_NAMES,
    CONFIG_KINDS_ALL
)

# Configure logger
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserSelection:
    """
    Immutable set of record kinds to collect during a whole-file pass.
    Kinds left out are still checked for a valid start letter but their
    lines are not decoded.
    """
    kinds: FrozenSet[RecordKind] = frozenset()

    @classmethod
    def all(cls) -> "ParserSelection":
        return cls(frozenset(RecordKind))

    @classmethod
    def none(cls) -> "ParserSelection":
        return cls(frozenset())

    @classmethod
    def from_letters(cls, letters: str) -> "ParserSelection":
        """
        Build a selection from record letters, e.g. "BH" or "B,H".
        "ALL" selects every kind. Unknown letters raise ValueError.
        """
        letters = letters.strip()
        if letters.upper() == CONFIG_KINDS_ALL:
            return cls.all()

        kinds = set()
        for letter in letters.replace(',', '').replace(' ', ''):
            try:
                kinds.add(RecordKind(letter.upper()))
            except ValueError:
                raise ValueError(f"'{letter}' is not an IGC record letter") from None
        return cls(frozenset(kinds))

    def including(self, *kinds: Union[RecordKind, str]) -> "ParserSelection":
        """Return a new selection with the given kinds added"""
        return ParserSelection(self.kinds | {RecordKind.coerce(kind) for kind in kinds})

    def excluding(self, *kinds: Union[RecordKind, str]) -> "ParserSelection":
        """Return a new selection with the given kinds removed"""
        return ParserSelection(self.kinds - {RecordKind.coerce(kind) for kind in kinds})

    def __contains__(self, kind) -> bool:
        try:
            return RecordKind.coerce(kind) in self.kinds
        except ValueError:
            return False

    def ordered_kinds(self) -> List[RecordKind]:
        """Selected kinds in record letter order"""
        return [kind for kind in RecordKind if kind in self.kinds]

    @property
    def letters(self) -> str:
        return ''.join(kind.letter for kind in self.ordered_kinds())


class ConfigParser:
    """
    Handles parsing of configuration files.
    Separates the parsing logic from the configuration storage.
    """

    def __init__(self):
        """Initialize the config parser"""
        self.parser = configparser.RawConfigParser()

    def find_config_file(self, cli_path: Optional[str] = None) -> Optional[str]:
        """Find a configuration file to use"""
        if cli_path and os.path.isfile(cli_path):
            logger.info(f"Using configuration file: {cli_path}")
            return cli_path

        # Look in standard locations
        paths = ('.', os.path.dirname(os.path.abspath(__file__)))

        for path in paths:
            for file in CONFIG_FILE_NAMES:
                full_path = os.path.join(path, file)
                if Path(full_path).is_file():
                    logger.info(f"Found configuration file: {full_path}")
                    return full_path

        logger.debug("No configuration file found, using defaults")
        return None

    def load_config_file(self, file_path: Optional[str] = None) -> bool:
        """Load configuration from file"""
        config_file = self.find_config_file(file_path)
        if not config_file:
            return False

        try:
            self.parser.read(config_file)
            return True
        except configparser.Error as e:
            logger.error(f"Error reading config file: {e}")
            return False

    def get_default_settings(self) -> Dict[str, str]:
        """Get default settings from configuration"""
        if CONFIG_SECTION_DEFAULTS in self.parser:
            return dict(self.parser[CONFIG_SECTION_DEFAULTS])
        return {}


class Config:
    """Main configuration class for the igcparse command line tool"""

    def __init__(self, cli_args):
        """Initialize with command line arguments"""
        self.parser = ConfigParser()
        self.cli_args = cli_args

        # Initialize defaults
        self.selection = ParserSelection.from_letters(DEFAULT_KINDS)
        self.out_path = DEFAULT_OUT_PATH
        self.output = DEFAULT_OUTPUT
        self.indent = DEFAULT_JSON_INDENT

        # Load configuration
        self._load_config()

    def _cli(self, name: str):
        return getattr(self.cli_args, name, None)

    def _load_config(self):
        """Load and process configuration"""
        # Load config file
        self.parser.load_config_file(self._cli('config'))

        # Get default settings
        defaults = self.parser.get_default_settings()

        # Apply CLI arguments (override config file)
        kinds = self._cli('kinds') or defaults.get('kinds')
        if kinds:
            self.set_kinds(kinds)

        output = self._cli('format') or defaults.get('output')
        if output:
            self.set_output(output)

        if self._cli('output'):
            self.out_path = self._cli('output')
        elif 'outpath' in defaults:
            self.out_path = defaults['outpath']

        if 'indent' in defaults:
            self.set_indent(defaults['indent'])

    def set_kinds(self, letters: str) -> None:
        try:
            self.selection = ParserSelection.from_letters(letters)
        except ValueError as e:
            logger.warning(f"Invalid record kinds '{letters}': {e}, collecting {self.selection.letters}")

    def set_output(self, output: str) -> None:
        output = output.strip().lower()
        if output in OUTPUT_FORMATS:
            self.output = output
        else:
            logger.warning(f"Unknown output format '{output}', using {self.output}")

    def set_indent(self, indent: str) -> None:
        try:
            self.indent = int(indent)
        except ValueError:
            logger.warning(f"Invalid JSON indent '{indent}', using {self.indent}")

    @property
    def outPath(self) -> str:
        """Get output path"""
        return self.out_path
