#!/usr/bin/env python3
"""
JSON writer module for the IGC record decoder

This module writes the outcomes of a parsed IGC file as JSON, one list per
collected record kind, keeping the source line of every entry.
"""

import json
from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any, Dict, List, TextIO

from igc_model import ParsedIgcFile, Outcome
from igc_constants import DEFAULT_JSON_INDENT


class IgcJsonWriter:
    """
    Handles writing parsed IGC files as JSON.
    Records become objects tagged with their type, errors keep their class
    name and message.
    """

    def __init__(self, config=None):
        """Initialize with configuration"""
        self.config = config

    @property
    def indent(self) -> int:
        return self.config.indent if self.config is not None else DEFAULT_JSON_INDENT

    @staticmethod
    def to_jsonable(value: Any) -> Any:
        """Convert record values (dataclasses, enums, tuples) to JSON types"""
        if is_dataclass(value):
            return {f.name: IgcJsonWriter.to_jsonable(getattr(value, f.name)) for f in fields(value)}
        if isinstance(value, Enum):
            return value.name
        if isinstance(value, (list, tuple)):
            return [IgcJsonWriter.to_jsonable(item) for item in value]
        return value

    @staticmethod
    def format_outcome(outcome: Outcome) -> Dict[str, Any]:
        """Format one outcome as a JSON object"""
        if outcome.ok:
            record = IgcJsonWriter.to_jsonable(outcome.value)
            record['type'] = type(outcome.value).__name__
            return {'line': outcome.line, 'record': record}
        return {
            'line': outcome.line,
            'error': {
                'type': type(outcome.error).__name__,
                'message': outcome.error.message,
            }
        }

    def build_document(self, parsed: ParsedIgcFile) -> Dict[str, Any]:
        """Build the JSON document for a parsed file"""
        records: Dict[str, List[Dict[str, Any]]] = {}
        for kind in parsed:
            records[kind.letter] = [self.format_outcome(outcome) for outcome in parsed[kind]]
        return {
            'kinds': [kind.letter for kind in parsed],
            'records': records,
        }

    def write_file(self, out_file: TextIO, parsed: ParsedIgcFile) -> None:
        """Write a complete JSON file from a parsed IGC file"""
        json.dump(self.build_document(parsed), out_file, indent=self.indent)
        out_file.write('\n')


# Public function
def writeOutputFile(config, out_file: TextIO, parsed: ParsedIgcFile) -> None:
    """Write a JSON file from the parsed IGC file"""
    writer = IgcJsonWriter(config)
    writer.write_file(out_file, parsed)
