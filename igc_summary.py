#!/usr/bin/env python3
"""
File summary functions for the IGC record decoder
"""

from igc_model import ParsedIgcFile, RecordKind, HeaderKind
from igc_constants import DEFAULT_NA_TEXT, DEFAULT_UNKNOWN_TEXT

KIND_LABELS = {
    RecordKind.FLIGHT_RECORDER_ID: "Flight recorder id",
    RecordKind.FIX: "Fixes",
    RecordKind.TASK_INFO: "Task info",
    RecordKind.DIFFERENTIAL_GPS: "Differential GPS",
    RecordKind.EVENT: "Events",
    RecordKind.SATELLITE: "Satellites",
    RecordKind.SECURITY: "Security",
    RecordKind.FILE_HEADER: "File headers",
    RecordKind.FIX_EXTENSION_SPEC: "Fix extensions",
    RecordKind.DATA_FIX_EXTENSION_SPEC: "Data fix extensions",
    RecordKind.DATA_FIX: "Data fixes",
    RecordKind.COMMENT: "Comments",
}


def recorderName(parsed: ParsedIgcFile) -> str:
    """Manufacturer and id of the first A record, if collected"""
    if RecordKind.FLIGHT_RECORDER_ID not in parsed:
        return DEFAULT_UNKNOWN_TEXT
    recorders = parsed.records(RecordKind.FLIGHT_RECORDER_ID)
    if not recorders:
        return DEFAULT_UNKNOWN_TEXT
    return f"{recorders[0].manufacturer}{recorders[0].id}"


def fileSummary(parsed: ParsedIgcFile) -> str:
    """Generate a summary string for a parsed file"""
    date = pilot = glider = None
    if RecordKind.FILE_HEADER in parsed:
        date = parsed.header(HeaderKind.DATE)
        pilot = parsed.header(HeaderKind.PILOT_IN_CHARGE)
        glider = parsed.header(HeaderKind.GLIDER_TYPE)

    date_str = str(date) if date else "Unknown Date"
    pilot_str = f" by {pilot.strip()}" if pilot else ''
    glider_str = f" ({glider.strip()})" if glider else ''

    heading = f"{recorderName(parsed)} - {date_str}{pilot_str}{glider_str}"
    underline = '\n' + ('-' * len(heading))

    lines = []
    for kind in parsed:
        outcomes = parsed[kind]
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        label = f"{kind.letter} {KIND_LABELS[kind]}:"
        lines.append(f"{label:<24}{len(outcomes) - failed:>6} decoded, {failed} failed")

    if RecordKind.FIX in parsed:
        fixes = parsed.records(RecordKind.FIX)
        first = f"{fixes[0].timestamp}Z" if fixes else DEFAULT_NA_TEXT
        last = f"{fixes[-1].timestamp}Z" if fixes else DEFAULT_NA_TEXT
        lines.append(f"First fix: {first}")
        lines.append(f" Last fix: {last}")

    return f"{heading}{underline}\n" + '\n'.join(lines)
