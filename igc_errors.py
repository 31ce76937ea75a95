#!/usr/bin/env python3
"""
Error taxonomy for the IGC record decoder

Every decoding failure is an IgcError. Primitive value errors (time, date,
coordinate) are raised by the field decoders and propagate unchanged through
the record decoders; the dispatcher then attaches the full offending line.
"""

from typing import Optional


class IgcError(ValueError):
    """Base class for all classified decoding failures"""

    def __init__(self, message: str, text: Optional[str] = None, line: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.line = line

    def __str__(self) -> str:
        return self.message


# Primitive values

class TimeRangeError(IgcError):
    """Time field that is malformed or out of range"""


class DateRangeError(IgcError):
    """Date field that is malformed or out of range"""


class CoordinateError(IgcError):
    """Coordinate field that is malformed"""


class LatitudeError(CoordinateError):
    pass


class LongitudeError(CoordinateError):
    pass


# Structural failures

class RecordTooShortError(IgcError):
    """Line shorter than the minimum length of its record kind"""

    def __init__(self, message: str, kind: str, text: Optional[str] = None, line: Optional[str] = None):
        super().__init__(message, text=text, line=line)
        self.kind = kind


class UnrecognizedTagError(IgcError):
    """Tag (H sub-header or I/J kind letter) not in the known table"""


class RecordDispatchError(IgcError):
    """Line without a readable or valid start letter"""


class IgcFileError(IgcError):
    """Whole-file pass aborted by a dispatch failure"""


# One error per record kind

class FlightRecorderIdError(IgcError):
    pass


class FixError(IgcError):
    pass


class TaskInfoError(IgcError):
    pass


class DifferentialGpsError(IgcError):
    pass


class EventError(IgcError):
    pass


class SatelliteError(IgcError):
    pass


class SecurityError(IgcError):
    pass


class FileHeaderError(IgcError):
    pass


class ExtensionError(IgcError):
    pass


class DataFixError(IgcError):
    pass


class CommentError(IgcError):
    pass


class KindNotCollectedError(LookupError):
    """
    Raised when a parsed file is asked for a record kind that was not
    selected before parsing.
    """

    def __init__(self, kind):
        super().__init__(f"record kind {kind!r} was not selected for collection")
        self.kind = kind
