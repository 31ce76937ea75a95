#!/usr/bin/env python3
"""
IGC file parser module

This module holds one decoder per IGC record kind (A to L), the dispatcher
that picks a decoder from the first character of a line, and the whole-file
parser that collects per-kind outcomes.

A line with a missing or unknown start letter aborts the whole file. Any
other decoding failure is kept as a failed outcome for its kind and the pass
goes on.
"""

import logging
from typing import Dict, List, Optional, Type

from igc_model import (
    RecordKind,
    HeaderKind,
    DifferentialGpsQualifier,
    Record,
    RecordValue,
    Outcome,
    ParsedIgcFile,
    FlightRecorderId,
    Fix,
    DeclarationTime,
    TaskPoint,
    DifferentialGps,
    Event,
    Satellite,
    Security,
    FileHeader,
    ExtensionField,
    Extension,
    DataFix,
    Comment
)
from igc_errors import (
    IgcError,
    RecordTooShortError,
    UnrecognizedTagError,
    RecordDispatchError,
    IgcFileError,
    FlightRecorderIdError,
    FixError,
    TaskInfoError,
    DifferentialGpsError,
    EventError,
    SatelliteError,
    SecurityError,
    FileHeaderError,
    ExtensionError,
    DataFixError,
    CommentError
)
from igc_utils import (
    is_digits,
    parse_unsigned,
    parse_signed,
    parse_time,
    parse_date,
    parse_coordinate,
    chunk,
    split_lines
)
from igc_config import ParserSelection
from igc_constants import (
    DEFAULT_ENCODING,
    COORDINATE_WIDTH,
    DATE_WIDTH,
    TIME_WIDTH,
    EXTENSION_CHUNK_WIDTH,
    SATELLITE_ID_WIDTH,
    MIN_LENGTH_FLIGHT_RECORDER_ID,
    MIN_LENGTH_FIX,
    MIN_LENGTH_TASK_INFO,
    MIN_LENGTH_DECLARATION_TIME,
    DIFFERENTIAL_GPS_LENGTH,
    MIN_LENGTH_EVENT,
    MIN_LENGTH_SATELLITE,
    MIN_LENGTH_SECURITY,
    MIN_LENGTH_FILE_HEADER,
    MIN_LENGTH_EXTENSION,
    MIN_LENGTH_DATA_FIX,
    MIN_LENGTH_COMMENT,
    GPS_ALTITUDE_VALID,
    GPS_ALTITUDE_INVALID,
    IGC_RECORD_FIX_EXTENSION,
    IGC_RECORD_DATA_FIX_EXTENSION,
    IGC_HEADER_DATE,
    IGC_HEADER_FIX_ACCURACY,
    IGC_HEADER_PILOT,
    IGC_HEADER_SECOND_PILOT,
    IGC_HEADER_GLIDER_TYPE,
    IGC_HEADER_GLIDER_ID,
    IGC_HEADER_GPS_DATUM,
    IGC_HEADER_FIRMWARE,
    IGC_HEADER_HARDWARE,
    IGC_HEADER_LOGGER_TYPE,
    IGC_HEADER_GPS,
    IGC_HEADER_PRESSURE_SENSOR,
    IGC_HEADER_COMPETITION_ID,
    IGC_HEADER_COMPETITION_CLASS,
    IGC_HEADER_LITERALS,
    HEADER_TAG_WIDTH,
    HEADER_DATE_LENGTH,
    HEADER_DATE_LONG_PREFIX,
    HEADER_FIX_ACCURACY_LENGTH,
    HEADER_GPS_DATUM_CODE_WIDTH,
    HEADER_GPS_DATUM_LITERAL
)

# Configure logger
logger = logging.getLogger(__name__)


class RecordDecoder:
    """
    Base class of the per-kind decoders.
    Subclasses set the record kind, minimum length and error class and
    implement decode(); parse() runs the length and letter checks first.
    """

    kind: RecordKind = None
    min_length: int = 1
    error: Type[IgcError] = IgcError
    description: str = "a record"

    @classmethod
    def parse(cls, line: str) -> RecordValue:
        """Decode a full line, attaching the line to any error raised"""
        try:
            cls.check_line(line)
            return cls.decode(line)
        except IgcError as e:
            if e.line is None:
                e.line = line
            raise

    @classmethod
    def check_line(cls, line: str) -> None:
        if len(line) < cls.min_length:
            raise RecordTooShortError(
                f"'{line}' is too short to be parsed as {cls.description}", cls.kind, line
            )
        if line[0] != cls.kind.letter:
            raise cls.error(
                f"'{line}' does not start with {cls.kind.letter} and can not be parsed as {cls.description}", line
            )

    @classmethod
    def decode(cls, line: str) -> RecordValue:
        raise NotImplementedError


class FlightRecorderIdParser(RecordDecoder):
    """A record: manufacturer code, recorder id and free text"""

    kind = RecordKind.FLIGHT_RECORDER_ID
    min_length = MIN_LENGTH_FLIGHT_RECORDER_ID
    error = FlightRecorderIdError
    description = "an A record (flight recorder id)"

    @classmethod
    def decode(cls, line: str) -> FlightRecorderId:
        return FlightRecorderId(
            manufacturer=line[1:4],
            id=line[4:7],
            extension=line[7:]
        )


class FixParser(RecordDecoder):
    """
    B record: time, coordinate, validity flag, pressure and GPS altitude.
    The GPS altitude is only read when the validity flag is A.
    """

    kind = RecordKind.FIX
    min_length = MIN_LENGTH_FIX
    error = FixError
    description = "a B record (fix)"

    @classmethod
    def decode(cls, line: str) -> Fix:
        timestamp = parse_time(line[1:7])
        coordinate = parse_coordinate(line[7:24])

        validity = line[24]
        if validity not in (GPS_ALTITUDE_VALID, GPS_ALTITUDE_INVALID):
            raise FixError(f"'{line}' does not have A or V in GPS validity field", validity)

        try:
            pressure_altitude = parse_signed(line[25:30])
        except ValueError:
            raise FixError(f"'{line}' could not parse pressure altitude", line[25:30]) from None

        gps_altitude = None
        if validity == GPS_ALTITUDE_VALID:
            try:
                gps_altitude = parse_signed(line[30:35])
            except ValueError:
                raise FixError(f"'{line}' could not parse GPS altitude", line[30:35]) from None

        return Fix(
            timestamp=timestamp,
            coordinate=coordinate,
            pressure_altitude=pressure_altitude,
            gps_altitude=gps_altitude,
            extension=line[35:]
        )


class TaskInfoParser(RecordDecoder):
    """
    C record: either the declaration time line or a task point.
    There is no marker between the two; the declaration line is the one
    whose columns 1 to 16 are all digits.
    """

    kind = RecordKind.TASK_INFO
    min_length = MIN_LENGTH_TASK_INFO
    error = TaskInfoError
    description = "a C record (task info)"

    @classmethod
    def decode(cls, line: str):
        if is_digits(line[1:17]):
            return cls.parse_declaration_time(line)
        return cls.parse_task_point(line)

    @staticmethod
    def parse_declaration_time(line: str) -> DeclarationTime:
        if len(line) < MIN_LENGTH_DECLARATION_TIME:
            raise RecordTooShortError(
                f"'{line}' is too short to be a declaration time record", RecordKind.TASK_INFO, line
            )
        date_end = 1 + DATE_WIDTH
        time_end = date_end + TIME_WIDTH
        return DeclarationTime(
            date=parse_date(line[1:date_end]),
            time=parse_time(line[date_end:time_end]),
            extra=line[time_end:]
        )

    @staticmethod
    def parse_task_point(line: str) -> TaskPoint:
        name_start = 1 + COORDINATE_WIDTH
        coordinate = parse_coordinate(line[1:name_start])
        return TaskPoint(coordinate=coordinate, name=line[name_start:] or None)


class DifferentialGpsParser(RecordDecoder):
    """D record: GPS/DGPS qualifier and station id, exactly 6 characters"""

    kind = RecordKind.DIFFERENTIAL_GPS
    min_length = DIFFERENTIAL_GPS_LENGTH
    error = DifferentialGpsError
    description = "a D record (differential GPS)"

    @classmethod
    def check_line(cls, line: str) -> None:
        super().check_line(line)
        if len(line) != DIFFERENTIAL_GPS_LENGTH:
            raise DifferentialGpsError(
                f"'{line}' is too long to be parsed as {cls.description}", line
            )

    @classmethod
    def decode(cls, line: str) -> DifferentialGps:
        try:
            qualifier = parse_unsigned(line[1:2])
        except ValueError:
            raise DifferentialGpsError(f"'{line}' qualifier can not be parsed as a valid number", line[1:2]) from None

        try:
            qualifier = DifferentialGpsQualifier(qualifier)
        except ValueError:
            raise DifferentialGpsError(f"'{line}' qualifier must be either 1 or 2", line[1:2]) from None

        try:
            station_id = parse_unsigned(line[2:6])
        except ValueError:
            raise DifferentialGpsError(f"'{line}' DGPS station id can not be parsed as a valid number", line[2:6]) from None

        return DifferentialGps(qualifier=qualifier, station_id=station_id)


class EventParser(RecordDecoder):
    kind = RecordKind.EVENT
    min_length = MIN_LENGTH_EVENT
    error = EventError
    description = "an E record (event)"

    @classmethod
    def decode(cls, line: str) -> Event:
        return Event(
            timestamp=parse_time(line[1:7]),
            event_type=line[7:10],
            extension=line[10:]
        )


class SatelliteParser(RecordDecoder):
    """F record: time followed by two character satellite ids"""

    kind = RecordKind.SATELLITE
    min_length = MIN_LENGTH_SATELLITE
    error = SatelliteError
    description = "an F record (satellite constellation)"

    @classmethod
    def decode(cls, line: str) -> Satellite:
        return Satellite(
            timestamp=parse_time(line[1:7]),
            satellite_ids=tuple(chunk(line[7:], SATELLITE_ID_WIDTH))
        )


class SecurityParser(RecordDecoder):
    kind = RecordKind.SECURITY
    min_length = MIN_LENGTH_SECURITY
    error = SecurityError
    description = "a G record (security)"

    @classmethod
    def decode(cls, line: str) -> Security:
        return Security(security_code=line[1:])


class FileHeaderParser(RecordDecoder):
    """
    H record: the first five characters select the sub-header.
    Free-text sub-headers must start with their full literal prefix
    (for example HFPLTPILOTINCHARGE:) and the rest of the line is the value.
    """

    kind = RecordKind.FILE_HEADER
    min_length = MIN_LENGTH_FILE_HEADER
    error = FileHeaderError
    description = "an H record (file header)"

    HEADER_KINDS: Dict[str, HeaderKind] = {
        IGC_HEADER_DATE: HeaderKind.DATE,
        IGC_HEADER_FIX_ACCURACY: HeaderKind.FIX_ACCURACY,
        IGC_HEADER_PILOT: HeaderKind.PILOT_IN_CHARGE,
        IGC_HEADER_SECOND_PILOT: HeaderKind.SECOND_PILOT,
        IGC_HEADER_GLIDER_TYPE: HeaderKind.GLIDER_TYPE,
        IGC_HEADER_GLIDER_ID: HeaderKind.GLIDER_ID,
        IGC_HEADER_GPS_DATUM: HeaderKind.GPS_DATUM,
        IGC_HEADER_FIRMWARE: HeaderKind.FIRMWARE_VERSION,
        IGC_HEADER_HARDWARE: HeaderKind.HARDWARE_VERSION,
        IGC_HEADER_LOGGER_TYPE: HeaderKind.LOGGER_TYPE,
        IGC_HEADER_GPS: HeaderKind.GPS_MANUFACTURER,
        IGC_HEADER_PRESSURE_SENSOR: HeaderKind.PRESSURE_SENSOR,
        IGC_HEADER_COMPETITION_ID: HeaderKind.COMPETITION_ID,
        IGC_HEADER_COMPETITION_CLASS: HeaderKind.COMPETITION_CLASS,
    }

    @classmethod
    def decode(cls, line: str) -> FileHeader:
        tag = line[:HEADER_TAG_WIDTH]
        header_kind = cls.HEADER_KINDS.get(tag)
        if header_kind is None:
            raise UnrecognizedTagError(f"'{line}' does not have a valid file header start", tag)

        if tag == IGC_HEADER_DATE:
            return FileHeader(header_kind, cls.parse_date_header(line))
        if tag == IGC_HEADER_FIX_ACCURACY:
            return FileHeader(header_kind, cls.parse_fix_accuracy(line))
        if tag == IGC_HEADER_GPS_DATUM:
            return FileHeader(header_kind, cls.parse_gps_datum(line))
        return FileHeader(header_kind, cls.strip_literal(line, IGC_HEADER_LITERALS[tag]))

    @staticmethod
    def strip_literal(line: str, literal: str) -> str:
        """Return the text after a required literal prefix"""
        if not line.startswith(literal):
            raise FileHeaderError(f"'{line}' does not start with '{literal}'", line)
        return line[len(literal):]

    @staticmethod
    def parse_date_header(line: str):
        # HFDTEDATE:DDMMYY[,NN] is the layout written by newer recorders
        if line.startswith(HEADER_DATE_LONG_PREFIX):
            date_end = len(HEADER_DATE_LONG_PREFIX) + DATE_WIDTH
            rest = line[date_end:]
            if rest and not rest.startswith(","):
                raise FileHeaderError(f"'{line}' has unexpected text after the date", rest)
            return parse_date(line[len(HEADER_DATE_LONG_PREFIX):date_end])

        if len(line) != HEADER_DATE_LENGTH:
            raise FileHeaderError(f"'{line}' does not have the correct length to be parsed as a file header date", line)
        return parse_date(line[HEADER_TAG_WIDTH:])

    @staticmethod
    def parse_fix_accuracy(line: str) -> int:
        if len(line) != HEADER_FIX_ACCURACY_LENGTH:
            raise FileHeaderError(f"'{line}' does not have the correct length to be parsed as a fix accuracy", line)
        try:
            return parse_unsigned(line[HEADER_TAG_WIDTH:])
        except ValueError:
            raise FileHeaderError(f"'{line}' can not be parsed as a fix accuracy number", line) from None

    @staticmethod
    def parse_gps_datum(line: str) -> str:
        # HFDTMnnnGPSDATUM: where nnn is the datum code
        code_end = HEADER_TAG_WIDTH + HEADER_GPS_DATUM_CODE_WIDTH
        literal_end = code_end + len(HEADER_GPS_DATUM_LITERAL)
        if not is_digits(line[HEADER_TAG_WIDTH:code_end]) or line[code_end:literal_end] != HEADER_GPS_DATUM_LITERAL:
            raise FileHeaderError(f"'{line}' does not start with 'HFDTMnnnGPSDATUM:'", line)
        return line[literal_end:]


class ExtensionParser(RecordDecoder):
    """
    I and J records: a two digit count followed by that many 7 character
    groups of start column, end column and a 3 letter mnemonic.
    """

    kind = None
    min_length = MIN_LENGTH_EXTENSION
    error = ExtensionError
    description = "an I/J record (extension)"

    LETTERS = (IGC_RECORD_FIX_EXTENSION, IGC_RECORD_DATA_FIX_EXTENSION)

    @classmethod
    def check_line(cls, line: str) -> None:
        kind = RecordKind(line[0]) if line[:1] in cls.LETTERS else None
        if len(line) < cls.min_length:
            raise RecordTooShortError(f"'{line}' is too short to be parsed as {cls.description}", kind, line)
        if kind is None:
            raise UnrecognizedTagError(f"'{line}' does not start with a valid prefix for an extension", line[0])

    @classmethod
    def decode(cls, line: str) -> Extension:
        kind = RecordKind(line[0])
        try:
            count = parse_unsigned(line[1:3])
        except ValueError:
            raise ExtensionError(f"'{line}' does not have a valid number of extensions field", line[1:3]) from None

        expected_length = 3 + count * EXTENSION_CHUNK_WIDTH
        if len(line) != expected_length:
            raise ExtensionError(
                f"'{line}' does not have the correct length according to number of extensions "
                f"(expected {expected_length}, got {len(line)})", line
            )

        groups = chunk(line[3:], EXTENSION_CHUNK_WIDTH)
        if not all(is_digits(group[0:2]) and is_digits(group[2:4]) for group in groups):
            raise ExtensionError(f"'{line}' has invalid start/end characters", line[3:])

        fields = tuple(
            ExtensionField(start=int(group[0:2]), end=int(group[2:4]), mnemonic=group[4:7])
            for group in groups
        )
        return Extension(kind=kind, count=count, fields=fields)


class DataFixParser(RecordDecoder):
    kind = RecordKind.DATA_FIX
    min_length = MIN_LENGTH_DATA_FIX
    error = DataFixError
    description = "a K record (data fix)"

    @classmethod
    def decode(cls, line: str) -> DataFix:
        return DataFix(timestamp=parse_time(line[1:7]), content=line[7:])


class CommentParser(RecordDecoder):
    kind = RecordKind.COMMENT
    min_length = MIN_LENGTH_COMMENT
    error = CommentError
    description = "an L record (comment)"

    @classmethod
    def decode(cls, line: str) -> Comment:
        return Comment(content=line[1:])


class RecordDispatcher:
    """
    Selects the decoder for a line from its first character and wraps the
    decoded value in a Record tagged with that kind.
    """

    DECODERS: Dict[RecordKind, Type[RecordDecoder]] = {
        RecordKind.FLIGHT_RECORDER_ID: FlightRecorderIdParser,
        RecordKind.FIX: FixParser,
        RecordKind.TASK_INFO: TaskInfoParser,
        RecordKind.DIFFERENTIAL_GPS: DifferentialGpsParser,
        RecordKind.EVENT: EventParser,
        RecordKind.SATELLITE: SatelliteParser,
        RecordKind.SECURITY: SecurityParser,
        RecordKind.FILE_HEADER: FileHeaderParser,
        RecordKind.FIX_EXTENSION_SPEC: ExtensionParser,
        RecordKind.DATA_FIX_EXTENSION_SPEC: ExtensionParser,
        RecordKind.DATA_FIX: DataFixParser,
        RecordKind.COMMENT: CommentParser,
    }

    @staticmethod
    def kind_of(line: str) -> RecordKind:
        """Record kind selected by the first character of a line"""
        if not line:
            raise RecordDispatchError(f"'{line}' could not get first character", line, line)
        try:
            return RecordKind(line[0])
        except ValueError:
            raise RecordDispatchError(f"'{line}' does not have a valid starting letter", line[0], line) from None

    @classmethod
    def decoder_for(cls, kind: RecordKind) -> Type[RecordDecoder]:
        return cls.DECODERS[kind]

    @classmethod
    def parse_line(cls, line: str) -> Record:
        kind = cls.kind_of(line)
        return Record(kind, cls.decoder_for(kind).parse(line))


class IgcParser:
    """
    Main parser class for IGC files. Applies the dispatcher to every line
    and keeps the outcomes of the selected record kinds.
    """

    def __init__(self, selection: Optional[ParserSelection] = None):
        """Initialize with the record kinds to collect (all by default)"""
        self.selection = selection if selection is not None else ParserSelection.all()
        self.dispatcher = RecordDispatcher()

    def parse(self, content: str) -> ParsedIgcFile:
        """
        Parse the full content of an IGC file.
        Raises IgcFileError if any line has no valid start letter.
        """
        outcomes: Dict[RecordKind, List[Outcome]] = {
            kind: [] for kind in self.selection.ordered_kinds()
        }
        decoded = 0
        failed = 0

        for number, line in enumerate(split_lines(content), start=1):
            try:
                kind = self.dispatcher.kind_of(line)
            except RecordDispatchError as e:
                logger.error(f"Line {number}: {e}")
                raise IgcFileError(f"line {number}: {e}", line, line) from e

            # Not selected, dispatch only
            if kind not in outcomes:
                continue

            try:
                value = self.dispatcher.decoder_for(kind).parse(line)
            except IgcError as e:
                failed += 1
                logger.debug(f"Line {number} ({kind.letter}) failed: {e}")
                outcomes[kind].append(Outcome(line, error=e))
                continue

            decoded += 1
            outcomes[kind].append(Outcome(line, value=value))

        logger.info(f"Decoded {decoded} lines, {failed} failed")
        return ParsedIgcFile(outcomes)

    def parse_file(self, path, encoding: str = DEFAULT_ENCODING) -> ParsedIgcFile:
        """Read a whole IGC file into memory and parse it"""
        with open(path, 'r', encoding=encoding, newline='') as track_file:
            content = track_file.read()
        return self.parse(content)


# Public functions

def parse_record(line: str) -> Record:
    """Decode a single line into a tagged Record"""
    return RecordDispatcher.parse_line(line)


def parseIgcFile(content: str, selection: Optional[ParserSelection] = None) -> ParsedIgcFile:
    """
    Parse the content of an IGC file.
    Main entry point for IGC parsing.
    """
    parser = IgcParser(selection)
    return parser.parse(content)
