#!/usr/bin/env python3
"""
Data models and enums for the IGC record decoder

All values are immutable. Primitive values validate their ranges on
construction, so an instance that exists is always a valid one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from igc_errors import (
    IgcError,
    TimeRangeError,
    DateRangeError,
    LatitudeError,
    LongitudeError,
    KindNotCollectedError
)
from igc_constants import (
    IGC_RECORD_FLIGHT_RECORDER_ID,
    IGC_RECORD_FIX,
    IGC_RECORD_TASK_INFO,
    IGC_RECORD_DIFFERENTIAL_GPS,
    IGC_RECORD_EVENT,
    IGC_RECORD_SATELLITE,
    IGC_RECORD_SECURITY,
    IGC_RECORD_FILE_HEADER,
    IGC_RECORD_FIX_EXTENSION,
    IGC_RECORD_DATA_FIX_EXTENSION,
    IGC_RECORD_DATA_FIX,
    IGC_RECORD_COMMENT,
    MAX_HOUR,
    MAX_MINUTE,
    MAX_SECOND,
    HOURS_PER_DAY,
    SECONDS_PER_MINUTE,
    SECONDS_PER_HOUR,
    SECONDS_PER_DAY,
    MIN_DAY,
    MAX_DAY,
    MIN_MONTH,
    MAX_MONTH,
    MAX_YEAR,
    MAX_LATITUDE_DEGREES,
    MAX_LONGITUDE_DEGREES,
    MINUTES_PER_DEGREE,
    HEMISPHERE_NORTH,
    HEMISPHERE_SOUTH,
    HEMISPHERE_EAST,
    HEMISPHERE_WEST,
    DIFFERENTIAL_GPS_QUALIFIER_GPS,
    DIFFERENTIAL_GPS_QUALIFIER_DGPS,
    TIME_FORMAT_HMS,
    DATE_FORMAT_DMY
)


class RecordKind(Enum):
    """The twelve IGC record kinds, valued by their leading letter"""
    FLIGHT_RECORDER_ID = IGC_RECORD_FLIGHT_RECORDER_ID
    FIX = IGC_RECORD_FIX
    TASK_INFO = IGC_RECORD_TASK_INFO
    DIFFERENTIAL_GPS = IGC_RECORD_DIFFERENTIAL_GPS
    EVENT = IGC_RECORD_EVENT
    SATELLITE = IGC_RECORD_SATELLITE
    SECURITY = IGC_RECORD_SECURITY
    FILE_HEADER = IGC_RECORD_FILE_HEADER
    FIX_EXTENSION_SPEC = IGC_RECORD_FIX_EXTENSION
    DATA_FIX_EXTENSION_SPEC = IGC_RECORD_DATA_FIX_EXTENSION
    DATA_FIX = IGC_RECORD_DATA_FIX
    COMMENT = IGC_RECORD_COMMENT

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, kind: Union["RecordKind", str]) -> "RecordKind":
        """Accept either a RecordKind or its letter"""
        if isinstance(kind, cls):
            return kind
        return cls(kind)


class DifferentialGpsQualifier(Enum):
    GPS = DIFFERENTIAL_GPS_QUALIFIER_GPS
    DGPS = DIFFERENTIAL_GPS_QUALIFIER_DGPS


class HeaderKind(Enum):
    """H record sub-header variants"""
    DATE = "date"
    FIX_ACCURACY = "fix_accuracy"
    PILOT_IN_CHARGE = "pilot_in_charge"
    SECOND_PILOT = "second_pilot"
    GLIDER_TYPE = "glider_type"
    GLIDER_ID = "glider_id"
    GPS_DATUM = "gps_datum"
    FIRMWARE_VERSION = "firmware_version"
    HARDWARE_VERSION = "hardware_version"
    LOGGER_TYPE = "logger_type"
    GPS_MANUFACTURER = "gps_manufacturer"
    PRESSURE_SENSOR = "pressure_sensor"
    COMPETITION_ID = "competition_id"
    COMPETITION_CLASS = "competition_class"


# Primitive values

@dataclass(frozen=True)
class Time:
    """UTC time of day with second resolution"""
    hour: int
    minute: int
    second: int

    def __post_init__(self):
        if not 0 <= self.hour <= MAX_HOUR:
            raise TimeRangeError(f"{self.hour} hours are too many, there must be less than 24 hours")
        if not 0 <= self.minute <= MAX_MINUTE:
            raise TimeRangeError(f"{self.minute} minutes are too many, there must be less than 60 minutes")
        if not 0 <= self.second <= MAX_SECOND:
            raise TimeRangeError(f"{self.second} seconds are too many, there must be less than 60 seconds")

    @classmethod
    def from_seconds_since_midnight(cls, seconds: int) -> "Time":
        if not 0 <= seconds < SECONDS_PER_DAY:
            raise TimeRangeError(f"{seconds} seconds do not fit in 24 hours")
        return cls(
            seconds // SECONDS_PER_HOUR,
            (seconds % SECONDS_PER_HOUR) // SECONDS_PER_MINUTE,
            seconds % SECONDS_PER_MINUTE
        )

    def seconds_since_midnight(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def add_hours(self, hours: int) -> "Time":
        """Shift by whole hours, wrapping around midnight"""
        return Time((self.hour + hours) % HOURS_PER_DAY, self.minute, self.second)

    def __str__(self) -> str:
        return TIME_FORMAT_HMS % (self.hour, self.minute, self.second)


@dataclass(frozen=True)
class Date:
    """Calendar date with a two-digit year"""
    day: int
    month: int
    year: int

    def __post_init__(self):
        if not (MIN_DAY <= self.day <= MAX_DAY and MIN_MONTH <= self.month <= MAX_MONTH
                and 0 <= self.year <= MAX_YEAR):
            raise DateRangeError(f"{self.day}/{self.month}-{self.year} is not a valid date")

    def __str__(self) -> str:
        return DATE_FORMAT_DMY % (self.day, self.month, self.year)


@dataclass(frozen=True)
class Latitude:
    degrees: int
    minutes: float
    hemisphere: str

    def __post_init__(self):
        if self.hemisphere not in (HEMISPHERE_NORTH, HEMISPHERE_SOUTH):
            raise LatitudeError(f"'{self.hemisphere}' is not a valid latitude compass direction")
        if not 0 <= self.degrees <= MAX_LATITUDE_DEGREES:
            raise LatitudeError(f"{self.degrees} is out of range for latitude degrees")

    @property
    def is_north(self) -> bool:
        return self.hemisphere == HEMISPHERE_NORTH

    @property
    def decimal_degrees(self) -> float:
        """Signed decimal degrees, south negative"""
        value = self.degrees + self.minutes / MINUTES_PER_DEGREE
        return value if self.is_north else -value


@dataclass(frozen=True)
class Longitude:
    degrees: int
    minutes: float
    hemisphere: str

    def __post_init__(self):
        if self.hemisphere not in (HEMISPHERE_EAST, HEMISPHERE_WEST):
            raise LongitudeError(f"'{self.hemisphere}' is not a valid longitude compass direction")
        if not 0 <= self.degrees <= MAX_LONGITUDE_DEGREES:
            raise LongitudeError(f"{self.degrees} is out of range for longitude degrees")

    @property
    def is_east(self) -> bool:
        return self.hemisphere == HEMISPHERE_EAST

    @property
    def decimal_degrees(self) -> float:
        """Signed decimal degrees, west negative"""
        value = self.degrees + self.minutes / MINUTES_PER_DEGREE
        return value if self.is_east else -value


@dataclass(frozen=True)
class Coordinate:
    latitude: Latitude
    longitude: Longitude


# Record payloads

@dataclass(frozen=True)
class FlightRecorderId:
    """A record: manufacturer and unique recorder id"""
    manufacturer: str
    id: str
    extension: str


@dataclass(frozen=True)
class Fix:
    """B record: a single position sample"""
    timestamp: Time
    coordinate: Coordinate
    pressure_altitude: int
    gps_altitude: Optional[int]
    extension: str


@dataclass(frozen=True)
class DeclarationTime:
    """First C record of a task declaration"""
    date: Date
    time: Time
    extra: str


@dataclass(frozen=True)
class TaskPoint:
    coordinate: Coordinate
    name: Optional[str] = None


TaskInfo = Union[DeclarationTime, TaskPoint]


@dataclass(frozen=True)
class DifferentialGps:
    qualifier: DifferentialGpsQualifier
    station_id: int


@dataclass(frozen=True)
class Event:
    timestamp: Time
    event_type: str
    extension: str

    @property
    def is_pilot_event(self) -> bool:
        return self.event_type == "PEV"


@dataclass(frozen=True)
class Satellite:
    timestamp: Time
    satellite_ids: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Security:
    security_code: str


@dataclass(frozen=True)
class FileHeader:
    """H record: one sub-header variant and its value"""
    kind: HeaderKind
    value: Union[Date, int, str]


@dataclass(frozen=True)
class ExtensionField:
    start: int
    end: int
    mnemonic: str


@dataclass(frozen=True)
class Extension:
    """I or J record: declaration of extra fields appended to B or K records"""
    kind: RecordKind
    count: int
    fields: Tuple[ExtensionField, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DataFix:
    timestamp: Time
    content: str


@dataclass(frozen=True)
class Comment:
    content: str


RecordValue = Union[
    FlightRecorderId, Fix, DeclarationTime, TaskPoint, DifferentialGps, Event,
    Satellite, Security, FileHeader, Extension, DataFix, Comment
]


@dataclass(frozen=True)
class Record:
    """A decoded line, tagged by the record kind of its leading letter"""
    kind: RecordKind
    value: RecordValue


@dataclass(frozen=True)
class Outcome:
    """Result of decoding one line: the record value or the error it raised"""
    line: str
    value: Optional[RecordValue] = None
    error: Optional[IgcError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> RecordValue:
        """Return the decoded value, raising the stored error if decoding failed"""
        if self.error is not None:
            raise self.error
        return self.value


class ParsedIgcFile:
    """
    Per-kind ordered outcomes of a whole-file pass.
    Only the kinds selected before parsing are present; asking for any other
    kind raises KindNotCollectedError.
    """

    def __init__(self, outcomes: Dict[RecordKind, List[Outcome]]):
        self._outcomes: Dict[RecordKind, Tuple[Outcome, ...]] = {
            kind: tuple(entries) for kind, entries in outcomes.items()
        }

    def __getitem__(self, kind: Union[RecordKind, str]) -> Tuple[Outcome, ...]:
        """Outcomes of one kind; unknown letters and unselected kinds raise KindNotCollectedError"""
        try:
            kind = RecordKind.coerce(kind)
        except ValueError:
            raise KindNotCollectedError(kind) from None
        if kind not in self._outcomes:
            raise KindNotCollectedError(kind)
        return self._outcomes[kind]

    def __contains__(self, kind) -> bool:
        try:
            return RecordKind.coerce(kind) in self._outcomes
        except ValueError:
            return False

    def __iter__(self) -> Iterator[RecordKind]:
        return (kind for kind in RecordKind if kind in self._outcomes)

    @property
    def collected_kinds(self) -> FrozenSet[RecordKind]:
        return frozenset(self._outcomes)

    def records(self, kind: Union[RecordKind, str]) -> List[RecordValue]:
        """Successfully decoded values of one kind, in line order"""
        return [outcome.value for outcome in self[kind] if outcome.ok]

    def errors(self, kind: Union[RecordKind, str]) -> List[IgcError]:
        """Errors of one kind, in line order"""
        return [outcome.error for outcome in self[kind] if not outcome.ok]

    def header(self, header_kind: HeaderKind) -> Optional[Union[Date, int, str]]:
        """Value of the first decoded H record of the given variant"""
        for header in self.records(RecordKind.FILE_HEADER):
            if header.kind == header_kind:
                return header.value
        return None

    @property
    def flight_recorder_ids(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.FLIGHT_RECORDER_ID]

    @property
    def fixes(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.FIX]

    @property
    def task_info(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.TASK_INFO]

    @property
    def differential_gps(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.DIFFERENTIAL_GPS]

    @property
    def events(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.EVENT]

    @property
    def satellites(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.SATELLITE]

    @property
    def security(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.SECURITY]

    @property
    def file_headers(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.FILE_HEADER]

    @property
    def fix_extensions(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.FIX_EXTENSION_SPEC]

    @property
    def data_fix_extensions(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.DATA_FIX_EXTENSION_SPEC]

    @property
    def data_fixes(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.DATA_FIX]

    @property
    def comments(self) -> Tuple[Outcome, ...]:
        return self[RecordKind.COMMENT]
