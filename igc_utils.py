#!/usr/bin/env python3
"""
Field decoders for the IGC record decoder

Fixed-width primitive values shared by several record kinds (time, date,
latitude, longitude, coordinate) plus the small text helpers the record
decoders are built from.
"""

import re
from typing import List

from igc_model import Time, Date, Latitude, Longitude, Coordinate
from igc_errors import (
    TimeRangeError,
    DateRangeError,
    CoordinateError,
    LatitudeError,
    LongitudeError
)
from igc_constants import (
    TIME_WIDTH,
    DATE_WIDTH,
    LATITUDE_WIDTH,
    LONGITUDE_WIDTH,
    COORDINATE_WIDTH,
    MINUTES_SCALE
)

_UNSIGNED = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")


def is_digits(text: str) -> bool:
    """True if text is a non-empty run of ASCII digits"""
    return _UNSIGNED.fullmatch(text) is not None


def parse_unsigned(text: str) -> int:
    """Parse an ASCII unsigned decimal, raising ValueError otherwise"""
    if not is_digits(text):
        raise ValueError(f"'{text}' is not an unsigned number")
    return int(text)


def parse_signed(text: str) -> int:
    """Parse an ASCII decimal with an optional sign, raising ValueError otherwise"""
    if _SIGNED.fullmatch(text) is None:
        raise ValueError(f"'{text}' is not a signed number")
    return int(text)


def chunk(text: str, width: int) -> List[str]:
    """Split text into consecutive pieces of width characters; the last may be shorter"""
    return [text[i:i + width] for i in range(0, len(text), width)]


def split_lines(content: str) -> List[str]:
    """
    Split file content into lines.
    Both LF and CRLF endings are removed and a final newline does not
    produce a trailing empty line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_time(text: str) -> Time:
    """Decode HHMMSS"""
    if len(text) != TIME_WIDTH:
        raise TimeRangeError(f"'{text}' is not {TIME_WIDTH} characters long", text)
    try:
        hour = parse_unsigned(text[0:2])
        minute = parse_unsigned(text[2:4])
        second = parse_unsigned(text[4:6])
    except ValueError:
        raise TimeRangeError(f"unable to parse '{text}' as numbers", text) from None

    try:
        return Time(hour, minute, second)
    except TimeRangeError as e:
        e.text = text
        raise


def parse_date(text: str) -> Date:
    """Decode DDMMYY"""
    if len(text) != DATE_WIDTH:
        raise DateRangeError(f"'{text}' is not the correct length for a date", text)
    try:
        day = parse_unsigned(text[0:2])
        month = parse_unsigned(text[2:4])
        year = parse_unsigned(text[4:6])
    except ValueError:
        raise DateRangeError(f"'{text}' can not be parsed as a number", text) from None

    try:
        return Date(day, month, year)
    except DateRangeError as e:
        e.text = text
        raise


def parse_latitude(text: str) -> Latitude:
    """Decode DDMMmmmN"""
    if len(text) != LATITUDE_WIDTH:
        raise LatitudeError(f"'{text}' is not the correct length for a latitude", text)
    try:
        degrees = parse_unsigned(text[0:2])
        minutes = parse_unsigned(text[2:7]) / MINUTES_SCALE
    except ValueError:
        raise LatitudeError(f"unable to parse '{text}'", text) from None

    try:
        return Latitude(degrees, minutes, text[7])
    except LatitudeError as e:
        e.text = text
        raise


def parse_longitude(text: str) -> Longitude:
    """Decode DDDMMmmmE"""
    if len(text) != LONGITUDE_WIDTH:
        raise LongitudeError(f"'{text}' is not the correct length for a longitude", text)
    try:
        degrees = parse_unsigned(text[0:3])
        minutes = parse_unsigned(text[3:8]) / MINUTES_SCALE
    except ValueError:
        raise LongitudeError(f"unable to parse '{text}'", text) from None

    try:
        return Longitude(degrees, minutes, text[8])
    except LongitudeError as e:
        e.text = text
        raise


def parse_coordinate(text: str) -> Coordinate:
    """Decode a 17 character latitude + longitude pair"""
    if len(text) != COORDINATE_WIDTH:
        raise CoordinateError(f"'{text}' is not the correct length for a coordinate", text)
    latitude = parse_latitude(text[:LATITUDE_WIDTH])
    longitude = parse_longitude(text[LATITUDE_WIDTH:])
    return Coordinate(latitude, longitude)
