#!/usr/bin/env python3
"""
Constants for the IGC record decoder
"""

# Record letters
IGC_RECORD_FLIGHT_RECORDER_ID = "A"
IGC_RECORD_FIX = "B"
IGC_RECORD_TASK_INFO = "C"
IGC_RECORD_DIFFERENTIAL_GPS = "D"
IGC_RECORD_EVENT = "E"
IGC_RECORD_SATELLITE = "F"
IGC_RECORD_SECURITY = "G"
IGC_RECORD_FILE_HEADER = "H"
IGC_RECORD_FIX_EXTENSION = "I"
IGC_RECORD_DATA_FIX_EXTENSION = "J"
IGC_RECORD_DATA_FIX = "K"
IGC_RECORD_COMMENT = "L"

# Field widths
TIME_WIDTH = 6
DATE_WIDTH = 6
LATITUDE_WIDTH = 8
LONGITUDE_WIDTH = 9
COORDINATE_WIDTH = LATITUDE_WIDTH + LONGITUDE_WIDTH
EXTENSION_CHUNK_WIDTH = 7
SATELLITE_ID_WIDTH = 2

# Primitive bounds
MAX_HOUR = 23
MAX_MINUTE = 59
MAX_SECOND = 59
HOURS_PER_DAY = 24
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
MIN_DAY = 1
MAX_DAY = 31
MIN_MONTH = 1
MAX_MONTH = 12
MAX_YEAR = 99
MAX_LATITUDE_DEGREES = 90
MAX_LONGITUDE_DEGREES = 180
MINUTES_SCALE = 1000
MINUTES_PER_DEGREE = 60.0

# Hemispheres
HEMISPHERE_NORTH = "N"
HEMISPHERE_SOUTH = "S"
HEMISPHERE_EAST = "E"
HEMISPHERE_WEST = "W"

# Minimum line lengths per record kind
MIN_LENGTH_FLIGHT_RECORDER_ID = 7
MIN_LENGTH_FIX = 35
MIN_LENGTH_TASK_INFO = 18
MIN_LENGTH_DECLARATION_TIME = 23
DIFFERENTIAL_GPS_LENGTH = 6
MIN_LENGTH_EVENT = 10
MIN_LENGTH_SATELLITE = 7
MIN_LENGTH_SECURITY = 2
MIN_LENGTH_FILE_HEADER = 5
MIN_LENGTH_EXTENSION = 3
MIN_LENGTH_DATA_FIX = 7
MIN_LENGTH_COMMENT = 1

# B record validity flag
GPS_ALTITUDE_VALID = "A"
GPS_ALTITUDE_INVALID = "V"

# D record qualifiers
DIFFERENTIAL_GPS_QUALIFIER_GPS = 1
DIFFERENTIAL_GPS_QUALIFIER_DGPS = 2

# H record tags
IGC_HEADER_DATE = "HFDTE"
IGC_HEADER_FIX_ACCURACY = "HFFXA"
IGC_HEADER_PILOT = "HFPLT"
IGC_HEADER_SECOND_PILOT = "HFCM2"
IGC_HEADER_GLIDER_TYPE = "HFGTY"
IGC_HEADER_GLIDER_ID = "HFGID"
IGC_HEADER_GPS_DATUM = "HFDTM"
IGC_HEADER_FIRMWARE = "HFRFW"
IGC_HEADER_HARDWARE = "HFRHW"
IGC_HEADER_LOGGER_TYPE = "HFFTY"
IGC_HEADER_GPS = "HFGPS"
IGC_HEADER_PRESSURE_SENSOR = "HFPRS"
IGC_HEADER_COMPETITION_ID = "HFCID"
IGC_HEADER_COMPETITION_CLASS = "HFCCL"

HEADER_TAG_WIDTH = 5
HEADER_DATE_LENGTH = 11
HEADER_DATE_LONG_PREFIX = "HFDTEDATE:"
HEADER_FIX_ACCURACY_LENGTH = 8
HEADER_GPS_DATUM_CODE_WIDTH = 3
HEADER_GPS_DATUM_LITERAL = "GPSDATUM:"

# Literal prefixes of the free-text H records
IGC_HEADER_LITERALS = {
    IGC_HEADER_PILOT: "HFPLTPILOTINCHARGE:",
    IGC_HEADER_SECOND_PILOT: "HFCM2CREW2:",
    IGC_HEADER_GLIDER_TYPE: "HFGTYGLIDERTYPE:",
    IGC_HEADER_GLIDER_ID: "HFGIDGLIDERID:",
    IGC_HEADER_FIRMWARE: "HFRFWFIRMWAREVERSION:",
    IGC_HEADER_HARDWARE: "HFRHWHARDWAREVERSION:",
    IGC_HEADER_LOGGER_TYPE: "HFFTYFRTYPE:",
    IGC_HEADER_GPS: "HFGPS",
    IGC_HEADER_PRESSURE_SENSOR: "HFPRSPRESSALTSENSOR:",
    IGC_HEADER_COMPETITION_ID: "HFCIDCOMPETITIONID:",
    IGC_HEADER_COMPETITION_CLASS: "HFCCLCOMPETITIONCLASS:",
}

# Default configuration values
DEFAULT_OUT_PATH = "."
DEFAULT_KINDS = "ALL"
DEFAULT_OUTPUT = "summary"
DEFAULT_JSON_INDENT = 2
DEFAULT_NA_TEXT = "N/A"
DEFAULT_UNKNOWN_TEXT = "UNKNOWN"
DEFAULT_ENCODING = "utf-8"

OUTPUT_SUMMARY = "summary"
OUTPUT_JSON = "json"
OUTPUT_FORMATS = (OUTPUT_SUMMARY, OUTPUT_JSON)
JSON_SUFFIX = ".json"

# Configuration
CONFIG_SECTION_DEFAULTS = "Defaults"
CONFIG_FILE_NAMES = ("igcparse.conf", "igcparse.ini")
CONFIG_KINDS_ALL = "ALL"

# Date and time formats
TIME_FORMAT_HMS = "%02d:%02d:%02d"
DATE_FORMAT_DMY = "%02d/%02d/%02d"
