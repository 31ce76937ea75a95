"""
Tests for igc_model.py data models
"""
import dataclasses

import pytest
from igc_model import (
    RecordKind,
    Time,
    Date,
    Latitude,
    Longitude,
    Outcome,
    ParsedIgcFile,
    Comment,
    FileHeader,
    HeaderKind
)
from igc_errors import (
    TimeRangeError,
    DateRangeError,
    LatitudeError,
    LongitudeError,
    CommentError,
    KindNotCollectedError
)


class TestRecordKind:
    """Tests for RecordKind enum"""

    def test_letters(self):
        assert ''.join(kind.letter for kind in RecordKind) == 'ABCDEFGHIJKL'

    def test_coerce(self):
        assert RecordKind.coerce('B') is RecordKind.FIX
        assert RecordKind.coerce(RecordKind.COMMENT) is RecordKind.COMMENT
        with pytest.raises(ValueError):
            RecordKind.coerce('Z')


class TestTime:
    """Tests for Time"""

    def test_valid(self):
        time = Time(16, 2, 40)
        assert str(time) == '16:02:40'

    @pytest.mark.parametrize('hms', [(24, 0, 0), (0, 60, 0), (0, 0, 60), (-1, 0, 0)])
    def test_out_of_range(self, hms):
        with pytest.raises(TimeRangeError):
            Time(*hms)

    def test_seconds_since_midnight(self):
        assert Time(0, 0, 0).seconds_since_midnight() == 0
        assert Time(16, 2, 40).seconds_since_midnight() == 57760
        assert Time(23, 59, 59).seconds_since_midnight() == 86399

    def test_from_seconds_since_midnight(self):
        assert Time.from_seconds_since_midnight(57760) == Time(16, 2, 40)
        with pytest.raises(TimeRangeError):
            Time.from_seconds_since_midnight(86400)
        with pytest.raises(TimeRangeError):
            Time.from_seconds_since_midnight(-1)

    def test_round_trip_every_minute(self):
        for seconds in range(0, 86400, 61):
            assert Time.from_seconds_since_midnight(seconds).seconds_since_midnight() == seconds

    def test_add_hours(self):
        assert Time(10, 15, 0).add_hours(3) == Time(13, 15, 0)

    def test_add_hours_wraps_past_midnight(self):
        assert Time(22, 30, 5).add_hours(3) == Time(1, 30, 5)
        assert Time(1, 0, 0).add_hours(-2) == Time(23, 0, 0)

    def test_add_hours_returns_new_value(self):
        time = Time(10, 0, 0)
        time.add_hours(1)
        assert time == Time(10, 0, 0)

    def test_immutable(self):
        time = Time(10, 0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            time.hour = 11


class TestDate:
    """Tests for Date"""

    def test_valid(self):
        assert str(Date(16, 7, 1)) == '16/07/01'

    @pytest.mark.parametrize('dmy', [(0, 1, 1), (32, 1, 1), (1, 0, 1), (1, 13, 1), (1, 1, 100)])
    def test_out_of_range(self, dmy):
        with pytest.raises(DateRangeError):
            Date(*dmy)

    def test_no_month_length_check(self):
        assert Date(31, 2, 23).day == 31


class TestLatitudeLongitude:
    """Tests for Latitude and Longitude"""

    def test_latitude_decimal_degrees(self):
        latitude = Latitude(54, 7.121, 'N')
        assert abs(latitude.decimal_degrees - (54 + 7.121 / 60)) < 1e-9

    def test_latitude_bounds(self):
        assert Latitude(90, 0.0, 'S').degrees == 90
        with pytest.raises(LatitudeError):
            Latitude(91, 0.0, 'N')

    def test_longitude_bounds(self):
        assert Longitude(180, 0.0, 'E').degrees == 180
        with pytest.raises(LongitudeError):
            Longitude(181, 0.0, 'W')

    def test_longitude_west_is_negative(self):
        assert Longitude(2, 49.342, 'W').decimal_degrees < 0


class TestOutcome:
    """Tests for Outcome"""

    def test_success(self):
        outcome = Outcome('Lhello', value=Comment('hello'))
        assert outcome.ok
        assert outcome.unwrap() == Comment('hello')

    def test_failure(self):
        error = CommentError('bad comment', line='L')
        outcome = Outcome('L', error=error)
        assert not outcome.ok
        with pytest.raises(CommentError):
            outcome.unwrap()


class TestParsedIgcFile:
    """Tests for ParsedIgcFile lookup by kind"""

    def make_parsed(self):
        return ParsedIgcFile({
            RecordKind.COMMENT: [Outcome('Lone', value=Comment('one'))],
            RecordKind.FILE_HEADER: [
                Outcome('HFDTE160701', value=FileHeader(HeaderKind.DATE, Date(16, 7, 1))),
                Outcome('HFXXX', error=CommentError('bad')),
            ],
        })

    def test_collected_kind(self):
        parsed = self.make_parsed()
        assert len(parsed[RecordKind.COMMENT]) == 1
        assert parsed['L'] == parsed.comments

    def test_missing_kind_raises(self):
        parsed = self.make_parsed()
        with pytest.raises(KindNotCollectedError):
            parsed[RecordKind.FIX]
        with pytest.raises(KindNotCollectedError):
            parsed.fixes

    def test_missing_kind_is_lookup_error(self):
        parsed = self.make_parsed()
        with pytest.raises(LookupError):
            parsed.records(RecordKind.EVENT)

    def test_unknown_letter_raises_kind_not_collected(self):
        parsed = self.make_parsed()
        with pytest.raises(KindNotCollectedError) as exc_info:
            parsed['Z']
        assert exc_info.value.kind == 'Z'
        with pytest.raises(LookupError):
            parsed.errors('Z')

    def test_contains(self):
        parsed = self.make_parsed()
        assert RecordKind.COMMENT in parsed
        assert 'H' in parsed
        assert RecordKind.FIX not in parsed
        assert 'Z' not in parsed

    def test_iteration_in_letter_order(self):
        parsed = self.make_parsed()
        assert list(parsed) == [RecordKind.FILE_HEADER, RecordKind.COMMENT]
        assert parsed.collected_kinds == frozenset({RecordKind.FILE_HEADER, RecordKind.COMMENT})

    def test_records_and_errors(self):
        parsed = self.make_parsed()
        assert parsed.records(RecordKind.FILE_HEADER) == [FileHeader(HeaderKind.DATE, Date(16, 7, 1))]
        assert len(parsed.errors(RecordKind.FILE_HEADER)) == 1

    def test_header(self):
        parsed = self.make_parsed()
        assert parsed.header(HeaderKind.DATE) == Date(16, 7, 1)
        assert parsed.header(HeaderKind.PILOT_IN_CHARGE) is None

    def test_empty_selected_kind_is_empty_tuple(self):
        parsed = ParsedIgcFile({RecordKind.EVENT: []})
        assert parsed.events == ()
