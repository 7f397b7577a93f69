"""
Tests for LicenseRecord predicates and serialization.

Run with: pytest tests/test_record.py -v
"""

import json
from datetime import date, datetime

import pytest

from aamva_decoder.core.definitions import Gender, Weight, WeightRange
from aamva_decoder.core.version import DocumentHeader
from aamva_decoder.models.record import LicenseRecord, age_on


class TestAgeOn:
    """Tests for age_on."""

    @pytest.mark.parametrize("today,expected", [
        (date(2008, 7, 3), 17),
        (date(2008, 7, 4), 18),
        (date(2008, 7, 5), 18),
        (date(1990, 7, 4), 0),
    ])
    def test_whole_years(self, today, expected):
        assert age_on(date(1990, 7, 4), today) == expected

    def test_leap_day_birthday(self):
        assert age_on(date(2000, 2, 29), date(2018, 2, 28)) == 17
        assert age_on(date(2000, 2, 29), date(2018, 3, 1)) == 18


class TestIsMinor:
    """Tests for LicenseRecord.is_minor."""

    @pytest.fixture
    def record(self):
        return LicenseRecord(birth_date=date(1990, 7, 4))

    def test_day_before_birthday(self, record):
        assert record.is_minor(now=date(2008, 7, 3)) is True

    def test_on_birthday(self, record):
        assert record.is_minor(now=date(2008, 7, 4)) is False

    def test_custom_age(self, record):
        assert record.is_minor(now=date(2010, 1, 1), age=21) is True
        assert record.is_minor(now=date(2011, 7, 4), age=21) is False

    def test_accepts_datetime(self, record):
        assert record.is_minor(now=datetime(2008, 7, 3, 23, 59)) is True

    def test_no_birth_date(self):
        assert LicenseRecord().is_minor() is False


class TestExpiryAndIssue:
    """Tests for is_expired and is_issued."""

    @pytest.fixture
    def record(self):
        return LicenseRecord(issue_date=date(2020, 6, 15), expiration_date=date(2030, 1, 1))

    def test_not_expired_on_expiration_date(self, record):
        assert record.is_expired(now=date(2030, 1, 1)) is False

    def test_expired_after_expiration_date(self, record):
        assert record.is_expired(now=date(2030, 1, 2)) is True

    def test_issued_on_issue_date(self, record):
        assert record.is_issued(now=date(2020, 6, 15)) is True

    def test_not_issued_before_issue_date(self, record):
        assert record.is_issued(now=date(2020, 6, 14)) is False

    def test_missing_dates(self):
        record = LicenseRecord()
        assert record.is_expired() is False
        assert record.is_issued() is False


class TestSerialization:
    """Tests for LicenseRecord.to_dict."""

    def test_to_dict(self):
        record = LicenseRecord(
            first_name='JOHN',
            middle_names=['Q'],
            birth_date=date(1990, 7, 4),
            gender=Gender.MALE,
            weight=Weight(range=WeightRange.RANGE_4),
            header=DocumentHeader('ANSI', '636000', 9, 0, 1),
            unresolved_codes={'eye_color': 'ZZZ'},
        )
        result = record.to_dict()

        assert result['first_name'] == 'JOHN'
        assert result['middle_names'] == ['Q']
        assert result['birth_date'] == '1990-07-04'
        assert result['gender'] == 'MALE'
        assert result['weight'] == {'pounds': None, 'range': 'RANGE_4'}
        assert result['header']['issuer_id'] == '636000'
        assert result['unresolved_codes'] == {'eye_color': 'ZZZ'}
        assert result['last_name'] is None

    def test_to_dict_is_json_serializable(self):
        record = LicenseRecord(birth_date=date(1990, 7, 4), weight=Weight(pounds=180.0))
        assert json.loads(json.dumps(record.to_dict()))['weight']['pounds'] == 180.0

    def test_has_license_number(self):
        assert LicenseRecord(license_number='T1').has_license_number
        assert not LicenseRecord().has_license_number
