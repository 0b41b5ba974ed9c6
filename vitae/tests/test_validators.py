"""
Tests for the canonical field validators.
"""

import pytest
from pydantic import ValidationError

from vitae.base import InvalidCountryCode, InvalidDateFormat, InvalidEmailFormat
from vitae.models import Basics, Location, WorkItem
from vitae.validators import (
    is_valid_country_code,
    is_valid_date,
    is_valid_email,
    validate_country_code,
    validate_date,
    validate_email,
)


@pytest.mark.parametrize(
    'value', ['2023', '2023-01', '2023-12-31', '1999-06', '1000', '2999-19-39']
)
def test_date_accepts_the_three_granularities(value):
    assert validate_date(value) == value


@pytest.mark.parametrize(
    'value',
    ['invalid-date', '23', '3023', '0999', '2023-1', '2023-20', '2023-01-40',
     '2023/01/01', '2023-01-01T00:00', ' 2023', '2023\n', ''],
)
def test_date_rejects_other_shapes(value):
    with pytest.raises(InvalidDateFormat):
        validate_date(value)


def test_date_is_syntactic_not_calendar_aware():
    # month 19, day 39 fit the character classes
    assert is_valid_date('2023-19-39')


def test_none_always_passes():
    assert validate_date(None) is None
    assert validate_email(None) is None
    assert validate_country_code(None) is None


def test_email():
    assert validate_email('john@example.com') == 'john@example.com'
    assert is_valid_email('a.b+c@mail.example.co.uk')
    for bad in ['invalid-email', 'john@example', 'jo hn@example.com', 'a@b@c.com', '@x.com']:
        assert not is_valid_email(bad), bad
    with pytest.raises(InvalidEmailFormat):
        validate_email('invalid-email')


def test_country_code():
    assert validate_country_code('US') == 'US'
    assert is_valid_country_code('ZZ')  # not checked against the ISO list
    for bad in ['USA', 'us', 'U', 'U1', 'ÜS', '']:
        assert not is_valid_country_code(bad), bad
    with pytest.raises(InvalidCountryCode):
        validate_country_code('USA')


def test_rejections_are_value_errors_with_the_value():
    with pytest.raises(ValueError) as excinfo:
        validate_date('yesterday')
    assert excinfo.value.value == 'yesterday'
    assert 'InvalidDateFormat' in str(excinfo.value)


def test_models_report_the_field_path_and_the_typed_error():
    with pytest.raises(ValidationError) as excinfo:
        Basics.model_validate({'location': {'countryCode': 'USA'}})
    error = excinfo.value.errors()[0]
    assert error['loc'] == ('location', 'countryCode')
    assert isinstance(error['ctx']['error'], InvalidCountryCode)


def test_models_validate_dates_and_emails():
    with pytest.raises(ValidationError):
        WorkItem(startDate='invalid-date')
    with pytest.raises(ValidationError):
        Basics(email='invalid-email')
    assert WorkItem(startDate='2023-01', endDate='2023-12-31').endDate == '2023-12-31'
    assert Location(countryCode='US').countryCode == 'US'
