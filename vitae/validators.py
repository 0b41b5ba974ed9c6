"""
Field-level validators for the canonical resume schema.

Each validator takes a candidate string (or None) and returns the accepted
value, or raises a typed rejection (a ``ValueError`` subclass, so pydantic
reports it with the field path). ``None`` always passes: validation only
constrains values that are present.

The annotated types at the bottom (``Iso8601``, ``Email``, ``CountryCode``)
attach these validators to model fields.
"""

import re
from typing import Annotated, Optional

from pydantic import AfterValidator, WithJsonSchema

from vitae.base import InvalidCountryCode, InvalidDateFormat, InvalidEmailFormat

# Fixed-width character classes, not a calendar check: 2023-19-39 matches.
DATE_PATTERN = (
    r'^([1-2][0-9]{3}-[0-1][0-9]-[0-3][0-9]|[1-2][0-9]{3}-[0-1][0-9]|[1-2][0-9]{3})$'
)
# Permissive on purpose, this is not RFC 5322.
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'
COUNTRY_CODE_PATTERN = r'^[A-Z]{2}$'

_date_re = re.compile(DATE_PATTERN)
_email_re = re.compile(EMAIL_PATTERN)


def validate_date(value: Optional[str]) -> Optional[str]:
    """Accept ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``, returned exactly as given.

    >>> validate_date('2014-06')
    '2014-06'
    >>> validate_date(None) is None
    True
    """
    if value is None:
        return None
    if not isinstance(value, str) or not _date_re.fullmatch(value):
        raise InvalidDateFormat(value)
    return value


def validate_email(value: Optional[str]) -> Optional[str]:
    """Accept ``local@domain.tld`` shaped strings with no whitespace.

    >>> validate_email('john@example.com')
    'john@example.com'
    """
    if value is None:
        return None
    if not isinstance(value, str) or not _email_re.fullmatch(value):
        raise InvalidEmailFormat(value)
    return value


def validate_country_code(value: Optional[str]) -> Optional[str]:
    """Accept exactly two uppercase ASCII letters (ISO-3166-1 alpha-2 shaped).

    The code is not checked against the real ISO list.

    >>> validate_country_code('US')
    'US'
    """
    if value is None:
        return None
    if not (
        isinstance(value, str)
        and len(value) == 2
        and all('A' <= c <= 'Z' for c in value)
    ):
        raise InvalidCountryCode(value)
    return value


def _accepts(validator, value) -> bool:
    try:
        validator(value)
    except ValueError:
        return False
    return True


def is_valid_date(value) -> bool:
    return _accepts(validate_date, value)


def is_valid_email(value) -> bool:
    return _accepts(validate_email, value)


def is_valid_country_code(value) -> bool:
    return _accepts(validate_country_code, value)


# --------------------------------------------------------------------------------------
# Annotated field types

Iso8601 = Annotated[
    str,
    AfterValidator(validate_date),
    WithJsonSchema(
        {'type': 'string', 'pattern': DATE_PATTERN, 'description': 'e.g. 2014-06-29'}
    ),
]

Email = Annotated[
    str,
    AfterValidator(validate_email),
    WithJsonSchema(
        {'type': 'string', 'pattern': EMAIL_PATTERN, 'description': 'e.g. thomas@gmail.com'}
    ),
]

CountryCode = Annotated[
    str,
    AfterValidator(validate_country_code),
    WithJsonSchema(
        {
            'type': 'string',
            'pattern': COUNTRY_CODE_PATTERN,
            'description': 'code as per ISO-3166-1 ALPHA-2, e.g. US, AU, IN',
        }
    ),
]
