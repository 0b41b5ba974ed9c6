"""
Typed interpretations of free-text canonical fields.

The canonical document stores skill levels, fluencies, languages, scores,
versions and project types as plain strings. This module reads them into
closed types when they are recognizable:

- SkillLevel, Fluency: ordinal enumerations (comparable)
- KnownLanguage / OtherLanguage: a closed set of languages with an escape
- Gpa, Percentage, PassFail, LetterGrade, CustomScore: the score union
- SemVer: major.minor.patch with optional prerelease and build
- ProjectType: common project categories
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union


def _label_key(label: str) -> str:
    return re.sub(r'[\s_\-/]+', '', label).lower()


class _OrdinalLabels(IntEnum):
    @classmethod
    def from_label(cls, label: Optional[str]):
        """Case and separator insensitive lookup, None when unrecognized."""
        if not label:
            return None
        return cls._by_key().get(_label_key(label))

    @classmethod
    def _by_key(cls) -> dict:
        keys = {_label_key(m.name): m for m in cls}
        keys.update({_label_key(alias): cls[name] for alias, name in cls._aliases()})
        return keys

    @classmethod
    def _aliases(cls):
        return ()

    @property
    def label(self) -> str:
        return self.name.replace('_', ' ').title()


class SkillLevel(_OrdinalLabels):
    BEGINNER = 1
    INTERMEDIATE = 2
    ADVANCED = 3
    EXPERT = 4
    MASTER = 5


class Fluency(_OrdinalLabels):
    ELEMENTARY = 1
    LIMITED_WORKING = 2
    PROFESSIONAL_WORKING = 3
    FULL_PROFESSIONAL = 4
    NATIVE_OR_BILINGUAL = 5

    @classmethod
    def _aliases(cls):
        return (
            ('native', 'NATIVE_OR_BILINGUAL'),
            ('bilingual', 'NATIVE_OR_BILINGUAL'),
            ('fluent', 'FULL_PROFESSIONAL'),
            ('professional', 'PROFESSIONAL_WORKING'),
            ('conversational', 'LIMITED_WORKING'),
            ('limited', 'LIMITED_WORKING'),
            ('basic', 'ELEMENTARY'),
            ('beginner', 'ELEMENTARY'),
        )


class KnownLanguage(str, Enum):
    ARABIC = 'Arabic'
    BENGALI = 'Bengali'
    CHINESE = 'Chinese'
    DUTCH = 'Dutch'
    ENGLISH = 'English'
    FRENCH = 'French'
    GERMAN = 'German'
    GREEK = 'Greek'
    HEBREW = 'Hebrew'
    HINDI = 'Hindi'
    ITALIAN = 'Italian'
    JAPANESE = 'Japanese'
    KOREAN = 'Korean'
    POLISH = 'Polish'
    PORTUGUESE = 'Portuguese'
    RUSSIAN = 'Russian'
    SPANISH = 'Spanish'
    SWEDISH = 'Swedish'
    TURKISH = 'Turkish'
    UKRAINIAN = 'Ukrainian'
    VIETNAMESE = 'Vietnamese'


@dataclass(frozen=True)
class OtherLanguage:
    name: str

    def __str__(self):
        return self.name


LanguageId = Union[KnownLanguage, OtherLanguage]


def parse_language(name: Optional[str]) -> Optional[LanguageId]:
    """
    >>> parse_language('english')
    <KnownLanguage.ENGLISH: 'English'>
    >>> parse_language('Klingon')
    OtherLanguage(name='Klingon')
    """
    if not name or not name.strip():
        return None
    name = name.strip()
    for lang in KnownLanguage:
        if lang.value.lower() == name.lower():
            return lang
    return OtherLanguage(name)


# --------------------------------------------------------------------------------------
# Scores


@dataclass(frozen=True)
class Gpa:
    value: float
    scale: Optional[float] = None

    def __str__(self):
        return f'{self.value:g}/{self.scale:g}' if self.scale else f'{self.value:g}'


@dataclass(frozen=True)
class Percentage:
    value: float

    def __str__(self):
        return f'{self.value:g}%'


@dataclass(frozen=True)
class PassFail:
    passed: bool

    def __str__(self):
        return 'Pass' if self.passed else 'Fail'


@dataclass(frozen=True)
class LetterGrade:
    grade: str

    def __str__(self):
        return self.grade


@dataclass(frozen=True)
class CustomScore:
    text: str

    def __str__(self):
        return self.text


Score = Union[Gpa, Percentage, PassFail, LetterGrade, CustomScore]

_gpa_re = re.compile(r'^(?:gpa\s*:?\s*)?(\d+(?:\.\d+)?)\s*(?:/\s*(\d+(?:\.\d+)?))?$', re.I)
_percent_re = re.compile(r'^(\d+(?:\.\d+)?)\s*%$')
_letter_re = re.compile(r'^[A-F][+-]?$')


def parse_score(text: Optional[str]) -> Optional[Score]:
    """Interpret a free-text score.

    >>> parse_score('3.67/4.0')
    Gpa(value=3.67, scale=4.0)
    >>> parse_score('85%')
    Percentage(value=85.0)
    >>> parse_score('B+')
    LetterGrade(grade='B+')
    >>> parse_score('First class honours')
    CustomScore(text='First class honours')
    """
    if text is None or not text.strip():
        return None
    s = text.strip()
    if m := _percent_re.match(s):
        return Percentage(float(m.group(1)))
    if m := _gpa_re.match(s):
        scale = float(m.group(2)) if m.group(2) else None
        return Gpa(float(m.group(1)), scale)
    if s.lower() in ('pass', 'passed'):
        return PassFail(True)
    if s.lower() in ('fail', 'failed'):
        return PassFail(False)
    if _letter_re.match(s):
        return LetterGrade(s)
    return CustomScore(s)


# --------------------------------------------------------------------------------------
# Versions

_semver_re = re.compile(
    r'^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)'
    r'(?:-([0-9A-Za-z.-]+))?(?:\+([0-9A-Za-z.-]+))?$'
)


@dataclass(frozen=True, order=True)
class SemVer:
    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    @classmethod
    def parse(cls, version: Optional[str]) -> Optional['SemVer']:
        """
        >>> SemVer.parse('v1.0.0')
        SemVer(major=1, minor=0, patch=0, prerelease=None, build=None)
        >>> SemVer.parse('1.0') is None
        True
        """
        if not version:
            return None
        m = _semver_re.match(version.strip())
        if not m:
            return None
        major, minor, patch, prerelease, build = m.groups()
        return cls(int(major), int(minor), int(patch), prerelease, build)

    def __str__(self):
        s = f'{self.major}.{self.minor}.{self.patch}'
        if self.prerelease:
            s += f'-{self.prerelease}'
        if self.build:
            s += f'+{self.build}'
        return s


class ProjectType(str, Enum):
    VOLUNTEERING = 'volunteering'
    PRESENTATION = 'presentation'
    TALK = 'talk'
    APPLICATION = 'application'
    CONFERENCE = 'conference'
    PUBLICATION = 'publication'
    RESEARCH = 'research'


def parse_project_type(value: Optional[str]) -> Union[ProjectType, str, None]:
    """Known categories become ProjectType, anything else stays free text."""
    if not value:
        return None
    try:
        return ProjectType(value.strip().lower())
    except ValueError:
        return value
