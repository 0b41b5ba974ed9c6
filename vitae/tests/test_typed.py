"""
Tests for the typed readings of free-text resume fields.
"""

import pytest

from vitae.typed import (
    CustomScore,
    Fluency,
    Gpa,
    KnownLanguage,
    LetterGrade,
    OtherLanguage,
    PassFail,
    Percentage,
    ProjectType,
    SemVer,
    SkillLevel,
    parse_language,
    parse_project_type,
    parse_score,
)


@pytest.mark.parametrize(
    'label, expected',
    [
        ('Expert', SkillLevel.EXPERT),
        ('  beginner ', SkillLevel.BEGINNER),
        ('MASTER', SkillLevel.MASTER),
        ('guru', None),
        (None, None),
    ],
)
def test_skill_level(label, expected):
    assert SkillLevel.from_label(label) is expected


@pytest.mark.parametrize(
    'label, expected',
    [
        ('Native', Fluency.NATIVE_OR_BILINGUAL),
        ('native or bilingual', Fluency.NATIVE_OR_BILINGUAL),
        ('Full-Professional', Fluency.FULL_PROFESSIONAL),
        ('Professional', Fluency.PROFESSIONAL_WORKING),
        ('Conversational', Fluency.LIMITED_WORKING),
        ('elementary', Fluency.ELEMENTARY),
        ('Unknown', None),
    ],
)
def test_fluency(label, expected):
    assert Fluency.from_label(label) is expected


def test_ordinals_compare():
    assert SkillLevel.BEGINNER < SkillLevel.EXPERT
    assert Fluency.NATIVE_OR_BILINGUAL > Fluency.FULL_PROFESSIONAL
    assert Fluency.LIMITED_WORKING.label == 'Limited Working'


def test_parse_language():
    assert parse_language(' French ') is KnownLanguage.FRENCH
    assert parse_language('Quenya') == OtherLanguage('Quenya')
    assert str(parse_language('Quenya')) == 'Quenya'
    assert parse_language('  ') is None


@pytest.mark.parametrize(
    'text, expected',
    [
        ('3.67/4.0', Gpa(3.67, 4.0)),
        ('GPA: 3.9', Gpa(3.9)),
        ('92.5%', Percentage(92.5)),
        ('Pass', PassFail(True)),
        ('failed', PassFail(False)),
        ('A-', LetterGrade('A-')),
        ('Summa cum laude', CustomScore('Summa cum laude')),
        ('', None),
    ],
)
def test_parse_score(text, expected):
    assert parse_score(text) == expected


def test_score_str():
    assert str(Gpa(3.67, 4.0)) == '3.67/4'
    assert str(Percentage(85.0)) == '85%'
    assert str(PassFail(False)) == 'Fail'


def test_semver():
    v = SemVer.parse('1.2.3-beta.1+build.5')
    assert v == SemVer(1, 2, 3, 'beta.1', 'build.5')
    assert str(v) == '1.2.3-beta.1+build.5'
    assert SemVer.parse('v1.0.0') < SemVer.parse('v1.10.0')
    assert SemVer.parse('01.0.0') is None


def test_project_type():
    assert parse_project_type(' Research ') is ProjectType.RESEARCH
    assert parse_project_type('Hackathon') == 'Hackathon'
    assert parse_project_type(None) is None
