"""
Normalize LinkedIn profile documents into canonical resumes.

The source documents are the nested dicts returned by the profile API
(``get_profile`` and ``get_profile_contact_info``). Their shape is described
by the ``LinkedIn*`` models below, which are lenient: a malformed leaf (a
non-numeric year, a string where an object is expected...) degrades to None
and is recorded in the audit, and so does a malformed entry of an entry list
(``experience``, ``education``...). Only a document whose overall shape is
wrong (not a mapping, an entry list that is not a list) is rejected, with a
``SourceShapeError`` naming the offending path.

Source keys the shape models do not know are copied into the unknown fields
of the canonical entity (``keep_unmapped``), except those whose name is a
canonical field of that entity: those are left out and audited. Source
metadata with no canonical slot is kept in the unknown fields too, under
these keys:

- work: ``companySize`` (e.g. ``"51-200"``), ``industries``, ``companyLogo``
- education: ``schoolLogo``, ``activities``, ``description`` (the source
  description followed by one line per honor and per test score)
- volunteer: ``cause``
- certificates: ``licenseNumber``
- basics: ``industry``

Dates of time periods (work, volunteer, education, certificates, projects)
are ``YYYY`` or ``YYYY-MM``; a day in the source is dropped. Single dates
(award, publication) keep the day when there is one.

Country codes come from the ``COUNTRY_CODES`` name table only. With the
``country_code_fallback`` setting, an unlisted country name falls back to
the code in the source's basic location block.

All source-specific names stay in this module.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, NamedTuple, Optional, TypeVar

from pydantic import (
    AfterValidator,
    AliasChoices,
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    WrapValidator,
)

from vitae.audit import NormalizationAudit
from vitae.base import (
    InvalidCountryCode,
    InvalidDateFormat,
    InvalidEmailFormat,
    SourceShapeError,
    UnmappableSourceField,
    UnparseableURI,
)
from vitae.config import ConfigStore, ensure_config
from vitae.models import (
    Award,
    Basics,
    CanonicalModel,
    Certificate,
    EducationItem,
    Interest,
    Language,
    Location,
    Meta,
    Profile,
    Project,
    Publication,
    Resume,
    Skill,
    VolunteerItem,
    WorkItem,
)
from vitae.segment import split_description
from vitae.validators import validate_country_code, validate_date, validate_email

logger = logging.getLogger(__name__)

T = TypeVar('T')


def _degrade_to_none(value, handler, info):
    try:
        return handler(value)
    except ValidationError as e:
        audit = (info.context or {}).get('audit')
        detail = e.errors()[0]['msg']
        if audit is not None:
            audit.record(info.field_name or '?', UnmappableSourceField.kind, value, detail)
        else:
            logger.debug('Dropped source field %s=%r: %s', info.field_name, value, detail)
        return None


def _none_as_empty(value):
    return [] if value is None else value


class _Malformed(NamedTuple):
    value: Any
    detail: str


def _mark_malformed(value, handler):
    try:
        return handler(value)
    except ValidationError as e:
        return _Malformed(value, e.errors()[0]['msg'])


def _drop_malformed(entries, info):
    """Replace malformed entries by None, keeping the indices of the others."""
    audit = (info.context or {}).get('audit')
    out = []
    for i, entry in enumerate(entries):
        if isinstance(entry, _Malformed):
            path = f'{info.field_name}.{i}'
            if audit is not None:
                audit.record(path, UnmappableSourceField.kind, entry.value, entry.detail)
            else:
                logger.debug('Dropped source entry %s=%r: %s', path, entry.value, entry.detail)
            entry = None
        out.append(entry)
    return out


# A leaf that degrades to None when malformed
Lenient = Annotated[Optional[T], WrapValidator(_degrade_to_none)]
# A list of source entries (None counts as empty). A malformed entry becomes
# None in place; only a value that is not a list at all is a shape error.
EntryList = Annotated[
    list[Annotated[T, WrapValidator(_mark_malformed)]],
    BeforeValidator(_none_as_empty),
    AfterValidator(_drop_malformed),
]


# --------------------------------------------------------------------------------------
# Source shapes


class _Source(BaseModel):
    model_config = ConfigDict(extra='allow', populate_by_name=True)


class LinkedInDate(_Source):
    year: Lenient[int] = None
    month: Lenient[int] = None
    day: Lenient[int] = None


class LinkedInTimePeriod(_Source):
    startDate: Lenient[LinkedInDate] = None
    endDate: Lenient[LinkedInDate] = None


class LinkedInArtifact(_Source):
    fileIdentifyingUrlPathSegment: Lenient[str] = None
    width: Lenient[int] = None
    height: Lenient[int] = None


class LinkedInVectorImage(_Source):
    rootUrl: Lenient[str] = None
    artifacts: Lenient[list[LinkedInArtifact]] = None


class LinkedInPicture(_Source):
    vectorImage: Lenient[LinkedInVectorImage] = Field(
        None,
        validation_alias=AliasChoices('vectorImage', 'com.linkedin.common.VectorImage'),
    )


class LinkedInBasicLocation(_Source):
    countryCode: Lenient[str] = None
    postalCode: Lenient[str] = None


class LinkedInLocation(_Source):
    basicLocation: Lenient[LinkedInBasicLocation] = None


class LinkedInCountRange(_Source):
    start: Lenient[int] = None
    end: Lenient[int] = None


class LinkedInCompany(_Source):
    employeeCountRange: Lenient[LinkedInCountRange] = None
    industries: Lenient[list[str]] = None


class LinkedInExperience(_Source):
    companyName: Lenient[str] = None
    title: Lenient[str] = None
    description: Lenient[str] = None
    locationName: Lenient[str] = None
    timePeriod: Lenient[LinkedInTimePeriod] = None
    company: Lenient[LinkedInCompany] = None
    companyLogoUrl: Lenient[str] = None


class LinkedInTestScore(_Source):
    name: Lenient[str] = None
    score: Lenient[str] = None
    date: Lenient[LinkedInDate] = None


class LinkedInCourse(_Source):
    name: Lenient[str] = None
    number: Lenient[str] = None


class LinkedInSchool(_Source):
    logoUrl: Lenient[str] = None


class LinkedInEducation(_Source):
    schoolName: Lenient[str] = None
    degreeName: Lenient[str] = None
    fieldOfStudy: Lenient[str] = None
    grade: Lenient[str] = None
    description: Lenient[str] = None
    activities: Lenient[str] = None
    timePeriod: Lenient[LinkedInTimePeriod] = None
    school: Lenient[LinkedInSchool] = None
    honors: Lenient[list[str]] = None
    testScores: Lenient[list[LinkedInTestScore]] = None
    courses: Lenient[list[LinkedInCourse]] = None


class LinkedInSkill(_Source):
    name: Lenient[str] = None


class LinkedInProficiency(str, Enum):
    ELEMENTARY = 'ELEMENTARY'
    LIMITED_WORKING = 'LIMITED_WORKING'
    PROFESSIONAL_WORKING = 'PROFESSIONAL_WORKING'
    FULL_PROFESSIONAL = 'FULL_PROFESSIONAL'
    NATIVE_OR_BILINGUAL = 'NATIVE_OR_BILINGUAL'


class LinkedInLanguage(_Source):
    name: Lenient[str] = None
    proficiency: Lenient[LinkedInProficiency] = None


class LinkedInCertification(_Source):
    name: Lenient[str] = None
    authority: Lenient[str] = None
    url: Lenient[str] = None
    licenseNumber: Lenient[str] = None
    timePeriod: Lenient[LinkedInTimePeriod] = None


class LinkedInHonor(_Source):
    title: Lenient[str] = None
    issuer: Lenient[str] = None
    issueDate: Lenient[LinkedInDate] = None
    description: Lenient[str] = None


class LinkedInPublication(_Source):
    name: Lenient[str] = None
    publisher: Lenient[str] = None
    date: Lenient[LinkedInDate] = None
    url: Lenient[str] = None
    description: Lenient[str] = None


class LinkedInProject(_Source):
    title: Lenient[str] = None
    description: Lenient[str] = None
    url: Lenient[str] = None
    timePeriod: Lenient[LinkedInTimePeriod] = None


class LinkedInVolunteerExperience(_Source):
    companyName: Lenient[str] = None
    role: Lenient[str] = None
    cause: Lenient[str] = None
    description: Lenient[str] = None
    timePeriod: Lenient[LinkedInTimePeriod] = None


class LinkedInVolunteerCause(_Source):
    causeName: Lenient[str] = None
    causeType: Lenient[str] = None


class LinkedInProfile(_Source):
    firstName: Lenient[str] = None
    lastName: Lenient[str] = None
    headline: Lenient[str] = None
    summary: Lenient[str] = None
    publicIdentifier: Lenient[str] = None
    industryName: Lenient[str] = None
    address: Lenient[str] = None
    geoLocationName: Lenient[str] = None
    geoCountryName: Lenient[str] = None
    locationName: Lenient[str] = None
    location: Lenient[LinkedInLocation] = None
    profilePictureOriginalImage: Lenient[LinkedInPicture] = None
    experience: EntryList[LinkedInExperience] = []
    education: EntryList[LinkedInEducation] = []
    skills: EntryList[LinkedInSkill] = []
    languages: EntryList[LinkedInLanguage] = []
    certifications: EntryList[LinkedInCertification] = []
    honors: EntryList[LinkedInHonor] = []
    publications: EntryList[LinkedInPublication] = []
    projects: EntryList[LinkedInProject] = []
    volunteer: EntryList[LinkedInVolunteerExperience] = []
    volunteerCauses: EntryList[LinkedInVolunteerCause] = []
    interests: Lenient[list[str]] = None


def _named(value):
    """Accept a bare string where the API sometimes sends ``{'name': ...}``."""
    if isinstance(value, Mapping):
        return value.get('name') or value.get('number')
    return value


def _coerce_website(value):
    if isinstance(value, str):
        return {'url': value}
    return value


class LinkedInWebsite(_Source):
    url: Lenient[str] = None
    label: Lenient[str] = None


class LinkedInContactInfo(_Source):
    email_address: Lenient[str] = None
    websites: EntryList[Annotated[LinkedInWebsite, BeforeValidator(_coerce_website)]] = []
    twitter: Lenient[list[Annotated[str, BeforeValidator(_named)]]] = None
    phone_numbers: Lenient[list[Annotated[str, BeforeValidator(_named)]]] = None
    birthdate: Lenient[Any] = None


def _raise_shape_error(e: ValidationError):
    err = e.errors()[0]
    path = '.'.join(str(p) for p in err['loc']) or '<root>'
    raise SourceShapeError(path, err['msg']) from e


def _parse(model: type[_Source], doc, audit: Optional[NormalizationAudit]):
    if isinstance(doc, model):
        return doc
    if not isinstance(doc, Mapping):
        raise SourceShapeError(
            '<root>', f'expected a mapping, got {type(doc).__name__}'
        )
    try:
        return model.model_validate(doc, context={'audit': audit})
    except ValidationError as e:
        _raise_shape_error(e)


def parse_profile(doc, *, audit: Optional[NormalizationAudit] = None) -> LinkedInProfile:
    """Read a profile document, raising SourceShapeError if it is malformed."""
    return _parse(LinkedInProfile, doc, audit)


def parse_contact_info(
    doc, *, audit: Optional[NormalizationAudit] = None
) -> LinkedInContactInfo:
    """Read a contact-info document, raising SourceShapeError if it is malformed."""
    return _parse(LinkedInContactInfo, doc, audit)


# --------------------------------------------------------------------------------------
# Lookup tables

# Hand-maintained, read-only. Unlisted countries get no code.
COUNTRY_CODES = MappingProxyType(
    {
        'argentina': 'AR',
        'australia': 'AU',
        'austria': 'AT',
        'belgium': 'BE',
        'brazil': 'BR',
        'canada': 'CA',
        'chile': 'CL',
        'china': 'CN',
        'denmark': 'DK',
        'finland': 'FI',
        'france': 'FR',
        'germany': 'DE',
        'india': 'IN',
        'ireland': 'IE',
        'israel': 'IL',
        'italy': 'IT',
        'japan': 'JP',
        'mexico': 'MX',
        'netherlands': 'NL',
        'new zealand': 'NZ',
        'norway': 'NO',
        'poland': 'PL',
        'portugal': 'PT',
        'singapore': 'SG',
        'south africa': 'ZA',
        'south korea': 'KR',
        'spain': 'ES',
        'sweden': 'SE',
        'switzerland': 'CH',
        'ukraine': 'UA',
        'united kingdom': 'GB',
        'united states': 'US',
    }
)

# Lossy: full professional and professional working both become "Professional".
FLUENCY_LABELS = MappingProxyType(
    {
        LinkedInProficiency.NATIVE_OR_BILINGUAL: 'Native',
        LinkedInProficiency.FULL_PROFESSIONAL: 'Professional',
        LinkedInProficiency.PROFESSIONAL_WORKING: 'Professional',
        LinkedInProficiency.LIMITED_WORKING: 'Conversational',
        LinkedInProficiency.ELEMENTARY: 'Elementary',
        None: 'Unknown',
    }
)


def country_code_for(country_name: Optional[str]) -> Optional[str]:
    """
    >>> country_code_for('United States')
    'US'
    >>> country_code_for('Atlantis') is None
    True
    """
    if not country_name:
        return None
    return COUNTRY_CODES.get(country_name.strip().lower())


def full_name(first: Optional[str], last: Optional[str]) -> Optional[str]:
    """
    >>> full_name('Ada', 'Lovelace')
    'Ada Lovelace'
    >>> full_name('Ada', None)
    'Ada'
    """
    if first and last:
        return f'{first} {last}'
    return first or last or None


def format_date(date: Optional[LinkedInDate], *, with_day: bool = True) -> Optional[str]:
    """Format a source date as ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``.

    With ``with_day=False`` the output stops at the month.
    Not validated here: see ``LinkedInNormalizer._date``.
    """
    if date is None or date.year is None:
        return None
    s = f'{date.year:04d}'
    if date.month is not None:
        s += f'-{date.month:02d}'
        if with_day and date.day is not None:
            s += f'-{date.day:02d}'
    return s


def _nonempty(items: list) -> Optional[list]:
    return items or None


def _join(path: str, key) -> str:
    return f'{path}.{key}' if path else str(key)


def _modeled_names(model: type[CanonicalModel]) -> set:
    names = set()
    for name, field in model.model_fields.items():
        names.add(name)
        if field.alias:
            names.add(field.alias)
    return names


_url_adapter = TypeAdapter(AnyUrl)


# --------------------------------------------------------------------------------------
# Normalizer


class LinkedInNormalizer:
    """Turns LinkedIn profile documents into canonical ``Resume`` values.

    One instance can serve many conversions; each call gets its own audit
    unless one is passed in.

    >>> resume = LinkedInNormalizer().to_resume({'firstName': 'Ada'})
    >>> resume.basics.name
    'Ada'
    """

    def __init__(self, config: Mapping | None = None):
        self.config: ConfigStore = ensure_config(config)

    def __call__(self, profile, contact_info=None, **kwargs) -> Resume:
        return self.to_resume(profile, contact_info, **kwargs)

    def to_resume(
        self,
        profile,
        contact_info=None,
        *,
        now: Optional[datetime] = None,
        audit: Optional[NormalizationAudit] = None,
    ) -> Resume:
        """Normalize a profile (and optionally its contact info) into a Resume.

        Raises SourceShapeError if a document does not have the expected
        shape. Anything else that cannot be mapped is left out and recorded
        in ``audit``.
        """
        audit = NormalizationAudit() if audit is None else audit
        src = parse_profile(profile, audit=audit)

        basics = self.basics(src, audit)
        if contact_info is not None:
            contact = parse_contact_info(contact_info, audit=audit)
            basics = merge_contact_info(basics, self.contact_basics(contact, audit))

        def each(group, convert):
            return _nonempty(
                [
                    item
                    for i, entry in enumerate(getattr(src, group))
                    if entry is not None
                    and (item := convert(entry, f'{group}.{i}', audit)) is not None
                ]
            )

        resume = Resume(
            field_schema=self.config['schema_url'],
            basics=basics,
            work=each('experience', self.work_item),
            volunteer=each('volunteer', self.volunteer_item),
            education=each('education', self.education_item),
            awards=each('honors', self.award),
            certificates=each('certifications', self.certificate),
            publications=each('publications', self.publication),
            skills=each('skills', self.skill),
            languages=each('languages', self.language),
            interests=self.interests(src, audit),
            projects=each('projects', self.project),
            meta=self.meta(now),
        )
        logger.info(
            'Normalized profile %r: %d work, %d education, %d skills, %d fields skipped',
            basics.name,
            len(resume.work or ()),
            len(resume.education or ()),
            len(resume.skills or ()),
            len(audit),
        )
        return resume

    # ----------------------------------------------------------------------------------
    # Best-effort field helpers

    def _date(self, date, path, audit, *, with_day=True) -> Optional[str]:
        value = format_date(date, with_day=with_day)
        try:
            return validate_date(value)
        except InvalidDateFormat as e:
            audit.record(path, e.kind, value)
            return None

    def _dates(self, period, path, audit) -> dict:
        if period is None:
            return {}
        return {
            'startDate': self._date(
                period.startDate, f'{path}.startDate', audit, with_day=False
            ),
            'endDate': self._date(
                period.endDate, f'{path}.endDate', audit, with_day=False
            ),
        }

    def _uri(self, value, path, audit) -> Optional[str]:
        if not value:
            return None
        try:
            _url_adapter.validate_python(value)
        except ValidationError as e:
            audit.record(path, UnparseableURI.kind, value, e.errors()[0]['msg'])
            return None
        return value

    def _segment(self, description) -> tuple:
        if not self.config['segment_descriptions']:
            return description, None
        return split_description(description)

    def _unmapped(self, entry: _Source, model: type[CanonicalModel], path, audit) -> dict:
        """Source keys the shape models do not know about, as extras of ``model``.

        All are audited. Keys naming a field of ``model`` are never copied.
        """
        modeled = _modeled_names(model)
        keep = self.config['keep_unmapped']
        extras = {}
        for key, value in (entry.model_extra or {}).items():
            if key in modeled:
                detail = f'collides with {model.__name__}.{key}'
            else:
                detail = None
                if keep:
                    extras[key] = value
            audit.record(_join(path, key), UnmappableSourceField.kind, value, detail)
        return extras

    def _build(self, model: type[CanonicalModel], path, audit, extras: dict, **fields):
        """Make ``model`` from its fields plus the extras that are not field names."""
        modeled = _modeled_names(model)
        for key in [k for k in extras if k in modeled]:
            audit.record(
                _join(path, key),
                UnmappableSourceField.kind,
                extras.pop(key),
                f'collides with {model.__name__}.{key}',
            )
        return model(**fields, **extras)

    # ----------------------------------------------------------------------------------
    # Entities

    def image(self, src: LinkedInProfile, audit) -> Optional[str]:
        picture = src.profilePictureOriginalImage
        vector = picture.vectorImage if picture else None
        if vector is None or not vector.rootUrl or not vector.artifacts:
            return None
        segment = vector.artifacts[0].fileIdentifyingUrlPathSegment or ''
        return self._uri(vector.rootUrl + segment, 'profilePictureOriginalImage', audit)

    def location(self, src: LinkedInProfile, audit) -> Optional[Location]:
        if not (src.geoCountryName or src.geoLocationName or src.address):
            return None
        basic = src.location.basicLocation if src.location else None
        country_code = country_code_for(src.geoCountryName)
        if country_code is None and src.geoCountryName:
            audit.record(
                'geoCountryName',
                UnmappableSourceField.kind,
                src.geoCountryName,
                'no country code in the lookup table',
            )
        if (
            country_code is None
            and self.config['country_code_fallback']
            and basic
            and basic.countryCode
        ):
            try:
                country_code = validate_country_code(basic.countryCode.upper())
            except InvalidCountryCode as e:
                audit.record('location.basicLocation.countryCode', e.kind, basic.countryCode)
        return Location(
            address=src.address,
            postalCode=basic.postalCode if basic else None,
            city=src.geoLocationName or src.locationName,
            countryCode=country_code,
        )

    def basics(self, src: LinkedInProfile, audit) -> Basics:
        profiles = None
        if src.publicIdentifier:
            url = self._uri(
                self.config['profile_base_url'] + src.publicIdentifier,
                'publicIdentifier',
                audit,
            )
            profiles = [
                Profile(network='LinkedIn', username=src.publicIdentifier, url=url)
            ]
        extras = self._unmapped(src, Basics, '', audit)
        if src.industryName:
            extras['industry'] = src.industryName
        return self._build(
            Basics,
            '',
            audit,
            extras,
            name=full_name(src.firstName, src.lastName),
            label=src.headline,
            image=self.image(src, audit),
            summary=src.summary,
            location=self.location(src, audit),
            profiles=profiles,
        )

    def contact_basics(self, contact: LinkedInContactInfo, audit) -> Basics:
        """The Basics fields that only the contact-info view can supply."""
        email = None
        try:
            email = validate_email(contact.email_address)
        except InvalidEmailFormat as e:
            audit.record('email_address', e.kind, contact.email_address)

        profiles = []
        for i, website in enumerate(contact.websites):
            if website is None:
                continue
            url = self._uri(website.url, f'websites.{i}.url', audit)
            if url is not None:
                profiles.append(Profile(network=website.label or 'Website', url=url))
        for handle in contact.twitter or ():
            profiles.append(
                Profile(
                    network='Twitter',
                    username=handle,
                    url=self._uri(f'https://twitter.com/{handle}', 'twitter', audit),
                )
            )

        extras = self._unmapped(contact, Basics, 'contact', audit)
        if contact.birthdate is not None:
            extras['birthdate'] = contact.birthdate
        return self._build(
            Basics,
            'contact',
            audit,
            extras,
            email=email,
            phone=contact.phone_numbers[0] if contact.phone_numbers else None,
            profiles=_nonempty(profiles),
        )

    def work_item(self, exp: LinkedInExperience, path, audit) -> WorkItem:
        summary, highlights = self._segment(exp.description)
        extras = self._unmapped(exp, WorkItem, path, audit)
        if exp.company is not None:
            size = exp.company.employeeCountRange
            if size is not None and size.start is not None:
                extras['companySize'] = (
                    f'{size.start}-{size.end}' if size.end else f'{size.start}+'
                )
            if exp.company.industries:
                extras['industries'] = list(exp.company.industries)
        logo = self._uri(exp.companyLogoUrl, f'{path}.companyLogoUrl', audit)
        if logo:
            extras['companyLogo'] = logo
        return self._build(
            WorkItem,
            path,
            audit,
            extras,
            name=exp.companyName,
            location=exp.locationName,
            description=exp.description,
            position=exp.title,
            summary=summary,
            highlights=highlights,
            **self._dates(exp.timePeriod, f'{path}.timePeriod', audit),
        )

    def volunteer_item(
        self, vol: LinkedInVolunteerExperience, path, audit
    ) -> VolunteerItem:
        summary, highlights = self._segment(vol.description)
        extras = self._unmapped(vol, VolunteerItem, path, audit)
        if vol.cause:
            extras['cause'] = vol.cause
        return self._build(
            VolunteerItem,
            path,
            audit,
            extras,
            organization=vol.companyName,
            position=vol.role,
            description=vol.description,
            summary=summary,
            highlights=highlights,
            **self._dates(vol.timePeriod, f'{path}.timePeriod', audit),
        )

    def education_item(self, edu: LinkedInEducation, path, audit) -> EducationItem:
        extras = self._unmapped(edu, EducationItem, path, audit)
        lines = [edu.description] if edu.description else []
        lines += [f'Honors: {honor}' for honor in edu.honors or ()]
        for test in edu.testScores or ():
            if test.name or test.score:
                line = ': '.join(filter(None, [test.name, test.score]))
                taken = format_date(test.date)
                lines.append(f'Test score: {line} ({taken})' if taken else f'Test score: {line}')
        if lines:
            extras['description'] = '\n'.join(lines)
        if edu.activities:
            extras['activities'] = edu.activities
        logo = self._uri(
            edu.school.logoUrl if edu.school else None, f'{path}.school.logoUrl', audit
        )
        if logo:
            extras['schoolLogo'] = logo
        return self._build(
            EducationItem,
            path,
            audit,
            extras,
            institution=edu.schoolName,
            area=edu.fieldOfStudy,
            studyType=edu.degreeName,
            score=edu.grade,
            courses=_nonempty([c.name for c in edu.courses or () if c.name]),
            **self._dates(edu.timePeriod, f'{path}.timePeriod', audit),
        )

    def skill(self, skill: LinkedInSkill, path, audit) -> Optional[Skill]:
        if not skill.name:
            audit.record(f'{path}.name', UnmappableSourceField.kind, None, 'skill has no name')
            return None
        return self._build(
            Skill,
            path,
            audit,
            self._unmapped(skill, Skill, path, audit),
            name=skill.name,
            keywords=[skill.name],
        )

    def language(self, lang: LinkedInLanguage, path, audit) -> Language:
        return self._build(
            Language,
            path,
            audit,
            self._unmapped(lang, Language, path, audit),
            language=lang.name,
            fluency=FLUENCY_LABELS[lang.proficiency],
        )

    def interests(self, src: LinkedInProfile, audit) -> Optional[list[Interest]]:
        if src.interests:
            return [Interest(name=name) for name in src.interests]
        interests = []
        for i, cause in enumerate(src.volunteerCauses):
            if cause is None or not cause.causeName:
                continue
            path = f'volunteerCauses.{i}'
            interests.append(
                self._build(
                    Interest,
                    path,
                    audit,
                    self._unmapped(cause, Interest, path, audit),
                    name=cause.causeName,
                    keywords=[cause.causeType] if cause.causeType else None,
                )
            )
        return _nonempty(interests)

    def certificate(self, cert: LinkedInCertification, path, audit) -> Certificate:
        extras = self._unmapped(cert, Certificate, path, audit)
        if cert.licenseNumber:
            extras['licenseNumber'] = cert.licenseNumber
        dates = self._dates(cert.timePeriod, f'{path}.timePeriod', audit)
        return self._build(
            Certificate,
            path,
            audit,
            extras,
            name=cert.name,
            issuer=cert.authority,
            url=self._uri(cert.url, f'{path}.url', audit),
            date=dates.get('startDate'),
            expirationDate=dates.get('endDate'),
        )

    def award(self, honor: LinkedInHonor, path, audit) -> Award:
        return self._build(
            Award,
            path,
            audit,
            self._unmapped(honor, Award, path, audit),
            title=honor.title,
            awarder=honor.issuer,
            date=self._date(honor.issueDate, f'{path}.issueDate', audit),
            summary=honor.description,
        )

    def publication(self, pub: LinkedInPublication, path, audit) -> Publication:
        return self._build(
            Publication,
            path,
            audit,
            self._unmapped(pub, Publication, path, audit),
            name=pub.name,
            publisher=pub.publisher,
            releaseDate=self._date(pub.date, f'{path}.date', audit),
            url=self._uri(pub.url, f'{path}.url', audit),
            summary=pub.description,
        )

    def project(self, proj: LinkedInProject, path, audit) -> Project:
        _, highlights = self._segment(proj.description)
        return self._build(
            Project,
            path,
            audit,
            self._unmapped(proj, Project, path, audit),
            name=proj.title,
            description=proj.description,
            highlights=highlights,
            url=self._uri(proj.url, f'{path}.url', audit),
            **self._dates(proj.timePeriod, f'{path}.timePeriod', audit),
        )

    def meta(self, now: Optional[datetime] = None) -> Meta:
        """Stamped with the time of this conversion, the source has no such date."""
        now = now or datetime.now(timezone.utc)
        return Meta(
            version=self.config['meta_version'],
            lastModified=now.strftime('%Y-%m-%dT%H:%M:%S'),
        )


def _profile_key(profile: Profile):
    return profile.url or (profile.network, profile.username)


def merge_contact_info(basics: Optional[Basics], contact: Basics) -> Basics:
    """Overlay contact fields onto ``basics``.

    Fields already present in ``basics`` are kept; the contact fills the
    gaps. Profiles are combined (by url) with the existing ones first.
    """
    if basics is None:
        return contact
    merged = basics.model_dump()
    for key, value in contact.model_dump().items():
        if key == 'profiles':
            existing = [Profile.model_validate(p) for p in merged.get('profiles') or ()]
            seen = {_profile_key(p) for p in existing}
            added = [
                p
                for p in (Profile.model_validate(d) for d in value)
                if _profile_key(p) not in seen
            ]
            merged['profiles'] = [p.model_dump() for p in existing + added] or None
        elif merged.get(key) is None:
            merged[key] = value
    return Basics.model_validate(merged)


def linkedin_to_resume(
    profile: Any,
    contact_info: Any = None,
    *,
    config: Mapping | None = None,
    now: Optional[datetime] = None,
    audit: Optional[NormalizationAudit] = None,
) -> Resume:
    """Normalize a LinkedIn profile document (and contact info) into a Resume."""
    return LinkedInNormalizer(config).to_resume(
        profile, contact_info, now=now, audit=audit
    )
