"""Pydantic models for the canonical (JSON Resume) document.

Every entity keeps the fields it does not model in its pydantic extras (the
unknown-field map). Those are emitted verbatim, next to the modeled fields,
when the entity is serialized.
"""
from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from vitae.typed import (
    Fluency,
    SemVer,
    SkillLevel,
    parse_language,
    parse_project_type,
    parse_score,
)
from vitae.validators import CountryCode, Email, Iso8601

# Type alias to avoid strict URL validation
AnyUrl = Optional[str]


class CanonicalModel(BaseModel):
    """Base of all canonical entities: immutable, open to unknown fields."""

    model_config = ConfigDict(extra='allow', frozen=True, populate_by_name=True)

    @model_serializer(mode='wrap')
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        modeled = set()
        for name, field in type(self).model_fields.items():
            modeled.add(name)
            if field.alias:
                modeled.add(field.alias)
        # Unknown fields are kept verbatim, even when null
        return {k: v for k, v in data.items() if v is not None or k not in modeled}

    @property
    def unknown_fields(self) -> dict[str, Any]:
        """The fields this entity carries but does not model."""
        return dict(self.model_extra or {})

    def to_dict(self) -> dict[str, Any]:
        """The canonical (JSON-compatible) form of this entity."""
        return self.model_dump(mode='json', by_alias=True)

    def to_json(self, *, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


class _OngoingMixin:
    @property
    def is_ongoing(self) -> bool:
        """Started and not ended. Renderers show the end as "Present"."""
        return self.startDate is not None and self.endDate is None


class Location(CanonicalModel):
    address: str | None = Field(
        None,
        description='To add multiple address lines, use \n. For example, 1234 Glücklichkeit Straße\nHinterhaus 5. Etage li.')
    postalCode: str | None = None
    city: str | None = None
    countryCode: CountryCode | None = None
    region: str | None = Field(
        None,
        description='The general region where you live. Can be a US state, or a province, for instance.')


class Profile(CanonicalModel):
    network: str | None = Field(None, description='e.g. Facebook or Twitter')
    username: str | None = Field(None, description='e.g. neutralthoughts')
    url: AnyUrl | None = Field(
        None, description='e.g. http://twitter.example.com/neutralthoughts'
    )


class Basics(CanonicalModel):
    name: str | None = None
    label: str | None = Field(None, description='e.g. Web Developer')
    image: AnyUrl | None = Field(
        None, description='URL (as per RFC 3986) to a image in JPEG or PNG format'
    )
    email: Email | None = None
    phone: str | None = Field(
        None,
        description='Phone numbers are stored as strings so use any format you like, e.g. 712-117-2923')
    url: AnyUrl | None = Field(
        None,
        description='URL (as per RFC 3986) to your website, e.g. personal homepage')
    summary: str | None = Field(
        None, description='Write a short 2-3 sentence biography about yourself'
    )
    location: Location | None = None
    profiles: list[Profile] | None = Field(
        None,
        description='Specify any number of social networks that you participate in')


class WorkItem(CanonicalModel, _OngoingMixin):
    name: str | None = Field(None, description='e.g. Facebook')
    location: str | None = Field(None, description='e.g. Menlo Park, CA')
    description: str | None = Field(None, description='e.g. Social Media Company')
    position: str | None = Field(None, description='e.g. Software Engineer')
    url: AnyUrl | None = Field(None, description='e.g. http://facebook.example.com')
    startDate: Iso8601 | None = None
    endDate: Iso8601 | None = None
    summary: str | None = Field(
        None, description='Give an overview of your responsibilities at the company'
    )
    highlights: list[str] | None = Field(
        None, description='Specify multiple accomplishments'
    )


class VolunteerItem(CanonicalModel, _OngoingMixin):
    organization: str | None = Field(None, description='e.g. Facebook')
    position: str | None = Field(None, description='e.g. Software Engineer')
    url: AnyUrl | None = Field(None, description='e.g. http://facebook.example.com')
    startDate: Iso8601 | None = None
    endDate: Iso8601 | None = None
    description: str | None = None
    summary: str | None = Field(
        None, description='Give an overview of your responsibilities at the company'
    )
    highlights: list[str] | None = Field(
        None, description='Specify accomplishments and achievements'
    )


class EducationItem(CanonicalModel, _OngoingMixin):
    institution: str | None = Field(
        None, description='e.g. Massachusetts Institute of Technology'
    )
    url: AnyUrl | None = Field(None, description='e.g. http://facebook.example.com')
    area: str | None = Field(None, description='e.g. Arts')
    studyType: str | None = Field(None, description='e.g. Bachelor')
    startDate: Iso8601 | None = None
    endDate: Iso8601 | None = None
    score: str | None = Field(None, description='grade point average, e.g. 3.67/4.0')
    courses: list[str] | None = Field(
        None, description='List notable courses/subjects'
    )

    @property
    def typed_score(self):
        """The score as a Gpa, Percentage, PassFail, LetterGrade or CustomScore."""
        return parse_score(self.score)


class Award(CanonicalModel):
    title: str | None = Field(
        None, description='e.g. One of the 100 greatest minds of the century'
    )
    date: Iso8601 | None = None
    awarder: str | None = Field(None, description='e.g. Time Magazine')
    summary: str | None = Field(
        None, description='e.g. Received for my work with Quantum Physics'
    )


class Certificate(CanonicalModel):
    name: str | None = Field(
        None, description='e.g. Certified Kubernetes Administrator'
    )
    date: Iso8601 | None = None
    expirationDate: Iso8601 | None = None
    url: AnyUrl | None = Field(None, description='e.g. http://example.com')
    issuer: str | None = Field(None, description='e.g. CNCF')
    summary: str | None = None


class Publication(CanonicalModel):
    name: str | None = Field(None, description='e.g. The World Wide Web')
    publisher: str | None = Field(None, description='e.g. IEEE, Computer Magazine')
    releaseDate: Iso8601 | None = None
    url: AnyUrl | None = Field(
        None,
        description='e.g. http://www.computer.org.example.com/csdl/mags/co/1996/10/rx069-abs.html')
    summary: str | None = Field(
        None,
        description='Short summary of publication. e.g. Discussion of the World Wide Web, HTTP, HTML.')


class Skill(CanonicalModel):
    name: str | None = Field(None, description='e.g. Web Development')
    level: str | None = Field(None, description='e.g. Master')
    keywords: list[str] | None = Field(
        None, description='List some keywords pertaining to this skill'
    )

    @property
    def proficiency(self) -> SkillLevel | None:
        return SkillLevel.from_label(self.level)


class Language(CanonicalModel):
    language: str | None = Field(None, description='e.g. English, Spanish')
    fluency: str | None = Field(None, description='e.g. Fluent, Beginner')

    @property
    def language_id(self):
        """A KnownLanguage, or OtherLanguage(name) for anything else."""
        return parse_language(self.language)

    @property
    def fluency_level(self) -> Fluency | None:
        return Fluency.from_label(self.fluency)


class Interest(CanonicalModel):
    name: str | None = Field(None, description='e.g. Philosophy')
    keywords: list[str] | None = None


class Reference(CanonicalModel):
    name: str | None = Field(None, description='e.g. Timothy Cook')
    reference: str | None = None


class Project(CanonicalModel, _OngoingMixin):
    name: str | None = Field(None, description='e.g. The World Wide Web')
    description: str | None = Field(
        None, description='Short summary of project. e.g. Collated works of 2017.'
    )
    highlights: list[str] | None = Field(
        None, description='Specify multiple features'
    )
    keywords: list[str] | None = Field(
        None, description='Specify special elements involved'
    )
    startDate: Iso8601 | None = None
    endDate: Iso8601 | None = None
    url: AnyUrl | None = None
    roles: list[str] | None = Field(
        None, description='Specify your role on this project or in company'
    )
    entity: str | None = Field(
        None,
        description="Specify the relevant company/entity affiliations e.g. 'greenpeace', 'corporationXYZ'")
    type: str | None = Field(
        None,
        description=" e.g. 'volunteering', 'presentation', 'talk', 'application', 'conference'")

    @property
    def project_type(self):
        return parse_project_type(self.type)


class Meta(CanonicalModel):
    canonical: AnyUrl | None = Field(
        None, description='URL (as per RFC 3986) to latest version of this document'
    )
    version: str | None = Field(
        None, description='A version field which follows semver - e.g. v1.0.0'
    )
    lastModified: str | None = Field(
        None, description='Using ISO 8601 with YYYY-MM-DDThh:mm:ss'
    )

    @property
    def semver(self) -> SemVer | None:
        return SemVer.parse(self.version)


class Resume(CanonicalModel):
    field_schema: AnyUrl | None = Field(
        None,
        alias='$schema',
        description='link to the version of the schema that can validate the resume')
    basics: Basics | None = None
    work: list[WorkItem] | None = None
    volunteer: list[VolunteerItem] | None = None
    education: list[EducationItem] | None = None
    awards: list[Award] | None = Field(
        None,
        description='Specify any awards you have received throughout your professional career')
    certificates: list[Certificate] | None = Field(
        None,
        description='Specify any certificates you have received throughout your professional career')
    publications: list[Publication] | None = Field(
        None, description='Specify your publications through your career'
    )
    skills: list[Skill] | None = Field(
        None, description='List out your professional skill-set'
    )
    languages: list[Language] | None = Field(
        None, description='List any other languages you speak'
    )
    interests: list[Interest] | None = None
    references: list[Reference] | None = Field(
        None, description='List references you have received'
    )
    projects: list[Project] | None = Field(
        None, description='Specify career projects'
    )
    meta: Meta | None = Field(
        None,
        description='The schema version and any other tooling configuration lives here')
