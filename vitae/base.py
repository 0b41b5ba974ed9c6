"""
Error taxonomy and collaborator protocols for the vitae package.

Define:
- ResumeValidationError and its typed rejections (date, email, country code)
- UnparseableURI, UnmappableSourceField: kinds of best-effort degradations,
  recorded in audits, never raised to normalizer callers
- SourceShapeError: fatal, the source document is not the expected shape
- RenderingError: typed failure of a rendering backend
- ProfileClient: protocol of the (already authenticated) source fetch client
- SectionBuilder, Renderer: protocols of the downstream rendering collaborators
- RendererRegistry: named renderer implementations
"""

from typing import Any, Optional, Protocol, TYPE_CHECKING
from collections.abc import Mapping

if TYPE_CHECKING:
    from vitae.models import Resume


class ResumeValidationError(ValueError):
    """A present value was rejected by a canonical field validator."""

    kind = 'ResumeValidationError'
    expected = 'a valid value'

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'{self.kind}: {value!r} is not {self.expected}')


class InvalidDateFormat(ResumeValidationError):
    kind = 'InvalidDateFormat'
    expected = 'a date of the form YYYY, YYYY-MM or YYYY-MM-DD'


class InvalidEmailFormat(ResumeValidationError):
    kind = 'InvalidEmailFormat'
    expected = 'an email of the form local@domain.tld'


class InvalidCountryCode(ResumeValidationError):
    kind = 'InvalidCountryCode'
    expected = 'a country code of 2 uppercase letters (ISO-3166-1 ALPHA-2)'


class UnparseableURI(ValueError):
    """A URI could not be parsed. Degrades the field to None."""

    kind = 'UnparseableURI'


class UnmappableSourceField(ValueError):
    """A source field has no canonical home."""

    kind = 'UnmappableSourceField'


class SourceShapeError(ValueError):
    """The source document does not have the shape the normalizer expects."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'{path}: {reason}')


class RenderingError(Exception):
    """Raised by a renderer when a resume cannot be rendered."""


class ProfileClient(Protocol):
    """Read-only, already authenticated client of the profile API."""

    def get_profile(self, public_id: str) -> Mapping[str, Any]: ...

    def get_profile_contact_info(self, public_id: str) -> Mapping[str, Any]: ...


class SectionBuilder(Protocol):
    """Builds one markup section per canonical entity group.

    Every method returns None when its input is absent or empty.
    """

    def build_basics(self, basics) -> Optional[str]: ...

    def build_work(self, work) -> Optional[str]: ...

    def build_volunteer(self, volunteer) -> Optional[str]: ...

    def build_education(self, education) -> Optional[str]: ...

    def build_awards(self, awards) -> Optional[str]: ...

    def build_certificates(self, certificates) -> Optional[str]: ...

    def build_publications(self, publications) -> Optional[str]: ...

    def build_skills(self, skills) -> Optional[str]: ...

    def build_languages(self, languages) -> Optional[str]: ...

    def build_interests(self, interests) -> Optional[str]: ...

    def build_references(self, references) -> Optional[str]: ...

    def build_projects(self, projects) -> Optional[str]: ...

    def build_meta(self, meta) -> Optional[str]: ...


# Resume attribute -> SectionBuilder method, in document order
SECTION_GROUPS = (
    ('basics', 'build_basics'),
    ('work', 'build_work'),
    ('volunteer', 'build_volunteer'),
    ('education', 'build_education'),
    ('awards', 'build_awards'),
    ('certificates', 'build_certificates'),
    ('publications', 'build_publications'),
    ('skills', 'build_skills'),
    ('languages', 'build_languages'),
    ('interests', 'build_interests'),
    ('references', 'build_references'),
    ('projects', 'build_projects'),
    ('meta', 'build_meta'),
)


def build_sections(builder: SectionBuilder, resume: 'Resume') -> list[str]:
    """Call each section builder on its group, keeping the sections produced.

    Empty groups are handed to the builder as None.
    """
    sections = []
    for attr, method in SECTION_GROUPS:
        group = getattr(resume, attr)
        if isinstance(group, list) and not group:
            group = None
        section = getattr(builder, method)(group)
        if section is not None:
            sections.append(section)
    return sections


class Renderer(Protocol):
    """Typesetting backend: one fully built resume in, one document out.

    Raises RenderingError on failure.
    """

    def render(self, resume: 'Resume') -> bytes: ...


class RendererRegistry:
    """Registry for managing multiple renderer implementations."""

    def __init__(self):
        self._renderers: dict[str, type[Renderer]] = {}
        self._instances: dict[str, Renderer] = {}

    def register(self, format_name: str, renderer_class: type[Renderer]) -> None:
        """Register a renderer class for a specific format."""
        self._renderers[format_name] = renderer_class
        self._instances.pop(format_name, None)

    def get_renderer(self, format_name: str) -> Renderer:
        """Get a (cached) renderer instance for the specified format."""
        if format_name not in self._renderers:
            raise KeyError(f"No renderer registered for format: {format_name}")
        if format_name not in self._instances:
            self._instances[format_name] = self._renderers[format_name]()
        return self._instances[format_name]

    def render(self, resume: 'Resume', format_name: str) -> bytes:
        renderer = self.get_renderer(format_name)
        try:
            return renderer.render(resume)
        except RenderingError:
            raise
        except Exception as e:
            raise RenderingError(f"{format_name} rendering failed: {e}") from e

    def list_formats(self) -> list[str]:
        return list(self._renderers)

    def __contains__(self, format_name: str) -> bool:
        return format_name in self._renderers


# Global renderer registry instance
_renderer_registry = RendererRegistry()


def register_renderer(format_name: str):
    """Decorator for registering renderer classes."""

    def decorator(renderer_class: type[Renderer]):
        _renderer_registry.register(format_name, renderer_class)
        return renderer_class

    return decorator


def get_renderer_registry() -> RendererRegistry:
    """Get the global renderer registry."""
    return _renderer_registry
