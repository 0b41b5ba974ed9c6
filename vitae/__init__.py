"""
Public API for the vitae package.
Import the main user-facing functions and classes.
"""

from vitae.tools import mk_resume, fetch_resume
from vitae.config import ConfigStore, load_config, get_default_config
from vitae.models import (
    Resume,
    Basics,
    Location,
    Profile,
    WorkItem,
    VolunteerItem,
    EducationItem,
    Award,
    Certificate,
    Publication,
    Skill,
    Language,
    Interest,
    Reference,
    Project,
    Meta,
)
from vitae.base import (
    ResumeValidationError,
    InvalidDateFormat,
    InvalidEmailFormat,
    InvalidCountryCode,
    UnparseableURI,
    UnmappableSourceField,
    SourceShapeError,
    RenderingError,
    build_sections,
    get_renderer_registry,
    register_renderer,
)
from vitae.validators import validate_date, validate_email, validate_country_code
from vitae.segment import split_description
from vitae.audit import NormalizationAudit, SkippedField
from vitae.linkedin import LinkedInNormalizer, linkedin_to_resume, merge_contact_info
from vitae.util import load_resume, dump_resume, get_jsonschema_errors

__all__ = [
    # Orchestration
    'mk_resume',
    'fetch_resume',
    'linkedin_to_resume',
    'LinkedInNormalizer',
    'merge_contact_info',
    # Configuration
    'ConfigStore',
    'load_config',
    'get_default_config',
    # Canonical schema
    'Resume',
    'Basics',
    'Location',
    'Profile',
    'WorkItem',
    'VolunteerItem',
    'EducationItem',
    'Award',
    'Certificate',
    'Publication',
    'Skill',
    'Language',
    'Interest',
    'Reference',
    'Project',
    'Meta',
    'load_resume',
    'dump_resume',
    'get_jsonschema_errors',
    # Validation
    'validate_date',
    'validate_email',
    'validate_country_code',
    'ResumeValidationError',
    'InvalidDateFormat',
    'InvalidEmailFormat',
    'InvalidCountryCode',
    'UnparseableURI',
    'UnmappableSourceField',
    'SourceShapeError',
    # Text segmentation
    'split_description',
    # Auditing
    'NormalizationAudit',
    'SkippedField',
    # Rendering collaborators
    'RenderingError',
    'build_sections',
    'get_renderer_registry',
    'register_renderer',
]
