"""
High-level orchestration functions - the main API.

These coordinate loading source documents, normalizing them and writing
the canonical resume.
"""

from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from vitae._converters import ensure_dict
from vitae.audit import NormalizationAudit
from vitae.base import ProfileClient
from vitae.config import ensure_config
from vitae.linkedin import LinkedInNormalizer
from vitae.models import Resume
from vitae.util import dump_resume

SourceDoc = Union[str, Path, bytes, Mapping[str, Any]]


def mk_resume(
    profile_src: SourceDoc,
    contact_info_src: Optional[SourceDoc] = None,
    *,
    output_path: Union[str, Path, None] = None,
    config: Optional[Mapping] = None,
    audit: Optional[NormalizationAudit] = None,
    now: Optional[datetime] = None,
) -> Resume:
    """
    Make a canonical resume from a LinkedIn profile (and contact info).

    Args:
        profile_src: Profile document as a dict, a JSON/YAML file path or text
        contact_info_src: Optional contact-info document, same forms
        output_path: If given, the resume is also written there (JSON or YAML)
        config: Normalization settings (see vitae.config)
        audit: Collects the fields that were left out
        now: Time stamped into meta.lastModified (defaults to now, UTC)

    Returns:
        The Resume

    Examples:
        >>> resume = mk_resume({'firstName': 'Ada', 'lastName': 'Lovelace'})
        >>> resume.basics.name
        'Ada Lovelace'
    """
    profile = ensure_dict(profile_src)
    contact = ensure_dict(contact_info_src) if contact_info_src is not None else None
    normalizer = LinkedInNormalizer(ensure_config(config))
    resume = normalizer.to_resume(profile, contact, now=now, audit=audit)
    if output_path:
        dump_resume(resume, output_path)
    return resume


def fetch_resume(
    client: ProfileClient,
    public_id: str,
    *,
    with_contact_info: bool = True,
    config: Optional[Mapping] = None,
    audit: Optional[NormalizationAudit] = None,
) -> Resume:
    """Read a profile (and its contact info) through ``client`` and normalize it.

    The client does the requests (and any retries); this only reads.
    """
    profile = client.get_profile(public_id)
    contact = client.get_profile_contact_info(public_id) if with_contact_info else None
    return LinkedInNormalizer(config).to_resume(profile, contact, audit=audit)
