"""
Tests for the orchestration functions.
"""

import json
import os
from datetime import datetime

from vitae import fetch_resume, load_resume, mk_resume
from vitae.audit import NormalizationAudit

FIXTURES = os.path.join(os.path.dirname(__file__), 'fixtures')
PROFILE_PATH = os.path.join(FIXTURES, 'linkedin_profile.json')
CONTACT_PATH = os.path.join(FIXTURES, 'contact_info.json')


def test_mk_resume_from_files(tmp_path):
    output_path = tmp_path / 'resume.yaml'
    resume = mk_resume(
        PROFILE_PATH,
        CONTACT_PATH,
        output_path=output_path,
        now=datetime(2024, 1, 2, 3, 4, 5),
    )
    assert resume.basics.name == 'Ada Lovelace'
    assert resume.basics.email == 'ada@example.com'
    assert resume.meta.lastModified == '2024-01-02T03:04:05'
    assert output_path.exists()
    assert load_resume(output_path) == resume


def test_mk_resume_with_config_and_audit():
    audit = NormalizationAudit()
    resume = mk_resume(
        PROFILE_PATH, config={'segment_descriptions': False}, audit=audit
    )
    assert resume.work[0].highlights is None
    assert 'entityUrn' in audit.paths


class FakeClient:
    def __init__(self):
        with open(PROFILE_PATH) as f:
            self.profile = json.load(f)
        with open(CONTACT_PATH) as f:
            self.contact = json.load(f)
        self.requests = []

    def get_profile(self, public_id):
        self.requests.append(('profile', public_id))
        return self.profile

    def get_profile_contact_info(self, public_id):
        self.requests.append(('contact', public_id))
        return self.contact


def test_fetch_resume():
    client = FakeClient()
    resume = fetch_resume(client, 'ada-lovelace')
    assert client.requests == [('profile', 'ada-lovelace'), ('contact', 'ada-lovelace')]
    assert resume.basics.phone == '+44 20 7946 0000'


def test_fetch_resume_without_contact_info():
    client = FakeClient()
    resume = fetch_resume(client, 'ada-lovelace', with_contact_info=False)
    assert client.requests == [('profile', 'ada-lovelace')]
    assert resume.basics.email is None
