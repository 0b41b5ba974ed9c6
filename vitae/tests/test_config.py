"""
Minimal unit tests for vitae.config
"""

import json

from vitae.config import (
    DFLT_CONFIG,
    ConfigStore,
    ensure_config,
    get_default_config,
    load_config,
)


def test_config_store():
    c = ConfigStore({'a': 1})
    assert c['a'] == 1
    c['b'] = 2
    assert c['b'] == 2
    del c['a']
    assert 'a' not in c


def test_defaults_cascade():
    c = ConfigStore({'keep_unmapped': False})
    assert c['keep_unmapped'] is False
    assert c['segment_descriptions'] is True
    del c['keep_unmapped']
    assert c['keep_unmapped'] is True
    assert len(c) == len(DFLT_CONFIG)
    assert set(c) == set(DFLT_CONFIG)


def test_custom_defaults():
    c = ConfigStore({'a': 1}, defaults={'b': 2})
    assert dict(c) == {'a': 1, 'b': 2}


def test_get_default_config():
    c = get_default_config()
    assert c['meta_version'] == 'v1.0.0'
    assert c['profile_base_url'] == 'https://www.linkedin.com/in/'
    assert c['schema_url'].endswith('schema.json')


def test_ensure_config():
    store = ConfigStore()
    assert ensure_config(store) is store
    assert ensure_config(None)['keep_unmapped'] is True
    assert ensure_config(None)['country_code_fallback'] is False
    assert ensure_config({'keep_unmapped': False})['keep_unmapped'] is False


def test_load_config(tmp_path):
    path = tmp_path / 'vitae.json'
    path.write_text(json.dumps({'segment_descriptions': False}))
    c = load_config(str(path))
    assert c['segment_descriptions'] is False
    assert c['meta_version'] == 'v1.0.0'


def test_load_yaml_config(tmp_path):
    path = tmp_path / 'vitae.yaml'
    path.write_text('meta_version: v2.0.0\nkeep_unmapped: false\n')
    c = load_config(str(path))
    assert c['meta_version'] == 'v2.0.0'
    assert c['keep_unmapped'] is False
