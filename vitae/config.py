"""
Configuration management using Mapping interfaces.

Implement:
- ConfigStore: MutableMapping for configuration, with cascading defaults
- Default normalization settings
- Loading overrides from JSON or YAML files
"""

from typing import Any
from collections.abc import Mapping, MutableMapping

DFLT_SCHEMA_URL = (
    "https://raw.githubusercontent.com/jsonresume/resume-schema/v1.0.0/schema.json"
)

DFLT_CONFIG = {
    # stamped into the `$schema` of every normalized resume
    'schema_url': DFLT_SCHEMA_URL,
    # stamped into meta.version
    'meta_version': 'v1.0.0',
    # prefix of the public profile url (followed by the public identifier)
    'profile_base_url': 'https://www.linkedin.com/in/',
    # split descriptions into summary + highlights
    'segment_descriptions': True,
    # copy source keys with no canonical home into the entity's unknown fields
    'keep_unmapped': True,
    # use the source's own country code when the name is not in the table
    'country_code_fallback': False,
}


class ConfigStore(MutableMapping):
    """Configuration store with cascading defaults.

    Keys set on the store shadow the defaults; deleting a key reveals the
    default again.
    """

    def __init__(self, base_config: Mapping | None = None, *, defaults: Mapping | None = None):
        self._config = dict(base_config or {})
        self._defaults = dict(DFLT_CONFIG if defaults is None else defaults)

    def __getitem__(self, key: str) -> Any:
        if key in self._config:
            return self._config[key]
        return self._defaults[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._config[key] = value

    def __delitem__(self, key: str) -> None:
        del self._config[key]

    def __iter__(self):
        yield from self._config
        yield from (k for k in self._defaults if k not in self._config)

    def __len__(self) -> int:
        return len(set(self._config) | set(self._defaults))

    def __repr__(self):
        return f'{type(self).__name__}({dict(self)!r})'


def get_default_config() -> ConfigStore:
    return ConfigStore()


def ensure_config(config: Mapping | None) -> ConfigStore:
    if isinstance(config, ConfigStore):
        return config
    return ConfigStore(config)


def load_config(path: str) -> ConfigStore:
    """Load overrides from a JSON or YAML file on top of the defaults."""
    from vitae._converters import ensure_dict

    return ConfigStore(ensure_dict(path, treat_str_as_path=True))
