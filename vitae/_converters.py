"""
Tools to get documents (source profiles, canonical resumes, configs) as dicts.

A document can be given as a mapping, a path (str or Path), JSON or YAML
text, or bytes. The conversions are registered on an ``i2.castgraph``
registry, so they compose (``Path -> bytes -> dict``).
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml  # pip install PyYAML
from i2.castgraph import ConversionError, ConversionRegistry  # type: ignore

YAML_EXTENSIONS = ('.yaml', '.yml')


def _parse_json_bytes(b: bytes) -> Mapping[str, Any]:
    return json.loads(b.decode('utf-8'))


def _parse_yaml_bytes(b: bytes) -> Mapping[str, Any]:
    return yaml.safe_load(b.decode('utf-8')) or {}


def _parse_any(b: bytes) -> Mapping[str, Any]:
    """JSON first, YAML (a superset, but more lenient) as the fallback."""
    try:
        return _parse_json_bytes(b)
    except (UnicodeDecodeError, json.JSONDecodeError):
        pass
    try:
        parsed = _parse_yaml_bytes(b)
    except (UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConversionError(f"Could not parse content as JSON or YAML: {e}")
    if not isinstance(parsed, Mapping):
        raise ConversionError(
            f"Expected a mapping document, got {type(parsed).__name__}"
        )
    return parsed


def _parse_path(path: Path, b: bytes) -> Mapping[str, Any]:
    if path.suffix.lower() == '.json':
        return _parse_json_bytes(b)
    if path.suffix.lower() in YAML_EXTENSIONS:
        return _parse_yaml_bytes(b)
    return _parse_any(b)


def _read(path: Path, ctx: Optional[dict]) -> bytes:
    """Read from ctx['fs'] (a virtual filesystem) when given, else from disk."""
    if ctx and str(path) in ctx.get('fs', {}):
        data = ctx['fs'][str(path)]
        return data if isinstance(data, (bytes, bytearray)) else str(data).encode('utf-8')
    return path.read_bytes()


def _is_path(s: str, ctx: Optional[dict]) -> bool:
    if ctx and ctx.get('treat_str_as_path') is not None:
        return bool(ctx['treat_str_as_path'])
    return bool(ctx and s in ctx.get('fs', {})) or os.path.exists(s)


def register_document_converters(reg: ConversionRegistry) -> ConversionRegistry:
    """Register ``Path``/``str``/``bytes`` to ``dict`` conversions on ``reg``.

    Context knobs:
      - fs: optional virtual filesystem mapping {path_str: bytes|str}
      - treat_str_as_path: True|False to force how str is interpreted

    >>> reg = register_document_converters(ConversionRegistry())
    >>> reg.convert(Path('/p.yaml'), dict, context={'fs': {'/p.yaml': 'firstName: Ada'}})
    {'firstName': 'Ada'}
    """

    @reg.register(Path, bytes, cost=0.2)
    def path_to_bytes(p: Path, ctx: Optional[dict]) -> bytes:
        return _read(p, ctx)

    @reg.register(str, bytes, cost=0.5)
    def str_to_bytes(s: str, ctx: Optional[dict]) -> bytes:
        if _is_path(s, ctx):
            return _read(Path(s), ctx)
        return s.encode('utf-8')

    @reg.register(bytes, dict, cost=0.6)
    def bytes_to_dict(b: bytes, ctx: Optional[dict]) -> dict:
        return dict(_parse_any(b))

    @reg.register(Path, dict, cost=0.3)
    def path_to_dict(p: Path, ctx: Optional[dict]) -> dict:
        return dict(_parse_path(p, reg.convert(p, bytes, context=ctx)))

    @reg.register(str, dict, cost=0.8)
    def str_to_dict(s: str, ctx: Optional[dict]) -> dict:
        if _is_path(s, ctx):
            return reg.convert(Path(s), dict, context=ctx)
        return reg.convert(s.encode('utf-8'), dict, context=ctx)

    return reg


_REGISTRY = register_document_converters(ConversionRegistry())


def ensure_dict(
    src: Union[str, bytes, Path, Mapping[str, Any]],
    *,
    treat_str_as_path: Optional[bool] = None,
    fs: Optional[Mapping[str, Union[bytes, str]]] = None,
) -> dict:
    """
    Get ``src`` as a dict.

    - A mapping is returned as a (shallow copied) dict.
    - A ``Path`` is read and parsed by extension (JSON, YAML, else sniffed).
    - A ``str`` is a path if ``treat_str_as_path`` says so, or if it names an
      entry of ``fs`` or an existing file; otherwise it is inline JSON/YAML.
    - ``bytes`` are sniffed: JSON, then YAML.

    >>> ensure_dict({"a": 1})
    {'a': 1}
    >>> ensure_dict('{"a": 2}')
    {'a': 2}
    >>> ensure_dict("/cfg.json", fs={"/cfg.json": b'{"a": 3}'})
    {'a': 3}
    """
    if isinstance(src, Mapping):
        return dict(src)
    context: dict = {'fs': fs} if fs is not None else {}
    if treat_str_as_path is not None:
        context['treat_str_as_path'] = treat_str_as_path
    return _REGISTRY.convert(src, dict, context=context)
