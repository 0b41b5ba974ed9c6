"""
Loading, dumping and checking canonical resume documents.
"""

import json
from pathlib import Path
from typing import Any, Iterator, Mapping, Union

import yaml  # pip install PyYAML
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from pydantic import ValidationError as PydanticValidationError

from vitae._converters import ensure_dict
from vitae.models import Resume

ValidationErrorType = Union[PydanticValidationError, JsonSchemaValidationError]
ValidationErrors = (PydanticValidationError, JsonSchemaValidationError)
JsonContentStr = str  # JSON (or YAML) string
PathStr = str  # filesystem path
ResumeSource = Union[Resume, PathStr, JsonContentStr, Path, bytes, Mapping]


def _field_path(loc) -> str:
    return '.'.join(str(p) for p in loc) or 'root'


def extract_friendly_errors(error_obj: ValidationErrorType) -> Iterator[tuple[str, str]]:
    """
    Yield ``(field_path, message)`` pairs from a validation error.

    Works with both pydantic's ValidationError (all errors) and jsonschema's
    ValidationError (the one error it carries). Field paths are dotted, with
    list indices, e.g. ``work.0.startDate``.
    """
    if isinstance(error_obj, PydanticValidationError):
        for error in error_obj.errors():
            yield _field_path(error['loc']), error['msg']
    elif isinstance(error_obj, JsonSchemaValidationError):
        yield _field_path(error_obj.path), error_obj.message


def validation_friendly_errors_string(error_obj: ValidationErrorType) -> str:
    return '\n'.join(
        f"Error in field '{field}': {message}"
        for field, message in extract_friendly_errors(error_obj)
    )


def load_resume(src: ResumeSource) -> Resume:
    """
    Get a validated Resume from various sources
    (Resume, dict, json/yaml file, json/yaml string, bytes).

    Raises pydantic.ValidationError if the document is not a valid resume.
    """
    if isinstance(src, Resume):
        return src
    if isinstance(src, Path):
        src = src.expanduser()
    elif not isinstance(src, (str, bytes, Mapping)):
        raise TypeError(
            f"Resume source must be a dict or a valid JSON string/filename: {src!r}"
        )
    return Resume.model_validate(ensure_dict(src))


def resume_to_dict(resume: Union[Resume, Mapping]) -> dict:
    """The canonical document of a resume (a mapping is validated first)."""
    return load_resume(resume).to_dict()


def dump_resume(resume: Union[Resume, Mapping], path: Union[str, Path]) -> Path:
    """Write a resume as JSON, or as YAML if the path ends with .yaml/.yml."""
    path = Path(path)
    doc = resume_to_dict(resume)
    if path.suffix.lower() in ('.yaml', '.yml'):
        # sort_keys=False keeps the canonical field order
        text = yaml.safe_dump(doc, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(doc, indent=2, ensure_ascii=False) + '\n'
    path.write_text(text, encoding='utf-8')
    return path


def resume_json_schema() -> dict:
    """JSON Schema of the canonical document (with the validator patterns)."""
    return Resume.model_json_schema(by_alias=True)


def get_jsonschema_errors(content: Mapping[str, Any]) -> list[str]:
    """Return jsonschema error messages (with field paths) for a raw document."""
    validator = Draft202012Validator(resume_json_schema())
    return [
        f"Error in field '{_field_path(e.path)}': {e.message}"
        for e in validator.iter_errors(dict(content))
    ]


def is_valid_resume(content: Mapping[str, Any]) -> bool:
    try:
        Resume.model_validate(content)
    except PydanticValidationError:
        return False
    return True
