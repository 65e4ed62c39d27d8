"""Configuration Validation

The configuration handed to `OsRelease.instance()` is a plain dictionary. It
is checked once, at first construction, against `CONFIG_SCHEMA` via JSON
Schema.
"""
from typing import Any, Dict, Iterable, Union

import jsonschema

CONFIG_SCHEMA = {
    "title": "os-release reader configuration",
    "type": "object",
    "properties": {
        "search_path": {
            "description": "Directories to look for `os-release` in, first match wins",
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "string",
                "minLength": 1,
            },
        },
        "osr_path": {
            "description": "Directory of the located file, set on construction",
            "type": "string",
        },
    },
    "additionalProperties": True,
}

_validator = jsonschema.Draft4Validator(CONFIG_SCHEMA)


def error_id(path: Iterable[Union[int, str]]) -> str:
    """Render the path of a validation error, e.g. `.search_path[1]`"""
    result = ""
    for p in path:
        if isinstance(p, str):
            result += "." + p
        else:
            result += f"[{p}]"

    return result or "."


def validate_config(config: Dict[str, Any]) -> None:
    """Check `config` against `CONFIG_SCHEMA`

    Raises `ValueError` listing every problem, ordered by the path
    of the offending element, if the configuration is not valid.
    """
    errors = sorted((error_id(e.absolute_path), e.message)
                    for e in _validator.iter_errors(config))
    if not errors:
        return

    details = "; ".join(f"{msg} [{eid}]" for eid, msg in errors)
    raise ValueError(f"config: {len(errors)} error(s): {details}")
