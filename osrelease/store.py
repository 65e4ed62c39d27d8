"""Attribute Store

Reads a located `os-release` file into a dictionary of fold-cased attribute
names to their raw string values.
"""

import warnings
from typing import Dict, Optional

from .parsing import LineKind, parse_line


class OsReleaseWarning(UserWarning):
    """Non-fatal problem while reading an `os-release` file"""


def _read(path: str, fold: bool) -> Dict[str, str]:
    attrs: Dict[str, str] = {}

    # A leading byte order mark is not part of the first key
    with open(path, encoding="utf-8-sig") as f:
        for lineno, line in enumerate(f, start=1):
            res = parse_line(line)

            if res.kind is LineKind.MALFORMED:
                warnings.warn(f"{path}:{lineno}: unrecognized line: {line.rstrip()!r}",
                              OsReleaseWarning, stacklevel=3)
                continue

            if res.kind is LineKind.SKIP:
                continue

            assert res.key is not None and res.value is not None
            key = res.key if fold else res.key.upper()
            attrs[key] = res.value

    return attrs


def build(path: Optional[str]) -> Dict[str, str]:
    """Build the attribute set from `path`

    Every line of the file is run through `parse_line()`. Assignments are
    stored under their fold-cased key, with later duplicates replacing
    earlier ones. Malformed lines only trigger an `OsReleaseWarning`.

    If `path` is `None`, or the file cannot be read after it was located,
    an empty dictionary is returned instead of raising.
    """

    if path is None:
        return {}

    try:
        return _read(path, True)
    except (OSError, UnicodeDecodeError) as e:
        warnings.warn(f"cannot read {path}: {e}", OsReleaseWarning, stacklevel=2)
        return {}


def parse_file(path: str) -> Dict[str, str]:
    """Read `path` keeping the keys as spelled in the file

    Same grammar as `build()` but for callers that want a plain dictionary
    with the upper-case keys of `os-release(5)`. Unlike `build()`, read
    errors are propagated to the caller.
    """
    return _read(path, False)
