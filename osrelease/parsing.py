"""Line Grammar of `os-release`

Every line of an `os-release` file is either blank, a comment or a single
shell-style assignment. This module classifies one line at a time, it does
not know anything about files.

Values are taken literally: a quoted value is whatever sits between the
first and the last quote character of the line, anything following the
closing quote is dropped, and no escape sequences are interpreted.
"""

import enum
import re
from typing import NamedTuple, Optional

#: Key that may never be set from the file
RESERVED_KEY = "config"

# Tried in order, quoted forms take precedence over the bare one.
_ASSIGNMENTS = [
    re.compile(r'^([A-Z0-9_]+)="(.*)"'),
    re.compile(r"^([A-Z0-9_]+)='(.*)'"),
    re.compile(r"^([A-Z0-9_]+)=(.*)$"),
]

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


class LineKind(enum.Enum):
    SKIP = "skip"
    ASSIGNMENT = "assignment"
    MALFORMED = "malformed"


class ParsedLine(NamedTuple):
    kind: LineKind
    key: Optional[str] = None
    value: Optional[str] = None


def fold_case(name: str) -> str:
    """Normalize an attribute name for lookups

    Only the ASCII range is folded, so the result does not depend on the
    locale of the host.
    """
    return name.translate(_ASCII_FOLD)


def parse_line(line: str) -> ParsedLine:
    """Classify a single line

    Returns a `ParsedLine` of kind `SKIP` for blank lines, comments and
    assignments to the reserved `config` key, `ASSIGNMENT` with the
    fold-cased key and the raw value for valid assignments, and
    `MALFORMED` for everything else.
    """

    line = line.rstrip("\r\n")

    stripped = line.lstrip()
    if not stripped or stripped.startswith("#"):
        return ParsedLine(LineKind.SKIP)

    for regex in _ASSIGNMENTS:
        m = regex.match(line)
        if not m:
            continue

        key = fold_case(m.group(1))
        if key == RESERVED_KEY:
            return ParsedLine(LineKind.SKIP)

        return ParsedLine(LineKind.ASSIGNMENT, key, m.group(2))

    return ParsedLine(LineKind.MALFORMED)
