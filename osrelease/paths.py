"""Search Path Handling

Locates the `os-release` file. As per `os-release(5)` the file is looked up
in a fixed list of directories and the first one that carries it wins.
"""

import os
from typing import Iterable, List, Optional

#: Name of the file inside each search directory
FILENAME = "os-release"

#: The default directories, in order of precedence
DEFAULT_SEARCH_PATH: List[str] = [
    "/etc",
    "/usr/lib",
    "/run/host",
]


def resolve(search_path: Iterable[str]) -> Optional[str]:
    """Find the first readable `os-release` file

    Iterates `search_path` in order and returns the full path of the first
    `<dir>/os-release` that exists and is readable by the calling process.
    Returns `None` if no directory carries one. Symlinks are followed as the
    file-system does, nothing else is resolved.
    """

    for directory in search_path:
        path = os.path.join(directory, FILENAME)
        if os.path.isfile(path) and os.access(path, os.R_OK):
            return path

    return None
