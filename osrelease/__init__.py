"""OS-Release Module

The `osrelease` module reads the FreeDesktop.Org `os-release(5)` file of the
running system and provides its contents through the shared
`OsRelease.instance()`. The building blocks are available as submodules:
`osrelease.paths` locates the file, `osrelease.parsing` implements the line
grammar and `osrelease.store` reads a file into a dictionary.
"""

from .release import STANDARD_ATTRIBUTES, OsRelease
from .store import OsReleaseWarning

__version__ = "1"

__all__ = [
    "OsRelease",
    "OsReleaseWarning",
    "STANDARD_ATTRIBUTES",
    "__version__",
]
