"""OS-Release Information

This module exposes the contents of `os-release(5)` through a single shared
`OsRelease` object per process. The object is created by the first call to
`OsRelease.instance()`, which locates and reads the file exactly once; every
later call returns the very same object and ignores its arguments.

Every attribute defined by `os-release(5)` is available as a read-only
property with a lower-case name (`osr.id`, `osr.version_id`, ...). Properties
of attributes missing from the file return `None`. Additional keys found in
the file are reachable via `get()` and, as long as their name does not clash
with a method or property of `OsRelease`, via plain attribute access. Use
`get()` to reach extension keys reliably: a key `PLATFORM` in the file is
shadowed by the `platform()` method.
"""

import os
import threading
from typing import Any, Dict, Iterable, List, Optional

from . import paths, store
from .meta import validate_config
from .parsing import fold_case

#: Attributes defined by `os-release(5)`, in the order it documents them
STANDARD_ATTRIBUTES = (
    "NAME",
    "ID",
    "ID_LIKE",
    "PRETTY_NAME",
    "CPE_NAME",
    "VARIANT",
    "VARIANT_ID",
    "VERSION",
    "VERSION_ID",
    "VERSION_CODENAME",
    "BUILD_ID",
    "IMAGE_ID",
    "IMAGE_VERSION",
    "HOME_URL",
    "DOCUMENTATION_URL",
    "SUPPORT_URL",
    "BUG_REPORT_URL",
    "PRIVACY_POLICY_URL",
    "LOGO",
    "ANSI_COLOR",
    "DEFAULT_HOSTNAME",
    "SYSEXT_LEVEL",
)

_UNSET = object()


class OsRelease:
    """Parsed `os-release` data of the running system

    Do not create this class directly, use `OsRelease.instance()`.
    """

    _instance: Optional["OsRelease"] = None
    _lock = threading.Lock()

    def __init__(self, config: Dict[str, Any]):
        self._config = dict(config)
        search_path = self._config.setdefault("search_path", list(paths.DEFAULT_SEARCH_PATH))

        self._path = paths.resolve(search_path)
        if self._path:
            self._config["osr_path"] = os.path.dirname(self._path)

        self._attrs = store.build(self._path)

    @classmethod
    def instance(cls, search_path: Optional[Iterable[str]] = None, **config) -> "OsRelease":
        """Get the shared instance, creating it on first use

        On the first call the instance is built from `search_path` (any
        iterable of directories to look for `os-release` in, defaults to
        `default_search_path()`) and any further keyword arguments, which
        are stored as configuration. Subsequent calls return the existing
        instance and their arguments have no effect.

        Raises `TypeError` if called through a class that is not compatible
        with the existing instance and `ValueError` if the configuration of
        the first call is invalid.
        """

        if not (isinstance(cls, type) and issubclass(cls, OsRelease)):
            raise TypeError(f"instance() called on incompatible type {cls!r}")

        inst = OsRelease._instance
        if inst is None:
            with OsRelease._lock:
                inst = OsRelease._instance
                if inst is None:
                    if search_path is not None:
                        if isinstance(search_path, Iterable) and not isinstance(search_path, (str, bytes)):
                            search_path = list(search_path)
                        config["search_path"] = search_path
                    validate_config(config)
                    inst = cls(config)
                    OsRelease._instance = inst

        if not isinstance(inst, cls):
            raise TypeError(f"instance() called on {cls.__name__}, "
                            f"but the existing instance is a {type(inst).__name__}")

        return inst

    @classmethod
    def is_initialized(cls) -> bool:
        """Check whether the shared instance exists already"""
        return OsRelease._instance is not None

    @staticmethod
    def standard_attribute_names() -> List[str]:
        return list(STANDARD_ATTRIBUTES)

    @staticmethod
    def default_search_path() -> List[str]:
        return list(paths.DEFAULT_SEARCH_PATH)

    @property
    def osrelease_path(self) -> Optional[str]:
        """Full path of the file that was read, `None` if none was found"""
        return self._path

    def get(self, name: str) -> Optional[str]:
        """Look up any attribute, case-insensitively"""
        return self._attrs.get(fold_case(name))

    def has_attr(self, name: str) -> bool:
        return fold_case(name) in self._attrs

    def found_attrs(self) -> List[str]:
        """Fold-cased names of all attributes set in the file"""
        return list(self._attrs)

    def as_dict(self) -> Dict[str, str]:
        return dict(self._attrs)

    def config(self, key: str, value: Any = _UNSET) -> Any:
        """Read or write a configuration value

        With one argument, returns the value of `key` or `None`. With two,
        stores `value` under `key` and returns it. The configuration is
        independent of the attributes read from the file.
        """

        if value is not _UNSET:
            self._config[key] = value
        return self._config.get(key)

    def platform(self) -> Optional[str]:
        """Name of the platform this OS derives from

        This is the first entry of `ID_LIKE`, falling back to `ID` for
        systems that do not declare a parent.
        """

        like = (self.get("ID_LIKE") or "").split()
        if like:
            return like[0]
        return self.get("ID")

    def describe_os(self) -> str:
        """Describe the operating system as `${ID}${VERSION_ID}`

        All dots are stripped from the version. Defaults are defined in
        `os-release(5)`: an unset `ID` means `linux`.
        """

        osrelease_id = self.get("ID") or "linux"
        osrelease_version_id = self.get("VERSION_ID") or ""

        return osrelease_id + osrelease_version_id.replace(".", "")

    def __getattr__(self, name: str) -> str:
        # Only reached for names that are not regular attributes, which
        # covers keys beyond the standard ones.
        attrs = self.__dict__.get("_attrs")
        if attrs is not None and not name.startswith("_"):
            key = fold_case(name)
            if key in attrs:
                return attrs[key]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __repr__(self):
        return f"{type(self).__name__}(path={self._path!r})"


def _standard_property(name: str) -> property:
    key = fold_case(name)

    def getter(self) -> Optional[str]:
        return self._attrs.get(key)

    getter.__name__ = key
    getter.__doc__ = f"Value of `{name}`, `None` if the file does not set it"
    return property(getter)


for _name in STANDARD_ATTRIBUTES:
    setattr(OsRelease, fold_case(_name), _standard_property(_name))
del _name
