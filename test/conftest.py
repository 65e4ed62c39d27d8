import pytest

from osrelease import OsRelease, paths


@pytest.fixture(autouse=True)
def reset_instance(monkeypatch):
    """Start every test without a shared instance"""
    monkeypatch.setattr(OsRelease, "_instance", None)


@pytest.fixture(name="make_osrelease")
def make_osrelease_fixture(tmp_path):
    """Write an `os-release` file into a fresh directory below `tmp_path`

    Returns the directory as a string, suitable for a search path.
    """

    def make(content: str, dirname: str = "etc") -> str:
        d = tmp_path / dirname
        d.mkdir(parents=True, exist_ok=True)
        (d / paths.FILENAME).write_text(content, encoding="utf8")
        return str(d)

    return make
