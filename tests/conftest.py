import tempfile
from pathlib import Path

import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class RefusingFlagTarget:
    """Flag target whose set() always fails, to simulate a dangling handle."""

    def __init__(self):
        self.calls = 0

    def set(self, value):
        self.calls += 1
        raise RuntimeError("flag target is gone")


@pytest.fixture
def flag_cell():
    """Fixture for a fresh flag cell starting at 0."""
    from getoptions.definitions import FlagCell

    return FlagCell(0)


@pytest.fixture
def refusing_flag_target():
    """Fixture for a flag target that raises on every write."""
    return RefusingFlagTarget()


@pytest.fixture
def basic_definitions():
    """
    Fixture for a small option table covering all argument policies.

    Layout:
        0: -a / --all        not allowed   "all"
        1: -b / --build      mandatory     "build"
        2: -c / --color      optional      "color"
        3: (non-option)                    "file"
    """
    from getoptions.definitions import ArgumentPolicy, OptionDefinition

    return [
        OptionDefinition("a", "all", ArgumentPolicy.NOT_ALLOWED, "all"),
        OptionDefinition("b", "build", ArgumentPolicy.MANDATORY, "build"),
        OptionDefinition("c", "color", ArgumentPolicy.OPTIONAL, "color"),
        OptionDefinition(return_value="file"),
    ]


@pytest.fixture
def basic_table(basic_definitions):
    """Fixture for the basic option table."""
    from getoptions.definitions import OptionTable

    return OptionTable(basic_definitions)


@pytest.fixture
def long_definitions():
    """
    Fixture for a table exercising long option abbreviation.

    Layout:
        0: --file            mandatory     "file"
        1: --filetype        mandatory     "filetype"
        2: -v / --verbose    not allowed   "verbose"
        3: --sort / --order  optional      "sort"
    """
    from getoptions.definitions import ArgumentPolicy, OptionDefinition

    return [
        OptionDefinition((), "file", ArgumentPolicy.MANDATORY, "file"),
        OptionDefinition((), "filetype", ArgumentPolicy.MANDATORY, "filetype"),
        OptionDefinition("v", "verbose", ArgumentPolicy.NOT_ALLOWED, "verbose"),
        OptionDefinition((), ["sort", "order"], ArgumentPolicy.OPTIONAL, "sort"),
    ]


@pytest.fixture
def long_table(long_definitions):
    """Fixture for the long option table."""
    from getoptions.definitions import OptionTable

    return OptionTable(long_definitions)


@pytest.fixture
def cursor_factory():
    """
    Fixture building an ArgumentCursor positioned on a given token.

    Usage:
        def test_something(cursor_factory):
            cursor = cursor_factory(["-b", "value"])
    """
    from getoptions.argument_cursor import ArgumentCursor

    def _make_cursor(arguments, index=0):
        cursor = ArgumentCursor(arguments)
        cursor.index = index
        return cursor

    return _make_cursor


@pytest.fixture
def clean_environment(monkeypatch):
    """Fixture removing every GETOPTIONS_* variable for the test."""
    for variable in (
        "GETOPTIONS_DEBUG",
        "GETOPTIONS_OPTION_CHAR",
        "GETOPTIONS_SORT_MODE",
        "GETOPTIONS_INCLUDE_ERRORS",
    ):
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch


@pytest.fixture
def temp_config_file():
    """Fixture for temporary config files."""
    temp_dir = tempfile.mkdtemp()
    config_path = Path(temp_dir) / "getoptions.conf"
    yield config_path
    # Cleanup after test
    import shutil

    shutil.rmtree(temp_dir)


@pytest.fixture
def temp_config_with_content(temp_config_file):
    """Fixture for temporary config files with given content."""

    def _create_config(content):
        with open(temp_config_file, "w", encoding="utf-8") as f:
            f.write(content)
        return temp_config_file

    return _create_config


@pytest.fixture
def xdg_config_scenarios(monkeypatch, tmp_path):
    """
    Fixture for config file discovery scenarios.

    Each entry sets XDG_CONFIG_HOME and HOME for one layout and returns the
    config path expected to be found (or None).
    """

    xdg_dir = tmp_path / "xdg"
    home_dir = tmp_path / "home"
    xdg_dir.mkdir()
    (home_dir / ".config").mkdir(parents=True)

    def _write(path):
        path.write_text("sort_mode=input\n", encoding="utf-8")
        return path

    def _xdg_exists():
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_dir))
        monkeypatch.setenv("HOME", str(home_dir))
        _write(home_dir / ".config" / "getoptions.conf")
        return _write(xdg_dir / "getoptions.conf")

    def _home_fallback():
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_dir))
        monkeypatch.setenv("HOME", str(home_dir))
        return _write(home_dir / ".config" / "getoptions.conf")

    def _home_only():
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(home_dir))
        return _write(home_dir / ".config" / "getoptions.conf")

    def _no_config():
        monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg_dir))
        monkeypatch.setenv("HOME", str(home_dir))
        return None

    return {
        "xdg_exists": _xdg_exists,
        "home_fallback": _home_fallback,
        "home_only": _home_only,
        "no_config": _no_config,
    }
