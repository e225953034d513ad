"""Tests for the path helper functionality in getoptions."""

from pathlib import Path

from getoptions.path_helper import CONFIG_FILE_NAME, PathHelper


class TestPathHelperUnit:
    """Unit tests for the PathHelper class."""

    def test_xdg_preferred_over_home(self, xdg_config_scenarios):
        expected = xdg_config_scenarios["xdg_exists"]()
        assert PathHelper.get_config_path() == expected
        assert expected.name == CONFIG_FILE_NAME

    def test_home_fallback(self, xdg_config_scenarios):
        expected = xdg_config_scenarios["home_fallback"]()
        assert PathHelper.get_config_path() == expected

    def test_home_without_xdg(self, xdg_config_scenarios):
        expected = xdg_config_scenarios["home_only"]()
        assert PathHelper.get_config_path() == expected

    def test_nothing_found(self, xdg_config_scenarios):
        xdg_config_scenarios["no_config"]()
        assert PathHelper.get_config_path() is None

    def test_no_home_or_xdg(self, monkeypatch):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.delenv("HOME", raising=False)
        assert PathHelper.get_config_path() is None

    def test_directory_is_not_a_config_file(self, monkeypatch, tmp_path):
        (tmp_path / CONFIG_FILE_NAME).mkdir()
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        monkeypatch.delenv("HOME", raising=False)
        assert PathHelper.get_config_path() is None

    def test_is_readable_file(self, tmp_path):
        config_path = tmp_path / CONFIG_FILE_NAME
        assert not PathHelper._is_readable_file(config_path)
        config_path.write_text("", encoding="utf-8")
        assert PathHelper._is_readable_file(config_path)
        assert not PathHelper._is_readable_file(Path(tmp_path))
