"""Configuration management functionality for getoptions."""

import re
from pathlib import Path

from .environment_helper import (
    FALSY_VALUES,
    TRUTHY_VALUES,
    EnvironmentHelper,
    debug_log,
)
from .exceptions import ConfigNotFoundError, InvalidConfigError
from .parser_config import ParserConfig
from .path_helper import PathHelper
from .results import SortMode
from .types import ConfigOverrides

MAX_CONFIG_SIZE = 1024 * 1024
MAX_LINE_LENGTH = 10000


class ConfigManager:
    """Manages loading parser settings from config files and the environment."""

    CONFIG_KEYS = ("option_char", "sort_mode", "include_errors")

    @staticmethod
    def find_config_file() -> Path | None:
        """Find getoptions.conf config file path."""
        return PathHelper.get_config_path()

    @staticmethod
    def load_config(config_file: Path) -> ParserConfig:
        """
        Load parser settings from a KEY=VALUE file.

        Args:
            config_file: Path to the configuration file

        Returns:
            ParserConfig with the file's values applied over the defaults

        Raises:
            InvalidConfigError: If the file has an unknown key, a bad value,
                an invalid encoding or is too large
        """
        settings: ConfigOverrides = {}

        file_size = config_file.stat().st_size
        if file_size > MAX_CONFIG_SIZE:
            raise InvalidConfigError(
                str(config_file), message=f"Config file too large ({file_size} bytes)"
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    ConfigManager._process_config_line(
                        line, line_num, str(config_file), settings
                    )
        except InvalidConfigError:
            raise
        except UnicodeDecodeError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Invalid file encoding: {e}"
            ) from e
        except OSError as e:
            raise InvalidConfigError(
                str(config_file), message=f"Failed to read config: {e}"
            ) from e

        debug_log(f"load_config: {config_file} -> {settings}")
        return ParserConfig().with_overrides(**settings)

    @staticmethod
    def load_parser_config(config_file: Path | None = None) -> ParserConfig:
        """
        Build the effective parser settings.

        Defaults are overlaid with the config file (the given one, or the
        one found by find_config_file) and then with GETOPTIONS_* environment
        variables.

        The environment is read only here, at load time. The returned config
        has to be passed to CommandLineParser explicitly; parsing never looks
        at the environment or at a process-wide option character.

        Raises:
            ConfigNotFoundError: If an explicit config_file does not exist
            InvalidConfigError: If the file or the environment holds bad values
        """
        if config_file is not None:
            if not config_file.exists():
                raise ConfigNotFoundError(str(config_file))
        else:
            config_file = ConfigManager.find_config_file()

        config = ParserConfig()
        if config_file:
            config = ConfigManager.load_config(config_file)

        overrides: ConfigOverrides = {}
        for key, value in EnvironmentHelper.get_config_overrides().items():
            overrides[key] = ConfigManager.parse_value(key, value, "environment")
        return config.with_overrides(**overrides)

    @staticmethod
    def _process_config_line(
        line: str, line_num: int, config_file: str, settings: ConfigOverrides
    ) -> None:
        """
        Process a single configuration line.

        Args:
            line: The configuration line to process
            line_num: Line number for error reporting
            config_file: Config file path for error reporting
            settings: Dictionary to store parsed settings
        """
        # Skip empty lines and comments
        if not line.strip() or line.lstrip().startswith("#"):
            return

        if len(line) > MAX_LINE_LENGTH:
            raise InvalidConfigError(
                config_file,
                line_num,
                f"Line too long ({len(line)} characters)",
            )

        line = line.strip()
        if "=" not in line:
            raise InvalidConfigError(
                config_file, line_num, f"Expected KEY=VALUE: '{line}'"
            )

        key, value = line.split("=", 1)
        key = key.strip().lower()
        if not ConfigManager._is_valid_key(key):
            raise InvalidConfigError(
                config_file, line_num, f"Unknown setting: '{key}'"
            )

        value = ConfigManager._strip_quotes_from_value(value.strip())
        settings[key] = ConfigManager.parse_value(key, value, config_file, line_num)

    @staticmethod
    def parse_value(
        key: str, value: str, source: str, line_num: int | None = None
    ) -> object:
        """
        Convert a raw setting to the type ParserConfig expects.

        Args:
            key: One of CONFIG_KEYS
            value: Raw value text
            source: File path or "environment", for error reporting
            line_num: Line number for error reporting

        Raises:
            InvalidConfigError: If the value is not valid for the key
        """
        if key == "option_char":
            if not ParserConfig.is_valid_option_char(value):
                raise InvalidConfigError(
                    source, line_num, f"Invalid option character: '{value}'"
                )
            return value

        if key == "sort_mode":
            if not ConfigManager._is_valid_sort_mode(value):
                names = ", ".join(mode.value for mode in SortMode)
                raise InvalidConfigError(
                    source,
                    line_num,
                    f"Invalid sort mode '{value}' (choose from {names})",
                )
            return SortMode.resolve(value)

        if key == "include_errors":
            lowered = value.lower()
            if lowered in TRUTHY_VALUES:
                return True
            if lowered in FALSY_VALUES:
                return False
            raise InvalidConfigError(
                source, line_num, f"Invalid boolean for include_errors: '{value}'"
            )

        raise InvalidConfigError(source, line_num, f"Unknown setting: '{key}'")

    @staticmethod
    def _is_valid_key(key: str) -> bool:
        """Check if key is a known setting name."""
        return bool(re.match(r"^[a-z_]+$", key)) and key in ConfigManager.CONFIG_KEYS

    @staticmethod
    def _is_valid_sort_mode(value: str) -> bool:
        """Check if value names a sort mode by value or member name."""
        lowered = value.lower()
        return any(lowered in (mode.value, mode.name.lower()) for mode in SortMode)

    @staticmethod
    def _strip_quotes_from_value(value: str) -> str:
        """Strip quotes from value if present."""
        if ConfigManager._is_value_quoted(value):
            return value[1:-1]
        return value

    @staticmethod
    def _is_value_quoted(value: str) -> bool:
        """Check if value is quoted with matching quotes."""
        return len(value) >= 2 and (
            (value.startswith('"') and value.endswith('"'))
            or (value.startswith("'") and value.endswith("'"))
        )
