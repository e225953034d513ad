"""Environment variable operations for getoptions."""

import os
import sys

from .types import ConfigData

TRUTHY_VALUES = ("1", "true", "yes", "on")
FALSY_VALUES = ("0", "false", "no", "off")


def debug_log(message: str) -> None:
    """Log debug message when GETOPTIONS_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment variable operations."""

    # Environment variable -> config key understood by ConfigManager
    OVERRIDE_VARIABLES = {
        "GETOPTIONS_OPTION_CHAR": "option_char",
        "GETOPTIONS_SORT_MODE": "sort_mode",
        "GETOPTIONS_INCLUDE_ERRORS": "include_errors",
    }

    @staticmethod
    def get_config_overrides() -> ConfigData:
        """Get raw parser settings set through the environment."""
        overrides: ConfigData = {}
        for variable, key in EnvironmentHelper.OVERRIDE_VARIABLES.items():
            value = os.environ.get(variable)
            # Empty values count as unset
            if value:
                overrides[key] = value
                debug_log(f"get_config_overrides: {variable}={value!r}")
        return overrides

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check if debug tracing is switched on."""
        return os.environ.get("GETOPTIONS_DEBUG", "").lower() in TRUTHY_VALUES
