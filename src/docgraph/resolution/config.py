"""
Configuration for the type resolution pass.

Defines the plugin name, event priority and dangling-reference logging.
"""

from docgraph.exceptions import ConfigError

# Reference resolution settings
RESOLUTION_CONFIG = {
    "plugin_name": "type",        # Name under which the pass registers with the converter
    "priority": 0,                # Event priority (higher runs first)
    "log_dangling": True,         # Log unresolved references at DEBUG level
}


def get_config_value(section: dict, key: str):
    """
    Read a setting, failing loudly on typos.

    Raises:
        ConfigError: If ``key`` is not a known setting of ``section``
    """
    if key not in section:
        raise ConfigError(f"Unknown resolution setting '{key}'")
    return section[key]
