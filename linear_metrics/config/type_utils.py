"""Type utilities for configuration processing."""

from .exceptions import ConfigError

TRUE_VALUES = ("true", "yes", "on", "1")
FALSE_VALUES = ("false", "no", "off", "0")


def force_list(val) -> list:
    """
    Ensure the value is a list.
    """
    return list(val) if isinstance(val, (list, tuple)) else [val]


def force_bool(key, value) -> bool:
    """
    Convert a YAML boolean or a yes/no style string to bool, raise
    ConfigError on failure.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.strip().lower() in TRUE_VALUES:
            return True
        if value.strip().lower() in FALSE_VALUES:
            return False
    raise ConfigError(f"Value `{value}` for key `{expand_key(key)}` is not true or false")


def force_str(key, value) -> str:
    """
    Ensure value is a non-empty scalar and return it as a string.
    """
    if value is None or isinstance(value, (list, tuple, dict)) or str(value).strip() == "":
        raise ConfigError(f"Value `{value}` for key `{expand_key(key)}` must be a non-empty string")
    return str(value).strip()


def expand_key(key) -> str:
    """
    Expand config key for display.
    """
    return str(key).replace("_", " ").lower()
