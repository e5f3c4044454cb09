"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# $VAR, ${VAR} or ${VAR:default}
_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _substitute(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    if name in os.environ:
        return os.environ[name]
    default = match.group("default")
    if default is not None:
        return default
    # Unset variables are left as written
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings are expanded; dicts and lists are walked recursively; any other
    value is returned unchanged.

    Args:
        value: String, dict, list or scalar

    Returns:
        Value with ``$VAR``, ``${VAR}`` and ``${VAR:default}`` substituted
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_substitute, value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a loaded configuration dict."""
    return expand_env_vars(config)
