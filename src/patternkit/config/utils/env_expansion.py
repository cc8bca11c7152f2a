"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR}, ${VAR:default} and $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _expand_string(value: str) -> str:
    def replace(match: "re.Match[str]") -> str:
        braced, default, bare = match.group(1), match.group(2), match.group(3)
        name = braced or bare
        if name in os.environ:
            return os.environ[name]
        if default is not None:
            return default
        return match.group(0)

    return _ENV_PATTERN.sub(replace, value)


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in strings, dicts and lists.

    Unknown variables without a default are left as written.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables across a whole configuration dictionary."""
    return expand_env_vars(config)
