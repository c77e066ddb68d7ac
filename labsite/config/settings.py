"""Environment-driven settings for labsite.

Every variable labsite reads is declared in ``ENV_VAR_DEFINITIONS`` with a
kind ("directory", "choice" or "milliseconds"). The CLI reports bad values up
front as warnings; code that actually needs a value gets a
``ConfigurationError`` instead of a silent fallback.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..exceptions import ConfigurationError
from .constants import BUNDLED_CONTENT_DIR, ENV_VAR_DEFINITIONS


def _problem_with(definition: Dict[str, Any], value: str) -> Optional[str]:
    kind = definition.get("kind")
    if kind == "choice":
        choices = definition["choices"]
        if value.strip().lower() not in choices:
            return f"expected one of: {', '.join(choices)}"
    elif kind == "milliseconds":
        try:
            if int(value) < 0:
                return "must not be negative"
        except ValueError:
            return "must be a whole number of milliseconds"
    elif kind == "directory":
        if not Path(value).expanduser().is_dir():
            return "is not a directory"
    return None


def env_var_error(name: str, value: Optional[str]) -> Optional[str]:
    """Describe what is wrong with ``value`` for ``name``.

    Returns:
        An error message, or None for unset, unknown or acceptable values.
    """
    definition = ENV_VAR_DEFINITIONS.get(name)
    if definition is None or value is None:
        return None
    problem = _problem_with(definition, value)
    if problem:
        return f"{name}={value!r} {problem}"
    return None


def collect_env_var_errors() -> List[str]:
    """Errors for every labsite variable currently set to a bad value."""
    errors = []
    for name in ENV_VAR_DEFINITIONS:
        error = env_var_error(name, os.environ.get(name))
        if error:
            errors.append(error)
    return errors


def get_env_var(name: str, validate: bool = True) -> Optional[str]:
    """Read a labsite variable, falling back to its declared default.

    Raises:
        ConfigurationError: If ``validate`` is set and the value is unacceptable.
    """
    value = os.environ.get(name)
    if value is None:
        return ENV_VAR_DEFINITIONS.get(name, {}).get("default")
    if validate:
        error = env_var_error(name, value)
        if error:
            raise ConfigurationError(error, setting=name)
    return value


def get_content_dir(override: Optional[Path] = None) -> Path:
    """Resolve the content directory.

    Order: explicit override, LABSITE_CONTENT_DIR, bundled sample content.
    """
    if override is not None:
        return Path(override).expanduser()

    env_dir = get_env_var("LABSITE_CONTENT_DIR")
    if env_dir:
        return Path(env_dir).expanduser()

    return BUNDLED_CONTENT_DIR


def get_debounce_ms() -> int:
    """Search debounce interval, from LABSITE_DEBOUNCE_MS or the default."""
    return int(get_env_var("LABSITE_DEBOUNCE_MS"))
