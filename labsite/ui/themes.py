"""
labsite TUI Theme Definitions.

The user picks a preference (light, dark or system). "system" follows the
terminal's background; ``resolve_theme`` turns a preference plus that signal
into the light or dark Textual theme actually applied.
"""

import logging
import os
from enum import Enum
from typing import Any, Mapping, Optional

from textual.theme import Theme

from labsite.config.settings import get_env_var
from labsite.config.ui_config import get_stored_theme, set_stored_theme

logger = logging.getLogger(__name__)


class ThemePreference(Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


class ResolvedTheme(Enum):
    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# labsite Light Theme
# =============================================================================

LABSITE_LIGHT = Theme(
    name="labsite-light",
    primary="#0969DA",      # Blue - main accent
    secondary="#8250DF",    # Purple - secondary accent
    accent="#BF3989",       # Magenta - selection/highlight
    foreground="#1F2328",   # Primary text (near black)
    background="#FFFFFF",   # Pure white
    surface="#F6F8FA",      # Cards/panels
    panel="#F0F2F5",        # Sidebars
    boost="#DFE3E8",        # Status bars, headers
    success="#1A7F37",
    warning="#9A6700",
    error="#CF222E",
    dark=False,
)

# =============================================================================
# labsite Dark Theme
# =============================================================================

LABSITE_DARK = Theme(
    name="labsite-dark",
    primary="#0178D4",
    secondary="#004578",
    accent="#ffa62b",
    foreground="#e0e0e0",
    background="#121212",
    surface="#1e1e1e",
    panel="#252526",
    boost="#2d2d2d",
    success="#4EBF71",
    warning="#ffa62b",
    error="#ba3c5b",
    dark=True,
)

LABSITE_THEMES: dict[str, Theme] = {
    "labsite-light": LABSITE_LIGHT,
    "labsite-dark": LABSITE_DARK,
}

# light -> dark -> system -> light
_CYCLE = [ThemePreference.LIGHT, ThemePreference.DARK, ThemePreference.SYSTEM]


def register_all_themes(app: Any) -> None:
    """
    Register the labsite themes with the app.

    Args:
        app: The Textual App instance
    """
    for theme in LABSITE_THEMES.values():
        app.register_theme(theme)


def parse_preference(value: Optional[str]) -> ThemePreference:
    """Parse a stored preference; absent or unknown values mean SYSTEM."""
    if value:
        try:
            return ThemePreference(value.strip().lower())
        except ValueError:
            logger.warning(f"Unknown theme preference {value!r}, using system")
    return ThemePreference.SYSTEM


def resolve_theme(preference: ThemePreference, os_prefers_dark: bool) -> ResolvedTheme:
    """Resolve a preference to the concrete light/dark theme."""
    if preference is ThemePreference.LIGHT:
        return ResolvedTheme.LIGHT
    if preference is ThemePreference.DARK:
        return ResolvedTheme.DARK
    return ResolvedTheme.DARK if os_prefers_dark else ResolvedTheme.LIGHT


def next_preference(preference: ThemePreference) -> ThemePreference:
    """Next preference in the toggle cycle."""
    return _CYCLE[(_CYCLE.index(preference) + 1) % len(_CYCLE)]


def detect_system_prefers_dark(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Guess whether the terminal has a dark background.

    Uses the COLORFGBG convention ("fg;bg", bg 7 or 15 meaning light).
    Terminals that do not set it are assumed dark.
    """
    environ = os.environ if environ is None else environ
    colorfgbg = environ.get("COLORFGBG", "")
    if not colorfgbg:
        return True
    background = colorfgbg.split(";")[-1]
    try:
        return int(background) not in (7, 15)
    except ValueError:
        return True


def textual_theme_name(resolved: ResolvedTheme) -> str:
    return "labsite-dark" if resolved is ResolvedTheme.DARK else "labsite-light"


def preference_indicator(preference: ThemePreference) -> str:
    """Short marker for status bars."""
    if preference is ThemePreference.LIGHT:
        return "☀️"
    if preference is ThemePreference.DARK:
        return "🌙"
    return "🖥️"


class ThemeStore:
    """Reads and writes the persisted preference; LABSITE_THEME overrides it."""

    def load(self) -> ThemePreference:
        override = get_env_var("LABSITE_THEME", validate=False)
        if override:
            return parse_preference(override)
        return parse_preference(get_stored_theme())

    def save(self, preference: ThemePreference) -> None:
        set_stored_theme(preference.value)
