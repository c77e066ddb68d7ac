"""
Centralized constants for labsite.

Tunables for the interactive views and the environment variables that
override them live here so the TUI, the CLI and the tests agree on defaults.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

LABSITE_CONFIG_DIR = Path.home() / ".config" / "labsite"

# Bundled sample content shipped with the package
BUNDLED_CONTENT_DIR = Path(__file__).resolve().parent.parent / "data"

PUBLICATIONS_FILE = "publications.json"
MEDIA_FILE = "media.json"
NEWS_FILE = "news.json"

# =============================================================================
# INTERACTIVE VIEWS
# =============================================================================

DEFAULT_DEBOUNCE_MS = 300  # Search box quiet period before committing a query
DEFAULT_NEWS_LIMIT = 5  # News items on the home listing
MAX_AUTHORS_DISPLAYED = 3  # Beyond this, author lists end in "et al."
MAX_TITLE_DISPLAY = 80  # Truncation width for titles in tables/option lists

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "LABSITE_CONTENT_DIR": {
        "description": "Directory holding publications.json, media.json and news.json",
        "kind": "directory",
    },
    "LABSITE_THEME": {
        "description": "Theme preference override",
        "kind": "choice",
        "choices": ("light", "dark", "system"),
    },
    "LABSITE_DEBOUNCE_MS": {
        "description": "Search debounce interval in milliseconds",
        "kind": "milliseconds",
        "default": str(DEFAULT_DEBOUNCE_MS),
    },
}
