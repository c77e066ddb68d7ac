"""
Badge variants for publication types and gallery categories.

Every member of each closed enum has an entry; tests assert the maps stay
exhaustive when an enum grows.
"""

from enum import Enum

from labsite.models import MediaCategory, PublicationType


class BadgeVariant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACCENT = "accent"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    NEUTRAL = "neutral"


PUBLICATION_TYPE_VARIANTS: dict[PublicationType, BadgeVariant] = {
    PublicationType.CONFERENCE: BadgeVariant.PRIMARY,
    PublicationType.JOURNAL: BadgeVariant.SUCCESS,
    PublicationType.WORKSHOP: BadgeVariant.ACCENT,
    PublicationType.PREPRINT: BadgeVariant.WARNING,
    PublicationType.THESIS: BadgeVariant.NEUTRAL,
}

MEDIA_CATEGORY_VARIANTS: dict[MediaCategory, BadgeVariant] = {
    MediaCategory.EVENT: BadgeVariant.PRIMARY,
    MediaCategory.TALK: BadgeVariant.ACCENT,
    MediaCategory.GROUP: BadgeVariant.SUCCESS,
    MediaCategory.LAB: BadgeVariant.NEUTRAL,
    MediaCategory.CONFERENCE: BadgeVariant.WARNING,
    MediaCategory.AWARD: BadgeVariant.ERROR,
}

# Rich styles used when rendering a badge in tables and option lists
VARIANT_STYLES: dict[BadgeVariant, str] = {
    BadgeVariant.PRIMARY: "bold blue",
    BadgeVariant.SECONDARY: "grey70",
    BadgeVariant.ACCENT: "bold magenta",
    BadgeVariant.SUCCESS: "bold green",
    BadgeVariant.WARNING: "bold yellow",
    BadgeVariant.ERROR: "bold red",
    BadgeVariant.NEUTRAL: "dim",
}


def publication_type_label(pub_type: PublicationType) -> str:
    return pub_type.value.capitalize()


def category_label(category: MediaCategory) -> str:
    return category.value.capitalize()


def badge_markup(text: str, variant: BadgeVariant) -> str:
    """Rich markup for a badge."""
    style = VARIANT_STYLES[variant]
    return f"[{style}]{text}[/{style}]"


def publication_type_badge(pub_type: PublicationType) -> str:
    return badge_markup(publication_type_label(pub_type), PUBLICATION_TYPE_VARIANTS[pub_type])


def category_badge(category: MediaCategory) -> str:
    return badge_markup(category.value, MEDIA_CATEGORY_VARIANTS[category])
