"""Branded title pages and styling for documents."""

from brandset.authors import normalize_authors
from brandset.config.defaults import AUTO, DEFAULT_COVER
from brandset.resolver import ResolvedConfig, merge_cover, resolve
from brandset.theme import Color, Theme

__all__ = [
    "AUTO",
    "DEFAULT_COVER",
    "Color",
    "ResolvedConfig",
    "Theme",
    "merge_cover",
    "normalize_authors",
    "resolve",
]
