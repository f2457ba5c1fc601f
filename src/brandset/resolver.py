"""Cover configuration merging and placeholder resolution."""

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from brandset.config.defaults import AUTO, DEFAULT_COVER
from brandset.config.models import FontSpec
from brandset.theme import Theme

logger = logging.getLogger(__name__)

# Cover keys merged field by field instead of replaced
MERGEABLE_KEYS = ("title", "subtitle", "date", "author")


@dataclass
class ResolvedConfig:
    """Cover configuration with every known placeholder replaced."""

    cover: dict[str, Any]
    theme: Theme
    body_font: FontSpec
    title_font: FontSpec


def merge_cover(user: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
    """Merge a partial cover dictionary over the defaults.

    Top-level keys are replaced. The styled-element keys in MERGEABLE_KEYS are
    merged one level deep so a partial override keeps the other defaults.
    Neither the defaults nor `user` are modified.
    """
    merged = copy.deepcopy(DEFAULT_COVER)
    if not user:
        return merged

    for key, value in user.items():
        if key in MERGEABLE_KEYS and isinstance(value, Mapping):
            merged[key] = {**merged[key], **copy.deepcopy(dict(value))}
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _fill(section: Any, field: str, value: Any) -> None:
    if isinstance(section, dict) and section.get(field) == AUTO:
        section[field] = value


def resolve_placeholders(
    cover: dict[str, Any], theme: Theme, body_font: FontSpec, title_font: FontSpec
) -> dict[str, Any]:
    """Replace "auto" values in place, in a fixed order, and return `cover`.

    Each step only reads values settled by an earlier step. Placeholders in
    fields not listed here are left as they are.
    """
    title = cover.get("title")
    subtitle = cover.get("subtitle")
    date = cover.get("date")
    author = cover.get("author")

    _fill(title, "color", theme.primary)
    _fill(title, "font", title_font.name)
    title_color = title.get("color") if isinstance(title, dict) else theme.primary

    _fill(subtitle, "color", title_color)
    _fill(subtitle, "font", title_font.name)

    _fill(date, "color", title_color)
    _fill(date, "weight", body_font.weight)
    _fill(date, "font", body_font.name)

    _fill(author, "color", title_color)
    _fill(author, "font", body_font.name)

    return cover


def resolve(
    cover: Optional[Mapping[str, Any]],
    theme: Theme,
    body_font: FontSpec,
    title_font: FontSpec,
) -> ResolvedConfig:
    """Merge `cover` over the defaults and resolve its placeholders."""
    merged = merge_cover(cover)
    resolved = resolve_placeholders(merged, theme, body_font, title_font)
    logger.debug("Resolved cover configuration: %s", resolved)
    return ResolvedConfig(
        cover=resolved,
        theme=theme,
        body_font=body_font,
        title_font=title_font,
    )
