"""Pydantic configuration models."""

from datetime import date
from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field

from brandset.config.defaults import DEFAULT_MAIN_COLOR


class FontSpec(BaseModel):
    """A font family with its weight."""

    name: str = "Source Sans Pro"
    weight: Union[int, str] = "regular"
    path: Optional[Path] = None  # Registered with @font-face when set


class ThemeConfig(BaseModel):
    """Colors, fonts and page furniture."""

    main_color: str = DEFAULT_MAIN_COLOR
    highlight: list[str] = Field(default_factory=list)

    # Fonts
    default_font: FontSpec = Field(default_factory=FontSpec)
    body_font: Optional[FontSpec] = None  # Falls back to default_font
    title_font: Optional[FontSpec] = None  # Falls back to default_font
    code_font: FontSpec = Field(
        default_factory=lambda: FontSpec(name="Fira Code", weight="regular")
    )

    second_header: bool = False
    lang: str = "fr"

    # None renders the default outline, False suppresses it,
    # a string is used as the outline content.
    outline: Union[Literal[False], str, None] = None

    # Page setup
    page_size: str = "A4"
    margin: str = "2.5cm"

    @property
    def resolved_body_font(self) -> FontSpec:
        return self.body_font or self.default_font

    @property
    def resolved_title_font(self) -> FontSpec:
        return self.title_font or self.default_font


class MetadataConfig(BaseModel):
    """Document metadata shown on the title page."""

    title: Optional[str] = None  # Unset titles are filled from the source document
    subtitle: Optional[str] = None
    author: Union[str, list[str]] = Field(default_factory=list)
    affiliation: Optional[str] = None
    year: int = Field(default_factory=lambda: date.today().year)
    class_label: Optional[str] = None
    start_date: Optional[date] = None  # None hides the date line
    last_updated: date = Field(default_factory=date.today)
    date_format: str = "%d/%m/%Y"
    logo: Optional[Path] = None

    @property
    def resolved_title(self) -> str:
        return self.title or "Untitled"


class StyleMapping(BaseModel):
    """Map Word styles to semantic elements."""

    chapter_heading_styles: list[str] = Field(
        default_factory=lambda: ["Heading 1", "Title", "Chapter"]
    )
    section_heading_styles: list[str] = Field(
        default_factory=lambda: ["Heading 2", "Heading 3", "Heading 4"]
    )
    code_styles: list[str] = Field(default_factory=lambda: ["Code", "Source Code", "HTML Preformatted"])
    blockquote_styles: list[str] = Field(default_factory=lambda: ["Quote", "Block Text"])


class BrandsetConfig(BaseModel):
    """Main configuration for the brandset tool."""

    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    # Partial cover overrides, merged over the built-in cover defaults
    cover: dict[str, Any] = Field(default_factory=dict)
    style_mapping: StyleMapping = Field(default_factory=StyleMapping)

    # Output
    output_dir: Path = Path("./output")
