"""Default configuration values."""

AUTO = "auto"

DEFAULT_MAIN_COLOR = "E94845"

# Fraction by which the main color is lightened to get the secondary color
SECONDARY_LIGHTEN = 0.3

DEFAULT_COVER = {
    "bg": None,
    "decorations": True,
    "padding": "2.5cm",
    "spacing": "1.2em",
    "title": {
        "color": AUTO,
        "weight": "bold",
        "size": "2.6em",
        "font": AUTO,
    },
    "subtitle": {
        "color": AUTO,
        "weight": "regular",
        "size": "1.5em",
        "font": AUTO,
    },
    "date": {
        "color": AUTO,
        "weight": AUTO,
        "size": "1em",
        "font": AUTO,
        "range": False,
    },
    "author": {
        "color": AUTO,
        "weight": "medium",
        "size": "1.1em",
        "font": AUTO,
    },
}

DEFAULT_CONFIG_YAML = """\
# Brandset Configuration

metadata:
  title: null           # null = use the title of the source document
  subtitle: null
  author:
    - "Author Name"
  affiliation: null
  # year: 2026          # Defaults to the current year
  class_label: null     # Course or class shown above the title
  start_date: null      # Set (YYYY-MM-DD) to show a date line on the cover
  # last_updated: 2026-01-31   # Defaults to today
  date_format: "%d/%m/%Y"
  logo: null            # Path to a logo image

theme:
  main_color: "E94845"  # Secondary color is derived from it
  highlight: []         # Literal strings highlighted in the body
  default_font:
    name: "Source Sans Pro"
    weight: "regular"
  body_font: null       # Falls back to default_font
  title_font: null      # Falls back to default_font
  code_font:
    name: "Fira Code"
    weight: "regular"
  second_header: false  # Show the chapter title as a second running header
  lang: "fr"
  outline: null         # null = default outline, false = none, or custom text
  page_size: "A4"
  margin: "2.5cm"

# Cover overrides; anything left out keeps its default.
# "auto" values inherit from the field named in the trailing comment.
cover:
  bg: null              # Cover background color, null = transparent
  decorations: true
  padding: "2.5cm"
  spacing: "1.2em"
  title:
    color: auto         # main_color
    weight: "bold"
    size: "2.6em"
    font: auto          # title font
  subtitle:
    color: auto         # title color
    size: "1.5em"
  date:
    color: auto         # title color
    weight: auto        # body font weight
    font: auto          # body font
    range: false        # true shows "start - last updated"
  author:
    color: auto         # title color
    font: auto          # body font

# Map Word styles to semantic elements
style_mapping:
  chapter_heading_styles:
    - "Heading 1"
    - "Title"
    - "Chapter"
  section_heading_styles:
    - "Heading 2"
    - "Heading 3"
    - "Heading 4"
  code_styles:
    - "Code"
    - "Source Code"
  blockquote_styles:
    - "Quote"
    - "Block Text"

output_dir: "./output"
"""
