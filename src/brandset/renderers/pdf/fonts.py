"""Font registration and font rules for the print stylesheet."""

from typing import Union

from brandset.config.models import FontSpec, ThemeConfig

FONT_WEIGHTS = {
    "thin": 100,
    "extralight": 200,
    "light": 300,
    "regular": 400,
    "normal": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
    "extrabold": 800,
    "black": 900,
}


def css_weight(weight: Union[int, str]) -> str:
    """Convert a numeric or named weight to a CSS font-weight value."""
    if isinstance(weight, str):
        return str(FONT_WEIGHTS.get(weight.lower(), weight))
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def css_family(name: str, fallback: str = "sans-serif") -> str:
    return f'"{name}", {fallback}'


class FontSetup:
    """Emit @font-face rules and font assignments for the document."""

    def __init__(self, theme: ThemeConfig):
        self.default = theme.default_font
        self.body = theme.resolved_body_font
        self.title = theme.resolved_title_font
        self.code = theme.code_font

    def font_faces(self) -> str:
        """@font-face rules for every font given a file path."""
        rules = []
        seen: set[tuple[str, str]] = set()
        for font in (self.default, self.body, self.title, self.code):
            if font.path is None:
                continue
            key = (font.name, str(font.path))
            if key in seen:
                continue
            seen.add(key)
            rules.append(self._font_face(font))
        return "\n".join(rules)

    def _font_face(self, font: FontSpec) -> str:
        return f"""@font-face {{
    font-family: "{font.name}";
    src: url("{font.path.resolve().as_uri()}");
    font-weight: {css_weight(font.weight)};
}}"""

    def css(self) -> str:
        return f"""{self.font_faces()}

body {{
    font-family: {css_family(self.body.name)};
    font-weight: {css_weight(self.body.weight)};
}}

h1, h2, h3, h4, h5, h6, .outline h2 {{
    font-family: {css_family(self.title.name)};
    font-weight: {css_weight(self.title.weight)};
}}

code, pre {{
    font-family: {css_family(self.code.name, "monospace")};
    font-weight: {css_weight(self.code.weight)};
}}
"""
