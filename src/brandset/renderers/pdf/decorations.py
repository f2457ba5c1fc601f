"""Decorative shapes drawn on the cover page."""

from brandset.theme import Theme


class DecorationRenderer:
    """Draw the cover's circles and band in the theme colors."""

    def __init__(self, theme: Theme):
        self.theme = theme

    def render(self) -> str:
        primary = self.theme.primary.to_css()
        secondary = self.theme.secondary.to_css()
        return f"""
        <div class="cover-decorations">
            <svg class="decoration-corner" viewBox="0 0 200 200" xmlns="http://www.w3.org/2000/svg">
                <circle cx="200" cy="0" r="150" fill="{secondary}"/>
                <circle cx="200" cy="0" r="95" fill="{primary}"/>
            </svg>
            <svg class="decoration-band" viewBox="0 0 100 10" preserveAspectRatio="none" xmlns="http://www.w3.org/2000/svg">
                <rect x="0" y="0" width="70" height="10" fill="{primary}"/>
                <rect x="70" y="0" width="30" height="10" fill="{secondary}"/>
            </svg>
        </div>
        """

    def css(self) -> str:
        return """
.cover-decorations .decoration-corner {
    position: absolute;
    top: 0;
    right: 0;
    width: 8cm;
    height: 8cm;
}

.cover-decorations .decoration-band {
    position: absolute;
    bottom: 0;
    left: 0;
    width: 100%;
    height: 0.6cm;
}
"""
