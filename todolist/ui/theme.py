"""One Monokai color theme for the todolist UI.

All UI components reference these constants via f-string interpolation in
their CSS definitions, so this module is the single source of truth for the
application's colors.

Usage in Components
-------------------
    from todolist.ui.theme import BACKGROUND, ACCENT_COLOR, with_alpha

    class MyWidget(Widget):
        DEFAULT_CSS = f'''
        MyWidget {{
            background: {BACKGROUND};
            border: thick {ACCENT_COLOR};
        }}
        '''
"""

# ============================================================================
# BASE COLORS
# ============================================================================

BACKGROUND = "#272822"  # Main application background (dark charcoal)
FOREGROUND = "#F8F8F2"  # Primary text color (off-white)
SELECTION = "#49483E"   # Selected item background (medium gray)
COMMENT = "#75715E"     # Secondary/dimmed text (muted brown-gray)
BORDER = "#3E3D32"      # Borders and dividers (dark gray-green)


# ============================================================================
# ACCENT AND STATUS COLORS
# ============================================================================

ACCENT_COLOR = "#66D9EF"    # Cyan - focus borders and the add prompt
SUCCESS_COLOR = "#A6E22E"   # Green - Add button
ERROR_COLOR = "#F92672"     # Pink - row delete glyph
COMPLETE_COLOR = "#75715E"  # Dimmed gray for completed tasks (matches COMMENT)


# ============================================================================
# INTERACTION STATES
# ============================================================================

HOVER_OPACITY = "20"            # Hover effect transparency (hex: ~12% opacity)
FOCUS_COLOR = ACCENT_COLOR


def with_alpha(color: str, alpha: str) -> str:
    """Add alpha transparency to a hex color.

    Args:
        color: Base hex color string (e.g., '#272822')
        alpha: Alpha value as 2-digit hex string ('00'-'FF')

    Returns:
        Color with alpha channel appended (8-digit hex color code).

    Examples:
        >>> with_alpha(SELECTION, HOVER_OPACITY)
        '#49483E20'
    """
    return f"{color}{alpha}"
