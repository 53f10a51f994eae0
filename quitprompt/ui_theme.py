"""UI theme definitions and selection helpers.

Themes are ANSI palettes handed to the renderer. ``PLAIN_THEME`` renders no
escape codes at all, which keeps frames easy to assert on in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    status: str
    help_key: str
    help_desc: str
    help_separator: str
    help_ellipsis: str
    dialog_border: str
    dialog_text: str
    dialog_choice: str
    backdrop: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    status="",
    help_key="\033[38;5;246m",
    help_desc="\033[38;5;249m",
    help_separator="\033[38;5;237m",
    help_ellipsis="\033[38;5;237m",
    dialog_border="\033[38;5;170m",
    dialog_text="",
    dialog_choice="\033[38;5;241m",
    backdrop="\033[38;5;237m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    status="",
    help_key="",
    help_desc="",
    help_separator="",
    help_ellipsis="",
    dialog_border="",
    dialog_text="",
    dialog_choice="",
    backdrop="",
)


def styled(text: str, color: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, or return it unchanged."""
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return concrete theme for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "styled",
    "resolve_theme",
]
