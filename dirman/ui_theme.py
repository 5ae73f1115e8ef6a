"""UI theme definitions and selection helpers.

Themes map the semantic colors carried by styled lines (and the chrome) to
ANSI SGR sequences. The plain theme is used for ``--no-color``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .render.styled import Color


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    blue: str
    red: str
    green: str
    gray: str
    title: str
    error: str
    outline: str
    outline_active: str
    indicator: str
    prompt: str

    def sgr_for(self, color: Color | None) -> str:
        """Return the escape sequence for a segment color (empty for default)."""
        if color is None:
            return ""
        if color is Color.BLUE:
            return self.blue
        if color is Color.RED:
            return self.red
        if color is Color.GREEN:
            return self.green
        return self.gray


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    blue="\033[1;34m",
    red="\033[31m",
    green="\033[32m",
    gray="\033[90m",
    title="\033[1m",
    error="\033[1;31m",
    outline="",
    outline_active="\033[31m",
    indicator="\033[38;5;44m",
    prompt="\033[1m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    blue="\033[1;38;5;45m",
    red="\033[38;5;203m",
    green="\033[38;5;84m",
    gray="\033[2;38;5;110m",
    title="\033[1;38;5;45m",
    error="\033[1;38;5;203m",
    outline="\033[2;38;5;31m",
    outline_active="\033[38;5;39m",
    indicator="\033[38;5;153m",
    prompt="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    blue="",
    red="",
    green="",
    gray="",
    title="",
    error="",
    outline="",
    outline_active="",
    indicator="",
    prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
