"""
HTML layout with theme-based colors

Wraps each field of the entry in an inline-styled span
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Union

from taglog.core.errors import ConfigurationError
from taglog.core.log_entry import LogEntry
from taglog.layouts.base_layout import BaseLayout, format_time


@dataclass(frozen=True)
class HTMLLayoutColors:
    """Colors for the four fields of an HTML-formatted entry."""

    time: str
    level: str
    tag: str
    message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HTMLLayoutColors":
        """
        Create a color table from a mapping.

        Raises:
            ConfigurationError: If a field is missing
        """
        missing = [f.name for f in fields(cls) if f.name not in data]
        if missing:
            raise ConfigurationError(f"Color table is missing: {', '.join(missing)}")
        return cls(**{f.name: str(data[f.name]) for f in fields(cls)})


class HTMLColorTheme(Enum):
    """Built-in color themes."""

    LIGHT = "LIGHT"
    DARK = "DARK"
    SOLARIZED = "SOLARIZED"

    @classmethod
    def from_string(cls, name: str) -> "HTMLColorTheme":
        """
        Convert a theme name to HTMLColorTheme.

        Raises:
            ConfigurationError: If the name is not a known theme
        """
        try:
            return THEME_FROM_NAME[name.upper()]
        except (KeyError, AttributeError):
            raise ConfigurationError(f"Unknown color theme: {name!r}") from None


THEME_COLORS: Dict[HTMLColorTheme, HTMLLayoutColors] = {
    HTMLColorTheme.LIGHT: HTMLLayoutColors(
        time="black", level="dark red", tag="dark green", message="black"
    ),
    HTMLColorTheme.DARK: HTMLLayoutColors(
        time="white", level="red", tag="green", message="white"
    ),
    HTMLColorTheme.SOLARIZED: HTMLLayoutColors(
        time="#839496", level="#dc322f", tag="#859900", message="#839496"
    ),
}

THEME_FROM_NAME: Dict[str, HTMLColorTheme] = {theme.value: theme for theme in HTMLColorTheme}

if set(THEME_COLORS) != set(HTMLColorTheme):
    raise RuntimeError("THEME_COLORS must cover every HTMLColorTheme")


ColorsOrTheme = Union[HTMLColorTheme, HTMLLayoutColors, Mapping[str, Any], str, None]


class HTMLLayout(BaseLayout):
    """
    Markup layout for HTML sinks.

    Example output (DARK theme):
        <span style="color: white">2023-01-05 08:03:09</span>
        <span style="color: red">INFO</span> ...
    """

    def __init__(self, colors_theme: ColorsOrTheme = None):
        """
        Initialize HTML layout.

        Args:
            colors_theme: A theme (or theme name), an explicit color table
                (HTMLLayoutColors or a mapping with time/level/tag/message),
                or None for unstyled spans
        """
        self.colors = self._resolve_colors(colors_theme)

    @staticmethod
    def _resolve_colors(colors_theme: ColorsOrTheme) -> Optional[HTMLLayoutColors]:
        if colors_theme is None:
            return None
        if isinstance(colors_theme, HTMLColorTheme):
            return THEME_COLORS[colors_theme]
        if isinstance(colors_theme, str):
            return THEME_COLORS[HTMLColorTheme.from_string(colors_theme)]
        if isinstance(colors_theme, HTMLLayoutColors):
            return colors_theme
        if isinstance(colors_theme, Mapping):
            return HTMLLayoutColors.from_dict(colors_theme)
        raise ConfigurationError(f"Unsupported color scheme: {colors_theme!r}")

    def _style(self, color: Optional[str]) -> str:
        if color is None:
            return ""
        return f' style="color: {color}"'

    def _span(self, field_name: str, text: str) -> str:
        color = getattr(self.colors, field_name) if self.colors else None
        return f"<span{self._style(color)}>{text}</span>"

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as four styled spans.

        Args:
            entry: Log entry to format

        Returns:
            HTML fragment
        """
        return " ".join((
            self._span("time", format_time(entry.time)),
            self._span("level", entry.level.name),
            self._span("tag", f"[{entry.tag}]"),
            self._span("message", entry.message),
        ))

    def __repr__(self) -> str:
        """String representation."""
        return f"HTMLLayout(colors={self.colors!r})"
