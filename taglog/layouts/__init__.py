"""
Layouts module

Layouts turn a LogEntry into the text an appender writes.
"""

from taglog.layouts.base_layout import BaseLayout, FunctionLayout, format_time
from taglog.layouts.basic_layout import BasicLayout
from taglog.layouts.html_layout import (
    HTMLColorTheme,
    HTMLLayout,
    HTMLLayoutColors,
    THEME_COLORS,
)

__all__ = [
    "BaseLayout",
    "FunctionLayout",
    "format_time",
    "BasicLayout",
    "HTMLColorTheme",
    "HTMLLayout",
    "HTMLLayoutColors",
    "THEME_COLORS",
]
