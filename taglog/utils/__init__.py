"""Helpers shared by the logger, layouts and appenders"""

from taglog.utils.html import escape_html
from taglog.utils.stringify import stringify

__all__ = ["escape_html", "stringify"]
