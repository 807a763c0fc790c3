"""HTML escaping for markup sinks"""

import re
from typing import Dict

ENTITY_MAP: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
    "/": "&#x2F;",
}

_ESCAPE_RE = re.compile(r"[&<>\"'/]")


def escape_html(text: str) -> str:
    """
    Escape characters that are significant in HTML.

    Args:
        text: Raw text

    Returns:
        Text safe to embed in an HTML document
    """
    return _ESCAPE_RE.sub(lambda m: ENTITY_MAP[m.group(0)], text)
