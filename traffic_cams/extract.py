"""Substring extraction of iframe sources and camera image URLs.

The camera pages are not guaranteed to be well-formed, so both helpers work
on raw text with literal delimiters instead of a markup parser.
"""

from __future__ import annotations

import re
from typing import List, Optional

from .errors import InvalidArgumentError

IFRAME_TOKEN = "<iframe"
IMGSRC_TOKEN = 'imgsrc = "'
_SRC_PATTERN = re.compile(re.escape('src="'), re.IGNORECASE)


def extract_iframe_sources(html: Optional[str]) -> List[str]:
    """Return the ``src`` value of every ``<iframe`` tag, in document order."""
    if not html:
        raise InvalidArgumentError("HTML content cannot be null or empty.")

    sources: List[str] = []
    for fragment in html.split(IFRAME_TOKEN)[1:]:
        match = _SRC_PATTERN.search(fragment)
        if not match:
            continue
        end = fragment.find('"', match.end())
        if end == -1:
            continue
        sources.append(fragment[match.end():end])
    return sources


def extract_image_source(iframe_body: Optional[str]) -> str:
    """Return the ``imgsrc`` URL assigned in an iframe's script, or ``""``."""
    if not iframe_body:
        raise InvalidArgumentError("Iframe data cannot be null or empty.")

    parts = iframe_body.split(IMGSRC_TOKEN)
    if len(parts) > 1:
        return parts[1].split('"')[0]
    return ""
