"""Image file helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from filetype import guess

logger = logging.getLogger("traffic_cams")


def detect_image_format(data: bytes) -> Optional[str]:
    """Detect image type using filetype; returns lowercase extension."""
    kind = guess(data)
    if kind and kind.mime.startswith("image/"):
        ext = kind.extension.lower()
        if ext == "jpeg":
            return "jpg"
        return ext
    return None


def image_filename(image_url: str) -> str:
    """Name a snapshot after the final path segment of its URL."""
    return image_url.rsplit("/", 1)[-1]


def save_image(data: bytes, destination: Path) -> Path:
    """Write image bytes to ``destination``, replacing any existing file."""
    destination.write_bytes(data)
    logger.info("Saved %s (%d bytes)", destination, len(data))
    return destination
