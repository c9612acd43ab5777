"""Data models produced by a scrape run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class CameraImage:
    """Snapshot downloaded for one iframe."""

    iframe_src: str
    iframe_url: str
    image_url: str
    path: Path
    image_format: Optional[str] = None


@dataclass
class IframeFailure:
    """An iframe whose snapshot could not be obtained."""

    iframe_src: str
    message: str


@dataclass
class ScrapeReport:
    """Outcome of processing every iframe on the camera page."""

    page_url: Optional[str] = None
    iframe_sources: List[str] = field(default_factory=list)
    images: List[CameraImage] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: List[IframeFailure] = field(default_factory=list)

    @property
    def downloaded(self) -> int:
        return len(self.images)

    @property
    def failed(self) -> int:
        return len(self.failures)
