"""Configuration objects and constants for the camera scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

CAMERAS_URL = "https://cic.tenerife.es/web3/mosaico_cctv/camaras_trafico_b.html"
BASE_PATH = "https://cic.tenerife.es/web3"
RELATIVE_MARKER = ".."


@dataclass
class ScrapeConfig:
    """Settings for a single scrape run."""

    output_root: Path = field(default_factory=Path.cwd)
    page_url: str = CAMERAS_URL
    timeout: Optional[float] = None
