"""Fetch the camera page, follow each iframe and save its snapshot."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .client import HttpClient
from .config import BASE_PATH, RELATIVE_MARKER, ScrapeConfig
from .errors import InvalidArgumentError
from .extract import extract_iframe_sources, extract_image_source
from .images import detect_image_format, image_filename, save_image
from .models import CameraImage, IframeFailure, ScrapeReport

logger = logging.getLogger("traffic_cams")


def resolve_iframe_url(source: str) -> str:
    """Turn a relative iframe ``src`` into an absolute URL on the camera site."""
    return source.replace(RELATIVE_MARKER, BASE_PATH)


def download_image(
    client: HttpClient,
    image_url: str,
    destination_dir: Path,
) -> Tuple[Path, Optional[str]]:
    """Fetch ``image_url`` and store it under its own file name.

    Returns the written path and the sniffed image format, if any.
    """
    if not image_url:
        raise InvalidArgumentError("Image URL cannot be null or empty.")
    data = client.fetch_bytes(image_url)
    image_format = detect_image_format(data)
    logger.debug("Detected format %s for %s", image_format, image_url)
    destination = destination_dir / image_filename(image_url)
    return save_image(data, destination), image_format


def process_iframe(
    client: HttpClient,
    source: str,
    config: ScrapeConfig,
) -> Optional[CameraImage]:
    """Download the snapshot behind one iframe; ``None`` if it has no image."""
    iframe_url = resolve_iframe_url(source)
    body = client.fetch_text(iframe_url)
    image_url = extract_image_source(body)
    if not image_url:
        logger.debug("No image source in %s", iframe_url)
        return None

    path, image_format = download_image(client, image_url, config.output_root)
    return CameraImage(
        iframe_src=source,
        iframe_url=iframe_url,
        image_url=image_url,
        path=path,
        image_format=image_format,
    )


def process_cameras(
    html: Optional[str],
    client: HttpClient,
    config: ScrapeConfig,
) -> ScrapeReport:
    """Process every iframe in ``html`` sequentially.

    A failure on one iframe is logged and recorded in the report; the
    remaining iframes are still processed.
    """
    if not html:
        raise InvalidArgumentError("HTML content cannot be null or empty.")

    sources = extract_iframe_sources(html)
    logger.info("Found %d camera iframes", len(sources))
    report = ScrapeReport(page_url=config.page_url, iframe_sources=sources)

    for source in sources:
        try:
            image = process_iframe(client, source, config)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Error processing iframe source %s: %s", source, exc)
            report.failures.append(IframeFailure(source, str(exc)))
            continue
        if image is None:
            report.skipped.append(source)
        else:
            report.images.append(image)
    return report


def run(client: HttpClient, config: ScrapeConfig) -> ScrapeReport:
    """Fetch the camera page and download every snapshot it references.

    Raises ``HttpError`` if the page itself cannot be fetched.
    """
    logger.info("Loading %s", config.page_url)
    html = client.fetch_text(config.page_url)
    return process_cameras(html, client, config)
