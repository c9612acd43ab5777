"""MCP server exposing the traffic camera tools."""

from __future__ import annotations

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .client import HttpClient
from .config import ScrapeConfig
from .extract import extract_iframe_sources
from .pipeline import run

logger = logging.getLogger("traffic_cams.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="traffic-cams")


@mcp.tool()
def list_cameras() -> str:
    """Return the iframe source of every camera on the mosaic page."""
    config = ScrapeConfig()
    with HttpClient() as client:
        html = client.fetch_text(config.page_url)
    return "\n".join(extract_iframe_sources(html))


@mcp.tool()
def download_cameras(output_dir: str = ".") -> str:
    """Download every camera snapshot into ``output_dir`` and summarise."""
    destination = Path(output_dir).expanduser()
    if not destination.is_dir():
        raise FileNotFoundError(f"Output directory does not exist: {destination}")

    config = ScrapeConfig(output_root=destination)
    with HttpClient() as client:
        report = run(client, config)

    lines = [f"Downloaded {report.downloaded} of {len(report.iframe_sources)} cameras."]
    lines.extend(str(image.path) for image in report.images)
    for failure in report.failures:
        lines.append(f"Error processing iframe source {failure.iframe_src}: {failure.message}")
    return "\n".join(lines)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
