"""Thin HTTP client used for pages, iframes and images."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .errors import HttpError

logger = logging.getLogger("traffic_cams")


class HttpClient:
    """Pooled GET requests that raise HttpError on any failure."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, url: str) -> requests.Response:
        logger.debug("GET %s", url)
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise HttpError(url, str(exc), status_code=status) from exc
        except requests.RequestException as exc:
            raise HttpError(url, str(exc)) from exc
        return resp

    def fetch_text(self, url: str) -> str:
        return self._get(url).text

    def fetch_bytes(self, url: str) -> bytes:
        return self._get(url).content

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
