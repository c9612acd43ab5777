"""Exceptions raised by the scraper."""

from __future__ import annotations

from typing import Optional


class InvalidArgumentError(ValueError):
    """An input that must be non-empty was empty or missing."""


class HttpError(Exception):
    """A fetch failed at the transport level or returned a non-success status."""

    def __init__(self, url: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
