"""Shared fixtures for the traffic camera tests."""

from unittest.mock import Mock

import pytest

from traffic_cams.client import HttpClient
from traffic_cams.config import ScrapeConfig


@pytest.fixture
def config(tmp_path):
    """Scrape settings that write into a temporary directory."""
    return ScrapeConfig(output_root=tmp_path)


@pytest.fixture
def client():
    """An HttpClient stand-in whose responses are set per test."""
    return Mock(spec=HttpClient)
