# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides sample content payloads and a scripted fake backend
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("BACKEND_URL", "http://backend.test")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import json

import httpx
import pytest


# =============================================================================
# Fake Backend
# =============================================================================

class FakeBackend:
    """
    Scripted stand-in for the content backend.

    Records every request it receives. Plug it into an AsyncClient through
    `httpx.MockTransport(backend.handler)`.
    """

    def __init__(self, scrape=None, scrape_status=200, contact_status=200, error=None):
        self.scrape = scrape
        self.scrape_status = scrape_status
        self.contact_status = contact_status
        self.error = error
        self.requests: list[httpx.Request] = []

    @property
    def contact_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/contact"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        if request.url.path == "/api/scrape":
            if isinstance(self.scrape, str):
                return httpx.Response(self.scrape_status, text=self.scrape)
            return httpx.Response(self.scrape_status, json=self.scrape)

        if request.url.path == "/api/contact":
            return httpx.Response(self.contact_status)

        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def full_content_dict():
    """Content payload with every field populated."""
    return {
        "title": "Qarakal Labs",
        "description": "Systems for capital and computation",
        "hero": {
            "heading": "Compute at the edge of what's possible",
            "subheading": "Research-grade infrastructure for quantitative teams",
        },
        "nav": [
            {"label": "Platform", "href": "#platform"},
            {"label": "Team", "href": "#team"},
        ],
        "sections": [
            {"title": "Who we are", "body": "A small team of engineers and researchers."},
            {"title": "Platform", "body": "Low-latency compute."},
            {"title": "Research", "body": "Open problems we work on."},
            {"title": "Partners", "body": "Who we work with."},
            {"title": "Overflow", "body": "Never rendered."},
        ],
        "unexpected": {"ignored": True},
    }


@pytest.fixture
def partial_content_dict():
    """Content payload with only some fields present."""
    return {
        "title": "Qarakal Labs",
        "nav": [],
        "sections": [
            {"body": "Body without a title."},
            {},
            {"title": "Only a title"},
        ],
    }


@pytest.fixture
def valid_contact():
    """A fully filled-in contact form."""
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "company": "Analytical Engines",
        "message": "We'd like to talk about compute.",
    }


@pytest.fixture
def backend():
    """A fake backend answering 200 with no content; tests adjust it."""
    return FakeBackend()
