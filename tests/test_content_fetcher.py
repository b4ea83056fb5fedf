# =============================================================================
# tests/test_content_fetcher.py - Content Fetch Tests
# =============================================================================
# Tests for ContentFetcher, ContentStore and load_content:
# - One GET to /api/scrape with no parameters
# - Every failure mode normalized to None
# - Status handling with and without require_success
# - Write-once store and liveness guard
#
# The backend is replaced with httpx.MockTransport (see conftest.FakeBackend).
# =============================================================================

import asyncio
import logging

import httpx

from core.services.content_fetcher import ContentFetcher
from core.services.content_store import ContentStore, load_content
from lib.utils import Liveness


async def _fetch(backend, **kwargs):
    async with backend.client() as client:
        return await ContentFetcher("http://backend.test/", client, **kwargs).fetch()


class TestContentFetcher:
    """Tests for ContentFetcher.fetch."""

    def test_single_get_without_params(self, backend, full_content_dict):
        backend.scrape = full_content_dict

        content = asyncio.run(_fetch(backend))

        assert content.title == "Qarakal Labs"
        assert len(backend.requests) == 1
        request = backend.requests[0]
        assert request.method == "GET"
        assert str(request.url) == "http://backend.test/api/scrape"
        assert not request.url.params

    def test_transport_error_is_absent(self, backend):
        backend.error = httpx.ConnectError("connection refused")

        assert asyncio.run(_fetch(backend)) is None

    def test_failure_logs_details(self, backend, caplog):
        backend.error = httpx.ConnectError("connection refused")

        with caplog.at_level(logging.WARNING, logger="core.services.content_fetcher"):
            asyncio.run(_fetch(backend))

        assert "CONTENT_FETCH_FAILED" in caplog.text
        assert "'url': 'http://backend.test/api/scrape'" in caplog.text
        assert "connection refused" in caplog.text

    def test_non_json_body_is_absent(self, backend):
        backend.scrape = "<html>Bad gateway</html>"

        assert asyncio.run(_fetch(backend)) is None

    def test_non_object_body_is_absent(self, backend):
        backend.scrape = ["not", "an", "object"]

        assert asyncio.run(_fetch(backend)) is None

    def test_status_ignored_by_default(self, backend):
        backend.scrape = {"title": "Served with an error status"}
        backend.scrape_status = 500

        content = asyncio.run(_fetch(backend))

        assert content.title == "Served with an error status"

    def test_require_success_rejects_error_status(self, backend):
        backend.scrape = {"title": "Served with an error status"}
        backend.scrape_status = 503

        assert asyncio.run(_fetch(backend, require_success=True)) is None

    def test_error_body_with_error_status_is_absent(self, backend):
        backend.scrape = "Internal Server Error"
        backend.scrape_status = 500

        assert asyncio.run(_fetch(backend)) is None


class TestContentStore:
    """Tests for the write-once store."""

    def test_initially_unresolved(self):
        store = ContentStore()

        assert store.content is None
        assert not store.resolved

    def test_set_once(self, full_content_dict):
        from core.models import ContentModel

        store = ContentStore()
        first = ContentModel.from_payload(full_content_dict)

        assert store.set(first) is True
        assert store.set(ContentModel(title="Later")) is False
        assert store.content is first

    def test_failed_fetch_resolves_to_absent(self):
        store = ContentStore()

        store.set(None)

        assert store.resolved
        assert store.content is None


class TestLoadContent:
    """Tests for load_content and the liveness guard."""

    def test_stores_result(self, backend):
        backend.scrape = {"title": "Loaded"}
        store = ContentStore()

        async def run():
            async with backend.client() as client:
                return await load_content(ContentFetcher("http://backend.test", client), store, Liveness())

        content = asyncio.run(run())

        assert content.title == "Loaded"
        assert store.content.title == "Loaded"

    def test_result_dropped_after_scope_closed(self):
        store = ContentStore()
        liveness = Liveness()

        async def slow_handler(request):
            # Owner goes away while the request is outstanding
            liveness.close()
            return httpx.Response(200, json={"title": "Too late"})

        async def run():
            transport = httpx.MockTransport(slow_handler)
            async with httpx.AsyncClient(transport=transport) as client:
                return await load_content(ContentFetcher("http://backend.test", client), store, liveness)

        assert asyncio.run(run()) is None
        assert not store.resolved
        assert store.content is None
