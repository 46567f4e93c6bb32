"""
Tests for the slow endpoint and graceful shutdown draining.
"""

import threading
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, settings
from app.db.init_db import reset_db
from app.server import create_server


def test_graceful_wait_returns_message(client: TestClient, short_wait: float):
    started = time.monotonic()
    response = client.get("/graceful-wait")

    assert time.monotonic() - started >= short_wait
    assert response.status_code == 200
    assert response.text == "I waited for 0.05 seconds"
    assert response.headers["content-type"].startswith("text/plain")


def test_default_wait_is_twenty_seconds():
    assert Settings.model_fields["GRACEFUL_WAIT_SECONDS"].default == 20


class TestGracefulShutdown:
    """Runs a real server in a background thread."""

    @pytest.fixture
    def server(self, free_port: int, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "GRACEFUL_WAIT_SECONDS", 1.0)
        reset_db()
        server = create_server(host="127.0.0.1", port=free_port, shutdown_timeout=5)
        thread = threading.Thread(target=server.run, daemon=True)
        thread.start()

        deadline = time.monotonic() + 10
        while not server.started:
            if time.monotonic() > deadline or not thread.is_alive():
                pytest.fail("server did not start")
            time.sleep(0.05)

        yield server, thread, f"http://127.0.0.1:{free_port}"

        server.should_exit = True
        thread.join(timeout=10)

    @staticmethod
    def _request_in_background(url: str, results: dict) -> threading.Thread:
        def fetch():
            try:
                results["response"] = httpx.get(url, timeout=10)
            except httpx.HTTPError as e:
                results["error"] = e

        thread = threading.Thread(target=fetch)
        thread.start()
        return thread

    def test_slow_request_does_not_block_others(self, server):
        _, _, base_url = server
        results = {}
        slow = self._request_in_background(f"{base_url}/graceful-wait", results)
        time.sleep(0.2)

        started = time.monotonic()
        response = httpx.get(f"{base_url}/factors", timeout=5)
        elapsed = time.monotonic() - started

        assert response.status_code == 200
        assert elapsed < 0.7
        assert slow.is_alive()

        slow.join(timeout=10)
        assert results["response"].text == "I waited for 1 seconds"

    def test_in_flight_request_completes_during_shutdown(self, server, monkeypatch: pytest.MonkeyPatch):
        srv, server_thread, base_url = server
        monkeypatch.setattr(settings, "GRACEFUL_WAIT_SECONDS", 2.0)
        results = {}
        slow = self._request_in_background(f"{base_url}/graceful-wait", results)
        time.sleep(0.3)

        # begin orderly shutdown while the request is still waiting
        srv.should_exit = True
        time.sleep(0.5)

        # listener is closed during the drain, the slow request is still running
        assert slow.is_alive()
        with pytest.raises(httpx.ConnectError):
            httpx.get(f"{base_url}/factors", timeout=2)
        assert slow.is_alive()

        slow.join(timeout=10)
        assert "error" not in results
        assert results["response"].status_code == 200
        assert results["response"].text == "I waited for 2 seconds"

        server_thread.join(timeout=10)
        assert not server_thread.is_alive()

        with pytest.raises(httpx.ConnectError):
            httpx.get(f"{base_url}/factors", timeout=2)
