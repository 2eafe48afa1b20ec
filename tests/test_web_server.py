"""Tests for the HTTP endpoints."""

import json

import pytest
from aiohttp import test_utils

from police_buddy.assistant import PoliceBuddyAssistant
from police_buddy.config import Settings
from police_buddy.search import MockSearchProvider, SearchAugmentor
from police_buddy.web_server import WebServer


@pytest.fixture
def web_server():
    assistant = PoliceBuddyAssistant(
        augmentor=SearchAugmentor(MockSearchProvider(delay=0)),
        settings=Settings(search_delay=0.0),
    )
    return WebServer(assistant, port=0)


class TestWebServer:
    """Test the JSON API."""

    @pytest.mark.asyncio
    async def test_health(self, web_server):
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            resp = await client.get("/health")
            data = await resp.json()

        assert resp.status == 200
        assert data["status"] == "healthy"
        assert data["search"] is True

    @pytest.mark.asyncio
    async def test_chat(self, web_server):
        """Test a chat turn returns the reply and its analysis."""
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            resp = await client.post("/api/chat", json={"session_id": "s1", "text": "FIR/001/2024 status"})
            data = await resp.json()

        assert resp.status == 200
        assert data["intent"] == "fir_status"
        assert data["lang"] == "en"
        assert data["entities"]["case_number"] == "001/2024"
        assert "Under Investigation" in data["text"]
        assert data["fallback"] is False

    @pytest.mark.asyncio
    async def test_chat_validation(self, web_server):
        """Test missing fields and unknown languages are rejected."""
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            no_text = await client.post("/api/chat", json={"session_id": "s1"})
            bad_lang = await client.post("/api/chat", json={"session_id": "s1", "text": "hi", "lang": "fr"})
            bad_json = await client.post("/api/chat", data="not json")

        assert no_text.status == 400
        assert bad_lang.status == 400
        assert bad_json.status == 400

    @pytest.mark.asyncio
    async def test_verify_case(self, web_server):
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            resp = await client.post(
                "/api/cases/verify",
                json={"case_number": "FIR/001/2024", "phone_number": "9876543210"},
            )
            data = await resp.json()

        assert resp.status == 200
        assert data["verified"] is True

    @pytest.mark.asyncio
    async def test_file_complaint(self, web_server):
        """Test complaint filing and its validation."""
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            created = await client.post(
                "/api/complaints",
                json={"category": "Theft", "description": "Bicycle stolen", "location": "Guntur"},
            )
            data = await created.json()
            invalid = await client.post("/api/complaints", json={"category": "Theft", "description": ""})

        assert created.status == 201
        assert data["id"].startswith("COMP/AP/")
        assert data["status"] == "Open"
        assert invalid.status == 400

    @pytest.mark.asyncio
    async def test_unsupported_language_body(self, web_server):
        """Test the error body stays valid JSON whatever the language value holds."""
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            resp = await client.post("/api/chat", json={"session_id": "s1", "text": "hi", "lang": 'x"y'})
            body = await resp.text()

        assert resp.status == 400
        assert json.loads(body) == {"error": 'Unsupported language: x"y'}

    @pytest.mark.asyncio
    async def test_end_session(self, web_server):
        """Test ending sessions removes them from the registry."""
        sessions = web_server.assistant.sessions
        async with test_utils.TestClient(test_utils.TestServer(web_server.app)) as client:
            for i in range(3):
                await client.post("/api/chat", json={"session_id": f"s{i}", "text": "hello"})
                ended = await client.delete(f"/api/sessions/s{i}")
                assert ended.status == 200
                assert (await ended.json())["status"] == "ended"
            missing = await client.delete("/api/sessions/unknown")

        assert missing.status == 404
        assert len(sessions) == 0

    @pytest.mark.asyncio
    async def test_start_and_stop(self, web_server):
        """Test the server binds and releases its socket."""
        web_server.host = "127.0.0.1"

        await web_server.start()
        try:
            assert web_server.running
            with pytest.raises(RuntimeError, match="already running"):
                await web_server.start()
        finally:
            await web_server.stop()

        assert not web_server.running
        await web_server.stop()
