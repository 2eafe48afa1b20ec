"""Web server exposing the assistant over JSON endpoints."""

import json
import logging
from typing import Any

from aiohttp import web

from police_buddy.assistant import PoliceBuddyAssistant
from police_buddy.config import Language

logger = logging.getLogger(__name__)


def _bad_request(message: str) -> web.HTTPBadRequest:
    return web.HTTPBadRequest(text=json.dumps({"error": message}), content_type="application/json")


def _parse_language(value: Any) -> Language | None:
    if value in (None, ""):
        return None
    try:
        return Language(value)
    except ValueError:
        raise _bad_request(f"Unsupported language: {value}")


class WebServer:
    """HTTP server for chat, case verification and complaint endpoints."""

    def __init__(self, assistant: PoliceBuddyAssistant, host: str = "0.0.0.0", port: int = 3000):
        """Initialize web server."""
        self.assistant = assistant
        self.host = host
        self.port = port
        self.app = web.Application()
        self._runner: web.AppRunner | None = None
        self._setup_routes()
        logger.info(f"Web server initialized on port {port}")

    def _setup_routes(self):
        """Set up HTTP routes."""
        self.app.router.add_get("/", self._handle_health)
        self.app.router.add_get("/health", self._handle_health)
        self.app.router.add_post("/api/chat", self._handle_chat)
        self.app.router.add_post("/api/cases/verify", self._handle_verify_case)
        self.app.router.add_post("/api/complaints", self._handle_complaint)
        self.app.router.add_delete("/api/sessions/{session_id}", self._handle_end_session)
        logger.info("Routes configured: /, /health, /api/chat, /api/cases/verify, /api/complaints, /api/sessions")

    async def _read_json(self, request: web.Request) -> dict[str, Any]:
        try:
            data = await request.json()
        except ValueError:
            raise _bad_request("Invalid JSON body")
        if not isinstance(data, dict):
            raise _bad_request("JSON object expected")
        return data

    async def _handle_health(self, request: web.Request) -> web.Response:
        """Health check endpoint."""
        search_healthy = await self.assistant.augmentor.provider.health_check()
        return web.json_response({
            "status": "healthy",
            "service": "AP Police Buddy",
            "search": search_healthy,
            "sessions": len(self.assistant.sessions),
        })

    async def _handle_chat(self, request: web.Request) -> web.Response:
        """
        Handle a chat turn.

        Expects JSON: {"session_id": "...", "text": "...", "lang": "en" | "te"}
        """
        data = await self._read_json(request)
        session_id = str(data.get("session_id", "")).strip()
        text = str(data.get("text", "")).strip()
        lang = _parse_language(data.get("lang"))

        if not session_id:
            return web.json_response({"error": "No session_id provided"}, status=400)
        if not text:
            return web.json_response({"error": "No text provided"}, status=400)

        reply = await self.assistant.handle_message(session_id, text, lang)
        entities = reply.parsed.entities
        return web.json_response({
            "session_id": session_id,
            "text": reply.text,
            "lang": reply.language.value,
            "intent": reply.parsed.intent.value,
            "confidence": reply.parsed.confidence,
            "entities": {
                "case_number": entities.case_number,
                "location": entities.location,
                "phone_number": entities.phone_number,
                "timeframe": entities.timeframe,
            },
            "fallback": reply.fallback,
        })

    async def _handle_verify_case(self, request: web.Request) -> web.Response:
        """
        Handle FIR verification.

        Expects JSON: {"case_number": "...", "phone_number": "...", "lang": "en" | "te"}
        """
        data = await self._read_json(request)
        case_number = str(data.get("case_number", "")).strip()
        phone_number = str(data.get("phone_number", "")).strip()
        lang = _parse_language(data.get("lang")) or Language.ENGLISH

        if not case_number or not phone_number:
            return web.json_response({"error": "case_number and phone_number are required"}, status=400)

        record = self.assistant.verify_case(case_number, phone_number)
        return web.json_response({
            "verified": record is not None,
            "text": self.assistant.render_verified_case(record, lang),
        })

    async def _handle_complaint(self, request: web.Request) -> web.Response:
        """
        Handle complaint filing.

        Expects JSON: {"category": "...", "description": "...", "location": "...",
        "contact_number": "...", "lang": "en" | "te"}
        """
        data = await self._read_json(request)
        lang = _parse_language(data.get("lang")) or Language.ENGLISH

        try:
            complaint, confirmation = self.assistant.file_complaint(
                category=str(data.get("category", "")),
                description=str(data.get("description", "")),
                location=str(data.get("location", "")),
                contact_number=str(data.get("contact_number", "")),
                lang=lang,
            )
        except ValueError as e:
            return web.json_response({"error": str(e)}, status=400)

        return web.json_response({
            "id": complaint.id,
            "status": complaint.status.value,
            "date_reported": complaint.date_reported,
            "text": confirmation,
        }, status=201)

    async def _handle_end_session(self, request: web.Request) -> web.Response:
        """End a session and forget its conversation memory."""
        session_id = request.match_info["session_id"]
        if not self.assistant.end_session(session_id):
            return web.json_response({"error": f"Unknown session {session_id}"}, status=404)
        return web.json_response({"status": "ended", "session_id": session_id})

    @property
    def running(self) -> bool:
        return self._runner is not None

    async def start(self) -> None:
        """Bind the server and begin accepting requests."""
        if self.running:
            raise RuntimeError("Web server is already running")
        self._runner = web.AppRunner(self.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info(f"Police Buddy API listening on {self.host}:{self.port} (POST /api/chat)")

    async def stop(self) -> None:
        """Stop accepting requests and release the listening socket."""
        if self._runner is None:
            return
        await self._runner.cleanup()
        self._runner = None
        logger.info("Web server stopped")
