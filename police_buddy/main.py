"""Main entry point for AP Police Buddy."""

import asyncio
import logging
import sys
import uuid

from dotenv import load_dotenv

from police_buddy.assistant import PoliceBuddyAssistant
from police_buddy.config import Language, get_settings
from police_buddy.web_server import WebServer

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

CONSOLE_COMMANDS = "Commands: /te, /en (switch language), /clear (forget the conversation), /quit"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


async def run_console(assistant: PoliceBuddyAssistant) -> None:
    """Chat with the assistant on stdin/stdout."""
    session_id = uuid.uuid4().hex
    lang = assistant.settings.default_language
    print(assistant.welcome_message(session_id, lang))
    print(CONSOLE_COMMANDS)

    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            break
        text = line.strip()
        if text == "/quit":
            break
        if text in ("/en", "/te"):
            lang = Language(text[1:])
            print(assistant.welcome_message(session_id, lang))
            continue
        if text == "/clear":
            assistant.clear_session(session_id)
            continue

        reply = await assistant.handle_message(session_id, text, lang)
        if reply is not None:
            print(f"\n{reply.text}\n")


async def run_server(assistant: PoliceBuddyAssistant) -> None:
    settings = assistant.settings
    web_server = WebServer(assistant, host=settings.host, port=settings.port)
    await web_server.start()
    try:
        await asyncio.Event().wait()
    finally:
        await web_server.stop()


async def main() -> None:
    """Main application entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting AP Police Buddy in {settings.environment.value} mode")
    logger.info(f"Using search provider: {settings.search_provider.value}")

    # Validate configuration
    try:
        settings.validate_search_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    assistant = PoliceBuddyAssistant(settings=settings)
    try:
        if "--console" in sys.argv[1:]:
            await run_console(assistant)
        else:
            await run_server(assistant)
    finally:
        await assistant.aclose()


def cli() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli()
