"""
Interactive console runner for the pet store assistant.

Reads lines from stdin, wraps each one in a Bot Framework message activity
and routes it through the bot exactly like a channel would.  Replies go
through the configured transport (console by default).

Usage:
    source .env && python scripts/run.py

Environment variables (all optional):
    ASSISTANT_BACKEND       - "simulator" or "claude" (default: simulator)
    ANTHROPIC_API_KEY       - required when ASSISTANT_BACKEND=claude
    ASSISTANT_MODEL         - Claude model name
    TRANSPORT_CHANNEL       - "console" or "connector" (default: console)
    LOG_LEVEL               - logging level (default: INFO)
"""

import asyncio
import logging
import os
import sys
import uuid

# Make sure project root is on sys.path when run as a script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from petstore_assistant.activity import process_activity
from petstore_assistant.adapters.factory import create_ai_adapters
from petstore_assistant.bot import BotConfig, PetStoreAssistantBot
from petstore_assistant.communication.factory import create_transport

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
log = logging.getLogger(__name__)

BOT = {"id": "petstore-assistant", "name": "Pet Store Assistant"}
USER = {"id": "console-user", "name": "You"}


def build_bot() -> PetStoreAssistantBot:
    try:
        classifier, responder = create_ai_adapters()
    except KeyError as exc:
        print(f"ERROR: environment variable {exc.args[0]!r} is not set.", file=sys.stderr)
        sys.exit(1)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    return PetStoreAssistantBot(BotConfig(classifier=classifier, responder=responder))


def _activity(conversation_id: str, **fields) -> dict:
    return {
        "id": uuid.uuid4().hex,
        "channelId": "console",
        "serviceUrl": "http://localhost",
        "conversation": {"id": conversation_id},
        "from": USER,
        "recipient": BOT,
        **fields,
    }


async def main() -> None:
    bot = build_bot()
    try:
        transport = create_transport()
    except (KeyError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)

    conversation_id = f"console-{uuid.uuid4().hex[:8]}"
    log.info("Console chat started — conversation=%s", conversation_id)

    await process_activity(
        bot,
        _activity(conversation_id, type="conversationUpdate", membersAdded=[BOT, USER]),
        transport,
    )

    loop = asyncio.get_running_loop()
    while True:
        line = await loop.run_in_executor(None, sys.stdin.readline)
        if not line:
            break
        text = line.strip()
        if not text:
            continue
        try:
            await process_activity(
                bot, _activity(conversation_id, type="message", text=text), transport
            )
        except Exception as exc:
            log.error("Reply failed: %s", exc)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        log.info("Console chat stopped.")
