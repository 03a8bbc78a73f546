"""
The pet store assistant bot.

Two handlers, both stateless between calls:

  handle_turn:          AI classifies → code dispatches → (AI completes) → one reply
  handle_members_added: greet everyone who joined, except the bot itself

Every turn gets exactly one reply.  Classifier or responder failures fall
back to DEFAULT_RESPONSE_TEXT; only a failing send reaches the caller.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal

from petstore_assistant.communication.ports import ChannelAccount
from petstore_assistant.domain.intent import (
    DEFAULT_RESPONSE_TEXT,
    Classification,
    ClassificationResult,
    IntentClassifier,
    Product,
)
from petstore_assistant.domain.response import Responder
from petstore_assistant.domain.turn import TurnContext

log = logging.getLogger(__name__)

WELCOME_TEXT = (
    "Hello and welcome to the Azure Pet Store, you can ask me questions about our "
    "products, your shopping cart and your order, you can also ask me for information "
    "about pet animals. How can I help you?"
)

# Cart and order intents are recognised but need session information we
# don't have yet.
PLACEHOLDER_TEXT: dict[Classification, str] = {
    Classification.UPDATE_SHOPPING_CART:
        "Once I get your session information, I will be able to update your shopping cart.",
    Classification.VIEW_SHOPPING_CART:
        "Once I get your session information, I will be able to display your shopping cart.",
    Classification.PLACE_ORDER:
        "Once I get your session information, I will be able to place your order.",
}

_COMPLETED = (Classification.SEARCH_FOR_PRODUCTS, Classification.SOMETHING_ELSE)


def _checked(result: object) -> ClassificationResult:
    if not isinstance(result, ClassificationResult):
        raise TypeError(f"expected ClassificationResult, got {type(result).__name__}")
    return result


@dataclass
class BotConfig:
    classifier: IntentClassifier
    responder: Responder
    welcome_text: str = WELCOME_TEXT


@dataclass
class TurnResult:
    action: Literal[
        "placeholder",  # cart/order intent, canned text
        "completed",    # responder wrote the answer
        "fallback",     # unknown intent or an AI step failed
    ]
    classification: Classification | None
    text: str
    products: list[Product] | None = None
    resource_id: str = ""


class PetStoreAssistantBot:
    """
    Stateless handlers: one call per inbound activity.

    Concurrent calls share nothing but the (read-only) config.
    """

    def __init__(self, config: BotConfig):
        self._cfg = config

    async def handle_turn(self, context: TurnContext) -> TurnResult:
        """Classify the message, pick the answer, send exactly one reply."""
        self._log_turn_context(context)

        text = (context.turn.text or "").lower()
        result, action = await self._respond(text)

        # send failures propagate: the caller owns transport errors
        resource_id = await context.send_text(result.response_text)

        log.info(
            "conv=%s classification=%s action=%s products=%d",
            context.turn.conversation_id,
            result.classification.name if result.classification else None,
            action,
            len(result.products or []),
        )
        return TurnResult(
            action=action,
            classification=result.classification,
            text=result.response_text,
            products=result.products,
            resource_id=resource_id,
        )

    async def handle_members_added(
        self, members: list[ChannelAccount], context: TurnContext
    ) -> None:
        """Send the welcome text to each new member; failures are isolated."""
        bot_id = context.turn.recipient.id
        newcomers = [m for m in members if m.id != bot_id]
        if not newcomers:
            return

        outcomes = await asyncio.gather(
            *(context.send_text(self._cfg.welcome_text, recipient=m) for m in newcomers),
            return_exceptions=True,
        )
        for member, outcome in zip(newcomers, outcomes):
            if isinstance(outcome, BaseException):
                log.error("welcome to member=%s failed: %s", member.id, outcome)
            else:
                log.debug("welcomed member=%s id=%s", member.id, outcome)

    # -- helpers -------------------------------------------------------------

    async def _respond(self, text: str) -> tuple[ClassificationResult, str]:
        try:
            result = _checked(await self._cfg.classifier.classify(text))
        except Exception as exc:
            log.error("classification failed, using fallback: %s", exc)
            return ClassificationResult(), "fallback"

        classification = result.classification

        if classification in PLACEHOLDER_TEXT:
            result.response_text = PLACEHOLDER_TEXT[classification]
            return result, "placeholder"

        if classification in _COMPLETED:
            try:
                completed = _checked(await self._cfg.responder.complete(text, classification))
            except Exception as exc:
                log.error("completion failed for %s, using fallback: %s", classification.name, exc)
                return ClassificationResult(classification=classification), "fallback"
            if not completed.response_text:
                log.warning("responder returned empty text for %s", classification.name)
                completed.response_text = DEFAULT_RESPONSE_TEXT
                return completed, "fallback"
            return completed, "completed"

        log.info("no handler for classification=%r", classification)
        return ClassificationResult(classification=classification), "fallback"

    @staticmethod
    def _log_turn_context(context: TurnContext) -> None:
        turn = context.turn
        try:
            log.info("text: %s", turn.text)
            log.info("channel data: %s", turn.channel_data)
            log.info("entity data: %s", turn.entities)
            log.info("properties: %s", dict(turn.properties))
            log.info("sessionid: %s", turn.properties.get("sessionid"))
            log.info("host: %s", context.request.host)
        except Exception as exc:
            log.error("Error getting channel/entity data: %s", exc)
