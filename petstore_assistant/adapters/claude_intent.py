"""
ClaudeIntentClassifier — uses Claude API to classify shopper messages.

System prompt is the source of truth for classification rules.
The prompt returns JSON with a single label that maps to Classification.
"""

import json
import logging
import os

import anthropic

from petstore_assistant.domain.intent import (
    Classification,
    ClassificationResult,
    IntentClassifier,
)

DEFAULT_MODEL = "claude-haiku-4-5-20251001"

log = logging.getLogger(__name__)

_SYSTEM_PROMPT = """
You are the assistant of an online pet store. Classify what the shopper wants.

Labels:
- "update_shopping_cart": add, remove or change items in their shopping cart
- "view_shopping_cart": see what is in their shopping cart
- "place_order": check out / place the order for their cart
- "search_for_products": find, compare or ask about products the store sells
- "something_else": anything else (pet care questions, greetings, store info)

Respond ONLY with valid JSON matching this schema:
{"classification": "<one of the labels above>"}
""".strip()


def load_json_reply(response) -> dict:
    """Parse the JSON body of a Messages API response."""
    raw = response.content[0].text.strip()
    # Strip markdown code fences if the model wraps the JSON
    if raw.startswith("```"):
        raw = raw.split("```")[1]
        if raw.startswith("json"):
            raw = raw[4:]
    return json.loads(raw)


class ClaudeIntentClassifier(IntentClassifier):
    """Intent classifier backed by a small, fast Claude model."""

    def __init__(self, api_key: str | None = None, model: str = DEFAULT_MODEL):
        self._client = anthropic.Anthropic(api_key=api_key or os.environ["ANTHROPIC_API_KEY"])
        self._model = model

    async def classify(self, text: str) -> ClassificationResult:
        response = self._client.messages.create(
            model=self._model,
            max_tokens=64,
            system=_SYSTEM_PROMPT,
            messages=[{"role": "user", "content": text}],
        )

        data = load_json_reply(response)
        label = data.get("classification")
        classification = Classification.parse(label)
        if classification is None:
            log.warning("unrecognized classification label %r", label)

        return ClassificationResult(classification=classification)
