"""
Claude-powered Responder.

The catalog is given to the model in the prompt; the model answers and
names the product ids it recommends.  Ids are resolved back to Products
here, so the model cannot invent products.
"""

import os

import anthropic

from petstore_assistant.adapters.claude_intent import DEFAULT_MODEL, load_json_reply
from petstore_assistant.adapters.simulator_response import SAMPLE_PRODUCTS
from petstore_assistant.domain.intent import (
    Classification,
    ClassificationResult,
    Product,
)
from petstore_assistant.domain.response import Responder

_SEARCH_SYSTEM = """
You are the friendly assistant of an online pet store.

The shopper is looking for products. Using ONLY the catalog below, recommend
up to three matching products in 1-3 sentences. If nothing matches, say so
politely and do not recommend anything.

Catalog (one product per line: id | name | category | price):
{catalog}

Respond ONLY with valid JSON:
{{"response": "<message to the shopper>", "product_ids": ["<id>", ...]}}
""".strip()

_OTHER_SYSTEM = """
You are the friendly assistant of an online pet store.

Answer the shopper's message briefly (2-4 sentences). You may share general
information about pet animals. Do not promise anything about orders or carts.

Respond ONLY with valid JSON:
{"response": "<message to the shopper>", "product_ids": []}
""".strip()


def _catalog_lines(catalog: list[Product]) -> str:
    return "\n".join(
        f"{p.product_id} | {p.name} | {p.category} | "
        f"{'' if p.price is None else f'{p.price:.2f}'}"
        for p in catalog
    )


class ClaudeResponder(Responder):

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        catalog: list[Product] | None = None,
    ):
        self._client = anthropic.Anthropic(api_key=api_key or os.environ["ANTHROPIC_API_KEY"])
        self._model = model
        self._catalog = catalog if catalog is not None else SAMPLE_PRODUCTS

    async def complete(
        self, text: str, classification: Classification
    ) -> ClassificationResult:
        if classification == Classification.SEARCH_FOR_PRODUCTS:
            system = _SEARCH_SYSTEM.format(catalog=_catalog_lines(self._catalog))
        else:
            system = _OTHER_SYSTEM

        response = self._client.messages.create(
            model=self._model,
            max_tokens=512,
            system=system,
            messages=[{"role": "user", "content": text}],
        )
        data = load_json_reply(response)

        by_id = {p.product_id: p for p in self._catalog}
        ids = [str(i) for i in data.get("product_ids") or []]
        products = [by_id[i] for i in ids if i in by_id]

        result = ClassificationResult(classification=classification)
        result.response_text = data["response"]
        if products:
            result.products = products
            result.response_product_ids = [p.product_id for p in products]
        return result
