"""
SimulatorResponder — deterministic template-based Responder for tests.

Searches a small in-memory catalog by keyword.  No LLM calls.
"""

import re

from petstore_assistant.domain.intent import (
    Classification,
    ClassificationResult,
    Product,
)
from petstore_assistant.domain.response import Responder

SAMPLE_PRODUCTS: list[Product] = [
    Product("1", "Ball", "Dog Toy", "A bouncy rubber ball.", 9.99),
    Product("2", "Ball Launcher", "Dog Toy", "Throws balls farther than you can.", 29.99),
    Product("3", "Plush Lamb", "Dog Toy", "Soft squeaky lamb.", 12.99),
    Product("4", "Puppy Chow", "Dog Food", "Dry food for growing puppies.", 24.99),
    Product("5", "Senior Dog Kibble", "Dog Food", "Gentle kibble for older dogs.", 27.99),
    Product("6", "Leather Leash", "Dog Accessory", "Six-foot leather leash.", 19.99),
    Product("7", "Mouse", "Cat Toy", "Catnip-filled toy mouse.", 4.99),
    Product("8", "Scratcher", "Cat Toy", "Cardboard scratching pad.", 14.99),
    Product("9", "Salmon Feast", "Cat Food", "Wet food with real salmon.", 2.49),
    Product("10", "Fish Flakes", "Fish Food", "Daily flakes for tropical fish.", 6.99),
]

_STOPWORDS = {
    "a", "an", "the", "do", "you", "i", "me", "my", "for", "of", "to",
    "what", "which", "have", "sell", "any", "is", "are", "some", "show",
    "looking", "want", "need", "please", "can", "get",
}

_OTHER_ANSWER = (
    "I can help with our products, your shopping cart and your order. "
    "For questions about pet animals, our staff in store is happy to help too."
)


def _words(text: str) -> set[str]:
    words = set(re.findall(r"[a-z]+", text.lower())) - _STOPWORDS
    # naive singular forms so "toys" finds "Dog Toy"
    return words | {w[:-1] for w in words if w.endswith("s") and len(w) > 3}


def search_products(text: str, catalog: list[Product]) -> list[Product]:
    """Products whose name or category shares a word with the text, best match first."""
    wanted = _words(text)
    scored = []
    for product in catalog:
        haystack = _words(f"{product.name} {product.category}")
        score = len(wanted & haystack)
        if score:
            scored.append((score, product))
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [p for _, p in scored]


class SimulatorResponder(Responder):

    def __init__(self, catalog: list[Product] | None = None):
        self._catalog = catalog if catalog is not None else SAMPLE_PRODUCTS

    async def complete(
        self, text: str, classification: Classification
    ) -> ClassificationResult:
        result = ClassificationResult(classification=classification)

        if classification != Classification.SEARCH_FOR_PRODUCTS:
            result.response_text = _OTHER_ANSWER
            return result

        products = search_products(text, self._catalog)[:3]
        if not products:
            result.response_text = (
                "Sorry, I could not find any products matching your request."
            )
            return result

        names = ", ".join(f"{p.name} ({p.category})" for p in products)
        result.response_text = f"We have these products that might interest you: {names}."
        result.products = products
        result.response_product_ids = [p.product_id for p in products]
        return result
