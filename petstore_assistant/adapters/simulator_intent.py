"""
SimulatorIntentClassifier — deterministic keyword-based classifier for tests.

No LLM calls, no network. Rules are checked in order; the first intent
with a matching keyword wins, so "add to cart" beats a product word in
the same sentence.
"""

import re

from petstore_assistant.domain.intent import (
    Classification,
    ClassificationResult,
    IntentClassifier,
)

_RULES: list[tuple[Classification, list[str]]] = [
    (Classification.PLACE_ORDER, [
        r"\bplace\s+(?:my\s+|an\s+|the\s+)?order\b", r"\bcheck\s*out\b",
        r"\bcheckout\b", r"\bbuy\s+(?:it|them|now)\b", r"\bcomplete\s+(?:my\s+)?purchase\b",
    ]),
    (Classification.UPDATE_SHOPPING_CART, [
        r"\badd\b.*\bcart\b", r"\bremove\b.*\bcart\b", r"\bput\b.*\bcart\b",
        r"\bupdate\b.*\bcart\b", r"\bchange\b.*\bquantity\b", r"\bdelete\b.*\bcart\b",
    ]),
    (Classification.VIEW_SHOPPING_CART, [
        r"\b(?:view|show|see|display)\b.*\bcart\b", r"\bwhat(?:'s| is)\s+in\s+my\s+cart\b",
        r"\bmy\s+(?:shopping\s+)?cart\b",
    ]),
    (Classification.SEARCH_FOR_PRODUCTS, [
        r"\bsell\b", r"\bbuy\b", r"\bdo\s+you\s+have\b", r"\blooking\s+for\b",
        r"\bfood\b", r"\btoys?\b", r"\btreats?\b", r"\bleash(?:es)?\b",
        r"\bcollars?\b", r"\bbeds?\b", r"\bproducts?\b",
    ]),
]


def _match_any(text: str, patterns: list[str]) -> bool:
    lower = text.lower()
    return any(re.search(p, lower) for p in patterns)


class SimulatorIntentClassifier(IntentClassifier):
    """
    Keyword-based intent classifier for tests.
    Anything without a matching keyword is SOMETHING_ELSE.
    """

    async def classify(self, text: str) -> ClassificationResult:
        for classification, patterns in _RULES:
            if _match_any(text, patterns):
                return ClassificationResult(classification=classification)
        return ClassificationResult(classification=Classification.SOMETHING_ELSE)
