"""
IntentClassifier port — decides what the shopper is asking for.

AI is used here: the classifier reads a message and returns a
Classification.  The bot then decides in plain code what to answer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

DEFAULT_RESPONSE_TEXT = "I am not sure how to handle that."


class Classification(Enum):
    UPDATE_SHOPPING_CART = "update_shopping_cart"
    VIEW_SHOPPING_CART = "view_shopping_cart"
    PLACE_ORDER = "place_order"
    SEARCH_FOR_PRODUCTS = "search_for_products"
    SOMETHING_ELSE = "something_else"

    @classmethod
    def parse(cls, label: str | None) -> "Classification | None":
        """Map a label like "place order" or "PLACE_ORDER" to a member, None if unknown."""
        if not label:
            return None
        key = label.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            return None


@dataclass
class Product:
    """A catalog entry the responder can point the shopper to."""
    product_id: str
    name: str
    category: str                  # e.g. "Dog Food", "Cat Toy"
    description: str = ""
    price: float | None = None
    photo_url: str | None = None


@dataclass
class ClassificationResult:
    """
    Outcome of classifying one message.

    response_text starts as the fallback and is overwritten by the bot
    (placeholders) or by a Responder (generated answers).
    """
    classification: Classification | None = None
    response_text: str = DEFAULT_RESPONSE_TEXT
    products: list[Product] | None = None
    response_product_ids: list[str] | None = None


class IntentClassifier(ABC):
    """
    Port: classify a shopper message into a Classification.

    Implementations may use an LLM (ClaudeIntentClassifier) or
    keyword matching (SimulatorIntentClassifier).
    Both must satisfy the same contract.
    """

    @abstractmethod
    async def classify(self, text: str) -> ClassificationResult:
        """Classify a single (already lower-cased) message."""
        ...
