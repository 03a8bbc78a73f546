"""
Responder port.

Used for the open-ended intents (product search, anything else): the
responder writes the answer and may attach the products it talks about.
"""

from abc import ABC, abstractmethod

from petstore_assistant.domain.intent import Classification, ClassificationResult


class Responder(ABC):
    """
    Port: produce a fresh ClassificationResult with generated response text.
    """

    @abstractmethod
    async def complete(
        self, text: str, classification: Classification
    ) -> ClassificationResult:
        ...
