import os

from petstore_assistant.domain.intent import IntentClassifier
from petstore_assistant.domain.response import Responder


def create_ai_adapters(backend: str | None = None) -> tuple[IntentClassifier, Responder]:
    """
    Factory: create the classifier and responder pair based on config.

    The backend can be passed explicitly or read from the
    ASSISTANT_BACKEND env var. Defaults to "simulator".
    """
    backend = backend or os.environ.get("ASSISTANT_BACKEND", "simulator")

    if backend == "claude":
        from .claude_intent import DEFAULT_MODEL, ClaudeIntentClassifier
        from .claude_response import ClaudeResponder

        api_key = os.environ["ANTHROPIC_API_KEY"]
        model = os.environ.get("ASSISTANT_MODEL", DEFAULT_MODEL)
        return (
            ClaudeIntentClassifier(api_key=api_key, model=model),
            ClaudeResponder(api_key=api_key, model=model),
        )

    if backend == "simulator":
        from .simulator_intent import SimulatorIntentClassifier
        from .simulator_response import SimulatorResponder

        return SimulatorIntentClassifier(), SimulatorResponder()

    raise ValueError(f"Unknown assistant backend: {backend!r}")
