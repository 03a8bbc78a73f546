"""Configuration factories: env-driven adapter selection."""

import pytest

from petstore_assistant.adapters.factory import create_ai_adapters
from petstore_assistant.adapters.simulator_intent import SimulatorIntentClassifier
from petstore_assistant.adapters.simulator_response import SimulatorResponder
from petstore_assistant.communication.connector_transport import ConnectorTransport
from petstore_assistant.communication.console_transport import ConsoleTransport
from petstore_assistant.communication.factory import create_transport


def test_default_backend_is_simulator(monkeypatch):
    monkeypatch.delenv("ASSISTANT_BACKEND", raising=False)
    classifier, responder = create_ai_adapters()
    assert isinstance(classifier, SimulatorIntentClassifier)
    assert isinstance(responder, SimulatorResponder)


def test_claude_backend_requires_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with pytest.raises(KeyError):
        create_ai_adapters("claude")


def test_unknown_backend_rejected():
    with pytest.raises(ValueError):
        create_ai_adapters("markov")


def test_default_transport_is_console(monkeypatch):
    monkeypatch.delenv("TRANSPORT_CHANNEL", raising=False)
    assert isinstance(create_transport(), ConsoleTransport)


def test_connector_transport_reads_credentials(monkeypatch):
    monkeypatch.setenv("TRANSPORT_CHANNEL", "connector")
    monkeypatch.setenv("MICROSOFT_APP_ID", "app-id")
    monkeypatch.setenv("MICROSOFT_APP_PASSWORD", "secret")
    transport = create_transport()
    assert isinstance(transport, ConnectorTransport)
    assert transport.app_id == "app-id"


def test_unknown_transport_rejected():
    with pytest.raises(ValueError):
        create_transport("carrier-pigeon")
