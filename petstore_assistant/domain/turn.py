"""
Turn and TurnContext — the data a handler receives for one inbound event.

A TurnContext is created per inbound activity and passed explicitly
through the handler call chain.  Nothing about the current request lives
in module or class state.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import urlparse

from petstore_assistant.communication.ports import ChannelAccount, OutboundMessage, Transport


@dataclass
class Turn:
    """One inbound message and its channel metadata. Read-only to the bot."""
    text: str
    sender: ChannelAccount
    recipient: ChannelAccount          # the bot, as the channel knows it
    conversation_id: str = ""
    activity_id: str | None = None
    channel_id: str = ""
    service_url: str = ""
    channel_data: Any = None
    entities: list[Any] = field(default_factory=list)
    properties: Mapping[str, Any] = field(default_factory=dict)


@dataclass
class RequestContext:
    """Web-request details for the request that delivered the turn."""
    host: str = ""

    @classmethod
    def from_url(cls, url: str | None) -> "RequestContext":
        return cls(host=urlparse(url).netloc if url else "")


@dataclass
class TurnContext:
    turn: Turn
    transport: Transport
    request: RequestContext = field(default_factory=RequestContext)

    async def send_text(
        self, text: str, recipient: ChannelAccount | None = None
    ) -> str:
        """Reply into the turn's conversation; defaults to the turn's sender."""
        message = OutboundMessage(
            text=text,
            conversation_id=self.turn.conversation_id,
            recipient=recipient or self.turn.sender,
            sender=self.turn.recipient,
            reply_to_id=self.turn.activity_id,
            service_url=self.turn.service_url,
        )
        return await self.transport.send(message)
