from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ChannelAccount:
    """A conversation participant (a user or the bot itself)."""

    id: str
    name: str = ""


@dataclass
class OutboundMessage:
    """What we send back into the conversation."""

    text: str
    conversation_id: str = ""
    recipient: ChannelAccount | None = None
    sender: ChannelAccount | None = None
    reply_to_id: str | None = None
    service_url: str = ""  # Bot Framework: where the channel wants replies


class Transport(ABC):
    """
    Port: how messages leave the bot.

    The bot depends ONLY on this interface.  It doesn't know whether
    messages go to the Bot Framework connector, a terminal, or a test list.
    """

    @abstractmethod
    async def send(self, message: OutboundMessage) -> str:
        """
        Deliver one message.
        Returns a tracking ID (connector activity id, console counter, ...).
        Raises on delivery failure; nothing is retried here.
        """
        ...
