from .ports import OutboundMessage, Transport


class ConsoleTransport(Transport):
    """Adapter: print to console and keep every message in memory. For dev/testing."""

    def __init__(self, echo: bool = True):
        self.echo = echo
        self.sent: list[OutboundMessage] = []

    async def send(self, message: OutboundMessage) -> str:
        self.sent.append(message)
        tracking_id = f"console-{len(self.sent)}"

        if self.echo:
            to = (message.recipient.name or message.recipient.id) if message.recipient else "?"
            print(f"\n{'=' * 60}")
            print(f"  TO: {to}")
            print(f"{'=' * 60}")
            print(message.text)
            print(f"{'=' * 60}\n")

        return tracking_id

    def texts(self) -> list[str]:
        """Bodies of everything sent so far, in send order."""
        return [m.text for m in self.sent]
