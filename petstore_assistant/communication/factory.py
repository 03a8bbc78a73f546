import os

from .ports import Transport


def create_transport(channel: str | None = None) -> Transport:
    """
    Factory: create the right transport based on config.

    The channel can be passed explicitly or read from the
    TRANSPORT_CHANNEL env var. Defaults to "console".
    """
    channel = channel or os.environ.get("TRANSPORT_CHANNEL", "console")

    if channel == "connector":
        from .connector_transport import ConnectorTransport

        return ConnectorTransport(
            app_id=os.environ.get("MICROSOFT_APP_ID", ""),
            app_password=os.environ.get("MICROSOFT_APP_PASSWORD", ""),
        )

    if channel == "console":
        from .console_transport import ConsoleTransport

        return ConsoleTransport()

    raise ValueError(f"Unknown transport channel: {channel!r}")
