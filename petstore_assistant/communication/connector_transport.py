"""
Bot Framework Connector adapter.

Replies are posted to the serviceUrl the channel gave us on the inbound
activity.  When an app id is configured, every call carries a bearer token
obtained with the OAuth client-credentials flow.
"""

import asyncio
import logging
import threading
import time

import requests

from .ports import OutboundMessage, Transport

TOKEN_URL = "https://login.microsoftonline.com/botframework.com/oauth2/v2.0/token"
TOKEN_SCOPE = "https://api.botframework.com/.default"

# Refresh the token this many seconds before it actually expires
_EXPIRY_MARGIN = 300

log = logging.getLogger(__name__)


class ConnectorTransport(Transport):
    """Adapter: real Bot Framework Connector REST client."""

    def __init__(
        self,
        app_id: str = "",
        app_password: str = "",
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ):
        self.app_id = app_id
        self.app_password = app_password
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self._token: str | None = None
        self._token_expires_at = 0.0
        self._token_lock = threading.Lock()

    async def send(self, message: OutboundMessage) -> str:
        if not message.service_url or not message.conversation_id:
            raise ValueError("service_url and conversation_id are required to reply")

        base = message.service_url.rstrip("/")
        url = f"{base}/v3/conversations/{message.conversation_id}/activities"
        if message.reply_to_id:
            url += f"/{message.reply_to_id}"

        # requests blocks: keep the event loop free for concurrent sends
        return await asyncio.to_thread(self._post_activity, url, self._activity(message))

    def _post_activity(self, url: str, payload: dict) -> str:
        resp = self.session.post(
            url,
            json=payload,
            headers=self._auth_headers(),
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json() if resp.content else {}
        return data.get("id", "")

    @staticmethod
    def _activity(message: OutboundMessage) -> dict:
        payload = {
            "type": "message",
            "text": message.text,
            "conversation": {"id": message.conversation_id},
        }
        if message.sender:
            payload["from"] = {"id": message.sender.id, "name": message.sender.name}
        if message.recipient:
            payload["recipient"] = {"id": message.recipient.id, "name": message.recipient.name}
        if message.reply_to_id:
            payload["replyToId"] = message.reply_to_id
        return payload

    def _auth_headers(self) -> dict:
        # No app id: local emulator, which accepts unauthenticated replies
        if not self.app_id:
            return {}
        return {"Authorization": f"Bearer {self._access_token()}"}

    def _access_token(self) -> str:
        # sends run in worker threads; one refresh at a time
        with self._token_lock:
            if self._token and time.time() < self._token_expires_at:
                return self._token
            return self._refresh_token()

    def _refresh_token(self) -> str:
        resp = self.session.post(
            TOKEN_URL,
            data={
                "grant_type": "client_credentials",
                "client_id": self.app_id,
                "client_secret": self.app_password,
                "scope": TOKEN_SCOPE,
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()

        self._token = data["access_token"]
        expires_in = int(data.get("expires_in", 3600))
        self._token_expires_at = time.time() + max(expires_in - _EXPIRY_MARGIN, 0)
        log.debug("connector token refreshed, valid for %ds", expires_in)
        return self._token
