"""
Inbound side: turn a Bot Framework activity (parsed JSON) into handler calls.

Whatever receives activities (an HTTP endpoint, the console runner, a
test) calls process_activity() once per activity.
"""

import logging
from typing import Any

from petstore_assistant.bot import PetStoreAssistantBot, TurnResult
from petstore_assistant.communication.ports import ChannelAccount, Transport
from petstore_assistant.domain.turn import RequestContext, Turn, TurnContext

log = logging.getLogger(__name__)


def _account(data: dict | None) -> ChannelAccount:
    data = data or {}
    return ChannelAccount(id=str(data.get("id", "")), name=data.get("name") or "")


def turn_from_activity(activity: dict[str, Any]) -> Turn:
    """Build a Turn from a Bot Framework activity dict."""
    return Turn(
        text=activity.get("text") or "",
        sender=_account(activity.get("from")),
        recipient=_account(activity.get("recipient")),
        conversation_id=str((activity.get("conversation") or {}).get("id", "")),
        activity_id=activity.get("id"),
        channel_id=activity.get("channelId", ""),
        service_url=activity.get("serviceUrl", ""),
        channel_data=activity.get("channelData"),
        entities=list(activity.get("entities") or []),
        properties=dict(activity.get("properties") or {}),
    )


def members_added(activity: dict[str, Any]) -> list[ChannelAccount]:
    return [_account(m) for m in activity.get("membersAdded") or []]


async def process_activity(
    bot: PetStoreAssistantBot,
    activity: dict[str, Any],
    transport: Transport,
    request_url: str | None = None,
) -> TurnResult | None:
    """
    Route one activity to the matching bot handler.

    message             → handle_turn (returns its TurnResult)
    conversationUpdate  → handle_members_added when membersAdded is present
    anything else       → ignored
    """
    activity_type = activity.get("type")
    context = TurnContext(
        turn=turn_from_activity(activity),
        transport=transport,
        request=RequestContext.from_url(request_url or activity.get("serviceUrl")),
    )

    if activity_type == "message":
        return await bot.handle_turn(context)

    if activity_type == "conversationUpdate":
        members = members_added(activity)
        if members:
            await bot.handle_members_added(members, context)
        return None

    log.debug("ignoring activity type=%r id=%s", activity_type, activity.get("id"))
    return None
