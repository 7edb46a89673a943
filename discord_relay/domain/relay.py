"""Mention filtering and payload forwarding, no framework dependencies."""

import sys
from typing import Optional

from discord_relay.domain.models import RelayPayload
from discord_relay.ports.inbound import IncomingMessage
from discord_relay.ports.outbound import WebhookPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class RelayHandler:
    """Decides whether a message is relayed and hands the payload to the webhook.

    Filters, in order:
    - messages from bot accounts (prevents relay loops)
    - messages outside the configured channel, when one is configured
    - messages that do not mention the connected account
    """

    def __init__(
        self,
        webhook: WebhookPort,
        channel_id: Optional[str] = None,
        include_extras: bool = False,
    ):
        self._webhook = webhook
        self.channel_id = channel_id
        self.include_extras = include_extras

    def should_relay(self, msg: IncomingMessage) -> bool:
        if msg.is_bot:
            return False
        if self.channel_id and msg.channel_id != self.channel_id:
            return False
        if not msg.mentions_self:
            return False
        return True

    def build_payload(self, msg: IncomingMessage) -> RelayPayload:
        return RelayPayload.from_message(msg, include_extras=self.include_extras)

    def handle(self, msg: IncomingMessage) -> Optional[RelayPayload]:
        """Filter, transform and send. Returns the forwarded payload, or None if filtered.

        The send is scheduled, not awaited.
        """
        if not self.should_relay(msg):
            return None
        payload = self.build_payload(msg)
        self._webhook.dispatch(payload.to_dict())
        _log(f"Relayed message {msg.message_id} from ch={msg.channel_id}")
        return payload
