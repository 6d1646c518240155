"""Firebase Cloud Messaging delivery for booking notifications"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from firebase_admin import messaging

from app.utils.text import to_data_value

logger = logging.getLogger(__name__)

DEFAULT_SOUND = "default"


@dataclass
class DispatchResult:
    success_count: int
    failure_count: int


def build_booking_data(
    event_type: str,
    booking_id: str,
    recipient_id: str,
    extra: Dict[str, Any],
) -> Dict[str, str]:
    """
    Builds the data block: every extra as text, then the booking fields.
    The booking fields always take precedence over extras of the same name.
    """
    data = {key: to_data_value(value) for key, value in extra.items()}
    data.update({
        "type": event_type,
        "bookingId": booking_id,
        "recipientId": recipient_id,
    })
    return data


def build_booking_message(
    tokens: List[str],
    title: str,
    body: str,
    data: Dict[str, str],
) -> messaging.MulticastMessage:
    return messaging.MulticastMessage(
        tokens=tokens,
        notification=messaging.Notification(title=title, body=body),
        data=data,
        apns=messaging.APNSConfig(
            payload=messaging.APNSPayload(aps=messaging.Aps(sound=DEFAULT_SOUND))
        ),
    )


class FcmGateway:
    """Sends multicast messages through Firebase Cloud Messaging."""

    def send_multicast(self, message: messaging.MulticastMessage) -> DispatchResult:
        """
        Sends the message to every token in it.

        Per-token failures are only counted and logged; request-level
        failures (bad payload, gateway auth) raise.
        """
        response = messaging.send_each_for_multicast(message)

        for token, send_response in zip(message.tokens, response.responses):
            if not send_response.success:
                logger.warning(f"Push to token {token[:8]}... failed: {send_response.exception}")

        logger.info(f"Sent booking push to {response.success_count}/{len(message.tokens)} devices")
        return DispatchResult(
            success_count=response.success_count,
            failure_count=response.failure_count,
        )


def get_push_gateway() -> FcmGateway:
    return FcmGateway()
