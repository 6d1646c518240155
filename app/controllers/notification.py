# file: controllers/notification.py

import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from app.database.recipients import RecipientDirectory, extract_device_tokens, get_recipient_directory
from app.models.notification import BookingPushRequest, DispatchResponse, NoTokensResponse
from app.services.firebase_auth import FirebaseTokenVerifier, get_bearer_token, get_token_verifier
from app.services.push_service import FcmGateway, build_booking_data, build_booking_message, get_push_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_payload(request: Request) -> Dict[str, Any]:
    # An empty body or a non-object JSON value carries no fields.
    raw = await request.body()
    if not raw:
        return {}
    payload = json.loads(raw)
    return payload if isinstance(payload, dict) else {}


@router.post("")
async def send_booking_push(
        request: Request,
        token: Optional[str] = Depends(get_bearer_token),
        verifier: FirebaseTokenVerifier = Depends(get_token_verifier),
        recipients: RecipientDirectory = Depends(get_recipient_directory),
        gateway: FcmGateway = Depends(get_push_gateway),
):
    """
    Sends a booking push notification to every device of the recipient.

    - **recipientId**, **type**, **title**, **body**, **bookingId**: required
    - any other field is forwarded as text in the message data

    A recipient without device tokens is not an error: the response reports
    `sent: 0` with `reason: "no_tokens"`.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        # Verification failures are reported as 500, like any other failure.
        decoded_token = await run_in_threadpool(verifier.verify, token)

        try:
            push_request = BookingPushRequest.model_validate(await _read_payload(request))
        except ValidationError:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")

        recipient = await run_in_threadpool(recipients.fetch, push_request.recipientId)
        if recipient is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipient not found")

        tokens = extract_device_tokens(recipient)
        if not tokens:
            logger.info(f"Recipient {push_request.recipientId} has no device tokens")
            return NoTokensResponse()

        logger.info(
            f"Booking push '{push_request.type}' from {decoded_token.get('uid')} "
            f"to {push_request.recipientId} ({len(tokens)} devices)"
        )
        message = build_booking_message(
            tokens=tokens,
            title=push_request.title,
            body=push_request.body,
            data=build_booking_data(
                event_type=push_request.type,
                booking_id=push_request.bookingId,
                recipient_id=push_request.recipientId,
                extra=push_request.extras,
            ),
        )
        result = await run_in_threadpool(gateway.send_multicast, message)
        return DispatchResponse(sent=result.success_count, failed=result.failure_count)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"booking-push error: {e}", exc_info=True)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
