# file: models/notification.py

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Dict, Literal

from app.utils.text import to_data_value

REQUIRED_FIELDS = ("recipientId", "type", "title", "body", "bookingId")


class BookingPushRequest(BaseModel):
    """Booking notification request. Unknown keys are kept as extras."""
    recipientId: str
    type: str
    title: str
    body: str
    bookingId: str

    model_config = ConfigDict(extra="allow")

    @field_validator(*REQUIRED_FIELDS, mode="before")
    @classmethod
    def require_value(cls, v: Any) -> str:
        if not v:
            raise ValueError("Field cannot be empty")
        return to_data_value(v)

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class DispatchResponse(BaseModel):
    ok: bool = True
    sent: int
    failed: int


class NoTokensResponse(BaseModel):
    ok: bool = True
    sent: int = 0
    reason: Literal["no_tokens"] = "no_tokens"
