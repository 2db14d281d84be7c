from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gatewayapi_sms.services.exceptions import InvalidResponseError


class SendSmsUsage(BaseModel):
    model_config = ConfigDict(extra="allow")

    total_cost: float
    currency: str
    countries: dict[str, Any] = Field(default_factory=dict)


class SendSmsResult(BaseModel):
    """Decoded ``POST mtsms`` response. Unknown fields are kept as extras."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    ids: list[str]
    usage: SendSmsUsage | None = None


def parse_send_result(payload: dict[str, Any]) -> SendSmsResult:
    try:
        return SendSmsResult.model_validate(payload)
    except ValidationError as exc:
        raise InvalidResponseError("Unexpected send result from API") from exc
