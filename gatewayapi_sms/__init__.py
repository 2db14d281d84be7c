from .schemas.sms import SendSmsResult, SendSmsUsage, parse_send_result
from .services import GatewayApiClient, as_message_ids
from .services.exceptions import (
    GatewayApiError,
    InvalidRequestError,
    InvalidResponseError,
    TransportError,
)

__all__ = [
    "GatewayApiClient",
    "GatewayApiError",
    "InvalidRequestError",
    "InvalidResponseError",
    "SendSmsResult",
    "SendSmsUsage",
    "TransportError",
    "as_message_ids",
    "parse_send_result",
]
