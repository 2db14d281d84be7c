from .gatewayapi_client import GatewayApiClient, as_message_ids

__all__ = [
    "GatewayApiClient",
    "as_message_ids",
]
