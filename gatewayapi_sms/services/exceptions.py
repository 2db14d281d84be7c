class ServiceError(Exception):
    """Base exception for service-level errors."""


class GatewayApiError(ServiceError):
    """Raised for every failure surfaced by the GatewayAPI client."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidRequestError(GatewayApiError):
    pass


class TransportError(GatewayApiError):
    pass


class InvalidResponseError(GatewayApiError):
    pass
