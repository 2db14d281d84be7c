from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import httpx

from gatewayapi_sms.core.config import Settings, get_settings
from gatewayapi_sms.core.phone import normalize_msisdn

from . import exceptions

logger = logging.getLogger("gatewayapi.client")

BASE_URL = "https://gatewayapi.com/rest/"
TIMEOUT_SECONDS = 30.0
MAX_SENDER_LENGTH = 15
MESSAGES_PATH = "mtsms"


def as_message_ids(message_ids: str | int | Iterable[str | int]) -> list[str]:
    """Wrap a single id in a list, or copy a collection of ids in order."""

    if isinstance(message_ids, (str, int)):
        return [str(message_ids)]
    return [str(message_id) for message_id in message_ids]


class GatewayApiClient:
    """Synchronous client for the GatewayAPI SMS REST API.

    The client holds the API token and an ``httpx.Client``. Each call makes
    exactly one HTTP request; nothing is retried. Thread safety is that of
    the underlying ``httpx.Client``.
    """

    def __init__(self, api_token: str, http_client: httpx.Client | None = None):
        if not api_token:
            raise exceptions.InvalidRequestError("API token cannot be empty")
        self._api_token = api_token
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                base_url=BASE_URL,
                timeout=TIMEOUT_SECONDS,
                headers={"Content-Type": "application/json"},
                follow_redirects=True,
            )
        self._client = http_client

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, *, http_client: httpx.Client | None = None
    ) -> "GatewayApiClient":
        settings = settings or get_settings()
        if not settings.GATEWAYAPI_TOKEN:
            raise exceptions.InvalidRequestError("GATEWAYAPI_TOKEN is not configured")
        return cls(settings.GATEWAYAPI_TOKEN, http_client=http_client)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GatewayApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def send_sms(
        self,
        sender: str,
        message: str,
        recipients: Sequence[str | int],
        options: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send ``message`` from ``sender`` to every recipient.

        ``options`` are merged into the payload last, so any key there
        (``recipients`` included) replaces the computed value. Returns the
        decoded response, normally ``{"ids": [...], "usage": {...}}``.
        """
        if isinstance(recipients, (str, bytes)):
            raise exceptions.InvalidRequestError("Recipients must be a list, not a single string")
        if not recipients:
            raise exceptions.InvalidRequestError("Recipients list cannot be empty")
        if len(sender) > MAX_SENDER_LENGTH:
            raise exceptions.InvalidRequestError(
                f"Sender name cannot exceed {MAX_SENDER_LENGTH} characters"
            )
        if not message:
            raise exceptions.InvalidRequestError("Message cannot be empty")

        payload: dict[str, Any] = {
            "sender": sender,
            "message": message,
            "recipients": self._format_recipients(recipients),
        }
        if options:
            payload.update(options)

        return self._request("POST", json=payload, action="send SMS")

    def get_message_status(self, message_ids: Sequence[str | int]) -> dict[str, Any]:
        ids = self._require_ids(message_ids)
        return self._request("GET", params={"ids": ",".join(ids)}, action="get message status")

    def cancel_messages(self, message_ids: Sequence[str | int]) -> dict[str, Any]:
        """Cancel messages that were scheduled with ``sendtime`` and not yet sent."""
        ids = self._require_ids(message_ids)
        return self._request("DELETE", params={"ids": ",".join(ids)}, action="cancel messages")

    @staticmethod
    def _format_recipients(recipients: Iterable[str | int]) -> list[dict[str, str]]:
        formatted = []
        for recipient in recipients:
            try:
                msisdn = normalize_msisdn(recipient)
            except ValueError as exc:
                raise exceptions.InvalidRequestError(str(exc)) from exc
            formatted.append({"msisdn": msisdn})
        return formatted

    @staticmethod
    def _require_ids(message_ids: Sequence[str | int]) -> list[str]:
        ids = as_message_ids(message_ids)
        if not ids:
            raise exceptions.InvalidRequestError("Message ids cannot be empty")
        return ids

    def _request(
        self,
        method: str,
        *,
        action: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        logger.debug("GatewayAPI request %s %s params=%s", method, MESSAGES_PATH, params)
        try:
            response = self._client.request(
                method,
                MESSAGES_PATH,
                params=params,
                json=json,
                auth=(self._api_token, ""),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "GatewayAPI request %s %s failed (%s)",
                method,
                MESSAGES_PATH,
                exc.response.status_code,
            )
            logger.debug("GatewayAPI error body: %s", exc.response.text)
            raise exceptions.TransportError(
                f"Failed to {action}: {exc}", code=exc.response.status_code
            ) from exc
        except httpx.HTTPError as exc:
            logger.error("GatewayAPI request %s %s failed: %s", method, MESSAGES_PATH, exc)
            raise exceptions.TransportError(f"Failed to {action}: {exc}") from exc

        try:
            result = response.json()
        except ValueError as exc:
            logger.warning("GatewayAPI returned undecodable body for %s %s", method, MESSAGES_PATH)
            raise exceptions.InvalidResponseError("Invalid JSON response from API") from exc
        if not isinstance(result, dict):
            logger.warning("GatewayAPI returned non-object JSON for %s %s", method, MESSAGES_PATH)
            raise exceptions.InvalidResponseError("Invalid JSON response from API")
        return result
