"""
Per-name validation against the remote name-validation service.

validate() never raises: transport failures, non-200 statuses and malformed
bodies are all reported through the returned ValidationResult.
"""

from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from .models import Status, ValidationResult
from .normalize import normalize_name

logger = logging.getLogger(__name__)

TRANSPORT_FAILURE_MESSAGE = "Failed to reach validation service"

# RFC 2396 unreserved marks; everything else is percent-encoded.
_QUERY_SAFE = "-_.!~*'()"


def build_request_url(base_url: str, normalized: str) -> str:
    return f"{base_url}?name={quote(normalized, safe=_QUERY_SAFE)}"


def _result(name: str, status: Status, message: str) -> ValidationResult:
    # Built without validation: names and remote messages may hold lone
    # surrogates, which pydantic rejects as str input.
    return ValidationResult.model_construct(name=name, status=status, message=message)


def classify_status(status_code: int) -> Status:
    return "valid" if status_code == 200 else "invalid"


def extract_message(response: httpx.Response) -> str:
    """Use the body's string `message` field, else describe the status code."""
    try:
        payload = response.json()
    except Exception:
        # malformed or too deeply nested body
        payload = None

    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return f"Received status {response.status_code}"


class NameValidator:
    """
    Validates one name at a time against `base_url`.

    A client passed in is left open; otherwise the validator creates its own
    httpx.AsyncClient and closes it in aclose().
    """

    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = base_url
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient() if timeout is None else httpx.AsyncClient(timeout=timeout)
        self._client = client

    async def validate(self, raw_name: str) -> ValidationResult:
        normalized = normalize_name(raw_name)

        try:
            url = build_request_url(self.base_url, normalized)
            response = await self._client.get(url)
        except Exception as exc:
            logger.warning("Validation request for %r failed: %s", raw_name, exc)
            return _result(raw_name, "error", TRANSPORT_FAILURE_MESSAGE)

        status = classify_status(response.status_code)
        logger.debug("%r -> %s (HTTP %d)", raw_name, status, response.status_code)
        return _result(raw_name, status, extract_message(response))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "NameValidator":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
