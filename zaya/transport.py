"""HTTP transport for the Zaya API: authentication, JSON encoding and errors."""

from __future__ import annotations

import json
from datetime import timedelta
from typing import Any

import requests

BASE_URL = "https://zaya.io/api/v1"
DEFAULT_TIMEOUT = 30.0


class ZayaError(Exception):
    """Base class for every error raised while talking to the Zaya API."""


class APIError(ZayaError):
    """The API answered with an HTTP status of 400 or above."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"API error: {status_code} {reason} - {body}")


def _seconds(timeout: float | timedelta) -> float:
    if isinstance(timeout, timedelta):
        return timeout.total_seconds()
    return float(timeout)


class Transport:
    """Sends authenticated JSON requests to the API and decodes the replies."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float | timedelta = DEFAULT_TIMEOUT,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = _seconds(timeout)
        self._session = requests.Session()

    def close(self) -> None:
        """Release the pooled connections."""
        self._session.close()

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Perform a request and return the decoded JSON reply, or None if it is empty."""
        data = None
        if body is not None:
            try:
                data = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as exc:
                raise ZayaError(f"failed to marshal request body: {exc}") from exc

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            response = self._session.request(
                method,
                f"{self.base_url}{path}",
                data=data,
                headers=headers,
                timeout=_seconds(self.timeout),
            )
        except requests.RequestException as exc:
            raise ZayaError(f"failed to send request: {exc}") from exc

        with response:
            if response.status_code >= 400:
                raise APIError(response.status_code, response.reason or "", response.text)
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError as exc:
                raise ZayaError(f"failed to decode response: {exc}") from exc