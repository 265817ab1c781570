"""
HTTP transport for export API requests.

A transport performs a signed GET and reports the outcome as an
``(error, body)`` pair instead of raising, so failures can be handed
straight to the request callback.
"""

from typing import Any, Optional, Protocol, Tuple

import requests

from .exceptions import TransportError

Outcome = Tuple[Optional[TransportError], Any]


class Transport(Protocol):
    """Anything that can GET a URL and decode its JSON body."""

    def perform(self, url: str) -> Outcome:
        ...

    def close(self) -> None:
        ...


class RequestsTransport:
    """Transport backed by a requests session."""

    def __init__(self, timeout: float = 30, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def perform(self, url: str) -> Outcome:
        """
        GET ``url`` and decode the JSON response.

        Returns:
            (None, body) on success, (TransportError, None) otherwise
        """
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            return TransportError(f"HTTP request failed: {e}", status_code=status), None
        except requests.RequestException as e:
            return TransportError(f"HTTP request failed: {e}"), None

        try:
            return None, response.json()
        except ValueError as e:
            return TransportError(
                f"Invalid JSON in response: {e}", status_code=response.status_code
            ), None

    def close(self):
        """Close HTTP session."""
        if self.session:
            self.session.close()
