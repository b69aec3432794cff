"""Face API client."""

import logging
from typing import Any

import requests

logger = logging.getLogger(__name__)


class FaceApiClient:
    """Client for the Face API analysis endpoint."""

    def __init__(self, url: str, timeout: float = 30):
        self.url = url
        self.timeout = timeout

    def _get_headers(self) -> dict:
        return {"Content-Type": "application/json"}

    def analyze(self, payload: Any) -> Any:
        """
        Submit a message payload for analysis.

        Args:
            payload: Decoded message body, sent as the JSON request body

        Returns:
            Decoded JSON when the API answers with JSON, the raw text otherwise

        Raises:
            requests.HTTPError: on a non-success status
            requests.RequestException: on connection errors and timeouts
        """
        response = requests.post(
            self.url,
            json=payload,
            headers=self._get_headers(),
            timeout=self.timeout,
        )
        response.raise_for_status()
        logger.debug("Face API status=%s", response.status_code)

        content_type = response.headers.get("Content-Type", "")
        if "json" in content_type and response.content:
            try:
                return response.json()
            except requests.JSONDecodeError:
                logger.warning("Face API declared JSON but sent an unparseable body")
        return response.text
