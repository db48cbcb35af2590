import json
from logging import getLogger
from typing import Protocol

import requests

from .dto import OrderPayload, RelayOutcome

log = getLogger(__name__)

ORDER_PATH = "/order"


class Backend(Protocol):
    def post_json(self, path: str, body: dict) -> RelayOutcome:
        ...

    def post_order(self, payload: OrderPayload) -> RelayOutcome:
        ...


class BackendClient:
    """
    A client for pushing order events to the marketplace backend.

    Every failure is reported through the returned RelayOutcome, nothing is
    raised and nothing is retried.
    """

    def __init__(self, backend_url: str):
        self.backend_url = backend_url.rstrip("/")
        self._headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
        }

    def post_json(self, path: str, body: dict) -> RelayOutcome:
        """Sends a POST request to the given path and checks for {"success": true}."""
        url = self.backend_url + path
        log.debug(f"POST {url} {body}")

        try:
            response = requests.post(url, headers=self._headers, data=json.dumps(body))
        except requests.exceptions.RequestException as e:
            log.warning(f"Backend error: {e}")
            return RelayOutcome(success=False, error=str(e))

        if not 200 <= response.status_code < 300:
            log.warning(f"Backend rejected: {response.status_code} {response.text}")
            return RelayOutcome(
                success=False, status_code=response.status_code, error=response.text
            )

        try:
            data = response.json()
        except ValueError:
            log.warning(f"Backend returned invalid JSON: {response.text}")
            return RelayOutcome(
                success=False,
                status_code=response.status_code,
                error="Response body is not valid JSON",
            )

        if not isinstance(data, dict) or data.get("success") is not True:
            log.warning(f"Backend did not confirm success: {data}")
            return RelayOutcome(
                success=False,
                status_code=response.status_code,
                error=f"Unexpected response body: {data}",
            )
        return RelayOutcome(success=True, status_code=response.status_code)

    def post_order(self, payload: OrderPayload) -> RelayOutcome:
        return self.post_json(ORDER_PATH, payload.to_json())
