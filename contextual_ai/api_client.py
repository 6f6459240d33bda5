"""HTTP client for a running contextual-ai API."""
from __future__ import annotations

from typing import Any, Optional

import httpx

from contextual_ai.adaptation.models import (
    BehavioralAdaptationRequest,
    BehavioralAdaptationResponse,
    LowBandwidthRequest,
    LowBandwidthResponse,
    OfflineFirstRequest,
    OfflineFirstResponse,
)
from contextual_ai.exceptions import ApiClientError


class ContextualAIClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(base_url=self.base_url, timeout=timeout, transport=transport)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ContextualAIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def health(self) -> dict[str, Any]:
        try:
            response = self._client.get("/health")
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiClientError(
                f"Health check returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ApiClientError(f"Health check failed: {e}") from e
        return response.json()

    def generate_offline_content(self, request: OfflineFirstRequest) -> OfflineFirstResponse:
        data = self._post("/learning/offline-content", request.to_wire())
        return OfflineFirstResponse.model_validate(data)

    def compress_content(self, request: LowBandwidthRequest) -> LowBandwidthResponse:
        data = self._post("/learning/compress-content", request.to_wire())
        return LowBandwidthResponse.model_validate(data)

    def adapt_content(self, request: BehavioralAdaptationRequest) -> BehavioralAdaptationResponse:
        data = self._post("/learning/adapt-content", request.to_wire())
        return BehavioralAdaptationResponse.model_validate(data)

    def _post(self, path: str, payload: dict[str, Any]) -> Any:
        """POST ``payload`` and unwrap the ``data`` member of the envelope."""
        try:
            response = self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise ApiClientError(f"Request to {path} failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error or not body.get("success", False):
            raise ApiClientError(
                body.get("error") or f"HTTP {response.status_code} from {path}",
                status_code=response.status_code,
                fields=body.get("fields"),
            )
        return body.get("data")
