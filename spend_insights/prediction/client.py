"""Prediction service clients."""
from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import httpx

from spend_insights.prediction.config import PredictionConfig
from spend_insights.prediction.models import PredictionRequest, PredictionResponse
from spend_insights.utils.decorators import log_execution
from spend_insights.utils.errors import TransportError
from spend_insights.utils.logging import get_logger


logger = get_logger(__name__)


class BasePredictorClient(ABC):
    """Interface of the model-serving collaborator."""

    NAME: str = "base"

    @abstractmethod
    async def predict(self, request: PredictionRequest) -> PredictionResponse:
        """Return the raw prediction or raise TransportError."""


def _extract_error_message(response: Optional[httpx.Response]) -> Optional[str]:
    """Pull a human-readable message out of an error body, if there is one."""
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        for key in ("detail", "message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
    return None


class HttpPredictorClient(BasePredictorClient):
    """POSTs prediction requests to a JSON model-serving endpoint."""

    NAME = "http"

    def __init__(self, config: Optional[PredictionConfig] = None) -> None:
        self.config = config or PredictionConfig()
        self.url: str = self.config.predict_url
        self.timeout: float = float(self.config.timeout_seconds)
        self.api_key: str = os.getenv(self.config.api_key_env, "")

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    @log_execution(log_args=False, log_result=False)
    async def predict(self, request: PredictionRequest) -> PredictionResponse:
        payload = request.to_payload()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.post(self.url, json=payload, headers=self._headers())
                resp.raise_for_status()
                data: Any = resp.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code if e.response is not None else None
            message = _extract_error_message(e.response) or f"Prediction service returned HTTP {status}"
            logger.warning(f"Prediction request failed with status {status}: {message}")
            raise TransportError(message, status_code=status)
        except httpx.HTTPError as e:
            logger.warning(f"Prediction request failed: {e!r}")
            raise TransportError(str(e))
        except ValueError as e:
            logger.warning(f"Prediction service returned a non-JSON body: {e}")
            raise TransportError("Invalid response from prediction service")

        return PredictionResponse.from_payload(data)
