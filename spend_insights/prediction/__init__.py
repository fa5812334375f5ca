"""Prediction package public API."""

from .models import (
    CUSTOM_KEY,
    DisplayedOutcome,
    PredictionRequest,
    PredictionResponse,
    PredictionResult,
    PredictionTarget,
    RequestState,
    RequestStatus,
    TargetKey,
)
from .config import PredictionConfig
from .client import BasePredictorClient, HttpPredictorClient
from .metrics import MetricDeriver, predicted_change_pct
from .recommendations import recommend
from .request_builder import RequestBuilder, RequestDefaults
from .coordinator import RequestCoordinator

__all__ = [
    "CUSTOM_KEY",
    "DisplayedOutcome",
    "PredictionRequest",
    "PredictionResponse",
    "PredictionResult",
    "PredictionTarget",
    "RequestState",
    "RequestStatus",
    "TargetKey",
    "PredictionConfig",
    "BasePredictorClient",
    "HttpPredictorClient",
    "MetricDeriver",
    "predicted_change_pct",
    "recommend",
    "RequestBuilder",
    "RequestDefaults",
    "RequestCoordinator",
]
