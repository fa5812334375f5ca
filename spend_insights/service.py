"""Wiring of a per-session RequestCoordinator from configuration."""
from __future__ import annotations

from datetime import date
from typing import Callable, Optional

from spend_insights.behaviors import BehaviorCatalog
from spend_insights.config import Config
from spend_insights.notifications import Notifier
from spend_insights.prediction.client import BasePredictorClient, HttpPredictorClient
from spend_insights.prediction.config import PredictionConfig
from spend_insights.prediction.coordinator import RequestCoordinator
from spend_insights.prediction.metrics import MetricDeriver
from spend_insights.prediction.request_builder import RequestBuilder, RequestDefaults
from spend_insights.utils.logging import get_logger


logger = get_logger(__name__)


def build_coordinator(
    config_path: str = "config.yaml",
    notifier: Optional[Notifier] = None,
    clock: Optional[Callable[[], date]] = None,
    client: Optional[BasePredictorClient] = None,
    catalog: Optional[BehaviorCatalog] = None,
) -> RequestCoordinator:
    """Create a fresh coordinator for one session/view.

    Loads `config_path` (which also configures logging) and uses the HTTP
    client unless another collaborator is supplied.
    """
    config = Config(config_path)
    prediction_cfg = PredictionConfig.from_dict(config.prediction)
    logger.info(f"{config.app_name} {config.app_version}: predictor at {prediction_cfg.predict_url}")

    builder = RequestBuilder(
        catalog=catalog,
        defaults=RequestDefaults.from_config(prediction_cfg),
        clock=clock,
    )
    return RequestCoordinator(
        client=client or HttpPredictorClient(prediction_cfg),
        builder=builder,
        deriver=MetricDeriver(confidence=prediction_cfg.confidence),
        notifier=notifier,
    )
