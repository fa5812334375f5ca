"""Derive display metrics from raw prediction output."""
import math
from typing import Callable, List

from spend_insights.prediction.models import PredictionResponse, PredictionResult
from spend_insights.prediction.recommendations import recommend
from spend_insights.utils.errors import DerivationError


DEFAULT_CONFIDENCE = 0.85


def predicted_change_pct(last_week_total: float, predicted_week_total: float) -> float:
    """Percent change from last week's total to the predicted total.

    Raises:
        DerivationError: zero baseline, or any non-finite outcome
    """
    if last_week_total == 0:
        raise DerivationError(
            DerivationError.ZERO_BASELINE,
            "Cannot compute predicted change: last week total is zero",
        )
    change = (predicted_week_total - last_week_total) / last_week_total * 100
    if not math.isfinite(change):
        raise DerivationError(
            DerivationError.NON_FINITE,
            "Cannot compute predicted change: prediction totals are not finite",
        )
    return change


class MetricDeriver:
    """Turns a PredictionResponse into a PredictionResult."""

    def __init__(
        self,
        confidence: float = DEFAULT_CONFIDENCE,
        recommender: Callable[[float, str], List[str]] = recommend,
    ) -> None:
        self.confidence = confidence
        self.recommender = recommender

    def derive(self, behavior_id: int, response: PredictionResponse, category: str) -> PredictionResult:
        change = predicted_change_pct(response.last_week_total, response.predicted_week_total)
        return PredictionResult(
            behavior_id=behavior_id,
            predicted_change=change,
            confidence=self.confidence,
            recommended_actions=self.recommender(change, category),
            last_week_total=response.last_week_total,
            predicted_week_total=response.predicted_week_total,
            daily_predictions=list(response.daily_predictions) if response.daily_predictions is not None else None,
        )
