"""Assemble prediction requests from a selected target and contextual defaults."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from spend_insights.behaviors import (
    CUSTOM_BEHAVIOR_ID,
    BehaviorCatalog,
    BehaviorTab,
    parse_tab,
)
from spend_insights.prediction.config import PredictionConfig
from spend_insights.prediction.models import (
    CUSTOM_KEY,
    PredictionRequest,
    PredictionTarget,
    TargetKey,
)
from spend_insights.utils.errors import ValidationError
from spend_insights.utils.logging import get_logger


logger = get_logger(__name__)

CUSTOM_CATEGORY = "Custom Analysis"
CUSTOM_RECOMMENDATION_LABEL = "overall spending"
FALLBACK_CATEGORY = "Other"

CUSTOM_TARGET = PredictionTarget(
    key=CUSTOM_KEY,
    category=CUSTOM_CATEGORY,
    recommendation_label=CUSTOM_RECOMMENDATION_LABEL,
)


@dataclass(frozen=True)
class RequestDefaults:
    """User context sent with every request until a real user profile is wired in."""

    user_id: int = 1
    amount: float = 1000.0
    age: int = 25

    @classmethod
    def from_config(cls, cfg: PredictionConfig) -> "RequestDefaults":
        return cls(user_id=int(cfg.user_id), amount=float(cfg.amount), age=int(cfg.age))


def _sunday_first_weekday(d: date) -> int:
    # date.weekday() is Monday = 0; the model expects Sunday = 0
    return d.isoweekday() % 7


class RequestBuilder:
    """Builds a PredictionRequest for a behavior or the custom analysis."""

    def __init__(
        self,
        catalog: Optional[BehaviorCatalog] = None,
        defaults: Optional[RequestDefaults] = None,
        clock: Optional[Callable[[], date]] = None,
    ) -> None:
        self.catalog = catalog or BehaviorCatalog()
        self.defaults = defaults or RequestDefaults()
        self.clock = clock or date.today

    def resolve_target(self, behavior_id: int, tab) -> PredictionTarget:
        """Map an id in a tab to a target; unknown ids fall back to "Other".

        Raises:
            ValidationError: `behavior_id` is the id reserved for custom analysis
        """
        if behavior_id == CUSTOM_BEHAVIOR_ID:
            raise ValidationError(
                f"Behavior id {CUSTOM_BEHAVIOR_ID} is reserved for custom analysis"
            )
        behavior_tab: BehaviorTab = parse_tab(tab)
        behavior = self.catalog.find(behavior_id, behavior_tab)
        if behavior is None:
            logger.warning(
                f"No behavior {behavior_id} in tab {behavior_tab.value}; using '{FALLBACK_CATEGORY}'"
            )
            category = FALLBACK_CATEGORY
        else:
            category = behavior.title
        return PredictionTarget(
            key=TargetKey(behavior_tab.value, behavior_id),
            category=category,
            recommendation_label=category,
        )

    def custom_target(self) -> PredictionTarget:
        return CUSTOM_TARGET

    def build(self, target: PredictionTarget) -> PredictionRequest:
        """Build the request; date fields are read from the clock at call time."""
        today = self.clock()
        request = PredictionRequest(
            user_id=self.defaults.user_id,
            category=target.category,
            amount=self.defaults.amount,
            age=self.defaults.age,
            day_of_week=_sunday_first_weekday(today),
            month=today.month,
            day_of_month=today.day,
            year=today.year,
        )
        request.validate()
        return request
