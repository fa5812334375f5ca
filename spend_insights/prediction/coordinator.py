"""Per-session coordination of prediction requests.

The coordinator owns a table of RequestState keyed by TargetKey. Each key
moves idle -> pending -> succeeded|failed, and a finished key can be started
again, overwriting its previous outcome. Independently of the table there is
one "displayed" slot holding the most recently resolved outcome together with
the key that produced it, plus an "active" pointer to the key most recently
started.
"""
from __future__ import annotations

import uuid
from typing import Callable, Dict, List, Optional

from spend_insights.behaviors import BehaviorTab, parse_tab
from spend_insights.notifications import LoggingNotifier, Notifier, safe_notify
from spend_insights.prediction.client import BasePredictorClient
from spend_insights.prediction.metrics import MetricDeriver
from spend_insights.prediction.models import (
    CUSTOM_KEY,
    DisplayedOutcome,
    PredictionResult,
    PredictionTarget,
    RequestState,
    TargetKey,
)
from spend_insights.prediction.request_builder import RequestBuilder
from spend_insights.utils.logging import get_logger


logger = get_logger(__name__)

Listener = Callable[[TargetKey, RequestState], None]

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
RETRY_LATER_MESSAGE = "Please try again later"
BEHAVIOR_SUCCESS_MESSAGE = "Prediction complete! View your behavior prediction below."
CUSTOM_SUCCESS_MESSAGE = "Custom analysis complete! View your prediction results below."


class RequestCoordinator:
    """Runs predictions and tracks their state per target."""

    def __init__(
        self,
        client: BasePredictorClient,
        builder: Optional[RequestBuilder] = None,
        deriver: Optional[MetricDeriver] = None,
        notifier: Optional[Notifier] = None,
        active_tab: BehaviorTab = BehaviorTab.IMPULSE,
    ) -> None:
        self.client = client
        self.builder = builder or RequestBuilder()
        self.deriver = deriver or MetricDeriver()
        self.notifier = notifier if notifier is not None else LoggingNotifier()
        self._active_tab = parse_tab(active_tab)
        self._states: Dict[TargetKey, RequestState] = {}
        self._active_key: Optional[TargetKey] = None
        self._displayed: Optional[DisplayedOutcome] = None
        self._listeners: List[Listener] = []

    # Queries

    @property
    def active_tab(self) -> BehaviorTab:
        return self._active_tab

    def set_active_tab(self, tab) -> None:
        """Switch the tab used to resolve behavior ids. Pending requests are unaffected."""
        self._active_tab = parse_tab(tab)

    @property
    def active_key(self) -> Optional[TargetKey]:
        return self._active_key

    @property
    def displayed(self) -> Optional[DisplayedOutcome]:
        return self._displayed

    @property
    def states(self) -> Dict[TargetKey, RequestState]:
        return dict(self._states)

    def behavior_key(self, behavior_id: int, tab=None) -> TargetKey:
        tab = parse_tab(tab) if tab is not None else self._active_tab
        return TargetKey(tab.value, behavior_id)

    def get_state(self, key: TargetKey) -> RequestState:
        return self._states.get(key, RequestState())

    def is_pending(self, key: TargetKey) -> bool:
        return self.get_state(key).is_pending

    def displayed_result_for(self, key: TargetKey) -> Optional[PredictionResult]:
        """The displayed result, only if it was produced by `key`."""
        if self._displayed is not None and self._displayed.key == key:
            return self._displayed.result
        return None

    def displayed_error_for(self, key: TargetKey) -> Optional[str]:
        if self._displayed is not None and self._displayed.key == key:
            return self._displayed.error
        return None

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a transition listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, key: TargetKey, state: RequestState) -> None:
        for listener in list(self._listeners):
            try:
                listener(key, state)
            except Exception:
                logger.exception(f"State listener failed for {key.tab}:{key.behavior_id}")

    def _set_state(self, key: TargetKey, state: RequestState) -> None:
        self._states[key] = state
        self._emit(key, state)

    # Commands

    def start_prediction(self, key: TargetKey) -> bool:
        """Mark `key` pending. Returns False (and changes nothing) if it already is."""
        if self.is_pending(key):
            logger.warning(
                f"Ignoring duplicate prediction trigger for {key.tab}:{key.behavior_id}",
                extra={"target": f"{key.tab}:{key.behavior_id}", "status": "pending"},
            )
            return False
        self._active_key = key
        self._displayed = None
        self._set_state(key, RequestState.pending())
        return True

    def clear_active(self) -> None:
        """Forget the active pointer; stored outcomes stay as they are."""
        self._active_key = None

    async def predict_behavior(self, behavior_id: int, tab=None) -> RequestState:
        """Predict a behavior card; `tab` defaults to the active tab.

        Raises:
            ValidationError: `behavior_id` is the reserved custom-analysis id;
                no state slot is created and the predictor is not called
        """
        target = self.builder.resolve_target(
            behavior_id, tab if tab is not None else self._active_tab
        )
        return await self.run(target)

    async def run_custom_analysis(self) -> RequestState:
        """Predict overall spending."""
        return await self.run(self.builder.custom_target())

    async def run(self, target: PredictionTarget) -> RequestState:
        """Drive one target from pending to a terminal state.

        Failures are recorded on the target's state and reported through the
        notifier; nothing is raised to the caller.
        """
        key = target.key
        if not self.start_prediction(key):
            return self.get_state(key)

        extra = {
            "correlation_id": uuid.uuid4().hex,
            "target": f"{key.tab}:{key.behavior_id}",
        }
        logger.info(f"Requesting prediction for '{target.category}'", extra=extra)

        try:
            request = self.builder.build(target)
            response = await self.client.predict(request)
            result = self.deriver.derive(target.behavior_id, response, target.recommendation_label)
        except Exception as e:
            message = str(e)
            logger.error(
                f"Prediction failed for '{target.category}': {message or type(e).__name__}",
                extra={**extra, "status": "failed"},
            )
            self._resolve(key, RequestState.failed(message or UNEXPECTED_ERROR_MESSAGE))
            safe_notify(self.notifier, "error", message or RETRY_LATER_MESSAGE)
        else:
            logger.info(
                f"Prediction for '{target.category}': {result.predicted_change:.1f}% change",
                extra={**extra, "status": "succeeded"},
            )
            self._resolve(key, RequestState.succeeded(result))
            safe_notify(
                self.notifier,
                "info",
                CUSTOM_SUCCESS_MESSAGE if key == CUSTOM_KEY else BEHAVIOR_SUCCESS_MESSAGE,
            )
        finally:
            if self._active_key == key:
                self._active_key = None

        return self.get_state(key)

    def _resolve(self, key: TargetKey, state: RequestState) -> None:
        self._displayed = DisplayedOutcome(key=key, result=state.result, error=state.error)
        self._set_state(key, state)
