from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

from spend_insights.utils.errors import TransportError, ValidationError


class TargetKey(NamedTuple):
    """State-table key: behavior ids repeat across tabs, so the tab is part of it."""

    tab: str
    behavior_id: int


CUSTOM_TAB = "custom"
CUSTOM_KEY = TargetKey(CUSTOM_TAB, 0)


@dataclass(frozen=True)
class PredictionTarget:
    """What a prediction is requested for."""

    key: TargetKey
    category: str  # label sent to the model
    recommendation_label: str  # label embedded in recommendation text

    @property
    def behavior_id(self) -> int:
        return self.key.behavior_id

    @property
    def is_custom(self) -> bool:
        return self.key == CUSTOM_KEY


@dataclass
class PredictionRequest:
    """Request sent to the prediction service."""

    user_id: int
    category: str
    amount: float
    age: int
    day_of_week: int  # 0 = Sunday
    month: int  # 1-12
    day_of_month: int
    year: int

    def validate(self) -> None:
        if not self.category:
            raise ValidationError("category is required")
        if not 0 <= self.day_of_week <= 6:
            raise ValidationError(f"Invalid day_of_week: {self.day_of_week}")
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Invalid month: {self.month}")
        if not 1 <= self.day_of_month <= 31:
            raise ValidationError(f"Invalid day_of_month: {self.day_of_month}")

    def to_payload(self) -> Dict[str, Any]:
        """Wire format expected by the model-serving endpoint."""
        return {
            "User_id": self.user_id,
            "category": self.category,
            "Amount": self.amount,
            "Age": self.age,
            "Day_of_week": self.day_of_week,
            "Month": self.month,
            "Day_of_month": self.day_of_month,
            "year": self.year,
        }


@dataclass
class PredictionResponse:
    """Raw prediction returned by the service."""

    last_week_total: float
    predicted_week_total: float
    daily_predictions: Optional[List[float]] = None

    @classmethod
    def from_payload(cls, data: Any) -> "PredictionResponse":
        if not isinstance(data, dict):
            raise TransportError("Invalid response from prediction service")
        try:
            daily = data.get("daily_predictions")
            return cls(
                last_week_total=float(data["last_week_total"]),
                predicted_week_total=float(data["predicted_week_total"]),
                daily_predictions=[float(v) for v in daily] if daily is not None else None,
            )
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise TransportError(f"Invalid response from prediction service: missing or bad field {e}")


@dataclass
class PredictionResult:
    """Display-ready prediction for one target."""

    behavior_id: int
    predicted_change: float  # percent
    confidence: float  # 0-1
    recommended_actions: List[str] = field(default_factory=list)
    last_week_total: Optional[float] = None
    predicted_week_total: Optional[float] = None
    daily_predictions: Optional[List[float]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "behavior_id": self.behavior_id,
            "predicted_change": self.predicted_change,
            "confidence": self.confidence,
            "recommended_actions": list(self.recommended_actions),
            "last_week_total": self.last_week_total,
            "predicted_week_total": self.predicted_week_total,
            "daily_predictions": list(self.daily_predictions) if self.daily_predictions is not None else None,
        }


class RequestStatus(Enum):
    """Lifecycle of one target's prediction."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestState:
    """Per-target state; replaced wholesale on each transition."""

    status: RequestStatus = RequestStatus.IDLE
    result: Optional[PredictionResult] = None
    error: Optional[str] = None

    @classmethod
    def pending(cls) -> "RequestState":
        return cls(status=RequestStatus.PENDING)

    @classmethod
    def succeeded(cls, result: PredictionResult) -> "RequestState":
        return cls(status=RequestStatus.SUCCEEDED, result=result)

    @classmethod
    def failed(cls, message: str) -> "RequestState":
        return cls(status=RequestStatus.FAILED, error=message)

    @property
    def is_pending(self) -> bool:
        return self.status is RequestStatus.PENDING

    @property
    def is_terminal(self) -> bool:
        return self.status in (RequestStatus.SUCCEEDED, RequestStatus.FAILED)


@dataclass(frozen=True)
class DisplayedOutcome:
    """The single shown result or error, always tied to the key that produced it."""

    key: TargetKey
    result: Optional[PredictionResult] = None
    error: Optional[str] = None
