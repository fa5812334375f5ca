"""Custom exception classes for Spend Insights."""
from typing import Optional


class SpendInsightsError(Exception):
    """Base exception for all Spend Insights errors."""
    pass


class ConfigurationError(SpendInsightsError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(SpendInsightsError):
    """Raised when request data validation fails."""
    pass


class PredictionError(SpendInsightsError):
    """Base exception for prediction failures."""
    pass


class TransportError(PredictionError):
    """Raised when the prediction service call is rejected or unreachable."""

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class DerivationError(PredictionError):
    """Raised when metrics cannot be derived from a prediction response."""

    ZERO_BASELINE = "zero-baseline"
    NON_FINITE = "non-finite"

    def __init__(self, reason: str, message: Optional[str] = None):
        super().__init__(message or f"DerivationError: {reason}")
        self.reason = reason
