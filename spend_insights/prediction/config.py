from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml

from spend_insights.utils.errors import ConfigurationError
from spend_insights.utils.paths import resolve_config_path


@dataclass
class PredictionConfig:
    """Prediction service and request-default configuration."""

    # Collaborator endpoint
    base_url: str = "http://localhost:8000"
    predict_path: str = "/predict"
    timeout_seconds: float = 10.0
    api_key_env: str = "PREDICTOR_API_KEY"

    # Placeholder until the model reports its own confidence
    confidence: float = 0.85

    # Placeholder user context until a user-context provider exists
    user_id: int = 1
    amount: float = 1000.0
    age: int = 25

    def __post_init__(self) -> None:
        if not 0.0 <= float(self.confidence) <= 1.0:
            raise ConfigurationError(f"confidence must be within [0, 1], got {self.confidence}")
        if float(self.timeout_seconds) <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    @property
    def predict_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.predict_path.lstrip('/')}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PredictionConfig":
        """Build from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    @classmethod
    def from_yaml(cls, config_path: str = "config.yaml") -> "PredictionConfig":
        """Load the root-level `prediction:` section; defaults when the file is absent."""
        cfg_path = resolve_config_path(config_path)
        if cfg_path.exists():
            with open(cfg_path, "r") as f:
                full_config = yaml.safe_load(f) or {}
            return cls.from_dict(full_config.get("prediction") or {})
        return cls()
