"""Pytest configuration and fixtures."""
import asyncio
from datetime import date
from pathlib import Path
import tempfile
from typing import Dict, List, Optional

import pytest
import yaml

from spend_insights.notifications import Notifier
from spend_insights.prediction.client import BasePredictorClient
from spend_insights.prediction.models import PredictionRequest, PredictionResponse
from spend_insights.prediction.request_builder import RequestBuilder


FIXED_DAY = date(2024, 1, 1)  # a Monday


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'prediction': {
            'base_url': 'http://predictor.test',
            'predict_path': '/api/v1/predict',
            'timeout_seconds': 5,
            'confidence': 0.7,
            'user_id': 42,
            'amount': 2500,
            'age': 31
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    Path(config_path).unlink()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_DAY


@pytest.fixture
def builder(fixed_clock):
    return RequestBuilder(clock=fixed_clock)


class FakePredictor(BasePredictorClient):
    """Returns a canned response (or raises) and records requests."""

    NAME = "fake"

    def __init__(self, response: Optional[PredictionResponse] = None, error: Optional[Exception] = None):
        self.response = response or PredictionResponse(1000.0, 1200.0, [170.0] * 7)
        self.error = error
        self.calls: List[PredictionRequest] = []

    async def predict(self, request: PredictionRequest) -> PredictionResponse:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class GatedPredictor(BasePredictorClient):
    """Holds each request until the test opens the gate for its category."""

    NAME = "gated"

    def __init__(self):
        self.calls: List[PredictionRequest] = []
        self.gates: Dict[str, asyncio.Event] = {}
        self.outcomes: Dict[str, object] = {}

    def gate(self, category: str) -> asyncio.Event:
        if category not in self.gates:
            self.gates[category] = asyncio.Event()
        return self.gates[category]

    async def predict(self, request: PredictionRequest) -> PredictionResponse:
        self.calls.append(request)
        await self.gate(request.category).wait()
        outcome = self.outcomes[request.category]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingNotifier(Notifier):
    def __init__(self):
        self.infos: List[str] = []
        self.errors: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def fake_predictor():
    return FakePredictor()


@pytest.fixture
def gated_predictor():
    return GatedPredictor()
