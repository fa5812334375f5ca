import pytest

from spend_insights.notifications import CallbackNotifier
from spend_insights.prediction.client import HttpPredictorClient
from spend_insights.prediction.models import RequestStatus
from spend_insights.service import build_coordinator


def test_build_coordinator_uses_config(temp_config_file, fixed_clock):
    coordinator = build_coordinator(temp_config_file, clock=fixed_clock)

    assert isinstance(coordinator.client, HttpPredictorClient)
    assert coordinator.client.url == "http://predictor.test/api/v1/predict"
    assert coordinator.deriver.confidence == 0.7
    defaults = coordinator.builder.defaults
    assert (defaults.user_id, defaults.amount, defaults.age) == (42, 2500.0, 31)


def test_each_call_builds_a_fresh_coordinator(temp_config_file):
    assert build_coordinator(temp_config_file) is not build_coordinator(temp_config_file)


@pytest.mark.asyncio
async def test_end_to_end_with_fake_client(temp_config_file, fixed_clock, fake_predictor):
    notices = []
    coordinator = build_coordinator(
        temp_config_file,
        clock=fixed_clock,
        client=fake_predictor,
        notifier=CallbackNotifier(on_info=notices.append, on_error=notices.append),
    )

    state = await coordinator.predict_behavior(1)

    assert state.status is RequestStatus.SUCCEEDED
    assert state.result.confidence == 0.7
    request = fake_predictor.calls[0]
    assert (request.user_id, request.amount, request.age) == (42, 2500.0, 31)
    assert len(notices) == 1
