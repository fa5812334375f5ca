import pytest

from spend_insights.prediction.recommendations import recommend, round_half_up


def test_increase_recommends_reduction():
    assert recommend(20.000000000000004, "Late Night Shopping") == [
        "Consider reducing your late night shopping spending by 20%",
        "Set a weekly budget for this category",
    ]


def test_decrease_is_positive():
    assert recommend(-15.0, "Food Delivery") == [
        "Your food delivery spending is trending down, which is positive",
        "Consider setting aside the savings for your financial goals",
    ]


def test_stable():
    assert recommend(0.0, "overall spending") == [
        "Your overall spending spending is stable",
        "Continue monitoring your spending patterns",
    ]


@pytest.mark.parametrize("change", [10, -10, 10.0, -10.0, 9.99, -9.99])
def test_boundaries_are_stable(change):
    assert recommend(change, "Coffee")[0] == "Your coffee spending is stable"


def test_just_past_boundaries():
    assert recommend(10.01, "Coffee")[0].startswith("Consider reducing")
    assert recommend(-10.01, "Coffee")[0].endswith("which is positive")


@pytest.mark.parametrize("change", [-250.0, -10.5, 0.0, 10.5, 999.9])
def test_always_two_and_deterministic(change):
    first = recommend(change, "Daily Coffee Runs")
    assert len(first) == 2
    assert all(first)
    assert recommend(change, "Daily Coffee Runs") == first


def test_rounds_half_up():
    assert round_half_up(20.5) == 21
    assert round_half_up(20.4) == 20
    assert round_half_up(-10.5) == -10
    assert "by 13%" in recommend(12.5, "Coffee")[0]
