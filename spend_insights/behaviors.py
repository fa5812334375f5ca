"""Spending behavior catalog.

Behaviors are grouped by tab. Ids are unique within a tab only, and `0` is
reserved for the custom (overall spending) analysis.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from spend_insights.utils.errors import ValidationError


CUSTOM_BEHAVIOR_ID = 0


class BehaviorTab(Enum):
    """Behavior list a card belongs to."""

    IMPULSE = "impulse"
    POSITIVE = "positive"


@dataclass(frozen=True)
class Behavior:
    """A named spending pattern shown as a card."""

    id: int
    title: str
    description: str
    impact: str  # high | medium
    progress: int  # 0-100
    savings: Optional[str] = None  # impulse behaviors only
    trend: Optional[str] = None  # up | down, positive behaviors only

    def validate(self) -> None:
        if self.id == CUSTOM_BEHAVIOR_ID:
            raise ValidationError(f"Behavior id {CUSTOM_BEHAVIOR_ID} is reserved for custom analysis")
        if self.impact not in {"high", "medium"}:
            raise ValidationError(f"Invalid impact: {self.impact}")
        if not 0 <= self.progress <= 100:
            raise ValidationError(f"Invalid progress: {self.progress}")
        if self.trend is not None and self.trend not in {"up", "down"}:
            raise ValidationError(f"Invalid trend: {self.trend}")


DEFAULT_BEHAVIORS: Dict[BehaviorTab, List[Behavior]] = {
    BehaviorTab.IMPULSE: [
        Behavior(
            id=1,
            title="Late Night Shopping",
            description="You tend to make unplanned purchases between 10PM and 2AM.",
            impact="high",
            savings="₹3,200/month",
            progress=75,
        ),
        Behavior(
            id=2,
            title="Daily Coffee Runs",
            description="You spend on coffee shops 18 times per month, averaging ₹250 per visit.",
            impact="medium",
            savings="₹2,500/month",
            progress=60,
        ),
        Behavior(
            id=3,
            title="Food Delivery",
            description="You order food delivery 3-4 times per week, often during work hours.",
            impact="medium",
            savings="₹4,000/month",
            progress=55,
        ),
    ],
    BehaviorTab.POSITIVE: [
        Behavior(
            id=1,
            title="Consistent Savings",
            description="You've maintained a regular savings deposit for 3 consecutive months.",
            impact="high",
            trend="up",
            progress=85,
        ),
        Behavior(
            id=2,
            title="Reduced Entertainment",
            description="Your entertainment spending has decreased by 15% in the last month.",
            impact="medium",
            trend="up",
            progress=65,
        ),
        Behavior(
            id=3,
            title="Bill Payment Timing",
            description="You've paid all bills on time for the past 6 months, avoiding late fees.",
            impact="medium",
            trend="up",
            progress=90,
        ),
    ],
}


class BehaviorCatalog:
    """Lookup of behaviors per tab."""

    def __init__(self, behaviors: Optional[Dict[BehaviorTab, List[Behavior]]] = None) -> None:
        self._behaviors = {tab: list(items) for tab, items in (behaviors or DEFAULT_BEHAVIORS).items()}
        for tab, items in self._behaviors.items():
            seen = set()
            for behavior in items:
                behavior.validate()
                if behavior.id in seen:
                    raise ValidationError(f"Duplicate behavior id {behavior.id} in tab {tab.value}")
                seen.add(behavior.id)

    def for_tab(self, tab: BehaviorTab) -> List[Behavior]:
        return list(self._behaviors.get(tab, []))

    def find(self, behavior_id: int, tab: BehaviorTab) -> Optional[Behavior]:
        """Return the behavior with this id in the tab, or None."""
        for behavior in self._behaviors.get(tab, []):
            if behavior.id == behavior_id:
                return behavior
        return None


def parse_tab(value) -> BehaviorTab:
    """Accept a BehaviorTab or its string value."""
    if isinstance(value, BehaviorTab):
        return value
    try:
        return BehaviorTab(str(value).lower())
    except ValueError:
        raise ValidationError(f"Unknown behavior tab: {value}")
