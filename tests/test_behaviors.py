import pytest

from spend_insights.behaviors import (
    Behavior,
    BehaviorCatalog,
    BehaviorTab,
    CUSTOM_BEHAVIOR_ID,
    parse_tab,
)
from spend_insights.utils.errors import ValidationError


def test_default_catalog_lists_both_tabs():
    catalog = BehaviorCatalog()
    impulse = [b.title for b in catalog.for_tab(BehaviorTab.IMPULSE)]
    positive = [b.title for b in catalog.for_tab(BehaviorTab.POSITIVE)]
    assert impulse == ["Late Night Shopping", "Daily Coffee Runs", "Food Delivery"]
    assert positive == ["Consistent Savings", "Reduced Entertainment", "Bill Payment Timing"]


def test_ids_repeat_across_tabs():
    catalog = BehaviorCatalog()
    assert catalog.find(1, BehaviorTab.IMPULSE).title == "Late Night Shopping"
    assert catalog.find(1, BehaviorTab.POSITIVE).title == "Consistent Savings"
    assert catalog.find(99, BehaviorTab.IMPULSE) is None


def test_no_behavior_uses_custom_id():
    catalog = BehaviorCatalog()
    for tab in BehaviorTab:
        assert all(b.id != CUSTOM_BEHAVIOR_ID for b in catalog.for_tab(tab))


def test_reserved_id_rejected():
    with pytest.raises(ValidationError):
        BehaviorCatalog({BehaviorTab.IMPULSE: [Behavior(0, "X", "", "high", 10)]})


def test_duplicate_id_rejected():
    items = [Behavior(1, "A", "", "high", 10), Behavior(1, "B", "", "medium", 20)]
    with pytest.raises(ValidationError, match="Duplicate"):
        BehaviorCatalog({BehaviorTab.IMPULSE: items})


def test_parse_tab():
    assert parse_tab("impulse") is BehaviorTab.IMPULSE
    assert parse_tab("POSITIVE") is BehaviorTab.POSITIVE
    assert parse_tab(BehaviorTab.POSITIVE) is BehaviorTab.POSITIVE
    with pytest.raises(ValidationError):
        parse_tab("custom")
