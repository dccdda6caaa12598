"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from wardrobes.domain.entities import (
    Catalog,
    Handle,
    HandleFinish,
    Material,
    WardrobeConfig,
)
from wardrobes.domain.rules import MaterialFacts, RuleContext, WardrobeFacts

BODY_ID = 1
FRONT_ID = 2
BACK_ID = 3


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that drive the CLI or API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def catalog() -> Catalog:
    """Body at 1000/m², front at 2000/m², back at 500/m² and one handle."""
    return Catalog(
        materials=(
            Material(id=BODY_ID, name="Iverica Bela", price=1000, thickness=18, categories=("iverica",)),
            Material(id=FRONT_ID, name="MDF Sivi", price=2000, thickness=18, categories=("front",)),
            Material(id=BACK_ID, name="Lesonit", price=500, thickness=3, categories=("Leđa",)),
        ),
        handles=(
            Handle(
                id=7,
                name="Bar",
                legacy_id="bar",
                finishes=(
                    HandleFinish(id=70, name="Chrome", price=300, legacy_id="chrome"),
                    HandleFinish(id=71, name="Black", price=450, legacy_id="black"),
                ),
            ),
        ),
    )


@pytest.fixture
def basic_config() -> WardrobeConfig:
    """One 100 x 200 x 60 column with no shelves, doors or base."""
    return WardrobeConfig(width=100, height=200, depth=60, selected_material_id=BODY_ID)


def _make_facts(**overrides: Any) -> WardrobeFacts:
    """WardrobeFacts with plain defaults, overridable per field."""
    values: dict[str, Any] = {
        "width": 200.0,
        "height": 240.0,
        "depth": 60.0,
        "area": 8.5,
        "column_count": 2,
        "shelf_count": 4,
        "door_count": 2,
        "drawer_count": 0,
        "material": MaterialFacts(id=BODY_ID, name="Iverica Bela"),
        "front_material": MaterialFacts(id=FRONT_ID, name="MDF Sivi"),
        "back_material": MaterialFacts(id=BACK_ID, name="Lesonit"),
    }
    values.update(overrides)
    return WardrobeFacts(**values)


@pytest.fixture
def make_facts() -> Callable[..., WardrobeFacts]:
    """Factory for WardrobeFacts; keyword arguments override the defaults."""
    return _make_facts


@pytest.fixture
def rule_context() -> RuleContext:
    return RuleContext(wardrobe=_make_facts())


# =============================================================================
# JSON document fixtures
# =============================================================================


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    return {
        "materials": [
            {"id": 1, "name": "Iverica Bela", "price": 1000, "thickness": 18, "categories": ["iverica"]},
            {"id": 2, "name": "MDF Sivi", "price": 2000, "thickness": 18, "categories": ["front"]},
            {"id": 3, "name": "Lesonit", "price": 500, "thickness": 3, "categories": ["leđa"]},
        ],
        "handles": [
            {
                "id": 7,
                "name": "Bar",
                "legacyId": "bar",
                "finishes": [
                    {"id": 70, "name": "Chrome", "price": 300, "legacyId": "chrome"}
                ],
            }
        ],
    }


@pytest.fixture
def wardrobe_data() -> dict[str, Any]:
    """Two 100 cm columns; column A has a shelf at 1 m and a double door."""
    return {
        "width": 200,
        "height": 200,
        "depth": 60,
        "panelThickness": 18,
        "verticalBoundaries": [0],
        "columnHorizontalBoundaries": {"0": [1.0]},
        "selectedMaterialId": 1,
        "selectedFrontMaterialId": 2,
        "doorGroups": [
            {"id": "door-A", "type": "double", "column": "A", "compartments": ["A1", "A2"]}
        ],
        "globalHandleId": "bar",
        "globalHandleFinish": "chrome",
    }


@pytest.fixture
def rules_data() -> list[dict[str, Any]]:
    return [
        {
            "id": "wide",
            "name": "Wide wardrobe surcharge",
            "priority": 2,
            "conditions": [
                {"field": "wardrobe.width", "operator": "greater_equal", "value": 200}
            ],
            "actions": [{"type": "surcharge_fixed", "config": {"value": 1000}}],
        },
        {
            "id": "vip",
            "name": "VIP discount",
            "priority": 1,
            "conditions": [
                {"field": "customer.tags", "operator": "contains", "value": "vip"}
            ],
            "actions": [
                {
                    "type": "discount_percentage",
                    "config": {"value": 10, "visibleToCustomer": True},
                }
            ],
        },
        {
            "id": "assembly",
            "name": "Assembly kit",
            "priority": 3,
            "conditions": [],
            "actions": [
                {
                    "type": "add_item",
                    "config": {"itemName": "Assembly kit", "itemPrice": 50, "quantity": "doorCount * 2"},
                }
            ],
        },
    ]
