"""Unit tests for door metrics."""

from dataclasses import replace

import pytest

from wardrobes.domain.entities import Catalog, DoorGroup, WardrobeConfig
from wardrobes.domain.services import compute_door_metrics, resolve_handle_names
from wardrobes.domain.value_objects import DoorType


def _door(door_id: str, door_type: DoorType, *keys: str, column: str = "A") -> DoorGroup:
    return DoorGroup(id=door_id, type=door_type, column=column, compartments=keys)


@pytest.fixture
def two_columns() -> WardrobeConfig:
    """200 wide, shelf at 1 m in column A, column B unshelved."""
    return WardrobeConfig(
        width=200,
        height=200,
        depth=60,
        selected_material_id=1,
        vertical_boundaries=(0,),
        column_horizontal_boundaries={0: (1.0,)},
    )


class TestDoorCounts:
    """Counting door groups by type."""

    def test_no_doors(self, two_columns: WardrobeConfig) -> None:
        metrics = compute_door_metrics(two_columns)
        assert metrics.door_count == 0
        assert metrics.max_door_height == 0
        assert metrics.min_door_height == 0
        assert metrics.handle_count == 0

    def test_none_groups_are_ignored(self, two_columns: WardrobeConfig) -> None:
        config = replace(two_columns, door_groups=(_door("d", DoorType.NONE, "A1"),))
        assert compute_door_metrics(config).door_count == 0

    def test_counts_by_type(self, two_columns: WardrobeConfig) -> None:
        config = replace(
            two_columns,
            door_groups=(
                _door("d1", DoorType.DOUBLE_MIRROR, "A1"),
                _door("d2", DoorType.LEFT_MIRROR, "A2"),
                _door("d3", DoorType.DRAWER_STYLE, "B1", column="B"),
            ),
        )
        metrics = compute_door_metrics(config)
        assert metrics.double_door_count == 1
        assert metrics.single_door_count == 1
        assert metrics.drawer_style_door_count == 1
        assert metrics.mirror_door_count == 2
        assert metrics.door_count == 3
        assert metrics.handle_count == 3

    def test_to_dict_includes_door_count(self, two_columns: WardrobeConfig) -> None:
        config = replace(two_columns, door_groups=(_door("d", DoorType.RIGHT, "A1"),))
        data = compute_door_metrics(config).to_dict()
        assert data["door_count"] == 1
        assert data["single_door_count"] == 1


class TestDoorHeights:
    """Height extremes follow compartment geometry."""

    def test_heights_from_compartments(self, two_columns: WardrobeConfig) -> None:
        config = replace(
            two_columns,
            door_groups=(
                _door("d1", DoorType.LEFT, "A1"),
                _door("d2", DoorType.RIGHT, "B1", column="B"),
            ),
        )
        metrics = compute_door_metrics(config)
        assert metrics.min_door_height == pytest.approx(97.3)
        assert metrics.max_door_height == pytest.approx(196.4)

    def test_door_over_two_compartments(self, two_columns: WardrobeConfig) -> None:
        config = replace(two_columns, door_groups=(_door("d", DoorType.LEFT, "A1", "A2"),))
        metrics = compute_door_metrics(config)
        assert metrics.max_door_height == pytest.approx(194.6)
        assert metrics.min_door_height == pytest.approx(194.6)

    def test_unresolvable_group_does_not_affect_heights(
        self, two_columns: WardrobeConfig
    ) -> None:
        config = replace(
            two_columns,
            door_groups=(
                _door("d1", DoorType.LEFT, "A1"),
                _door("d2", DoorType.LEFT, "Z1", column="Z"),
            ),
        )
        metrics = compute_door_metrics(config)
        assert metrics.door_count == 2
        assert metrics.min_door_height == pytest.approx(97.3)

    def test_heights_are_rounded_to_one_decimal(self) -> None:
        config = WardrobeConfig(
            width=100,
            height=200.37,
            depth=60,
            selected_material_id=1,
            door_groups=(_door("d", DoorType.LEFT, "A1"),),
        )
        # 200.37 - 3.6 = 196.77
        assert compute_door_metrics(config).max_door_height == pytest.approx(196.8)


class TestHandleNames:
    """Resolving the global handle selection to display names."""

    def test_names_from_catalog(self, two_columns: WardrobeConfig, catalog: Catalog) -> None:
        config = replace(two_columns, global_handle_id="bar", global_handle_finish="chrome")
        assert resolve_handle_names(config, catalog.handles) == ("Bar", "Chrome")

    def test_metrics_carry_names(self, two_columns: WardrobeConfig, catalog: Catalog) -> None:
        config = replace(
            two_columns,
            global_handle_id="7",
            global_handle_finish="71",
            door_groups=(_door("d", DoorType.LEFT, "A1"),),
        )
        metrics = compute_door_metrics(config, catalog.handles)
        assert metrics.handle_name == "Bar"
        assert metrics.handle_finish_name == "Black"

    def test_unknown_finish(self, two_columns: WardrobeConfig, catalog: Catalog) -> None:
        config = replace(two_columns, global_handle_id="bar", global_handle_finish="gold")
        assert resolve_handle_names(config, catalog.handles) == ("Bar", "")

    def test_no_handle_selected(self, two_columns: WardrobeConfig, catalog: Catalog) -> None:
        assert resolve_handle_names(two_columns, catalog.handles) == ("", "")

    def test_no_catalog(self, two_columns: WardrobeConfig) -> None:
        config = replace(two_columns, global_handle_id="bar")
        assert resolve_handle_names(config, None) == ("", "")
