"""Unit tests for column building, compartment resolution and Y mapping."""

import pytest

from wardrobes.domain.entities import DoorGroup, WardrobeConfig
from wardrobes.domain.geometry import (
    CoordinateMapper,
    build_columns,
    column_index,
    compartment_map,
    door_group_height,
    resolve_column_spans,
    resolve_compartments,
)
from wardrobes.domain.value_objects import DoorType, column_letter, parse_compartment_key


def _config(**kwargs) -> WardrobeConfig:
    values = {"width": 100, "height": 200, "depth": 60, "selected_material_id": 1}
    values.update(kwargs)
    return WardrobeConfig(**values)


class TestBuildColumns:
    """Tests for splitting the width into column blocks."""

    def test_no_boundaries_gives_one_block(self) -> None:
        columns = build_columns(200)
        assert len(columns) == 1
        assert (columns[0].start, columns[0].end, columns[0].width) == (0, 200, 200)

    def test_boundary_on_edge_is_dropped(self) -> None:
        columns = build_columns(200, [-1.0])
        assert len(columns) == 1
        assert (columns[0].start, columns[0].end, columns[0].width) == (0, 200, 200)

    def test_boundary_beyond_right_edge_is_dropped(self) -> None:
        columns = build_columns(200, [1.0, 2.5])
        assert len(columns) == 1

    def test_center_boundary_gives_two_equal_blocks(self) -> None:
        columns = build_columns(200, [0])
        assert [(c.start, c.end, c.width) for c in columns] == [
            (0, 100, 100),
            (100, 200, 100),
        ]

    @pytest.mark.parametrize("boundaries", [[-0.5, 0.5], [0.5, -0.5]])
    def test_boundaries_are_sorted(self, boundaries: list[float]) -> None:
        columns = build_columns(300, boundaries)
        assert [c.width for c in columns] == pytest.approx([100, 100, 100])

    def test_duplicate_boundaries_do_not_create_empty_blocks(self) -> None:
        columns = build_columns(300, [0, 0, 0])
        assert len(columns) == 2
        assert all(c.width > 0 for c in columns)

    @pytest.mark.parametrize(
        "width,boundaries",
        [
            (240, [-0.6, -0.2, 0.3]),
            (180, [0.9, -0.9, 0.1]),
            (400, [-1.5, -0.5, 0.5, 1.5, 1.5]),
        ],
    )
    def test_blocks_are_contiguous_and_cover_width(
        self, width: float, boundaries: list[float]
    ) -> None:
        columns = build_columns(width, boundaries)
        assert columns[0].start == 0
        assert columns[-1].end == width
        for left, right in zip(columns, columns[1:]):
            assert left.end == right.start
        assert all(c.width > 0 for c in columns)

    def test_indices_and_letters(self) -> None:
        columns = build_columns(300, [-0.5, 0.5])
        assert [c.index for c in columns] == [0, 1, 2]
        assert [c.letter for c in columns] == ["A", "B", "C"]

    def test_zero_width_gives_no_blocks(self) -> None:
        assert build_columns(0) == []


class TestColumnLetters:
    """Tests for spreadsheet-style column letters."""

    @pytest.mark.parametrize(
        "index,letter", [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB")]
    )
    def test_round_trip(self, index: int, letter: str) -> None:
        assert column_letter(index) == letter
        assert column_index(letter) == index

    def test_invalid_letter(self) -> None:
        assert column_index("") is None
        assert column_index("A1") is None

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValueError):
            column_letter(-1)


class TestResolveCompartments:
    """Tests for the shelf walk and module split."""

    def test_single_compartment_without_shelves(self) -> None:
        compartments = resolve_compartments(_config(), 0)
        assert len(compartments) == 1
        assert compartments[0].key == "A1"
        assert compartments[0].bottom_y == pytest.approx(1.8)
        assert compartments[0].top_y == pytest.approx(198.2)

    def test_base_raises_inner_bottom(self) -> None:
        compartments = resolve_compartments(_config(has_base=True, base_height=10), 0)
        assert compartments[0].bottom_y == pytest.approx(11.8)

    def test_base_height_ignored_without_base(self) -> None:
        compartments = resolve_compartments(_config(has_base=False, base_height=10), 0)
        assert compartments[0].bottom_y == pytest.approx(1.8)

    def test_two_shelves_give_three_compartments(self) -> None:
        config = _config(column_horizontal_boundaries={0: (0.5, 1.0)})
        compartments = resolve_compartments(config, 0)
        assert [c.key for c in compartments] == ["A1", "A2", "A3"]

    def test_compartments_tile_inner_height(self) -> None:
        config = _config(column_horizontal_boundaries={0: (1.0, 0.5, 1.5)})
        compartments = resolve_compartments(config, 0)
        assert compartments[0].bottom_y == pytest.approx(1.8)
        assert compartments[-1].top_y == pytest.approx(198.2)
        for lower, upper in zip(compartments, compartments[1:]):
            assert upper.bottom_y >= lower.top_y
            assert upper.bottom_y - lower.top_y == pytest.approx(1.8)
        assert all(c.span > 0 for c in compartments)

    def test_shelf_closer_than_thickness_is_dropped(self) -> None:
        config = _config(column_horizontal_boundaries={0: (0.02, 0.5)})
        spans = resolve_column_spans(config, 0)
        assert spans.shelves == [pytest.approx(50.0)]
        assert len(resolve_compartments(config, 0, spans)) == 2

    def test_shelves_outside_column_are_ignored(self) -> None:
        config = _config(column_horizontal_boundaries={0: (-0.5, 2.5)})
        assert len(resolve_compartments(config, 0)) == 1

    def test_module_split_on_tall_column(self) -> None:
        config = _config(height=250, column_module_boundaries={0: 2.0})
        compartments = resolve_compartments(config, 0)
        assert [c.key for c in compartments] == ["A1", "A2"]
        assert compartments[0].top_y == pytest.approx(198.2)
        assert compartments[1].bottom_y == pytest.approx(201.8)
        assert compartments[1].top_y == pytest.approx(248.2)
        assert [c.module for c in compartments] == [0, 1]

    def test_module_split_ignored_at_threshold(self) -> None:
        config = _config(height=200, column_module_boundaries={0: 1.0})
        spans = resolve_column_spans(config, 0)
        assert not spans.is_split
        assert len(resolve_compartments(config, 0, spans)) == 1

    def test_module_split_too_close_to_floor_is_ignored(self) -> None:
        config = _config(height=250, column_module_boundaries={0: 0.02})
        assert not resolve_column_spans(config, 0).is_split
        assert len(resolve_compartments(config, 0)) == 1

    def test_module_split_too_close_to_top_is_ignored(self) -> None:
        config = _config(height=250, column_module_boundaries={0: 2.47})
        assert not resolve_column_spans(config, 0).is_split

    def test_column_height_override_drives_split(self) -> None:
        config = _config(
            width=200,
            height=200,
            vertical_boundaries=(0,),
            column_heights={1: 260},
            column_module_boundaries={0: 1.5, 1: 2.0},
        )
        assert not resolve_column_spans(config, 0).is_split
        assert resolve_column_spans(config, 1).is_split

    def test_keys_continue_across_modules(self) -> None:
        config = _config(
            height=250,
            column_module_boundaries={0: 2.0},
            column_horizontal_boundaries={0: (1.0,)},
            column_top_module_shelves={0: (2.25,)},
        )
        compartments = resolve_compartments(config, 0)
        assert [c.key for c in compartments] == ["A1", "A2", "A3", "A4"]
        assert [c.module for c in compartments] == [0, 0, 1, 1]

    def test_bottom_shelves_above_split_are_ignored(self) -> None:
        config = _config(
            height=250,
            column_module_boundaries={0: 2.0},
            column_horizontal_boundaries={0: (2.2,)},
        )
        assert len(resolve_compartments(config, 0)) == 2

    @pytest.mark.parametrize("index,prefix", [(1, "B"), (2, "C")])
    def test_key_prefix_follows_column(self, index: int, prefix: str) -> None:
        config = _config(width=300, vertical_boundaries=(-0.5, 0.5))
        assert resolve_compartments(config, index)[0].key == f"{prefix}1"

    def test_compartment_map_spans_all_columns(self) -> None:
        config = _config(
            width=200,
            vertical_boundaries=(0,),
            column_horizontal_boundaries={1: (1.0,)},
        )
        assert sorted(compartment_map(config)) == ["A1", "B1", "B2"]


class TestDoorGroupHeight:
    """Tests for the door span rule shared by cut list and door metrics."""

    @pytest.fixture
    def config(self) -> WardrobeConfig:
        return _config(column_horizontal_boundaries={0: (1.0,)})

    def _height(self, config: WardrobeConfig, *keys: str, column: str = "A") -> float:
        group = DoorGroup(id="d", type=DoorType.LEFT, column=column, compartments=keys)
        return door_group_height(group, compartment_map(config), 1)

    def test_single_compartment(self, config: WardrobeConfig) -> None:
        assert self._height(config, "A1") == pytest.approx(97.3)

    def test_sub_compartments_of_one_compartment(self, config: WardrobeConfig) -> None:
        assert self._height(config, "A1.0.1", "A1.0.2") == pytest.approx(97.3)

    def test_several_compartments_sum(self, config: WardrobeConfig) -> None:
        assert self._height(config, "A1", "A2") == pytest.approx(194.6)

    def test_duplicates_counted_once(self, config: WardrobeConfig) -> None:
        assert self._height(config, "A1", "A1.1.0", "A2") == pytest.approx(194.6)

    def test_unknown_column(self, config: WardrobeConfig) -> None:
        assert self._height(config, "B1", column="B") == 0

    def test_unknown_compartment(self, config: WardrobeConfig) -> None:
        assert self._height(config, "A9") == 0


class TestCoordinateMapper:
    """Tests for mapping floor heights to screen Y."""

    @pytest.fixture
    def mapper(self) -> CoordinateMapper:
        return CoordinateMapper(
            front_view_y=10,
            scaled_height=400,
            scale=2,
            height=200,
            column_heights={1: 150},
        )

    def test_floor_and_top(self, mapper: CoordinateMapper) -> None:
        assert mapper.map_y(0) == 410
        assert mapper.map_y(200) == 10
        assert mapper.map_y(50) == 310

    def test_clamps_to_wardrobe_height(self, mapper: CoordinateMapper) -> None:
        assert mapper.map_y(-20) == mapper.map_y(0)
        assert mapper.map_y(500) == mapper.map_y(200)

    def test_clamps_to_column_height(self, mapper: CoordinateMapper) -> None:
        assert mapper.map_y_for_column(180, 1) == mapper.map_y_for_column(150, 1)
        assert mapper.map_y_for_column(-5, 1) == mapper.map_y_for_column(0, 1)

    def test_column_without_override_uses_wardrobe_height(
        self, mapper: CoordinateMapper
    ) -> None:
        assert mapper.map_y_for_column(180, 0) == mapper.map_y(180)


class TestParseCompartmentKey:
    def test_base_key(self) -> None:
        parsed = parse_compartment_key("B3")
        assert parsed.base_key == "B3"
        assert parsed.column == "B"
        assert parsed.index == 3
        assert (parsed.section_index, parsed.space_index) == (0, 0)

    def test_sub_key(self) -> None:
        parsed = parse_compartment_key("A1.0.2")
        assert parsed.base_key == "A1"
        assert parsed.space_index == 2

    @pytest.mark.parametrize("key", ["1A", "", "A", "a1"])
    def test_malformed(self, key: str) -> None:
        assert parse_compartment_key(key) is None


class TestWardrobeConfigSnapshot:
    """Per-column mappings cannot change after construction."""

    def test_mappings_are_read_only(self) -> None:
        config = _config(column_horizontal_boundaries={0: (1.0,)})
        with pytest.raises(TypeError):
            config.column_horizontal_boundaries[0] = (0.5,)
        with pytest.raises(TypeError):
            config.column_heights[0] = 150

    def test_source_dict_is_copied(self) -> None:
        shelves = {0: (1.0,)}
        config = _config(column_horizontal_boundaries=shelves)
        shelves[0] = (0.5, 1.5)
        assert config.column_horizontal_boundaries == {0: (1.0,)}
        assert [c.key for c in resolve_compartments(config, 0)] == ["A1", "A2"]
