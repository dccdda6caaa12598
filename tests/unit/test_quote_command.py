"""Unit tests for the rule context builder and the quote command."""

from dataclasses import replace

import pytest

from wardrobes.application import (
    CustomerInput,
    PricingError,
    QuoteCommand,
    RuleContextBuilder,
    get_factory,
)
from wardrobes.application.config import (
    ConfigError,
    config_to_rules,
    load_rules_from_dict,
)
from wardrobes.domain.entities import (
    Catalog,
    CompartmentExtras,
    DoorGroup,
    Material,
    WardrobeConfig,
)
from wardrobes.domain.rules import (
    FieldId,
    Rule,
    RuleAction,
    RuleActionConfig,
    RuleCondition,
)
from wardrobes.domain.services import (
    CatalogError,
    CutListError,
    calculate_cut_list,
    compute_door_metrics,
)
from wardrobes.domain.value_objects import DoorType

BODY_ID = 1
FRONT_ID = 2
BACK_ID = 3


@pytest.fixture
def fitted_config() -> WardrobeConfig:
    """Two columns: A has a shelf and a double door, B has drawers and a rod."""
    return WardrobeConfig(
        width=200,
        height=200,
        depth=60,
        selected_material_id=BODY_ID,
        selected_front_material_id=FRONT_ID,
        vertical_boundaries=(0,),
        column_horizontal_boundaries={0: (1.0, 0.01)},
        door_groups=(
            DoorGroup(id="d1", type=DoorType.DOUBLE_MIRROR, column="A", compartments=("A1", "A2")),
        ),
        compartment_extras={
            "B1": CompartmentExtras(drawers=True, drawers_count=3, rod=True, led=True),
            "A2": CompartmentExtras(vertical_divider=True),
        },
        global_handle_id="bar",
        global_handle_finish="chrome",
    )


def _surcharge(rule_id: str, value: float, *conditions: RuleCondition, priority: int = 0) -> Rule:
    return Rule(
        id=rule_id,
        name=rule_id,
        priority=priority,
        conditions=conditions,
        actions=(RuleAction(type="surcharge_fixed", config=RuleActionConfig(value=value)),),
    )


class TestRuleContextBuilder:
    """Facts are taken from what was actually built."""

    def _context(self, config, catalog, **kwargs):
        cut_list = calculate_cut_list(config, catalog)
        metrics = compute_door_metrics(config, catalog.handles)
        return cut_list, RuleContextBuilder(catalog).build(config, cut_list, metrics, **kwargs)

    def test_wardrobe_counts(self, fitted_config: WardrobeConfig, catalog: Catalog) -> None:
        cut_list, context = self._context(fitted_config, catalog)
        wardrobe = context.wardrobe
        assert wardrobe.column_count == 2
        # the shelf at 1 cm is too close to the floor and is not built
        assert wardrobe.shelf_count == 1
        assert wardrobe.drawer_count == 3
        assert wardrobe.door_count == 1
        assert wardrobe.rod_count == 1
        assert wardrobe.led_count == 1
        assert wardrobe.vertical_divider_count == 1
        assert wardrobe.area == pytest.approx(cut_list.total_area)
        assert wardrobe.doors.mirror_door_count == 1
        assert wardrobe.doors.handle_name == "Bar"

    def test_materials(self, fitted_config: WardrobeConfig, catalog: Catalog) -> None:
        _, context = self._context(fitted_config, catalog)
        assert context.wardrobe.material.name == "Iverica Bela"
        assert context.wardrobe.front_material.id == FRONT_ID
        assert context.wardrobe.back_material.id == BACK_ID

    def test_order_total_defaults_to_rounded_cost(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        _, context = self._context(basic_config, catalog, order_city="Beograd")
        assert context.order.total == 4537
        assert context.order.city == "Beograd"

    def test_customer_facts(self, basic_config: WardrobeConfig, catalog: Catalog) -> None:
        customer = CustomerInput(tags=("vip",), email="kupac@example.rs", order_count=4)
        _, context = self._context(basic_config, catalog, customer=customer)
        assert context.customer.tags == ("vip",)
        assert context.customer.email == "kupac@example.rs"
        assert context.customer.order_count == 4

    def test_base_offset_only_with_base(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        config = replace(basic_config, has_base=False, base_height=10)
        _, context = self._context(config, catalog)
        assert context.wardrobe.base_height == 0
        assert not context.wardrobe.has_base


class TestQuoteCommand:
    """End-to-end pricing of one wardrobe."""

    def test_base_total_without_rules(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        quote = QuoteCommand(catalog).execute(basic_config)
        assert quote.base_total == 4537
        assert quote.pricing.adjusted_total is None
        assert quote.final_total == 4537
        assert quote.adjustments == ()

    def test_rules_adjust_total(self, basic_config: WardrobeConfig, catalog: Catalog) -> None:
        rules = [
            _surcharge(
                "narrow",
                300,
                RuleCondition(field=FieldId.WIDTH, operator="less_equal", value=100),
            ),
            _surcharge(
                "tall",
                999,
                RuleCondition(field=FieldId.HEIGHT, operator="greater_than", value=220),
            ),
        ]
        quote = QuoteCommand(catalog).execute(basic_config, rules)
        assert [a.rule_id for a in quote.adjustments] == ["narrow"]
        assert quote.final_total == 4837

    def test_order_total_is_base_price(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        rule = _surcharge(
            "big-order",
            100,
            RuleCondition(field=FieldId.ORDER_TOTAL, operator="greater_than", value=4536),
        )
        quote = QuoteCommand(catalog).execute(basic_config, [rule])
        assert quote.final_total == 4637

    def test_city_and_customer_reach_rules(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        rule = _surcharge(
            "delivery",
            1500,
            RuleCondition(field=FieldId.ORDER_CITY, operator="in", value=["Niš", "Subotica"]),
        )
        command = QuoteCommand(catalog)
        assert command.execute(basic_config, [rule], order_city="niš").final_total == 6037
        assert command.execute(basic_config, [rule], order_city="Beograd").final_total == 4537

    def test_visibility_split(self, basic_config: WardrobeConfig, catalog: Catalog) -> None:
        rule = Rule(
            id="kit",
            name="Kit",
            actions=(
                RuleAction(
                    type="add_item",
                    config=RuleActionConfig(item_name="Legs", item_price=25, quantity=4),
                ),
                RuleAction(type="discount_fixed", config=RuleActionConfig(value=37)),
            ),
        )
        quote = QuoteCommand(catalog).execute(basic_config, [rule])
        assert [a.amount for a in quote.hidden_adjustments] == [100]
        assert [a.amount for a in quote.visible_adjustments] == [-37]
        assert quote.final_total == 4600

    def test_snapshot(self, basic_config: WardrobeConfig, catalog: Catalog) -> None:
        data = QuoteCommand(catalog).execute(basic_config).to_dict()
        assert data["baseTotal"] == 4537
        assert data["adjustedTotal"] is None
        assert data["finalTotal"] == 4537
        assert data["cutList"]["items"][0]["code"] == "SL"
        assert data["doorMetrics"]["door_count"] == 0

    def test_unknown_material_propagates(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        with pytest.raises(CatalogError):
            QuoteCommand(catalog).execute(replace(basic_config, selected_material_id=404))

    def test_zero_priced_materials_fail(self, basic_config: WardrobeConfig) -> None:
        free = Catalog(
            materials=(
                Material(id=BODY_ID, name="Free", price=0),
                Material(id=BACK_ID, name="Free back", price=0, categories=("back",)),
            )
        )
        with pytest.raises(PricingError) as exc_info:
            QuoteCommand(free).execute(basic_config)
        assert "base total" in exc_info.value.reason
        assert str(exc_info.value).startswith(PricingError.USER_MESSAGE)

    def test_cut_list_errors_become_pricing_errors(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        class BrokenBuilder:
            def build(self, config):
                raise CutListError("Cut list totals are not finite")

        command = QuoteCommand(catalog, cut_list_builder=BrokenBuilder())
        with pytest.raises(PricingError, match="not finite"):
            command.execute(basic_config)

    def test_factory_wires_command(self, basic_config: WardrobeConfig, catalog: Catalog) -> None:
        command = get_factory(catalog).create_quote_command()
        assert command.catalog is catalog
        assert command.execute(basic_config).base_total == 4537

    def test_non_finite_material_price_fails(self, basic_config: WardrobeConfig) -> None:
        catalog = Catalog(
            materials=(
                Material(id=BODY_ID, name="Body", price=float("inf")),
                Material(id=BACK_ID, name="Back", price=500, categories=("back",)),
            )
        )
        with pytest.raises(PricingError, match="not finite"):
            QuoteCommand(catalog).execute(basic_config)


class TestNonFiniteAdjustments:
    """Rule values that are not finite never reach the final price."""

    @pytest.mark.parametrize(
        "action_type,value",
        [
            ("surcharge_fixed", float("inf")),
            ("discount_percentage", float("inf")),
            ("discount_fixed", float("nan")),
        ],
    )
    def test_skipped_by_engine(
        self,
        basic_config: WardrobeConfig,
        catalog: Catalog,
        action_type: str,
        value: float,
    ) -> None:
        rule = Rule(
            id="bad",
            name="Bad",
            actions=(RuleAction(type=action_type, config=RuleActionConfig(value=value)),),
        )
        quote = QuoteCommand(catalog).execute(basic_config, [rule])
        assert quote.adjustments == ()
        assert quote.final_total == 4537

    def test_overflowing_total_fails(
        self, basic_config: WardrobeConfig, catalog: Catalog
    ) -> None:
        rules = [
            _surcharge("huge-1", 1e308, priority=1),
            _surcharge("huge-2", 1e308, priority=2),
        ]
        with pytest.raises(PricingError, match="adjusted total is not finite"):
            QuoteCommand(catalog).execute(basic_config, rules)

    def test_rejected_when_loaded(self) -> None:
        data = [
            {
                "id": "bad",
                "name": "Bad",
                "actions": [{"type": "surcharge_fixed", "config": {"value": float("inf")}}],
            }
        ]
        with pytest.raises(ConfigError):
            config_to_rules(load_rules_from_dict(data))
