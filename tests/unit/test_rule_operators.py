"""Unit tests for rule operators, field resolution and quantity formulas."""

import pytest

from wardrobes.domain.rules import (
    FIELD_DEFINITIONS,
    CustomerFacts,
    FieldCategory,
    FieldId,
    FieldType,
    OrderFacts,
    RuleContext,
    RuleDefinitionError,
    evaluate_formula,
    evaluate_operator,
    is_empty,
    resolve_field,
    validate_field,
)
from wardrobes.domain.services import DoorMetrics


class TestEquality:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("Iverica", "iverica", True),
            (200, 200.0, True),
            (200, "200", False),
            (True, 1, False),
            (True, True, True),
            ("a", "b", False),
        ],
    )
    def test_equals(self, a, b, expected: bool) -> None:
        assert evaluate_operator(a, "equals", b) is expected

    def test_not_equals_is_negation(self) -> None:
        assert evaluate_operator("Beograd", "not_equals", "Novi Sad")
        assert not evaluate_operator("BEOGRAD", "not_equals", "beograd")


class TestContains:
    def test_list_membership_ignores_case(self) -> None:
        assert evaluate_operator(["VIP", "b2b"], "contains", "vip")

    def test_list_membership_is_exact(self) -> None:
        assert not evaluate_operator(["vip-gold"], "contains", "vip")

    def test_substring(self) -> None:
        assert evaluate_operator("Iverica Bela", "contains", "bela")

    def test_number_never_contains(self) -> None:
        assert not evaluate_operator(200, "contains", "2")

    def test_not_contains(self) -> None:
        assert evaluate_operator([], "not_contains", "vip")
        assert not evaluate_operator(["vip"], "not_contains", "VIP")


class TestMembership:
    def test_in_list(self) -> None:
        assert evaluate_operator("beograd", "in", ["Beograd", "Novi Sad"])
        assert evaluate_operator(2, "in", [1, 2, 3])

    def test_in_requires_list(self) -> None:
        assert not evaluate_operator("Beograd", "in", "Beograd")

    def test_not_in(self) -> None:
        assert evaluate_operator("Niš", "not_in", ["Beograd"])
        assert not evaluate_operator(3, "not_in", [3])


class TestComparisons:
    @pytest.mark.parametrize(
        "op,value,expected",
        [
            ("greater_than", 199, True),
            ("greater_than", 200, False),
            ("greater_equal", 200, True),
            ("less_than", 201, True),
            ("less_equal", 200, True),
            ("less_equal", 199.9, False),
        ],
    )
    def test_numeric(self, op: str, value: float, expected: bool) -> None:
        assert evaluate_operator(200, op, value) is expected

    def test_numeric_strings_are_coerced(self) -> None:
        assert evaluate_operator("250", "greater_than", "200")

    def test_non_numeric_is_false(self) -> None:
        assert not evaluate_operator("tall", "greater_than", 100)
        assert not evaluate_operator(200, "less_than", None)
        assert not evaluate_operator(True, "greater_than", 0)


class TestEmptiness:
    @pytest.mark.parametrize("value", [None, "", "   ", [], ()])
    def test_empty(self, value) -> None:
        assert is_empty(value)
        assert evaluate_operator(value, "is_empty", None)

    @pytest.mark.parametrize("value", [0, False, "x", ["a"]])
    def test_not_empty(self, value) -> None:
        assert not is_empty(value)
        assert evaluate_operator(value, "is_not_empty", None)


class TestUnknownOperator:
    def test_evaluates_false_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("WARNING"):
            assert not evaluate_operator(1, "roughly", 1)
        assert "Unknown operator" in caplog.text


class TestFields:
    """The field registry and fact lookup."""

    def test_every_field_has_a_definition(self) -> None:
        assert set(FIELD_DEFINITIONS) == set(FieldId)

    def test_definition_metadata(self) -> None:
        width = FIELD_DEFINITIONS[FieldId.WIDTH]
        assert width.key == "wardrobe.width"
        assert width.category is FieldCategory.WARDROBE
        assert width.type is FieldType.NUMBER
        assert width.unit == "cm"
        assert FIELD_DEFINITIONS[FieldId.CUSTOMER_TAGS].type is FieldType.ARRAY

    def test_validate_field(self) -> None:
        assert validate_field("wardrobe.maxDoorHeight") is FieldId.MAX_DOOR_HEIGHT

    def test_validate_unknown_field(self) -> None:
        with pytest.raises(RuleDefinitionError) as exc_info:
            validate_field("wardrobe.colour")
        assert exc_info.value.field_path == "wardrobe.colour"

    def test_resolve_wardrobe_facts(self, rule_context: RuleContext) -> None:
        assert resolve_field(rule_context, FieldId.WIDTH) == 200
        assert resolve_field(rule_context, "wardrobe.material.name") == "Iverica Bela"
        assert resolve_field(rule_context, "wardrobe.hasDoors") is True
        assert resolve_field(rule_context, "wardrobe.hasDrawers") is False

    def test_resolve_door_facts(self, make_facts) -> None:
        doors = DoorMetrics(mirror_door_count=1, max_door_height=210.5, handle_name="Bar")
        context = RuleContext(wardrobe=make_facts(doors=doors))
        assert resolve_field(context, "wardrobe.hasMirror") is True
        assert resolve_field(context, "wardrobe.maxDoorHeight") == 210.5
        assert resolve_field(context, "wardrobe.handleName") == "Bar"

    def test_resolve_customer_and_order(self, make_facts) -> None:
        context = RuleContext(
            wardrobe=make_facts(),
            customer=CustomerFacts(tags=("vip",), email="a@b.rs", order_count=3),
            order=OrderFacts(total=12000, city="Beograd"),
        )
        assert resolve_field(context, "customer.tags") == ["vip"]
        assert resolve_field(context, "customer.orderCount") == 3
        assert resolve_field(context, "order.total") == 12000
        assert resolve_field(context, "order.city") == "Beograd"

    def test_missing_facts_resolve_to_none(self, rule_context: RuleContext) -> None:
        assert resolve_field(rule_context, "customer.email") is None
        assert resolve_field(rule_context, "order.city") is None
        assert resolve_field(rule_context, "not.a.field") is None

    def test_missing_back_material(self, make_facts) -> None:
        context = RuleContext(wardrobe=make_facts(back_material=None))
        assert resolve_field(context, "wardrobe.backMaterial.name") is None


class TestFormula:
    """Quantity formulas for added items."""

    def test_field_times_number(self, make_facts) -> None:
        assert evaluate_formula("doorCount * 3", make_facts(door_count=4)) == 12

    def test_product_rounds_half_up(self, make_facts) -> None:
        assert evaluate_formula("area * 0.5", make_facts(area=5.0)) == 3

    def test_bare_number(self, make_facts) -> None:
        assert evaluate_formula("2", make_facts()) == 2
        assert evaluate_formula(1.5, make_facts()) == 1.5

    def test_bare_field(self, make_facts) -> None:
        assert evaluate_formula("shelfCount", make_facts(shelf_count=7)) == 7

    @pytest.mark.parametrize("formula", ["doorCount + 1", "colour * 2", "", "2 * doorCount"])
    def test_unsupported_forms(self, make_facts, formula: str) -> None:
        assert evaluate_formula(formula, make_facts()) is None

    @pytest.mark.parametrize("formula", [float("inf"), float("nan")])
    def test_non_finite_number(self, make_facts, formula: float) -> None:
        assert evaluate_formula(formula, make_facts()) is None

    def test_overflowing_product(self, make_facts) -> None:
        formula = "doorCount * " + "9" * 400
        assert evaluate_formula(formula, make_facts(door_count=4)) is None
