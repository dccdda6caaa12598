"""Adapters from validated configuration schemas to domain objects."""

from wardrobes.application.config.schemas import (
    CatalogSchema,
    RuleSchema,
    RuleSetSchema,
    WardrobeConfigSchema,
)
from wardrobes.domain.entities import (
    Catalog,
    CompartmentExtras,
    DoorGroup,
    Handle,
    HandleFinish,
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


def config_to_wardrobe(schema: WardrobeConfigSchema) -> WardrobeConfig:
    """Convert a validated wardrobe schema to the immutable domain snapshot."""
    return WardrobeConfig(
        width=schema.width,
        height=schema.height,
        depth=schema.depth,
        selected_material_id=schema.selected_material_id,
        panel_thickness=schema.panel_thickness,
        has_base=schema.has_base,
        base_height=schema.base_height,
        vertical_boundaries=tuple(schema.vertical_boundaries),
        column_heights=dict(schema.column_heights),
        column_horizontal_boundaries={
            index: tuple(shelves)
            for index, shelves in schema.column_horizontal_boundaries.items()
        },
        column_module_boundaries=dict(schema.column_module_boundaries),
        column_top_module_shelves={
            index: tuple(shelves)
            for index, shelves in schema.column_top_module_shelves.items()
        },
        selected_front_material_id=schema.selected_front_material_id,
        selected_back_material_id=schema.selected_back_material_id,
        door_groups=tuple(
            DoorGroup(
                id=group.id,
                type=group.type,
                column=group.column,
                compartments=tuple(group.compartments),
                material_id=group.material_id,
                handle_id=group.handle_id,
                handle_finish=group.handle_finish,
            )
            for group in schema.door_groups
        ),
        compartment_extras={
            key: CompartmentExtras(
                vertical_divider=extras.vertical_divider,
                drawers=extras.drawers,
                drawers_count=extras.drawers_count,
                rod=extras.rod,
                led=extras.led,
            )
            for key, extras in schema.compartment_extras.items()
        },
        global_handle_id=schema.global_handle_id,
        global_handle_finish=schema.global_handle_finish,
        door_settings_mode=schema.door_settings_mode,
    )


def config_to_catalog(schema: CatalogSchema) -> Catalog:
    return Catalog(
        materials=tuple(
            Material(
                id=m.id,
                name=m.name,
                price=m.price,
                thickness=m.thickness,
                categories=tuple(m.categories),
            )
            for m in schema.materials
        ),
        handles=tuple(
            Handle(
                id=h.id,
                name=h.name,
                legacy_id=h.legacy_id,
                finishes=tuple(
                    HandleFinish(
                        id=f.id, name=f.name, price=f.price, legacy_id=f.legacy_id
                    )
                    for f in h.finishes
                ),
            )
            for h in schema.handles
        ),
    )


def rule_to_domain(schema: RuleSchema) -> Rule:
    return Rule(
        id=schema.id,
        name=schema.name,
        enabled=schema.enabled,
        priority=schema.priority,
        conditions=tuple(
            RuleCondition(
                field=FieldId(c.field),
                operator=c.operator,
                value=c.value,
                logic_operator=c.logic_operator,
                id=c.id,
            )
            for c in schema.conditions
        ),
        actions=tuple(
            RuleAction(
                type=a.type,
                config=RuleActionConfig(
                    item_name=a.config.item_name,
                    item_sku=a.config.item_sku,
                    item_price=a.config.item_price,
                    quantity=a.config.quantity,
                    visible_to_customer=a.config.visible_to_customer,
                    value=a.config.value,
                    apply_to=a.config.apply_to,
                    reason=a.config.reason,
                ),
                id=a.id,
            )
            for a in schema.actions
        ),
        created_at=schema.created_at,
        description=schema.description,
    )


def config_to_rules(schema: RuleSetSchema) -> list[Rule]:
    """Convert every rule in the set, keeping file order."""
    return [rule_to_domain(rule) for rule in schema.rules]
