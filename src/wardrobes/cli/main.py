"""Typer CLI for wardrobe cut lists and quotes."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from wardrobes.application import CustomerInput, get_factory
from wardrobes.application.config import (
    ConfigError,
    config_to_catalog,
    config_to_rules,
    config_to_wardrobe,
    load_catalog,
    load_rules,
    load_wardrobe,
)
from wardrobes.application.commands import PricingError
from wardrobes.cli.commands import display_load_error, validate_rules_command
from wardrobes.domain.entities import Catalog, WardrobeConfig
from wardrobes.domain.rules import Rule
from wardrobes.domain.services import CatalogError, CutListError, compute_door_metrics
from wardrobes.infrastructure import (
    AdjustmentFormatter,
    BlueprintRenderer,
    CutListFormatter,
    DoorMetricsFormatter,
    JsonExporter,
    PriceBreakdownFormatter,
)

app = typer.Typer(
    name="wardrobes",
    help="Compute cut lists, door metrics and rule-adjusted quotes for wardrobes.",
)

app.command(name="validate-rules")(validate_rules_command)

ConfigArg = Annotated[
    Path, typer.Argument(help="Path to the wardrobe configuration JSON file")
]
CatalogOpt = Annotated[
    Path,
    typer.Option("--catalog", "-c", help="Path to the material/handle catalog JSON"),
]
FormatOpt = Annotated[
    str, typer.Option("--format", "-f", help="Output format: table or json")
]
VerboseOpt = Annotated[
    bool, typer.Option("--verbose", "-v", help="Enable debug logging")
]

_FORMATS = ("table", "json")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _check_format(output_format: str) -> str:
    fmt = output_format.lower()
    if fmt not in _FORMATS:
        typer.echo(f"Unknown format: {output_format}", err=True)
        typer.echo(f"Available formats: {', '.join(_FORMATS)}", err=True)
        raise typer.Exit(code=1)
    return fmt


def _load_inputs(config_file: Path, catalog_file: Path) -> tuple[WardrobeConfig, Catalog]:
    try:
        config = config_to_wardrobe(load_wardrobe(config_file))
        catalog = config_to_catalog(load_catalog(catalog_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    return config, catalog


def _load_rules(rules_file: Path | None) -> list[Rule]:
    if rules_file is None:
        return []
    try:
        return config_to_rules(load_rules(rules_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@app.command(name="cut-list")
def cut_list(
    config_file: ConfigArg,
    catalog_file: CatalogOpt,
    output_format: FormatOpt = "table",
    verbose: VerboseOpt = False,
) -> None:
    """Print the priced cut list for a wardrobe configuration."""
    _configure_logging(verbose)
    fmt = _check_format(output_format)
    config, catalog = _load_inputs(config_file, catalog_file)

    try:
        result = get_factory(catalog).create_cut_list_builder().build(config)
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except CutListError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(JsonExporter().export_cut_list(result))
        return
    typer.echo(CutListFormatter().format(result))
    typer.echo()
    typer.echo(PriceBreakdownFormatter().format(result.price_breakdown))


@app.command()
def doors(
    config_file: ConfigArg,
    catalog_file: CatalogOpt,
    output_format: FormatOpt = "table",
    verbose: VerboseOpt = False,
) -> None:
    """Print door counts, heights and handle totals."""
    _configure_logging(verbose)
    fmt = _check_format(output_format)
    config, catalog = _load_inputs(config_file, catalog_file)

    metrics = compute_door_metrics(config, catalog.handles)
    if fmt == "json":
        typer.echo(JsonExporter().export_door_metrics(metrics))
    else:
        typer.echo(DoorMetricsFormatter().format(metrics))


@app.command()
def quote(
    config_file: ConfigArg,
    catalog_file: CatalogOpt,
    rules_file: Annotated[
        Path | None,
        typer.Option("--rules", "-r", help="Path to the pricing rules JSON"),
    ] = None,
    customer_tags: Annotated[
        list[str] | None,
        typer.Option("--tag", help="Customer tag (repeatable)"),
    ] = None,
    email: Annotated[
        str | None, typer.Option("--email", help="Customer email")
    ] = None,
    order_count: Annotated[
        int, typer.Option("--order-count", min=0, help="Customer's previous orders")
    ] = 0,
    city: Annotated[
        str | None, typer.Option("--city", help="Delivery city")
    ] = None,
    show_hidden: Annotated[
        bool,
        typer.Option("--show-hidden", help="Include internal-only adjustments"),
    ] = False,
    output_format: FormatOpt = "table",
    verbose: VerboseOpt = False,
) -> None:
    """Price a wardrobe and apply the pricing rules."""
    _configure_logging(verbose)
    fmt = _check_format(output_format)
    config, catalog = _load_inputs(config_file, catalog_file)
    rules = _load_rules(rules_file)
    customer = CustomerInput(
        tags=tuple(customer_tags or ()),
        email=email,
        order_count=order_count,
    )

    try:
        result = get_factory(catalog).create_quote_command().execute(
            config, rules, customer=customer, order_city=city
        )
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    except PricingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if fmt == "json":
        typer.echo(JsonExporter().export_quote(result, include_hidden=show_hidden))
        return
    typer.echo(PriceBreakdownFormatter().format(result.cut_list.price_breakdown))
    typer.echo()
    typer.echo(
        AdjustmentFormatter(include_hidden=show_hidden).format(
            result.adjustments, result.base_total, result.final_total
        )
    )


@app.command()
def blueprint(
    config_file: ConfigArg,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write SVG to this file"),
    ] = None,
    scale: Annotated[
        float, typer.Option("--scale", min=0.1, help="Pixels per centimeter")
    ] = 2.0,
    no_doors: Annotated[
        bool, typer.Option("--no-doors", help="Do not draw door groups")
    ] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Render the wardrobe front elevation as SVG."""
    _configure_logging(verbose)
    try:
        config = config_to_wardrobe(load_wardrobe(config_file))
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    svg = BlueprintRenderer(scale=scale, show_doors=not no_doors).render_svg(config)
    if output_file is None:
        typer.echo(svg)
        return
    output_file.write_text(svg, encoding="utf-8")
    typer.echo(f"Blueprint written to {output_file}")


if __name__ == "__main__":
    app()
