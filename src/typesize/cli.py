"""Command-line interface for type-size-calculator."""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from typesize import __version__
from typesize.calculator import TypeSizeReport, calculate
from typesize.catalogs import (
    CUSTOM_PRESET,
    FONT_DATA,
    SCREEN_PRESETS,
    x_height_insight,
)
from typesize.presets import (
    CalculatorState,
    edit_screen,
    select_preset,
    set_typography,
    set_viewing_distance,
)

app = typer.Typer(
    name="typesize",
    help="Calculate physical type size on screen and check ADA compliance.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"typesize version {__version__}")
        raise typer.Exit()


def list_screens_callback(value: bool) -> None:
    """List available screen presets and exit."""
    if value:
        console.print("[bold]Available screen presets:[/bold]")
        for preset_id, preset in SCREEN_PRESETS.items():
            console.print(
                f"  [cyan]{preset_id}[/cyan]: {preset.label} "
                f"({preset.width_px:g}x{preset.height_px:g}, {preset.diagonal_in:g}in)"
            )
        raise typer.Exit()


def list_fonts_callback(value: bool) -> None:
    """List known fonts and exit."""
    if value:
        console.print("[bold]Known fonts:[/bold]")
        for name, font in FONT_DATA.items():
            console.print(f"  [cyan]{name}[/cyan]: x-height {font.x_height:.2f} ({font.label})")
        raise typer.Exit()


@app.command()
def main(
    size_px: Annotated[
        float,
        typer.Argument(help="Font size in the design tool, in pixels"),
    ] = 16,
    font: Annotated[
        str,
        typer.Option(
            "--font",
            "-f",
            envvar="TYPESIZE_FONT",
            help="Font family (use --list-fonts to see options)",
        ),
    ] = "Roboto",
    screen: Annotated[
        str,
        typer.Option(
            "--screen",
            "-s",
            help="Screen preset (use --list-screens to see options)",
        ),
    ] = CUSTOM_PRESET,
    width: Annotated[
        float | None,
        typer.Option("--width", help="Screen width in pixels (switches to custom)"),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option("--height", help="Screen height in pixels (switches to custom)"),
    ] = None,
    diagonal: Annotated[
        float | None,
        typer.Option("--diagonal", help="Screen diagonal in inches (switches to custom)"),
    ] = None,
    distance: Annotated[
        float | None,
        typer.Option(
            "--distance",
            "-d",
            envvar="TYPESIZE_VIEWING_DISTANCE",
            help="Viewing distance in feet",
        ),
    ] = None,
    check: Annotated[
        bool,
        typer.Option("--check", help="Exit with status 1 if the size is not compliant"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show intermediate values"),
    ] = False,
    list_screens: Annotated[
        bool | None,
        typer.Option(
            "--list-screens",
            callback=list_screens_callback,
            is_eager=True,
            help="List available screen presets and exit",
        ),
    ] = None,
    list_fonts: Annotated[
        bool | None,
        typer.Option(
            "--list-fonts",
            callback=list_fonts_callback,
            is_eager=True,
            help="List known fonts and exit",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Show the physical size of on-screen type and check it against ADA minimums.

    Examples:

        typesize 16

        typesize 24 --screen hd-27 --font "Open Sans"

        typesize 32 --width 2560 --height 1440 --diagonal 27 --distance 3
    """
    if screen not in SCREEN_PRESETS:
        available = ", ".join(SCREEN_PRESETS.keys())
        console.print(f"[red]Error:[/red] Unknown screen preset '{screen}'.")
        console.print(f"Available presets: {available}")
        console.print(
            "Use --list-screens to see details, or specify --width, --height and --diagonal."
        )
        raise typer.Exit(1)

    if font not in FONT_DATA:
        console.print(
            f"[yellow]Warning:[/yellow] Unknown font '{font}', using a generic x-height ratio."
        )

    state = CalculatorState()
    state = set_typography(state, design_size_px=size_px, font_id=font)
    state = select_preset(state, screen)
    if width is not None or height is not None or diagonal is not None:
        state = edit_screen(state, width_px=width, height_px=height, diagonal_in=diagonal)
    if distance is not None:
        state = set_viewing_distance(state, distance)

    report = calculate(state)
    if verbose:
        _print_derivation(report)
    _print_report(report)

    if check and not report.status.compliant:
        raise typer.Exit(1)


def _print_derivation(report: TypeSizeReport) -> None:
    """Print intermediate values."""
    state = report.state
    console.print(f"[dim]Preset: {state.preset_id}[/dim]")
    console.print(
        f"[dim]Screen: {state.width_px:g}x{state.height_px:g}px, {state.diagonal_in:g}in "
        f"-> {report.geometry.ppi:.4f} ppi[/dim]"
    )
    console.print(
        f"[dim]Type: {state.design_size_px:g}px / {report.geometry.ppi:.4f} ppi "
        f"= {state.design_size_px / report.geometry.ppi:.4f}in[/dim]"
    )
    console.print(f"[dim]X-height ratio: {report.font.x_height:.2f} ({report.font.name})[/dim]")


def _print_report(report: TypeSizeReport) -> None:
    """Print all results as tables."""
    state = report.state
    geometry = report.geometry

    screen_table = Table(title="Screen")
    screen_table.add_column("Density")
    screen_table.add_column("Aspect Ratio")
    screen_table.add_column("Width (in)")
    screen_table.add_column("Height (in)")
    screen_table.add_row(
        f"{round(geometry.ppi)} PPI",
        geometry.aspect_ratio_label,
        f"{geometry.width_in:.2f}",
        f"{geometry.height_in:.2f}",
    )
    console.print(screen_table)

    physical = report.physical
    console.print(f"[bold]Physical size on screen:[/bold] {physical.size_pt:.1f} pt (approx)")
    console.print(f"[bold]Visual x-height:[/bold] {physical.x_height_mm:.2f} mm")
    insight = x_height_insight(report.font.label)
    console.print(f"[dim]X-height analysis ({report.font.label}): {insight}[/dim]")

    distances = report.distances
    distance_table = Table(title="Viewing Distance Analysis")
    distance_table.add_column("Minimum (ft)")
    distance_table.add_column("Max Resolution (ft)")
    distance_table.add_column("Ideal, THX (ft)")
    distance_table.add_column("Apparent PPI")
    distance_table.add_column("Apparent Size (pt)")
    if report.apparent is not None:
        apparent_ppi = f"{report.apparent.apparent_ppi:.0f}"
        apparent_pt = f"{report.apparent.apparent_size_pt:.1f}"
    else:
        apparent_ppi = apparent_pt = "-"
    distance_table.add_row(
        f"{distances.min_ft:.1f}",
        f"{distances.max_res_ft:.1f}",
        f"{distances.ideal_ft:.1f}",
        apparent_ppi,
        apparent_pt,
    )
    console.print(distance_table)
    if state.view_dist_ft is None:
        console.print(
            "[dim]Pass --distance to calculate the apparent PPI and apparent type size.[/dim]"
        )

    check_table = Table(title="ADA Physical Size Check")
    check_table.add_column("Category")
    check_table.add_column("Required Min Pt")
    check_table.add_column("@ Distance (ft)")
    check_table.add_column("Physical Size Pt")
    check_table.add_column("Status")
    for result in report.checks:
        requirement = result.requirement
        check_table.add_row(
            requirement.name,
            f"{requirement.required_pt:g} pt",
            f"{requirement.assumed_distance_ft:g} ft",
            f"{result.measured_pt:.1f} pt",
            "[green]Pass[/green]" if result.passed else "[red]Fail[/red]",
        )
    console.print(check_table)

    color = "green" if report.status.compliant else "red"
    console.print(f"[{color}][bold]{report.status.message}[/bold][/{color}]")
    console.print(report.status.detail)


if __name__ == "__main__":
    app()
