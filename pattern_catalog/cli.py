"""
CLI del catalogo de patrones.

Comandos:
- list: tabla de patrones registrados
- describe: explicacion y alias de un patron
- run: ejecuta un escenario y muestra sus lineas sin modificar
- run-all: ejecuta el catalogo completo (o una familia)
- config: muestra la configuracion activa
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pattern_catalog.config.settings import SUMMARY_MAX_LENGTH, print_config
from pattern_catalog.core.registry import ScenarioNotFoundError
from pattern_catalog.core.runner import ScenarioRunner
from pattern_catalog.models import PatternGroup
from pattern_catalog.utils import get_logger, truncate_text


app = typer.Typer(
    no_args_is_help=True,
    help="Catalogo de patrones de diseno con escenarios ejecutables."
)

_console = Console()
logger = get_logger('cli')

_GROUP_HELP = "Familia: creational, structural o behavioral"


def _parse_group(value: Optional[str]) -> Optional[PatternGroup]:
    if value is None:
        return None
    try:
        return PatternGroup.from_string(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command(name="list")
def list_patterns(
    group: Optional[str] = typer.Option(None, "--group", "-g", help=_GROUP_HELP)
) -> None:
    """Lista los patrones registrados."""
    runner = ScenarioRunner()
    scenarios = runner.registry.list_scenarios(_parse_group(group))

    table = Table(title="Catalogo de patrones")
    table.add_column("Patron", style="bright_green", no_wrap=True)
    table.add_column("Familia", style="cyan", no_wrap=True)
    table.add_column("Resumen", style="white")

    for info in scenarios:
        table.add_row(
            info.name,
            info.group.value,
            truncate_text(info.summary, SUMMARY_MAX_LENGTH)
        )

    _console.print(table)


@app.command()
def describe(name: str = typer.Argument(..., help="Nombre o alias del patron")) -> None:
    """Muestra la explicacion de un patron."""
    runner = ScenarioRunner()
    try:
        info = runner.registry.resolve(name)
    except ScenarioNotFoundError as e:
        _fail(str(e))
        return

    _console.print(f"[bold]{info.title}[/bold] ({info.group.value})")
    if info.aliases:
        _console.print(f"[dim]Alias: {', '.join(info.aliases)}[/dim]")
    typer.echo("")
    typer.echo(info.explanation)


@app.command()
def run(name: str = typer.Argument(..., help="Nombre o alias del patron")) -> None:
    """Ejecuta el escenario de un patron."""
    runner = ScenarioRunner()
    try:
        runner.run(name, sink=typer.echo)
    except ScenarioNotFoundError as e:
        _fail(str(e))


@app.command(name="run-all")
def run_all(
    group: Optional[str] = typer.Option(None, "--group", "-g", help=_GROUP_HELP)
) -> None:
    """Ejecuta todos los escenarios en orden de catalogo."""
    runner = ScenarioRunner()
    outputs = runner.run_all(_parse_group(group))

    for index, (name, output) in enumerate(outputs.items()):
        if index:
            typer.echo("")
        typer.echo(f"=== {name} ===")
        for line in output:
            typer.echo(line)

    logger.debug(f"run-all printed {len(outputs)} scenarios")


@app.command()
def config() -> None:
    """Muestra la configuracion activa."""
    print_config(write=typer.echo)


def main() -> None:
    """Punto de entrada del script pattern-catalog."""
    app()
