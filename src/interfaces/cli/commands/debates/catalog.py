"""Resumen, integridad y listado de candidatos."""

import click

from src.domain.entities.candidate import CandidateStatus
from src.interfaces.cli.base import (
    echo_section,
    get_initialized_container,
    with_error_handling,
)


@click.command()
@with_error_handling
def stats():
    """Muestra el tamaño de cada registro y el estado de las particiones."""
    container = get_initialized_container()
    load_result = container.load_result

    echo_section("Catálogo")
    for name, size in load_result.catalog.sizes().items():
        click.echo(f"  {name:<12} {size:>6,}")

    echo_section("Particiones de respuestas")
    if not load_result.partition_results:
        click.echo("  (ninguna configurada)")
    for result in load_result.partition_results:
        line = f"  {result.name:<48} {result.status.value:<10} {result.contributed:>5}"
        if result.detail:
            line += f"  ({result.detail})"
        click.echo(line)

    gaps = len(load_result.partition_gaps)
    click.echo(
        f"\nRespuestas cargadas: {load_result.answers_loaded:,} "
        f"/ particiones sin datos: {gaps}"
    )


@click.command()
@with_error_handling
def check():
    """Verifica referencias y unicidad; sale con código 1 si hay errores."""
    container = get_initialized_container()
    output = container.usecases.check_integrity.execute()

    for issue in output.issues:
        click.echo(str(issue))

    click.echo(f"errores: {len(output.errors)}, advertencias: {len(output.warnings)}")
    if not output.is_valid:
        raise click.exceptions.Exit(1)


@click.command()
@click.option(
    "--status",
    type=click.Choice([s.value for s in CandidateStatus]),
    default=None,
    help="Filtra por estado de candidatura",
)
@click.option("--coalition", default=None, help="Filtra por coalición")
@with_error_handling
def candidates(status: str | None, coalition: str | None):
    """Lista candidatos, opcionalmente filtrados."""
    lookup = get_initialized_container().usecases.lookup

    if status is not None:
        result = lookup.get_candidates_by_status(CandidateStatus(status))
        if coalition is not None:
            in_coalition = {
                c.id for c in lookup.get_candidates_by_coalition(coalition)
            }
            result = [c for c in result if c.id in in_coalition]
    elif coalition is not None:
        result = lookup.get_candidates_by_coalition(coalition)
    else:
        result = lookup.list_candidates()

    if not result:
        click.echo("No hay candidatos que coincidan.")
        return

    for candidate in result:
        coalition_label = candidate.coalition or "sin coalición"
        click.echo(
            f"  [{candidate.abbreviation}] {candidate.name} "
            f"({candidate.party}, {coalition_label}) - {candidate.status.value}"
        )
