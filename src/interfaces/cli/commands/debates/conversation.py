"""Conversación de un debate, respuestas y nube de palabras."""

import click

from src.interfaces.cli.base import (
    echo_section,
    get_initialized_container,
    with_error_handling,
)


NO_DATA = "sin datos"


@click.command()
@click.argument("debate_id")
@with_error_handling
def conversation(debate_id: str):
    """Muestra las preguntas del debate y las respuestas de cada candidato."""
    lookup = get_initialized_container().usecases.lookup
    dto = lookup.describe_conversation(debate_id)
    if dto is None:
        click.echo(f"Debate no encontrado: {debate_id}", err=True)
        raise click.exceptions.Exit(1)

    echo_section(dto.debate_name)
    click.echo(f"  Fecha:        {dto.debate_date.isoformat()}")
    click.echo(f"  Organiza:     {dto.organizer}")
    click.echo(f"  Duración:     {dto.duration or NO_DATA}")
    click.echo(f"  Conductores:  {', '.join(dto.moderators) or NO_DATA}")
    click.echo(f"  Transcripción: {dto.transcript_url or NO_DATA}")
    click.echo(f"  Participantes: {', '.join(p.name for p in dto.participants)}")

    for turn in dto.turns:
        topic = f" [{turn.topic_name}]" if turn.topic_name else ""
        click.echo(f"\n{turn.order}. {turn.question}{topic}")
        if not turn.answers:
            click.echo(f"   ({NO_DATA})")
            continue
        for answer in turn.answers:
            elapsed = answer.elapsed or NO_DATA
            click.echo(f"   - {answer.candidate_name} ({elapsed}): {answer.summary}")
            if answer.transcript_link:
                click.echo(f"     {answer.transcript_link}")

    click.echo(f"\nRespuestas: {dto.answer_count}")


@click.command()
@click.option("--candidate", "candidate_id", default=None, help="ID del candidato")
@click.option("--question", "question_id", default=None, help="ID de la pregunta")
@with_error_handling
def answers(candidate_id: str | None, question_id: str | None):
    """Lista las respuestas de un candidato o de una pregunta."""
    if (candidate_id is None) == (question_id is None):
        raise click.UsageError("Indique exactamente una de --candidate o --question.")

    lookup = get_initialized_container().usecases.lookup
    if candidate_id is not None:
        result = lookup.get_answers_by_candidate(candidate_id)
    else:
        result = lookup.get_answers_by_question(question_id)

    if not result:
        click.echo(f"({NO_DATA})")
        return

    for answer in result:
        elapsed = (
            lookup.format_elapsed(answer.timestamp)
            if answer.timestamp is not None
            else NO_DATA
        )
        click.echo(
            f"  {answer.question_id} / {answer.candidate_id} ({elapsed}): "
            f"{answer.summary}"
        )


@click.command()
@click.argument("debate_id")
@click.option("--limit", type=int, default=10, help="Cantidad de palabras a mostrar")
@with_error_handling
def wordcloud(debate_id: str, limit: int):
    """Muestra las palabras más frecuentes de la nube general del debate."""
    lookup = get_initialized_container().usecases.lookup
    cloud = lookup.get_word_cloud(debate_id)
    if cloud is None:
        click.echo(f"({NO_DATA})")
        return

    echo_section(cloud.data.general.title)
    for word in cloud.top_words(limit):
        click.echo(f"  {word.text:<24} {word.weight:>8.2f}")
