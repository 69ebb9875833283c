"""Leitner CLI — root commands and the config subgroup."""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

import typer

from leitner.application.factory import get_practice_service, get_repository
from leitner.application.service import PracticeService
from leitner.domain.errors import LeitnerError
from leitner.domain.models import Flashcard
from leitner.interface._common import _resolve_with_overrides, fail

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="leitner: Leitner-box flashcard scheduler.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

config_app = typer.Typer(help="Manage leitner configuration.")
app.add_typer(config_app, name="config")


# ---------------------------------------------------------------------------
# Global callback
# ---------------------------------------------------------------------------


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
    database_url: Annotated[
        str | None,
        typer.Option("--database-url", help="SQLAlchemy URL of the card store."),
    ] = None,
):
    """Global settings for leitner."""
    ctx.ensure_object(dict)
    ctx.obj["overrides"] = {"database_url": database_url, "verbose": verbose or None}


@contextmanager
def _open_service(ctx: typer.Context) -> Iterator[PracticeService]:
    config = _resolve_with_overrides(ctx)
    with get_repository(config) as repo:
        yield get_practice_service(config, repo)


def _card_dict(card: Flashcard) -> dict:
    return {"front": card.front, "back": card.back, "hint": card.hint, "tags": card.get_tags()}


# ---------------------------------------------------------------------------
# Root commands
# ---------------------------------------------------------------------------


@app.command()
def init(
    ctx: typer.Context,
    deck: Annotated[
        Path | None,
        typer.Option(help="YAML deck to load. Defaults to config, then the starter deck."),
    ] = None,
    no_seed: Annotated[
        bool, typer.Option("--no-seed", help="Only create the tables; load no cards.")
    ] = False,
):
    """[bold green]Create[/bold green] the card store and load a deck."""
    from leitner.application.deck_loader import load_deck, load_starter_deck

    config = _resolve_with_overrides(
        ctx, deck_path=deck, seed_on_init=False if no_seed else None
    )

    try:
        with get_repository(config) as repo:
            service = get_practice_service(config, repo)
            if not config.seed_on_init:
                typer.echo("Store ready. No cards loaded.")
                return
            cards = load_deck(config.deck_path) if config.deck_path else load_starter_deck()
            inserted = service.seed(cards)
    except LeitnerError as e:
        raise fail(e) from None
    except OSError as e:
        typer.secho(f"Error: cannot read deck: {e}", fg="red", err=True)
        raise typer.Exit(1) from None

    typer.secho(f"Store ready. Loaded {inserted} of {len(cards)} cards.", fg="green")


@app.command()
def add(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front (prompt) side.")],
    back: Annotated[str, typer.Argument(help="Back (answer) side.")],
    hint: Annotated[str | None, typer.Option(help="Optional hint.")] = None,
    tags: Annotated[
        list[str] | None,
        typer.Option("--tag", "-t", help="Tag for the card. Repeat for several."),
    ] = None,
):
    """Add a card. New cards start in bucket 0."""
    try:
        with _open_service(ctx) as service:
            card_id = service.add_flashcard(front, back, hint=hint, tags=tags)
    except LeitnerError as e:
        raise fail(e) from None

    typer.secho(f"Added card {card_id}.", fg="green")


@app.command()
def due(
    ctx: typer.Context,
    day: Annotated[int, typer.Option("--day", "-d", help="Simulated day number.")] = 0,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """List the cards due on a given day."""
    try:
        with _open_service(ctx) as service:
            cards = service.get_due_cards(day)
    except LeitnerError as e:
        raise fail(e) from None

    if json_output:
        typer.echo(json.dumps({"day": day, "cards": [_card_dict(c) for c in cards]}, indent=2))
        return

    typer.echo(f"Day {day}: {len(cards)} cards due")
    for card in cards:
        suffix = f"  [{', '.join(card.tags)}]" if card.tags else ""
        typer.echo(f"  {card.front}{suffix}")


@app.command()
def answer(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front of the practised card.")],
    back: Annotated[str, typer.Argument(help="Back of the practised card.")],
    difficulty: Annotated[str, typer.Argument(help="wrong, hard, easy (or 0, 1, 2).")],
    timestamp: Annotated[
        int | None, typer.Option(help="Epoch milliseconds. Defaults to now.")
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Record an answer and move the card between buckets."""
    try:
        with _open_service(ctx) as service:
            record = service.submit_answer(front, back, difficulty, timestamp=timestamp)
    except LeitnerError as e:
        raise fail(e) from None

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "front": record.card_front,
                    "back": record.card_back,
                    "timestamp": record.timestamp,
                    "difficulty": record.difficulty.name.lower(),
                    "previousBucket": record.previous_bucket,
                    "newBucket": record.new_bucket,
                },
                indent=2,
            )
        )
        return

    typer.echo(
        f"{record.difficulty.name.capitalize()}: moved from bucket "
        f"{record.previous_bucket} to {record.new_bucket}."
    )


@app.command()
def hint(
    ctx: typer.Context,
    front: Annotated[str, typer.Argument(help="Front of the card.")],
    back: Annotated[str, typer.Argument(help="Back of the card.")],
):
    """Show the hint for a card."""
    try:
        with _open_service(ctx) as service:
            text = service.get_hint(front, back)
    except LeitnerError as e:
        raise fail(e) from None

    typer.echo(text)


@app.command()
def progress(
    ctx: typer.Context,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
):
    """Show learning progress statistics."""
    try:
        with _open_service(ctx) as service:
            stats = service.get_progress()
    except LeitnerError as e:
        raise fail(e) from None

    if json_output:
        typer.echo(json.dumps(stats.to_dict(), indent=2))
        return

    typer.echo(f"Cards: {stats.total_cards}  Practice events: {stats.total_practice_events}")
    typer.echo(f"Success rate: {stats.success_rate:.2f}%")
    typer.echo(f"Average moves per card: {stats.average_moves_per_card:.2f}")
    for bucket_num, count in stats.cards_by_bucket.items():
        typer.echo(f"  Bucket {bucket_num}: {count}")


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context):
    """Display final resolved configuration."""
    config = _resolve_with_overrides(ctx)
    d = {k: str(v) if isinstance(v, Path) else v for k, v in config.model_dump().items()}
    typer.echo(json.dumps(d, indent=2))
