"""Helpers shared by CLI commands."""

import logging
from typing import Any

import typer

from leitner.application.config import AppConfig, resolve_config
from leitner.domain.errors import (
    CardNotFoundError,
    ConflictError,
    InvalidInputError,
    LeitnerError,
    MalformedRowError,
    StoreUnavailableError,
)

# Exit codes per error kind
EXIT_CODES: list[tuple[type[LeitnerError], int]] = [
    (InvalidInputError, 2),
    (CardNotFoundError, 3),
    (ConflictError, 4),
    (StoreUnavailableError, 5),
    (MalformedRowError, 6),
]


def _resolve_with_overrides(ctx: typer.Context | None = None, **overrides: Any) -> AppConfig:
    """Resolve config, layering global options from the context and per-command overrides."""
    merged: dict[str, Any] = {}
    if ctx is not None and ctx.obj:
        merged.update(ctx.obj.get("overrides", {}))
    merged.update(overrides)
    config = resolve_config(merged)
    apply_verbosity(config.verbose)
    return config


def apply_verbosity(verbose: int) -> None:
    """Set the root log level from a verbosity count."""
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.getLogger().setLevel(level)


def exit_code_for(error: LeitnerError) -> int:
    for kind, code in EXIT_CODES:
        if isinstance(error, kind):
            return code
    return 1


def fail(error: LeitnerError) -> typer.Exit:
    """Print the error and build the matching Exit to raise."""
    typer.secho(f"Error: {error}", fg="red", err=True)
    return typer.Exit(exit_code_for(error))
