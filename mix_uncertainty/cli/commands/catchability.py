"""Catchability sufficiency CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from mix_uncertainty.config.settings import MIN_OBSERVATIONS, RECENT_YEARS
from mix_uncertainty.data.catchability import check_catchability
from mix_uncertainty.exceptions import ConfigValidationError, InsufficientDataError
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="cli_catchability")


def _parse_years(raw: str) -> list[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise ConfigValidationError(f"--years must be comma-separated integers, got {raw!r}") from exc


def check_catchability_cmd(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Log-catchability CSV (rows = years)"),
    years: Optional[str] = typer.Option(None, "--years", help="Comma-separated year vector (defaults to CSV index)"),
    recent_years: int = typer.Option(RECENT_YEARS, "--recent-years", min=1, help="Trailing years that must hold data"),
    min_obs: int = typer.Option(MIN_OBSERVATIONS, "--min-obs", min=1, help="Minimum observations per stock"),
    verbose: bool = typer.Option(False, "--verbose/--quiet", help="Log fired checks"),
) -> None:
    """Check whether catchability data are sufficient to attempt a fit."""
    logqs = pd.read_csv(input_path, index_col=0)
    qs_years = _parse_years(years) if years else list(logqs.index)
    result = check_catchability(logqs, qs_years, recent_years=recent_years, min_obs=min_obs, verbose=verbose)
    typer.echo(json.dumps(result.to_dict(), indent=2))
    for stock, reason in (result.reasons or {}).items():
        log.warning("Skipping fit", extra={"stock": stock, "reason": reason})
    if not result.run:
        reasons = sorted(set((result.reasons or {}).values()))
        raise InsufficientDataError(f"{input_path.name}: {', '.join(reasons)}")
