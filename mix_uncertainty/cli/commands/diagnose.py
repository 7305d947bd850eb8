"""Fit diagnostics CLI command wiring."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from mix_uncertainty.config.settings import STD_ERROR_BLOCK
from mix_uncertainty.exceptions import FitResultError
from mix_uncertainty.fitting.diagnostics import check_fail, check_opt
from mix_uncertainty.fitting.information_criteria import simple_aic
from mix_uncertainty.fitting.models import ModelFit


def diagnose(
    fit_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Optimizer result JSON"),
    block: str = typer.Option(STD_ERROR_BLOCK, "--block", help="Std-error block inspected for NaNs"),
) -> None:
    """Classify a saved optimizer result as accepted, retry or failed."""
    try:
        payload = json.loads(fit_path.read_text())
    except json.JSONDecodeError as exc:
        raise FitResultError(f"Invalid fit JSON in {fit_path}: {exc}") from exc
    fit = ModelFit.from_dict(payload)

    decision = check_fail(fit, std_error_block=block)
    summary = {"decision": decision.to_dict(), "status": None, "aic": None}
    if not decision.fail:
        summary["status"] = check_opt(fit, make_log=True)
        summary["aic"] = simple_aic(fit.opt)
    typer.echo(json.dumps(summary, indent=2))
