"""Prepare CLI command wiring."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from mix_uncertainty.config.loader import load_config_with_precedence
from mix_uncertainty.config.settings import PrepConfig
from mix_uncertainty.data.pipeline import prepare_share_matrix
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="cli_prepare")


def prepare(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Effort-share CSV (rows = years)"),
    output_path: Path = typer.Argument(..., dir_okay=False, help="Destination CSV"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    min_positive: Optional[int] = typer.Option(None, "--min-positive", help="Positive values needed to judge a zero"),
    n_sd: Optional[float] = typer.Option(None, "--n-sd", help="Outlier width in standard deviations"),
    floor: Optional[float] = typer.Option(None, "--floor", help="Value imputed into true zeros"),
    redistribution: Optional[str] = typer.Option(None, "--redistribution", help="proportional | even"),
    verbose: bool = typer.Option(False, "--verbose/--quiet", help="Log progress"),
) -> None:
    """Classify false zeros and impute true zeros in an effort-share matrix."""
    defaults = PrepConfig().to_dict()
    cfg = load_config_with_precedence(
        config_path=config,
        env_prefix="MIXU_",
        cli_values={
            "min_positive": min_positive,
            "n_sd": n_sd,
            "floor": floor,
            "redistribution": redistribution,
        },
        defaults=defaults,
        casters={
            "min_positive": int,
            "n_sd": float,
            "floor": float,
            "recent_years": int,
            "min_obs": int,
        },
    )
    prep_config = PrepConfig.from_dict(cfg)

    dat = pd.read_csv(input_path, index_col=0)
    result = prepare_share_matrix(dat, prep_config, verbose=verbose)
    converted = result.isna().sum(axis=0) - dat.isna().sum(axis=0)
    for metier, count in converted[converted > 0].items():
        log.info("False zeros converted to missing", extra={"metier": str(metier), "count": int(count)})
    output_path.parent.mkdir(parents=True, exist_ok=True)
    result.to_csv(output_path)
    log.info("Prepared share matrix written", extra={"path": str(output_path)})
    typer.echo(f"Wrote {result.shape[0]}x{result.shape[1]} share matrix to {output_path}")
