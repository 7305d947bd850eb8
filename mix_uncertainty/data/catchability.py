"""Check availability of catchability data before fitting a time-series model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import numpy as np
import pandas as pd

from mix_uncertainty.config.settings import MIN_OBSERVATIONS, RECENT_YEARS
from mix_uncertainty.data.validation import validate_catchability_matrix
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="catchability_gate")


def _year_key(label: Any) -> str:
    """Comparable form of a year label, so 2001, 2001.0 and "2001" match."""
    text = str(label).strip()
    try:
        value = float(text)
    except ValueError:
        return text
    return str(int(value)) if value.is_integer() else text


@dataclass
class SufficiencyResult:
    logqs: pd.DataFrame
    reasons: Optional[Dict[str, str]]
    run: bool

    def to_dict(self) -> dict:
        return {"reasons": self.reasons, "run": self.run}


def check_catchability(
    logqs: Any,
    qs_years: Sequence[Any],
    *,
    recent_years: int = RECENT_YEARS,
    min_obs: int = MIN_OBSERVATIONS,
    verbose: bool = False,
) -> SufficiencyResult:
    """Check whether there are enough catchability observations to fit a model.

    ``logqs`` holds log-catchability with rows = years and cols = stocks;
    ``qs_years`` is the full year vector its row labels are drawn from. Both
    checks always run. When both fire, the volume reason replaces the
    recency reason for every column.
    """
    frame = validate_catchability_matrix(logqs)
    run = True
    reasons: Optional[Dict[str, str]] = None
    columns = [str(col) for col in frame.columns]

    last_years = {_year_key(year) for year in list(qs_years)[-recent_years:]} if recent_years else set()
    recent = frame.loc[[_year_key(label) in last_years for label in frame.index]]
    if np.nansum(recent.to_numpy()) == 0:
        message = f"no data in last {recent_years} years"
        if verbose:
            log.info(message)
        reasons = {col: message for col in columns}
        run = False

    counts = frame.notna().sum(axis=0)
    if bool((counts < min_obs).all()):
        message = f"n < {min_obs}"
        if verbose:
            log.info(f"fewer than {min_obs} data points")
        reasons = {col: message for col in columns}
        run = False

    log.debug(
        "Catchability check complete",
        extra={"run": run, "n_stocks": len(columns), "observations": counts.to_dict()},
    )
    return SufficiencyResult(logqs=logqs if isinstance(logqs, pd.DataFrame) else frame, reasons=reasons, run=run)


__all__ = ["SufficiencyResult", "check_catchability"]
