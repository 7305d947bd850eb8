"""Information criteria helpers (AIC)."""

from __future__ import annotations

from typing import Any, Mapping, Union

import numpy as np

from mix_uncertainty.exceptions import FitResultError
from mix_uncertainty.fitting.models import OptimizerResult


def aic(log_likelihood: float, k: int) -> float:
    return float(2 * k - 2 * log_likelihood)


def simple_aic(opt: Union[OptimizerResult, Mapping[str, Any]]) -> float:
    """AIC from an optimisation summary whose objective is a negative log-likelihood."""
    if isinstance(opt, Mapping):
        par, nll = opt["par"], opt["objective"]
    else:
        par, nll = opt.par, opt.objective
    if nll is None or not np.isfinite(nll):
        raise FitResultError(f"objective must be finite to compute AIC, got {nll!r}")
    npar = len(np.atleast_1d(par))
    return float(npar * 2 + 2 * nll)


__all__ = ["aic", "simple_aic"]
