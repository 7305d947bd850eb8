"""Inspect optimizer output for one fit attempt.

The core never retries: ``check_fail`` says whether a retry is worth it and
whether the attempt failed outright; the caller owns the retry budget.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

import numpy as np

from mix_uncertainty.config.settings import STD_ERROR_BLOCK
from mix_uncertainty.exceptions import FitResultError
from mix_uncertainty.fitting.models import FitDecision, ModelVariant
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="fit_diagnostics")

HARD_FAILURE = FitDecision(rerun=True, fail=True, pd_hess=False, nans=False, conv=False)


def _convergence(fit: Any) -> Optional[int]:
    opt = getattr(fit, "opt", None) if fit is not None else None
    return getattr(opt, "convergence", None) if opt is not None else None


def _has_nan_std_errors(sdr: Any, block: str) -> bool:
    if sdr is None:
        return False
    values = np.asarray(sdr.std_error(block), dtype=float)
    return bool(np.isnan(values).any())


def check_fail(
    fit: Any,
    *,
    verbose: bool = False,
    make_log: bool = False,
    std_error_block: str = STD_ERROR_BLOCK,
) -> FitDecision:
    """Classify a fit attempt as failed, retry-worthy or accepted.

    - no convergence code: the model failed; rerun and flag as fatal.
    - Hessian not positive-definite: rerun, not fatal.
    - otherwise: accepted.

    ``nans`` reports NaN standard errors in ``std_error_block`` and ``conv``
    whether the optimizer reported convergence code 0. With ``make_log`` the
    status text is attached to the decision as ``log``.
    """
    code = _convergence(fit)
    if code is None:
        status = "model failed"
        if verbose:
            log.info(status)
        return replace(HARD_FAILURE, log=status) if make_log else HARD_FAILURE

    sdr = getattr(fit, "sdr", None)
    pd_hess = bool(getattr(sdr, "pd_hess", False))
    nans = _has_nan_std_errors(sdr, std_error_block)
    conv = code == 0

    if not pd_hess:
        status = "Hessian not positive-definite"
        if verbose:
            log.info(status)
        return FitDecision(rerun=True, fail=False, pd_hess=False, nans=nans, conv=conv, log=status if make_log else None)

    status = "Hessian positive-definite"
    return FitDecision(rerun=False, fail=False, pd_hess=True, nans=nans, conv=conv, log=status if make_log else None)


def check_opt(fit: Any, *, verbose: bool = False, make_log: bool = False) -> Optional[str]:
    """Report optimizer convergence for a fitted model.

    Returns ``"<model> - success"`` or ``"<model> - no convergence"`` when
    ``make_log`` is set, otherwise ``None``.
    """
    variant = ModelVariant.from_code(fit.code)
    code = _convergence(fit)
    if code is None:
        raise FitResultError(f"{variant.label}: optimizer result has no convergence code")

    status = "no convergence" if code != 0 else "success"
    if verbose:
        log.info(f"{variant.label} {status}", extra={"model": variant.label})
    return f"{variant.label} - {status}" if make_log else None


__all__ = ["HARD_FAILURE", "check_fail", "check_opt"]
