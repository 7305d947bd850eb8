"""Multinomial (additive log-ratio) logit transforms."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.special import logsumexp

from mix_uncertainty.exceptions import DataShapeError


def invlogit(x: Sequence[float]) -> np.ndarray:
    """Multinomial inverse logit of a vector on the natural scale.

    Returns ``k + 1`` probabilities for ``k`` inputs: ``exp(x_i) / (1 + sum(exp(x)))``
    followed by the reference category ``1 / (1 + sum(exp(x)))``.

    Raises DataShapeError when the input is so extreme that some probability
    rounds to exactly 0 or 1 in double precision.
    """
    arr = np.atleast_1d(np.asarray(x, dtype=float))
    if arr.ndim != 1:
        raise DataShapeError("invlogit expects a 1-D vector")
    if not np.all(np.isfinite(arr)):
        raise DataShapeError("invlogit input must be finite")

    # log(1 + sum(exp(x))) without overflow
    log_denom = logsumexp(np.append(arr, 0.0))
    p = np.exp(np.append(arr, 0.0) - log_denom)

    if ((p <= 0) | (p >= 1)).any():
        raise DataShapeError("invlogit input too extreme: probabilities round to 0 or 1")
    if abs(p.sum() - 1.0) > 1e-9:
        raise DataShapeError(f"invlogit probabilities sum to {p.sum():.12g}, not 1")
    return p


def logit(p: Sequence[float]) -> np.ndarray:
    """Additive log-ratio of a probability vector against its last category."""
    arr = np.asarray(p, dtype=float)
    if arr.ndim != 1 or arr.size < 2:
        raise DataShapeError("logit expects a 1-D probability vector of length >= 2")
    if not np.all(np.isfinite(arr)) or (arr <= 0).any() or (arr >= 1).any():
        raise DataShapeError("logit input must lie strictly inside (0, 1)")
    if not np.isclose(arr.sum(), 1.0, atol=1e-9):
        raise DataShapeError(f"logit input must sum to 1, got {arr.sum():.12g}")
    return np.log(arr[:-1] / arr[-1])


__all__ = ["invlogit", "logit"]
