"""Random Dirichlet draws built from independent Gamma variates."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
from scipy.special import logsumexp

from mix_uncertainty.exceptions import DataShapeError


def _log_gamma_variates(gen: np.random.Generator, alpha: np.ndarray, n: int) -> np.ndarray:
    """Log of independent Gamma(alpha_i, rate=1) draws, shape ``(n, len(alpha))``.

    Uses Gamma(a) = Gamma(a + 1) * U**(1/a) so that shapes far below 1 do not
    underflow to zero.
    """
    boosted = gen.gamma(shape=alpha + 1.0, scale=1.0, size=(n, alpha.size))
    u = 1.0 - gen.random(size=(n, alpha.size))  # (0, 1]
    return np.log(boosted) + np.log(u) / alpha


def rdirichlet(
    n: int,
    alpha: Sequence[float],
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Draw ``n`` samples from Dirichlet(alpha).

    Each draw is a vector of independent Gamma(alpha_i, rate=1) variates
    divided by its own sum; the division is done in log space. Returns an
    array of shape ``(n, len(alpha))``, one draw per row. Pass ``rng`` to
    share a generator, or ``seed`` for a reproducible fresh one.
    """
    if isinstance(n, bool) or int(n) != n or n < 0:
        raise DataShapeError(f"n must be a non-negative integer, got {n!r}")
    a = np.asarray(alpha, dtype=float)
    if a.ndim != 1 or a.size == 0:
        raise DataShapeError("alpha must be a non-empty 1-D sequence")
    if not np.all(np.isfinite(a)) or (a <= 0).any():
        raise DataShapeError("alpha values must be finite and > 0")

    gen = rng if rng is not None else np.random.default_rng(seed)
    log_x = _log_gamma_variates(gen, a, int(n))
    draws = np.exp(log_x - logsumexp(log_x, axis=1, keepdims=True))
    if not np.isfinite(draws).all():
        raise DataShapeError("Dirichlet draws are not finite; alpha is out of range")
    return draws


__all__ = ["rdirichlet"]
