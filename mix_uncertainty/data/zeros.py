"""Crude classification of true and false zeros in historic effort-share data.

A zero share that is statistically unlikely given the positive shares around
it is treated as a false zero (missing data) and rewritten to ``NaN``. Zeros
that cannot be judged, or that look plausible, are kept as true zeros.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from mix_uncertainty.config.settings import MIN_POSITIVE_FOR_OUTLIER, OUTLIER_SD_MULTIPLIER, ZERO_GROUPING, ZeroGrouping
from mix_uncertainty.data.validation import validate_share_matrix
from mix_uncertainty.exceptions import ConfigValidationError
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="zero_classifier")


def flag_false_zeros(
    dat: Any,
    *,
    min_positive: int = MIN_POSITIVE_FOR_OUTLIER,
    n_sd: float = OUTLIER_SD_MULTIPLIER,
    within: ZeroGrouping = ZERO_GROUPING,
) -> pd.DataFrame:
    """Return a boolean table marking zeros that fall outside mean +/- n_sd*sd.

    Statistics are computed over the strictly positive values of each group:
    each row (one year across metiers) when ``within="row"``, each column
    (one metier across years) when ``within="column"``. Groups with fewer
    than ``min_positive`` positive values never flag anything.
    """
    if within not in {"row", "column"}:
        raise ConfigValidationError(f"within must be 'row' or 'column', got {within!r}")
    frame = validate_share_matrix(dat)
    values = frame.to_numpy()
    if within == "column":
        values = values.T

    positive = np.where(values > 0, values, np.nan)
    n0 = np.sum(values > 0, axis=1)
    flags = np.zeros(values.shape, dtype=bool)

    judged = n0 >= min_positive
    if judged.any():
        mu = np.nanmean(positive[judged], axis=1)
        sd = np.nanstd(positive[judged], axis=1, ddof=1)
        lower = (mu - n_sd * sd)[:, None]
        upper = (mu + n_sd * sd)[:, None]
        zero = values[judged] == 0
        flags[judged] = zero & ((0.0 < lower) | (0.0 > upper))

    if within == "column":
        flags = flags.T
    return pd.DataFrame(flags, index=frame.index, columns=frame.columns)


def find_true_zeros(
    dat: Any,
    *,
    min_positive: int = MIN_POSITIVE_FOR_OUTLIER,
    n_sd: float = OUTLIER_SD_MULTIPLIER,
    within: ZeroGrouping = ZERO_GROUPING,
    verbose: bool = False,
) -> pd.DataFrame:
    """Keep true zeros and convert false zeros to ``NaN``.

    ``dat`` is a matrix of historic effort-share with rows = years and
    cols = metiers. A matrix without zeros is returned unchanged (as a copy).
    """
    frame = validate_share_matrix(dat)
    if not (frame == 0).to_numpy().any():
        return frame

    flags = flag_false_zeros(frame, min_positive=min_positive, n_sd=n_sd, within=within)
    n_flagged = int(flags.to_numpy().sum())
    result = frame.mask(flags.to_numpy())

    log.debug(
        "Zero classification complete",
        extra={"zeros": int((frame == 0).to_numpy().sum()), "false_zeros": n_flagged, "within": within},
    )
    if verbose and n_flagged:
        log.info(f"{n_flagged} false zero(s) converted to missing")
    return result


__all__ = ["find_true_zeros", "flag_false_zeros"]
