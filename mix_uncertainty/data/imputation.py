"""Impute small values into zero cells of proportional data.

Rows of an effort-share matrix must stay strictly inside the open simplex
before a logit-type transform is applied. Zero cells receive a small floor
value and the added mass is deducted from the non-zero cells of the same
row, so row totals are unchanged.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from mix_uncertainty.config.settings import IMPUTE_FLOOR, REDISTRIBUTION, Redistribution
from mix_uncertainty.data.validation import validate_share_matrix
from mix_uncertainty.exceptions import ConfigValidationError, DataShapeError
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="simplex_repair")


def _repair_row(row: np.ndarray, label: Any, floor: float, redistribution: Redistribution) -> np.ndarray:
    zero = row == 0
    nonzero = ~zero & ~np.isnan(row)
    if not nonzero.any():
        raise DataShapeError(f"row {label!r} has no non-zero values; cannot redistribute imputed mass")

    out = row.copy()
    floor_mass = zero.sum() * floor
    out[zero] = floor
    if redistribution == "proportional":
        out[nonzero] = row[nonzero] - floor_mass * (row[nonzero] / row[nonzero].sum())
    else:
        out[nonzero] = row[nonzero] - floor_mass / nonzero.sum()

    if (out[nonzero] <= 0).any():
        raise DataShapeError(f"row {label!r} is too small to absorb {floor_mass:g} of imputed mass")
    return out


def impute_cases(
    dat: Any,
    *,
    floor: float = IMPUTE_FLOOR,
    redistribution: Redistribution = REDISTRIBUTION,
) -> pd.DataFrame:
    """Replace zero cells with ``floor`` and deduct the mass from the rest of the row.

    Missing values are left missing and excluded from row sums. Rows without
    zeros are returned unchanged. The result keeps the input's row and column
    labels.

    Raises DataShapeError when a row containing zeros has no non-zero values
    to take the imputed mass from.
    """
    if redistribution not in {"proportional", "even"}:
        raise ConfigValidationError(f"redistribution must be 'proportional' or 'even', got {redistribution!r}")
    frame = validate_share_matrix(dat)
    values = frame.to_numpy(copy=True)

    repaired = 0
    for i, row in enumerate(values):
        if (row == 0).any():
            values[i] = _repair_row(row, frame.index[i], floor, redistribution)
            repaired += 1

    log.debug("Simplex repair complete", extra={"rows_repaired": repaired, "redistribution": redistribution})
    return pd.DataFrame(values, index=frame.index, columns=frame.columns)


__all__ = ["impute_cases"]
