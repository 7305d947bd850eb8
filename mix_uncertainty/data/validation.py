"""Shape and dtype checks for share and catchability matrices."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from mix_uncertainty.exceptions import DataShapeError


def as_numeric_frame(dat: Any, name: str = "matrix") -> pd.DataFrame:
    """Coerce a DataFrame, 2-D array or list of rows to a float DataFrame.

    Returns a new frame; the caller's object is never modified. Raises
    DataShapeError for ragged rows, non-2-D input or non-numeric entries.
    """
    if isinstance(dat, pd.DataFrame):
        frame = dat.copy()
    else:
        if isinstance(dat, (list, tuple)):
            lengths = {len(row) if isinstance(row, (list, tuple, np.ndarray)) else -1 for row in dat}
            if -1 in lengths:
                raise DataShapeError(f"{name} must be 2-D: every row must be a sequence")
            if len(lengths) > 1:
                raise DataShapeError(f"{name} has ragged rows (lengths {sorted(lengths)})")
        try:
            arr = np.asarray(dat)
        except ValueError as exc:
            raise DataShapeError(f"{name} could not be read as an array: {exc}") from exc
        if arr.ndim != 2:
            raise DataShapeError(f"{name} must be 2-D, got {arr.ndim} dimension(s)")
        frame = pd.DataFrame(arr)

    non_numeric = [col for col in frame.columns if not pd.api.types.is_numeric_dtype(frame[col])]
    if non_numeric:
        try:
            frame[non_numeric] = frame[non_numeric].apply(pd.to_numeric)
        except (TypeError, ValueError) as exc:
            raise DataShapeError(f"{name} has non-numeric entries in columns {non_numeric}") from exc
    if any(pd.api.types.is_bool_dtype(frame[col]) for col in frame.columns):
        raise DataShapeError(f"{name} must hold numbers, not booleans")
    return frame.astype(float)


def validate_share_matrix(dat: Any) -> pd.DataFrame:
    """Return ``dat`` as a float ShareMatrix (rows = years, cols = metiers)."""
    frame = as_numeric_frame(dat, name="share matrix")
    values = frame.to_numpy()
    present = values[~np.isnan(values)]
    if np.isinf(present).any():
        raise DataShapeError("share matrix contains infinite values")
    if ((present < 0) | (present > 1)).any():
        raise DataShapeError("share matrix values must lie in [0, 1]")
    return frame


def validate_catchability_matrix(logqs: Any) -> pd.DataFrame:
    """Return ``logqs`` as a float CatchabilityMatrix (rows = years, cols = stocks)."""
    frame = as_numeric_frame(logqs, name="catchability matrix")
    if np.isinf(frame.to_numpy()).any():
        raise DataShapeError("catchability matrix contains infinite values")
    return frame


__all__ = ["as_numeric_frame", "validate_catchability_matrix", "validate_share_matrix"]
