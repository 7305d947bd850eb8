"""Condition a historic effort-share matrix for fitting."""

from __future__ import annotations

import time
from typing import Any, Optional

import pandas as pd

from mix_uncertainty.config.settings import PrepConfig
from mix_uncertainty.data.imputation import impute_cases
from mix_uncertainty.data.zeros import find_true_zeros
from mix_uncertainty.utils.logging import get_logger

log = get_logger(__name__, component="share_pipeline")


def prepare_share_matrix(dat: Any, config: Optional[PrepConfig] = None, *, verbose: bool = False) -> pd.DataFrame:
    """Classify zeros, then impute the remaining true zeros.

    False zeros become ``NaN``; true zeros are lifted to the floor value so
    every present cell lies strictly inside (0, 1).
    """
    cfg = config or PrepConfig()
    start = time.perf_counter()
    classified = find_true_zeros(
        dat,
        min_positive=cfg.min_positive,
        n_sd=cfg.n_sd,
        within=cfg.zero_grouping,
        verbose=verbose,
    )
    repaired = impute_cases(classified, floor=cfg.floor, redistribution=cfg.redistribution)
    log.info(
        "Share matrix prepared",
        extra={
            "duration_ms": round((time.perf_counter() - start) * 1000, 3),
            "rows": repaired.shape[0],
            "metiers": repaired.shape[1],
        },
    )
    return repaired


__all__ = ["prepare_share_matrix"]
