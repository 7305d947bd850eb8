"""Preprocessing configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Literal

from mix_uncertainty.exceptions import ConfigValidationError

ZeroGrouping = Literal["row", "column"]
Redistribution = Literal["proportional", "even"]

# Zero classification: a row needs this many positive values before a zero
# can be judged an outlier.
MIN_POSITIVE_FOR_OUTLIER = 5
OUTLIER_SD_MULTIPLIER = 2.0
ZERO_GROUPING: ZeroGrouping = "row"

# Simplex repair
IMPUTE_FLOOR = 1e-6
REDISTRIBUTION: Redistribution = "proportional"

# Catchability sufficiency
RECENT_YEARS = 3
MIN_OBSERVATIONS = 3

# Standard-error block inspected for NaNs after a fit (random-walk component)
STD_ERROR_BLOCK = "rw"


@dataclass(slots=True)
class PrepConfig:
    min_positive: int = MIN_POSITIVE_FOR_OUTLIER
    n_sd: float = OUTLIER_SD_MULTIPLIER
    zero_grouping: ZeroGrouping = ZERO_GROUPING
    floor: float = IMPUTE_FLOOR
    redistribution: Redistribution = REDISTRIBUTION
    recent_years: int = RECENT_YEARS
    min_obs: int = MIN_OBSERVATIONS
    std_error_block: str = STD_ERROR_BLOCK

    def __post_init__(self) -> None:
        if self.min_positive < 2:
            raise ConfigValidationError("min_positive must be >= 2 so a standard deviation exists")
        if self.n_sd <= 0:
            raise ConfigValidationError("n_sd must be > 0")
        if self.zero_grouping not in {"row", "column"}:
            raise ConfigValidationError("invalid zero_grouping")
        if not 0 < self.floor < 1:
            raise ConfigValidationError("floor must lie strictly between 0 and 1")
        if self.redistribution not in {"proportional", "even"}:
            raise ConfigValidationError("invalid redistribution")
        if self.recent_years <= 0:
            raise ConfigValidationError("recent_years must be positive")
        if self.min_obs <= 0:
            raise ConfigValidationError("min_obs must be positive")
        if not self.std_error_block:
            raise ConfigValidationError("std_error_block is required")

    @classmethod
    def from_dict(cls, data: dict) -> "PrepConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown configuration keys: {unknown}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "min_positive": self.min_positive,
            "n_sd": self.n_sd,
            "zero_grouping": self.zero_grouping,
            "floor": self.floor,
            "redistribution": self.redistribution,
            "recent_years": self.recent_years,
            "min_obs": self.min_obs,
            "std_error_block": self.std_error_block,
        }


__all__ = [
    "IMPUTE_FLOOR",
    "MIN_OBSERVATIONS",
    "MIN_POSITIVE_FOR_OUTLIER",
    "OUTLIER_SD_MULTIPLIER",
    "PrepConfig",
    "RECENT_YEARS",
    "REDISTRIBUTION",
    "STD_ERROR_BLOCK",
    "ZERO_GROUPING",
]
