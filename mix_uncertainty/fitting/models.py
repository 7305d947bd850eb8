"""Shapes exchanged with the external state-space optimizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

import numpy as np

from mix_uncertainty.exceptions import FitResultError, ModelVariantError


class ModelVariant(Enum):
    """Model structure codes and their display labels."""

    MVN_AR1_N = ("A", "MVN_AR1_N")
    N_AR1_N = ("B", "N_AR1_N")
    MVN_RW_DIR = ("C", "MVN_RW_Dir")
    N_RW_DIR = ("D", "N_RW_Dir")
    MVN_AR1_HURDLE = ("E", "MVN_AR1_Hurdle")
    N_AR1_HURDLE = ("F", "N_AR1_Hurdle")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    @classmethod
    def from_code(cls, code: "str | ModelVariant") -> "ModelVariant":
        if isinstance(code, cls):
            return code
        for variant in cls:
            if variant.code == code:
                return variant
        raise ModelVariantError(f"Unknown model variant code: {code!r}")


@dataclass
class OptimizerResult:
    par: np.ndarray
    objective: float
    convergence: Optional[int] = 0
    message: Optional[str] = None

    def __post_init__(self) -> None:
        self.par = np.atleast_1d(np.asarray(self.par, dtype=float))


@dataclass
class SdReport:
    pd_hess: bool
    std_errors: Dict[str, np.ndarray] = field(default_factory=dict)

    def std_error(self, block: str) -> np.ndarray:
        """Standard errors for a named parameter block (empty when absent)."""
        values = self.std_errors.get(block)
        if values is None:
            return np.empty(0)
        return np.atleast_1d(np.asarray(values, dtype=float))


@dataclass
class ModelFit:
    """One optimizer attempt: optimisation summary, sd report and model code.

    ``opt`` is ``None`` when the optimizer crashed before producing a summary.
    """

    code: str
    opt: Optional[OptimizerResult] = None
    sdr: Optional[SdReport] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ModelFit":
        if "code" not in payload:
            raise FitResultError("fit payload is missing the model 'code'")
        opt_raw = payload.get("opt")
        sdr_raw = payload.get("sdr")
        opt = None
        if opt_raw is not None:
            try:
                opt = OptimizerResult(
                    par=opt_raw.get("par", []),
                    objective=float(opt_raw["objective"]) if opt_raw.get("objective") is not None else float("nan"),
                    convergence=opt_raw.get("convergence"),
                    message=opt_raw.get("message"),
                )
            except (TypeError, ValueError) as exc:
                raise FitResultError(f"malformed optimizer summary: {exc}") from exc
        sdr = None
        if sdr_raw is not None:
            std = {
                name: np.asarray([np.nan if v is None else v for v in np.atleast_1d(values)], dtype=float)
                for name, values in (sdr_raw.get("std_errors") or {}).items()
            }
            sdr = SdReport(pd_hess=bool(sdr_raw.get("pd_hess", False)), std_errors=std)
        return cls(code=payload["code"], opt=opt, sdr=sdr)


@dataclass(frozen=True)
class FitDecision:
    """Outcome of one fit attempt: whether to retry and whether it failed outright."""

    rerun: bool
    fail: bool
    pd_hess: bool
    nans: bool
    conv: bool
    log: Optional[str] = field(default=None, compare=False)

    def to_dict(self) -> dict:
        payload = {
            "rerun": self.rerun,
            "fail": self.fail,
            "pd_hess": self.pd_hess,
            "nans": self.nans,
            "conv": self.conv,
        }
        if self.log is not None:
            payload["log"] = self.log
        return payload


__all__ = ["FitDecision", "ModelFit", "ModelVariant", "OptimizerResult", "SdReport"]
