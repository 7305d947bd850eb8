"""Fit-outcome classification for the external state-space optimizer."""

from mix_uncertainty.fitting.diagnostics import check_fail, check_opt
from mix_uncertainty.fitting.information_criteria import aic, simple_aic
from mix_uncertainty.fitting.models import FitDecision, ModelFit, ModelVariant, OptimizerResult, SdReport

__all__ = [
    "FitDecision",
    "ModelFit",
    "ModelVariant",
    "OptimizerResult",
    "SdReport",
    "aic",
    "check_fail",
    "check_opt",
    "simple_aic",
]
