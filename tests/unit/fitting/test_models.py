import numpy as np
import pytest

from mix_uncertainty.exceptions import FitResultError, ModelVariantError
from mix_uncertainty.fitting.information_criteria import aic, simple_aic
from mix_uncertainty.fitting.models import ModelFit, ModelVariant, OptimizerResult


def test_every_code_maps_to_exactly_one_label():
    expected = {
        "A": "MVN_AR1_N",
        "B": "N_AR1_N",
        "C": "MVN_RW_Dir",
        "D": "N_RW_Dir",
        "E": "MVN_AR1_Hurdle",
        "F": "N_AR1_Hurdle",
    }
    assert {v.code: v.label for v in ModelVariant} == expected
    for code, label in expected.items():
        assert ModelVariant.from_code(code).label == label


def test_from_code_accepts_variant_and_rejects_unknown():
    assert ModelVariant.from_code(ModelVariant.N_RW_DIR) is ModelVariant.N_RW_DIR
    with pytest.raises(ModelVariantError):
        ModelVariant.from_code("G")


def test_simple_aic():
    opt = OptimizerResult(par=[0.1, 0.2, 0.3, 0.4], objective=10.0)
    assert simple_aic(opt) == 28.0
    assert simple_aic({"par": [1.0, 2.0], "objective": -3.5}) == -3.0


def test_simple_aic_requires_finite_objective():
    with pytest.raises(FitResultError):
        simple_aic(OptimizerResult(par=[1.0], objective=float("nan")))


def test_aic_from_log_likelihood():
    assert aic(-10.0, 4) == 28.0


def test_model_fit_from_dict():
    fit = ModelFit.from_dict(
        {
            "code": "D",
            "opt": {"par": [0.1, 0.2], "objective": 4.2, "convergence": 0},
            "sdr": {"pd_hess": True, "std_errors": {"rw": [0.1, None]}},
        }
    )
    assert fit.opt is not None and fit.opt.convergence == 0
    np.testing.assert_array_equal(fit.opt.par, [0.1, 0.2])
    assert np.isnan(fit.sdr.std_error("rw")[1])
    assert fit.sdr.std_error("absent").size == 0


def test_model_fit_from_dict_without_optimizer_summary():
    fit = ModelFit.from_dict({"code": "A", "opt": None})
    assert fit.opt is None and fit.sdr is None


def test_model_fit_from_dict_requires_code():
    with pytest.raises(FitResultError):
        ModelFit.from_dict({"opt": {"par": [], "objective": 1.0}})
