"""Share-matrix conditioning and catchability sufficiency checks."""

from mix_uncertainty.data.catchability import SufficiencyResult, check_catchability
from mix_uncertainty.data.imputation import impute_cases
from mix_uncertainty.data.pipeline import prepare_share_matrix
from mix_uncertainty.data.zeros import find_true_zeros, flag_false_zeros

__all__ = [
    "SufficiencyResult",
    "check_catchability",
    "find_true_zeros",
    "flag_false_zeros",
    "impute_cases",
    "prepare_share_matrix",
]
