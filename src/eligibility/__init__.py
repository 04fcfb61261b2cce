"""Eligibility engine — rule-based scheme matching, combinations and land-size checks."""

from src.eligibility.combinations import aggregate_benefits, generate_combinations, preview
from src.eligibility.engine import eligible_schemes, evaluate, evaluate_all, explore, filter_schemes
from src.eligibility.land_size import (
    land_size_hint,
    max_land_size,
    min_land_size,
    normalize_land_size,
    update_profile,
)
from src.schemas.eligibility import (
    CombinationBenefits,
    EligibilityResult,
    LandSizeCheck,
    SchemeCombination,
    SchemeEvaluation,
    SchemeExplorerResult,
)

__all__ = [
    "evaluate",
    "evaluate_all",
    "eligible_schemes",
    "filter_schemes",
    "explore",
    "aggregate_benefits",
    "generate_combinations",
    "preview",
    "normalize_land_size",
    "update_profile",
    "land_size_hint",
    "max_land_size",
    "min_land_size",
    "EligibilityResult",
    "SchemeEvaluation",
    "CombinationBenefits",
    "SchemeCombination",
    "LandSizeCheck",
    "SchemeExplorerResult",
]
