"""Pydantic schemas for the eligibility engine, combination generator
and land-size validator.

Pure data classes — no business logic. Used as outputs of the
deterministic evaluation pipeline and consumed by rendering code.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import SchemeId
from src.schemas.profile import FarmerProfile


# ---------------------------------------------------------------------------
# Eligibility evaluation
# ---------------------------------------------------------------------------


class RuleCondition(BaseModel):
    """One condition of a scheme rule, in evaluation order."""

    name: str                          # e.g. "is_registered"
    description: str                   # localized reason shown when unmet
    met: bool


class EligibilityResult(BaseModel):
    """Outcome of one scheme's rule against one profile."""

    eligible: bool
    reason: str | None = None          # first unmet condition, None when eligible
    conditions: list[RuleCondition] = Field(default_factory=list)


class SchemeEvaluation(BaseModel):
    """Eligibility result tagged with the scheme it belongs to."""

    scheme_id: SchemeId
    scheme_name: str
    result: EligibilityResult

    @property
    def eligible(self) -> bool:
        return self.result.eligible


# ---------------------------------------------------------------------------
# Combinations
# ---------------------------------------------------------------------------


class CombinationBenefits(BaseModel):
    """Aggregated benefits of a set of schemes claimed together."""

    total_cash: Decimal                # ₹/year, PM-KISAN overlap removed
    has_insurance: bool = False
    has_loan: bool = False
    has_subsidy: bool = False
    has_seeds: bool = False
    has_training: bool = False
    benefits: list[str] = Field(default_factory=list)   # localized labels, display order
    summary: str = ""                  # labels joined with " • "
    description: str = ""              # one-sentence localized summary


class SchemeCombination(BaseModel):
    """2–4 eligible schemes that can be availed together."""

    scheme_ids: list[SchemeId]
    scheme_names: list[str]
    benefits: CombinationBenefits

    @property
    def size(self) -> int:
        return len(self.scheme_ids)

    @property
    def total_cash(self) -> Decimal:
        return self.benefits.total_cash


# ---------------------------------------------------------------------------
# Land-size validation
# ---------------------------------------------------------------------------


class LandSizeCheck(BaseModel):
    """Normalized profile plus the single current land-size warning."""

    model_config = ConfigDict(frozen=True)

    profile: FarmerProfile
    warning: str | None = None
    adjusted: bool = False             # True when land_size was clamped


# ---------------------------------------------------------------------------
# Explorer page
# ---------------------------------------------------------------------------


class SchemeExplorerResult(BaseModel):
    """Everything the scheme explorer renders for one profile snapshot."""

    profile: FarmerProfile
    land_size_warning: str | None = None
    evaluations: list[SchemeEvaluation]
    eligible_ids: list[SchemeId]
    combinations: list[SchemeCombination]
    preview: list[SchemeCombination]   # first N in generation order, not the best N

    @property
    def combination_count(self) -> int:
        return len(self.combinations)
