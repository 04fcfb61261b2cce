"""Per-scheme eligibility rule functions.

Each function takes a FarmerProfile and a language and returns an
EligibilityResult with full condition tracking. Conditions are listed in
evaluation order; the reason reported is the first unmet one, so the
order of ``conditions.append`` calls is part of each rule's contract.

No rule reads ``district``, ``gender`` or ``category``.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from src.i18n.messages import t
from src.models.enums import FarmerType, Language, SchemeId
from src.schemas.eligibility import EligibilityResult, RuleCondition
from src.schemas.profile import FarmerProfile

# MKUY: below this many acres a bank loan is needed to fund the farmer's share
_MKUY_MIN_SELF_FUNDED_ACRES = Decimal("0.5")

_KALIA_FARMER_TYPES = frozenset({
    FarmerType.SMALL,
    FarmerType.MARGINAL,
    FarmerType.SHARECROPPER,
    FarmerType.LANDLESS,
})


def _first_failed(conditions: list[RuleCondition]) -> str | None:
    """Return description of first failed condition, or None."""
    for c in conditions:
        if not c.met:
            return c.description
    return None


def _result(conditions: list[RuleCondition]) -> EligibilityResult:
    eligible = all(c.met for c in conditions)
    return EligibilityResult(
        eligible=eligible,
        reason=None if eligible else _first_failed(conditions),
        conditions=conditions,
    )


def _has_no_land(profile: FarmerProfile) -> bool:
    return profile.land_size == 0


# ── NMEO-Oilseeds ──────────────────────────────────────────────────────────


def check_nmeo_oilseeds(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    """Registered farmer, inside a value chain cluster, member of its FPO."""
    return _result([
        RuleCondition(
            name="is_registered",
            description=t("reason.registered_farmer", lang),
            met=profile.is_registered,
        ),
        RuleCondition(
            name="is_in_cluster",
            description=t("reason.in_cluster", lang),
            met=profile.is_in_cluster,
        ),
        RuleCondition(
            name="is_fpo_member",
            description=t("reason.fpo_member", lang),
            met=profile.is_fpo_member,
        ),
    ])


# ── KALIA ──────────────────────────────────────────────────────────────────


def check_kalia(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    return _result([
        RuleCondition(
            name="farmer_type",
            description=t("reason.kalia_farmer_type", lang),
            met=profile.farmer_type in _KALIA_FARMER_TYPES,
        ),
    ])


# ── MKUY ───────────────────────────────────────────────────────────────────


def check_mkuy(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    """Needs land or FPO backing, plus the means to fund the non-subsidized share."""
    return _result([
        RuleCondition(
            name="land_or_fpo",
            description=t("reason.land_or_fpo", lang),
            met=not (_has_no_land(profile) and not profile.is_fpo_member),
        ),
        RuleCondition(
            name="investment_capacity",
            description=t("reason.investment_capacity", lang),
            met=profile.has_bank_loan or profile.land_size >= _MKUY_MIN_SELF_FUNDED_ACRES,
        ),
    ])


# ── Odisha Farm Mechanization ──────────────────────────────────────────────


def check_farm_mechanization(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    return _result([
        RuleCondition(
            name="is_registered",
            description=t("reason.portal_registration", lang),
            met=profile.is_registered,
        ),
    ])


# ── Rice Fallow (TRFA) ─────────────────────────────────────────────────────


def check_trfa(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    return _result([
        RuleCondition(
            name="has_rice_fallow",
            description=t("reason.rice_fallow", lang),
            met=profile.has_rice_fallow,
        ),
    ])


# ── PM-KISAN ───────────────────────────────────────────────────────────────


def check_pm_kisan(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    """Landholding families; landless households are let through as declared."""
    return _result([
        RuleCondition(
            name="cultivable_land",
            description=t("reason.cultivable_land", lang),
            met=not (_has_no_land(profile) and profile.farmer_type != FarmerType.LANDLESS),
        ),
    ])


# ── Open enrollment ────────────────────────────────────────────────────────


def check_open_enrollment(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    """PMFBY and Soil Health Card are open to every farmer."""
    return _result([])


# ── AIF ────────────────────────────────────────────────────────────────────


def check_aif(profile: FarmerProfile, lang: Language = Language.EN) -> EligibilityResult:
    return _result([
        RuleCondition(
            name="land_or_fpo",
            description=t("reason.aif_applicant", lang),
            met=not (_has_no_land(profile) and not profile.is_fpo_member),
        ),
    ])


# ── Rule registry ─────────────────────────────────────────────────────────

RULE_CHECKS: dict[SchemeId, Callable[[FarmerProfile, Language], EligibilityResult]] = {
    SchemeId.NMEO_OILSEEDS: check_nmeo_oilseeds,
    SchemeId.KALIA: check_kalia,
    SchemeId.MKUY: check_mkuy,
    SchemeId.FARM_MECHANIZATION: check_farm_mechanization,
    SchemeId.TRFA: check_trfa,
    SchemeId.PM_KISAN: check_pm_kisan,
    SchemeId.PMFBY: check_open_enrollment,
    SchemeId.SOIL_HEALTH_CARD: check_open_enrollment,
    SchemeId.AIF: check_aif,
}
