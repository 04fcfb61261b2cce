"""Scheme identity, display order and benefit structure.

Benefit tags replace matching on display names, so renaming or
translating a scheme never changes how combinations are scored.
"""

from __future__ import annotations

from decimal import Decimal

from src.models.enums import BenefitCategory, SchemeId

# Display / evaluation order of the catalog
SCHEME_ORDER: tuple[SchemeId, ...] = (
    SchemeId.NMEO_OILSEEDS,
    SchemeId.KALIA,
    SchemeId.MKUY,
    SchemeId.FARM_MECHANIZATION,
    SchemeId.TRFA,
    SchemeId.PM_KISAN,
    SchemeId.PMFBY,
    SchemeId.SOIL_HEALTH_CARD,
    SchemeId.AIF,
)

# Fixed annual cash transfer per scheme (₹/year)
ANNUAL_CASH: dict[SchemeId, Decimal] = {
    SchemeId.PM_KISAN: Decimal("6000"),
    SchemeId.KALIA: Decimal("10000"),   # already includes the PM-KISAN ₹6,000
}

BENEFIT_TAGS: dict[SchemeId, frozenset[BenefitCategory]] = {
    SchemeId.NMEO_OILSEEDS: frozenset({BenefitCategory.TRAINING}),
    SchemeId.KALIA: frozenset({BenefitCategory.CASH, BenefitCategory.INSURANCE, BenefitCategory.LOAN}),
    SchemeId.MKUY: frozenset({BenefitCategory.SUBSIDY}),
    SchemeId.FARM_MECHANIZATION: frozenset({BenefitCategory.SUBSIDY}),
    SchemeId.TRFA: frozenset({BenefitCategory.TRAINING}),
    SchemeId.PM_KISAN: frozenset({BenefitCategory.CASH}),
    SchemeId.PMFBY: frozenset({BenefitCategory.INSURANCE}),
    SchemeId.SOIL_HEALTH_CARD: frozenset(),
    SchemeId.AIF: frozenset({BenefitCategory.LOAN}),
}

# KALIA's cash figure subsumes PM-KISAN's; subtract once when both are claimed.
CASH_OVERLAP: tuple[SchemeId, SchemeId, Decimal] = (
    SchemeId.PM_KISAN,
    SchemeId.KALIA,
    Decimal("6000"),
)
