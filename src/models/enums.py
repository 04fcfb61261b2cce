"""Domain enums used across the profile, scheme and logistics schemas.

All enums use str mixin so values serialize as plain strings.
"""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """UI languages the core localizes reasons, labels and scheme content into."""

    EN = "en"
    OR = "or"  # Odia


class FarmerType(str, Enum):
    """Declared landholding class — drives land-size bounds and KALIA eligibility."""

    UNSET = ""
    MARGINAL = "marginal"
    SMALL = "small"
    LARGE = "large"
    SHARECROPPER = "sharecropper"
    LANDLESS = "landless"


class SocialCategory(str, Enum):
    """Social category collected on the profile form."""

    GENERAL = "general"
    SC = "sc"
    ST = "st"


class Gender(str, Enum):
    UNSET = ""
    MALE = "male"
    FEMALE = "female"


class SchemeId(str, Enum):
    """Stable scheme identifiers, independent of the localized display name."""

    NMEO_OILSEEDS = "nmeo_oilseeds"
    KALIA = "kalia"
    MKUY = "mkuy"
    FARM_MECHANIZATION = "farm_mechanization"
    TRFA = "trfa"
    PM_KISAN = "pm_kisan"
    PMFBY = "pmfby"
    SOIL_HEALTH_CARD = "soil_health_card"
    AIF = "aif"


class BenefitCategory(str, Enum):
    """Benefit tags aggregated when schemes are combined."""

    CASH = "cash"
    INSURANCE = "insurance"
    LOAN = "loan"
    SUBSIDY = "subsidy"
    TRAINING = "training"  # free seeds & training


class VerificationKind(str, Enum):
    """External verifications whose outcome flips a profile flag."""

    GO_SUGAM_REGISTRATION = "go_sugam_registration"
    VALUE_CHAIN_CLUSTER = "value_chain_cluster"
    FPO_MEMBERSHIP = "fpo_membership"


class FilterMode(str, Enum):
    """Scheme list filter on the explorer page."""

    ALL = "all"
    ELIGIBLE = "eligible"


class VehicleType(str, Enum):
    """Transport vehicle — selects the per-km per-quintal rate."""

    TRUCK = "truck"
    TEMPO = "tempo"
