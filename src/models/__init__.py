"""Domain enums shared by the profile, scheme and logistics schemas."""

from __future__ import annotations

from src.models.enums import (
    BenefitCategory,
    FarmerType,
    FilterMode,
    Gender,
    Language,
    SchemeId,
    SocialCategory,
    VehicleType,
    VerificationKind,
)

__all__ = [
    "BenefitCategory",
    "FarmerType",
    "FilterMode",
    "Gender",
    "Language",
    "SchemeId",
    "SocialCategory",
    "VehicleType",
    "VerificationKind",
]
