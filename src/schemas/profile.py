"""Farmer profile value object.

The profile is frozen: every edit produces a new instance through
``with_field`` so the eligibility pipeline always works on a snapshot.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import FarmerType, Gender, SocialCategory, VerificationKind


class FarmerProfile(BaseModel):
    """Declared farmer attributes fed into the eligibility engine.

    Built by the profile form; verification outcomes flip the boolean flags.
    """

    model_config = ConfigDict(frozen=True)

    # Landholding
    farmer_type: FarmerType = FarmerType.UNSET
    land_size: Decimal = Field(default=Decimal("0"))     # acres

    # Memberships / registrations
    is_fpo_member: bool = False
    is_in_cluster: bool = False          # NMEO value chain cluster
    has_rice_fallow: bool = False        # land left fallow after Kharif paddy
    is_registered: bool = False          # Go-Sugam / Agrisnet portal
    has_bank_loan: bool = False

    # Demographics (collected, not read by any rule yet)
    category: SocialCategory = SocialCategory.GENERAL
    gender: Gender = Gender.UNSET
    district: str = ""


# Verification outcome → profile flag it confirms
VERIFICATION_FIELDS: dict[VerificationKind, str] = {
    VerificationKind.GO_SUGAM_REGISTRATION: "is_registered",
    VerificationKind.VALUE_CHAIN_CLUSTER: "is_in_cluster",
    VerificationKind.FPO_MEMBERSHIP: "is_fpo_member",
}


def with_field(profile: FarmerProfile, field: str, value: Any) -> FarmerProfile:
    """Return a new profile with one attribute replaced and re-validated.

    Raises:
        ValueError: If ``field`` is not a profile attribute.
    """
    if field not in FarmerProfile.model_fields:
        msg = f"Unknown profile field: {field}"
        raise ValueError(msg)
    data = profile.model_dump()
    data[field] = value
    return FarmerProfile.model_validate(data)


def apply_verification(
    profile: FarmerProfile,
    kind: VerificationKind,
    verified: bool,
) -> FarmerProfile:
    """Fold a resolved verification outcome into the profile.

    A failed verification never clears a flag the farmer declared.
    """
    if not verified:
        return profile
    return with_field(profile, VERIFICATION_FIELDS[kind], True)
