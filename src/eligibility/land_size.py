"""Land-size validator — farmer-type bounds on the declared acreage.

Pure post-update pass: takes a profile snapshot and returns the
normalized profile plus at most one warning. Values above the type's
maximum are clamped; a large farmer below 2.5 acres is only warned.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from src.config import settings
from src.i18n.messages import t
from src.models.enums import FarmerType, Language
from src.schemas.eligibility import LandSizeCheck
from src.schemas.profile import FarmerProfile, with_field

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")

# Types with a tighter ceiling than the generic input bound
_TYPE_MAX: dict[FarmerType, Decimal] = {
    FarmerType.MARGINAL: Decimal("1.0"),
    FarmerType.SMALL: Decimal("2.5"),
    FarmerType.LANDLESS: _ZERO,
}

_LARGE_MIN = Decimal("2.5")

_TYPE_LABEL_KEYS: dict[FarmerType, str] = {
    FarmerType.MARGINAL: "land.type_marginal",
    FarmerType.SMALL: "land.type_small",
}

_HINT_KEYS: dict[FarmerType, str] = {
    FarmerType.MARGINAL: "land.hint_marginal",
    FarmerType.SMALL: "land.hint_small",
    FarmerType.LARGE: "land.hint_large",
    FarmerType.LANDLESS: "land.hint_landless",
    FarmerType.SHARECROPPER: "land.hint_sharecropper",
}


def max_land_size(farmer_type: FarmerType) -> Decimal:
    """Upper acreage bound for a farmer type."""
    return _TYPE_MAX.get(farmer_type, settings.schemes.max_land_size_acres)


def min_land_size(farmer_type: FarmerType) -> Decimal:
    """Lower acreage bound for a farmer type (only large farmers have one)."""
    return _LARGE_MIN if farmer_type == FarmerType.LARGE else _ZERO


def land_size_hint(farmer_type: FarmerType, lang: Language = Language.EN) -> str | None:
    """Helper text shown under the land-size input; None when no type is chosen."""
    key = _HINT_KEYS.get(farmer_type)
    return t(key, lang) if key else None


def _format_acres(value: Decimal) -> str:
    """Render 1.0 as "1" and 2.5 as "2.5"."""
    return format(value.normalize(), "f")


def _max_exceeded_warning(farmer_type: FarmerType, max_size: Decimal, lang: Language) -> str:
    unit = t("land.unit_singular" if max_size == 1 else "land.unit_plural", lang)
    if farmer_type == FarmerType.UNSET:
        return t("land.max_exceeded_generic", lang, max_size=_format_acres(max_size), unit=unit)
    # Sharecroppers share the large-farmer wording
    type_label = t(_TYPE_LABEL_KEYS.get(farmer_type, "land.type_large"), lang)
    return t("land.max_exceeded", lang, type_label=type_label, max_size=_format_acres(max_size), unit=unit)


def normalize_land_size(profile: FarmerProfile, lang: Language = Language.EN) -> LandSizeCheck:
    """Apply the farmer-type bounds to ``profile.land_size``.

    Returns:
        LandSizeCheck with the (possibly clamped) profile and the current warning.
    """
    farmer_type = profile.farmer_type
    land = profile.land_size
    adjusted = False
    warning: str | None = None

    if land < _ZERO:
        # Input control floor, no message
        land = _ZERO
        adjusted = True

    max_size = max_land_size(farmer_type)

    if farmer_type == FarmerType.LANDLESS:
        if land > _ZERO:
            land = _ZERO
            adjusted = True
            warning = t("land.landless_zero", lang)
    elif land > max_size:
        land = max_size
        adjusted = True
        warning = _max_exceeded_warning(farmer_type, max_size, lang)
    elif farmer_type == FarmerType.LARGE and land < min_land_size(farmer_type):
        # Warned, deliberately left unclamped
        warning = t("land.large_minimum", lang)

    if adjusted:
        logger.debug(
            "Land size adjusted for %s: %s -> %s",
            farmer_type.value or "unset", profile.land_size, land,
        )
        profile = with_field(profile, "land_size", land)

    return LandSizeCheck(profile=profile, warning=warning, adjusted=adjusted)


def update_profile(
    profile: FarmerProfile,
    field: str,
    value: object,
    lang: Language = Language.EN,
) -> LandSizeCheck:
    """Replace one profile attribute, then re-run the land-size bounds."""
    return normalize_land_size(with_field(profile, field, value), lang)
