"""Tests for the scheme catalog and message bundles."""

from __future__ import annotations

from decimal import Decimal

import pytest

from src.i18n import MESSAGES, t
from src.models.enums import BenefitCategory, FarmerType, Language, SchemeId
from src.schemas.profile import FarmerProfile
from src.schemes import SCHEME_ORDER, UnknownSchemeError, build_catalog, get_scheme


class TestCatalog:
    def test_nine_schemes_in_order(self):
        catalog = build_catalog(Language.EN)
        assert [s.id for s in catalog] == list(SCHEME_ORDER)
        assert len(catalog) == 9

    def test_catalog_is_cached(self):
        assert build_catalog(Language.EN) is build_catalog(Language.EN)

    def test_content_loaded(self):
        kalia = get_scheme(SchemeId.KALIA)
        assert kalia.name == "KALIA (Krushak Assistance for Livelihood and Income Augmentation)"
        assert kalia.benefits
        assert kalia.basic_details
        assert kalia.use_case
        assert kalia.eligibility_text

    @pytest.mark.parametrize("scheme_id", list(SchemeId))
    def test_every_scheme_localized(self, scheme_id):
        en = get_scheme(scheme_id, Language.EN)
        odia = get_scheme(scheme_id, Language.OR)
        assert en.name == odia.name
        assert en.basic_details != odia.basic_details
        assert len(en.benefits) == len(odia.benefits)

    def test_cash_and_tags(self):
        assert get_scheme(SchemeId.PM_KISAN).annual_cash == Decimal("6000")
        assert get_scheme(SchemeId.KALIA).annual_cash == Decimal("10000")
        assert get_scheme(SchemeId.AIF).annual_cash == Decimal("0")
        assert get_scheme(SchemeId.SOIL_HEALTH_CARD).benefit_tags == frozenset()
        assert BenefitCategory.INSURANCE in get_scheme(SchemeId.KALIA).benefit_tags

    def test_lookup_by_string(self):
        assert get_scheme("pm_kisan").id == SchemeId.PM_KISAN

    def test_unknown_scheme(self):
        with pytest.raises(UnknownSchemeError):
            get_scheme("rythu_bandhu")

    def test_check_eligibility_uses_catalog_language(self):
        profile = FarmerProfile(farmer_type=FarmerType.LARGE)
        result = get_scheme(SchemeId.KALIA, Language.OR).check_eligibility(profile)
        assert result.reason == "କେବଳ ଛୋଟ/ସୀମାନ୍ତ କୃଷକ, ବଟାଇଦାର, କିମ୍ବା ଭୂମିହୀନ ପରିବାର ପାଇଁ"


class TestMessages:
    def test_every_message_has_both_languages(self):
        for key, bundle in MESSAGES.items():
            assert set(bundle) == {Language.EN, Language.OR}, key

    def test_params_formatted(self):
        assert t("combo.cash", Language.EN, amount="6,000") == "₹6,000/year cash support"

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            t("reason.no_such_reason", Language.EN)
