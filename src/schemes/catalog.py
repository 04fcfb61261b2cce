"""Scheme catalog — static registry built once per language.

Descriptive text lives in ``content.json`` keyed by stable scheme id and
language; eligibility rules come from ``src.schemes.rules``.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from src.models.enums import BenefitCategory, Language, SchemeId
from src.schemas.eligibility import EligibilityResult
from src.schemas.profile import FarmerProfile
from src.schemes.definitions import ANNUAL_CASH, BENEFIT_TAGS, SCHEME_ORDER
from src.schemes.rules import RULE_CHECKS

_CONTENT_PATH = Path(__file__).resolve().parent / "content.json"


class UnknownSchemeError(KeyError):
    """Raised when a scheme id is not part of the catalog."""


@dataclass(frozen=True)
class Scheme:
    """Immutable catalog entry with its localized text and eligibility rule."""

    id: SchemeId
    language: Language
    name: str
    basic_details: str
    benefits: tuple[str, ...]
    use_case: str
    eligibility_text: str
    annual_cash: Decimal
    benefit_tags: frozenset[BenefitCategory]
    rule: Callable[[FarmerProfile, Language], EligibilityResult] = field(repr=False, compare=False)

    def check_eligibility(self, profile: FarmerProfile) -> EligibilityResult:
        """Apply this scheme's rule, with reasons in the catalog language."""
        return self.rule(profile, self.language)


@lru_cache(maxsize=1)
def _load_content() -> dict:
    """Load localized scheme content from JSON."""
    with open(_CONTENT_PATH, encoding="utf-8") as f:
        return json.load(f)


def _build_scheme(scheme_id: SchemeId, lang: Language) -> Scheme:
    bundles = _load_content()[scheme_id.value]
    text = bundles.get(lang.value) or bundles[Language.EN.value]
    return Scheme(
        id=scheme_id,
        language=lang,
        name=text["name"],
        basic_details=text["basic_details"],
        benefits=tuple(text["benefits"]),
        use_case=text["use_case"],
        eligibility_text=text["eligibility_text"],
        annual_cash=ANNUAL_CASH.get(scheme_id, Decimal("0")),
        benefit_tags=BENEFIT_TAGS[scheme_id],
        rule=RULE_CHECKS[scheme_id],
    )


@lru_cache(maxsize=len(Language))
def build_catalog(lang: Language = Language.EN) -> tuple[Scheme, ...]:
    """Return the full catalog in display order, localized to ``lang``."""
    return tuple(_build_scheme(scheme_id, lang) for scheme_id in SCHEME_ORDER)


def get_scheme(scheme_id: SchemeId | str, lang: Language = Language.EN) -> Scheme:
    """Look up one scheme by id.

    Raises:
        UnknownSchemeError: If the id is not in the catalog.
    """
    try:
        key = SchemeId(scheme_id)
    except ValueError:
        raise UnknownSchemeError(scheme_id) from None
    for scheme in build_catalog(lang):
        if scheme.id == key:
            return scheme
    raise UnknownSchemeError(scheme_id)
