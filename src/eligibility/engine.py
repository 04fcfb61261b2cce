"""Eligibility engine — evaluates the scheme catalog against a farmer profile.

Pure Python orchestrator. No caching, no I/O: the catalog is small and
every profile edit simply re-runs the pipeline
(land-size normalization → rules → combinations).
"""

from __future__ import annotations

import logging

from src.config import settings
from src.eligibility.combinations import generate_combinations, preview
from src.eligibility.land_size import normalize_land_size
from src.models.enums import FilterMode, Language
from src.schemas.eligibility import EligibilityResult, SchemeEvaluation, SchemeExplorerResult
from src.schemas.profile import FarmerProfile
from src.schemes.catalog import Scheme, build_catalog

logger = logging.getLogger(__name__)


def _language(lang: Language | None) -> Language:
    return lang if lang is not None else settings.schemes.default_language


def _bounded(profile: FarmerProfile, lang: Language) -> FarmerProfile:
    """Profile with the land-size bounds applied, so every entry point sees the same acreage."""
    return normalize_land_size(profile, lang).profile


def evaluate(scheme: Scheme, profile: FarmerProfile) -> EligibilityResult:
    """Run one scheme's rule; the reason is in the scheme's catalog language."""
    return scheme.check_eligibility(_bounded(profile, scheme.language))


def evaluate_all(profile: FarmerProfile, lang: Language | None = None) -> list[SchemeEvaluation]:
    """Evaluate every scheme, in catalog order."""
    lang = _language(lang)
    profile = _bounded(profile, lang)
    return [
        SchemeEvaluation(scheme_id=scheme.id, scheme_name=scheme.name, result=scheme.check_eligibility(profile))
        for scheme in build_catalog(lang)
    ]


def eligible_schemes(profile: FarmerProfile, lang: Language | None = None) -> list[Scheme]:
    """Schemes the profile qualifies for, in catalog order."""
    lang = _language(lang)
    profile = _bounded(profile, lang)
    return [s for s in build_catalog(lang) if s.check_eligibility(profile).eligible]


def filter_schemes(
    profile: FarmerProfile,
    mode: FilterMode = FilterMode.ALL,
    lang: Language | None = None,
) -> list[Scheme]:
    """Schemes to display for the explorer's all/eligible filter."""
    if mode == FilterMode.ELIGIBLE:
        return eligible_schemes(profile, lang)
    return list(build_catalog(_language(lang)))


def explore(profile: FarmerProfile, lang: Language | None = None) -> SchemeExplorerResult:
    """Full explorer pass for one profile snapshot.

    Normalizes the land size first and reports the warning alongside the results.
    """
    lang = _language(lang)
    check = normalize_land_size(profile, lang)
    profile = check.profile

    catalog = build_catalog(lang)
    evaluations: list[SchemeEvaluation] = []
    eligible: list[Scheme] = []
    for scheme in catalog:
        result = scheme.check_eligibility(profile)
        evaluations.append(SchemeEvaluation(scheme_id=scheme.id, scheme_name=scheme.name, result=result))
        if result.eligible:
            eligible.append(scheme)

    combos = generate_combinations(eligible, lang)

    logger.info(
        "Evaluated %d schemes: %d eligible, %d combinations (farmer_type=%s)",
        len(catalog), len(eligible), len(combos), profile.farmer_type.value or "unset",
    )

    return SchemeExplorerResult(
        profile=profile,
        land_size_warning=check.warning,
        evaluations=evaluations,
        eligible_ids=[s.id for s in eligible],
        combinations=combos,
        preview=preview(combos, settings.schemes.combination_preview_limit),
    )
