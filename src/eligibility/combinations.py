"""Combination generator — schemes that can be claimed together.

Enumerates every subset of size 2, then 3, then 4 of the eligible
schemes in lexicographic index order and aggregates their benefits.
The output is never re-sorted: a displayed prefix is a sample, not the
highest-value combinations.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from itertools import combinations

from src.i18n.messages import t
from src.models.enums import BenefitCategory, Language
from src.schemas.eligibility import CombinationBenefits, SchemeCombination
from src.schemes.catalog import Scheme
from src.schemes.definitions import CASH_OVERLAP

logger = logging.getLogger(__name__)

MIN_COMBINATION_SIZE = 2
MAX_COMBINATION_SIZE = 4

SUMMARY_SEPARATOR = " • "


def _labels_language(schemes: Sequence[Scheme], lang: Language | None) -> Language:
    if lang is not None:
        return lang
    return schemes[0].language if schemes else Language.EN


def aggregate_benefits(schemes: Sequence[Scheme], lang: Language | None = None) -> CombinationBenefits:
    """Sum cash, collect benefit tags and build the localized summary."""
    lang = _labels_language(schemes, lang)
    ids = {s.id for s in schemes}
    tags: set[BenefitCategory] = set()
    for s in schemes:
        tags |= s.benefit_tags

    total_cash = sum((s.annual_cash for s in schemes), Decimal("0"))
    first, second, overlap = CASH_OVERLAP
    if first in ids and second in ids:
        total_cash -= overlap

    has_insurance = BenefitCategory.INSURANCE in tags
    has_loan = BenefitCategory.LOAN in tags
    has_subsidy = BenefitCategory.SUBSIDY in tags
    has_training = BenefitCategory.TRAINING in tags

    labels: list[str] = []
    if total_cash > 0:
        labels.append(t("combo.cash", lang, amount=f"{int(total_cash):,}"))
    if has_insurance:
        labels.append(t("combo.insurance", lang))
    if has_loan:
        labels.append(t("combo.loan", lang))
    if has_subsidy:
        labels.append(t("combo.subsidy", lang))
    if has_training:
        labels.append(t("combo.seeds_training", lang))

    return CombinationBenefits(
        total_cash=total_cash,
        has_insurance=has_insurance,
        has_loan=has_loan,
        has_subsidy=has_subsidy,
        has_seeds=has_training,
        has_training=has_training,
        benefits=labels,
        summary=SUMMARY_SEPARATOR.join(labels),
        description=t("combo.description", lang, count=len(labels), benefits=", ".join(labels)),
    )


def generate_combinations(
    eligible: Sequence[Scheme],
    lang: Language | None = None,
) -> list[SchemeCombination]:
    """All 2-, 3- and 4-scheme subsets of ``eligible``, in generation order.

    Produces C(N,2) + C(N,3) + C(N,4) entries for N eligible schemes.
    """
    lang = _labels_language(eligible, lang)
    result: list[SchemeCombination] = []
    for size in range(MIN_COMBINATION_SIZE, MAX_COMBINATION_SIZE + 1):
        for combo in combinations(eligible, size):
            result.append(SchemeCombination(
                scheme_ids=[s.id for s in combo],
                scheme_names=[s.name for s in combo],
                benefits=aggregate_benefits(combo, lang),
            ))

    logger.debug("Generated %d combinations from %d eligible schemes", len(result), len(eligible))
    return result


def preview(combos: Sequence[SchemeCombination], limit: int) -> list[SchemeCombination]:
    """First ``limit`` combinations in generation order."""
    return list(combos[:max(0, limit)])
