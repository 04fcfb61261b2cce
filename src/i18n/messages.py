"""Localized message bundles for reasons, warnings and combination labels.

Every key maps to one template per supported language. Templates use
``str.format`` placeholders; callers pass the values as keyword arguments.
"""

from __future__ import annotations

import logging
from typing import Final

from src.models.enums import Language

logger = logging.getLogger(__name__)

_EN = Language.EN
_OR = Language.OR

MESSAGES: Final[dict[str, dict[Language, str]]] = {
    # ── Eligibility reasons ─────────────────────────────────────────────
    "reason.registered_farmer": {
        _EN: "Must be a registered farmer",
        _OR: "ଏକ ପଞ୍ଜୀକୃତ କୃଷକ ହେବା ଆବଶ୍ୟକ",
    },
    "reason.in_cluster": {
        _EN: "Must be in a Value Chain Cluster",
        _OR: "ଏକ ମୂଲ୍ୟ ଶୃଙ୍ଖଳା କ୍ଲଷ୍ଟରରେ ଥିବା ଆବଶ୍ୟକ",
    },
    "reason.fpo_member": {
        _EN: "Must be a member of FPO/Cooperative",
        _OR: "FPO/ସହକାରିତାର ସଦସ୍ୟ ହେବା ଆବଶ୍ୟକ",
    },
    "reason.kalia_farmer_type": {
        _EN: "Only for Small/Marginal farmers, sharecroppers, or landless households",
        _OR: "କେବଳ ଛୋଟ/ସୀମାନ୍ତ କୃଷକ, ବଟାଇଦାର, କିମ୍ବା ଭୂମିହୀନ ପରିବାର ପାଇଁ",
    },
    "reason.land_or_fpo": {
        _EN: "Must have land or be an FPO member",
        _OR: "ଜମି ରହିବା କିମ୍ବା FPO ସଦସ୍ୟ ହେବା ଆବଶ୍ୟକ",
    },
    "reason.investment_capacity": {
        _EN: "Need ability to invest remaining portion (bank loan or sufficient land)",
        _OR: "ଅବଶିଷ୍ଟ ଅଂଶରେ ବିନିଯୋଗ କରିବାର ସାମର୍ଥ୍ୟ ଆବଶ୍ୟକ (ବ୍ୟାଙ୍କ ଋଣ କିମ୍ବା ଯଥେଷ୍ଟ ଜମି)",
    },
    "reason.portal_registration": {
        _EN: "Must be registered on Go-Sugam or Agrisnet portal",
        _OR: "Go-Sugam କିମ୍ବା Agrisnet ପୋର୍ଟାଲରେ ପଞ୍ଜୀକୃତ ହେବା ଆବଶ୍ୟକ",
    },
    "reason.rice_fallow": {
        _EN: "Must have rice-fallow land after Kharif harvest",
        _OR: "ଖରିଫ୍ ଅମଳ ପରେ ଧାନ-ପର୍ତ୍ତି ଜମି ରହିବା ଆବଶ୍ୟକ",
    },
    "reason.cultivable_land": {
        _EN: "Must possess cultivable land",
        _OR: "ଚାଷଯୋଗ୍ୟ ଜମିର ମାଲିକାନା ଥିବା ଆବଶ୍ୟକ",
    },
    "reason.aif_applicant": {
        _EN: "Must be a farmer, FPO, PACS, or Agri-entrepreneur",
        _OR: "କୃଷକ, FPO, PACS, କିମ୍ବା କୃଷି-ଉଦ୍ୟୋଗୀ ହେବା ଆବଶ୍ୟକ",
    },
    # ── Land-size warnings ──────────────────────────────────────────────
    "land.max_exceeded": {
        _EN: "{type_label} farmers can have maximum {max_size} {unit}",
        _OR: "{type_label} କୃଷକମାନଙ୍କର ସର୍ବାଧିକ {max_size} {unit} ହୋଇପାରେ",
    },
    "land.max_exceeded_generic": {
        _EN: "Maximum {max_size} {unit} allowed",
        _OR: "ସର୍ବାଧିକ {max_size} {unit} ଅନୁମୋଦିତ",
    },
    "land.large_minimum": {
        _EN: "Large farmers must have more than 2.5 acres",
        _OR: "ବଡ଼ କୃଷକମାନଙ୍କର ୨.୫ ଏକରରୁ ଅଧିକ ଜମି ରହିବା ଆବଶ୍ୟକ",
    },
    "land.landless_zero": {
        _EN: "Landless farmers should have 0 acres",
        _OR: "ଭୂମିହୀନ କୃଷକମାନଙ୍କର ୦ ଏକର ଜମି ରହିବା ଆବଶ୍ୟକ",
    },
    "land.unit_singular": {_EN: "acre", _OR: "ଏକର"},
    "land.unit_plural": {_EN: "acres", _OR: "ଏକର"},
    "land.type_marginal": {_EN: "Marginal", _OR: "ସୀମାନ୍ତ"},
    "land.type_small": {_EN: "Small", _OR: "ଛୋଟ"},
    "land.type_large": {_EN: "Large", _OR: "ବଡ଼"},
    "land.hint_marginal": {_EN: "Marginal farmers have < 1 acre", _OR: "ସୀମାନ୍ତ କୃଷକମାନଙ୍କର < ୧ ଏକର"},
    "land.hint_small": {_EN: "Small farmers have < 2.5 acres", _OR: "ଛୋଟ କୃଷକମାନଙ୍କର < ୨.୫ ଏକର"},
    "land.hint_large": {_EN: "Large farmers have > 2.5 acres", _OR: "ବଡ଼ କୃଷକମାନଙ୍କର > ୨.୫ ଏକର"},
    "land.hint_landless": {_EN: "Landless farmers have 0 acres", _OR: "ଭୂମିହୀନ କୃଷକମାନଙ୍କର ୦ ଏକର"},
    "land.hint_sharecropper": {
        _EN: "Sharecroppers can have varying land sizes",
        _OR: "ବଟାଇଦାରମାନଙ୍କର ବିଭିନ୍ନ ଜମିର ଆକାର ହୋଇପାରେ",
    },
    # ── Combination benefit labels ──────────────────────────────────────
    "combo.cash": {
        _EN: "₹{amount}/year cash support",
        _OR: "₹{amount}/year cash support",
    },
    "combo.insurance": {_EN: "Insurance coverage", _OR: "ବୀମା ଆବରଣ"},
    "combo.loan": {_EN: "Interest-free/low-interest loans", _OR: "ସୁଦ-ମୁକ୍ତ/ନିମ୍ନ-ସୁଦ ଋଣ"},
    "combo.subsidy": {_EN: "Equipment/machinery subsidies", _OR: "ଉପକରଣ/ଯନ୍ତ୍ରପାତି ସବସିଡି"},
    "combo.seeds_training": {_EN: "Free seeds & training", _OR: "ମାଗଣା ବିହନ ଏବଂ ପ୍ରଶିକ୍ଷଣ"},
    "combo.description": {
        _EN: "This combination provides {count} key benefits: {benefits}.",
        _OR: "ଏହି ସଂଯୋଜନା {count} ମୁଖ୍ୟ ଲାଭ ପ୍ରଦାନ କରେ: {benefits} |",
    },
}


def t(key: str, lang: Language, **params: object) -> str:
    """Render the message ``key`` in ``lang``.

    Falls back to English when a bundle lacks the language.

    Raises:
        KeyError: If ``key`` is not a known message.
    """
    bundle = MESSAGES[key]
    template = bundle.get(lang)
    if template is None:
        logger.warning("Message %s has no %s translation, using English", key, lang.value)
        template = bundle[Language.EN]
    return template.format(**params) if params else template
