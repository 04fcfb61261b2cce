"""Scheme catalog — definitions, benefit tags and localized content."""

from src.schemes.catalog import Scheme, UnknownSchemeError, build_catalog, get_scheme
from src.schemes.definitions import ANNUAL_CASH, BENEFIT_TAGS, SCHEME_ORDER

__all__ = [
    "Scheme",
    "UnknownSchemeError",
    "build_catalog",
    "get_scheme",
    "ANNUAL_CASH",
    "BENEFIT_TAGS",
    "SCHEME_ORDER",
]
