"""Localized message bundles (English and Odia)."""

from src.i18n.messages import MESSAGES, t

__all__ = ["MESSAGES", "t"]
