"""Retailer logistics — processor factory catalog."""

from src.logistics.processors import (
    PROCESSOR_FACTORIES,
    all_processors,
    default_retailer_location,
    get_processor,
)

__all__ = [
    "PROCESSOR_FACTORIES",
    "all_processors",
    "default_retailer_location",
    "get_processor",
]
