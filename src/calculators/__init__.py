"""Calculators — great-circle distance, logistics cost and profit projection."""

from src.calculators.distance import haversine_km
from src.calculators.logistics import (
    calculate_logistics_cost,
    calculate_profit_projection,
    delivery_days_for,
    processors_within_radius,
    project_logistics,
    rank_projections,
    storage_days_for,
)

__all__ = [
    "haversine_km",
    "calculate_logistics_cost",
    "calculate_profit_projection",
    "processors_within_radius",
    "project_logistics",
    "rank_projections",
    "storage_days_for",
    "delivery_days_for",
]
