"""Retailer logistics cost and profit-projection calculator.

Pure Python, Decimal arithmetic. Implements:
- Logistics cost: round-trip transport + handling + storage
- Profit projection for one processor, crop and quantity
- Ranking of nearby processors by projected profit

Business rules:
- purchase price = midpoint of the processor's price range, rounded
- selling price = purchase price × (1 + 15% markup), rounded
- transport = distance × quantity × rate × 2 (truck ₹2.5, tempo ₹3 per km per quintal)
- handling = ₹50/quintal; storage = ₹30/quintal/day for 3–5 days (1 day per 100 km)
- profit is floored at zero and margin capped at 20% — losses are not reported
- delivery = 1 day per 150 km, between 1 and 7 days
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from src.calculators.distance import haversine_km
from src.config import settings
from src.logistics.processors import all_processors, default_retailer_location, get_processor
from src.models.enums import VehicleType
from src.schemas.calculators import GeoPoint, LogisticsCost, LogisticsProjection, ProcessorFactory

logger = logging.getLogger(__name__)

DistanceFn = Callable[[GeoPoint, GeoPoint], float]

_ZERO = Decimal("0")
_MIN_STORAGE_DAYS = 3
_MAX_STORAGE_DAYS = 5
_KM_PER_STORAGE_DAY = 100


def _dec(value: Decimal | float | int | str) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _to_rupee(value: Decimal) -> Decimal:
    """Round to the nearest rupee, halves up."""
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def _one_decimal(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _rate_for(vehicle: VehicleType) -> Decimal:
    cfg = settings.logistics
    return cfg.truck_rate_per_km_quintal if vehicle == VehicleType.TRUCK else cfg.tempo_rate_per_km_quintal


def storage_days_for(distance: Decimal) -> int:
    """Storage days grow with distance: ceil(distance / 100), clamped to 3–5."""
    return min(_MAX_STORAGE_DAYS, max(_MIN_STORAGE_DAYS, math.ceil(distance / _KM_PER_STORAGE_DAY)))


def delivery_days_for(distance: Decimal) -> int:
    """Delivery estimate: ceil(distance / 150), clamped to 1–7 days."""
    cfg = settings.logistics
    return min(cfg.max_delivery_days, max(1, math.ceil(distance / cfg.km_per_delivery_day)))


def calculate_logistics_cost(
    distance: Decimal,
    quantity: Decimal,
    vehicle: VehicleType = VehicleType.TRUCK,
) -> LogisticsCost:
    """Itemized cost of moving ``quantity`` quintals over ``distance`` km.

    Args:
        distance: One-way distance in km.
        quantity: Quantity in quintals.
        vehicle: Truck (bulk, cheaper) or tempo.

    Returns:
        LogisticsCost with each item rounded to the rupee.
    """
    cfg = settings.logistics
    distance = max(_ZERO, _dec(distance))
    quantity = max(_ZERO, _dec(quantity))

    transport = distance * quantity * _rate_for(vehicle) * 2
    handling = quantity * cfg.handling_cost_per_quintal
    days = storage_days_for(distance)
    storage = quantity * cfg.storage_cost_per_quintal_day * days

    return LogisticsCost(
        transport_cost=_to_rupee(transport),
        handling_cost=_to_rupee(handling),
        storage_cost=_to_rupee(storage),
        storage_days=days,
        total_cost=_to_rupee(transport + handling + storage),
    )


def project_logistics(
    processor: ProcessorFactory,
    crop: str,
    quantity: Decimal,
    reference: GeoPoint | None = None,
    vehicle: VehicleType = VehicleType.TRUCK,
    distance_fn: DistanceFn = haversine_km,
) -> LogisticsProjection:
    """Profit projection for buying ``quantity`` quintals of ``crop`` from ``processor``.

    A non-positive quantity yields a zero-valued projection (prices still
    filled in, delivery fixed at 1 day) rather than an error.
    """
    cfg = settings.logistics
    reference = reference or default_retailer_location()
    quantity = _dec(quantity)

    distance = max(_ZERO, _dec(distance_fn(reference, processor.location)))
    purchase_price = max(_ZERO, _to_rupee(processor.price_range.midpoint))
    selling_price = max(_ZERO, _to_rupee(purchase_price * (1 + cfg.retail_markup)))

    if quantity <= 0:
        return LogisticsProjection(
            processor_id=processor.id,
            processor_name=processor.name,
            crop_type=crop,
            quantity=_ZERO,
            purchase_price=purchase_price,
            selling_price=selling_price,
            distance=_one_decimal(distance),
            estimated_delivery_days=1,
        )

    logistics = calculate_logistics_cost(distance, quantity, vehicle)

    total_cost = quantity * purchase_price + logistics.total_cost
    revenue = quantity * selling_price
    profit = max(_ZERO, revenue - total_cost)
    if revenue > 0:
        margin = min(cfg.max_profit_margin_pct, max(_ZERO, profit / revenue * 100))
    else:
        margin = _ZERO

    return LogisticsProjection(
        processor_id=processor.id,
        processor_name=processor.name,
        crop_type=crop,
        quantity=quantity,
        purchase_price=purchase_price,
        selling_price=selling_price,
        distance=_one_decimal(distance),
        transport_cost=logistics.transport_cost,
        handling_cost=logistics.handling_cost,
        storage_cost=logistics.storage_cost,
        total_cost=_to_rupee(total_cost),
        revenue=_to_rupee(revenue),
        profit=_to_rupee(profit),
        profit_margin=_one_decimal(margin),
        estimated_delivery_days=delivery_days_for(distance),
    )


def calculate_profit_projection(
    processor_id: str,
    crop: str,
    quantity: Decimal,
    reference: GeoPoint | None = None,
    vehicle: VehicleType = VehicleType.TRUCK,
    distance_fn: DistanceFn = haversine_km,
) -> LogisticsProjection | None:
    """Projection for a processor looked up by id; None when the id is unknown."""
    processor = get_processor(processor_id)
    if processor is None:
        logger.warning("Profit projection requested for unknown processor %s", processor_id)
        return None
    return project_logistics(processor, crop, quantity, reference, vehicle, distance_fn)


def processors_within_radius(
    reference: GeoPoint | None = None,
    radius_km: float | None = None,
    distance_fn: DistanceFn = haversine_km,
) -> list[ProcessorFactory]:
    """Processors within ``radius_km`` of ``reference``, nearest first, with distance set."""
    reference = reference or default_retailer_location()
    radius = Decimal(str(radius_km if radius_km is not None else settings.logistics.search_radius_km))

    nearby: list[ProcessorFactory] = []
    for processor in all_processors():
        distance = _dec(distance_fn(reference, processor.location))
        if distance <= radius:
            nearby.append(processor.model_copy(update={"distance": distance}))
    nearby.sort(key=lambda p: p.distance or _ZERO)
    return nearby


def rank_projections(
    crop: str,
    quantity: Decimal,
    reference: GeoPoint | None = None,
    vehicle: VehicleType = VehicleType.TRUCK,
    distance_fn: DistanceFn = haversine_km,
) -> list[LogisticsProjection]:
    """Projections for nearby processors handling ``crop``, highest profit first.

    Ties keep nearest-first order.
    """
    candidates = [
        p for p in processors_within_radius(reference, distance_fn=distance_fn)
        if p.processes(crop)
    ]
    projections = [
        project_logistics(p, crop, quantity, reference, vehicle, distance_fn)
        for p in candidates
    ]
    projections.sort(key=lambda p: p.profit, reverse=True)

    logger.debug(
        "Ranked %d processors for %s x %s quintals", len(projections), crop, quantity,
    )
    return projections
