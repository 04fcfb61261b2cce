"""Pydantic schemas for the retailer logistics calculator.

Pure data classes — no business logic. Used as inputs (processor
catalog, locations) and return types (costs, projections).
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class PriceRange(BaseModel):
    """Processor purchase price band, ₹ per quintal."""

    model_config = ConfigDict(frozen=True)

    min: Decimal
    max: Decimal

    @property
    def midpoint(self) -> Decimal:
        return (self.min + self.max) / 2


class ProcessorFactory(BaseModel):
    """A processing facility the retailer can buy from."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    location: GeoPoint
    address: str = ""
    contact_info: str = ""
    crops_processed: tuple[str, ...] = ()
    processing_capacity: int = 0       # MT per month
    price_range: PriceRange
    payment_terms: str = ""
    facilities: tuple[str, ...] = ()
    rating: float = 0.0
    description: str = ""
    distance: Decimal | None = None    # km from the reference location, set at query time

    def processes(self, crop: str) -> bool:
        return crop in self.crops_processed


class LogisticsCost(BaseModel):
    """Itemized logistics cost, each item rounded to the rupee."""

    transport_cost: Decimal            # round trip
    handling_cost: Decimal             # loading/unloading
    storage_cost: Decimal
    storage_days: int
    total_cost: Decimal


class LogisticsProjection(BaseModel):
    """Profit projection for buying ``quantity`` quintals from one processor."""

    processor_id: str
    processor_name: str
    crop_type: str
    quantity: Decimal                  # quintals
    purchase_price: Decimal            # ₹/quintal paid to the processor
    selling_price: Decimal             # ₹/quintal charged to customers
    distance: Decimal                  # km, 1 decimal
    transport_cost: Decimal = Field(default=Decimal("0"))
    handling_cost: Decimal = Field(default=Decimal("0"))
    storage_cost: Decimal = Field(default=Decimal("0"))
    total_cost: Decimal = Field(default=Decimal("0"))
    revenue: Decimal = Field(default=Decimal("0"))
    profit: Decimal = Field(default=Decimal("0"))         # floored at zero
    profit_margin: Decimal = Field(default=Decimal("0"))  # percent, capped at 20
    estimated_delivery_days: int = 1
