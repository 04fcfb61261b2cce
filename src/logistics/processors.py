"""Processor factory catalog (oilseed processing units in Odisha)."""

from __future__ import annotations

from decimal import Decimal
from typing import Final

from src.config import settings
from src.schemas.calculators import GeoPoint, PriceRange, ProcessorFactory


def _price(low: str, high: str) -> PriceRange:
    return PriceRange(min=Decimal(low), max=Decimal(high))


PROCESSOR_FACTORIES: Final[tuple[ProcessorFactory, ...]] = (
    ProcessorFactory(
        id="proc_factory_1",
        name="Odisha Oil Processing Unit - Bhubaneswar",
        location=GeoPoint(lat=20.2961, lng=85.8245),
        address="Industrial Area, Bhubaneswar, Odisha - 751013",
        contact_info="+91-674-2567890",
        crops_processed=("Groundnut", "Mustard", "Soybean", "Sunflower"),
        processing_capacity=500,
        price_range=_price("6500", "7200"),
        payment_terms="Bank transfer, 15 days credit for bulk orders",
        facilities=("Bulk Purchase", "Quality Testing", "Direct Processing", "Storage", "Cold Storage"),
        rating=4.7,
        description="Large processing unit offering premium prices for quality produce, bulk purchase preferred",
    ),
    ProcessorFactory(
        id="proc_factory_2",
        name="Cuttack Oil Mills",
        location=GeoPoint(lat=20.4625, lng=85.8828),
        address="Cuttack Industrial Estate, Odisha - 753001",
        contact_info="+91-671-2345678",
        crops_processed=("Groundnut", "Mustard", "Soybean"),
        processing_capacity=350,
        price_range=_price("6400", "7100"),
        payment_terms="Bank transfer, 10 days credit",
        facilities=("Bulk Purchase", "Quality Testing", "Processing", "Storage"),
        rating=4.5,
        description="Established processor with good reputation and fair pricing",
    ),
    ProcessorFactory(
        id="proc_factory_3",
        name="Ganjam Oil Processing Plant",
        location=GeoPoint(lat=19.3144, lng=85.0500),
        address="Berhampur, Ganjam, Odisha - 760001",
        contact_info="+91-680-2234567",
        crops_processed=("Groundnut", "Mustard", "Sesame"),
        processing_capacity=280,
        price_range=_price("6350", "7050"),
        payment_terms="Bank transfer, 12 days credit",
        facilities=("Bulk Purchase", "Quality Testing", "Storage"),
        rating=4.4,
        description="Regional processor with good logistics network",
    ),
    ProcessorFactory(
        id="proc_factory_4",
        name="Sambalpur Oil Processing Center",
        location=GeoPoint(lat=21.4700, lng=83.9700),
        address="Industrial Area, Sambalpur, Odisha - 768001",
        contact_info="+91-663-2456789",
        crops_processed=("Groundnut", "Soybean", "Sunflower"),
        processing_capacity=400,
        price_range=_price("6450", "7150"),
        payment_terms="Bank transfer, 14 days credit",
        facilities=("Bulk Purchase", "Quality Testing", "Processing", "Storage", "Packaging"),
        rating=4.6,
        description="Well-equipped processing center with modern facilities",
    ),
    ProcessorFactory(
        id="proc_factory_5",
        name="Bhadrak Oil Extraction Unit",
        location=GeoPoint(lat=21.0544, lng=86.5014),
        address="Bhadrak Industrial Zone, Odisha - 756100",
        contact_info="+91-6784-223456",
        crops_processed=("Mustard", "Groundnut", "Sesame"),
        processing_capacity=320,
        price_range=_price("6300", "7000"),
        payment_terms="Bank transfer, 10 days credit",
        facilities=("Bulk Purchase", "Quality Testing", "Processing"),
        rating=4.3,
        description="Efficient processing unit with competitive pricing",
    ),
    ProcessorFactory(
        id="proc_factory_6",
        name="Jajpur Oil Mills",
        location=GeoPoint(lat=20.8625, lng=86.1828),
        address="Jajpur Road, Odisha - 755019",
        contact_info="+91-6728-234567",
        crops_processed=("Groundnut", "Mustard", "Soybean"),
        processing_capacity=250,
        price_range=_price("6400", "7100"),
        payment_terms="Bank transfer, 12 days credit",
        facilities=("Bulk Purchase", "Quality Testing", "Storage"),
        rating=4.2,
        description="Local processor with good quality standards",
    ),
)


def default_retailer_location() -> GeoPoint:
    """Configured retailer location (Bhubaneswar unless overridden)."""
    return GeoPoint(lat=settings.logistics.retailer_lat, lng=settings.logistics.retailer_lng)


def all_processors() -> tuple[ProcessorFactory, ...]:
    return PROCESSOR_FACTORIES


def get_processor(processor_id: str) -> ProcessorFactory | None:
    """Catalog lookup; None when the id is unknown."""
    for processor in PROCESSOR_FACTORIES:
        if processor.id == processor_id:
            return processor
    return None
