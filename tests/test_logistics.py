"""Tests for the retailer logistics calculator.

Most tests inject a fixed distance function so the arithmetic can be
checked by hand; a few exercise the real haversine distances between
the Odisha processors.
"""

from __future__ import annotations

import math
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.calculators import (
    calculate_logistics_cost,
    calculate_profit_projection,
    delivery_days_for,
    haversine_km,
    processors_within_radius,
    project_logistics,
    rank_projections,
    storage_days_for,
)
from src.calculators.distance import EARTH_RADIUS_KM
from src.config import settings
from src.logistics import all_processors, default_retailer_location, get_processor
from src.models.enums import VehicleType
from src.schemas.calculators import GeoPoint


def _fixed(km: float):
    return lambda a, b: km


@pytest.fixture()
def bhubaneswar():
    return get_processor("proc_factory_1")


class TestFixedDistanceProjection:
    """Bhubaneswar processor, 100 quintals of groundnut, 50 km by truck."""

    @pytest.fixture()
    def projection(self, bhubaneswar):
        return project_logistics(bhubaneswar, "Groundnut", Decimal("100"), distance_fn=_fixed(50.0))

    def test_prices(self, projection):
        assert projection.purchase_price == Decimal("6850")
        # 6850 × 1.15 = 7877.5 → rounds half up
        assert projection.selling_price == Decimal("7878")

    def test_cost_items(self, projection):
        assert projection.transport_cost == Decimal("25000")
        assert projection.handling_cost == Decimal("5000")
        assert projection.storage_cost == Decimal("9000")

    def test_totals(self, projection):
        assert projection.total_cost == Decimal("724000")
        assert projection.revenue == Decimal("787800")
        assert projection.profit == Decimal("63800")

    def test_margin_and_delivery(self, projection):
        assert projection.profit_margin == Decimal("8.1")
        assert projection.estimated_delivery_days == 1
        assert projection.distance == Decimal("50.0")

    def test_tempo_costs_more(self, bhubaneswar):
        tempo = project_logistics(
            bhubaneswar, "Groundnut", Decimal("100"),
            vehicle=VehicleType.TEMPO, distance_fn=_fixed(50.0),
        )
        assert tempo.transport_cost == Decimal("30000")
        assert tempo.profit == Decimal("58800")


class TestEdgeCases:
    def test_zero_quantity_gives_zero_projection(self, bhubaneswar):
        projection = project_logistics(bhubaneswar, "Groundnut", Decimal("0"), distance_fn=_fixed(50.0))
        assert projection.quantity == Decimal("0")
        assert projection.total_cost == Decimal("0")
        assert projection.revenue == Decimal("0")
        assert projection.profit == Decimal("0")
        assert projection.profit_margin == Decimal("0")
        assert projection.estimated_delivery_days == 1
        assert projection.purchase_price == Decimal("6850")

    def test_negative_quantity_treated_as_zero(self, bhubaneswar):
        projection = project_logistics(bhubaneswar, "Groundnut", Decimal("-5"), distance_fn=_fixed(50.0))
        assert projection.profit == Decimal("0")
        assert projection.transport_cost == Decimal("0")

    def test_loss_is_floored_at_zero(self, bhubaneswar):
        # 300 km: logistics ≈ ₹1640/quintal against a ₹1028 markup
        projection = project_logistics(bhubaneswar, "Groundnut", Decimal("100"), distance_fn=_fixed(300.0))
        assert projection.revenue < projection.total_cost
        assert projection.profit == Decimal("0")
        assert projection.profit_margin == Decimal("0")

    def test_margin_capped(self, bhubaneswar, monkeypatch):
        monkeypatch.setattr(settings.logistics, "retail_markup", Decimal("0.5"))
        projection = project_logistics(bhubaneswar, "Groundnut", Decimal("100"), distance_fn=_fixed(0.0))
        assert projection.profit > 0
        assert projection.profit_margin == Decimal("20.0")

    def test_unknown_processor_returns_none(self):
        assert calculate_profit_projection("no_such_factory", "Groundnut", Decimal("10")) is None

    def test_projection_by_id(self):
        projection = calculate_profit_projection(
            "proc_factory_1", "Groundnut", Decimal("100"), distance_fn=_fixed(50.0),
        )
        assert projection is not None
        assert projection.processor_name == "Odisha Oil Processing Unit - Bhubaneswar"
        assert projection.profit == Decimal("63800")

    @pytest.mark.parametrize("km", [0.0, 12.5, 80.0, 150.0, 299.9, 600.0])
    @pytest.mark.parametrize("qty", ["1", "10", "250"])
    def test_profit_and_margin_bounds(self, bhubaneswar, km, qty):
        projection = project_logistics(bhubaneswar, "Mustard", Decimal(qty), distance_fn=_fixed(km))
        assert projection.profit >= 0
        assert Decimal("0") <= projection.profit_margin <= Decimal("20")


class TestDayEstimates:
    @pytest.mark.parametrize("km, days", [
        ("0", 3),
        ("50", 3),
        ("250", 3),
        ("301", 4),
        ("450", 5),
        ("1000", 5),
    ])
    def test_storage_days(self, km, days):
        assert storage_days_for(Decimal(km)) == days

    @pytest.mark.parametrize("km, days", [
        ("0", 1),
        ("150", 1),
        ("151", 2),
        ("600", 4),
        ("5000", 7),
    ])
    def test_delivery_days(self, km, days):
        assert delivery_days_for(Decimal(km)) == days

    def test_logistics_cost_breakdown(self):
        cost = calculate_logistics_cost(Decimal("120"), Decimal("10"))
        assert cost.transport_cost == Decimal("6000")
        assert cost.handling_cost == Decimal("500")
        assert cost.storage_days == 3
        assert cost.storage_cost == Decimal("900")
        assert cost.total_cost == Decimal("7400")


class TestDistance:
    def test_same_point_is_zero(self):
        p = GeoPoint(lat=20.2961, lng=85.8245)
        assert haversine_km(p, p) == pytest.approx(0.0)

    def test_bhubaneswar_to_cuttack(self):
        cuttack = get_processor("proc_factory_2").location
        assert 19.0 < haversine_km(default_retailer_location(), cuttack) < 20.5

    def test_symmetric(self):
        a = get_processor("proc_factory_3").location
        b = get_processor("proc_factory_4").location
        assert haversine_km(a, b) == pytest.approx(haversine_km(b, a))

    def test_antipodal_points(self):
        p = GeoPoint(lat=20.2961, lng=85.8245)
        antipode = GeoPoint(lat=-20.2961, lng=-94.1755)
        assert haversine_km(p, antipode) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-6)

    def test_antipodal_retailer_finds_no_processor(self):
        antipode = GeoPoint(lat=-20.2961, lng=-94.1755)
        assert processors_within_radius(antipode) == []
        assert rank_projections("Groundnut", Decimal("100"), reference=antipode) == []

    @pytest.mark.parametrize("lat, lng", [(90.5, 85.0), (-91.0, 0.0), (20.0, 180.5), (20.0, -181.0)])
    def test_out_of_range_coordinates_rejected(self, lat, lng):
        with pytest.raises(ValidationError):
            GeoPoint(lat=lat, lng=lng)


class TestProcessorSearch:
    def test_catalog_size(self):
        assert len(all_processors()) == 6

    def test_unknown_id(self):
        assert get_processor("proc_factory_99") is None

    def test_all_within_default_radius_nearest_first(self):
        nearby = processors_within_radius()
        assert [p.id for p in nearby] == [
            "proc_factory_1",
            "proc_factory_2",
            "proc_factory_6",
            "proc_factory_5",
            "proc_factory_3",
            "proc_factory_4",
        ]
        assert nearby[0].distance == 0

    def test_radius_filter(self):
        nearby = processors_within_radius(radius_km=100)
        assert [p.id for p in nearby] == ["proc_factory_1", "proc_factory_2", "proc_factory_6"]

    def test_catalog_entries_unchanged(self):
        processors_within_radius()
        assert all(p.distance is None for p in all_processors())


class TestRanking:
    def test_sesame_ranked_by_profit(self):
        ranked = rank_projections("Sesame", Decimal("100"))
        assert [p.processor_id for p in ranked] == ["proc_factory_5", "proc_factory_3"]
        assert ranked[0].profit > ranked[1].profit

    def test_groundnut_sorted_descending(self):
        ranked = rank_projections("Groundnut", Decimal("100"))
        assert len(ranked) == 6
        profits = [p.profit for p in ranked]
        assert profits == sorted(profits, reverse=True)

    def test_unprocessed_crop(self):
        assert rank_projections("Rice", Decimal("100")) == []

    def test_far_away_retailer_finds_nothing(self):
        delhi = GeoPoint(lat=28.6139, lng=77.2090)
        assert rank_projections("Groundnut", Decimal("100"), reference=delhi) == []

    def test_ties_keep_nearest_first(self):
        ranked = rank_projections("Groundnut", Decimal("0"), distance_fn=_fixed(10.0))
        assert [p.processor_id for p in ranked] == [p.id for p in all_processors()]
