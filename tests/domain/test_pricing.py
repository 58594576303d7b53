"""Unit tests for the unit-price rule."""

import itertools

import pytest

from bakery.domain.model.catalog import CatalogRecord, Flavor, FlavorLevel, Size
from bakery.domain.model.value_objects import Money
from bakery.domain.service.pricing import unit_price


def _record(base=None, size=None, level=None, with_flavor=True) -> CatalogRecord:
    return CatalogRecord(
        id="1",
        name="Cake",
        base_price=Money.of(base) if base is not None else None,
        size=Size("M", Money.of(size) if size is not None else None),
        flavor=(
            Flavor("Choc", FlavorLevel("Gourmet", Money.of(level) if level is not None else None))
            if with_flavor
            else None
        ),
    )


class TestUnitPrice:

    def test_sum_of_all_parts(self):
        assert unit_price(_record("40.00", "15.00", "12.00")) == Money.of("67.00")

    def test_bare_record_is_zero(self):
        assert unit_price(CatalogRecord(id="1", name="Free sample")) == Money.zero()

    def test_missing_flavor(self):
        assert unit_price(_record("10.00", "2.50", with_flavor=False)) == Money.of("12.50")

    def test_flavor_without_level(self):
        record = CatalogRecord(id="1", name="Cake", base_price=Money.of("10"), flavor=Flavor("Vanilla"))
        assert unit_price(record) == Money.of("10")

    def test_no_binary_float_drift(self):
        assert unit_price(_record("0.10", "0.20", "0.00")) == Money.of("0.30")

    @pytest.mark.parametrize(
        "base,size,level",
        list(itertools.product([None, "0", "3.10"], [None, "0", "1.25"], [None, "0", "7.05"])),
    )
    def test_equals_sum_with_missing_as_zero(self, base, size, level):
        expected = Money.of(base or "0") + Money.of(size or "0") + Money.of(level or "0")
        assert unit_price(_record(base, size, level)) == expected

    def test_monotonic_in_each_component(self):
        low = unit_price(_record("10", "1", "1"))
        assert unit_price(_record("11", "1", "1")) >= low
        assert unit_price(_record("10", "2", "1")) >= low
        assert unit_price(_record("10", "1", "2")) >= low
