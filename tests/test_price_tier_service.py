import dataclasses
import threading

import pytest

from pricing_admin.services.errors import (
    MissingFieldError,
    InvalidMinQtyError,
    InvalidPriceError,
    InvalidQuantityError,
    DuplicateMinQtyError,
    NotFoundError,
    ValidationError,
)


def _snapshot(store):
    return [t.to_dict() for t in store.price_tiers]


def test_create_tier_appears_in_listing(tiers):
    tier = tiers.create("v2", 1000, 0.22)
    assert tier.min_qty == 1000
    assert tier.price == 0.22
    listed = tiers.list_for_variant("v2")
    assert tier in listed
    assert [t.min_qty for t in listed] == [100, 1000]


def test_create_duplicate_min_qty_rejected_without_mutation(tiers, store):
    before = _snapshot(store)
    with pytest.raises(DuplicateMinQtyError) as exc_info:
        tiers.create("v1", 500, 0.30)
    assert exc_info.value.code == "duplicate_min_qty"
    assert _snapshot(store) == before


def test_duplicate_min_qty_is_scoped_per_variant(tiers):
    tier = tiers.create("v2", 500, 0.33)
    assert tier.variant_id == "v2"


@pytest.mark.parametrize("min_qty", [0, -5, 1.5, "10", True, float("nan")])
def test_create_rejects_invalid_min_qty(tiers, store, min_qty):
    before = _snapshot(store)
    with pytest.raises(InvalidMinQtyError):
        tiers.create("v4", min_qty, 1.0)
    assert _snapshot(store) == before


def test_create_accepts_integral_float_min_qty(tiers):
    tier = tiers.create("v4", 25.0, 1.0)
    assert tier.min_qty == 25
    assert isinstance(tier.min_qty, int)


@pytest.mark.parametrize("price", [0, -0.01, "1.00", False, float("inf"), 10 ** 400])
def test_create_rejects_invalid_price(tiers, price):
    with pytest.raises(InvalidPriceError):
        tiers.create("v4", 10, price)


def test_create_reports_all_missing_fields(tiers):
    with pytest.raises(MissingFieldError) as exc_info:
        tiers.create(None, None, 1.0)
    assert exc_info.value.fields == ("variantId", "minQty")
    assert exc_info.value.code == "missing_field"


def test_validation_errors_are_distinct(tiers):
    with pytest.raises(ValidationError) as range_error:
        tiers.create("v1", 0, 1.0)
    with pytest.raises(ValidationError) as duplicate_error:
        tiers.create("v1", 1, 1.0)
    assert range_error.value.code != duplicate_error.value.code


def test_update_supplied_fields_only(tiers):
    updated = tiers.update("t1", {"price": 0.26})
    assert updated.min_qty == 500
    assert updated.price == 0.26

    updated = tiers.update("t1", {"min_qty": 750})
    assert updated.min_qty == 750
    assert updated.price == 0.26
    assert [t.min_qty for t in tiers.list_for_variant("v1")] == [1, 750, 5000]


def test_update_unknown_tier_not_found(tiers, store):
    before = _snapshot(store)
    with pytest.raises(NotFoundError) as exc_info:
        tiers.update("t999", {"price": 1.0})
    assert exc_info.value.status_code == 404
    assert _snapshot(store) == before


def test_update_requires_id(tiers):
    with pytest.raises(MissingFieldError):
        tiers.update(None, {"price": 1.0})
    with pytest.raises(MissingFieldError):
        tiers.update("", {"price": 1.0})


def test_update_validates_supplied_fields(tiers, store):
    before = _snapshot(store)
    with pytest.raises(InvalidMinQtyError):
        tiers.update("t1", {"min_qty": 0})
    with pytest.raises(InvalidPriceError):
        tiers.update("t1", {"price": 0})
    with pytest.raises(InvalidPriceError):
        tiers.update("t1", {"price": None})
    assert _snapshot(store) == before


def test_update_duplicate_check_excludes_edited_tier(tiers):
    # Re-saving a tier with its own minQty is allowed
    assert tiers.update("t1", {"min_qty": 500, "price": 0.27}).price == 0.27
    with pytest.raises(DuplicateMinQtyError):
        tiers.update("t1", {"min_qty": 5000})


def test_delete_twice(tiers):
    tiers.delete("t2")
    with pytest.raises(NotFoundError):
        tiers.delete("t2")


def test_delete_requires_id(tiers):
    with pytest.raises(MissingFieldError):
        tiers.delete(None)


def test_list_requires_variant_id_but_allows_empty(tiers):
    with pytest.raises(MissingFieldError):
        tiers.list_for_variant(None)
    assert tiers.list_for_variant("v4") == []
    assert tiers.list_for_variant("no-such-variant") == []


def test_quote(tiers):
    quote = tiers.quote("v1", 600)
    assert quote.tier.id == "t1"
    assert quote.unit_price == 0.28
    assert quote.extended_price == 168.0

    below = tiers.quote("v2", "50")
    assert below.tier is None
    assert below.unit_price is None
    assert below.to_dict()["extendedPrice"] is None


def test_quote_errors(tiers):
    with pytest.raises(MissingFieldError):
        tiers.quote(None, 1)
    with pytest.raises(MissingFieldError):
        tiers.quote("v1", None)
    with pytest.raises(NotFoundError):
        tiers.quote("nope", 1)
    with pytest.raises(InvalidQuantityError):
        tiers.quote("v1", "ten")
    with pytest.raises(InvalidQuantityError):
        tiers.quote("v1", 0)


def test_concurrent_creates_keep_min_qty_unique(tiers):
    results = []

    def worker():
        try:
            results.append(tiers.create("v4", 42, 1.0))
        except DuplicateMinQtyError as e:
            results.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    created = [r for r in results if not isinstance(r, Exception)]
    assert len(created) == 1
    assert [t.min_qty for t in tiers.list_for_variant("v4")] == [42]


def test_returned_tiers_cannot_be_edited_in_place(tiers):
    tier = tiers.create("v4", 10, 1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        tier.min_qty = 1
    with pytest.raises(DuplicateMinQtyError):
        tiers.create("v4", 10, 2.0)
    assert [t.min_qty for t in tiers.list_for_variant("v4")] == [10]
