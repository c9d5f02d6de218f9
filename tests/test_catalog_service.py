import pytest

from pricing_admin.store import CatalogStore, SeedData, Product, PriceTier


def test_list_products_preserves_insertion_order(catalog):
    assert [p.id for p in catalog.list_products()] == ["p1", "p2", "p3", "p4"]


def test_list_products_filters_are_case_insensitive_substrings(catalog):
    assert [p.id for p in catalog.list_products(name="CUP")] == ["p1", "p3"]
    assert [p.id for p in catalog.list_products(category="bag")] == ["p2"]
    assert [p.id for p in catalog.list_products(name="hot", category="cups")] == ["p1"]
    assert catalog.list_products(name="napkin") == []


def test_list_categories_first_seen_order(catalog):
    assert catalog.list_categories() == ["Cups", "Bags", "Accessories"]


def test_find_product_by_id(catalog):
    assert catalog.find_product_by_id("p2").name == "Kraft Paper Bag"
    assert catalog.find_product_by_id("nope") is None


def test_list_variants_by_product(catalog):
    assert [v.id for v in catalog.list_variants_by_product("p1")] == ["v1", "v2"]


def test_list_variants_for_product_without_variants_is_empty(catalog):
    assert catalog.list_variants_by_product("p4") == []
    assert catalog.list_variants_by_product("unknown") == []


def test_find_variant_by_id_is_idempotent(catalog):
    first = catalog.find_variant_by_id("v2")
    second = catalog.find_variant_by_id("v2")
    assert first == second
    assert first.to_dict() == second.to_dict()
    assert first.options == {"size": "12oz", "lid": None}


def test_price_tiers_sorted_and_scoped_to_variant(catalog, store):
    for variant in store.variants:
        listed = catalog.list_price_tiers_by_variant(variant.id)
        quantities = [t.min_qty for t in listed]
        assert quantities == sorted(quantities)
        expected = {t.id for t in store.price_tiers if t.variant_id == variant.id}
        assert {t.id for t in listed} == expected

    assert [t.id for t in catalog.list_price_tiers_by_variant("v1")] == ["t2", "t1", "t4"]
    assert catalog.list_price_tiers_by_variant("v4") == []


def test_create_price_tier_allocates_fresh_id(catalog):
    tier = catalog.create_price_tier("v4", 10, 1.5)
    assert tier.id not in {"t1", "t2", "t3", "t4"}
    assert catalog.find_price_tier_by_id(tier.id) == tier
    assert catalog.list_price_tiers_by_variant("v4") == [tier]


def test_create_price_tier_does_not_check_uniqueness(catalog):
    catalog.create_price_tier("v1", 500, 0.27)
    assert [t.min_qty for t in catalog.list_price_tiers_by_variant("v1")].count(500) == 2


def test_update_price_tier_merges_fields(catalog):
    updated = catalog.update_price_tier("t1", {"price": 0.25})
    assert updated.min_qty == 500
    assert updated.price == 0.25
    assert catalog.find_price_tier_by_id("t1").price == 0.25


def test_update_unknown_price_tier_returns_none(catalog, store):
    before = [t.to_dict() for t in store.price_tiers]
    assert catalog.update_price_tier("missing", {"price": 9.0}) is None
    assert [t.to_dict() for t in store.price_tiers] == before


def test_delete_price_tier_twice(catalog):
    assert catalog.delete_price_tier("t3") is True
    assert catalog.delete_price_tier("t3") is False
    assert catalog.list_price_tiers_by_variant("v2") == []


def test_deleted_tier_ids_are_never_reused(catalog):
    created = [catalog.create_price_tier("v4", qty, 1.0) for qty in (1, 2, 3)]
    for tier in created:
        catalog.delete_price_tier(tier.id)
    again = catalog.create_price_tier("v4", 4, 1.0)
    assert again.id not in {t.id for t in created}


def test_tier_ids_skip_seeded_ids():
    store = CatalogStore(SeedData(
        products=[Product("p1", "Cup", "Cups")],
        price_tiers=[PriceTier("t1", "v1", 1, 1.0), PriceTier("t2", "v1", 2, 0.9)],
    ))
    assert store.next_price_tier_id() == "t3"


def test_resolve_unit_price_picks_highest_breakpoint_reached(catalog):
    assert catalog.resolve_unit_price("v1", 1).id == "t2"
    assert catalog.resolve_unit_price("v1", 499).id == "t2"
    assert catalog.resolve_unit_price("v1", 500).id == "t1"
    assert catalog.resolve_unit_price("v1", 100000).id == "t4"
    assert catalog.resolve_unit_price("v2", 99) is None


def test_initialize_replaces_contents(store):
    store.initialize(SeedData(products=[Product("p9", "Lid", "Lids")]))
    assert [p.id for p in store.products] == ["p9"]
    assert store.variants == []
    assert store.price_tiers == []


def test_variants_are_hashable_with_read_only_options(catalog):
    variant = catalog.find_variant_by_id("v1")
    assert hash(variant) == hash(catalog.find_variant_by_id("v1"))
    assert len({variant, catalog.find_variant_by_id("v2")}) == 2
    with pytest.raises(TypeError):
        variant.options["size"] = "20oz"
    assert catalog.find_variant_by_id("v1").options["size"] == "8oz"
