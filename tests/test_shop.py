import pytest

from treasurehunt.models.hunter import Hunter
from treasurehunt.shop import DEFAULT_CATALOG, Shop


def test_buy_deducts_full_cost():
    shop = Shop(markdown=0.5)
    hunter = Hunter("Ava", 10)

    assert shop.enter(hunter, "B", "rope") is True
    assert hunter.gold == 6
    assert hunter.has_item("Rope", hunter.kit)
    assert "Rope" in shop.latest_news


def test_buy_twice_or_without_gold_fails_with_message():
    shop = Shop()
    hunter = Hunter("Ava", 10)
    shop.enter(hunter, "buy", "Rope")

    assert shop.enter(hunter, "buy", "Rope") is False
    assert "already got one" in shop.latest_news
    assert shop.enter(hunter, "B", "Boat") is False
    assert hunter.gold == 6


def test_sell_pays_marked_down_price():
    shop = Shop(markdown=0.5)
    hunter = Hunter("Ava", 20)
    shop.enter(hunter, "B", "Horse")

    assert shop.enter(hunter, "S", "Horse") is True
    assert hunter.gold == 8 + 6
    assert not hunter.has_item("Horse", hunter.kit)
    assert "6 gold" in shop.latest_news


def test_sell_for_nothing_is_refused():
    # int(2 * 0.25) == 0, and the hunter won't give items away
    shop = Shop(markdown=0.25)
    hunter = Hunter("Ava", 10)
    shop.enter(hunter, "B", "Water")

    assert shop.enter(hunter, "sell", "Water") is False
    assert hunter.has_item("Water", hunter.kit)


def test_unknown_item_and_choice():
    shop = Shop()
    hunter = Hunter("Ava", 10)

    assert shop.enter(hunter, "B", "Sword") is False
    assert "ain't got none" in shop.latest_news
    assert shop.enter(hunter, "S", None) is False
    assert shop.enter(hunter, "Q", "Rope") is False
    assert "doesn't understand" in shop.latest_news
    assert hunter.gold == 10


def test_get_cost_and_inventory_listing():
    shop = Shop(markdown=0.5, catalog={"Rope": 4, "Boat": 20})
    assert shop.get_cost("boat") == 20
    assert shop.get_cost("Boat", buying=False) == 10
    assert shop.get_cost("Horse") == 0
    assert shop.inventory() == "Rope: 4 gold\nBoat: 20 gold"


def test_default_catalog_covers_every_terrain_item():
    assert set(DEFAULT_CATALOG) == {"Water", "Rope", "Machete", "Horse", "Boat"}


def test_invalid_markdown():
    with pytest.raises(ValueError):
        Shop(markdown=1.5)
