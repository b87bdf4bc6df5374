import pytest

from wayfarer.wealth import (
    MAX_WEALTH,
    Coin,
    earn,
    join_coinage,
    parse_coin_input,
    set_coin,
    spend,
    split_into_coinage,
    visible_coins,
)


@pytest.mark.parametrize("total", [0, 1, 9, 10, 999, 1000, 12345, 999999])
def test_split_join_round_trip(total):
    assert join_coinage(*split_into_coinage(total)) == total


@pytest.mark.parametrize("total", [0, 7, 58, 4321, 987654])
def test_split_components_in_range(total):
    gold, silver, copper = split_into_coinage(total)
    assert 0 <= copper < 10
    assert 0 <= silver < 100
    assert gold >= 0


def test_join_uses_documented_rates():
    assert join_coinage(1, 0, 0) == 1000
    assert join_coinage(0, 1, 0) == 10


def test_set_coin_replaces_only_that_coin():
    total = join_coinage(3, 45, 6)
    updated = set_coin(total, Coin.COPPER, 0)
    assert split_into_coinage(updated) == (3, 45, 0)
    updated = set_coin(total, 0, 9)
    assert split_into_coinage(updated) == (9, 45, 6)


@pytest.mark.parametrize("text", ["", "abc", "-3", "1.5", " 4"])
def test_parse_invalid_is_zero(text):
    assert parse_coin_input(text, 999) == 0


def test_parse_caps_at_maximum():
    assert parse_coin_input("500", 99) == 99
    assert parse_coin_input("42", 99) == 42


def test_visible_coins_empty_for_zero():
    assert visible_coins(0) == []


def test_visible_coins_skips_zero_amounts():
    total = join_coinage(1, 0, 5)
    assert visible_coins(total) == [(Coin.GOLD, 1), (Coin.COPPER, 5)]


def test_spend_saturates():
    assert spend(5, 10) == 0
    assert spend(10, 4) + 4 == 10


def test_earn_adds_and_caps():
    assert earn(20, 7) - 7 == 20
    assert earn(MAX_WEALTH, 1) == MAX_WEALTH