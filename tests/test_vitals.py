import pytest

from wayfarer.vitals import Vitals, parse_amount_input


def test_damage_within_guard():
    vitals = Vitals()
    vitals.damage(3, 10, 5, False)
    assert vitals.guard_dmg == 3
    assert vitals.health_dmg == 0


def test_damage_spills_into_health():
    vitals = Vitals(guard_dmg=4)
    vitals.damage(8, 10, 5, False)
    assert vitals.guard_dmg == 10
    assert vitals.health_dmg == 2


def test_raw_damage_skips_guard():
    vitals = Vitals()
    vitals.damage(3, 10, 5, True)
    assert vitals.guard_dmg == 0
    assert vitals.health_dmg == 3


def test_broken_guard_damages_health():
    vitals = Vitals(guard_dmg=10)
    vitals.damage(2, 10, 5, False)
    assert vitals.guard_dmg == 10
    assert vitals.health_dmg == 2


def test_health_damage_capped():
    vitals = Vitals()
    vitals.damage(40, 10, 5, True)
    assert vitals.health_dmg == 5
    assert vitals.health_left(5) == 0


def test_heal_saturates():
    vitals = Vitals(guard_dmg=3, health_dmg=2)
    vitals.heal(10, False)
    assert vitals.guard_dmg == 0
    assert vitals.health_dmg == 2
    vitals.heal(10, True)
    assert vitals.health_dmg == 0


def test_left_values_never_negative():
    vitals = Vitals(guard_dmg=20, health_dmg=20)
    assert vitals.guard_left(10) == 0
    assert vitals.health_left(5) == 0


def test_damage_then_heal_restores():
    vitals = Vitals()
    vitals.damage(6, 10, 5, False)
    vitals.heal(6, False)
    assert vitals == Vitals()


@pytest.mark.parametrize("text", ["", "x", "-1"])
def test_parse_invalid(text):
    assert parse_amount_input(text) == 0


def test_parse_caps_at_fifty():
    assert parse_amount_input("999") == 50
    assert parse_amount_input("7") == 7