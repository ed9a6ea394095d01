"""Tests for House residents."""

import logging

import pytest
from pydantic import ValidationError

from campus_directory.models import House


@pytest.fixture
def house():
    return House(
        name="Ziskind House",
        address="1 Henshaw Ave",
        floor_count=3,
        has_dining_room=True,
    )


class TestResidents:
    def test_move_in_and_out(self, house):
        house.move_in("Ada")
        assert house.is_resident("Ada")
        assert house.move_out("Ada") == "Ada"
        assert house.is_resident("Ada") is False

    def test_move_in_twice(self, house, caplog):
        caplog.set_level(logging.INFO)
        house.move_in("Ada")
        house.move_in("Ada")
        assert house.resident_count() == 1
        assert "Ada is already a resident of Ziskind House" in caplog.text

    def test_move_out_stranger(self, house, caplog):
        caplog.set_level(logging.INFO)
        assert house.move_out("Grace") is None
        assert "Grace is not a resident of Ziskind House" in caplog.text

    def test_move_in_all_keeps_order(self, house):
        house.move_in_all(["Ada", "Grace", "Ada", "Barbara"])
        assert house.residents == ["Ada", "Grace", "Barbara"]
        assert house.resident_count() == 3

    def test_move_out_all(self, house):
        house.move_in_all(["Ada", "Grace", "Barbara"])
        house.move_out_all(["Grace", "Nobody", "Ada"])
        assert house.residents == ["Barbara"]


class TestDiningRoom:
    def test_default_false(self):
        assert House(name="Cutter House").has_dining_room is False

    def test_set_at_construction(self, house):
        assert house.has_dining_room is True

    def test_frozen(self, house):
        with pytest.raises(ValidationError):
            house.has_dining_room = False


class TestValidation:
    def test_duplicate_residents_rejected(self):
        with pytest.raises(ValidationError, match="more than once"):
            House(name="Ziskind House", residents=["Ada", "Ada"])

    def test_initial_residents_kept(self):
        house = House(name="Ziskind House", residents=["Ada", "Grace"])
        assert house.resident_count() == 2
        assert house.is_resident("Grace")
