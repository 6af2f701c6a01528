import pytest

from regatta_parser.extraction.boat_classes import (
    crew_size_for,
    find_boat_class,
    lookup_boat_class,
)


class TestFindBoatClass:
    def test_finds_class_as_printed(self) -> None:
        assert find_boat_class("Ergebnisse 420er Jugend") == "420er"

    def test_prefers_longer_variant(self) -> None:
        assert find_boat_class("Klasse: 49er FX") == "49er FX"

    def test_does_not_match_inside_words(self) -> None:
        assert find_boat_class("Finnland Open") is None

    def test_none_without_class(self) -> None:
        assert find_boat_class("Ergebnisliste Herbstregatta") is None


class TestLookupBoatClass:
    def test_matches_printed_variant(self) -> None:
        boat_class = lookup_boat_class("Optimist A")
        assert boat_class is not None
        assert boat_class.name == "Optimist"

    def test_matches_alias(self) -> None:
        boat_class = lookup_boat_class("420")
        assert boat_class is not None
        assert boat_class.name == "420er"

    def test_unknown_class(self) -> None:
        assert lookup_boat_class("Hobie Cat") is None


class TestCrewSizeFor:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("Optimist", 1), ("ILCA 6", 1), ("420er", 2), ("Pirat", 2), ("J70", 4)],
    )
    def test_known_classes(self, name: str, expected: int) -> None:
        assert crew_size_for(name) == expected

    def test_unknown_and_missing_default_to_single_handed(self) -> None:
        assert crew_size_for("Hobie Cat") == 1
        assert crew_size_for(None) == 1
