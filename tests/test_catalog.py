"""Tests für Zimmerkatalog, Mängelliste, Vorschläge und Etagen-Anzeige."""

from pathlib import Path

import pytest
from rich.console import Console

from data.catalog import ACCESSIBLE_ROOMS, FLOORS, find_room, get_floor_data, room_id_for
from data.issues import ISSUES, get_all_issues
from data.suggestions import suggest
from export.floor_view import (
    format_timestamp,
    print_floor,
    print_room,
    render_floor_rows,
    render_observation_rows,
    render_top_row,
    room_cell,
)
from models.room import RoomType
from store.book import ObservationBook
from store.storage import ObservationStorage


# ─── ZIMMERKATALOG ────────────────────────────────────────────────────────────

class TestCatalog:
    def test_all_floors_available(self):
        for floor in FLOORS:
            data = get_floor_data(floor)
            assert data.floor == floor
            assert len(data.top_rooms) == 6

    @pytest.mark.parametrize("floor", [0, 10, -1])
    def test_invalid_floor_raises(self, floor):
        with pytest.raises(ValueError):
            get_floor_data(floor)

    def test_room_ids_unique_and_stable(self):
        ids = [r.id for f in FLOORS for r in get_floor_data(f).all_rooms()]
        assert len(ids) == len(set(ids))
        assert [r.id for r in get_floor_data(3).all_rooms()] == \
               [r.id for r in get_floor_data(3).all_rooms()]

    def test_room_numbers_per_floor(self):
        """Jede Etage hat die Zimmer x01–x26 plus zwei Servicebereiche."""
        data = get_floor_data(2)
        numbers = sorted(r.number for r in data.all_rooms() if not r.is_service)
        assert numbers == [f"2{i:02d}" for i in range(1, 27)]
        services = [r.label for r in data.all_rooms() if r.is_service]
        assert services == ["AUFZUG", "FLUR"]

    def test_room_types_by_side(self):
        data = get_floor_data(1)
        assert {r.room_type for r in data.top_rooms} == {RoomType.PVM}
        assert {r.room_type for r in data.left_rooms if not r.is_service} == {RoomType.PREMIUM}
        assert {r.room_type for r in data.right_rooms if not r.is_service} == {RoomType.STANDARD}

    def test_accessible_rooms(self):
        accessible = {
            r.number for f in FLOORS for r in get_floor_data(f).all_rooms() if r.is_accessible
        }
        assert accessible == set(ACCESSIBLE_ROOMS)
        assert "125" in accessible and "926" in accessible

    def test_fixtures_merged(self):
        """Ausstattung aus data/room_details.py landet am Zimmer."""
        room = find_room("101")
        assert room.headboard == "H1"
        assert room.fixtures.as_dict() == {"headboard": "H1", "tv": "LG-32LQ", "safe": "S-200"}

    def test_room_without_fixtures(self):
        room = find_room("104")
        assert room.fixtures.is_empty

    def test_room_id_for(self):
        assert room_id_for("101") == "1-101"
        assert room_id_for(" 926 ") == "9-926"

    @pytest.mark.parametrize("number", ["", "12", "1a1", "Zimmer"])
    def test_room_id_for_invalid(self, number):
        with pytest.raises(ValueError):
            room_id_for(number)

    def test_find_room_by_number_and_id(self):
        assert find_room("305").id == "3-305"
        assert find_room("3-305").number == "305"

    @pytest.mark.parametrize("key", ["1027", "999", "2-101", "abc", "1-AUFZUG"])
    def test_find_room_unknown(self, key):
        assert find_room(key) is None


# ─── VORSCHLÄGE ───────────────────────────────────────────────────────────────

class TestSuggestions:
    ISSUES = ["Leaky faucet", "Broken TV", "No hot water"]

    def test_substring_match(self):
        assert suggest(self.ISSUES, "wat") == ["No hot water"]

    def test_case_insensitive(self):
        assert suggest(self.ISSUES, "BROKEN") == ["Broken TV"]

    def test_empty_query(self):
        assert suggest(self.ISSUES, "") == []
        assert suggest(self.ISSUES, "   ") == []

    def test_stable_order_and_limit(self):
        issues = [f"Problem {i}" for i in range(10)]
        assert suggest(issues, "problem", limit=3) == ["Problem 0", "Problem 1", "Problem 2"]

    def test_never_exceeds_limit(self):
        for limit in range(0, 8):
            assert len(suggest(get_all_issues(), "e", limit=limit)) <= limit

    def test_default_limit_is_five(self):
        assert len(suggest(get_all_issues(), "e")) == 5

    def test_issue_dictionary(self):
        """get_all_issues liefert eine Kopie."""
        issues = get_all_issues()
        issues.clear()
        assert len(ISSUES) > 0
        assert suggest(get_all_issues(), "klima") == [
            "Klimaanlage kühlt nicht", "Klimaanlage tropft", "Klimaanlage laut",
        ]


# ─── ETAGEN-ANZEIGE ───────────────────────────────────────────────────────────

class TestFloorView:
    def _book(self, tmp_path: Path) -> ObservationBook:
        return ObservationBook.open(ObservationStorage(tmp_path))

    def test_room_cell(self):
        assert room_cell(find_room("101")) == "101"
        assert room_cell(find_room("125"), 2) == "125 ♿ ●2"
        assert room_cell(None) == ""

    def test_service_cell(self):
        service = next(r for r in get_floor_data(1).left_rooms if r.is_service)
        assert room_cell(service) == "── AUFZUG ──"

    def test_top_row_marks_observations(self, tmp_path: Path):
        book = self._book(tmp_path)
        book.add("A", room_id="1-102")
        book.add("B", room_id="1-102")
        assert render_top_row(get_floor_data(1), book)[1] == "102 ●2"

    def test_floor_rows(self, tmp_path: Path):
        book = self._book(tmp_path)
        book.add("A", room_id="1-117")
        rows = render_floor_rows(get_floor_data(1), book)
        assert len(rows) == 11
        assert rows[0] == ["107", "│", "117 ●1"]
        assert rows[5] == ["── AUFZUG ──", "│", "── FLUR ──"]

    def test_observation_rows_keep_order(self, tmp_path: Path):
        book = self._book(tmp_path)
        book.add("alt", room_id="1-101")
        book.add("neu", room_id="1-101")
        rows = render_observation_rows(book.observations("1-101"))
        assert [r[2] for r in rows] == ["neu", "alt"]

    def test_format_timestamp(self):
        assert len(format_timestamp(0)) == len("01.01.1970 00:00")

    def test_print_functions(self, tmp_path: Path):
        """print_floor / print_room geben ohne Fehler aus (auch mit Markup-Zeichen)."""
        book = self._book(tmp_path)
        book.add("[rot] Fleck", room_id="1-101")
        console = Console(record=True, width=120)
        print_floor(get_floor_data(1), book, console, hotel_name="Test")
        print_room(find_room("101"), book.observations("1-101"), console)
        text = console.export_text()
        assert "Etage 1" in text
        assert "[rot] Fleck" in text
        assert "LG-32LQ" in text

    def test_hotel_name_with_markup(self, tmp_path: Path):
        """Eckige Klammern im Hotelnamen werden wörtlich ausgegeben."""
        console = Console(record=True, width=120)
        print_floor(get_floor_data(1), self._book(tmp_path), console, hotel_name="[Arenal] Palma")
        assert "[Arenal] Palma" in console.export_text()
