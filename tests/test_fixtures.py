"""Tests für die Extraktion der Zimmerausstattung aus der Inventarliste."""

import json
from pathlib import Path

import pytest

from data.fixture_extract import (
    FixtureImportError,
    extract,
    extract_file,
    render_fixture_json,
    render_fixture_module,
    write_fixture_module,
)
from models.fixture import FixtureRecord


# ─── GRUNDREGELN ──────────────────────────────────────────────────────────────

class TestExtract:
    def test_example_line(self):
        """Zimmer 205 ohne Ausstattung erzeugt keinen Eintrag."""
        result = extract("101\tH1\tTV2\t\t205\t\t\t")
        assert result == {"101": FixtureRecord(headboard="H1", tv="TV2")}
        assert result["101"].as_dict() == {"headboard": "H1", "tv": "TV2"}

    def test_multiple_groups_per_line(self):
        """Mehrere Vierergruppen pro Zeile → mehrere Zimmer."""
        result = extract("101\tH1\tT1\tS1\t102\tH2\tT2\tS2\n")
        assert set(result) == {"101", "102"}
        assert result["102"] == FixtureRecord(headboard="H2", tv="T2", safe="S2")

    def test_cells_are_trimmed(self):
        """Zellen werden getrimmt, auch die Zimmernummer."""
        result = extract("  101 \t H1 \t  \t S1 \r\n")
        assert result == {"101": FixtureRecord(headboard="H1", safe="S1")}

    def test_non_numeric_first_cell_skipped(self):
        """Überschriften und Lücken sind keine Zimmer, egal was folgt."""
        raw = "Zimmer\tKopfteil\tTV\tSafe\n" "A12\tH1\tT1\tS1\n" "12a\tH1\tT1\tS1\n"
        assert extract(raw) == {}

    def test_skipped_group_does_not_affect_neighbours(self):
        """Eine ungültige Gruppe in der Zeilenmitte überspringt nur sich selbst."""
        result = extract("101\tH1\t\t\t\tx\ty\tz\t103\t\tT3\t")
        assert set(result) == {"101", "103"}

    def test_blank_lines_ignored(self):
        """Leere Zeilen erzeugen nichts."""
        assert extract("\n   \n\t\t\t\n") == {}

    def test_short_trailing_group_is_lenient(self):
        """Unvollständige letzte Gruppe: fehlende Zellen gelten als leer."""
        result = extract("101\tH1\t\t\t102\tH2")
        assert result["102"] == FixtureRecord(headboard="H2")

    def test_room_number_only_produces_nothing(self):
        """Nur Zimmernummer ohne Ausstattung → kein Eintrag."""
        assert extract("101") == {}

    def test_empty_group_does_not_erase_earlier_record(self):
        """Eine spätere leere Gruppe löscht einen früheren Eintrag nicht."""
        raw = "101\tH1\tT1\tS1\n101\t\t\t\n"
        assert extract(raw) == {"101": FixtureRecord(headboard="H1", tv="T1", safe="S1")}

    def test_later_non_empty_group_overwrites(self):
        """Die letzte nicht-leere Gruppe gewinnt (ganzer Datensatz, kein Merge)."""
        raw = "101\tH1\tT1\tS1\n101\t\tT9\t\n"
        assert extract(raw) == {"101": FixtureRecord(tv="T9")}

    def test_non_ascii_digits_rejected(self):
        """Nur ASCII-Ziffern gelten als Zimmernummer."""
        assert extract("١٠١\tH1\tT1\tS1") == {}

    def test_extract_is_idempotent(self):
        """Zweimal dieselbe Eingabe → gleiches Ergebnis."""
        raw = "Zimmer\tK\tTV\tS\n101\tH1\tT1\t\t102\t\t\tS2\n\n201\tH3\t\t"
        assert extract(raw) == extract(raw)


# ─── DATEI-EINGABE ────────────────────────────────────────────────────────────

class TestExtractFile:
    def test_reads_utf8_file(self, tmp_path: Path):
        src = tmp_path / "rooms_input.txt"
        src.write_text("301\tKopfteil-Ä\t\t\n", encoding="utf-8")
        assert extract_file(src) == {"301": FixtureRecord(headboard="Kopfteil-Ä")}

    def test_missing_file_raises(self, tmp_path: Path):
        """Nicht lesbare Eingabe ist der einzige fatale Fall."""
        with pytest.raises(FixtureImportError):
            extract_file(tmp_path / "fehlt.txt")

    def test_invalid_encoding_raises(self, tmp_path: Path):
        src = tmp_path / "kaputt.txt"
        src.write_bytes(b"101\t\xff\xfe\t\t\n")
        with pytest.raises(FixtureImportError):
            extract_file(src)


# ─── GENERIERTE AUSGABE ───────────────────────────────────────────────────────

class TestRender:
    DETAILS = {
        "1001": FixtureRecord(safe="S9"),
        "205": FixtureRecord(tv="T2"),
        "101": FixtureRecord(headboard="H1", tv="T1"),
    }

    def test_module_is_valid_python(self):
        """Das generierte Modul lässt sich parsen und enthält ROOM_DETAILS."""
        source = render_fixture_module(self.DETAILS)
        namespace: dict = {}
        exec(source, namespace)
        assert namespace["ROOM_DETAILS"] == {
            "101": {"headboard": "H1", "tv": "T1"},
            "205": {"tv": "T2"},
            "1001": {"safe": "S9"},
        }

    def test_module_sorted_numerically(self):
        source = render_fixture_module(self.DETAILS)
        assert source.index('"101"') < source.index('"205"') < source.index('"1001"')

    def test_json_output(self):
        data = json.loads(render_fixture_json(self.DETAILS))
        assert list(data) == ["101", "205", "1001"]
        assert data["205"] == {"tv": "T2"}

    def test_write_module_creates_parents(self, tmp_path: Path):
        target = tmp_path / "gen" / "room_details.py"
        write_fixture_module(self.DETAILS, target)
        assert target.exists()
        assert "GENERIERT" in target.read_text(encoding="utf-8")

    def test_committed_module_matches_renderer(self):
        """Das eingecheckte Modul hat das Format des Generators."""
        from data.room_details import ROOM_DETAILS
        details = {room: FixtureRecord(**fields) for room, fields in ROOM_DETAILS.items()}
        committed = Path(__file__).parent.parent / "data" / "room_details.py"
        assert committed.read_text(encoding="utf-8") == render_fixture_module(details)
