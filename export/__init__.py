"""Export-Modul: Terminal-Anzeige des Etagenplans (rich)."""

from export.floor_view import print_floor, print_room

__all__ = ["print_floor", "print_room"]
