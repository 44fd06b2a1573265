"""Statisches Verzeichnis bekannter Mängel für die Autovervollständigung."""

ISSUES: list[str] = [
    "Wasserhahn tropft",
    "Kein Warmwasser",
    "Dusche läuft schlecht ab",
    "Toilettenspülung defekt",
    "Abfluss verstopft",
    "Silikonfuge schimmelt",
    "Fernseher ohne Signal",
    "Fernbedienung fehlt",
    "Fernbedienung ohne Batterien",
    "Safe lässt sich nicht öffnen",
    "Safe-Batterie leer",
    "Klimaanlage kühlt nicht",
    "Klimaanlage tropft",
    "Klimaanlage laut",
    "Glühbirne defekt",
    "Nachttischlampe defekt",
    "Steckdose ohne Strom",
    "Kopfteil locker",
    "Scharnier locker",
    "Schranktür klemmt",
    "Balkontür schließt nicht",
    "Fenstergriff locker",
    "Türschloss / Kartenleser defekt",
    "Vorhang abgerissen",
    "Fleck auf Teppich",
    "Wand beschädigt",
    "Minibar kühlt nicht",
    "Föhn defekt",
    "WLAN-Empfang schwach",
    "Telefon ohne Freizeichen",
]


def get_all_issues() -> list[str]:
    """Gibt eine Kopie der Mängelliste zurück."""
    return list(ISSUES)
