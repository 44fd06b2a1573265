"""Zimmerausstattung (Kopfteil, TV, Safe) je Zimmernummer.

GENERIERT von `python main.py extract` — nicht von Hand bearbeiten.
"""

ROOM_DETAILS: dict[str, dict[str, str]] = {
    "101": {
        "headboard": "H1",
        "tv": "LG-32LQ",
        "safe": "S-200"
    },
    "102": {
        "headboard": "H1",
        "tv": "LG-32LQ"
    },
    "103": {
        "headboard": "H2",
        "tv": "SAM-32T",
        "safe": "S-200"
    },
    "107": {
        "tv": "SAM-43Q",
        "safe": "S-300"
    },
    "125": {
        "headboard": "H3",
        "tv": "LG-32LQ",
        "safe": "S-200"
    },
    "126": {
        "headboard": "H3",
        "safe": "S-200"
    },
    "201": {
        "headboard": "H1",
        "tv": "SAM-43Q",
        "safe": "S-300"
    },
    "214": {
        "headboard": "H2"
    },
    "305": {
        "headboard": "H1",
        "tv": "LG-32LQ",
        "safe": "S-200"
    },
    "426": {
        "headboard": "H3",
        "tv": "SAM-32T"
    },
    "918": {
        "tv": "SAM-43Q",
        "safe": "S-300"
    }
}
