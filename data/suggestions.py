"""Vorschläge für die Eingabe neuer Observationen."""


def suggest(all_issues: list[str], query: str, limit: int = 5) -> list[str]:
    """Filtert die Mängelliste nach einem Suchtext.

    Groß-/Kleinschreibung wird ignoriert, die Reihenfolge von `all_issues`
    bleibt erhalten (kein Relevanz-Ranking). Leerer Suchtext → keine Vorschläge.
    """
    if not query.strip() or limit <= 0:
        return []
    needle = query.casefold()
    matches: list[str] = []
    for issue in all_issues:
        if needle in issue.casefold():
            matches.append(issue)
            if len(matches) == limit:
                break
    return matches
