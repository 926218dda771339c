from collections.abc import Collection, Iterator


def _alias_candidates(table_name: str) -> Iterator[str]:
    yield table_name[:1].lower()
    yield table_name[:2].lower()
    yield "".join(part[:1] for part in table_name.split("_")).lower()
    yield table_name[:3].lower()


def allocate_alias(table_name: str, existing_aliases: Collection[str]) -> str:
    """
    Picks the first free alias among: first letter, first two letters, initials of the underscore-separated
    words, first three letters. Falls back to the first letter with a numeric suffix (`c1`, `c2`, ...).
    """
    for candidate in _alias_candidates(table_name):
        if candidate and candidate not in existing_aliases:
            return candidate

    first_letter = table_name[:1].lower()
    counter = 1
    while f"{first_letter}{counter}" in existing_aliases:
        counter += 1

    return f"{first_letter}{counter}"
