def fold(s: str) -> str:
    return s.lower()


def normalize_header(header: str) -> str:
    # "position type" and "positionType" name the same column
    return "".join(header.strip().lower().split())


def contains_ci(text: str | None, term: str) -> bool:
    if text is None:
        return False
    return fold(term) in fold(text)
