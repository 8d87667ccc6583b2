from typing import List, Sequence

from .normalize import normalize_header

COLUMNS = ["name", "employer", "location", "positionType", "coreCompetency"]


def validate_header(headers: Sequence[str] | None) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Header names are compared ignoring case and whitespace.
    """
    errors: List[str] = []

    if not headers:
        errors.append("Missing header row")
        return errors

    if len(headers) != len(COLUMNS):
        errors.append(
            f"Header must name exactly {len(COLUMNS)} columns, found {len(headers)}"
        )
        return errors

    for position, (found, expected) in enumerate(zip(headers, COLUMNS), start=1):
        if normalize_header(found) != normalize_header(expected):
            errors.append(f"Column {position} must be '{expected}', found '{found}'")

    return errors


def validate_row(row: Sequence[str], line_number: int) -> List[str]:
    errors: List[str] = []
    if len(row) != len(COLUMNS):
        errors.append(
            f"Line {line_number}: expected {len(COLUMNS)} fields, found {len(row)}"
        )
    return errors
