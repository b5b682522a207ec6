"""Parse sticker locations typed as ``(row,col)``."""

from typing import Tuple

from .errors import InvalidLocationError


def _parse_int(token: str) -> int:
    token = token.strip()
    sign = token[:1] if token[:1] in "+-" else ""
    digits = token[len(sign):]
    if not digits.isdigit():
        raise ValueError(token)
    return int(token)


def parse_location(text: str) -> Tuple[int, int]:
    """Return ``(row, col)`` from text such as ``"(12,40)"``.

    The text must open with ``(``, close with ``)`` and hold two integers
    split by the first comma. Negative coordinates are rejected.
    """
    line = text.strip()
    if not (line.startswith("(") and line.endswith(")") and "," in line):
        raise InvalidLocationError(text)

    comma = line.index(",")
    row_text = line[1:comma]
    col_text = line[comma + 1:-1]
    try:
        row = _parse_int(row_text)
        col = _parse_int(col_text)
    except ValueError as exc:
        raise InvalidLocationError(text) from exc

    if row < 0 or col < 0:
        raise InvalidLocationError(text)
    return row, col
