"""Small text helpers."""

_ASCII_DIGITS = frozenset("0123456789")


def strip_non_digits(text: str) -> str:
    """Return ``text`` with everything except the ASCII digits 0-9 removed."""
    return "".join(char for char in text if char in _ASCII_DIGITS)
