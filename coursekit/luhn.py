"""Luhn checksum validation of card-style numbers."""

from __future__ import annotations

import sys

_DIGITS = "0123456789"


def luhn(cc_number: str) -> bool:
    """Return whether ``cc_number`` passes the Luhn check.

    Spaces are ignored; any other non-digit makes the number invalid, as do
    fewer than two digits.
    """
    total = 0
    digits_seen = 0
    for i, ch in enumerate(c for c in reversed(cc_number) if c != " "):
        if ch not in _DIGITS:
            return False
        digit = int(ch)
        if i % 2 == 1:
            doubled = digit * 2
            digit = doubled // 10 + doubled % 10
        total += digit
        digits_seen += 1

    if digits_seen < 2:
        return False
    return total % 10 == 0


def main(argv: list[str] | None = None) -> int:
    """Report whether the given (or a sample) number is valid."""
    args = sys.argv[1:] if argv is None else argv
    cc_number = args[0] if args else "1234 5678 1234 5670"
    answer = "yes" if luhn(cc_number) else "no"
    print(f"Is {cc_number} a valid credit card number? {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())