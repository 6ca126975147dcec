"""The Luhn checksum."""

from __future__ import annotations

import sys

_SAMPLE_NUMBER = "7992 7398 713"


def luhn(cc_number: str) -> bool:
    """Return True if ``cc_number`` passes the Luhn check.

    Spaces are ignored; any other non-digit character, or fewer than two
    digits, makes the number invalid.
    """
    digits = [ch for ch in reversed(cc_number) if ch != " "]
    if not all(ch in "0123456789" for ch in digits):
        return False
    if len(digits) < 2:
        return False
    total = 0
    for position, ch in enumerate(digits):
        digit = int(ch)
        if position % 2 == 1:
            doubled = digit * 2
            digit = doubled // 10 + doubled % 10
        total += digit
    return total % 10 == 0


def main(argv=None) -> int:
    """Check each number given on the command line, or a sample number."""
    numbers = sys.argv[1:] if argv is None else list(argv)
    if not numbers:
        numbers = [_SAMPLE_NUMBER]
    for cc_number in numbers:
        answer = "yes" if luhn(cc_number) else "no"
        print(f"Is {cc_number} a valid credit card number? {answer}")
    return 0


if __name__ == "__main__":
    sys.exit(main())