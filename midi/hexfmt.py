from __future__ import annotations

ZERO = "0"


def left_pad(s: str, length: int, pad_char: str = ZERO) -> str:
    """Prepend `pad_char` until `s` is `length` long. Never truncates."""
    if len(pad_char) != 1:
        raise ValueError(f"Pad character must be a single character, got {pad_char!r}")
    if len(s) >= length:
        return s
    return pad_char * (length - len(s)) + s


def to_binary(value: int) -> str:
    """Minimal base-2 digits of a non-negative integer."""
    if value < 0:
        raise ValueError(f"Cannot render negative value {value} as binary")
    return format(value, "b")


def to_hex(binary_digits: str, digits: int = 2) -> str:
    if not binary_digits or any(c not in "01" for c in binary_digits):
        raise ValueError(f"Not a binary string: {binary_digits!r}")
    return left_pad(format(int(binary_digits, 2), "X"), digits)
