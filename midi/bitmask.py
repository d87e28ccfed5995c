"""Bit-mask templating for single SysEx bytes.

A pattern describes the bit layout of a byte: ``0``/``1`` are literal bits
and every other character marks a field.  A field is a maximal run of one
repeated mask character, so ``"0ggggghh"`` has a 5-bit ``g`` field and a
2-bit ``h`` field.  Values are bound to fields left to right.  Two runs of
the same character that are not adjacent are separate fields, each taking
its own value (``"1x0x"`` needs two values).

Encoding is done in two passes: `tokenize` splits the pattern into literal
and field spans, then `render_binary` renders the values into the field
spans.  `render_binary` reports failures as a tagged fault inside an
`EncodeResult`; `encode_binary` and `encode_hex_byte` raise instead.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union

from midi.hexfmt import ZERO, left_pad, to_binary, to_hex

LITERALS = frozenset("01")
BYTE_BITS = 8
PLAIN_BYTE_MASK = "v" * BYTE_BITS


@dataclass(frozen=True)
class Span:
    start: int   # 0-based index into the pattern
    text: str
    is_field: bool

    @property
    def width(self) -> int:
        return len(self.text)

    @property
    def position(self) -> int:
        """1-based start position, as quoted in error messages."""
        return self.start + 1

    @property
    def max_value(self) -> int:
        return (1 << self.width) - 1


@dataclass(frozen=True)
class RangeFault:
    pattern: str
    field: str
    position: int
    value: int
    max_value: int

    def describe(self) -> str:
        if self.value < 0:
            reason = "negative values cannot be encoded"
        else:
            reason = "value too large"
        return (f"Invalid value for mask '{self.field}' starting at position "
                f"{self.position} in pattern '{self.pattern}'; value ({self.value}), "
                f"{reason}, max value for pattern: {self.max_value}")


@dataclass(frozen=True)
class ArityFault:
    pattern: str
    fields_found: int
    values_supplied: int

    def describe(self) -> str:
        if self.fields_found > self.values_supplied:
            return (f"No value specified for field {self.fields_found} in pattern "
                    f"'{self.pattern}' ({self.values_supplied} value(s) supplied)")
        return (f"Too many values specified for pattern '{self.pattern}': "
                f"{self.values_supplied} value(s) for {self.fields_found} field(s)")


Fault = Union[RangeFault, ArityFault]


class EncodeError(ValueError):
    """Base class for pattern encoding failures."""


class RangeError(EncodeError):
    def __init__(self, fault: RangeFault) -> None:
        super().__init__(fault.describe())
        self.fault = fault


class ArityError(EncodeError):
    def __init__(self, fault: ArityFault) -> None:
        super().__init__(fault.describe())
        self.fault = fault


class ByteWidthError(EncodeError):
    """Pattern does not describe exactly one 8-bit byte."""


@dataclass(frozen=True)
class EncodeResult:
    bits: str | None = None
    fault: Fault | None = None

    @property
    def ok(self) -> bool:
        return self.fault is None

    def unwrap(self) -> str:
        if isinstance(self.fault, RangeFault):
            raise RangeError(self.fault)
        if isinstance(self.fault, ArityFault):
            raise ArityError(self.fault)
        return self.bits


def tokenize(pattern: str) -> tuple[Span, ...]:
    """Split `pattern` into literal and field spans, in order.

    Consecutive literal bits are grouped into one literal span.  A field span
    ends wherever the character changes.
    """
    spans: list[Span] = []
    start = 0
    for i in range(1, len(pattern) + 1):
        if i < len(pattern):
            prev, c = pattern[i - 1], pattern[i]
            both_literal = prev in LITERALS and c in LITERALS
            if both_literal or (prev == c and c not in LITERALS):
                continue
        text = pattern[start:i]
        spans.append(Span(start, text, text[0] not in LITERALS))
        start = i
    return tuple(spans)


def fields(pattern: str) -> list[Span]:
    return [s for s in tokenize(pattern) if s.is_field]


def render_binary(pattern: str, values: Sequence[int] = ()) -> EncodeResult:
    """Render `values` into the fields of `pattern`.

    Fields are checked left to right; the first missing or out-of-range value
    produces the fault.  Unconsumed values are reported after all fields were
    rendered.
    """
    if not pattern:
        raise ValueError("Pattern must not be empty")
    pieces: list[str] = []
    field_index = 0
    for span in tokenize(pattern):
        if not span.is_field:
            pieces.append(span.text)
            continue
        field_index += 1
        if field_index > len(values):
            return EncodeResult(fault=ArityFault(pattern, field_index, len(values)))
        value = values[field_index - 1]
        if value < 0 or value > span.max_value:
            return EncodeResult(fault=RangeFault(
                pattern, span.text, span.position, value, span.max_value))
        pieces.append(left_pad(to_binary(value), span.width, ZERO))
    if field_index != len(values):
        return EncodeResult(fault=ArityFault(pattern, field_index, len(values)))
    return EncodeResult(bits="".join(pieces))


def encode_binary(pattern: str, values: Sequence[int] = ()) -> str:
    return render_binary(pattern, values).unwrap()


def encode_hex_byte(pattern: str, values: Sequence[int] = ()) -> str:
    """Render `values` into an 8-bit pattern, yielding a 2-character hex byte."""
    binary = encode_binary(pattern, values)
    if len(binary) != BYTE_BITS:
        raise ByteWidthError(
            f"Pattern '{pattern}' is {len(binary)} bits wide, expected {BYTE_BITS}")
    return to_hex(binary, 2)


def hex_byte(value: int) -> str:
    """Plain decimal to 2-character hex; anything above 0xFF is a RangeError."""
    return encode_hex_byte(PLAIN_BYTE_MASK, [value])
