"""Drills on reporting and propagating errors."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]*", re.ASCII)


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with the usual error messages."""
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text) or text in ("+", "-"):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def total_cost(item_quantity: str) -> int:
    """Five tokens per item plus a fee of one; raise ValueError if the quantity is not a number."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, 32)
    cost = qty * cost_per_item + processing_fee
    if not _I32_MIN <= cost <= _I32_MAX:
        raise OverflowError("total cost does not fit in a 32-bit integer")
    return cost


class CreationError(ValueError):
    """A value could not become a positive non-zero integer."""

    _MESSAGES = {"negative": "number is negative", "zero": "number is zero"}

    def __init__(self, reason: str):
        if reason not in self._MESSAGES:
            raise ValueError(f"unknown creation error: {reason!r}")
        super().__init__(self._MESSAGES[reason])
        self.reason = reason

    @classmethod
    def negative(cls) -> CreationError:
        return cls("negative")

    @classmethod
    def zero(cls) -> CreationError:
        return cls("zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)

    def __repr__(self) -> str:
        return f"CreationError({self.reason!r})"


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError.negative()
        if self.value == 0:
            raise CreationError.zero()


class ParsePosNonzeroError(ValueError):
    """Text could not be parsed into a positive non-zero integer."""

    def __init__(self, error: ValueError):
        super().__init__(str(error))
        self.error = error

    @classmethod
    def from_creation(cls, error: CreationError) -> ParsePosNonzeroError:
        return cls(error)

    @classmethod
    def from_parseint(cls, error: ValueError) -> ParsePosNonzeroError:
        return cls(error)

    @property
    def creation(self) -> CreationError | None:
        """The creation error, if the number parsed but was not positive."""
        return self.error if isinstance(self.error, CreationError) else None

    @property
    def parse_int(self) -> ValueError | None:
        """The parse error, if the text was not a number."""
        return None if isinstance(self.error, CreationError) else self.error


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer, raising ParsePosNonzeroError."""
    try:
        value = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parseint(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc