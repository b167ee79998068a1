"""Drills on shared behaviour, clone-on-write data and reference conversions."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from functools import singledispatch

_U32_MAX = (1 << 32) - 1


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or add a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    if not all(isinstance(item, str) for item in value):
        raise TypeError("append_bar expects a list of strings")
    return [*value, "Bar"]


class Licensed:
    """Something that can describe its licence."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software report the same licence."""
    return software.licensing_info() == software_two.licensing_info()


class Cow:
    """A sequence that is borrowed until it first needs to change, then copied."""

    def __init__(self, data: Sequence[int], owned: bool = False):
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[int]) -> Cow:
        return cls(list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    def to_mut(self) -> list[int]:
        """The data as a list that may be changed, copying it first if borrowed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cow):
            return list(self._data) == list(other._data)
        if isinstance(other, Sequence):
            return list(self._data) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        kind = "owned" if self._owned else "borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying borrowed data only if something changes."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


def byte_counter(arg: str) -> int:
    """Number of UTF-8 bytes in the text."""
    if not isinstance(arg, str):
        raise TypeError("byte_counter expects a string")
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    if not isinstance(arg, str):
        raise TypeError("char_counter expects a string")
    return len(arg)


def num_sq(value: int) -> int:
    """The square of an unsigned 32-bit number."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError("value must be an unsigned 32-bit integer")
    result = value * value
    if result > _U32_MAX:
        raise OverflowError("square does not fit in 32 bits")
    return result