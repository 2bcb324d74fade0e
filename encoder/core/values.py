"""
Typed telemetry values.

A Value is exactly one of Number, String, Boolean or Array. Arrays own their
elements, which are themselves Values.
"""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union


@dataclass(frozen=True)
class Number:
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class String:
    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class Boolean:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Array:
    """Ordered sequence of values, stored as a tuple so arrays stay hashable."""
    items: Tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def to_python(self) -> List[Any]:
        return [item.to_python() for item in self.items]


Value = Union[Number, String, Boolean, Array]


def type_name(value: Value) -> str:
    """Name of the active case (e.g. "Number")."""
    return type(value).__name__
