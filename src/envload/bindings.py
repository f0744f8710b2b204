from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class Kind(str, Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    FLAG = "flag"
    LIST = "list"
    SET = "set"


class Destination(Protocol):
    def set(self, value: Any) -> None:
        ...


@dataclass(slots=True)
class Slot(Generic[T]):
    """A mutable cell a binding assigns into. `value` stays None until loaded."""

    value: Optional[T] = None

    def set(self, value: T) -> None:
        self.value = value


@dataclass(frozen=True, slots=True)
class AttrDestination:
    target: object
    name: str

    def set(self, value: Any) -> None:
        setattr(self.target, self.name, value)


def attr(target: object, name: str) -> AttrDestination:
    """Bind a loaded value to `target.<name>`."""
    return AttrDestination(target=target, name=name)


@dataclass(frozen=True, slots=True)
class Binding:
    key: str
    effective_key: str
    description: str
    kind: Kind
    required: bool
    destination: Optional[Destination] = None
    default: Any = None
    delimiter: Optional[str] = None

    def assign(self, value: Any) -> None:
        if self.destination is not None:
            self.destination.set(value)
