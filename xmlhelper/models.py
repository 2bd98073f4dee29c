from collections.abc import MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Vector2Int:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(frozen=True)
class Bounds:
    center: Vector3 = field(default_factory=Vector3)
    size: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class RangeInt:
    # covers start .. start + length - 1
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


class DictionaryValueType(Enum):
    STRING = "string"
    INT32 = "int32"
    BOOLEAN = "boolean"
    SINGLE = "single"


class CaseInsensitiveDict(MutableMapping):
    """
    Dict keyed by casefolded strings.

    Iteration returns the spelling used by the most recent assignment.
    """

    def __init__(self, data=None, **kwargs) -> None:
        self._store: Dict[str, Tuple[str, object]] = {}
        self.update(data or {}, **kwargs)

    def __setitem__(self, key: str, value) -> None:
        self._store[key.casefold()] = (key, value)

    def __getitem__(self, key: str):
        return self._store[key.casefold()][1]

    def __delitem__(self, key: str) -> None:
        del self._store[key.casefold()]

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MutableMapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


@dataclass
class ElementPayload:
    key: str
    value: Optional[str]
    attributes: CaseInsensitiveDict

    @property
    def pair(self) -> Tuple[str, Optional[str]]:
        return (self.key, self.value)


@dataclass
class LeafRow:
    # one empty or text-only element, for the Leaves sheet
    source: str
    path: str
    name: str
    text: str
    attributes: str


@dataclass
class ElementRow:
    source: str
    path: str
    name: str
    depth: int
    leaf: bool
    children: int
    attributes: str
