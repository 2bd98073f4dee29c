from __future__ import annotations

from typing import Any, Callable, Tuple, Type, TypeVar

C = TypeVar("C", bound=type)

_MARKERS = "__xmlhelper_markers__"


def mark(*markers: Any) -> Callable[[C], C]:
    """
    Class decorator recording marker objects (instances or classes).

    Example:
        class Serializable: ...

        @mark(Serializable())
        class Ship: ...

        has_attribute(Ship(), Serializable) -> True
    """
    def decorate(cls: C) -> C:
        own = cls.__dict__.get(_MARKERS, ())
        setattr(cls, _MARKERS, own + tuple(markers))
        return cls

    return decorate


def markers_of(obj: Any) -> Tuple[Any, ...]:
    """
    Markers declared on the class of obj (or obj itself if it is a class)
    and on all its bases.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    found: Tuple[Any, ...] = ()
    for klass in cls.__mro__:
        found += klass.__dict__.get(_MARKERS, ())
    return found


def has_attribute(obj: Any, attribute: Type[Any]) -> bool:
    for m in markers_of(obj):
        if isinstance(m, type):
            if issubclass(m, attribute):
                return True
        elif isinstance(m, attribute):
            return True
    return False
