"""Domain layer - Lifetime markers attached to implementation classes."""

import inspect
from typing import Any, FrozenSet, Hashable, Type, TypeVar

T = TypeVar("T")

MARKERS_ATTRIBUTE = "__service_markers__"


class ServiceMarker:
    """A tag signaling the intended lifetime of an implementation class.

    Instances are used as class decorators. Which lifetime a marker stands
    for is decided by the MarkerConfiguration, not by the marker itself, so
    applications can define their own markers and map them to lifetimes.

    Attributes:
        name: Human readable name, used in logs and reprs.

    Example:
        >>> request_bound = ServiceMarker("request_bound")
        >>>
        >>> @request_bound
        ... class UnitOfWork(IUnitOfWork):
        ...     pass
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __call__(self, cls: Type[T]) -> Type[T]:
        return attach_markers(cls, self)

    def __repr__(self) -> str:
        return f"ServiceMarker({self.name!r})"


transient_service = ServiceMarker("transient_service")
scoped_service = ServiceMarker("scoped_service")
singleton_service = ServiceMarker("singleton_service")


def attach_markers(cls: Type[T], *markers: Hashable) -> Type[T]:
    """Attach raw marker tags to a class.

    Any hashable object is accepted as a tag. Tags are stored on the class
    itself and appended to the ones it already declares.

    Args:
        cls: The class to tag.
        *markers: Tags to attach.

    Returns:
        The same class, so the function can back a decorator.

    Raises:
        TypeError: If ``cls`` is not a class.
    """
    if not inspect.isclass(cls):
        raise TypeError(f"Service markers can only be attached to classes, got {cls!r}")

    declared = cls.__dict__.get(MARKERS_ATTRIBUTE, ())
    setattr(cls, MARKERS_ATTRIBUTE, tuple(declared) + markers)
    return cls


def get_markers(cls: Type[Any]) -> FrozenSet[Any]:
    """Return every marker attached to a class or to any of its base classes."""
    markers = set()
    for klass in inspect.getmro(cls):
        markers.update(klass.__dict__.get(MARKERS_ATTRIBUTE, ()))
    return frozenset(markers)
