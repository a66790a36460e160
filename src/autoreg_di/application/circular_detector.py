"""Application layer - Circular dependency detection."""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Type

from autoreg_di.domain import CircularDependencyError


class CircularDependencyDetector:
    """Tracks the types currently being constructed on this thread.

    A type entering the resolution stack while it is already on it means the
    object graph loops back on itself.

    Attributes:
        _local: Thread-local storage for resolution stacks.
    """

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def stack(self) -> List[Type]:
        """The resolution stack of the current thread."""
        if not hasattr(self._local, "stack"):
            self._local.stack = []
        return self._local.stack

    @contextmanager
    def track(self, dependency_type: Type) -> Iterator[None]:
        """Keep a type on the resolution stack while its instance is built.

        Args:
            dependency_type: The type being resolved.

        Raises:
            CircularDependencyError: If the type is already being resolved.

        Example:
            >>> detector = CircularDependencyDetector()
            >>> with detector.track(ServiceA):
            ...     with detector.track(ServiceA):  # Raises CircularDependencyError
            ...         pass
        """
        stack = self.stack
        if dependency_type in stack:
            cycle = stack[stack.index(dependency_type) :] + [dependency_type]
            raise CircularDependencyError(cycle)

        stack.append(dependency_type)
        try:
            yield
        finally:
            stack.pop()

    def clear(self) -> None:
        """Forget the current thread's resolution stack."""
        self.stack.clear()
