from typing import Any, List, Optional, Type


class DIException(Exception):
    """Base exception for DI-related errors."""


class CircularDependencyError(DIException):
    """Raised when a circular dependency is detected.

    Attributes:
        dependency_chain: List of types involved in the circular dependency.
    """

    def __init__(self, dependency_chain: List[Type]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Circular dependency detected: {' -> '.join([cls.__name__ for cls in dependency_chain])}"
        super().__init__(message)


class UnresolvableError(DIException):
    """Raised when a dependency cannot be resolved.

    This occurs when:
    - An abstraction is requested but nothing was registered for it.
    - Constructor parameters lack type hints.
    - A constructor raises while building the instance.

    Attributes:
        cls: The class type that could not be resolved.
        reason: Optional reason for the failure.
    """

    def __init__(self, cls: Type, reason: Optional[str] = None) -> None:
        self.cls = cls
        self.reason = reason
        message = f"Cannot resolve dependency for type: {cls.__name__}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class LifetimeError(DIException):
    """Raised for invalid lifetime values.

    This occurs when:
    - A registration or marker override names something that is not a Lifetime.
    """


class ScopeError(DIException):
    """Raised for invalid scope operations.

    This occurs when:
    - Attempting to resolve a scoped dependency from the root container.
    """


class ScanError(DIException):
    """Raised when a type universe cannot be enumerated or introspected.

    Scanning is fail-fast: the first failure aborts the whole registration run.

    Attributes:
        universe: The universe (module, module name or type list) being scanned.
        reason: Description of the failure.
    """

    def __init__(self, universe: Any, reason: str) -> None:
        self.universe = universe
        self.reason = reason
        super().__init__(f"Cannot scan {universe!r}: {reason}")


class RegistrationError(DIException):
    """Raised when a registration sink rejects a service descriptor.

    Attributes:
        descriptor: The descriptor that was being registered.
    """

    def __init__(self, descriptor: Any, reason: str) -> None:
        self.descriptor = descriptor
        super().__init__(f"Failed to register {descriptor}: {reason}")
