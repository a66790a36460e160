from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Type, TypeVar

from autoreg_di.domain.enums import Lifetime
from autoreg_di.domain.models import Registration

T = TypeVar("T")


class IRegistrationSink(ABC):
    """Abstract interface for anything that accepts service registrations.

    Implementations must accept several registrations for the same service
    type without raising.
    """

    @abstractmethod
    def register(self, service_type: Type, implementation_type: Type, lifetime: Lifetime) -> None:
        """Register an implementation for a service type.

        Args:
            service_type: The abstraction callers resolve.
            implementation_type: The class to construct.
            lifetime: How long constructed instances live.
        """


class IContainer(IRegistrationSink):
    """Abstract interface for dependency injection container operations."""

    @abstractmethod
    def resolve(self, dependency_type: Type[T]) -> T:
        """Resolve and return an instance of the requested class type.

        Args:
            dependency_type: The type to resolve.
        """

    @abstractmethod
    def resolve_all(self, dependency_type: Type[T]) -> List[T]:
        """Resolve one instance per registration of the requested type.

        Args:
            dependency_type: The type to resolve.
        """

    @abstractmethod
    def create_instance(self, implementation_type: Type[T]) -> T:
        """Construct an implementation, auto-wiring its constructor.

        Args:
            implementation_type: The concrete class to construct.
        """

    @abstractmethod
    def create_scope(self) -> "IContainer":
        """Create and return a new scoped container instance."""

    @abstractmethod
    def clear(self) -> None:
        """Clear all registrations and instances from the container."""

    @abstractmethod
    def get_registry_copy(self) -> Dict[Type, List[Registration]]:
        """Get a copy of the current registry of dependencies."""


class IResolver(ABC):
    """Abstract interface for dependency resolution operations."""

    @abstractmethod
    def resolve_dependencies(
        self,
        dependency_type: Type,
        container: IContainer,
    ) -> Any:
        """Resolve all constructor dependencies and create instance.

        Args:
            dependency_type: The type to resolve.
            container: The DI container to use for resolving dependencies.

        Returns:
            Instance with all dependencies injected.

        Raises:
            UnresolvableError: If a dependency cannot be resolved.
        """


class ILifetimeManager(ABC):
    """Abstract interface for managing dependency lifetimes."""

    @abstractmethod
    def get_or_create(
        self,
        registration: Registration,
        factory: Callable[[], Any],
    ) -> Any:
        """Get existing instance or create a new one based on lifetime.

        Args:
            registration: The registration describing the lifetime.
            factory: A callable to create a new instance if needed.
        """

    @abstractmethod
    def clear_cache(self) -> None:
        """Clear any cached instances managed by this lifetime manager."""

    @abstractmethod
    def clear_scoped_cache(self) -> None:
        """Clear only the scoped instances cache."""
