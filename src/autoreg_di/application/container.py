import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from autoreg_di.application.circular_detector import CircularDependencyDetector
from autoreg_di.application.lifetime_manager import LifetimeManager
from autoreg_di.application.resolver import DependencyResolver
from autoreg_di.domain import (
    IContainer,
    IResolver,
    Lifetime,
    Registration,
    ScopeError,
    coerce_lifetime,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DIContainer(IContainer):
    """Dependency injection container consuming service registrations.

    Implements the registration sink interface, so it can be passed straight
    to ``add_services_from_modules``. Several registrations may exist for one
    service type: ``resolve`` returns the last one, ``resolve_all`` all of them.

    Lifetimes:
        - Transient: a new instance on every resolve.
        - Scoped: one instance per scope container; the root container refuses them.
        - Singleton: one instance per registration, shared by the root and all its scopes.
          Singletons are always built by the root container, so they cannot capture
          a scoped instance.

    Attributes:
        _registry: Dictionary mapping dependency types to their registrations, oldest first.
        _root: The root container; itself for root containers.
        _resolver: Component responsible for auto-wiring dependencies.
        _lifetime_manager: Component managing instance lifetimes.
        _circular_detector: Component detecting circular dependencies.
        _is_scope: Whether this container was created by ``create_scope``.
    """

    def __init__(self, parent: Optional["DIContainer"] = None) -> None:
        """Initialize the container.

        Args:
            parent: Container this one is a scope of. Root containers pass nothing.
        """
        self._resolver: IResolver = DependencyResolver()
        self._is_scope = parent is not None

        if parent is None:
            self._root = self
            self._registry: Dict[Type, List[Registration]] = {}
            self._lifetime_manager = LifetimeManager()
            self._circular_detector = CircularDependencyDetector()
        else:
            self._root = parent._root
            self._registry = parent.get_registry_copy()
            self._lifetime_manager = LifetimeManager(parent._lifetime_manager.get_singleton_cache())
            # Shared so cycles running through root-built singletons are still seen
            self._circular_detector = parent._circular_detector

    def _add(self, registration: Registration) -> None:
        self._registry.setdefault(registration.dependency_type, []).append(registration)
        logger.debug(
            "Registered %s as %s",
            registration.dependency_type.__name__,
            registration.lifetime,
        )

    def register(self, service_type: Type, implementation_type: Type, lifetime: Lifetime) -> None:
        """Register an implementation class for a service type.

        The implementation is constructed by auto-wiring its constructor. Earlier
        registrations for the same service type are kept.

        Args:
            service_type: The abstraction callers resolve.
            implementation_type: The class to construct.
            lifetime: How long constructed instances live.

        Raises:
            LifetimeError: If ``lifetime`` is not a valid Lifetime.

        Example:
            >>> container.register(IUserRepository, SqlUserRepository, Lifetime.SCOPED)
        """
        self._add(
            Registration(
                dependency_type=service_type,
                builder=lambda c: c.create_instance(implementation_type),
                lifetime=coerce_lifetime(lifetime),
                implementation_type=implementation_type,
            )
        )

    def _resolve_registration(self, registration: Registration) -> Any:
        if registration.lifetime == Lifetime.SCOPED and not self._is_scope:
            raise ScopeError(
                f"Scoped dependency {registration.dependency_type.__name__} cannot be resolved "
                "from the root container. Resolve it from create_scope()."
            )

        builder_container = self._root if registration.lifetime == Lifetime.SINGLETON else self
        return self._lifetime_manager.get_or_create(registration, lambda: registration.builder(builder_container))

    def resolve(self, dependency_type: Type[T]) -> T:
        """Resolve and return an instance of the specified type.

        Uses the most recent registration for the type, or auto-wires concrete
        classes that were never registered.

        Args:
            dependency_type: The type to resolve.

        Returns:
            Instance of the requested type with all dependencies injected.

        Raises:
            UnresolvableError: If the dependency cannot be resolved.
            CircularDependencyError: If a circular dependency is detected.
            ScopeError: If a scoped dependency is resolved from the root container.
        """
        with self._circular_detector.track(dependency_type):
            registrations = self._registry.get(dependency_type)
            if registrations:
                return self._resolve_registration(registrations[-1])

            return self._resolver.resolve_dependencies(dependency_type, self)

    def resolve_all(self, dependency_type: Type[T]) -> List[T]:
        """Resolve one instance per registration of a type, in registration order.

        Returns an empty list when nothing is registered for the type.
        """
        with self._circular_detector.track(dependency_type):
            registrations = self._registry.get(dependency_type, [])
            return [self._resolve_registration(registration) for registration in registrations]

    def create_instance(self, implementation_type: Type[T]) -> T:
        """Construct an implementation class, auto-wiring its constructor."""
        return self._resolver.resolve_dependencies(implementation_type, self)

    def get_registrations(self, dependency_type: Type) -> List[Registration]:
        """Return every registration for a type, oldest first."""
        return list(self._registry.get(dependency_type, []))

    def get_registry_copy(self) -> Dict[Type, List[Registration]]:
        """Get a copy of the registry for scope inheritance."""
        return {dependency_type: list(entries) for dependency_type, entries in self._registry.items()}

    def create_scope(self) -> "DIContainer":
        """Create a child container for scoped lifetime.

        Scoped containers inherit parent registrations and singletons but keep
        their own cache of scoped instances.

        Returns:
            New container that inherits parent registrations.

        Example:
            >>> with container.create_scope() as scope:
            ...     unit_of_work = scope.resolve(IUnitOfWork)
            ...     assert unit_of_work is scope.resolve(IUnitOfWork)
        """
        return DIContainer(parent=self)

    def close(self) -> None:
        """Drop the instances cached by this scope."""
        self._lifetime_manager.clear_scoped_cache()

    def clear(self) -> None:
        """Clear all registrations and cached instances.

        On a scope only the scope's own instances are dropped; singletons
        belong to the root container.
        """
        self._registry.clear()
        if self._is_scope:
            self._lifetime_manager.clear_scoped_cache()
        else:
            self._lifetime_manager.clear_cache()
        self._circular_detector.clear()

    def __enter__(self) -> "DIContainer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.close()
        return False
