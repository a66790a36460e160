from typing import Any, Callable, Dict, Optional

from autoreg_di.domain import (
    DIException,
    ILifetimeManager,
    Lifetime,
    Registration,
    UnresolvableError,
)


class LifetimeManager(ILifetimeManager):
    """Manages instance lifetimes for singleton, transient, and scoped dependencies.

    Instances are cached per registration rather than per type, so the same
    implementation registered for two services yields two singletons, one
    per registration.

    Attributes:
        _singleton_cache: Cache for singleton instances, shared by a root container and its scopes.
        _scoped_cache: Cache for scoped instances, owned by a single scope.
    """

    def __init__(self, parent_singleton_cache: Optional[Dict[Registration, Any]] = None) -> None:
        """Initialize the lifetime manager.

        Args:
            parent_singleton_cache: Singleton cache of the root container, for scoped containers.
        """
        if parent_singleton_cache is not None:
            self._singleton_cache: Dict[Registration, Any] = parent_singleton_cache
        else:
            self._singleton_cache = {}
        self._scoped_cache: Dict[Registration, Any] = {}

    def get_or_create(self, registration: Registration, factory: Callable[[], Any]) -> Any:
        """Get existing instance or create new one based on lifetime.

        Args:
            registration: Registration carrying the lifetime.
            factory: Function to create new instance if needed.

        Returns:
            Instance according to lifetime rules:
            - Singleton: Returns cached instance or creates and caches new one
            - Scoped: Returns cached instance within scope or creates new one
            - Transient: Always creates new instance
        """
        if registration.lifetime == Lifetime.SINGLETON:
            return self._cached(self._singleton_cache, registration, factory)

        if registration.lifetime == Lifetime.SCOPED:
            return self._cached(self._scoped_cache, registration, factory)

        return self._create(registration, factory)

    def _cached(self, cache: Dict[Registration, Any], registration: Registration, factory: Callable[[], Any]) -> Any:
        if registration not in cache:
            cache[registration] = self._create(registration, factory)
        return cache[registration]

    @staticmethod
    def _create(registration: Registration, factory: Callable[[], Any]) -> Any:
        try:
            return factory()
        except DIException:
            raise
        except Exception as e:
            raise UnresolvableError(registration.dependency_type, f"Failed to create instance: {str(e)}") from e

    def clear_cache(self) -> None:
        """Clear all cached instances (singletons and scoped)."""
        self._singleton_cache.clear()
        self._scoped_cache.clear()

    def clear_scoped_cache(self) -> None:
        """Clear only the scoped instance cache.

        Called when a scope ends (e.g., end of a unit of work).
        """
        self._scoped_cache.clear()

    def get_singleton_cache(self) -> Dict[Registration, Any]:
        """Get reference to singleton cache for scope inheritance."""
        return self._singleton_cache
