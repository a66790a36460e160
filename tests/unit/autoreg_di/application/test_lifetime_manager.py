"""Unit tests for LifetimeManager."""

import pytest

from autoreg_di.application.lifetime_manager import LifetimeManager
from autoreg_di.domain import ILifetimeManager, Lifetime, Registration, ScopeError, UnresolvableError


class Service:
    pass


def make_registration(lifetime):
    return Registration(dependency_type=Service, builder=lambda c: Service(), lifetime=lifetime)


class TestLifetimeManager:
    """Test cases for LifetimeManager."""

    def test_manager_implements_interface(self):
        """Test that LifetimeManager implements ILifetimeManager."""
        assert isinstance(LifetimeManager(), ILifetimeManager)

    def test_transient_creates_every_time(self):
        """Test that transient registrations never reuse instances."""
        manager = LifetimeManager()
        registration = make_registration(Lifetime.TRANSIENT)

        assert manager.get_or_create(registration, Service) is not manager.get_or_create(registration, Service)

    @pytest.mark.parametrize("lifetime", [Lifetime.SCOPED, Lifetime.SINGLETON])
    def test_cached_lifetimes_reuse_instance(self, lifetime):
        """Test that scoped and singleton registrations reuse their instance."""
        manager = LifetimeManager()
        registration = make_registration(lifetime)

        assert manager.get_or_create(registration, Service) is manager.get_or_create(registration, Service)

    def test_cache_is_per_registration(self):
        """Test that two singleton registrations of one type get separate instances."""
        manager = LifetimeManager()
        first = make_registration(Lifetime.SINGLETON)
        second = make_registration(Lifetime.SINGLETON)

        assert manager.get_or_create(first, Service) is not manager.get_or_create(second, Service)

    def test_shared_singleton_cache(self):
        """Test that a scope manager sees the parent's singletons but not its scoped instances."""
        parent = LifetimeManager()
        singleton = make_registration(Lifetime.SINGLETON)
        scoped = make_registration(Lifetime.SCOPED)
        parent_singleton = parent.get_or_create(singleton, Service)
        parent_scoped = parent.get_or_create(scoped, Service)

        child = LifetimeManager(parent.get_singleton_cache())

        assert child.get_or_create(singleton, Service) is parent_singleton
        assert child.get_or_create(scoped, Service) is not parent_scoped

    def test_factory_errors_are_wrapped(self):
        """Test that arbitrary factory errors become UnresolvableError."""
        manager = LifetimeManager()

        def factory():
            raise ValueError("bad config")

        with pytest.raises(UnresolvableError, match="Failed to create instance: bad config"):
            manager.get_or_create(make_registration(Lifetime.SINGLETON), factory)

    def test_di_errors_propagate_unchanged(self):
        """Test that DI errors raised by the factory are not wrapped."""
        manager = LifetimeManager()

        def factory():
            raise ScopeError("outside scope")

        with pytest.raises(ScopeError):
            manager.get_or_create(make_registration(Lifetime.TRANSIENT), factory)

    def test_failed_creation_is_not_cached(self):
        """Test that a failing factory leaves the cache empty."""
        manager = LifetimeManager()
        registration = make_registration(Lifetime.SINGLETON)

        def factory():
            raise ValueError("nope")

        with pytest.raises(UnresolvableError):
            manager.get_or_create(registration, factory)
        assert registration not in manager.get_singleton_cache()

    def test_clear_scoped_cache_keeps_singletons(self):
        """Test that ending a scope drops only scoped instances."""
        manager = LifetimeManager()
        singleton = make_registration(Lifetime.SINGLETON)
        scoped = make_registration(Lifetime.SCOPED)
        kept = manager.get_or_create(singleton, Service)
        dropped = manager.get_or_create(scoped, Service)

        manager.clear_scoped_cache()

        assert manager.get_or_create(singleton, Service) is kept
        assert manager.get_or_create(scoped, Service) is not dropped

    def test_clear_cache(self):
        """Test that clear_cache drops everything."""
        manager = LifetimeManager()
        singleton = make_registration(Lifetime.SINGLETON)
        first = manager.get_or_create(singleton, Service)

        manager.clear_cache()

        assert manager.get_or_create(singleton, Service) is not first
