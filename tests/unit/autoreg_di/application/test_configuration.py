"""Unit tests for MarkerConfigurationBuilder."""

import pytest

from autoreg_di.application.configuration import MarkerConfigurationBuilder
from autoreg_di.domain import (
    Lifetime,
    LifetimeError,
    MarkerConfiguration,
    ServiceMarker,
    scoped_service,
    singleton_service,
    transient_service,
)

request_bound = ServiceMarker("request_bound")
per_call = ServiceMarker("per_call")


class TestMarkerConfigurationBuilder:
    """Test cases for MarkerConfigurationBuilder."""

    def test_no_calls_keep_defaults(self):
        """Test that building without overrides yields the built-in markers."""
        assert MarkerConfigurationBuilder().build() == MarkerConfiguration()

    def test_override_replaces_only_that_lifetime(self):
        """Test that overriding one lifetime leaves the others alone."""
        configuration = MarkerConfigurationBuilder().use_scoped_marker(request_bound).build()

        assert configuration.scoped_marker is request_bound
        assert configuration.transient_marker is transient_service
        assert configuration.singleton_marker is singleton_service

    def test_last_call_wins(self):
        """Test that the last override for a lifetime is the effective one."""
        configuration = (
            MarkerConfigurationBuilder()
            .use_transient_marker(per_call)
            .use_transient_marker(request_bound)
            .build()
        )
        assert configuration.transient_marker is request_bound

    @pytest.mark.parametrize(
        "method, lifetime",
        [
            ("use_transient_marker", Lifetime.TRANSIENT),
            ("use_scoped_marker", Lifetime.SCOPED),
            ("use_singleton_marker", Lifetime.SINGLETON),
        ],
    )
    def test_shortcuts(self, method, lifetime):
        """Test that each shortcut targets its lifetime."""
        builder = MarkerConfigurationBuilder()
        assert getattr(builder, method)(per_call) is builder
        assert builder.build().marker_for(lifetime) is per_call

    def test_use_marker_by_lifetime(self):
        """Test the generic override."""
        configuration = MarkerConfigurationBuilder().use_marker(Lifetime.SINGLETON, "app-wide").build()
        assert configuration.singleton_marker == "app-wide"

    def test_use_marker_rejects_invalid_lifetime(self):
        """Test that an unknown lifetime raises LifetimeError."""
        with pytest.raises(LifetimeError):
            MarkerConfigurationBuilder().use_marker("forever", per_call)

    def test_layers_on_base(self):
        """Test that a builder starts from a base configuration."""
        base = MarkerConfiguration(scoped_marker=request_bound)
        configuration = MarkerConfigurationBuilder(base).use_transient_marker(per_call).build()

        assert configuration.scoped_marker is request_bound
        assert configuration.transient_marker is per_call
        assert base.transient_marker is transient_service

    def test_built_configuration_is_a_snapshot(self):
        """Test that later builder calls do not change a built configuration."""
        builder = MarkerConfigurationBuilder()
        configuration = builder.build()

        builder.use_scoped_marker(request_bound)

        assert configuration.scoped_marker is scoped_service
        assert builder.build().scoped_marker is request_bound

    def test_colliding_markers_are_accepted(self):
        """Test that one marker may be assigned to two lifetimes."""
        configuration = MarkerConfigurationBuilder().use_singleton_marker(transient_service).build()
        assert configuration.classify({transient_service}) == Lifetime.TRANSIENT
