"""Application layer - Fluent construction of marker configurations."""

from typing import Any, Dict, Optional

from autoreg_di.domain import Lifetime, MarkerConfiguration, coerce_lifetime


class MarkerConfigurationBuilder:
    """Fluent builder layering marker overrides on top of a base configuration.

    The builder is used once, before scanning starts. ``build`` hands out a
    frozen copy, so calls made after it never affect a running scan.

    Attributes:
        _markers: Current marker per lifetime.

    Example:
        >>> configuration = (
        ...     MarkerConfigurationBuilder()
        ...     .use_scoped_marker(request_bound)
        ...     .build()
        ... )
    """

    def __init__(self, base: Optional[MarkerConfiguration] = None) -> None:
        """Initialize the builder.

        Args:
            base: Configuration to start from. Defaults to the built-in markers.
        """
        self._markers: Dict[Lifetime, Any] = (base or MarkerConfiguration()).as_mapping()

    def use_marker(self, lifetime: Lifetime, marker: Any) -> "MarkerConfigurationBuilder":
        """Replace the marker for one lifetime, leaving the others untouched.

        Any object is accepted, including one already used for another
        lifetime; the resulting ambiguity is settled by classification precedence.

        Raises:
            LifetimeError: If ``lifetime`` is not a valid Lifetime.
        """
        self._markers[coerce_lifetime(lifetime)] = marker
        return self

    def use_transient_marker(self, marker: Any) -> "MarkerConfigurationBuilder":
        return self.use_marker(Lifetime.TRANSIENT, marker)

    def use_scoped_marker(self, marker: Any) -> "MarkerConfigurationBuilder":
        return self.use_marker(Lifetime.SCOPED, marker)

    def use_singleton_marker(self, marker: Any) -> "MarkerConfigurationBuilder":
        return self.use_marker(Lifetime.SINGLETON, marker)

    def build(self) -> MarkerConfiguration:
        """Return a frozen configuration with the current markers."""
        return MarkerConfiguration(
            transient_marker=self._markers[Lifetime.TRANSIENT],
            scoped_marker=self._markers[Lifetime.SCOPED],
            singleton_marker=self._markers[Lifetime.SINGLETON],
        )
