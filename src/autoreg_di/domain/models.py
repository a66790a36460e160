from typing import TYPE_CHECKING, Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from autoreg_di.domain.enums import Lifetime
from autoreg_di.domain.exceptions import LifetimeError
from autoreg_di.domain.markers import scoped_service, singleton_service, transient_service

if TYPE_CHECKING:
    from autoreg_di.domain.interfaces import IContainer


class MarkerConfiguration(BaseModel):
    """Value object mapping each lifetime to the marker that selects it.

    All three entries are always present. The model is frozen; use
    MarkerConfigurationBuilder to derive a configuration with overrides.

    Attributes:
        transient_marker: Marker selecting Lifetime.TRANSIENT.
        scoped_marker: Marker selecting Lifetime.SCOPED.
        singleton_marker: Marker selecting Lifetime.SINGLETON.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    transient_marker: Any = Field(
        default_factory=lambda: transient_service,
        description="Marker identifying transient services.",
    )
    scoped_marker: Any = Field(
        default_factory=lambda: scoped_service,
        description="Marker identifying scoped services.",
    )
    singleton_marker: Any = Field(
        default_factory=lambda: singleton_service,
        description="Marker identifying singleton services.",
    )

    def marker_for(self, lifetime: Lifetime) -> Any:
        """Return the marker configured for a lifetime.

        Raises:
            LifetimeError: If ``lifetime`` is not a valid Lifetime.
        """
        return self.as_mapping()[coerce_lifetime(lifetime)]

    def as_mapping(self) -> Dict[Lifetime, Any]:
        """Return the lifetime to marker mapping, ordered by precedence."""
        return {
            Lifetime.TRANSIENT: self.transient_marker,
            Lifetime.SCOPED: self.scoped_marker,
            Lifetime.SINGLETON: self.singleton_marker,
        }

    def matching_lifetimes(self, markers: Iterable[Any]) -> List[Lifetime]:
        """Return every lifetime whose marker appears in ``markers``, in precedence order."""
        markers = list(markers)
        return [lifetime for lifetime, marker in self.as_mapping().items() if marker in markers]

    def classify(self, markers: Iterable[Any]) -> Optional[Lifetime]:
        """Resolve raw markers to a single lifetime.

        Precedence is TRANSIENT, then SCOPED, then SINGLETON: a class tagged
        with several configured markers gets the first matching lifetime.

        Returns:
            The lifetime, or None when no configured marker is present.
        """
        matches = self.matching_lifetimes(markers)
        return matches[0] if matches else None


class CandidateType(BaseModel):
    """A class discovered while scanning a type universe.

    Attributes:
        name: Qualified name of the class.
        implementation_type: The discovered class.
        capabilities: Abstractions the class satisfies, in MRO order.
        markers: Raw markers attached to the class, not yet resolved to a lifetime.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Qualified name of the discovered class.")
    implementation_type: Type = Field(..., description="The discovered class.")
    capabilities: Tuple[Type, ...] = Field(
        default=(),
        description="Abstractions implemented by the class.",
    )
    markers: FrozenSet[Any] = Field(
        default_factory=frozenset,
        description="Raw markers attached to the class.",
    )


class ServiceDescriptor(BaseModel):
    """Value object describing one service registration.

    Attributes:
        service_type: The abstraction callers resolve.
        implementation_type: The class that gets constructed.
        lifetime: How long the constructed instance lives.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    service_type: Type = Field(..., description="The abstraction being registered.")
    implementation_type: Type = Field(..., description="The implementation class.")
    lifetime: Lifetime = Field(..., description="The lifetime of the registered service.")

    def __str__(self) -> str:
        return f"{self.service_type.__name__} -> {self.implementation_type.__name__} ({self.lifetime})"


class Registration(BaseModel):
    """Value object representing a dependency registration inside the container.

    Attributes:
        dependency_type: The type being registered.
        builder: Factory function that receives container and returns instance.
        lifetime: How long the instance should live.
        implementation_type: The class the builder constructs, when known.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    dependency_type: Type = Field(..., description="The dependency type to be registered.")
    builder: Callable[["IContainer"], Any] = Field(
        ..., description="The builder function to create an instance of the class."
    )
    lifetime: Lifetime = Field(..., description="The lifetime of the registered dependency.")
    implementation_type: Optional[Type] = Field(
        default=None,
        description="The implementation class constructed by the builder.",
    )


def coerce_lifetime(lifetime: Any) -> Lifetime:
    """Convert a Lifetime or its string value into a Lifetime.

    Raises:
        LifetimeError: If the value does not name a lifetime.
    """
    try:
        return Lifetime(lifetime)
    except ValueError as e:
        raise LifetimeError(f"Invalid lifetime: {lifetime!r}") from e
