from typing import Dict, List, Optional, Tuple, Type

from autoreg_di.application import DIContainer, add_services_from_modules
from autoreg_di.application.auto_registration import ConfigureCallback
from autoreg_di.application.scanner import TypeUniverse
from autoreg_di.domain import IRegistrationSink, Lifetime, ServiceDescriptor


class RecordingSink(IRegistrationSink):
    """Registration sink that records descriptors instead of constructing anything.

    Useful for asserting what a scan would register without building a
    container.

    Attributes:
        descriptors: Every descriptor received, in arrival order.

    Example:
        >>> sink = add_services_from_modules(RecordingSink(), "myapp.services")
        >>> assert (IUserRepository, SqlUserRepository, Lifetime.SCOPED) in sink.triples()
    """

    def __init__(self) -> None:
        self.descriptors: List[ServiceDescriptor] = []

    def register(self, service_type: Type, implementation_type: Type, lifetime: Lifetime) -> None:
        self.descriptors.append(
            ServiceDescriptor(
                service_type=service_type,
                implementation_type=implementation_type,
                lifetime=lifetime,
            )
        )

    def triples(self) -> List[Tuple[Type, Type, Lifetime]]:
        """Return the recorded descriptors as (service, implementation, lifetime) tuples."""
        return [(d.service_type, d.implementation_type, d.lifetime) for d in self.descriptors]

    def for_service(self, service_type: Type) -> List[ServiceDescriptor]:
        """Return the descriptors registered under a service type."""
        return [d for d in self.descriptors if d.service_type is service_type]

    def for_implementation(self, implementation_type: Type) -> List[ServiceDescriptor]:
        """Return the descriptors registered for an implementation class."""
        return [d for d in self.descriptors if d.implementation_type is implementation_type]

    def by_implementation(self) -> Dict[Type, List[ServiceDescriptor]]:
        """Group the recorded descriptors by implementation class."""
        grouped: Dict[Type, List[ServiceDescriptor]] = {}
        for descriptor in self.descriptors:
            grouped.setdefault(descriptor.implementation_type, []).append(descriptor)
        return grouped

    def clear(self) -> None:
        self.descriptors.clear()


def create_scanned_container(
    *universes: TypeUniverse,
    configure: Optional[ConfigureCallback] = None,
) -> DIContainer:
    """Create a container populated by scanning the given universes.

    Example:
        >>> container = create_scanned_container([TransientOperation, ScopedOperation])
        >>> with container.create_scope() as scope:
        ...     scope.resolve(IScopedOperation)
    """
    return add_services_from_modules(DIContainer(), *universes, configure=configure)
