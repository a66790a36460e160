"""
Domain layer - Core models and rules for convention-based registration.

This layer contains lifetimes, markers, descriptors and the interfaces
the other layers implement. It has no dependencies on other layers.
"""

from .enums import Lifetime
from .exceptions import (
    CircularDependencyError,
    DIException,
    LifetimeError,
    RegistrationError,
    ScanError,
    ScopeError,
    UnresolvableError,
)
from .interfaces import IContainer, ILifetimeManager, IRegistrationSink, IResolver
from .markers import (
    ServiceMarker,
    attach_markers,
    get_markers,
    scoped_service,
    singleton_service,
    transient_service,
)
from .models import (
    CandidateType,
    MarkerConfiguration,
    Registration,
    ServiceDescriptor,
    coerce_lifetime,
)

# Rebuild Pydantic models to resolve forward references
Registration.model_rebuild()

__all__ = [
    # Enums
    "Lifetime",
    # Exceptions
    "DIException",
    "CircularDependencyError",
    "UnresolvableError",
    "LifetimeError",
    "ScopeError",
    "ScanError",
    "RegistrationError",
    # Interfaces
    "IRegistrationSink",
    "IContainer",
    "IResolver",
    "ILifetimeManager",
    # Markers
    "ServiceMarker",
    "transient_service",
    "scoped_service",
    "singleton_service",
    "attach_markers",
    "get_markers",
    # Models
    "MarkerConfiguration",
    "CandidateType",
    "ServiceDescriptor",
    "Registration",
    "coerce_lifetime",
]
