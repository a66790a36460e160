"""
autoreg-di: Convention-based service registration for dependency injection containers.

Public API exports for the autoreg-di package.
"""

# Application exports
from autoreg_di.application import (
    DescriptorBuilder,
    DIContainer,
    MarkerConfigurationBuilder,
    TypeScanner,
    add_services_from_modules,
    add_services_from_package,
)

# Domain exports
from autoreg_di.domain import (
    CandidateType,
    CircularDependencyError,
    DIException,
    IRegistrationSink,
    Lifetime,
    LifetimeError,
    MarkerConfiguration,
    RegistrationError,
    ScanError,
    ScopeError,
    ServiceDescriptor,
    ServiceMarker,
    UnresolvableError,
    attach_markers,
    get_markers,
    scoped_service,
    singleton_service,
    transient_service,
)

__version__ = "0.1.0"

__all__ = [
    # Registration
    "add_services_from_modules",
    "add_services_from_package",
    "MarkerConfigurationBuilder",
    "TypeScanner",
    "DescriptorBuilder",
    "IRegistrationSink",
    # Container
    "DIContainer",
    # Markers
    "ServiceMarker",
    "transient_service",
    "scoped_service",
    "singleton_service",
    "attach_markers",
    "get_markers",
    # Models
    "Lifetime",
    "MarkerConfiguration",
    "CandidateType",
    "ServiceDescriptor",
    # Exceptions
    "DIException",
    "CircularDependencyError",
    "UnresolvableError",
    "LifetimeError",
    "ScopeError",
    "ScanError",
    "RegistrationError",
]
