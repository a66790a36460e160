"""
Application layer - Use cases and orchestration.

This layer scans type universes, classifies what it finds and hands the
resulting descriptors to a registration sink. It also holds the reference
container consuming those registrations. It depends only on the Domain layer.
"""

from .auto_registration import add_services_from_modules, add_services_from_package, build_configuration
from .circular_detector import CircularDependencyDetector
from .configuration import MarkerConfigurationBuilder
from .container import DIContainer
from .descriptor_builder import DescriptorBuilder
from .lifetime_manager import LifetimeManager
from .resolver import DependencyResolver
from .scanner import TypeScanner, TypeUniverse, is_abstraction

__all__ = [
    "add_services_from_modules",
    "add_services_from_package",
    "build_configuration",
    "MarkerConfigurationBuilder",
    "TypeScanner",
    "TypeUniverse",
    "is_abstraction",
    "DescriptorBuilder",
    "DIContainer",
    "DependencyResolver",
    "LifetimeManager",
    "CircularDependencyDetector",
]
