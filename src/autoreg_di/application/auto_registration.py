"""Application layer - Entry points for convention-based registration."""

import logging
from types import ModuleType
from typing import Callable, Optional, TypeVar, Union

from autoreg_di.application.configuration import MarkerConfigurationBuilder
from autoreg_di.application.descriptor_builder import DescriptorBuilder
from autoreg_di.application.scanner import TypeScanner, TypeUniverse
from autoreg_di.domain import IRegistrationSink, MarkerConfiguration

SinkT = TypeVar("SinkT", bound=IRegistrationSink)

ConfigureCallback = Callable[[MarkerConfigurationBuilder], object]

logger = logging.getLogger(__name__)


def build_configuration(
    configure: Optional[ConfigureCallback] = None,
    configuration: Optional[MarkerConfiguration] = None,
) -> MarkerConfiguration:
    """Layer builder overrides on top of a base configuration and freeze the result.

    Args:
        configure: Callback receiving the builder, e.g. ``lambda b: b.use_scoped_marker(m)``.
        configuration: Base configuration. Defaults to the built-in markers.
    """
    builder = MarkerConfigurationBuilder(configuration)
    if configure is not None:
        configure(builder)
    return builder.build()


def add_services_from_modules(
    sink: SinkT,
    *universes: TypeUniverse,
    configure: Optional[ConfigureCallback] = None,
    configuration: Optional[MarkerConfiguration] = None,
    scanner: Optional[TypeScanner] = None,
) -> SinkT:
    """Register every marked class found in the given type universes.

    Each marked class is registered once per abstraction it implements,
    under the lifetime its marker selects.

    Args:
        sink: Registration sink, usually a DIContainer.
        *universes: Modules, module names or iterables of classes to scan.
        configure: Optional callback adjusting the marker configuration.
        configuration: Base marker configuration, e.g. from AutoRegistrationSettings.
        scanner: Scanner to use. Defaults to a TypeScanner with the default capability filter.

    Returns:
        The sink, for chaining.

    Raises:
        ScanError: If a universe cannot be scanned.
        RegistrationError: If the sink rejects a descriptor.

    Example:
        >>> container = add_services_from_modules(
        ...     DIContainer(),
        ...     "myapp.services",
        ...     configure=lambda builder: builder.use_scoped_marker(request_bound),
        ... )
    """
    frozen = build_configuration(configure, configuration)
    scanner = scanner or TypeScanner()

    count = DescriptorBuilder(frozen).register_all(scanner.scan(*universes), sink)
    logger.info("Registered %d services from %d type universes", count, len(universes))
    return sink


def add_services_from_package(
    sink: SinkT,
    package: Union[ModuleType, str],
    configure: Optional[ConfigureCallback] = None,
    configuration: Optional[MarkerConfiguration] = None,
    include_private: bool = False,
    scanner: Optional[TypeScanner] = None,
) -> SinkT:
    """Register every marked class found in a package and its submodules.

    See ``add_services_from_modules`` for the registration rules.
    """
    scanner = scanner or TypeScanner()
    modules = list(scanner.iter_package_modules(package, include_private))
    return add_services_from_modules(
        sink,
        *modules,
        configure=configure,
        configuration=configuration,
        scanner=scanner,
    )
