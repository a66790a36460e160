"""Application layer - Discovery of candidate implementation types."""

import importlib
import inspect
import logging
import pkgutil
from abc import ABC
from types import ModuleType
from typing import Any, Callable, Generic, Iterable, Iterator, List, Protocol, Type, Union

from autoreg_di.domain import CandidateType, ScanError, get_markers

logger = logging.getLogger(__name__)

TypeUniverse = Union[ModuleType, str, Iterable[Type[Any]]]

_NEVER_CAPABILITIES = (object, ABC, Protocol, Generic)


def is_abstraction(candidate: Type[Any]) -> bool:
    """Tell whether a base class is an abstraction services can be registered under.

    Protocols, classes with abstract methods, and classes deriving directly
    from ``ABC`` qualify. ``object``, ``ABC``, ``Protocol`` and ``Generic``
    themselves never do.
    """
    if candidate in _NEVER_CAPABILITIES:
        return False
    if getattr(candidate, "_is_protocol", False):
        return True
    return inspect.isabstract(candidate) or ABC in candidate.__bases__


class TypeScanner:
    """Enumerates candidate types and introspects their capabilities and markers.

    A type universe is a module, a dotted module name, or an explicit iterable
    of classes. Scanning is lazy and keeps no state between calls, so every
    call to ``scan`` enumerates the universes again.

    Failures are fail-fast: anything that prevents a universe or one of its
    classes from being introspected raises ScanError.

    Attributes:
        _capability_filter: Predicate selecting which base classes count as capabilities.

    Example:
        >>> scanner = TypeScanner()
        >>> for candidate in scanner.scan("myapp.services", [ExtraService]):
        ...     print(candidate.name, candidate.capabilities)
    """

    def __init__(self, capability_filter: Callable[[Type[Any]], bool] = is_abstraction) -> None:
        self._capability_filter = capability_filter

    def scan(self, *universes: TypeUniverse) -> Iterator[CandidateType]:
        """Yield one CandidateType per class found in the given universes.

        Classes without capabilities or without markers are yielded too.

        Raises:
            ScanError: If a universe or one of its classes cannot be introspected.
        """
        for universe in universes:
            types = self._enumerate(universe)
            logger.debug("Scanning %d types from %r", len(types), universe)
            for implementation_type in types:
                yield self.inspect_type(implementation_type)

    def scan_package(self, package: Union[ModuleType, str], include_private: bool = False) -> Iterator[CandidateType]:
        """Scan a package and every module below it."""
        yield from self.scan(*self.iter_package_modules(package, include_private))

    def inspect_type(self, implementation_type: Type[Any]) -> CandidateType:
        """Build the CandidateType record for one class.

        Raises:
            ScanError: If the class cannot be introspected.
        """
        try:
            capabilities = tuple(
                base for base in inspect.getmro(implementation_type)[1:] if self._capability_filter(base)
            )
            markers = get_markers(implementation_type)
        except Exception as e:
            raise ScanError(implementation_type, f"introspection failed: {e}") from e

        return CandidateType(
            name=f"{implementation_type.__module__}.{implementation_type.__qualname__}",
            implementation_type=implementation_type,
            capabilities=capabilities,
            markers=markers,
        )

    def iter_package_modules(
        self, package: Union[ModuleType, str], include_private: bool = False
    ) -> Iterator[ModuleType]:
        """Import a package and yield it followed by all of its submodules.

        Submodules and subpackages whose name starts with an underscore are
        skipped unless ``include_private`` is set. Skipped modules are never
        imported, and neither is anything below a skipped subpackage.

        Raises:
            ScanError: If the package or one of its walked submodules fails to import.
        """
        if isinstance(package, str):
            package = self._import(package)

        yield package
        yield from self._walk(package, include_private)

    def _walk(self, package: ModuleType, include_private: bool) -> Iterator[ModuleType]:
        package_path = getattr(package, "__path__", None)
        if package_path is None:
            return

        for module_info in pkgutil.iter_modules(package_path, prefix=f"{package.__name__}."):
            if not include_private and module_info.name.rpartition(".")[2].startswith("_"):
                continue
            module = self._import(module_info.name)
            yield module
            if module_info.ispkg:
                yield from self._walk(module, include_private)

    def _enumerate(self, universe: TypeUniverse) -> List[Type[Any]]:
        if isinstance(universe, str):
            universe = self._import(universe)

        if isinstance(universe, ModuleType):
            return self._module_types(universe)

        try:
            members = list(universe)
        except TypeError as e:
            raise ScanError(universe, "expected a module, a module name or an iterable of classes") from e

        for member in members:
            if not inspect.isclass(member):
                raise ScanError(universe, f"{member!r} is not a class")
        return members

    @staticmethod
    def _module_types(module: ModuleType) -> List[Type[Any]]:
        try:
            members = inspect.getmembers(module, inspect.isclass)
        except Exception as e:
            raise ScanError(module.__name__, f"cannot list module members: {e}") from e

        # Re-exported classes belong to the module that defines them; aliases repeat a class
        return list(dict.fromkeys(cls for _, cls in members if cls.__module__ == module.__name__))

    @staticmethod
    def _import(module_name: str) -> ModuleType:
        try:
            return importlib.import_module(module_name)
        except Exception as e:
            raise ScanError(module_name, f"import failed: {e}") from e
