import inspect
from typing import Any, Dict, Type, get_type_hints

from autoreg_di.domain import DIException, IContainer, IResolver, UnresolvableError


class DependencyResolver(IResolver):
    """Constructs classes by resolving their constructor parameters from type hints.

    Parameters with default values and ``*args``/``**kwargs`` are left alone;
    every other parameter must carry a type hint the container can resolve.
    """

    def resolve_dependencies(self, dependency_type: Type, container: IContainer) -> Any:
        """Resolve all constructor dependencies and create instance.

        Args:
            dependency_type: The type to instantiate.
            container: The container to resolve dependencies from.

        Returns:
            Instance with all dependencies injected.

        Raises:
            UnresolvableError: If the type is abstract, a parameter lacks a type
                hint, or a parameter cannot be resolved.
            CircularDependencyError: If constructing the type requires itself.

        Example:
            >>> class UserService:
            ...     def __init__(self, repository: IUserRepository):
            ...         self.repository = repository
            >>>
            >>> resolver = DependencyResolver()
            >>> instance = resolver.resolve_dependencies(UserService, container)
        """
        if inspect.isabstract(dependency_type):
            raise UnresolvableError(
                dependency_type,
                "Abstract types must be registered before they can be resolved.",
            )

        try:
            kwargs = self._resolve_parameters(dependency_type, container)
            return dependency_type(**kwargs)
        except DIException:
            raise
        except Exception as e:
            raise UnresolvableError(
                dependency_type,
                f"Failed to auto-wire constructor for {dependency_type}: {e}",
            ) from e

    @staticmethod
    def _resolve_parameters(dependency_type: Type, container: IContainer) -> Dict[str, Any]:
        signature = inspect.signature(dependency_type.__init__)
        type_hints = get_type_hints(dependency_type.__init__)

        kwargs = {}
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue

            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            # Defaults win over injection
            if param.default is not inspect.Parameter.empty:
                continue

            if param_name not in type_hints:
                raise UnresolvableError(
                    dependency_type,
                    f"Parameter '{param_name}' lacks type hint and has no default value.",
                )

            try:
                kwargs[param_name] = container.resolve(type_hints[param_name])
            except UnresolvableError as e:
                raise UnresolvableError(
                    dependency_type,
                    f"Failed to resolve dependency for parameter '{param_name}': {e}",
                ) from e

        return kwargs
