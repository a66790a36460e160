from enum import Enum


class Lifetime(str, Enum):
    """Defines the lifetime of a registered service.

    Members are declared in classification precedence order: when a class
    carries markers for more than one lifetime, the first member listed
    here wins.

    Attributes:
        TRANSIENT: New instance created on each resolution.
        SCOPED: Single instance per scope (e.g., per unit of work).
        SINGLETON: Single instance shared across the entire container.
    """

    TRANSIENT = "transient"
    SCOPED = "scoped"
    SINGLETON = "singleton"

    def __str__(self) -> str:
        return self.value
