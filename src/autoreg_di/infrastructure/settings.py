from typing import Any, Optional

from pydantic import Field, ImportString
from pydantic_settings import BaseSettings, SettingsConfigDict

from autoreg_di.application import MarkerConfigurationBuilder
from autoreg_di.domain import MarkerConfiguration


class AutoRegistrationSettings(BaseSettings):
    """Marker overrides read from the environment.

    Each field holds an import string (``package.module:attribute``) naming
    the marker object to use for a lifetime. Unset fields keep whatever the
    base configuration says.

    Environment variables:
        AUTOREG_DI_TRANSIENT_MARKER
        AUTOREG_DI_SCOPED_MARKER
        AUTOREG_DI_SINGLETON_MARKER

    Example:
        >>> # AUTOREG_DI_SCOPED_MARKER=myapp.markers:request_bound
        >>> configuration = AutoRegistrationSettings().to_marker_configuration()
        >>> add_services_from_modules(container, "myapp.services", configuration=configuration)
    """

    model_config = SettingsConfigDict(env_prefix="AUTOREG_DI_", frozen=True)

    transient_marker: Optional[ImportString[Any]] = Field(
        default=None,
        description="Import string of the marker selecting transient services.",
    )
    scoped_marker: Optional[ImportString[Any]] = Field(
        default=None,
        description="Import string of the marker selecting scoped services.",
    )
    singleton_marker: Optional[ImportString[Any]] = Field(
        default=None,
        description="Import string of the marker selecting singleton services.",
    )

    def apply(self, builder: MarkerConfigurationBuilder) -> MarkerConfigurationBuilder:
        """Apply the configured overrides to a builder."""
        if self.transient_marker is not None:
            builder.use_transient_marker(self.transient_marker)
        if self.scoped_marker is not None:
            builder.use_scoped_marker(self.scoped_marker)
        if self.singleton_marker is not None:
            builder.use_singleton_marker(self.singleton_marker)
        return builder

    def to_marker_configuration(self, base: Optional[MarkerConfiguration] = None) -> MarkerConfiguration:
        """Return ``base`` (or the defaults) with the environment overrides applied."""
        return self.apply(MarkerConfigurationBuilder(base)).build()
