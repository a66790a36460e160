"""Application layer - Classification of candidates into service descriptors."""

import logging
from typing import Iterable, List, Optional

from autoreg_di.domain import (
    CandidateType,
    DIException,
    IRegistrationSink,
    Lifetime,
    MarkerConfiguration,
    RegistrationError,
    ServiceDescriptor,
)

logger = logging.getLogger(__name__)


class DescriptorBuilder:
    """Turns candidate types into service descriptors and registers them.

    A candidate is classified by matching its markers against the
    configuration in precedence order TRANSIENT, SCOPED, SINGLETON. A class
    tagged for several lifetimes is not an error: the first match wins and a
    warning is logged. Classes with no configured marker are skipped.

    Attributes:
        _configuration: Frozen marker configuration used for the whole run.
    """

    def __init__(self, configuration: MarkerConfiguration) -> None:
        self._configuration = configuration

    @property
    def configuration(self) -> MarkerConfiguration:
        return self._configuration

    def classify(self, candidate: CandidateType) -> Optional[Lifetime]:
        """Return the lifetime of a candidate, or None if it carries no configured marker."""
        matches = self._configuration.matching_lifetimes(candidate.markers)
        if not matches:
            return None

        if len(matches) > 1:
            logger.warning(
                "%s is marked for several lifetimes (%s); registering it as %s",
                candidate.name,
                ", ".join(str(lifetime) for lifetime in matches),
                matches[0],
            )
        return matches[0]

    def build(self, candidate: CandidateType) -> List[ServiceDescriptor]:
        """Expand a candidate into one descriptor per capability.

        Returns an empty list for unmarked candidates and for marked candidates
        without capabilities, which cannot be resolved by abstraction.
        """
        lifetime = self.classify(candidate)
        if lifetime is None:
            return []

        if not candidate.capabilities:
            logger.debug("%s is marked %s but implements no abstraction; skipped", candidate.name, lifetime)
            return []

        return [
            ServiceDescriptor(
                service_type=capability,
                implementation_type=candidate.implementation_type,
                lifetime=lifetime,
            )
            for capability in candidate.capabilities
        ]

    def register_all(self, candidates: Iterable[CandidateType], sink: IRegistrationSink) -> int:
        """Register the descriptors of every candidate with a sink.

        Args:
            candidates: Candidates to classify, typically a TypeScanner scan.
            sink: Receives one ``register`` call per descriptor.

        Returns:
            Number of descriptors registered.

        Raises:
            RegistrationError: If the sink rejects a descriptor with a non-DI error.
        """
        count = 0
        for candidate in candidates:
            for descriptor in self.build(candidate):
                self._register(descriptor, sink)
                count += 1
        return count

    @staticmethod
    def _register(descriptor: ServiceDescriptor, sink: IRegistrationSink) -> None:
        try:
            sink.register(descriptor.service_type, descriptor.implementation_type, descriptor.lifetime)
        except DIException:
            raise
        except Exception as e:
            raise RegistrationError(descriptor, str(e)) from e
        logger.debug("Registered %s", descriptor)
