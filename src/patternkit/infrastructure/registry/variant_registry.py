"""Variant Registry - named registry shared by the template and visitor components.

A registry maps a variant name (a report variant name, an element tag or an
operation name) to the registered item. Once sealed it represents a closed
variant set: membership is fixed and further registration fails.
"""

import threading
from typing import Dict, Generic, Iterator, List, TypeVar

from patternkit.domain.core.exceptions import (
    DuplicateRegistrationError,
    RegistrySealedError,
    VariantNotRegisteredError,
)
from patternkit.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class VariantRegistry(Generic[T]):
    """
    Thread-safe registry of named variants.

    Names keep their registration order, so ``get_registered_names`` is
    deterministic.
    """

    def __init__(self, name: str = "variant registry"):
        """
        Initialize variant registry.

        Args:
            name: Human readable registry name used in error messages
        """
        self.name = name
        self._registrations: Dict[str, T] = {}
        self._sealed = False
        self._registration_lock = threading.RLock()
        self._logger = get_logger(__name__)

    def register(self, name: str, item: T) -> None:
        """
        Register an item under a name.

        Raises:
            RegistrySealedError: If the registry has been sealed
            DuplicateRegistrationError: If the name is already registered
        """
        with self._registration_lock:
            if self._sealed:
                raise RegistrySealedError(self.name, name)
            if name in self._registrations:
                raise DuplicateRegistrationError(self.name, name)
            self._registrations[name] = item
            self._logger.debug("Registered variant", registry=self.name, variant=name)

    def unregister(self, name: str) -> T:
        """Remove and return a registration."""
        with self._registration_lock:
            if self._sealed:
                raise RegistrySealedError(self.name, name, action="unregister")
            if name not in self._registrations:
                raise VariantNotRegisteredError(self.name, name)
            return self._registrations.pop(name)

    def get(self, name: str) -> T:
        """Get a registered item by name."""
        with self._registration_lock:
            try:
                return self._registrations[name]
            except KeyError:
                raise VariantNotRegisteredError(self.name, name) from None

    def is_registered(self, name: str) -> bool:
        """Check whether a name is registered."""
        with self._registration_lock:
            return name in self._registrations

    def get_registered_names(self) -> List[str]:
        """Get registered names in registration order."""
        with self._registration_lock:
            return list(self._registrations)

    def seal(self) -> None:
        """Close the registry to further changes."""
        with self._registration_lock:
            self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def clear_registrations(self) -> None:
        """
        Clear all registrations.

        Raises:
            RegistrySealedError: If the registry has been sealed
        """
        with self._registration_lock:
            if self._sealed:
                raise RegistrySealedError(self.name, action="clear")
            self._registrations.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_registered_names())

    def __len__(self) -> int:
        with self._registration_lock:
            return len(self._registrations)
