"""Core domain types shared by the template and visitor components."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    DuplicateRegistrationError,
    MissingHandlerError,
    RegistryError,
    RegistrySealedError,
    SkeletonDefinitionError,
    UnboundStepError,
    UnknownVariantError,
    ValidationError,
    VariantNotRegisteredError,
)

__all__ = [
    "ConfigurationError",
    "DomainException",
    "DuplicateRegistrationError",
    "MissingHandlerError",
    "RegistryError",
    "RegistrySealedError",
    "SkeletonDefinitionError",
    "UnboundStepError",
    "UnknownVariantError",
    "ValidationError",
    "VariantNotRegisteredError",
]
