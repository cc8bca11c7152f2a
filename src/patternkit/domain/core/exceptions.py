# src/patternkit/domain/core/exceptions.py
from typing import Any, Iterable, List, Optional


class DomainException(Exception):
    """Base exception for all patternkit errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration or wiring."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class SkeletonDefinitionError(ValidationError):
    """Raised when an algorithm skeleton is malformed."""
    pass


class UnboundStepError(ConfigurationError):
    """Raised when a variant does not bind every variable step of its skeleton."""
    def __init__(self, variant: str, missing_steps: Iterable[str]):
        missing = list(missing_steps)
        super().__init__(
            f"Variant '{variant}' has no binding for step(s): {', '.join(missing)}",
            missing,
        )
        self.variant = variant
        self.missing_steps = missing


class MissingHandlerError(ConfigurationError):
    """Raised when an operation has no handler for an element variant."""
    def __init__(self, operation: str, tags: Iterable[str]):
        missing = list(tags)
        super().__init__(
            f"Operation '{operation}' has no handler for variant(s): {', '.join(missing)}",
            missing,
        )
        self.operation = operation
        self.tags = missing


class UnknownVariantError(ValidationError):
    """Raised when a variant tag lies outside a closed variant set."""
    def __init__(self, family: str, tags: Iterable[str]):
        unknown = list(tags)
        super().__init__(
            f"Variant(s) {', '.join(unknown)} not part of family '{family}'", unknown
        )
        self.family = family
        self.tags = unknown


class RegistryError(DomainException):
    """Base exception for variant registry errors."""
    def __init__(self, registry: str, message: str):
        super().__init__(message)
        self.registry = registry


class DuplicateRegistrationError(RegistryError):
    """Raised when a name is registered twice."""
    def __init__(self, registry: str, name: str):
        super().__init__(registry, f"'{name}' is already registered in {registry}")
        self.name = name


class VariantNotRegisteredError(RegistryError):
    """Raised when a requested name cannot be found."""
    def __init__(self, registry: str, name: str):
        super().__init__(registry, f"'{name}' is not registered in {registry}")
        self.name = name


class RegistrySealedError(RegistryError):
    """Raised when a sealed registry is asked to change."""
    def __init__(self, registry: str, name: Optional[str] = None, action: str = "register"):
        target = f" '{name}'" if name is not None else ""
        super().__init__(registry, f"Cannot {action}{target}: {registry} is sealed")
        self.name = name
        self.action = action
