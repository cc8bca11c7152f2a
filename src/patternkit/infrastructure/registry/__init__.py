"""Infrastructure registry patterns."""

from .variant_registry import VariantRegistry

__all__ = [
    'VariantRegistry'
]
