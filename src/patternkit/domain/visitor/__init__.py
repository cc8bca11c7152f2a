"""Visitor domain: element variants, closed families and operations."""

from .element import Element
from .family import ElementFamily
from .operation import Handler, Operation
from .visitor import Visitor

__all__ = ["Element", "ElementFamily", "Handler", "Operation", "Visitor"]
