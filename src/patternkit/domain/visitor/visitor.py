"""Class-based operations.

A ``Visitor`` subclass implements one ``visit_<Tag>`` method per element
variant, or a method for a shared base class such as ``visit_Flower``.
``as_operation`` turns it into an ``Operation`` the dispatcher can route.
"""
from typing import Any, Dict, Optional

from patternkit.domain.visitor.element import Element
from patternkit.domain.visitor.family import ElementFamily
from patternkit.domain.visitor.operation import Handler, Operation

VISIT_PREFIX = "visit_"


class Visitor:
    """Base class for operations written as classes."""

    family: Optional[ElementFamily] = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def _method_for(self, tag: str) -> Optional[Handler]:
        method = getattr(self, f"{VISIT_PREFIX}{tag}", None)
        return method if callable(method) else None

    def as_operation(self, family: Optional[ElementFamily] = None) -> Operation:
        """
        Build an operation from the ``visit_*`` methods.

        With a family, every variant is resolved along its MRO up front, so
        exhaustiveness is checked here rather than at dispatch time.
        """
        if family is None:
            family = self.family
        handlers: Dict[str, Handler] = {}
        if family is not None:
            for variant in family.variants():
                for klass in variant.__mro__:
                    if not (isinstance(klass, type) and issubclass(klass, Element)):
                        continue
                    method = self._method_for(klass.tag)
                    if method is not None:
                        handlers[variant.tag] = method
                        break
            return Operation(self.name, handlers, family=family)

        for attr in dir(self):
            if attr.startswith(VISIT_PREFIX) and attr != VISIT_PREFIX:
                method = self._method_for(attr[len(VISIT_PREFIX):])
                if method is not None:
                    handlers[attr[len(VISIT_PREFIX):]] = method
        return Operation(self.name, handlers, fallback_to_bases=True)

    def visit(self, element: Element) -> Any:
        return element.accept(self)

    def __str__(self) -> str:
        return self.name
