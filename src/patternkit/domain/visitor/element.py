"""Element variants - the visited side of double dispatch."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Optional

if TYPE_CHECKING:
    from patternkit.application.visitor.dispatcher import VisitorDispatcher


@dataclass(frozen=True)
class Element:
    """
    Base class for element variants.

    Each subclass is one variant, identified by its ``tag`` (the class name
    unless given explicitly with ``class Foo(Element, tag="foo")``). Variants
    that carry data should be declared as frozen dataclasses themselves.
    """
    tag: ClassVar[str] = "Element"

    def __init_subclass__(cls, tag: Optional[str] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        cls.tag = tag or cls.__name__

    def accept(self, operation: Any, dispatcher: Optional[VisitorDispatcher] = None) -> Any:
        """Hand this element to ``operation``, routed by the dispatcher."""
        if dispatcher is None:
            from patternkit.application.visitor.dispatcher import VisitorDispatcher

            dispatcher = VisitorDispatcher()
        return dispatcher.dispatch(self, operation)

    def __str__(self) -> str:
        return self.tag
