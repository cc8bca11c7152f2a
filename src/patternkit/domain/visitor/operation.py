"""Operations - the visiting side of double dispatch."""
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, Tuple, Type, TypeVar, Union

from patternkit.domain.core.exceptions import MissingHandlerError
from patternkit.domain.visitor.element import Element
from patternkit.domain.visitor.family import ElementFamily

R = TypeVar("R")
Handler = Callable[[Element], R]
HandlerKey = Union[str, Type[Element]]


def _tag_of(key: HandlerKey) -> str:
    if isinstance(key, type) and issubclass(key, Element):
        return key.tag
    if isinstance(key, str):
        return key
    raise TypeError(f"Handler key must be a tag or an Element subclass, got {key!r}")


class Operation(Generic[R]):
    """
    A named mapping from element tag to handler.

    When bound to a family the mapping is checked for exhaustiveness at
    construction. With ``fallback_to_bases`` an element whose own tag has no
    handler is routed to the handler of its nearest Element base class.
    """

    def __init__(self,
                 name: str,
                 handlers: Mapping[HandlerKey, Handler],
                 family: Optional[ElementFamily] = None,
                 fallback_to_bases: bool = False):
        self.name = name
        self.family = family
        self.fallback_to_bases = fallback_to_bases
        self._handlers: Mapping[str, Handler] = MappingProxyType(
            {_tag_of(key): handler for key, handler in handlers.items()}
        )
        for tag, handler in self._handlers.items():
            if not callable(handler):
                raise TypeError(f"Handler for '{tag}' in operation '{name}' is not callable")
        if family is not None:
            family.check_exhaustive(self)

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(self._handlers)

    def covering_tag(self, variant: Type[Element]) -> Optional[str]:
        """Tag of the handler that would serve ``variant``, or ``None``."""
        if variant.tag in self._handlers:
            return variant.tag
        if self.fallback_to_bases:
            for base in variant.__mro__[1:]:
                if isinstance(base, type) and issubclass(base, Element) and base.tag in self._handlers:
                    return base.tag
        return None

    def handler_for(self, element: Element) -> Handler:
        """
        Find the handler for an element.

        Raises:
            MissingHandlerError: If no handler covers the element's variant
        """
        tag = self.covering_tag(type(element))
        if tag is not None:
            return self._handlers[tag]
        raise MissingHandlerError(self.name, [element.tag])

    def __call__(self, element: Element) -> Any:
        return self.handler_for(element)(element)

    def __repr__(self) -> str:
        return f"Operation(name={self.name!r}, tags={self.tags!r})"
