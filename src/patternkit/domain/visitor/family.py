"""Element family - a closed set of element variants."""
from typing import TYPE_CHECKING, Iterable, Iterator, List, Tuple, Type, TypeVar, Union

from patternkit.domain.core.exceptions import MissingHandlerError, UnknownVariantError
from patternkit.domain.visitor.element import Element
from patternkit.infrastructure.registry.variant_registry import VariantRegistry

if TYPE_CHECKING:
    from patternkit.domain.visitor.operation import Operation

E = TypeVar("E", bound=Type[Element])


class ElementFamily:
    """
    Closed set of element variants keyed by tag.

    Variants are added with the ``variant`` decorator or the constructor and
    the family is then sealed. Operations bound to a family must handle
    every variant in it.
    """

    def __init__(self, name: str, variants: Iterable[Type[Element]] = (), sealed: bool = False):
        self.name = name
        self._registry: VariantRegistry[Type[Element]] = VariantRegistry(f"{name} elements")
        for variant in variants:
            self.variant(variant)
        if sealed:
            self.seal()

    def variant(self, cls: E) -> E:
        """Class decorator adding an element variant to the family."""
        if not (isinstance(cls, type) and issubclass(cls, Element)):
            raise TypeError(f"{cls!r} is not an Element subclass")
        self._registry.register(cls.tag, cls)
        return cls

    def seal(self) -> "ElementFamily":
        self._registry.seal()
        return self

    @property
    def sealed(self) -> bool:
        return self._registry.sealed

    @property
    def tags(self) -> Tuple[str, ...]:
        return tuple(self._registry.get_registered_names())

    def variants(self) -> List[Type[Element]]:
        return [self._registry.get(tag) for tag in self._registry.get_registered_names()]

    def variant_for(self, tag: str) -> Type[Element]:
        return self._registry.get(tag)

    def check_member(self, element: Element) -> None:
        """Raise ``UnknownVariantError`` unless the element belongs to this family."""
        if element.tag not in self or not isinstance(element, self.variant_for(element.tag)):
            raise UnknownVariantError(self.name, [element.tag])

    def check_exhaustive(self, operation: "Operation") -> None:
        """
        Verify an operation handles exactly this family's variants.

        Raises:
            UnknownVariantError: If the operation names tags outside the family
                that no variant falls back to
            MissingHandlerError: If some variant has no handler
        """
        tags = self.tags
        covering = {tag: operation.covering_tag(self.variant_for(tag)) for tag in tags}
        unknown = [
            tag for tag in operation.tags
            if tag not in tags and tag not in covering.values()
        ]
        if unknown:
            raise UnknownVariantError(self.name, unknown)
        missing = [tag for tag, handler_tag in covering.items() if handler_tag is None]
        if missing:
            raise MissingHandlerError(operation.name, missing)

    def __contains__(self, item: Union[str, Element, type]) -> bool:
        if isinstance(item, str):
            return self._registry.is_registered(item)
        if isinstance(item, Element) or (isinstance(item, type) and issubclass(item, Element)):
            return (
                item.tag in self
                and self.variant_for(item.tag) is (item if isinstance(item, type) else type(item))
            )
        return False

    def __iter__(self) -> Iterator[Type[Element]]:
        return iter(self.variants())

    def __len__(self) -> int:
        return len(self._registry)

    def __repr__(self) -> str:
        return f"ElementFamily(name={self.name!r}, tags={self.tags!r})"
