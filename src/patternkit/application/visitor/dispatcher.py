"""Visitor dispatcher - routes elements to the matching handler of an operation.

The dispatcher only routes: it looks up the handler for the element's
variant and returns what the handler returns. Any logic lives in the
operation.
"""
from typing import Any, Iterable, List, Optional, Union

from patternkit.domain.core.exceptions import MissingHandlerError
from patternkit.domain.visitor.element import Element
from patternkit.domain.visitor.family import ElementFamily
from patternkit.domain.visitor.operation import Operation
from patternkit.domain.visitor.visitor import Visitor
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry.variant_registry import VariantRegistry

OperationLike = Union[Operation, Visitor]


class VisitorDispatcher:
    """
    Double dispatch over an optional closed element family.

    With a family, elements outside it are rejected and registered
    operations are checked for exhaustiveness when they are registered.
    """

    def __init__(self, family: Optional[ElementFamily] = None):
        self._family = family
        self._operations: VariantRegistry[Operation] = VariantRegistry(
            f"{family.name} operations" if family is not None else "operations"
        )
        self._logger = get_logger(__name__)

    @property
    def family(self) -> Optional[ElementFamily]:
        return self._family

    def _resolve(self, operation: OperationLike) -> Operation:
        if isinstance(operation, Visitor):
            return operation.as_operation(self._family)
        if isinstance(operation, Operation):
            return operation
        raise TypeError(f"Expected an Operation or Visitor, got {type(operation).__name__}")

    def dispatch(self, element: Element, operation: OperationLike) -> Any:
        """
        Invoke the operation's handler for the element's variant.

        Raises:
            UnknownVariantError: If the element is outside the dispatcher's family
            MissingHandlerError: If the operation has no handler for the variant
        """
        op = self._resolve(operation)
        if self._family is not None:
            self._family.check_member(element)
        try:
            handler = op.handler_for(element)
        except MissingHandlerError:
            self._logger.error(
                "No handler for element variant", operation=op.name, tag=element.tag
            )
            raise
        self._logger.debug("Dispatching element", operation=op.name, tag=element.tag)
        return handler(element)

    def dispatch_all(self, elements: Iterable[Element], operation: OperationLike) -> List[Any]:
        """Dispatch each element in turn; results keep the input order."""
        op = self._resolve(operation)
        return [self.dispatch(element, op) for element in elements]

    def register_operation(self, operation: OperationLike, name: Optional[str] = None) -> Operation:
        """Register a named operation, checking it against the family first."""
        op = self._resolve(operation)
        if self._family is not None:
            self._family.check_exhaustive(op)
        self._operations.register(name or op.name, op)
        return op

    def registered_operations(self) -> List[str]:
        return self._operations.get_registered_names()

    def dispatch_named(self, element: Element, name: str) -> Any:
        """Dispatch through an operation registered under ``name``."""
        return self.dispatch(element, self._operations.get(name))
