from unittest.mock import Mock

import pytest

from patternkit.application.visitor.dispatcher import VisitorDispatcher
from patternkit.demo.garden import (
    FLOWERS,
    Bee,
    Chrysanthemum,
    Flower,
    Gladiolus,
    Runuculus,
    Worm,
    flower_gen,
)
from patternkit.domain.core.exceptions import (
    MissingHandlerError,
    UnknownVariantError,
    VariantNotRegisteredError,
)
from patternkit.domain.visitor.operation import Operation


class TestVisitorDispatcher:
    """Routing elements to handlers."""

    def test_dispatch_returns_handler_result(self, shape_classes):
        handler = Mock(return_value="result")
        circle = shape_classes["circle"]()
        operation = Operation("op", {"Circle": handler})

        assert VisitorDispatcher().dispatch(circle, operation) == "result"
        handler.assert_called_once_with(circle)

    def test_dispatch_picks_handler_by_variant(self, shapes, shape_classes):
        operation = Operation(
            "corners", {"Circle": lambda e: 0, "Square": lambda e: 4, "tri": lambda e: 3}, family=shapes
        )
        dispatcher = VisitorDispatcher(shapes)

        results = dispatcher.dispatch_all(
            [shape_classes["triangle"](), shape_classes["circle"](), shape_classes["square"]()],
            operation,
        )

        assert results == [3, 0, 4]

    def test_missing_handler(self, shape_classes):
        operation = Operation("op", {"Circle": str})

        with pytest.raises(MissingHandlerError) as exc:
            VisitorDispatcher().dispatch(shape_classes["square"](), operation)

        assert exc.value.tags == ["Square"]

    def test_foreign_element_rejected_by_family(self, shapes, shape_classes):
        operation = Operation("op", {"Hexagon": str})

        with pytest.raises(UnknownVariantError):
            VisitorDispatcher(shapes).dispatch(shape_classes["hexagon"](), operation)

    def test_element_accept_uses_dispatcher(self, shape_classes):
        dispatcher = Mock()
        dispatcher.dispatch.return_value = "routed"
        circle = shape_classes["circle"]()

        assert circle.accept("operation", dispatcher) == "routed"
        dispatcher.dispatch.assert_called_once_with(circle, "operation")

    def test_element_accept_without_dispatcher(self, shape_classes):
        operation = Operation("op", {"Circle": lambda e: "direct"})
        assert shape_classes["circle"]().accept(operation) == "direct"

    def test_dispatch_rejects_non_operations(self, shape_classes):
        with pytest.raises(TypeError):
            VisitorDispatcher().dispatch(shape_classes["circle"](), {"Circle": str})

    def test_new_operation_needs_no_element_change(self, shapes, shape_classes):
        dispatcher = VisitorDispatcher(shapes)
        name = Operation("name", {"Circle": str, "Square": str, "tri": str}, family=shapes)
        upper = Operation(
            "upper", {"Circle": lambda e: str(e).upper(), "Square": lambda e: "SQ", "tri": lambda e: "TRI"},
            family=shapes,
        )
        circle = shape_classes["circle"]()

        assert dispatcher.dispatch(circle, name) == "Circle"
        assert dispatcher.dispatch(circle, upper) == "CIRCLE"


class TestNamedOperations:
    """Operations registered on the dispatcher."""

    def test_register_and_dispatch_by_name(self, shapes, shape_classes):
        dispatcher = VisitorDispatcher(shapes)
        dispatcher.register_operation(Operation("name", {"Circle": str, "Square": str, "tri": str}))

        assert dispatcher.registered_operations() == ["name"]
        assert dispatcher.dispatch_named(shape_classes["square"](), "name") == "Square"

    def test_registration_checks_exhaustiveness(self, shapes):
        dispatcher = VisitorDispatcher(shapes)

        with pytest.raises(MissingHandlerError):
            dispatcher.register_operation(Operation("partial", {"Circle": str}))
        assert dispatcher.registered_operations() == []

    def test_register_base_class_operation_with_fallback(self):
        dispatcher = VisitorDispatcher(FLOWERS)
        smell = Operation("smell", {Flower: lambda f: f"{f} smells sweet"}, fallback_to_bases=True)

        dispatcher.register_operation(smell)

        assert dispatcher.registered_operations() == ["smell"]
        assert dispatcher.dispatch_named(Runuculus(), "smell") == "Runuculus smells sweet"

    def test_base_class_operation_without_fallback_rejected(self):
        with pytest.raises(UnknownVariantError) as exc:
            VisitorDispatcher(FLOWERS).register_operation(Operation("smell", {Flower: str}))
        assert exc.value.tags == ["Flower"]

    def test_unknown_operation_name(self, shapes, shape_classes):
        with pytest.raises(VariantNotRegisteredError):
            VisitorDispatcher(shapes).dispatch_named(shape_classes["circle"](), "nope")


class TestGarden:
    """The flower demonstration."""

    def test_bugs_visit_flowers(self):
        dispatcher = VisitorDispatcher(FLOWERS)

        assert dispatcher.dispatch(Gladiolus(), Bee()) == "Gladiolus pollinated by Bee"
        assert dispatcher.dispatch(Runuculus(), Worm()) == "Runuculus eaten by Worm"
        assert Chrysanthemum().accept(Bee()) == "Chrysanthemum pollinated by Bee"

    def test_flower_family_is_closed(self):
        assert FLOWERS.sealed
        assert FLOWERS.tags == ("Gladiolus", "Runuculus", "Chrysanthemum")

    def test_flower_gen_is_reproducible_with_seed(self):
        first = [f.tag for f in flower_gen(20, seed=7)]
        second = [f.tag for f in flower_gen(20, seed=7)]

        assert first == second
        assert len(first) == 20
        assert set(first) <= set(FLOWERS.tags)
