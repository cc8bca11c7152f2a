"""Algorithm skeleton - the fixed step order shared by every report variant.

The skeleton is data: an ordered tuple of step identifiers, the built-in
actions of the fixed steps, and the set of variable steps a variant has to
bind. A variable step that is not part of the ordered steps is an auxiliary
binding consumed by a fixed step (the per-line renderer of the body step).
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Collection,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)

from patternkit.domain.core.exceptions import (
    SkeletonDefinitionError,
    UnboundStepError,
    ValidationError,
)

if TYPE_CHECKING:
    from patternkit.domain.template.report import ReportVariant

StepBinding = Callable[..., Optional[str]]
FixedAction = Callable[["StepContext"], Iterable[str]]


@dataclass(frozen=True)
class StepContext:
    """What a fixed action sees while a variant is being executed."""
    variant: "ReportVariant"
    step: str

    def render(self, binding: str, *args: Any) -> Optional[str]:
        """Invoke one of the variant's bindings with the variant and extra arguments."""
        handler = self.variant.bindings.get(binding)
        if not callable(handler):
            raise UnboundStepError(self.variant.name, [binding])
        result = handler(self.variant, *args)
        if result is not None and not isinstance(result, str):
            raise ValidationError(
                f"Binding '{binding}' of variant '{self.variant.name}' returned "
                f"{type(result).__name__}, expected str",
                {"step": self.step, "binding": binding},
            )
        return result


def iterate_lines(binding: str = "line") -> FixedAction:
    """Build a fixed action rendering each of the variant's lines, in order.

    The action records the binding it calls as ``action.binding`` so the
    skeleton can require it among its variable steps.
    """

    def body(context: StepContext) -> Iterator[str]:
        for line in context.variant.lines:
            fragment = context.render(binding, line)
            if fragment is not None:
                yield fragment

    body.__name__ = f"iterate_lines[{binding}]"
    body.binding = binding  # type: ignore[attr-defined]
    return body


class AlgorithmSkeleton:
    """Ordered steps plus the fixed/variable split of each step."""

    def __init__(
        self,
        name: str,
        steps: Iterable[str],
        fixed_steps: Mapping[str, FixedAction],
        variable_steps: Collection[str],
    ):
        self._name = name
        self._steps: Tuple[str, ...] = tuple(steps)
        self._fixed_steps = MappingProxyType(dict(fixed_steps))
        self._variable_steps: FrozenSet[str] = frozenset(variable_steps)
        self._validate()

    def _validate(self) -> None:
        errors = {}
        if not self._steps:
            errors["steps"] = "at least one step is required"

        duplicates = [s for s, n in Counter(self._steps).items() if n > 1]
        if duplicates:
            errors["duplicates"] = ", ".join(duplicates)

        overlap = self._variable_steps & set(self._fixed_steps)
        if overlap:
            errors["overlap"] = ", ".join(sorted(overlap))

        unknown_fixed = set(self._fixed_steps) - set(self._steps)
        if unknown_fixed:
            errors["fixed_steps"] = f"not in step order: {', '.join(sorted(unknown_fixed))}"

        unassigned = [
            s for s in self._steps
            if s not in self._fixed_steps and s not in self._variable_steps
        ]
        if unassigned:
            errors["unassigned"] = ", ".join(unassigned)

        for step, action in self._fixed_steps.items():
            if not callable(action):
                errors[step] = "fixed action is not callable"

        unbound = sorted(
            {getattr(action, "binding", None) for action in self._fixed_steps.values()}
            - {None}
            - self._variable_steps
        )
        if unbound:
            errors["bindings"] = f"used by fixed steps but not variable: {', '.join(unbound)}"

        if errors:
            raise SkeletonDefinitionError(
                f"Invalid skeleton '{self._name}': "
                + "; ".join(f"{k}: {v}" for k, v in errors.items()),
                errors,
            )

    @property
    def name(self) -> str:
        return self._name

    @property
    def steps(self) -> Tuple[str, ...]:
        return self._steps

    @property
    def fixed_steps(self) -> Mapping[str, FixedAction]:
        return self._fixed_steps

    @property
    def variable_steps(self) -> FrozenSet[str]:
        return self._variable_steps

    @property
    def auxiliary_steps(self) -> Tuple[str, ...]:
        """Variable steps consumed by fixed actions rather than run in order."""
        return tuple(sorted(self._variable_steps - set(self._steps)))

    def is_fixed(self, step: str) -> bool:
        return step in self._fixed_steps

    def missing_bindings(self, bindings: Mapping[str, Any]) -> List[str]:
        """Variable steps without a callable binding, ordered steps first."""
        required = [s for s in self._steps if s in self._variable_steps]
        required.extend(self.auxiliary_steps)
        return [s for s in required if not callable(bindings.get(s))]

    def __repr__(self) -> str:
        return f"AlgorithmSkeleton(name={self._name!r}, steps={self._steps!r})"


REPORT_SKELETON = AlgorithmSkeleton(
    name="report",
    steps=("start", "head", "body_start", "body", "body_end", "end"),
    fixed_steps={"body": iterate_lines("line")},
    variable_steps=("start", "head", "body_start", "line", "body_end", "end"),
)
