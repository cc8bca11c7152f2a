"""Report variant value object - one concrete rendering of the report skeleton."""
from types import MappingProxyType
from typing import Any, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from patternkit.domain.core.exceptions import UnboundStepError
from patternkit.domain.template.skeleton import REPORT_SKELETON, AlgorithmSkeleton


class ReportVariant(BaseModel):
    """
    A report variant: title, lines and one binding per variable step.

    Bindings are called with the variant as first argument; the line binding
    also receives the line being rendered. A binding returning ``None``
    contributes no fragment.

    Construction fails with ``UnboundStepError`` when any variable step of
    the skeleton is left unbound, so a defective variant never renders.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = "report"
    title: str
    lines: Tuple[str, ...] = ()
    # Non-callables are reported as unbound by validate_bindings.
    bindings: Mapping[str, Any] = Field(default_factory=dict)
    skeleton: AlgorithmSkeleton = REPORT_SKELETON

    @field_validator("bindings", mode="after")
    @classmethod
    def freeze_bindings(cls, v):
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def validate_bindings(self) -> "ReportVariant":
        """Every variable step of the skeleton must be bound."""
        missing = self.skeleton.missing_bindings(self.bindings)
        if missing:
            raise UnboundStepError(self.name, missing)
        return self

    def __hash__(self) -> int:
        # Bindings compare by identity, so their items hash consistently with __eq__.
        return hash((
            self.name,
            self.title,
            self.lines,
            self.skeleton,
            tuple(sorted(self.bindings.items(), key=lambda item: item[0])),
        ))

    def execute(self) -> List[str]:
        """Render this variant with its own skeleton."""
        from patternkit.application.template.executor import TemplateExecutor

        return TemplateExecutor(self.skeleton).execute(self)
