"""Template executor - runs report variants through their algorithm skeleton.

The executor owns the step order. Variants only supply behaviour for the
variable steps, and every variant is checked for completeness before it is
registered or before its first fragment is produced.
"""
from typing import Iterator, List, Optional, Tuple

from patternkit.domain.core.exceptions import UnboundStepError
from patternkit.domain.template.report import ReportVariant
from patternkit.domain.template.skeleton import REPORT_SKELETON, AlgorithmSkeleton, StepContext
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry.variant_registry import VariantRegistry


class TemplateExecutor:
    """
    Executes variants against a fixed algorithm skeleton.

    Rendering is returned as a list of fragments; nothing is printed, the
    caller decides where the output goes.
    """

    def __init__(self,
                 skeleton: AlgorithmSkeleton = REPORT_SKELETON,
                 registry: Optional[VariantRegistry[ReportVariant]] = None):
        """
        Initialize template executor.

        Args:
            skeleton: Algorithm skeleton whose step order is enforced
            registry: Optional registry for named variants
        """
        self._skeleton = skeleton
        self._variants = registry if registry is not None else VariantRegistry(
            f"{skeleton.name} variants"
        )
        self._logger = get_logger(__name__)

    @property
    def skeleton(self) -> AlgorithmSkeleton:
        return self._skeleton

    def check(self, variant: ReportVariant) -> None:
        """
        Verify the variant binds every variable step of this executor's skeleton.

        Raises:
            UnboundStepError: If any variable step has no binding
        """
        missing = self._skeleton.missing_bindings(variant.bindings)
        if missing:
            self._logger.error(
                "Variant has unbound steps",
                variant=variant.name,
                skeleton=self._skeleton.name,
                missing_steps=missing,
            )
            raise UnboundStepError(variant.name, missing)

    def register(self, name: str, variant: ReportVariant) -> None:
        """Register a named variant after checking its bindings."""
        self.check(variant)
        self._variants.register(name, variant)

    def registered_variants(self) -> List[str]:
        return self._variants.get_registered_names()

    def iter_steps(self, variant: ReportVariant) -> Iterator[Tuple[str, List[str]]]:
        """
        Run the skeleton step by step.

        The completeness check happens here, before the generator is
        returned, so a defective variant fails without producing output.

        Returns:
            Iterator of ``(step, fragments)`` pairs in skeleton order
        """
        self.check(variant)
        return self._run(variant)

    def execute(self, variant: ReportVariant) -> List[str]:
        """Render a variant into its ordered list of output fragments."""
        fragments = [
            fragment
            for _, step_fragments in self.iter_steps(variant)
            for fragment in step_fragments
        ]
        self._logger.debug(
            "Executed variant",
            variant=variant.name,
            skeleton=self._skeleton.name,
            fragments=len(fragments),
        )
        return fragments

    def execute_registered(self, name: str) -> List[str]:
        """Render a variant previously registered under ``name``."""
        return self.execute(self._variants.get(name))

    def _run(self, variant: ReportVariant) -> Iterator[Tuple[str, List[str]]]:
        for step in self._skeleton.steps:
            context = StepContext(variant=variant, step=step)
            if self._skeleton.is_fixed(step):
                fragments = list(self._skeleton.fixed_steps[step](context))
            else:
                fragment = context.render(step)
                fragments = [] if fragment is None else [fragment]
            yield step, fragments
