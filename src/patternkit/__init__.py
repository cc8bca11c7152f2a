"""patternkit - template method execution and visitor double dispatch.

Two independent components share a small variant registry:

    - TemplateExecutor runs report variants through a fixed algorithm
      skeleton, checking that every variable step is bound before any
      output is produced.
    - VisitorDispatcher routes elements of a closed family to the
      matching handler of an operation.

Example:
    >>> from patternkit import html_report
    >>> html_report("R", ["a"]).execute()
    ['<html>', '<head><title>R</title></head>', '<body>', '<p>a</p>', '</body>', '</html>']
"""

from ._version import __version__
from .application.template.executor import TemplateExecutor
from .application.visitor.dispatcher import VisitorDispatcher
from .domain.core.exceptions import (
    DomainException,
    MissingHandlerError,
    UnboundStepError,
)
from .domain.template import (
    REPORT_SKELETON,
    AlgorithmSkeleton,
    ReportVariant,
    build_report,
    html_report,
    iterate_lines,
    markdown_report,
    text_report,
)
from .domain.visitor import Element, ElementFamily, Operation, Visitor
from .infrastructure.registry import VariantRegistry

__all__ = [
    "REPORT_SKELETON",
    "AlgorithmSkeleton",
    "DomainException",
    "Element",
    "ElementFamily",
    "MissingHandlerError",
    "Operation",
    "ReportVariant",
    "TemplateExecutor",
    "UnboundStepError",
    "VariantRegistry",
    "Visitor",
    "VisitorDispatcher",
    "__version__",
    "build_report",
    "html_report",
    "iterate_lines",
    "markdown_report",
    "text_report",
]
