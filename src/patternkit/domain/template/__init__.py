"""Template method domain: skeleton, report variants and built-in renderings."""

from .report import ReportVariant
from .skeleton import (
    REPORT_SKELETON,
    AlgorithmSkeleton,
    FixedAction,
    StepBinding,
    StepContext,
    iterate_lines,
)
from .variants import REPORT_STYLES, build_report, html_report, markdown_report, text_report

__all__ = [
    "REPORT_SKELETON",
    "REPORT_STYLES",
    "AlgorithmSkeleton",
    "FixedAction",
    "ReportVariant",
    "StepBinding",
    "StepContext",
    "build_report",
    "html_report",
    "iterate_lines",
    "markdown_report",
    "text_report",
]
