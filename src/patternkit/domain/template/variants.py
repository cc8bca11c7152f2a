"""Built-in report variants."""
from html import escape
from typing import Callable, Dict, Iterable, Optional

from patternkit.domain.core.exceptions import ValidationError
from patternkit.domain.template.report import ReportVariant

REPORT_STYLES = ("html", "markdown", "text")


def _html_bindings() -> Dict[str, Callable[..., Optional[str]]]:
    return {
        "start": lambda report: "<html>",
        "head": lambda report: f"<head><title>{escape(report.title)}</title></head>",
        "body_start": lambda report: "<body>",
        "line": lambda report, line: f"<p>{escape(line)}</p>",
        "body_end": lambda report: "</body>",
        "end": lambda report: "</html>",
    }


def _markdown_bindings() -> Dict[str, Callable[..., Optional[str]]]:
    return {
        "start": lambda report: None,
        "head": lambda report: f"# {report.title}",
        "body_start": lambda report: "",
        "line": lambda report, line: f"- {line}",
        "body_end": lambda report: None,
        "end": lambda report: None,
    }


def _text_bindings() -> Dict[str, Callable[..., Optional[str]]]:
    return {
        "start": lambda report: "*" * max(len(report.title), 3),
        "head": lambda report: report.title,
        "body_start": lambda report: "*" * max(len(report.title), 3),
        "line": lambda report, line: line,
        "body_end": lambda report: "",
        "end": lambda report: f"({len(report.lines)} lines)",
    }


_BINDINGS = {
    "html": _html_bindings,
    "markdown": _markdown_bindings,
    "text": _text_bindings,
}


def build_report(style: str, title: str, lines: Iterable[str] = ()) -> ReportVariant:
    """Build one of the built-in report variants by style name."""
    if style not in _BINDINGS:
        raise ValidationError(
            f"Unknown report style '{style}', expected one of {list(REPORT_STYLES)}",
            {"style": style},
        )
    return ReportVariant(name=style, title=title, lines=tuple(lines), bindings=_BINDINGS[style]())


def html_report(title: str, lines: Iterable[str] = ()) -> ReportVariant:
    return build_report("html", title, lines)


def markdown_report(title: str, lines: Iterable[str] = ()) -> ReportVariant:
    return build_report("markdown", title, lines)


def text_report(title: str, lines: Iterable[str] = ()) -> ReportVariant:
    return build_report("text", title, lines)
