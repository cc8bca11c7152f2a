"""Template execution."""

from .executor import TemplateExecutor

__all__ = ["TemplateExecutor"]
