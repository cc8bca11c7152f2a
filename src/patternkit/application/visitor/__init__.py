"""Visitor dispatch."""

from .dispatcher import VisitorDispatcher

__all__ = ["VisitorDispatcher"]
