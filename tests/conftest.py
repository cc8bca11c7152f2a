import logging
from unittest.mock import patch

import pytest

from patternkit.domain.template.skeleton import AlgorithmSkeleton, iterate_lines
from patternkit.domain.visitor.element import Element
from patternkit.domain.visitor.family import ElementFamily


@pytest.fixture
def tag_skeleton():
    """Skeleton with the step names used throughout the tag examples."""
    return AlgorithmSkeleton(
        name="tags",
        steps=["start", "head", "bodyStart", "body", "bodyEnd", "end"],
        fixed_steps={"body": iterate_lines("line")},
        variable_steps=["start", "head", "bodyStart", "line", "bodyEnd", "end"],
    )


@pytest.fixture
def tag_bindings():
    return {
        "start": lambda report: "<s>",
        "head": lambda report: f"<h>{report.title}</h>",
        "bodyStart": lambda report: "<b>",
        "line": lambda report, line: f"<p>{line}</p>",
        "bodyEnd": lambda report: "</b>",
        "end": lambda report: "<e>",
    }


class Circle(Element):
    pass


class Square(Element):
    pass


class Triangle(Element, tag="tri"):
    pass


class Hexagon(Element):
    pass


@pytest.fixture
def shapes():
    """Closed family of three shape variants."""
    return ElementFamily("shape", [Circle, Square, Triangle], sealed=True)


@pytest.fixture
def shape_classes():
    return {"circle": Circle, "square": Square, "triangle": Triangle, "hexagon": Hexagon}


@pytest.fixture
def isolated_root_logger():
    """Give the test its own root handler list; setup_logging replaces handlers."""
    root = logging.getLogger()
    level = root.level
    with patch.object(root, "handlers", []):
        yield root
        for handler in root.handlers:
            handler.close()
    root.setLevel(level)
