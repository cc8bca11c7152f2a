"""Demonstration elements and operations used by the command line."""

from .garden import BUGS, FLOWERS, Bee, Chrysanthemum, Flower, Fly, Gladiolus, Runuculus, Worm, flower_gen

__all__ = [
    "BUGS",
    "FLOWERS",
    "Bee",
    "Chrysanthemum",
    "Flower",
    "Fly",
    "Gladiolus",
    "Runuculus",
    "Worm",
    "flower_gen",
]
