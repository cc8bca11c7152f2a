"""Flowers and the bugs that visit them.

The flower hierarchy is closed: pollinators and predators are operations
added from the outside, none of them changes a flower class.
"""
import random
from typing import Dict, Iterator, Optional

from patternkit.domain.visitor.element import Element
from patternkit.domain.visitor.family import ElementFamily
from patternkit.domain.visitor.visitor import Visitor

FLOWERS = ElementFamily("flower")


class Flower(Element):
    def pollinate(self, pollinator: object) -> str:
        return f"{self} pollinated by {pollinator}"

    def eat(self, eater: object) -> str:
        return f"{self} eaten by {eater}"


@FLOWERS.variant
class Gladiolus(Flower):
    pass


@FLOWERS.variant
class Runuculus(Flower):
    pass


@FLOWERS.variant
class Chrysanthemum(Flower):
    pass


FLOWERS.seal()


class Bug(Visitor):
    family = FLOWERS


class Pollinator(Bug):
    def visit_Flower(self, flower: Flower) -> str:
        return flower.pollinate(self)


class Predator(Bug):
    def visit_Flower(self, flower: Flower) -> str:
        return flower.eat(self)


class Bee(Pollinator):
    pass


class Fly(Pollinator):
    pass


class Worm(Predator):
    pass


BUGS: Dict[str, type] = {"bee": Bee, "fly": Fly, "worm": Worm}


def flower_gen(n: int, seed: Optional[int] = None) -> Iterator[Flower]:
    """Yield ``n`` flowers picked at random from the family."""
    rng = random.Random(seed)
    variants = FLOWERS.variants()
    for _ in range(n):
        yield rng.choice(variants)()
