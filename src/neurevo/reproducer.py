"""Reproduction strategies combining two parent chromosomes."""

from __future__ import annotations

from typing import Callable, List

import numpy as np
from loguru import logger

from .chromosome import Chromosome
from .instruction import Instruction
from .program import Program


def equalize_lengths(codes1: List[Instruction], codes2: List[Instruction]) -> None:
    """
    Pad the shorter sequence in place until both have the same length.

    The padding is the leading slice of the longer sequence, prepended to the
    shorter one.
    """
    gap = len(codes1) - len(codes2)
    if gap < 0:
        codes1[0:0] = codes2[:-gap]
    elif gap > 0:
        codes2[0:0] = codes1[:gap]
    if gap:
        logger.debug("Crossover padded the shorter parent with {} instruction(s)", abs(gap))


def crossover(chromosome1: Chromosome, chromosome2: Chromosome, rng: np.random.Generator) -> Chromosome:
    """
    Pick every instruction of the child from one parent or the other,
    with a fair coin per position.

    Only whole decoded instructions are copied, so the child always decodes.
    """
    codes1 = list(chromosome1.program())
    codes2 = list(chromosome2.program())
    equalize_lengths(codes1, codes2)

    from_first = rng.random(len(codes1)) < 0.5
    child = [c1 if pick else c2 for c1, c2, pick in zip(codes1, codes2, from_first)]
    return Chromosome.from_program(Program(child))


class Reproducer:
    """Produces a child chromosome from two parents."""

    def __init__(self, strategy: Callable[[Chromosome, Chromosome], Chromosome], name: str = "custom"):
        self._strategy = strategy
        self.name = name

    def reproduce(self, chromosome1: Chromosome, chromosome2: Chromosome) -> Chromosome:
        return self._strategy(chromosome1, chromosome2)

    __call__ = reproduce

    def __repr__(self) -> str:
        return f"Reproducer({self.name})"

    @classmethod
    def on_first_parent(cls) -> "Reproducer":
        """Child is the first parent, unchanged."""
        return cls(lambda chromosome1, chromosome2: chromosome1, "first_parent")

    @classmethod
    def on_random_parent(cls, rng: np.random.Generator) -> "Reproducer":
        """Child is one of the parents, chosen with a fair coin."""
        return cls(
            lambda chromosome1, chromosome2: chromosome1 if rng.random() < 0.5 else chromosome2,
            "random_parent",
        )

    @classmethod
    def on_random_codes(cls, rng: np.random.Generator) -> "Reproducer":
        """Instruction-level crossover."""
        return cls(lambda chromosome1, chromosome2: crossover(chromosome1, chromosome2, rng), "random_codes")


__all__ = ["equalize_lengths", "crossover", "Reproducer"]
