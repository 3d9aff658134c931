"""Reproduce-then-mutate breeding pipeline."""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np
from loguru import logger

from .chromosome import Chromosome
from .config import BreedingConfig
from .mutator import Mutator
from .reproducer import Reproducer


class Breeder:
    """
    Produces children from parent chromosomes.

    The child of two parents is reproduced first, then mutated. Children are
    not validated: a bit mutation may leave them undecodable.
    """

    def __init__(self, reproducer: Reproducer, mutator: Mutator, rng: Optional[np.random.Generator] = None):
        self.reproducer = reproducer
        self.mutator = mutator
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def from_config(cls, config: BreedingConfig) -> "Breeder":
        rng = np.random.default_rng(config.seed)

        if config.reproducer == "first_parent":
            reproducer = Reproducer.on_first_parent()
        elif config.reproducer == "random_parent":
            reproducer = Reproducer.on_random_parent(rng)
        else:
            reproducer = Reproducer.on_random_codes(rng)

        if config.mutation == "none":
            mutator = Mutator.none()
        elif config.mutation == "weights":
            mutator = Mutator.on_weights(rng, config.mutation_probability)
        else:
            mutator = Mutator.on_bits(rng, config.mutation_probability)

        logger.debug("Breeder from config: {}, {}, seed={}", reproducer, mutator, config.seed)
        return cls(reproducer, mutator, rng)

    def breed(self, chromosome1: Chromosome, chromosome2: Chromosome) -> Chromosome:
        child = self.reproducer.reproduce(chromosome1, chromosome2)
        return self.mutator.mutate(child)

    def breed_population(self, parents: Sequence[Chromosome], count: int) -> List[Chromosome]:
        """Breed `count` children, each from two parents drawn with replacement."""
        if not parents:
            raise ValueError("At least one parent is required to breed.")
        if count < 0:
            raise ValueError(f"Children count must be non-negative, got {count}.")

        children: List[Chromosome] = []
        for _ in range(count):
            first, second = self.rng.integers(len(parents), size=2)
            children.append(self.breed(parents[first], parents[second]))

        decodable = sum(child.is_decodable() for child in children)
        logger.debug("Bred {} children from {} parents ({} decodable)", count, len(parents), decodable)
        return children


__all__ = ["Breeder"]
