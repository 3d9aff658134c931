"""Breeding settings."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_MUTATION_PROBABILITY = 0.01

ReproducerName = Literal["first_parent", "random_parent", "random_codes"]
MutationName = Literal["none", "bits", "weights"]


class BreedingConfig(BaseModel):
    """How two parent chromosomes are turned into a child."""

    seed: Optional[int] = Field(
        default=None,
        description="Seed of the random generator; None draws fresh entropy",
    )
    reproducer: ReproducerName = Field(
        default="random_codes",
        description="Child selection: first parent, random parent or instruction-level crossover",
    )
    mutation: MutationName = Field(
        default="bits",
        description="Mutation applied to the child: none, any bit, or weighted-sum operand bits only",
    )
    mutation_probability: float = Field(
        default=DEFAULT_MUTATION_PROBABILITY,
        ge=0.0,
        le=1.0,
        description="Per-bit flip probability",
    )

    model_config = {"frozen": True}


__all__ = ["DEFAULT_MUTATION_PROBABILITY", "ReproducerName", "MutationName", "BreedingConfig"]
