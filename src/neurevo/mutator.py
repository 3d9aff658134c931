"""Mutation strategies producing perturbed copies of chromosomes."""

from __future__ import annotations

from typing import Callable

import numpy as np
from loguru import logger

from .chromosome import Chromosome
from .enums import Opcode
from .layout import FRAME_SIZE, OPCODE_SIZE, OPERAND_BITS, OPERAND_SIZE


def _check_probability(probability: float) -> float:
    probability = float(probability)
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Mutation probability must be within [0, 1], got {probability}.")
    return probability


def _flip_bits(data: np.ndarray, rng: np.random.Generator, probability: float) -> np.ndarray:
    """Flip each bit of a uint8 array independently with the given probability."""
    bits = np.unpackbits(data)
    mask = (rng.random(bits.size) < probability).astype(np.uint8)
    flips = int(mask.sum())
    if flips:
        logger.debug("Flipped {} of {} bit(s)", flips, bits.size)
    return np.packbits(bits ^ mask)


def mutate_bits(chromosome: Chromosome, rng: np.random.Generator, probability: float) -> Chromosome:
    """
    Flip every bit of the chromosome with the given probability.
    Opcode tags are exposed too, so the result may no longer decode.
    """
    probability = _check_probability(probability)
    data = np.frombuffer(chromosome.data, dtype=np.uint8)
    if data.size == 0:
        return Chromosome(b"")
    return Chromosome(_flip_bits(data, rng, probability).tobytes())


def mutate_weights(chromosome: Chromosome, rng: np.random.Generator, probability: float) -> Chromosome:
    """
    Flip the operand bits of weighted-sum instructions only.

    Every other byte, including all opcode tags, is copied untouched. A flip
    in the exponent or sign can change a weight by orders of magnitude.
    """
    probability = _check_probability(probability)
    program = chromosome.program()
    weighted = [idx for idx, op in enumerate(program.opcodes()) if op == Opcode.CREATE_WEIGHTED_SUM]
    if not weighted:
        return Chromosome(chromosome.data)

    buffer = bytearray(chromosome.data)
    for idx in weighted:
        start = idx * FRAME_SIZE + OPCODE_SIZE
        operand = np.frombuffer(bytes(buffer[start : start + OPERAND_SIZE]), dtype=np.uint8)
        buffer[start : start + OPERAND_SIZE] = _flip_bits(operand, rng, probability).tobytes()
    logger.debug("Mutated operands of {} weighted-sum neuron(s) ({} bits each)", len(weighted), OPERAND_BITS)
    return Chromosome(bytes(buffer))


class Mutator:
    """Turns a chromosome into a possibly perturbed copy."""

    def __init__(self, strategy: Callable[[Chromosome], Chromosome], name: str = "custom"):
        self._strategy = strategy
        self.name = name

    def mutate(self, chromosome: Chromosome) -> Chromosome:
        return self._strategy(chromosome)

    __call__ = mutate

    def __repr__(self) -> str:
        return f"Mutator({self.name})"

    @classmethod
    def none(cls) -> "Mutator":
        return cls(lambda chromosome: chromosome, "none")

    @classmethod
    def on_bits(cls, rng: np.random.Generator, probability: float) -> "Mutator":
        probability = _check_probability(probability)
        return cls(lambda chromosome: mutate_bits(chromosome, rng, probability), "bits")

    @classmethod
    def on_weights(cls, rng: np.random.Generator, probability: float) -> "Mutator":
        probability = _check_probability(probability)
        return cls(lambda chromosome: mutate_weights(chromosome, rng, probability), "weights")


__all__ = ["mutate_bits", "mutate_weights", "Mutator"]
