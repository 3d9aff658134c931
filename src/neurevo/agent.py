"""Agents: a chromosome bound to the network compiled from it."""

from __future__ import annotations

import numpy as np

from .builder import NetworkBuilder
from .chromosome import Chromosome
from .network import NeuralNetwork, to_unit_step
from .position import Move, Position
from .program import Program


class Agent:
    """
    Reactive controller deciding grid moves from its position.
    The network is compiled from scratch whenever an agent is created.
    """

    def __init__(self, chromosome: Chromosome, network: NeuralNetwork):
        if chromosome is None:
            raise ValueError("No chromosome provided")
        if network is None:
            raise ValueError("No neural network provided")
        self.chromosome = chromosome
        self.network = network

    @classmethod
    def create(cls, chromosome: Chromosome, rng: np.random.Generator) -> "Agent":
        """Decode and compile a chromosome; DecodeError and MissingOutputError propagate."""
        program = chromosome.program()
        network = program.execute(NetworkBuilder(rng)).build()
        return cls(chromosome, network)

    @classmethod
    def from_program(cls, program: Program, rng: np.random.Generator) -> "Agent":
        return cls.create(Chromosome.from_program(program), rng)

    def decide_next_move(self, position: Position) -> Move:
        """Fire the network once with the position as inputs, then round and clamp its outputs."""
        self.network.set_inputs(position.x, position.y)
        self.network.fire()
        return Move(to_unit_step(self.network.output_dx()), to_unit_step(self.network.output_dy()))

    def decide_next_position(self, position: Position) -> Position:
        return position.move(self.decide_next_move(position))


__all__ = ["Agent"]
