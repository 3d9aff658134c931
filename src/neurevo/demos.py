"""Example workflows, also used as smoke tests."""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np
from loguru import logger

from .agent import Agent
from .breeding import Breeder
from .chromosome import Chromosome
from .config import BreedingConfig
from .errors import NeurevoError
from .factory import ChromosomeFactory, ProgramFactory
from .layered import LayeredDescriber
from .listing import ProgramListing
from .position import Position
from .weights import collect_weights


def example_walk(steps: int = 10, seed: int = 0) -> Dict[str, List[Position]]:
    """Example: walk a few hand-written agents from the middle of a 10x11 grid."""
    logger.info("=== Seed agents walk ===")
    rng = np.random.default_rng(seed)
    programs = ProgramFactory()
    agents = {
        "down_right": Agent.from_program(programs.down_right_mover(), rng),
        "up_left": Agent.from_program(programs.up_left_mover(), rng),
        "toward (1, 9)": Agent.from_program(programs.move_toward(Position(1, 9)), rng),
        "center": Agent.from_program(programs.center_mover(10, 11), rng),
        "random": Agent.from_program(programs.random_mover(), rng),
    }

    paths: Dict[str, List[Position]] = {}
    for name, agent in agents.items():
        position = Position(5, 5)
        path = [position]
        for _ in range(steps):
            position = agent.decide_next_position(position)
            path.append(position)
        paths[name] = path
        logger.info("{:>14}: {}", name, " ".join(str(p) for p in path))
    return paths


def example_listing(target: Position = Position(8, 1)) -> str:
    """Example: print the network a program describes."""
    logger.info("=== Program listing ===")
    program = ProgramFactory().move_toward(target)
    logger.info("Instructions: {}", ", ".join(instr.describe() for instr in program))
    listing = program.execute(ProgramListing()).build()
    for line in listing.splitlines():
        logger.info("  {}", line)
    return listing


def example_layers(target: Position = Position(3, 4)) -> List[List[str]]:
    """Example: read a perceptron program back as named layers."""
    logger.info("=== Layered description ===")
    program = ProgramFactory().position_mover(target)
    description = program.execute(LayeredDescriber()).build()
    named = [[description.name(neuron) for neuron in layer] for layer in description.layers]
    for depth, layer in enumerate(named):
        logger.info("Layer {}: {}", depth, ", ".join(layer))
    logger.info("Weights: {}", collect_weights(program))
    return named


def example_breeding(
    generations: int = 5,
    population: int = 12,
    config: Optional[BreedingConfig] = None,
) -> List[Chromosome]:
    """
    Example: breed seed chromosomes for a few generations.

    Every generation replaces the population with bred children; children
    that no longer compile are dropped.
    """
    logger.info("=== Breeding ===")
    config = config or BreedingConfig(seed=0, mutation="weights")
    breeder = Breeder.from_config(config)
    seeds = ChromosomeFactory()
    parents = [seeds.down_right_mover(), seeds.up_left_mover(), seeds.center_mover(10, 11), seeds.random_mover()]

    for generation in range(generations):
        children = breeder.breed_population(parents, population)
        survivors: List[Chromosome] = []
        for child in children:
            try:
                Agent.create(child, breeder.rng)
            except NeurevoError as exc:
                logger.debug("Dropped child {}: {}", child.get_signature()[:8], exc)
                continue
            survivors.append(child)
        logger.info(
            "Generation {}: {}/{} children compile, {} distinct genomes",
            generation,
            len(survivors),
            len(children),
            len({child.get_signature() for child in survivors}),
        )
        if not survivors:
            logger.info("No child compiles, stopping")
            break
        parents = survivors
    return parents


def run_all(steps: int = 8, generations: int = 5, population: int = 12) -> Dict[str, object]:
    """Run every example in turn; any-bit mutation at 1%, then weight-only mutation."""
    return {
        "walk": example_walk(steps=steps),
        "listing": example_listing(Position(8, 1)),
        "layers": example_layers(Position(3, 4)),
        "bits": example_breeding(generations, population, config=BreedingConfig(seed=0)),
        "weights": example_breeding(generations, population),
    }


__all__ = [
    "example_walk",
    "example_listing",
    "example_layers",
    "example_breeding",
    "run_all",
]
