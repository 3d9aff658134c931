"""Neurevo: evolvable neural-network genomes for grid agents."""

from .enums import (
    Opcode,
    NeuronKind,
    CREATE_OPS,
    INDEX_OPS,
    VALUED_OPS,
    CREATED_KINDS,
    MNEMONICS,
)
from .layout import (
    OPCODE_SIZE,
    OPERAND_SIZE,
    FRAME_SIZE,
    X_NEURON,
    Y_NEURON,
    RESERVED_NEURON_COUNT,
    operand_to_index,
    normalize_index,
)
from .errors import NeurevoError, DecodeError, MissingOutputError
from .sink import NeuralSink
from .instruction import Instruction, encode, decode
from .program import Program, ProgramWriter
from .position import Move, Position, ORIGIN
from .network import NeuralNetwork, to_unit_step
from .builder import (
    NeuronDefinition,
    GraphState,
    NetworkBuilder,
    current_neuron,
    first_neuron,
    relative_neuron,
    previous_neuron,
    next_neuron,
    last_neuron,
    neuron_at,
    x_neuron,
    y_neuron,
)
from .chromosome import Chromosome
from .reproducer import Reproducer, crossover
from .mutator import Mutator, mutate_bits, mutate_weights
from .agent import Agent
from .listing import ProgramListing
from .weights import WeightCollector, collect_weights
from .layered import LayeredProgrammer, LayeredDescriber, LayeredDescription
from .factory import ProgramFactory, ChromosomeFactory
from .config import BreedingConfig
from .breeding import Breeder
from .demos import example_walk, example_listing, example_layers, example_breeding

__all__ = [
    "Opcode",
    "NeuronKind",
    "CREATE_OPS",
    "INDEX_OPS",
    "VALUED_OPS",
    "CREATED_KINDS",
    "MNEMONICS",
    "OPCODE_SIZE",
    "OPERAND_SIZE",
    "FRAME_SIZE",
    "X_NEURON",
    "Y_NEURON",
    "RESERVED_NEURON_COUNT",
    "operand_to_index",
    "normalize_index",
    "NeurevoError",
    "DecodeError",
    "MissingOutputError",
    "NeuralSink",
    "Instruction",
    "encode",
    "decode",
    "Program",
    "ProgramWriter",
    "Move",
    "Position",
    "ORIGIN",
    "NeuralNetwork",
    "to_unit_step",
    "NeuronDefinition",
    "GraphState",
    "NetworkBuilder",
    "current_neuron",
    "first_neuron",
    "relative_neuron",
    "previous_neuron",
    "next_neuron",
    "last_neuron",
    "neuron_at",
    "x_neuron",
    "y_neuron",
    "Chromosome",
    "Reproducer",
    "crossover",
    "Mutator",
    "mutate_bits",
    "mutate_weights",
    "Agent",
    "ProgramListing",
    "WeightCollector",
    "collect_weights",
    "LayeredProgrammer",
    "LayeredDescriber",
    "LayeredDescription",
    "ProgramFactory",
    "ChromosomeFactory",
    "BreedingConfig",
    "Breeder",
    "example_walk",
    "example_listing",
    "example_layers",
    "example_breeding",
]
