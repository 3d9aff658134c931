"""Graph compiler: turns program steps into an executable neural network."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Union

import numpy as np
from loguru import logger

from .enums import NeuronKind
from .errors import MissingOutputError
from .layout import RESERVED_NEURON_COUNT, X_NEURON, Y_NEURON, normalize_index
from .network import NeuralNetwork
from .sink import NeuralSink


@dataclass(frozen=True)
class NeuronDefinition:
    """Kind of a neuron plus its scalar parameter (fixed signal or weight)."""

    kind: NeuronKind
    parameter: float = 0.0


@dataclass
class GraphState:
    """
    Compiler state, kept explicit so it can be inspected and passed around.
    Neurons 0 and 1 are the X and Y inputs and exist from the start.
    """

    neurons: List[NeuronDefinition] = field(
        default_factory=lambda: [
            NeuronDefinition(NeuronKind.INPUT_X),
            NeuronDefinition(NeuronKind.INPUT_Y),
        ]
    )
    inputs: List[List[int]] = field(default_factory=lambda: [[] for _ in range(RESERVED_NEURON_COUNT)])
    cursor: int = 0
    dx: Optional[int] = None
    dy: Optional[int] = None

    @property
    def neuron_count(self) -> int:
        return len(self.neurons)

    def normalize(self, index: int) -> int:
        """Wrap any index into the current neuron range."""
        return normalize_index(index, self.neuron_count)

    def append(self, definition: NeuronDefinition) -> int:
        self.neurons.append(definition)
        self.inputs.append([])
        self.cursor = self.neuron_count - 1
        return self.cursor


IndexResolver = Callable[[GraphState], int]
IndexRef = Union[int, IndexResolver]


def current_neuron() -> IndexResolver:
    return lambda state: state.cursor


def first_neuron() -> IndexResolver:
    return lambda state: 0


def relative_neuron(offset: int) -> IndexResolver:
    return lambda state: state.normalize(state.cursor + offset)


def previous_neuron() -> IndexResolver:
    return relative_neuron(-1)


def next_neuron() -> IndexResolver:
    return relative_neuron(1)


def last_neuron() -> IndexResolver:
    return lambda state: state.neuron_count - 1


def neuron_at(index: int) -> IndexResolver:
    return lambda state: state.normalize(index)


def x_neuron() -> IndexResolver:
    return lambda state: X_NEURON


def y_neuron() -> IndexResolver:
    return lambda state: Y_NEURON


class NetworkBuilder(NeuralSink[NeuralNetwork]):
    """
    Builds a neural network from sink calls.

    Every index is wrapped with floor-modulo against the neuron count at the
    time it is resolved, so no program can reference a missing neuron.
    Index arguments accept either an int or a resolver such as last_neuron().
    """

    def __init__(self, rng: np.random.Generator, state: Optional[GraphState] = None):
        self.rng = rng
        self.state = state if state is not None else GraphState()

    def _resolve(self, index: IndexRef) -> int:
        raw = index(self.state) if callable(index) else index
        return self.state.normalize(raw)

    def _create(self, kind: NeuronKind, parameter: float = 0.0) -> "NetworkBuilder":
        self.state.append(NeuronDefinition(kind, float(parameter)))
        return self

    def create_fixed(self, signal: float) -> "NetworkBuilder":
        return self._create(NeuronKind.FIXED, signal)

    def create_random(self) -> "NetworkBuilder":
        return self._create(NeuronKind.RANDOM)

    def create_sum(self) -> "NetworkBuilder":
        return self._create(NeuronKind.SUM)

    def create_weighted_sum(self, weight: float) -> "NetworkBuilder":
        return self._create(NeuronKind.WEIGHTED_SUM, weight)

    def create_min(self) -> "NetworkBuilder":
        return self._create(NeuronKind.MIN)

    def create_max(self) -> "NetworkBuilder":
        return self._create(NeuronKind.MAX)

    def move_to(self, index: IndexRef) -> "NetworkBuilder":
        self.state.cursor = self._resolve(index)
        return self

    def read_from(self, index: IndexRef) -> "NetworkBuilder":
        self.state.inputs[self.state.cursor].append(self._resolve(index))
        return self

    def set_output_dx(self, index: IndexRef) -> "NetworkBuilder":
        self.state.dx = self._resolve(index)
        return self

    def set_output_dy(self, index: IndexRef) -> "NetworkBuilder":
        self.state.dy = self._resolve(index)
        return self

    def build(self) -> NeuralNetwork:
        """Freeze the current graph into a network; both outputs must be set."""
        state = self.state
        missing = [name for name, idx in (("dX", state.dx), ("dY", state.dy)) if idx is None]
        if missing:
            raise MissingOutputError(missing)

        logger.debug(
            "Compiled network with {} neurons (dX={}, dY={})",
            state.neuron_count,
            state.dx,
            state.dy,
        )
        return NeuralNetwork(
            kinds=[n.kind for n in state.neurons],
            parameters=[n.parameter for n in state.neurons],
            inputs=[list(links) for links in state.inputs],
            dx_index=state.dx,
            dy_index=state.dy,
            rng=self.rng,
        )


__all__ = [
    "NeuronDefinition",
    "GraphState",
    "IndexResolver",
    "IndexRef",
    "current_neuron",
    "first_neuron",
    "relative_neuron",
    "previous_neuron",
    "next_neuron",
    "last_neuron",
    "neuron_at",
    "x_neuron",
    "y_neuron",
    "NetworkBuilder",
]
