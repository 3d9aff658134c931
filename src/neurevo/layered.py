"""Layered perceptron programs: a programmer to write them, a describer to read them back."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from .layout import RESERVED_NEURON_COUNT, X_NEURON, Y_NEURON, normalize_index
from .program import Program, ProgramWriter
from .sink import NeuralSink


@dataclass(frozen=True)
class LayeredNeuron:
    """Handle on a neuron created by a LayeredProgrammer."""

    index: int


class Layer:
    """Ordered set of neurons feeding the next layer."""

    def __init__(self, programmer: "LayeredProgrammer", indexes: Optional[List[int]] = None):
        self.programmer = programmer
        self.indexes: List[int] = list(indexes or [])

    def __len__(self) -> int:
        return len(self.indexes)

    def x(self) -> "Layer":
        self.indexes.append(X_NEURON)
        return self

    def y(self) -> "Layer":
        self.indexes.append(Y_NEURON)
        return self

    def constant(self, signal: float) -> "Layer":
        index = self.programmer.allocate()
        self.programmer.writer.create_fixed(signal)
        self.indexes.append(index)
        return self

    def rand(self) -> "Layer":
        index = self.programmer.allocate()
        self.programmer.writer.create_random()
        self.indexes.append(index)
        return self

    def weighted(self, *weights: float) -> "Layer":
        """New layer with one weighted-sum neuron reading each neuron of this one."""
        if len(weights) != len(self.indexes):
            raise ValueError(
                f"Your layer requires {len(self.indexes)} weights, currently {len(weights)}"
            )
        writer = self.programmer.writer
        children: List[int] = []
        for parent, weight in zip(self.indexes, weights):
            child = self.programmer.allocate()
            writer.create_weighted_sum(weight).read_from(parent)
            children.append(child)
        return Layer(self.programmer, children)


class LayeredProgrammer:
    """
    Writes perceptron-like programs with absolute neuron indexes.

    Indexes are tracked locally: every created neuron takes the next index,
    after the two reserved input neurons.
    """

    def __init__(self):
        self.writer = ProgramWriter()
        self._next_index = RESERVED_NEURON_COUNT

    def allocate(self) -> int:
        index = self._next_index
        self._next_index += 1
        return index

    def layer_of(self) -> Layer:
        return Layer(self)

    def sum(self, layer: Layer) -> LayeredNeuron:
        index = self.allocate()
        self.writer.create_sum()
        for parent in layer.indexes:
            self.writer.read_from(parent)
        return LayeredNeuron(index)

    def set_dx(self, neuron: LayeredNeuron) -> "LayeredProgrammer":
        self.writer.set_output_dx(neuron.index)
        return self

    def set_dy(self, neuron: LayeredNeuron) -> "LayeredProgrammer":
        self.writer.set_output_dy(neuron.index)
        return self

    def program(self) -> Program:
        return self.writer.build()


@dataclass(frozen=True)
class Synapse:
    """A weighted-sum neuron seen as a weighted link from readee to reader."""

    reader: Optional[int]
    weight: float
    readee: Optional[int]


@dataclass
class LayeredDescription:
    """Layers, names and synapse weights of a layered program."""

    layers: List[List[int]]
    synapses: List[Synapse]
    names: Dict[int, str] = field(default_factory=dict)
    dx: Optional[int] = None
    dy: Optional[int] = None

    def weight(self, source: int, target: int) -> float:
        """Weight of the link from source to target, 0.0 when not linked."""
        for synapse in self.synapses:
            if synapse.readee == source and synapse.reader == target:
                return synapse.weight
        return 0.0

    def name(self, neuron: int) -> str:
        prefix = "dX:" if neuron == self.dx else "dY:" if neuron == self.dy else ""
        return prefix + self.names.get(neuron, "?")


class LayeredDescriber(NeuralSink[LayeredDescription]):
    """
    Reads a program back as layers.

    Weighted-sum neurons are treated as synapses. Layers are peeled from the
    synapse sources; non-weight neurons left over form the last layer.
    """

    def __init__(self):
        self._count = 0
        self._cursor = 0
        self._non_weight: List[int] = []
        self._weight_neurons: Dict[int, float] = {}
        self._names: Dict[int, str] = {}
        self._readings: List[Tuple[int, int]] = []
        self._dx: Optional[int] = None
        self._dy: Optional[int] = None
        self._add_named("X")
        self._add_named("Y")
        self._cursor = 0

    def _resolve(self, index: int) -> int:
        return normalize_index(index, self._count)

    def _add_named(self, name: str) -> "LayeredDescriber":
        self._names[self._count] = name
        self._non_weight.append(self._count)
        self._cursor = self._count
        self._count += 1
        return self

    def create_fixed(self, signal: float) -> "LayeredDescriber":
        return self._add_named(repr(float(signal)))

    def create_random(self) -> "LayeredDescriber":
        return self._add_named("RAND")

    def create_sum(self) -> "LayeredDescriber":
        return self._add_named("SUM")

    def create_weighted_sum(self, weight: float) -> "LayeredDescriber":
        self._weight_neurons[self._count] = float(weight)
        self._names[self._count] = f"WEIGHT({float(weight)!r})"
        self._cursor = self._count
        self._count += 1
        return self

    def create_min(self) -> "LayeredDescriber":
        return self._add_named("MIN")

    def create_max(self) -> "LayeredDescriber":
        return self._add_named("MAX")

    def move_to(self, index: int) -> "LayeredDescriber":
        self._cursor = self._resolve(index)
        return self

    def read_from(self, index: int) -> "LayeredDescriber":
        self._readings.append((self._cursor, self._resolve(index)))
        return self

    def set_output_dx(self, index: int) -> "LayeredDescriber":
        self._dx = self._resolve(index)
        return self

    def set_output_dy(self, index: int) -> "LayeredDescriber":
        self._dy = self._resolve(index)
        return self

    def _synapses(self) -> List[Synapse]:
        synapses: List[Synapse] = []
        for neuron, weight in self._weight_neurons.items():
            reader: Optional[int] = None
            readee: Optional[int] = None
            for reading_reader, reading_readee in self._readings:
                if reading_reader == neuron:
                    readee = reading_readee
                if reading_readee == neuron:
                    reader = reading_reader
            synapses.append(Synapse(reader, weight, readee))
        return synapses

    @staticmethod
    def _extract_layer(synapses: List[Synapse]) -> Tuple[Set[Optional[int]], List[Synapse]]:
        readers = {s.reader for s in synapses}
        readees = {s.readee for s in synapses} - readers
        remaining = [s for s in synapses if s.readee not in readees]
        return readees, remaining

    def build(self) -> LayeredDescription:
        synapses = self._synapses()

        layers: List[List[int]] = []
        remaining = synapses
        while remaining:
            layer, remaining_next = self._extract_layer(remaining)
            if not layer:
                # cyclic wiring: nothing left to peel
                break
            layers.append(sorted(n for n in layer if n is not None))
            remaining = remaining_next

        layered = {n for layer in layers for n in layer}
        layers.append([n for n in self._non_weight if n not in layered])
        layers = [layer for layer in layers if layer]

        return LayeredDescription(
            layers=layers,
            synapses=synapses,
            names=dict(self._names),
            dx=self._dx,
            dy=self._dy,
        )


__all__ = [
    "LayeredNeuron",
    "Layer",
    "LayeredProgrammer",
    "Synapse",
    "LayeredDescription",
    "LayeredDescriber",
]
