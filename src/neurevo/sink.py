"""Capability set that programs are executed against."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class NeuralSink(ABC, Generic[T]):
    """
    Receives the steps of a program, one call per instruction.

    The graph compiler implements it to build an executable network; listings,
    describers and collectors implement it to extract structure instead.
    Every method returns the sink so that calls can be chained.
    """

    @abstractmethod
    def create_fixed(self, signal: float) -> "NeuralSink[T]":
        """Append a neuron emitting a constant signal."""

    @abstractmethod
    def create_random(self) -> "NeuralSink[T]":
        """Append a neuron emitting a fresh random draw on every firing."""

    @abstractmethod
    def create_sum(self) -> "NeuralSink[T]":
        """Append a neuron summing its inputs."""

    @abstractmethod
    def create_weighted_sum(self, weight: float) -> "NeuralSink[T]":
        """Append a neuron summing its inputs and scaling the result."""

    @abstractmethod
    def create_min(self) -> "NeuralSink[T]":
        """Append a neuron taking the minimum of its inputs."""

    @abstractmethod
    def create_max(self) -> "NeuralSink[T]":
        """Append a neuron taking the maximum of its inputs."""

    @abstractmethod
    def move_to(self, index: int) -> "NeuralSink[T]":
        """Move the cursor to a neuron."""

    @abstractmethod
    def read_from(self, index: int) -> "NeuralSink[T]":
        """Wire a neuron as an input of the neuron under the cursor."""

    @abstractmethod
    def set_output_dx(self, index: int) -> "NeuralSink[T]":
        """Designate the neuron producing the horizontal move."""

    @abstractmethod
    def set_output_dy(self, index: int) -> "NeuralSink[T]":
        """Designate the neuron producing the vertical move."""

    @abstractmethod
    def build(self) -> T:
        """Finalize and return what this sink produces."""


__all__ = ["NeuralSink"]
