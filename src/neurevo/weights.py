"""Weight extraction for weighted-sum neurons."""

from __future__ import annotations

from typing import List

from .program import Program
from .sink import NeuralSink


class WeightCollector(NeuralSink[List[float]]):
    """Sink keeping the weight of every weighted-sum neuron, in program order."""

    def __init__(self):
        self.weights: List[float] = []

    def create_fixed(self, signal: float) -> "WeightCollector":
        return self

    def create_random(self) -> "WeightCollector":
        return self

    def create_sum(self) -> "WeightCollector":
        return self

    def create_weighted_sum(self, weight: float) -> "WeightCollector":
        self.weights.append(float(weight))
        return self

    def create_min(self) -> "WeightCollector":
        return self

    def create_max(self) -> "WeightCollector":
        return self

    def move_to(self, index: int) -> "WeightCollector":
        return self

    def read_from(self, index: int) -> "WeightCollector":
        return self

    def set_output_dx(self, index: int) -> "WeightCollector":
        return self

    def set_output_dy(self, index: int) -> "WeightCollector":
        return self

    def build(self) -> List[float]:
        return list(self.weights)


def collect_weights(program: Program) -> List[float]:
    """Weights of the weighted-sum neurons of a program."""
    return program.execute(WeightCollector()).build()


__all__ = ["WeightCollector", "collect_weights"]
