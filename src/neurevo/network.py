"""Evaluation engine for compiled neural networks."""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from .enums import NeuronKind


def to_unit_step(signal: float) -> int:
    """Round a signal to the nearest integer (halves up) and clamp it to {-1, 0, 1}."""
    if math.isnan(signal):
        return 0
    bounded = min(max(float(signal), -2.0), 2.0)
    return max(-1, min(1, math.floor(bounded + 0.5)))


class NeuralNetwork:
    """
    Compiled network: an immutable evaluation plan plus mutable input slots
    and a per-neuron signal cache.

    A firing visits the neurons once, in ascending index order. A neuron sees
    the signals of lower-index inputs from the current firing and those of
    higher-index inputs from the previous one (0.0 before the first firing).
    """

    def __init__(
        self,
        kinds: Sequence[NeuronKind],
        parameters: Sequence[float],
        inputs: Sequence[Sequence[int]],
        dx_index: int,
        dy_index: int,
        rng: np.random.Generator,
    ):
        if not (len(kinds) == len(parameters) == len(inputs)):
            raise ValueError("Neuron kinds, parameters and inputs must have the same length.")
        self.kinds = tuple(NeuronKind(k) for k in kinds)
        self.parameters = tuple(float(p) for p in parameters)
        self.links = tuple(np.asarray(list(links), dtype=np.intp) for links in inputs)
        self.dx_index = int(dx_index)
        self.dy_index = int(dy_index)
        self.rng = rng
        self._x = 0.0
        self._y = 0.0
        self._signals = np.zeros(len(self.kinds), dtype=np.float64)

    @property
    def neuron_count(self) -> int:
        return len(self.kinds)

    def set_inputs(self, x: float, y: float) -> None:
        """Bind the signals of the X and Y input neurons."""
        self._x = float(x)
        self._y = float(y)

    def fire(self) -> None:
        """Run one synchronous evaluation pass."""
        signals = self._signals
        with np.errstate(all="ignore"):
            for idx, kind in enumerate(self.kinds):
                signals[idx] = self._compute(kind, self.parameters[idx], self.links[idx])

    def _compute(self, kind: NeuronKind, parameter: float, links: np.ndarray) -> float:
        if kind == NeuronKind.INPUT_X:
            return self._x
        if kind == NeuronKind.INPUT_Y:
            return self._y
        if kind == NeuronKind.FIXED:
            return parameter
        if kind == NeuronKind.RANDOM:
            return float(self.rng.random())

        values = self._signals[links]
        if kind == NeuronKind.SUM:
            return float(values.sum())
        if kind == NeuronKind.WEIGHTED_SUM:
            return float(values.sum()) * parameter
        if kind == NeuronKind.MIN:
            return float(values.min()) if values.size else 0.0
        if kind == NeuronKind.MAX:
            return float(values.max()) if values.size else 0.0
        raise ValueError(f"Unsupported neuron kind {kind!r}")

    def signal(self, index: int) -> float:
        """Signal of a neuron after the last firing."""
        return float(self._signals[index])

    def signals(self) -> List[float]:
        return [float(s) for s in self._signals]

    def output_dx(self) -> float:
        return self.signal(self.dx_index)

    def output_dy(self) -> float:
        return self.signal(self.dy_index)


__all__ = ["to_unit_step", "NeuralNetwork"]
