"""Human-readable listing of the network a program describes."""

from __future__ import annotations

from typing import List

from .layout import normalize_index
from .sink import NeuralSink


class ProgramListing(NeuralSink[str]):
    """
    Sink rendering a program as text, one line per neuron or wire.

    Example output::

        0 = X
        1 = Y
        2 = CONST(1.0)
        3 = SUM
        →2:CONST(1.0)
        DX = 3:SUM

    Reads are listed under the neuron that receives them; the receiver is
    repeated only when it is not the neuron created last.
    """

    def __init__(self):
        self._lines: List[str] = []
        self._names: List[str] = []
        self._reads: List[int] = []
        self._reader = 0
        self._last_added = 0
        self._add("X")
        self._add("Y")
        # the compiler cursor starts on X, not on the last reserved neuron
        self._reader = 0

    def _resolve(self, index: int) -> int:
        return normalize_index(index, len(self._names))

    def _identify(self, index: int) -> str:
        return f"{index}:{self._names[index]}"

    def _flush(self) -> None:
        if not self._reads:
            return
        if self._last_added != self._reader:
            self._lines.append(self._identify(self._reader))
        self._lines.extend(f"→{self._identify(index)}" for index in self._reads)
        self._reads.clear()

    def _add(self, name: str) -> "ProgramListing":
        self._flush()
        index = len(self._names)
        self._names.append(name)
        self._last_added = index
        self._reader = index
        self._lines.append(f"{index} = {name}")
        return self

    def _assign(self, name: str, index: int) -> "ProgramListing":
        self._flush()
        self._lines.append(f"{name} = {self._identify(self._resolve(index))}")
        return self

    def create_fixed(self, signal: float) -> "ProgramListing":
        return self._add(f"CONST({signal!r})")

    def create_random(self) -> "ProgramListing":
        return self._add("RAND")

    def create_sum(self) -> "ProgramListing":
        return self._add("SUM")

    def create_weighted_sum(self, weight: float) -> "ProgramListing":
        return self._add(f"WEIGHT({weight!r})")

    def create_min(self) -> "ProgramListing":
        return self._add("MIN")

    def create_max(self) -> "ProgramListing":
        return self._add("MAX")

    def move_to(self, index: int) -> "ProgramListing":
        self._flush()
        self._reader = self._resolve(index)
        return self

    def read_from(self, index: int) -> "ProgramListing":
        self._reads.append(self._resolve(index))
        return self

    def set_output_dx(self, index: int) -> "ProgramListing":
        return self._assign("DX", index)

    def set_output_dy(self, index: int) -> "ProgramListing":
        return self._assign("DY", index)

    def build(self) -> str:
        self._flush()
        return "\n".join(self._lines).strip()


__all__ = ["ProgramListing"]
