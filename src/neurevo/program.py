"""Ordered instruction sequences and the sink that records them."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, TypeVar

from loguru import logger

from .enums import Opcode
from .errors import DecodeError
from .instruction import Instruction
from .layout import FRAME_SIZE, frame_count
from .sink import NeuralSink

S = TypeVar("S", bound=NeuralSink)


class Program:
    """
    Straight-line sequence of instructions.
    Semantics only exist relative to the sink it is executed against.
    """

    def __init__(self, instructions: Optional[Iterable[Instruction]] = None):
        self.instructions: List[Instruction] = list(instructions or [])

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Program):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f"Program({len(self.instructions)} instructions)"

    def opcodes(self) -> List[Opcode]:
        """Opcode sequence, in program order."""
        return [instr.opcode for instr in self.instructions]

    def execute(self, sink: S) -> S:
        """Apply every instruction to the sink, in order."""
        for step in (instr.resolve() for instr in self.instructions):
            step(sink)
        return sink

    def serialize(self) -> bytes:
        """Concatenate the frames of all instructions."""
        return b"".join(instr.encode() for instr in self.instructions)

    @classmethod
    def deserialize(cls, data: bytes) -> "Program":
        """
        Decode consecutive 9-byte frames.
        A trailing fragment shorter than a frame is dropped.
        """
        data = bytes(data)
        count = frame_count(len(data))
        leftover = len(data) - count * FRAME_SIZE
        if leftover:
            logger.debug("Dropping {} trailing byte(s) after {} frames", leftover, count)

        instructions: List[Instruction] = []
        for idx in range(count):
            offset = idx * FRAME_SIZE
            try:
                instructions.append(Instruction.decode(data[offset : offset + FRAME_SIZE]))
            except DecodeError as exc:
                raise DecodeError(exc.tag, offset=offset) from exc
        return cls(instructions)

    @classmethod
    def noop(cls) -> "Program":
        """Empty program."""
        return cls()


class ProgramWriter(NeuralSink[Program]):
    """Sink recording each call as an instruction."""

    def __init__(self):
        self.instructions: List[Instruction] = []

    def _append(self, opcode: Opcode, operand: float = 0.0) -> "ProgramWriter":
        self.instructions.append(Instruction(opcode, operand))
        return self

    def create_fixed(self, signal: float) -> "ProgramWriter":
        return self._append(Opcode.CREATE_FIXED, signal)

    def create_random(self) -> "ProgramWriter":
        return self._append(Opcode.CREATE_RANDOM)

    def create_sum(self) -> "ProgramWriter":
        return self._append(Opcode.CREATE_SUM)

    def create_weighted_sum(self, weight: float) -> "ProgramWriter":
        return self._append(Opcode.CREATE_WEIGHTED_SUM, weight)

    def create_min(self) -> "ProgramWriter":
        return self._append(Opcode.CREATE_MIN)

    def create_max(self) -> "ProgramWriter":
        return self._append(Opcode.CREATE_MAX)

    def move_to(self, index: int) -> "ProgramWriter":
        return self._append(Opcode.MOVE_TO, index)

    def read_from(self, index: int) -> "ProgramWriter":
        return self._append(Opcode.READ_FROM, index)

    def set_output_dx(self, index: int) -> "ProgramWriter":
        return self._append(Opcode.SET_DX, index)

    def set_output_dy(self, index: int) -> "ProgramWriter":
        return self._append(Opcode.SET_DY, index)

    def build(self) -> Program:
        return Program(self.instructions)


__all__ = ["Program", "ProgramWriter"]
