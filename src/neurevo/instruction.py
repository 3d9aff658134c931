"""Instruction representation and its fixed-width binary codec."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from .enums import MNEMONICS, VALUED_OPS, Opcode
from .errors import DecodeError
from .layout import operand_to_index, pack_frame, unpack_frame
from .sink import NeuralSink

Step = Callable[[NeuralSink], Any]

_KNOWN_TAGS = {int(op) for op in Opcode}


def _create_fixed(operand: float) -> Step:
    return lambda sink: sink.create_fixed(operand)


def _create_random(operand: float) -> Step:
    return lambda sink: sink.create_random()


def _create_sum(operand: float) -> Step:
    return lambda sink: sink.create_sum()


def _create_weighted_sum(operand: float) -> Step:
    return lambda sink: sink.create_weighted_sum(operand)


def _create_min(operand: float) -> Step:
    return lambda sink: sink.create_min()


def _create_max(operand: float) -> Step:
    return lambda sink: sink.create_max()


def _move_to(operand: float) -> Step:
    index = operand_to_index(operand)
    return lambda sink: sink.move_to(index)


def _read_from(operand: float) -> Step:
    index = operand_to_index(operand)
    return lambda sink: sink.read_from(index)


def _set_output_dx(operand: float) -> Step:
    index = operand_to_index(operand)
    return lambda sink: sink.set_output_dx(index)


def _set_output_dy(operand: float) -> Step:
    index = operand_to_index(operand)
    return lambda sink: sink.set_output_dy(index)


_RESOLVERS: Dict[Opcode, Callable[[float], Step]] = {
    Opcode.CREATE_FIXED: _create_fixed,
    Opcode.CREATE_RANDOM: _create_random,
    Opcode.CREATE_SUM: _create_sum,
    Opcode.CREATE_WEIGHTED_SUM: _create_weighted_sum,
    Opcode.CREATE_MIN: _create_min,
    Opcode.CREATE_MAX: _create_max,
    Opcode.MOVE_TO: _move_to,
    Opcode.READ_FROM: _read_from,
    Opcode.SET_DX: _set_output_dx,
    Opcode.SET_DY: _set_output_dy,
}


@dataclass(frozen=True)
class Instruction:
    """
    One (opcode, operand) pair of a genome.
    Always serialized as a 9-byte frame: tag byte + big-endian float64.
    """

    opcode: Opcode
    operand: float = 0.0

    def __post_init__(self):
        opcode = Opcode(self.opcode)
        object.__setattr__(self, "opcode", opcode)
        # Operands of zero-argument opcodes are not part of the instruction
        object.__setattr__(self, "operand", float(self.operand) if opcode in VALUED_OPS else 0.0)

    def encode(self) -> bytes:
        """Serialize to exactly one frame."""
        return pack_frame(self.opcode, self.operand)

    @classmethod
    def decode(cls, frame: bytes) -> "Instruction":
        """Deserialize one frame, raising DecodeError on an unknown tag."""
        tag, operand = unpack_frame(frame)
        if tag not in _KNOWN_TAGS:
            raise DecodeError(tag)
        return cls(Opcode(tag), operand)

    def resolve(self) -> Step:
        """Return the step applying this instruction to a sink."""
        return _RESOLVERS[self.opcode](self.operand)

    def describe(self) -> str:
        """One-line mnemonic, e.g. ``WEIGHT -0.5`` or ``READ 3``."""
        name = MNEMONICS[self.opcode]
        if self.opcode not in VALUED_OPS:
            return name
        if self.opcode == Opcode.CREATE_FIXED or self.opcode == Opcode.CREATE_WEIGHTED_SUM:
            return f"{name} {self.operand!r}"
        return f"{name} {operand_to_index(self.operand)}"


def encode(instruction: Instruction) -> bytes:
    """Serialize an instruction to its 9-byte frame."""
    return instruction.encode()


def decode(frame: bytes) -> Instruction:
    """Deserialize a 9-byte frame."""
    return Instruction.decode(frame)


__all__ = [
    "Step",
    "Instruction",
    "encode",
    "decode",
]
