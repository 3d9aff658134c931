"""Immutable genome buffers."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import List

from .enums import Opcode
from .layout import FRAME_SIZE, frame_count
from .program import Program


@dataclass(frozen=True)
class Chromosome:
    """
    Raw bytes of a serialized program; the unit of heredity.
    Genetic operators never modify a chromosome, they return a new one.
    """

    data: bytes

    def __post_init__(self):
        object.__setattr__(self, "data", bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_program(cls, program: Program) -> "Chromosome":
        return cls(program.serialize())

    def program(self) -> Program:
        """Decode into a program; raises DecodeError on an unknown opcode tag."""
        return Program.deserialize(self.data)

    def opcodes(self) -> List[Opcode]:
        return self.program().opcodes()

    def frame_count(self) -> int:
        return frame_count(len(self.data))

    def is_decodable(self) -> bool:
        """True when every whole frame carries a known opcode tag."""
        known = {int(op) for op in Opcode}
        return all(tag in known for tag in self.data[: self.frame_count() * FRAME_SIZE : FRAME_SIZE])

    def get_signature(self) -> str:
        """Stable digest of the genome bytes."""
        return hashlib.md5(self.data).hexdigest()


__all__ = ["Chromosome"]
