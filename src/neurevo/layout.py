"""Frame layout constants and neuron index helpers."""

import math
import struct
from typing import Tuple


OPCODE_SIZE = 1
OPERAND_SIZE = 8
FRAME_SIZE = OPCODE_SIZE + OPERAND_SIZE
FRAME_FORMAT = ">Bd"
OPERAND_FORMAT = ">d"
OPERAND_BITS = OPERAND_SIZE * 8

X_NEURON = 0
Y_NEURON = 1
RESERVED_NEURON_COUNT = 2

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

_FRAME = struct.Struct(FRAME_FORMAT)
_OPERAND = struct.Struct(OPERAND_FORMAT)

assert _FRAME.size == FRAME_SIZE, "Frame format does not match the frame size"


def pack_frame(tag: int, operand: float) -> bytes:
    """Pack a tag byte and a float64 operand into one frame."""
    return _FRAME.pack(int(tag), float(operand))


def unpack_frame(frame: bytes) -> Tuple[int, float]:
    """Unpack one frame into (tag, operand)."""
    if len(frame) != FRAME_SIZE:
        raise ValueError(f"Frame must be exactly {FRAME_SIZE} bytes, got {len(frame)}.")
    tag, operand = _FRAME.unpack(frame)
    return tag, operand


def operand_to_bits(operand: float) -> int:
    """Return the 64-bit IEEE-754 pattern of an operand."""
    return int.from_bytes(_OPERAND.pack(float(operand)), "big")


def bits_to_operand(bits: int) -> float:
    """Rebuild an operand from its 64-bit IEEE-754 pattern."""
    return _OPERAND.unpack(int(bits).to_bytes(OPERAND_SIZE, "big"))[0]


def frame_count(byte_length: int) -> int:
    """Number of whole frames in a buffer; trailing fragments do not count."""
    return byte_length // FRAME_SIZE


def operand_to_index(operand: float) -> int:
    """Convert an index operand to int: truncate toward zero, saturate, NaN is 0."""
    if math.isnan(operand):
        return 0
    if operand >= INT_MAX:
        return INT_MAX
    if operand <= INT_MIN:
        return INT_MIN
    return int(operand)


def normalize_index(index: int, count: int) -> int:
    """Floor-modulo an index into [0, count)."""
    if count <= 0:
        raise ValueError("Cannot normalize an index against an empty graph.")
    return int(index) % count


__all__ = [
    "OPCODE_SIZE",
    "OPERAND_SIZE",
    "FRAME_SIZE",
    "FRAME_FORMAT",
    "OPERAND_FORMAT",
    "OPERAND_BITS",
    "X_NEURON",
    "Y_NEURON",
    "RESERVED_NEURON_COUNT",
    "INT_MIN",
    "INT_MAX",
    "pack_frame",
    "unpack_frame",
    "operand_to_bits",
    "bits_to_operand",
    "frame_count",
    "operand_to_index",
    "normalize_index",
]
