"""Enumerations and opcode groupings for neurevo genomes."""

from enum import IntEnum
from typing import Dict, List, Set


class Opcode(IntEnum):
    """Instruction opcodes with their on-wire tag byte."""

    # Neuron creation (cursor moves to the new neuron)
    CREATE_FIXED = 0
    CREATE_RANDOM = 1
    CREATE_SUM = 2
    CREATE_WEIGHTED_SUM = 3
    CREATE_MIN = 4
    CREATE_MAX = 5

    # Wiring (operand is a neuron index)
    MOVE_TO = 6
    READ_FROM = 7

    # Outputs (operand is a neuron index)
    SET_DX = 8
    SET_DY = 9


class NeuronKind(IntEnum):
    """Neuron definitions produced by the graph compiler."""

    INPUT_X = 0
    INPUT_Y = 1
    FIXED = 2
    RANDOM = 3
    SUM = 4
    WEIGHTED_SUM = 5
    MIN = 6
    MAX = 7


CREATE_OPS: List[Opcode] = [
    Opcode.CREATE_FIXED,
    Opcode.CREATE_RANDOM,
    Opcode.CREATE_SUM,
    Opcode.CREATE_WEIGHTED_SUM,
    Opcode.CREATE_MIN,
    Opcode.CREATE_MAX,
]

INDEX_OPS: List[Opcode] = [
    Opcode.MOVE_TO,
    Opcode.READ_FROM,
    Opcode.SET_DX,
    Opcode.SET_DY,
]

# Opcodes whose operand carries meaning; the others always encode 0.0
VALUED_OPS: Set[Opcode] = {
    Opcode.CREATE_FIXED,
    Opcode.CREATE_WEIGHTED_SUM,
    Opcode.MOVE_TO,
    Opcode.READ_FROM,
    Opcode.SET_DX,
    Opcode.SET_DY,
}

CREATED_KINDS: Dict[Opcode, NeuronKind] = {
    Opcode.CREATE_FIXED: NeuronKind.FIXED,
    Opcode.CREATE_RANDOM: NeuronKind.RANDOM,
    Opcode.CREATE_SUM: NeuronKind.SUM,
    Opcode.CREATE_WEIGHTED_SUM: NeuronKind.WEIGHTED_SUM,
    Opcode.CREATE_MIN: NeuronKind.MIN,
    Opcode.CREATE_MAX: NeuronKind.MAX,
}

MNEMONICS: Dict[Opcode, str] = {
    Opcode.CREATE_FIXED: "FIXED",
    Opcode.CREATE_RANDOM: "RAND",
    Opcode.CREATE_SUM: "SUM",
    Opcode.CREATE_WEIGHTED_SUM: "WEIGHT",
    Opcode.CREATE_MIN: "MIN",
    Opcode.CREATE_MAX: "MAX",
    Opcode.MOVE_TO: "MOVE",
    Opcode.READ_FROM: "READ",
    Opcode.SET_DX: "DX",
    Opcode.SET_DY: "DY",
}


__all__ = [
    "Opcode",
    "NeuronKind",
    "CREATE_OPS",
    "INDEX_OPS",
    "VALUED_OPS",
    "CREATED_KINDS",
    "MNEMONICS",
]
