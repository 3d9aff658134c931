"""Tests for reproduction and mutation of chromosomes."""

import numpy as np
import pytest

from neurevo import (
    Agent,
    Chromosome,
    ChromosomeFactory,
    DecodeError,
    Instruction,
    Mutator,
    Opcode,
    Position,
    Reproducer,
    crossover,
)
from neurevo.layout import FRAME_SIZE, OPCODE_SIZE, operand_to_bits
from neurevo.reproducer import equalize_lengths
from neurevo.weights import collect_weights


@pytest.fixture
def seeds():
    return ChromosomeFactory()


def test_equalize_lengths_prepends_prefix_of_longer():
    a, b, c, d = (Instruction(Opcode.CREATE_FIXED, float(i)) for i in range(4))
    x = Instruction(Opcode.CREATE_SUM)
    codes1, codes2 = [a, b, c, d], [x]
    equalize_lengths(codes1, codes2)
    assert codes1 == [a, b, c, d]
    assert codes2 == [a, b, c, x]

    codes1, codes2 = [x], [a, b, c, d]
    equalize_lengths(codes1, codes2)
    assert codes1 == [a, b, c, x]


def test_crossover_of_identical_parents_is_identity(rng, seeds):
    parent = seeds.random_mover()
    assert crossover(parent, parent, rng) == parent


def test_crossover_child_decodes(rng, seeds):
    short = seeds.move_toward(Position(1, 2))
    long = seeds.center_mover(10, 10)
    for _ in range(20):
        child = crossover(short, long, rng)
        assert child.is_decodable()
        assert child.frame_count() == max(short.frame_count(), long.frame_count())


def test_crossover_takes_each_instruction_from_a_parent(rng, seeds):
    parent1 = seeds.down_right_mover()
    parent2 = seeds.up_left_mover()
    child = crossover(parent1, parent2, rng).program()
    for codes in zip(child, parent1.program(), parent2.program()):
        assert codes[0] in codes[1:]


def test_crossover_ignores_trailing_bytes(rng, seeds):
    parent = seeds.non_mover()
    padded = Chromosome(parent.data + b"\xff\xff")
    assert crossover(padded, padded, rng) == parent


def test_crossover_rejects_undecodable_parent(rng, seeds):
    bad = Chromosome(bytes([99]) + bytes(8))
    with pytest.raises(DecodeError):
        crossover(bad, seeds.non_mover(), rng)


def test_parent_reproducers(rng, seeds):
    parent1 = seeds.up_mover()
    parent2 = seeds.down_mover()
    assert Reproducer.on_first_parent().reproduce(parent1, parent2) is parent1

    picker = Reproducer.on_random_parent(rng)
    picks = {picker(parent1, parent2) for _ in range(30)}
    assert picks == {parent1, parent2}


def test_random_codes_reproducer_is_seeded(seeds):
    parent1 = seeds.up_mover()
    parent2 = seeds.down_left_mover()
    first = Reproducer.on_random_codes(np.random.default_rng(3))
    second = Reproducer.on_random_codes(np.random.default_rng(3))
    assert [first(parent1, parent2) for _ in range(5)] == [second(parent1, parent2) for _ in range(5)]


def test_bit_mutation_with_certainty_flips_every_bit(rng, seeds):
    parent = seeds.non_mover()
    child = Mutator.on_bits(rng, 1.0).mutate(parent)
    assert child.data == bytes(b ^ 0xFF for b in parent.data)
    assert parent == seeds.non_mover()
    assert not child.is_decodable()
    with pytest.raises(DecodeError):
        Agent.create(child, rng)


def test_bit_mutation_without_probability_is_identity(rng, seeds):
    parent = seeds.random_mover()
    assert Mutator.on_bits(rng, 0.0)(parent) == parent


def test_bit_mutation_changes_some_bytes(rng, seeds):
    parent = seeds.random_mover()
    child = Mutator.on_bits(rng, 0.1)(parent)
    assert len(child) == len(parent)
    assert child != parent


def test_bit_mutation_of_empty_chromosome(rng):
    assert Mutator.on_bits(rng, 0.5)(Chromosome(b"")).data == b""


def test_weight_mutation_keeps_opcodes(rng, seeds):
    parent = seeds.position_mover(Position(3, 4))
    mutator = Mutator.on_weights(rng, 0.3)
    for _ in range(10):
        child = mutator(parent)
        assert child.opcodes() == parent.opcodes()
        tags = slice(0, None, FRAME_SIZE)
        assert child.data[tags] == parent.data[tags]


def test_weight_mutation_only_touches_weights(rng, seeds):
    parent = Chromosome(seeds.position_mover(Position(3, 4)).data + b"\x07")
    child = Mutator.on_weights(rng, 1.0)(parent)

    for idx, op in enumerate(parent.opcodes()):
        frame = slice(idx * FRAME_SIZE, (idx + 1) * FRAME_SIZE)
        if op is Opcode.CREATE_WEIGHTED_SUM:
            operand = slice(idx * FRAME_SIZE + OPCODE_SIZE, (idx + 1) * FRAME_SIZE)
            assert child.data[operand] == bytes(b ^ 0xFF for b in parent.data[operand])
        else:
            assert child.data[frame] == parent.data[frame]
    assert child.data[-1:] == b"\x07"

    first_weight = collect_weights(child.program())[0]
    assert operand_to_bits(first_weight) == operand_to_bits(-1.0) ^ ((1 << 64) - 1)


def test_weight_mutation_without_weights_is_identity(rng, seeds):
    parent = seeds.move_toward(Position(0, 0))
    stripped = Chromosome(b"".join(
        instr.encode() for instr in parent.program() if instr.opcode is not Opcode.CREATE_WEIGHTED_SUM
    ))
    assert Mutator.on_weights(rng, 1.0)(stripped) == stripped


def test_weight_mutation_needs_a_decodable_chromosome(rng):
    with pytest.raises(DecodeError):
        Mutator.on_weights(rng, 0.5)(Chromosome(bytes([77]) + bytes(8)))


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_probability_is_checked(rng, probability):
    with pytest.raises(ValueError):
        Mutator.on_bits(rng, probability)
    with pytest.raises(ValueError):
        Mutator.on_weights(rng, probability)


def test_none_mutator(seeds):
    parent = seeds.left_mover()
    assert Mutator.none()(parent) is parent
    assert repr(Mutator.none()) == "Mutator(none)"
