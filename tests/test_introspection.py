"""Tests for the listing, weight and layer sinks."""

import pytest

from neurevo import (
    LayeredDescriber,
    LayeredProgrammer,
    NetworkBuilder,
    Opcode,
    Position,
    ProgramListing,
    ProgramWriter,
    collect_weights,
)


def _listing(program):
    return program.execute(ProgramListing()).build().splitlines()


def test_listing_of_weighted_program():
    program = (
        ProgramWriter()
        .create_fixed(1.0)
        .create_weighted_sum(-5.0)
        .read_from(2)
        .set_output_dy(3)
        .set_output_dx(0)
        .build()
    )
    assert _listing(program) == [
        "0 = X",
        "1 = Y",
        "2 = CONST(1.0)",
        "3 = WEIGHT(-5.0)",
        "→2:CONST(1.0)",
        "DY = 3:WEIGHT(-5.0)",
        "DX = 0:X",
    ]


def test_listing_names_the_reader_after_a_move():
    program = (
        ProgramWriter()
        .create_sum()
        .create_fixed(4.0)
        .move_to(2)
        .read_from(3)
        .set_output_dx(2)
        .set_output_dy(-1)
        .build()
    )
    assert _listing(program) == [
        "0 = X",
        "1 = Y",
        "2 = SUM",
        "3 = CONST(4.0)",
        "2:SUM",
        "→3:CONST(4.0)",
        "DX = 2:SUM",
        "DY = 3:CONST(4.0)",
    ]


def test_listing_of_clamp_network(programs):
    lines = _listing(programs.move_toward(Position(1, 9)))
    assert lines[:6] == ["0 = X", "1 = Y", "2 = CONST(1.0)", "3 = WEIGHT(-1.0)", "→0:X", "4 = SUM"]
    assert "DX = 8:MIN" in lines
    assert lines[-1] == "DY = 15:MIN"


def test_collect_weights(programs):
    assert collect_weights(programs.non_mover()) == [0.0] * 10
    assert collect_weights(programs.position_mover(Position(3, 4))) == [
        -1.0, 0.0, 3.0, 0.0, 0.0,
        0.0, -1.0, 4.0, 0.0, 0.0,
    ]
    assert collect_weights(programs.move_toward(Position(0, 0))) == [-1.0, -1.0]


def test_layered_programmer_checks_weight_count():
    programmer = LayeredProgrammer()
    inputs = programmer.layer_of().x().y().constant(1.0)
    with pytest.raises(ValueError):
        inputs.weighted(1.0, 2.0)


def test_layered_programmer_indexes_match_compiler(rng):
    programmer = LayeredProgrammer()
    inputs = programmer.layer_of().x().y().constant(2.0)
    hidden = inputs.weighted(1.0, 1.0, 1.0)
    assert hidden.indexes == [3, 4, 5]
    output = programmer.sum(hidden)
    assert output.index == 6
    program = programmer.set_dx(output).set_dy(output).program()

    network = program.execute(NetworkBuilder(rng)).build()
    assert network.neuron_count == 7
    network.set_inputs(1.0, 2.0)
    network.fire()
    assert network.output_dx() == 5.0


@pytest.mark.parametrize("seed", ["non_mover", "up_right_mover", "random_mover"])
def test_perceptron_frames_rely_on_the_create_cursor(programs, seed):
    opcodes = getattr(programs, seed)().opcodes()
    assert Opcode.MOVE_TO not in opcodes
    for current, following in zip(opcodes, opcodes[1:]):
        if current is Opcode.CREATE_WEIGHTED_SUM:
            assert following is Opcode.READ_FROM


def test_layered_description_of_perceptron(programs):
    program = programs.position_mover(Position(3, 4))
    description = program.execute(LayeredDescriber()).build()

    assert description.layers == [[0, 1, 2, 3, 4], [10, 16]]
    assert description.dx == 10
    assert description.dy == 16
    assert description.weight(2, 10) == 3.0
    assert description.weight(2, 16) == 4.0
    assert description.weight(1, 16) == -1.0
    assert description.weight(0, 16) == 0.0
    assert description.weight(10, 16) == 0.0
    assert description.name(0) == "X"
    assert description.name(2) == "1.0"
    assert description.name(3) == "RAND"
    assert description.name(10) == "dX:SUM"
    assert description.name(16) == "dY:SUM"


def test_layered_description_without_weights():
    program = ProgramWriter().create_min().set_output_dx(2).set_output_dy(0).build()
    description = program.execute(LayeredDescriber()).build()
    assert description.layers == [[0, 1, 2]]
    assert description.synapses == []
    assert description.name(2) == "dX:MIN"
    assert description.name(0) == "dY:X"


def test_sinks_accept_arbitrary_programs(rng):
    program = (
        ProgramWriter()
        .create_weighted_sum(2.0)
        .move_to(-7)
        .read_from(40)
        .create_weighted_sum(0.5)
        .read_from(2)
        .move_to(2)
        .read_from(3)
        .set_output_dx(3)
        .set_output_dy(2)
        .build()
    )
    assert program.execute(LayeredDescriber()).build().dx == 3
    assert len(_listing(program)) > 4
    assert collect_weights(program) == [2.0, 0.5]
