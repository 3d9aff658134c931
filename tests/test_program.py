"""Tests for programs and their byte serialization."""

import pytest

from neurevo import Chromosome, DecodeError, Opcode, Program, ProgramWriter


def _sample_program() -> Program:
    return (
        ProgramWriter()
        .create_fixed(1.0)
        .create_weighted_sum(-5.0)
        .read_from(2)
        .create_random()
        .move_to(-1)
        .set_output_dx(0)
        .set_output_dy(3)
        .build()
    )


def test_serialize_round_trip():
    program = _sample_program()
    data = program.serialize()
    assert len(data) == 9 * len(program)
    assert Program.deserialize(data) == program


def test_writer_records_calls_in_order():
    assert _sample_program().opcodes() == [
        Opcode.CREATE_FIXED,
        Opcode.CREATE_WEIGHTED_SUM,
        Opcode.READ_FROM,
        Opcode.CREATE_RANDOM,
        Opcode.MOVE_TO,
        Opcode.SET_DX,
        Opcode.SET_DY,
    ]


def test_trailing_fragment_is_dropped():
    program = _sample_program()
    data = program.serialize() + b"\x01\x02\x03"
    decoded = Program.deserialize(data)
    assert len(decoded) == len(program)
    assert decoded == program


def test_empty_and_short_buffers_decode_to_empty_program():
    assert len(Program.deserialize(b"")) == 0
    assert len(Program.deserialize(bytes(8))) == 0
    assert Program.deserialize(b"") == Program.noop()


def test_decode_error_reports_frame_offset():
    data = bytearray(_sample_program().serialize())
    data[9] = 200
    with pytest.raises(DecodeError) as info:
        Program.deserialize(bytes(data))
    assert info.value.tag == 200
    assert info.value.offset == 9


def test_execute_returns_the_sink():
    writer = ProgramWriter()
    assert _sample_program().execute(writer) is writer
    assert writer.build() == _sample_program()


def test_program_sequence_protocol():
    program = _sample_program()
    assert program[0].opcode is Opcode.CREATE_FIXED
    assert [instr.opcode for instr in program] == program.opcodes()
    assert program != Program.noop()


def test_chromosome_wraps_program_bytes():
    program = _sample_program()
    chromosome = Chromosome.from_program(program)
    assert chromosome.program() == program
    assert chromosome.frame_count() == len(program)
    assert chromosome.is_decodable()
    assert len(chromosome.get_signature()) == 32
    assert not Chromosome(bytes([42]) + bytes(8)).is_decodable()
