"""Hand-written seed programs and chromosomes."""

from __future__ import annotations

from typing import Callable, Optional

from .chromosome import Chromosome
from .layered import Layer, LayeredProgrammer
from .position import Position
from .program import Program, ProgramWriter

Weighter = Callable[[Layer], Layer]


class ProgramFactory:
    """
    Seed programs for agents.

    Most of them are perceptrons over the input layer
    ``x, y, constant(1.0), rand, rand``: one weighted layer summed into dX,
    another one summed into dY. Weights on the constant give a fixed move.
    """

    def create_perceptrons(self, dx_weighter: Weighter, dy_weighter: Weighter) -> Program:
        programmer = LayeredProgrammer()
        inputs = programmer.layer_of().x().y().constant(1.0).rand().rand()
        programmer.set_dx(programmer.sum(dx_weighter(inputs)))
        programmer.set_dy(programmer.sum(dy_weighter(inputs)))
        return programmer.program()

    def _constant_mover(self, dx: float, dy: float) -> Program:
        return self.create_perceptrons(
            lambda inputs: inputs.weighted(0, 0, dx, 0, 0),
            lambda inputs: inputs.weighted(0, 0, dy, 0, 0),
        )

    def non_mover(self) -> Program:
        return self._constant_mover(0, 0)

    def up_mover(self) -> Program:
        return self._constant_mover(0, -1)

    def up_left_mover(self) -> Program:
        return self._constant_mover(-1, -1)

    def up_right_mover(self) -> Program:
        return self._constant_mover(1, -1)

    def down_mover(self) -> Program:
        return self._constant_mover(0, 1)

    def down_left_mover(self) -> Program:
        return self._constant_mover(-1, 1)

    def down_right_mover(self) -> Program:
        return self._constant_mover(1, 1)

    def left_mover(self) -> Program:
        return self._constant_mover(-1, 0)

    def right_mover(self) -> Program:
        return self._constant_mover(1, 0)

    def position_mover(self, position: Position) -> Program:
        """Heads for a position: dX = target.x - x, dY = target.y - y."""
        return self.create_perceptrons(
            lambda inputs: inputs.weighted(-1, 0, position.x, 0, 0),
            lambda inputs: inputs.weighted(0, -1, position.y, 0, 0),
        )

    def center_mover(self, width: int, height: int) -> Program:
        return self.create_perceptrons(
            lambda inputs: inputs.weighted(-1, 0, width // 2, 0, 0),
            lambda inputs: inputs.weighted(0, -1, height // 2, 0, 0),
        )

    def corner_mover(self, width: int, height: int) -> Program:
        """Moves away from the center, toward the nearest corner."""
        return self.create_perceptrons(
            lambda inputs: inputs.weighted(1, 0, -(width // 2), 0, 0),
            lambda inputs: inputs.weighted(0, 1, -(height // 2), 0, 0),
        )

    def random_mover(self) -> Program:
        """2 * rand - 1 on each axis, so every step is drawn from {-1, 0, 1}."""
        return self.create_perceptrons(
            lambda inputs: inputs.weighted(0, 0, -1, 2, 0),
            lambda inputs: inputs.weighted(0, 0, -1, 0, 2),
        )

    def move_toward(self, position: Position) -> Program:
        """
        Explicit clamp network heading for a position.

        Per axis: target, -input, their sum, max with -1, then min with 1.
        All indexes are absolute; X uses neurons 2 to 8, Y uses 9 to 15.
        """
        writer = ProgramWriter()
        # X axis
        writer.create_fixed(position.x)
        writer.create_weighted_sum(-1.0).read_from(0)
        writer.create_sum().read_from(3).read_from(2)
        writer.create_fixed(-1.0)
        writer.create_max().read_from(5).read_from(4)
        writer.create_fixed(1.0)
        writer.create_min().read_from(7).read_from(6)
        writer.set_output_dx(8)
        # Y axis
        writer.create_fixed(position.y)
        writer.create_weighted_sum(-1.0).read_from(1)
        writer.create_sum().read_from(10).read_from(9)
        writer.create_fixed(-1.0)
        writer.create_max().read_from(12).read_from(11)
        writer.create_fixed(1.0)
        writer.create_min().read_from(14).read_from(13)
        writer.set_output_dy(15)
        return writer.build()


class ChromosomeFactory:
    """Same seeds as ProgramFactory, serialized as chromosomes."""

    def __init__(self, programs: Optional[ProgramFactory] = None):
        self.programs = programs if programs is not None else ProgramFactory()

    def non_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.non_mover())

    def up_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.up_mover())

    def up_left_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.up_left_mover())

    def up_right_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.up_right_mover())

    def down_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.down_mover())

    def down_left_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.down_left_mover())

    def down_right_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.down_right_mover())

    def left_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.left_mover())

    def right_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.right_mover())

    def position_mover(self, position: Position) -> Chromosome:
        return Chromosome.from_program(self.programs.position_mover(position))

    def center_mover(self, width: int, height: int) -> Chromosome:
        return Chromosome.from_program(self.programs.center_mover(width, height))

    def corner_mover(self, width: int, height: int) -> Chromosome:
        return Chromosome.from_program(self.programs.corner_mover(width, height))

    def random_mover(self) -> Chromosome:
        return Chromosome.from_program(self.programs.random_mover())

    def move_toward(self, position: Position) -> Chromosome:
        return Chromosome.from_program(self.programs.move_toward(position))


__all__ = ["Weighter", "ProgramFactory", "ChromosomeFactory"]
