from enum import Enum

from rovsim.commands import Position
from rovsim.exceptions import InterpreterInitError

DEFAULT_BOARD_SIZE = 10


class Outcome(Enum):
    OK = 'ok'
    PIT_BLOCKED = 'pit_blocked'
    OUT_OF_BOUNDS = 'out_of_bounds'


class Messages(object):
    """
    Literal output lines produced by the interpreter.

    `report` is a format string with `x`, `y` and `direction` fields.
    """
    __slots__ = ['outside_zone', 'pit_detected', 'robot_detected', 'report']

    def __init__(self, outside_zone="Outside Zone: Ignored",
                 pit_detected="PIT Detected: Ignored",
                 robot_detected="ROBOT Detected: Ignored",
                 report="{x},{y},{direction}"):
        self.outside_zone = outside_zone
        self.pit_detected = pit_detected
        self.robot_detected = robot_detected
        self.report = report

    def for_outcome(self, outcome):
        if outcome is Outcome.PIT_BLOCKED:
            return self.pit_detected
        if outcome is Outcome.OUT_OF_BOUNDS:
            return self.outside_zone

    def format_report(self, position, direction):
        return self.report.format(x=position.x, y=position.y,
                                  direction=direction.name)


class Board(object):
    """
    A square zone of `size` x `size` cells with a set of pits.

    Valid coordinates are integers in `[0, size)`. Pits are only ever added.
    """
    def __init__(self, size=DEFAULT_BOARD_SIZE):
        if not isinstance(size, int) or size < 1:
            raise InterpreterInitError(
                f'Board size must be a positive integer, got "{size}".')
        self.size = size
        self.pits = set()

    def in_bounds(self, x, y):
        return 0 <= x < self.size and 0 <= y < self.size

    def check_cell(self, x, y):
        """
        Decides whether the robot may occupy the cell at `x`, `y`.

        Pits are checked before bounds so `PIT_BLOCKED` wins when both apply.
        """
        if Position(x, y) in self.pits:
            return Outcome.PIT_BLOCKED
        if not self.in_bounds(x, y):
            return Outcome.OUT_OF_BOUNDS
        return Outcome.OK

    def add_pit(self, position):
        self.pits.add(Position(*position))

    def clear(self):
        self.pits.clear()

    def __contains__(self, position):
        return Position(*position) in self.pits
