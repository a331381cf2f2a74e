"""
Robot commands and the value types they operate on.

Every command keyword is represented by its own class. The class declares the
keyword it is recognized by and the shape of its arguments as a tuple of
recognizers.
"""
from collections import namedtuple
from enum import Enum

from rovsim.recognizers import INT, DIRECTION


class Position(namedtuple('Position', 'x y')):
    __slots__ = ()

    def __str__(self):
        return f"{self.x},{self.y}"


class Direction(Enum):
    """
    Facing directions in clockwise order. Turning right advances one step
    in this order, turning left goes one step back.
    """
    NORTH = (0, 1)
    EAST = (1, 0)
    SOUTH = (0, -1)
    WEST = (-1, 0)

    def right(self):
        return _CYCLE[(_CYCLE.index(self) + 1) % len(_CYCLE)]

    def left(self):
        return _CYCLE[(_CYCLE.index(self) - 1) % len(_CYCLE)]

    def step(self, position):
        dx, dy = self.value
        return Position(position.x + dx, position.y + dy)


_CYCLE = list(Direction)


class Command:
    keyword = None
    shape = ()
    __slots__ = ['location']

    def __init__(self, location=None):
        self.location = location

    @property
    def args(self):
        return tuple(getattr(self, name) for name in self.__slots__
                     if name != 'location')

    def __eq__(self, other):
        return type(self) is type(other) and self.args == other.args

    def __hash__(self):
        return hash((self.keyword, self.args))

    def __str__(self):
        args = self.args
        if not args:
            return self.keyword
        return "{} {}".format(self.keyword, ",".join(
            a.name if isinstance(a, Direction) else str(a) for a in args))

    def __repr__(self):
        return f"<{type(self).__name__}: {self}>"


class Deploy(Command):
    keyword = 'DEPLOY'
    shape = (INT, INT, DIRECTION)
    __slots__ = ['x', 'y', 'direction']

    def __init__(self, x, y, direction, location=None):
        super().__init__(location)
        self.x = x
        self.y = y
        self.direction = direction

    @property
    def position(self):
        return Position(self.x, self.y)


class Pit(Command):
    keyword = 'PIT'
    shape = (INT, INT)
    __slots__ = ['x', 'y']

    def __init__(self, x, y, location=None):
        super().__init__(location)
        self.x = x
        self.y = y

    @property
    def position(self):
        return Position(self.x, self.y)


class Move(Command):
    keyword = 'MOVE'
    __slots__ = []


class Left(Command):
    keyword = 'LEFT'
    __slots__ = []


class Right(Command):
    keyword = 'RIGHT'
    __slots__ = []


class Report(Command):
    keyword = 'REPORT'
    __slots__ = []


COMMANDS = {c.keyword: c for c in [Deploy, Pit, Move, Left, Right, Report]}
