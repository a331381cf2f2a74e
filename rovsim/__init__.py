# -*- coding: utf-8 -*-
# flake8: NOQA
from rovsim.interpreter import Interpreter
from rovsim.tokenizer import LineTokenizer
from rovsim.board import Board, Messages, Outcome
from rovsim.context import PitContext, is_pit_contextually_valid
from rovsim.commands import Position, Direction, Command, Deploy, Pit, \
    Move, Left, Right, Report, COMMANDS
from rovsim.common import Location, get_collector
from rovsim.exceptions import RovsimError, CommandSyntaxError, \
    UnknownCommandError, InputReadError, InterpreterInitError

from .version import __version__
