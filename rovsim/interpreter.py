import io
import logging
from typing import Optional

from rovsim import termui
from rovsim.board import Board, Messages, Outcome, DEFAULT_BOARD_SIZE
from rovsim.commands import Deploy
from rovsim.common import Location, get_collector
from rovsim.context import PitContext
from rovsim.exceptions import (CommandSyntaxError, InputReadError,
                               InterpreterInitError)
from rovsim.termui import h_print, a_print, e_print
from rovsim.tokenizer import LineTokenizer


logger = logging.getLogger(__name__)

# Command handlers keyed by command keyword. Each handler is called with the
# interpreter and the command and returns an output line or None.
action = get_collector()


class Interpreter(object):
    """
    Drives a single robot over a square board of pits by interpreting a stream
    of command lines. Each line produces at most one output line.

    Args:
        board_size(int): Side length of the board.
        messages(Messages): Output line literals. Defaults to `Messages()`.
        keep_state(bool): If `True` a call to `process`/`iter_process`
            continues the previous session instead of starting with a clean
            board.
        tokenizer(LineTokenizer): Used to turn lines into commands.
        actions(dict): Command handlers overriding the default ones.
        encoding(str): Used to decode `bytes` lines.
        debug(bool): Print a trace of each interpreted line.
        debug_colors(bool): Use colors in the debug output.
    """
    def __init__(self, board_size=DEFAULT_BOARD_SIZE, messages=None,
                 keep_state=False, tokenizer=None, actions=None,
                 encoding='utf-8', debug=False, debug_colors=False):
        self.board = Board(board_size)
        self.messages = Messages() if messages is None else messages
        self.keep_state = keep_state
        self.tokenizer = LineTokenizer() if tokenizer is None else tokenizer
        self.encoding = encoding
        self.debug = debug
        self.debug_colors = debug_colors
        termui.colors = debug_colors

        self.actions = dict(action.all)
        if actions:
            self.actions.update(actions)
        self._check_actions()

        self.pit_context = PitContext()
        self.file_name = None
        self.reset()

    def _check_actions(self):
        missing = [keyword for keyword in self.tokenizer.commands
                   if keyword not in self.actions]
        if missing:
            raise InterpreterInitError(
                'No handler defined for command(s): {}.'.format(
                    ", ".join(sorted(missing))))

    def reset(self):
        """
        Starts a new session: the robot is not deployed and there are no pits.
        """
        self.activated = False
        self.position = None
        self.direction = None
        self.board.clear()
        self.pit_context.reset()
        self.line_no = 0

    @property
    def pits(self):
        return frozenset(self.board.pits)

    def report(self) -> Optional[str]:
        if not self.activated:
            return None
        return self.messages.format_report(self.position, self.direction)

    def process_file(self, file_name):
        """
        Interprets commands from the given file and returns a new list of
        output lines.
        Args:
            file_name(str): A file name.
        """
        return list(self.iter_process_file(file_name))

    def iter_process_file(self, file_name):
        """
        Lazily interprets commands from the given file.
        """
        try:
            f = io.open(file_name, "r", encoding=self.encoding)
        except OSError as e:
            raise InputReadError(Location(file_name=file_name), e) from e
        with f:
            yield from self.iter_process(f, file_name=file_name)

    def process(self, input, file_name=None):
        """
        Interprets the given input and returns a new list of output lines.
        Args:
            input: A string, a file-like object or an iterable of `str` or
                `bytes` lines.
            file_name(str): File name if applicable. Used in error reporting.
        """
        return list(self.iter_process(input, file_name=file_name))

    def iter_process(self, input, file_name=None):
        """
        Lazily interprets the given input yielding output lines as they are
        produced. Lines are consumed one at a time.
        """
        if not self.keep_state:
            self.reset()
        self.line_no = 0
        self.file_name = file_name

        if self.debug:
            a_print("*** INTERPRETING STARTED", new_line=True)

        for line in self._read_lines(input):
            output = self.execute(line)
            if output is not None:
                yield output

        if self.debug:
            a_print("*** INTERPRETING FINISHED", new_line=True)

    def _read_lines(self, input):
        if isinstance(input, (str, bytes)):
            input = input.splitlines()
        lines = iter(input)
        while True:
            try:
                line = next(lines)
                if isinstance(line, bytes):
                    line = line.decode(self.encoding)
            except StopIteration:
                return
            except (OSError, UnicodeDecodeError) as e:
                raise InputReadError(
                    Location(self.line_no + 1, file_name=self.file_name),
                    e) from e
            yield line

    def execute(self, line) -> Optional[str]:
        """
        Interprets a single command line and returns the output line it
        produced, if any.
        """
        self.line_no += 1
        location = Location(self.line_no, line.rstrip('\r\n'), self.file_name)
        debug = self.debug
        if debug:
            h_print("Line", f"{location}", new_line=True)

        try:
            command = self.tokenizer.tokenize(line, location)
        except CommandSyntaxError as e:
            logger.warning('Skipping line %s:"%s": %s', location.line,
                           location.line_str, e.message)
            if debug:
                a_print("Skipped:", e.message, level=1)
            self.pit_context.update(None)
            return None

        if not self.activated and not isinstance(command, Deploy):
            output = None
            if debug:
                e_print("Ignored:", "robot not deployed.", level=1)
        else:
            output = self.actions[command.keyword](self, command)

        self.pit_context.update(command)

        if debug:
            h_print("Command:", str(command), level=1)
            if output is not None:
                h_print("Output:", output, level=1)
            h_print("State:", self._state_str(), level=1)
        return output

    def _state_str(self):
        if not self.activated:
            return "not deployed"
        return "{} {} pits={}".format(self.position, self.direction.name,
                                      len(self.board.pits))


@action('DEPLOY')
def deploy(interpreter, command):
    outcome = interpreter.board.check_cell(command.x, command.y)
    if outcome is not Outcome.OK:
        return interpreter.messages.for_outcome(outcome)
    interpreter.position = command.position
    interpreter.direction = command.direction
    interpreter.activated = True


@action('PIT')
def pit(interpreter, command):
    if not interpreter.pit_context.valid:
        if interpreter.debug:
            e_print("Ignored:", "PIT must follow DEPLOY or PIT.", level=1)
        return None
    if command.position == interpreter.position:
        return interpreter.messages.robot_detected
    interpreter.board.add_pit(command.position)


@action('MOVE')
def move(interpreter, command):
    target = interpreter.direction.step(interpreter.position)
    outcome = interpreter.board.check_cell(target.x, target.y)
    if outcome is not Outcome.OK:
        return interpreter.messages.for_outcome(outcome)
    interpreter.position = target


@action('LEFT')
def left(interpreter, command):
    interpreter.direction = interpreter.direction.left()


@action('RIGHT')
def right(interpreter, command):
    interpreter.direction = interpreter.direction.right()


@action('REPORT')
def report(interpreter, command):
    return interpreter.report()
