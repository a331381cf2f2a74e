"""
PIT commands are only accepted right after a DEPLOY command, optionally
separated from it by other PIT commands. Any other line in between, including
an unknown or malformed one, breaks the chain.
"""
from rovsim.commands import Deploy, Pit
from rovsim.exceptions import CommandSyntaxError
from rovsim.tokenizer import LineTokenizer


def is_pit_contextually_valid(lines, index, tokenizer=None):
    """
    Walks backward from the line before `index` over an indexable sequence of
    raw lines. Returns `True` if a DEPLOY line is reached passing only PIT
    lines, `False` if any other line or the start of the stream comes first.
    """
    if tokenizer is None:
        tokenizer = LineTokenizer()
    for idx in range(index - 1, -1, -1):
        try:
            command = tokenizer.tokenize(lines[idx])
        except CommandSyntaxError:
            return False
        if isinstance(command, Deploy):
            return True
        if not isinstance(command, Pit):
            return False
    return False


class PitContext(object):
    """
    Forward carried equivalent of `is_pit_contextually_valid`.

    `update` must be called once for every line of the stream, in order, with
    the tokenized command or `None` if the line couldn't be tokenized.
    `valid` then tells whether a PIT on the next line is acceptable.
    """
    __slots__ = ['valid']

    def __init__(self):
        self.valid = False

    def update(self, command):
        if isinstance(command, Deploy):
            self.valid = True
        elif not isinstance(command, Pit):
            self.valid = False

    def reset(self):
        self.valid = False
