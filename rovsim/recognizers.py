"""
A support for token recognizers.
Recognizers are callables capable of recognizing low-level patterns
(a.k.a tokens) in a command line.
"""
import re
from rovsim.exceptions import InterpreterInitError


class Recognizer(object):
    """
    Base class for a recognizer.

    Recognizers are callables capable of recognizing low-level patterns
    (a.k.a tokens) in the input.
    """
    def __init__(self, name):
        self.name = name

    def __call__(self, in_str, pos):
        raise NotImplementedError

    def match_all(self, in_str):
        """
        Returns the recognized token only if it spans the whole `in_str`.
        """
        match = self(in_str, 0)
        if match is not None and len(match) == len(in_str):
            return match

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<{type(self).__name__}({self.name})>"


class StringRecognizer(Recognizer):
    """
    String recognizer will recognize the given literal string in the input
    string.
    """
    def __init__(self, value, ignore_case=False, name=None):
        super(StringRecognizer, self).__init__(name or value)
        self.value = value
        self.ignore_case = ignore_case
        self.value_cmp = value.lower() if ignore_case else value

    def __call__(self, in_str, pos):
        if self.ignore_case:
            if in_str[pos:pos+len(self.value)].lower() == self.value_cmp:
                return self.value
        else:
            if in_str[pos:pos+len(self.value)] == self.value_cmp:
                return self.value


class RegExRecognizer(Recognizer):
    """
    Regular expression recognizer will recognize given regular expression in
    the input string.
    """
    def __init__(self, regex, name=None, re_flags=0, ignore_case=False):
        if name is None:
            name = regex
        super(RegExRecognizer, self).__init__(name)
        self._regex = regex
        self.ignore_case = ignore_case
        if ignore_case:
            re_flags |= re.IGNORECASE
        self.re_flags = re_flags
        try:
            self.regex = re.compile(self._regex, re_flags)
        except re.error as ex:
            message = 'Regex compile error in /{}/ (report: "{}")'
            raise InterpreterInitError(message.format(self._regex, str(ex)))

    def __call__(self, in_str, pos):
        m = self.regex.match(in_str, pos)
        if m and m.group():
            return m.group()


INT = RegExRecognizer(r'[+-]?[0-9]+', name='INT')
DIRECTION = RegExRecognizer(r'NORTH|EAST|SOUTH|WEST', name='DIRECTION')
WS = RegExRecognizer(r'\s+', name='WS')
