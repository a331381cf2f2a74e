from rovsim.commands import COMMANDS, Direction
from rovsim.common import Location
from rovsim.exceptions import CommandSyntaxError, UnknownCommandError
from rovsim.recognizers import StringRecognizer, WS

# Conversion of recognized argument tokens to values.
CONVERTERS = {
    'INT': int,
    'DIRECTION': lambda value: Direction[value],
}


class LineTokenizer(object):
    """
    Turns a single raw command line into a command object.

    A line is split on the first whitespace run into a keyword and an
    optional remainder. The remainder is a comma separated list of argument
    tokens.

    Args:
        commands(dict): Keyword to command class mapping. Defaults to all
            robot commands.
        ignore_case(bool): Recognize keywords regardless of case. Keywords
            are case-sensitive by default.
    """
    def __init__(self, commands=None, ignore_case=False):
        self.commands = COMMANDS if commands is None else commands
        self.ignore_case = ignore_case
        self.keywords = [StringRecognizer(keyword, ignore_case=ignore_case)
                         for keyword in self.commands]

    def split(self, line):
        """
        Returns a `(keyword, args)` tuple where `args` is the list of comma
        separated argument tokens. A line without remainder has an empty
        `args`. Argument tokens are not stripped.
        """
        line = line.strip()
        m = WS.regex.search(line)
        if m is None:
            return line, []
        keyword, remainder = line[:m.start()], line[m.end():]
        return keyword, remainder.split(',')

    def recognize_keyword(self, keyword):
        for recognizer in self.keywords:
            if recognizer.match_all(keyword) is not None:
                return recognizer.value

    def tokenize(self, line, location=None):
        """
        Returns a command instance for the given line.

        Raises:
            UnknownCommandError: if the keyword is not recognized.
            CommandSyntaxError: if arguments don't match the command shape.
        """
        if location is None:
            location = Location(line_str=line)
        keyword, args = self.split(line)

        recognized = self.recognize_keyword(keyword)
        if recognized is None:
            raise UnknownCommandError(location, keyword,
                                      sorted(self.commands))

        command_cls = self.commands[recognized]
        shape = command_cls.shape
        if len(args) != len(shape):
            raise CommandSyntaxError(
                location,
                f"'{recognized}' expects {len(shape)} argument(s) "
                f"but got {len(args)}",
                hint=usage(command_cls))

        values = []
        for idx, (arg, arg_recognizer) in enumerate(zip(args, shape)):
            token = arg_recognizer.match_all(arg)
            if token is None:
                raise CommandSyntaxError(
                    location,
                    f"invalid argument {idx + 1} '{arg}' for '{recognized}', "
                    f"expected {arg_recognizer.name}",
                    hint=usage(command_cls))
            values.append(CONVERTERS[arg_recognizer.name](token))

        return command_cls(*values, location=location)


def usage(command_cls):
    if not command_cls.shape:
        return command_cls.keyword
    return "{} {}".format(command_cls.keyword,
                          ",".join(r.name for r in command_cls.shape))
