from rovsim.termui import s_attention as _a


class Location:
    """
    Represents a location of a command line in the command stream.

    Args:
    line(int): 1-based line number in the stream.
    line_str(str): The raw content of the line.
    file_name(str): The name (path) to the file this location refers to.
    """

    __slots__ = ['line', 'line_str', 'file_name']

    def __init__(self, line=None, line_str=None, file_name=None):
        self.line = line
        self.line_str = line_str
        self.file_name = file_name

    def __str__(self):
        if self.line is not None:
            return ('{}{}:"{}"'
                    .format(f"{self.file_name}:"
                            if self.file_name else "",
                            self.line,
                            line_context(self.line_str)))
        if self.file_name:
            return _a(self.file_name)
        return "<Unknown location>"

    def __repr__(self):
        return str(self)


def line_context(line_str, width=30):
    """
    Returns a shortened, single line rendering of the given line content.
    """
    if line_str is None:
        return ""
    line_str = replace_newlines(line_str)
    if len(line_str) > width:
        return line_str[:width] + _a(" ...")
    return line_str


def replace_newlines(in_str):
    try:
        return in_str.replace("\n", "\\n").replace("\r", "\\r")
    except AttributeError:
        return in_str


def get_collector():
    """
    Produces command handler collector/decorator that will collect all
    decorated objects under dictionary attribute `all`.
    """
    all = {}

    class Collector:
        def __call__(self, name_or_f):
            """
            If called with command name return decorator.
            If called over function apply decorator.
            """
            is_name = isinstance(name_or_f, str)

            def decorator(f):
                name = name_or_f if is_name else f.__name__
                all[name] = f
                return f
            if is_name:
                return decorator
            else:
                return decorator(name_or_f)

    objects = Collector()
    objects.all = all
    return objects
