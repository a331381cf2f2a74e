from typing import Optional

from rovsim.common import Location
from rovsim.termui import s_attention as err
from rovsim.termui import s_header as _


class RovsimError(Exception):
    def __init__(self, location: Location,
                 message: str,
                 error_type: str = err("error"),
                 hint: Optional[str] = None):

        self.location = location
        self.hint = hint
        self.message = message
        self.error_type = error_type

        hint = _(f"  hint: {hint}") if hint else None

        self.full_message = "\n".join(
            filter(None, [f"{error_type}: {message}", hint]))
        super().__init__(self.full_message)

    def __str__(self):
        return f"{self.location}: {self.full_message}"


class CommandSyntaxError(RovsimError):
    def __init__(self, location: Location, message: str,
                 hint: Optional[str] = None):
        super().__init__(location, message, error_type=err("syntax error"),
                         hint=hint)


class UnknownCommandError(CommandSyntaxError):
    def __init__(self, location: Location, keyword: str, keywords):
        self.keyword = keyword
        message = f"unknown command '{keyword}'"
        hint = "expected one of: " + " ".join(keywords)
        super().__init__(location, message, hint=hint)


class InputReadError(RovsimError):
    """
    Raised when the command stream can't be read or decoded. This is the
    only error that aborts processing.
    """
    def __init__(self, location: Location, cause: Exception):
        self.cause = cause
        super().__init__(location, f"can't read input ({cause})",
                         error_type=err("input error"))


class InterpreterInitError(Exception):
    pass
