
import sys
from enum import Enum

from .imgfile import *
from typing import Callable



class Severity(Enum):
    WARN  = 0
    ERROR = 1


msg_name = ["Warning", "Error"]
msg_col  = ["\033[33m", "\033[31m"]
no_col   = "\033[0m"

def print_msg(type: Severity, msg: str, loc: Location = None):
    # Errors replace the glyph data on stdout, warnings must stay out of it.
    fd = sys.stdout if type == Severity.ERROR else sys.stderr
    text = msg_name[type.value] + " " + (str(loc) if loc else "font2inc") + ": " + msg
    if fd.isatty():
        text = msg_col[type.value] + text + no_col
    fd.write(text + "\n")
    if loc:
        loc.show(fd)


_msg_log: list[tuple[Severity,str,Location]] = []

def get_msg_log():
    return _msg_log

def clear_msg_log():
    global _msg_log
    _msg_log = []

def log_msg(type: Severity, msg: str, loc: Location = None):
    _msg_log.append((type, msg, loc))


_on_msg_handler = print_msg

def set_msg_handler(handler: Callable[[Severity,str,Location], None]):
    global _on_msg_handler
    _on_msg_handler = handler


_has_errors = False

def has_errors():
    return _has_errors

def clear_errors():
    global _has_errors
    _has_errors = False


def raise_warn(msg: str, loc: Location = None):
    _on_msg_handler(Severity.WARN, msg, loc)

def raise_err(msg: str, loc: Location = None):
    global _has_errors
    _has_errors = True
    _on_msg_handler(Severity.ERROR, msg, loc)

class FontError(Exception):
    def __init__(self, msg: str, loc: Location = None):
        Exception.__init__(self, msg)
        self.loc = loc

class InvalidDimensions(FontError):
    pass

class ParseError(FontError):
    pass
