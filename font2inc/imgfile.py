
import re, sys

from typing_extensions import Self

def split_lines(raw: str) -> list[str]:
    # Accepts \n, \r\n and lone \r; a trailing newline yields a final empty line.
    return re.split(r'\r\n|\r|\n', raw)

class ImageFile:
    def __init__(self, content: str, name: str = None, path: str = None):
        self.content = content
        self.name    = name or "<anonymous>"
        self.path    = path or self.name
        self.lines   = split_lines(content)

    def __repr__(self):
        return f"ImageFile({repr(self.name)}, {len(self.lines)} lines)"

class Location:
    def __init__(self, file: ImageFile, line: int, col: int = 1, len: int = 1):
        self.file = file
        self.line = line
        self.col  = col
        self.len  = len

    def __str__(self):
        return f"{self.file.name}:{self.line}:{self.col}"

    def __repr__(self):
        return f"Location(file <{repr(self.file.name)}>, {self.line}, {self.col}, {self.len})"

    def show(self, fd=None):
        fd = fd or sys.stderr
        if self.line < 1 or self.line > len(self.file.lines):
            return
        text = self.file.lines[self.line - 1]
        fd.write(f"{self.line:4d} | {text}\n")
        fd.write("     | " + ' ' * (self.col-1) + '^' + '~' * (max(self.len, 1)-1) + "\n")

    @classmethod
    def of_line(cls, file: ImageFile, line: int) -> Self:
        """Location spanning the whole text of `line` (1-based), ignoring indentation."""
        text = file.lines[line - 1]
        col  = len(text) - len(text.lstrip()) + 1
        return cls(file, line, col, max(len(text.strip()), 1))
