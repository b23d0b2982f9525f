
from typing import *


def format_glyph(glyph: list[int]) -> str:
    return ".byte " + ",".join(str(x) for x in glyph)

def write_inc(fd: TextIO, glyphs: Iterable[list[int]]):
    for glyph in glyphs:
        fd.write(format_glyph(glyph) + "\n")
    fd.flush()
