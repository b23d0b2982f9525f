
# Minimal reader for plain-text (P2) graymaps as written by most image editors:
# a four line header followed by one intensity per line.

import os

from .imgfile import *
from .fonterr import *

GLYPH_SIZE   = 8
HEADER_LINES = 4
MAX_VALUE    = 255
VALID_WIDTHS = (1024, 2048)


class Image:
    def __init__(self, pixels: list[int], width: int, file: ImageFile = None):
        self.pixels = pixels
        self.width  = width
        self.height = GLYPH_SIZE
        self.file   = file

    def __repr__(self):
        return f"Image({self.width}x{self.height}, {repr(self.file)})"

    @property
    def glyph_count(self) -> int:
        return self.width // GLYPH_SIZE


def parse_pixels(file: ImageFile) -> list[int]:
    pixels: list[int] = []
    lines = file.lines

    if lines and lines[0].strip() != 'P2':
        raise_warn(f"Expected plain graymap magic `P2`, got `{lines[0].strip()}`", Location.of_line(file, 1))

    # Out-of-range values are reported once, at the first offender.
    bad_count = 0
    bad_first = None
    for idx in range(HEADER_LINES, len(lines)):
        text = lines[idx].strip()
        if not text: continue
        try:
            value = int(text)
        except ValueError:
            raise ParseError(f"Expected pixel intensity, got `{text}`", Location.of_line(file, idx + 1))
        if value < 0 or value > MAX_VALUE:
            if not bad_count:
                bad_first = (value, Location.of_line(file, idx + 1))
            bad_count += 1
        pixels.append(value)

    if bad_count:
        value, loc = bad_first
        raise_warn(f"{bad_count} intensities out of range (0-{MAX_VALUE}), first is {value}; treated as off", loc)

    return pixels

def check_dimensions(pixels: list[int], loc: Location = None) -> int:
    width = len(pixels) // GLYPH_SIZE
    if width not in VALID_WIDTHS or width * GLYPH_SIZE != len(pixels):
        raise InvalidDimensions("Input file must be 1024x8 or 2048x8 pixels, grayscale", loc)
    return width

def load_pgm(file: ImageFile) -> Image:
    pixels = parse_pixels(file)
    return Image(pixels, check_dimensions(pixels, Location(file, 1)), file)

def load_pgm_file(path: str) -> Image:
    # P2 is pure ASCII; anything else (usually a binary P5) fails to decode.
    with open(path, "r", encoding="ascii") as fd:
        file = ImageFile(fd.read(), os.path.basename(path), path)
    return load_pgm(file)
