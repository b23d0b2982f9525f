
from .pgm import GLYPH_SIZE, MAX_VALUE, Image


def pack_glyphs(pixels: list[int], width: int, flip_horizontal: bool = False, flip_vertical: bool = False) -> list[list[int]]:
    """
    Pack a row-major `width` x 8 pixel strip into one 8-byte glyph per 8x8 cell.

    Bit `col` of byte `row` is set when that pixel is exactly 255.
    Flipping mirrors each cell in place; the cell order stays left to right.
    """
    glyphs = [[0] * GLYPH_SIZE for _ in range(width // GLYPH_SIZE)]
    last   = GLYPH_SIZE - 1

    for p, val in enumerate(pixels):
        row = p // width
        col = p % GLYPH_SIZE
        chr = (p % width) // GLYPH_SIZE
        px  = 1 if val == MAX_VALUE else 0

        if flip_horizontal:
            col = last - col
        if flip_vertical:
            row = last - row

        glyphs[chr][row] |= px << col

    return glyphs

def pack_image(image: Image, flip_horizontal: bool = False, flip_vertical: bool = False) -> list[list[int]]:
    return pack_glyphs(image.pixels, image.width, flip_horizontal, flip_vertical)


def unpack_glyph(glyph: list[int]) -> list[list[bool]]:
    return [[bool((byte >> col) & 1) for col in range(GLYPH_SIZE)] for byte in glyph]

def render_glyph(glyph: list[int], one: str = '#', zero: str = '.') -> str:
    return '\n'.join(''.join(one if on else zero for on in row) for row in unpack_glyph(glyph))
