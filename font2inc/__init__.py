
from .fonterr import FontError, InvalidDimensions, ParseError
from .pgm import Image, load_pgm, load_pgm_file
from .glyph import pack_glyphs, pack_image, unpack_glyph, render_glyph
from .emit import format_glyph, write_inc
