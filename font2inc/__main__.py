
# Converts an 8x8 pixel font stored as a plain-text graymap into `.byte` assembler data.
# The image must be 1024x8 (128 characters) or 2048x8 (256 characters) pixels.
# Pixels of intensity 255 are "on", everything else is "off".
# Example:
#    python -m font2inc 6x8font.pgm > 6x8font.inc

import argparse, sys

from .fonterr import *
from .pgm import *
from .glyph import *
from .emit import *


def make_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="font2inc", description="Convert an 8x8 font graymap (PGM, P2) to .byte assembler data")
    parser.add_argument("--flip-horizontal", "-H", action="store_true", help="Mirror every glyph left to right")
    parser.add_argument("--flip-vertical",   "-V", action="store_true", help="Mirror every glyph top to bottom")
    parser.add_argument("--outfile",         "-o", action="store", default=None, help="Write to a file instead of stdout")
    parser.add_argument("--preview",               action="store_true", help="Draw every glyph on stderr")
    parser.add_argument("infile",                  action="store")
    return parser

def preview(glyphs: list[list[int]]):
    for i, glyph in enumerate(glyphs):
        sys.stderr.write(f"; glyph {i}\n{render_glyph(glyph)}\n")

def main(argv: list[str] = None) -> int:
    args = make_arg_parser().parse_args(argv)
    clear_errors()

    image = None
    try:
        image = load_pgm_file(args.infile)
    except FileNotFoundError:
        raise_err("File not found: " + args.infile)
    except OSError as e:
        raise_err(f"Cannot read {args.infile}: {e.strerror or e}")
    except UnicodeDecodeError:
        raise_err(f"Cannot read {args.infile}: not a plain-text (P2) graymap")
    except FontError as e:
        raise_err(*e.args, e.loc)

    if has_errors():
        return 1

    glyphs = pack_image(image, args.flip_horizontal, args.flip_vertical)
    if args.preview:
        preview(glyphs)

    if args.outfile:
        try:
            with open(args.outfile, "w") as fd:
                write_inc(fd, glyphs)
        except OSError as e:
            raise_err(f"Cannot write {args.outfile}: {e.strerror or e}")
            return 1
    else:
        write_inc(sys.stdout, glyphs)
    return 0


if __name__ == "__main__":
    sys.exit(main())
