from __future__ import annotations

import sys
from typing import Sequence

from pximage.cli_common import (
    build_flag_parser,
    format_error,
    parse_flags,
    parse_uint,
    token_count_ok,
)

PROG = "pxextractslice"

USAGE = f"""{PROG} extracts a 2D slice from a 3D image.
Usage:
{PROG}
  -in      input image filename
  [-out]   output image filename, default in + _slice_ + axis=slice number + extension(in)
  [-pt]    pixel type of input and output images;
           default: automatically determined from the input image.
  -sn      slice number
  [-d]     the dimension from which a slice is extracted, default the z dimension (2)
Supported pixel types: (unsigned) char, (unsigned) short, float.
"""


# Flags whose single value may start with a dash.
VALUE_FLAGS = ("-in", "-out", "-pt")


def _build_parser():
    parser = build_flag_parser(PROG)
    parser.add_argument("-in", dest="input", default=None)
    parser.add_argument("-out", dest="output", default=None)
    parser.add_argument("-pt", dest="pixel_type", default=None)
    parser.add_argument("-sn", dest="slice_index", type=parse_uint, default=None)
    parser.add_argument("-d", dest="axis", type=parse_uint, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    if not token_count_ok(tokens, low=4):
        print(USAGE)
        return 1

    try:
        from pximage.config import ExtractionConfig
        from pximage.extract_slice import run_extraction
        from pximage.io.image import read_image_properties

        args = parse_flags(_build_parser(), tokens, value_flags=VALUE_FLAGS)
        if args.input is None:
            raise ValueError('You should specify "-in".')

        properties = read_image_properties(args.input)
        if args.pixel_type is not None:
            properties = properties.with_overrides(component_type=args.pixel_type)

        config = ExtractionConfig.from_args(
            input_path=args.input,
            slice_index=args.slice_index,
            properties=properties,
            axis=args.axis,
            output_path=args.output,
        )
        run_extraction(config)
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"error: {format_error(exc)}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
