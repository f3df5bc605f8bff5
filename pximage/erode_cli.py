from __future__ import annotations

import sys
from typing import Sequence

from pximage.cli_common import (
    build_flag_parser,
    flatten,
    format_error,
    parse_flags,
    parse_uint,
    parse_uint_list,
    print_image_properties,
    token_count_ok,
)

PROG = "pxerodeimage"

USAGE = f"""Usage:
{PROG}
  -in      inputFilename
  [-out]   outputFilename, default in + ERODED + extension(inputFilename)
  -r       radius, one value or one per dimension (e.g. "-r 1 2 2" or "-r 1,2,2")
  [-dim]   dimension, default: automatically determined from image
  [-pt]    pixelType, default: automatically determined from image
  [-bc]    boundaryCondition; the grey value outside the image; default: max(PixelType)
Supported: 2D, 3D, (unsigned) short, (unsigned) char."""


# Flags whose single value may start with a dash.
VALUE_FLAGS = ("-in", "-out", "-pt", "-bc")


def _build_parser():
    parser = build_flag_parser(PROG)
    parser.add_argument("-in", dest="input", default=None)
    parser.add_argument("-out", dest="output", default=None)
    parser.add_argument("-r", dest="radius", type=parse_uint_list, nargs="+", default=None)
    parser.add_argument("-dim", dest="dimension", type=parse_uint, default=None)
    parser.add_argument("-pt", dest="pixel_type", default=None)
    parser.add_argument("-bc", dest="boundary_condition", default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    if not token_count_ok(tokens, low=4, high=12):
        print(USAGE)
        return 1

    try:
        from pximage.config import ErosionConfig
        from pximage.erode import run_erosion
        from pximage.io.image import read_image_properties

        args = parse_flags(_build_parser(), tokens, value_flags=VALUE_FLAGS)
        if args.input is None:
            raise ValueError('You should specify "-in".')
        radius = flatten(args.radius)
        if radius is None:
            raise ValueError('You should specify "-r".')

        properties = read_image_properties(args.input)
        print_image_properties(properties, "The input image has the following properties:")

        if args.dimension is not None or args.pixel_type is not None:
            properties = properties.with_overrides(
                component_type=args.pixel_type,
                dimension=args.dimension,
            )
            print_image_properties(
                properties, "The user has overruled this by specifying -pt and/or -dim:"
            )

        config = ErosionConfig.from_args(
            input_path=args.input,
            radius=radius,
            properties=properties,
            output_path=args.output,
            boundary_condition=args.boundary_condition,
        )
        run_erosion(config)
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"error: {format_error(exc)}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
