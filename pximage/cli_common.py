from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Iterable, Sequence, TextIO

from pximage.io.image import ImageProperties

logger = logging.getLogger(__name__)


class FlagParser(argparse.ArgumentParser):
    """``ArgumentParser`` for ``-flag value`` command lines.

    Parse errors raise ``ValueError`` so the tools can report them and exit
    with status 1 like every other failure.
    """

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ValueError(message)


def build_flag_parser(prog: str) -> FlagParser:
    return FlagParser(prog=prog, add_help=False, allow_abbrev=False)


def parse_uint(text: str) -> int:
    try:
        value = int(str(text).strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text!r}")
    return value


def parse_uint_list(text: str) -> list[int]:
    """Parse ``"1,2,3"`` (or a single ``"1"``) into a list of unsigned ints."""

    parts = [p for p in str(text).split(",") if p.strip()]
    if not parts:
        raise argparse.ArgumentTypeError(f"expected a comma separated list of integers, got {text!r}")
    return [parse_uint(p) for p in parts]


def flatten(groups: Iterable[Sequence[Any]] | None) -> list[Any] | None:
    if groups is None:
        return None
    return [v for group in groups for v in group]


def join_flag_values(argv: Sequence[str], flags: Iterable[str]) -> list[str]:
    """Rewrite ``-flag -number`` as ``-flag=-number`` for single-valued ``flags``.

    argparse only accepts dash-prefixed values that look like plain negative
    numbers (``-5``, ``-.5``); ``-1e2`` would otherwise be read as a flag.
    Values that look like flag names are left alone so a missing value is
    still reported.
    """

    names = set(flags)
    tokens = list(argv)
    out: list[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in names and i + 1 < len(tokens):
            value = tokens[i + 1]
            if value[:1] == "-" and (value[1:2].isdigit() or value[1:2] == "."):
                out.append(f"{token}={value}")
                i += 2
                continue
        out.append(token)
        i += 1
    return out


def parse_flags(
    parser: argparse.ArgumentParser,
    argv: Sequence[str],
    *,
    value_flags: Iterable[str] = (),
) -> argparse.Namespace:
    """Parse known flags; unrecognized ones are ignored.

    ``value_flags`` take exactly one value which may start with a dash.
    """

    args, unknown = parser.parse_known_args(join_flag_values(argv, value_flags))
    if unknown:
        logger.debug("Ignoring unrecognized arguments: %s", unknown)
    return args


def token_count_ok(argv: Sequence[str], *, low: int, high: int | None = None) -> bool:
    n = len(argv)
    if n < int(low):
        return False
    return high is None or n <= int(high)


def print_image_properties(
    properties: ImageProperties,
    header: str,
    *,
    stream: TextIO | None = None,
) -> None:
    out = sys.stdout if stream is None else stream
    print(header, file=out)
    print(f"\tPixelType:          {properties.component_type}", file=out)
    print(f"\tDimension:          {properties.dimension}", file=out)
    print(f"\tNumberOfComponents: {properties.number_of_components}", file=out)


def format_error(exc: BaseException) -> str:
    # str(KeyError) wraps the message in quotes.
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)
