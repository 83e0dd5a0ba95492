"""Command-line interface for hexfmt."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO

from rich.console import Console
from rich.markup import escape

from .config.builder import HexdumpBuilder
from .config.options import ConfigError
from .config.template import DEFAULT_TEMPLATE
from .hexdump import Hexdump

_SKIP_CHUNK = 64 * 1024


def _parse_int(value: str) -> int:
    """Parse a non-negative integer with optional 0x/0o/0b prefix.

    Args:
        value: String such as "4096", "0x1000" or "0o10000".

    Returns:
        The parsed integer.

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid integer.
    """
    try:
        result = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid integer '{value}'"
        ) from None
    if result < 0:
        raise argparse.ArgumentTypeError(f"'{value}' must not be negative")
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hexfmt", description="Configurable hex dump of a file or stdin",
    )
    parser.add_argument(
        "file", nargs="?", default="-",
        help="File to dump ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "-b", "--base", choices=["bin", "oct", "dec", "hex"], default="hex",
        help="Numeral base for offsets and groups",
    )
    parser.add_argument(
        "-e", "--endian", choices=["little", "big"], default="little",
        help="Byte order inside each group",
    )
    parser.add_argument(
        "-g", "--group-size", type=_parse_int, default=1, metavar="N",
        help="Bytes per group",
    )
    parser.add_argument(
        "-n", "--groups", type=_parse_int, default=16, metavar="N",
        help="Groups per line",
    )
    width = parser.add_mutually_exclusive_group()
    width.add_argument(
        "-w", "--offset-width", type=_parse_int, default=None, metavar="N",
        help="Fixed number of digits for the offset column",
    )
    width.add_argument(
        "--bits", type=int, choices=[32, 64], default=None,
        help="Size the offset column for a 32- or 64-bit address space",
    )
    parser.add_argument(
        "-s", "--skip", type=_parse_int, default=0, metavar="N",
        help="Skip N input bytes before dumping",
    )
    parser.add_argument(
        "-l", "--length", type=_parse_int, default=None, metavar="N",
        help="Dump at most N bytes",
    )
    parser.add_argument(
        "--offset", type=_parse_int, default=None, metavar="N",
        help="Offset displayed for the first dumped byte (default: --skip)",
    )
    parser.add_argument(
        "--squeeze", action="store_true",
        help="Replace runs of identical lines with a single '*'",
    )
    parser.add_argument(
        "-t", "--template", default=DEFAULT_TEMPLATE,
        help="Line template using #[OFFSET], #[RAW] and #[ASCII]",
    )
    return parser


def _skip(stream: BinaryIO, count: int) -> None:
    """Advance a stream by count bytes, seeking when the stream allows it."""
    if count == 0:
        return
    if stream.seekable():
        stream.seek(count, 1)
        return
    while count > 0:
        data = stream.read(min(count, _SKIP_CHUNK))
        if not data:
            break
        count -= len(data)


def _dump(dumper: Hexdump, stream: BinaryIO, args: argparse.Namespace,
          console: Console) -> None:
    """Skip, then print the dump of stream line by line."""
    _skip(stream, args.skip)
    offset = args.offset if args.offset is not None else args.skip
    for line in dumper.iter_stream(stream, size=args.length, offset=offset):
        console.print(line, markup=False, emoji=False, highlight=False)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the hexfmt CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Process exit status: 0 on success, 1 on a configuration or I/O error.
    """
    args = _build_parser().parse_args(argv)
    out = Console(soft_wrap=True, highlight=False)
    err = Console(stderr=True, highlight=False)

    builder = (
        HexdumpBuilder()
        .base(args.base)
        .endianness(args.endian)
        .group_size(args.group_size)
        .groups_per_line(args.groups)
        .display_duplicates(not args.squeeze)
        .template(args.template)
    )
    if args.bits is not None:
        builder.offset_bits(args.bits)
    else:
        builder.offset_width(args.offset_width)

    try:
        dumper = builder.build()
        if args.file == "-":
            _dump(dumper, sys.stdin.buffer, args, out)
        else:
            with open(args.file, "rb") as f:
                _dump(dumper, f, args, out)
    except ConfigError as e:
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1
    except OSError as e:
        err.print(
            f"[bold red]Error:[/bold red] cannot read "
            f"{escape(repr(args.file))}: {escape(str(e))}"
        )
        return 1
    return 0


def run() -> None:
    """Console-script wrapper: exit with main()'s status."""
    sys.exit(main())
