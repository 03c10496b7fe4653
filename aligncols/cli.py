import argparse
import sys

from .errors import PositioningError
from .formatter import AlignConfig, ColumnFormatter
from .logs import log, setup_logging
from .measure import WidthMode
from .positioning import Positioning, parse_positioning
from .reader import read_lines

PROG = "aligncols"

POSITIONING_HELP = """\
positioning of the columns; by default all columns are left aligned.
Example: <50>=<
  - the first column is left aligned
  - the second column is right aligned and has a minimum width of 50
  - the third column is centered
  - the fourth and all following columns are left aligned
"""


def positioning_arg(value: str) -> Positioning:
    try:
        return parse_positioning(value)
    except PositioningError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def delimiter_arg(value: str) -> bytes | None:
    if not value:
        return None
    encoded = value.encode("utf-8")
    if len(encoded) != 1:
        raise argparse.ArgumentTypeError(f"string delimiter must be a single ASCII character: {value!r}")
    return encoded


def until_arg(value: str) -> int:
    try:
        until = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"until has to be a number: {value!r}") from None
    if until < 0:
        raise argparse.ArgumentTypeError(f"until must not be negative: {until}")
    return until


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Reads text from stdin, aligns columns, and prints the result to stdout.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '-o',
        dest='out_sep',
        metavar='SEP',
        default=' ',
        help='output separator (default: a space)'
    )
    parser.add_argument(
        '-s',
        dest='str_delim',
        metavar='DELIM',
        type=delimiter_arg,
        default=b'"',
        help='string delimiter, "" disables quoting (default: ")'
    )
    parser.add_argument(
        '-u',
        dest='until',
        metavar='UNTIL',
        type=until_arg,
        default=None,
        help='maximum column; the rest of the line becomes the last column'
    )
    parser.add_argument(
        '-b', '--bytes',
        dest='width_mode',
        action='store_const',
        const=WidthMode.BYTES,
        default=WidthMode.DISPLAY,
        help='measure widths in bytes instead of display width'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='log debug information to stderr'
    )
    parser.add_argument(
        'positioning',
        nargs='?',
        type=positioning_arg,
        default='',
        help=POSITIONING_HELP
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = AlignConfig(
            out_sep=args.out_sep.encode("utf-8"),
            str_delim=args.str_delim,
            until=args.until,
            positioning=args.positioning,
            width_mode=args.width_mode,
        )
        log.debug("positioning_parsed", widths=config.positioning.max_width.values,
                  align=[a.value for a in config.positioning.align.values])

        lines = read_lines(sys.stdin.buffer, config.width_mode)
        ColumnFormatter(lines, config).write(sys.stdout.buffer)
        sys.stdout.buffer.flush()
    except BrokenPipeError:
        # downstream closed early (e.g. `| head`)
        sys.stderr.close()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
