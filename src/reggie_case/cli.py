#!/usr/bin/env python3

import argparse
import sys
from typing import Iterable

from lfp_logging import logs

from reggie_case import cases, configs, validators
from reggie_case.formats import Style

LOG = logs.logger(__name__)


def _style(value: str) -> Style:
    try:
        return Style.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _values(args: argparse.Namespace) -> Iterable[str]:
    if args.values:
        yield from args.values
    else:
        for line in sys.stdin:
            yield line.rstrip("\r\n")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="reggie-case",
        description="Convert text to camelCase, kebab-case, dot.case and more",
    )

    parser.add_argument(
        "values",
        nargs="*",
        help="Values to convert, one per output line (default: read stdin lines)",
    )

    parser.add_argument(
        "-s",
        "--style",
        type=_style,
        default=None,
        help=f"Output style: {', '.join(s.value for s in Style)}",
    )

    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        default=None,
        help="Log and skip invalid values instead of exiting",
    )

    args = parser.parse_args(argv)

    try:
        style = args.style or configs.style()
    except ValueError as e:
        parser.error(str(e))
    skip_invalid = (
        args.skip_invalid if args.skip_invalid is not None else configs.skip_invalid()
    )

    for value in _values(args):
        try:
            print(cases.convert(value, style))
        except validators.CaseInputError as e:
            if skip_invalid:
                LOG.warning(f"Skipping {e.kind.value} input: {value!r}")
                continue
            LOG.error(f"Invalid {e.kind.value} input: {e}")
            sys.exit(2)


if __name__ == "__main__":
    main()
