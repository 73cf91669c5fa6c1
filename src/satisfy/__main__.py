import os
import sys
import argparse
import logging

from typing import List, Optional

from satisfy.cli import cli
from satisfy.constants import DEFAULT_FEATURE_TYPE, ENV_FEATURE_TYPE


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='satisfy',
        description='build features from feature files and print a debug view of the resulting model, the printed tree is not a stable output format',
    )

    parser.add_argument(
        'files',
        nargs='*',
        type=str,
        default=['.'],
        help='feature files, or directories with feature files, to build',
    )

    parser.add_argument(
        '--type',
        type=str,
        required=False,
        default=os.environ.get(ENV_FEATURE_TYPE, DEFAULT_FEATURE_TYPE),
        help='value of "type" in feature metadata',
    )

    parser.add_argument(
        '--language',
        type=str,
        required=False,
        default=None,
        help='language of the feature files, if not specified in the files',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        required=False,
        default=False,
        help='verbose output',
    )

    parser.add_argument(
        '--log-file',
        type=str,
        required=False,
        default=None,
        help='write log messages to this file instead of stderr',
    )

    parser.add_argument(
        '--no-verbose',
        nargs='+',
        type=str,
        default=None,
        help='name of loggers to disable',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        required=False,
        default=False,
        help='print version and exit',
    )

    args = parser.parse_args()

    if args.version:
        from satisfy import __version__

        print(__version__, file=sys.stderr)

        raise SystemExit(0)

    return args


def setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO if not args.verbose else logging.DEBUG

    handlers: List[logging.Handler]
    if args.log_file is not None:
        handlers = [logging.FileHandler(args.log_file)]
    else:
        handlers = [logging.StreamHandler(sys.stderr)]

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        handlers=handlers,
    )

    no_verbose: Optional[List[str]] = args.no_verbose

    if no_verbose is None:
        no_verbose = []

    # always supress these loggers
    no_verbose.append('parse')

    for logger_name in no_verbose:
        if logger_name in logging.Logger.manager.loggerDict:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.ERROR)
        else:
            print(f'!! logger "{logger_name}" does not exist', file=sys.stderr)


def main() -> int:
    args = parse_arguments()

    setup_logging(args)

    return cli(args)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
