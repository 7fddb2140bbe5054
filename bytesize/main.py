# -*- coding: utf-8 -*-
from typing import Iterable, Iterator, List, Mapping, Optional, TextIO
import importlib.metadata
import logging
import os
import sys

from bytesize import util
from bytesize.byte_size import ByteSize


_NAME = 'bytesize'
try:
    _VERSION = importlib.metadata.version(_NAME)
except importlib.metadata.PackageNotFoundError:
    # running from a source checkout
    _VERSION = 'unknown'

_PRECISION = 'BYTESIZE_PRECISION'
_WIDTH = 'BYTESIZE_WIDTH'
_LEFT_ALIGN = 'BYTESIZE_LEFT_ALIGN'
_LOG_LEVEL = 'BYTESIZE_LOG_LEVEL'

logger = logging.getLogger(__name__)


def _format_spec(environ: Mapping[str, str]) -> str:
    """
    Build the format specifier used for every value from the environment.

    :param environ: The environment, e.g. os.environ.
    :return: A specifier for ByteSize.__format__(), e.g. "<10.2".
    :raises ValueError: If the precision is not an integer, or the width is
                        not a non-negative integer.
    """
    spec = ''
    if environ.get(_LEFT_ALIGN):
        spec += '<'
    width = environ.get(_WIDTH)
    if width:
        try:
            width = int(width)
        except ValueError as e:
            raise ValueError(f'{_WIDTH} must be an integer') from e
        if width < 0:
            raise ValueError(f'{_WIDTH} must not be negative')
        spec += str(width)
    precision = environ.get(_PRECISION)
    if precision:
        try:
            precision = int(precision)
        except ValueError as e:
            raise ValueError(f'{_PRECISION} must be an integer') from e
        spec += f'.{util.clamp_precision(precision)}'
    return spec


def render(tokens: Iterable[str], spec: str) -> Iterator[str]:
    """
    Format a sequence of byte counts.

    :param tokens: Decimal integers, e.g. command line arguments or lines
                   read from stdin. Blank tokens are skipped.
    :param spec: The format specifier to apply to each value.
    :return: The formatted values, in order.
    :raises ValueError: If a token is not an integer.
    """
    for token in tokens:
        token = token.strip()
        if not token:
            continue
        try:
            number = int(token)
        except ValueError as e:
            raise ValueError(f'Not a byte count: {token!r}') from e
        size = ByteSize(number)
        if size != number:
            logger.warning('%d does not fit in 64 bits; wrapped to %d',
                           number, size)
        yield format(size, spec)


def main(argv: Optional[List[str]] = None,
         environ: Optional[Mapping[str, str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    """
    Print each byte count given on the command line, or each line of stdin if
    there are no arguments.

    :param argv: The arguments, excluding the program name. Defaults to
                 sys.argv[1:].
    :param environ: Configuration variables. Defaults to os.environ.
    :param stdin: Read from when there are no arguments. Defaults to
                  sys.stdin.
    :param stdout: Where to print results. Defaults to sys.stdout.
    :return: The exit status: 0 on success, 1 if a value could not be parsed,
             2 if the configuration is invalid.
    """
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    stdout = sys.stdout if stdout is None else stdout

    try:
        spec = _format_spec(environ)
    except ValueError as e:
        logger.error('Invalid configuration: %s', e)
        return 2
    logger.debug(f'Using format specifier {spec!r}')

    tokens = argv or (sys.stdin if stdin is None else stdin)
    try:
        for line in render(tokens, spec):
            print(line, file=stdout)
    except ValueError as e:
        logger.error('%s', e)
        return 1
    return 0


def _log_level(environ: Mapping[str, str]) -> int:
    """
    Determine the logging level from the environment.

    :param environ: The environment, e.g. os.environ.
    :return: The level, WARNING if none is configured.
    :raises ValueError: If the configured name is not a logging level.
    """
    name = environ.get(_LOG_LEVEL) or 'WARNING'
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f'{_LOG_LEVEL} must be a logging level name, '
                         f'not {name!r}')
    return level


def cli() -> None:
    """
    Console script entry point.
    """
    try:
        level = _log_level(os.environ)
    except ValueError as e:
        # logging is not configured yet
        print(f'{_NAME}: Invalid configuration: {e}', file=sys.stderr)
        sys.exit(2)
    logging.basicConfig(stream=sys.stderr, level=level)
    logger.debug(f'{_NAME} {_VERSION}')
    sys.exit(main())


if __name__ == '__main__':
    cli()
