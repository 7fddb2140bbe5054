# -*- coding: utf-8 -*-
from typing import SupportsIndex
import io
import logging
import operator

from bytesize import util
from bytesize.fmt import FormatState, equivalent_format

logger = logging.getLogger(__name__)


class ByteSize(int):
    """
    A number of bytes, possibly negative, held as a signed 64-bit integer.

    str() prints the value with 1 to 4 significant digits followed by "B",
    "KiB", "MiB", "GiB", "TiB", "PiB" or "EiB", e.g. "1023B", "1.01KiB",
    "-23.4MiB". When formatting, the "" and "s" types do the same, and a
    precision selects shorter suffixes rather than more digits:

        .0  "",  "K",   "M",   "G",   "T",   "P",   "E"
        .1  "B", "K",   "M",   "G",   "T",   "P",   "E"
        .2  "B", "KB",  "MB",  "GB",  "TB",  "PB",  "EB"
        .3  "B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB"

    Any other precision is treated as .3. All other types, notably "d", act
    as though applied to the underlying int, and "#" with no type gives the
    same as repr().
    """

    __slots__ = ()

    _DEFAULT_VERBS = ('', 's')

    def __new__(cls, value: SupportsIndex = 0) -> 'ByteSize':
        """
        Create a new byte size.

        :param value: Any integer. Values outside the signed 64-bit range wrap
                      around, so 2**64 - 1 gives -1.
        :raises TypeError: If the value is not an integer, e.g. a float or a
                           string.
        """
        number = int(operator.index(value))
        return super().__new__(cls, util.to_int64(number))

    def __add__(self, other: int) -> 'ByteSize':
        if not isinstance(other, int):
            return NotImplemented
        return ByteSize(int(self) + int(other))

    __radd__ = __add__

    def __sub__(self, other: int) -> 'ByteSize':
        if not isinstance(other, int):
            return NotImplemented
        return ByteSize(int(self) - int(other))

    def __rsub__(self, other: int) -> 'ByteSize':
        if not isinstance(other, int):
            return NotImplemented
        return ByteSize(int(other) - int(self))

    def __neg__(self) -> 'ByteSize':
        return ByteSize(-int(self))

    def format_to(self, state: FormatState) -> None:
        """
        Write this size to a format state's sink, as directed by its
        specifier.

        :param state: The parsed format specifier and its sink.
        """
        if state.verb == '' and state.flag('#'):
            state.write(repr(self))
            return
        if state.verb not in self._DEFAULT_VERBS:
            spec = equivalent_format(state)
            logger.debug(f'Formatting {int(self)} as an int with {spec!r}')
            state.write(format(int(self), spec))
            return

        output = util.format_byte_size(self,
                                       util.clamp_precision(state.precision))
        width = state.width
        if width is None:
            state.write(output)
            return
        padding = ' ' * (width - len(output))
        if state.flag('<'):
            state.write(output)
            state.write(padding)
        else:
            state.write(padding)
            state.write(output)

    def __format__(self, format_spec: str) -> str:
        sink = io.StringIO()
        self.format_to(FormatState(format_spec, sink))
        return sink.getvalue()

    def __str__(self) -> str:
        return util.format_byte_size(self)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({int(self)})'
