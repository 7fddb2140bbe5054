# -*- coding: utf-8 -*-
from typing import Optional, TextIO
import re

_SPEC_REGEX = re.compile(r'(?:(?P<fill>.)?(?P<align>[<>=^]))?'
                         r'(?P<sign>[-+ ])?'
                         r'(?P<z>z)?'
                         r'(?P<alternate>#)?'
                         r'(?P<zero>0)?'
                         r'(?P<width>\d+)?'
                         r'(?P<grouping>[,_])?'
                         r'(?:\.(?P<precision>\d*)'
                         r'(?P<fraction_grouping>[,_]?))?'
                         r'(?P<type>[a-zA-Z%])?',
                         re.DOTALL)


class FormatSpecError(ValueError):
    """
    Raised when a format specifier does not follow the format
    mini-language.
    """

    def __init__(self, message: str, spec: str):
        """
        Initialise a new format specifier error.

        :param message: A description of the nature of the error.
        :param spec: The offending format specifier.
        """
        super().__init__(message)
        self.message = message
        self.spec = spec

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self.message}, {self.spec!r})'


class FormatState:
    """
    A parsed format specifier, together with the sink the formatted value
    should be written to.
    """

    def __init__(self, spec: str, sink: TextIO):
        """
        Parse a format specifier.

        :param spec: A specifier of the form
                     "[[fill]align][sign][z][#][0][width][grouping]
                     [.[precision][grouping]][type]", e.g. "<8.2" or "#x".
                     A grouping after the point groups the fractional
                     digits, which int.__format__ accepts from Python 3.14.
        :param sink: Where write() sends output, e.g. an io.StringIO.
        :raises FormatSpecError: If the specifier cannot be parsed.
        """
        match = _SPEC_REGEX.fullmatch(spec)
        if match is None or (match['precision'] == ''
                             and not match['fraction_grouping']):
            raise FormatSpecError('Invalid format specifier', spec)
        self._sink = sink
        self.fill = match['fill'] or ''
        self.align = match['align'] or ''
        self.sign = match['sign'] or ''
        self.z = match['z'] or ''
        self.alternate = match['alternate'] or ''
        self.zero = match['zero'] or ''
        self.grouping = match['grouping'] or ''
        self.fraction_grouping = match['fraction_grouping'] or ''
        self.verb = match['type'] or ''
        self._width = match['width']
        self._precision = match['precision'] or None

    @property
    def width(self) -> Optional[int]:
        return None if self._width is None else int(self._width)

    @property
    def precision(self) -> Optional[int]:
        return None if self._precision is None else int(self._precision)

    def flag(self, char: str) -> bool:
        """
        Determine whether a flag character was present in the specifier.

        :param char: One of the alignment characters "<", ">", "=" or "^",
                     the sign characters "+", "-" or " ", or one of "z",
                     "#", "0", "," and "_".
        :return: True if the flag was given, False otherwise.
        """
        return bool(char) and char in (self.align, self.sign, self.z,
                                       self.alternate, self.zero,
                                       self.grouping)

    def write(self, text: str) -> None:
        self._sink.write(text)


def equivalent_format(state: FormatState) -> str:
    """
    Rebuild a format specifier equivalent to the one a state was parsed from,
    suitable for passing to format() along with some other value.

    :param state: The parsed specifier.
    :return: The specifier, e.g. "*>+#012,.3x".
    """
    spec = ''
    if state.align:
        spec += state.fill + state.align
    spec += state.sign + state.z + state.alternate + state.zero
    if state.width is not None:
        spec += str(state.width)
    spec += state.grouping
    if state.precision is not None or state.fraction_grouping:
        spec += '.'
        if state.precision is not None:
            spec += str(state.precision)
        spec += state.fraction_grouping
    return spec + state.verb
