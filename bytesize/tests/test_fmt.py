# -*- coding: utf-8 -*-
import io
import unittest

from bytesize.fmt import FormatSpecError, FormatState, equivalent_format


class TestFormatState(unittest.TestCase):

    def _state(self, spec: str) -> FormatState:
        return FormatState(spec, io.StringIO())

    def test_empty(self):
        state = self._state('')
        self.assertEqual(state.verb, '')
        self.assertIsNone(state.width)
        self.assertIsNone(state.precision)
        for char in '<>=^+- z#0,_':
            self.assertFalse(state.flag(char))

    def test_width_and_precision(self):
        state = self._state('12.3s')
        self.assertEqual(state.width, 12)
        self.assertEqual(state.precision, 3)
        self.assertEqual(state.verb, 's')

    def test_zero_precision(self):
        self.assertEqual(self._state('.0').precision, 0)

    def test_align_without_fill(self):
        state = self._state('<')
        self.assertTrue(state.flag('<'))
        self.assertEqual(state.fill, '')

    def test_fill_is_not_a_flag(self):
        state = self._state('#<8')
        self.assertEqual(state.fill, '#')
        self.assertTrue(state.flag('<'))
        self.assertFalse(state.flag('#'))

    def test_flags(self):
        state = self._state('+#08,d')
        self.assertTrue(state.flag('+'))
        self.assertTrue(state.flag('#'))
        self.assertTrue(state.flag('0'))
        self.assertTrue(state.flag(','))
        self.assertFalse(state.flag('<'))
        self.assertFalse(state.flag(''))
        self.assertEqual(state.width, 8)
        self.assertEqual(state.verb, 'd')

    def test_write(self):
        sink = io.StringIO()
        state = FormatState('', sink)
        state.write('1')
        state.write('KiB')
        self.assertEqual(sink.getvalue(), '1KiB')

    def test_invalid(self):
        for spec in ('.', '5.', 'dd', '.-1'):
            with self.subTest(spec=spec):
                with self.assertRaises(FormatSpecError) as cm:
                    self._state(spec)
                self.assertEqual(cm.exception.spec, spec)

    def test_error_is_value_error(self):
        self.assertTrue(issubclass(FormatSpecError, ValueError))

    def test_error_str(self):
        self.assertEqual(str(FormatSpecError('Invalid format specifier', '.')),
                         "FormatSpecError(Invalid format specifier, '.')")


class TestEquivalentFormat(unittest.TestCase):

    def test_round_trips(self):
        for spec in ('', 'd', '#x', '>8d', '*^+#012,.3x', ' 5_d', '<', '.2f'):
            with self.subTest(spec=spec):
                self.assertEqual(
                    equivalent_format(FormatState(spec, io.StringIO())), spec)

    def test_leading_zero_is_not_fill(self):
        self.assertEqual(
            equivalent_format(FormatState('08d', io.StringIO())), '08d')

    def test_fraction_grouping_round_trips(self):
        for spec in ('.3,f', '10,.2_f', '.,f'):
            with self.subTest(spec=spec):
                self.assertEqual(
                    equivalent_format(FormatState(spec, io.StringIO())), spec)

    def test_fraction_grouping(self):
        state = FormatState('.3_f', io.StringIO())
        self.assertEqual(state.precision, 3)
        self.assertEqual(state.fraction_grouping, '_')
        self.assertEqual(state.grouping, '')

    def test_fraction_grouping_without_precision(self):
        state = FormatState('.,', io.StringIO())
        self.assertIsNone(state.precision)
        self.assertEqual(state.fraction_grouping, ',')
