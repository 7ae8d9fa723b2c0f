#!/usr/bin/env python3
"""
Tests the pluggable log functions.
"""

import io
import unittest

from bytedump import log


class TestLog(unittest.TestCase):
    """Tests for the log module"""

    def setUp(self) -> None:
        self.prev_fn = log.log_to_none()

    def tearDown(self) -> None:
        log.log_to_fn(self.prev_fn)

    def test_log_to_list(self) -> None:
        """Tests that args are space separated"""
        lines = []
        log.log_to_list(lines)
        log.log('  R:', 'No data')
        log.log(1, 2, 3)
        self.assertEqual(lines, ['  R: No data', '1 2 3'])

    def test_log_to_file(self) -> None:
        """Tests logging to a file"""
        file = io.StringIO()
        log.log_to_file(file)
        log.log('Captured', 4, 'bytes')
        log.log('done')
        self.assertEqual(file.getvalue(), 'Captured 4 bytes\ndone\n')

    def test_log_to_none(self) -> None:
        """Tests that nothing is sent anywhere after log_to_none"""
        lines = []
        log.log_to_list(lines)
        log.log_to_none()
        log.log('lost')
        self.assertEqual(lines, [])

    def test_log_to_fn_returns_previous(self) -> None:
        """Tests that installing a log function returns the old one"""
        calls = []
        log.log_to_fn(calls.append)
        prev_fn = log.log_to_none()
        self.assertEqual(prev_fn, calls.append)
        log.log_to_fn(prev_fn)
        log.log('a', 'b')
        self.assertEqual(calls, [('a', 'b')])

    def test_logging_to(self) -> None:
        """Tests that logging_to puts the previous log function back"""
        outer = []
        inner = []
        log.log_to_list(outer)
        with log.logging_to(log.log_to_list, inner):
            log.log('inside')
        log.log('outside')
        self.assertEqual(inner, ['inside'])
        self.assertEqual(outer, ['outside'])

    def test_logging_to_restores_on_error(self) -> None:
        """Tests that the log function is restored when an exception escapes"""
        lines = []
        log.log_to_list(lines)
        with self.assertRaises(RuntimeError):
            with log.logging_to(log.log_to_none):
                raise RuntimeError('boom')
        log.log('after')
        self.assertEqual(lines, ['after'])


if __name__ == '__main__':
    unittest.main()
