import os
import unittest
from unittest import mock

from weierstrass import METHOD, current_method

from curves import TOY_POINTS


class TestConfig(unittest.TestCase):

    def test_default(self):
        with mock.patch.dict(os.environ, clear=True):
            self.assertIs(current_method(), METHOD.DOUBLE_AND_ADD)

    def test_environment(self):
        with mock.patch.dict(os.environ, {'WEIERSTRASS_MULTIPLY': 'repeated_addition'}):
            self.assertIs(current_method(), METHOD.REPEATED_ADDITION)

    def test_unknown_method(self):
        with mock.patch.dict(os.environ, {'WEIERSTRASS_MULTIPLY': 'montgomery'}):
            with self.assertRaises(ValueError):
                current_method()

    def test_environment_drives_multiplication(self):
        P = TOY_POINTS[0]
        with mock.patch.dict(os.environ, {'WEIERSTRASS_MULTIPLY': 'repeated_addition'}):
            with self.assertLogs('weierstrass.EC', level='DEBUG') as logs:
                P * 5
        self.assertIn('repeated_addition', logs.output[0])

    def test_explicit_method_wins(self):
        P = TOY_POINTS[0]
        with mock.patch.dict(os.environ, {'WEIERSTRASS_MULTIPLY': 'repeated_addition'}):
            with self.assertLogs('weierstrass.EC', level='DEBUG') as logs:
                P.multiply(5, method='double_and_add')
        self.assertIn('double_and_add', logs.output[0])
