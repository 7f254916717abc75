#! /usr/bin/env python
"""Runs unit tests on all cssdom modules"""

import unittest
import logging

import test_cascade
import test_parser
import test_pep8
import test_rules
import test_scanner
import test_selectors
import test_serializer
import test_styles
import test_values


all_tests = unittest.TestSuite()
all_tests.addTest(test_cascade.suite())
all_tests.addTest(test_parser.suite())
all_tests.addTest(test_pep8.suite())
all_tests.addTest(test_rules.suite())
all_tests.addTest(test_scanner.suite())
all_tests.addTest(test_selectors.suite())
all_tests.addTest(test_serializer.suite())
all_tests.addTest(test_styles.suite())
all_tests.addTest(test_values.suite())


def suite():
    global all_tests
    return all_tests


def load_tests(loader, tests, pattern):
    return suite()

if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    unittest.main()
