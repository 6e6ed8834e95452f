#!/usr/bin/env python3
"""
Test runner for parquet-browser with coverage reporting.

Usage:
    python tests/run_tests.py [--html]
"""

import os
import sys
import unittest

import coverage

TESTS_DIR = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, os.path.dirname(TESTS_DIR))
sys.path.insert(0, TESTS_DIR)


def create_test_suite():
    return unittest.defaultTestLoader.discover(TESTS_DIR, pattern="test_*.py")


if __name__ == "__main__":
    cov = coverage.Coverage(source=["parquet_browser"])
    cov.start()

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(create_test_suite())

    cov.stop()
    cov.save()
    print("\nCoverage Report:")
    cov.report()

    if "--html" in sys.argv:
        cov.html_report(directory="htmlcov")
        print("\nHTML report generated in 'htmlcov' directory")

    sys.exit(0 if result.wasSuccessful() else 1)
