#!/usr/bin/env python
import sys

import pytest


def run_tests(*test_args):
    if not test_args:
        test_args = ['tests']
    num_failures = pytest.main(list(test_args))
    if num_failures > 0:
        sys.exit(num_failures)


if __name__ == '__main__':
    run_tests(*sys.argv[1:])
