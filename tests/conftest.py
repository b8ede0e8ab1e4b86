# Copyright (c) Meta Platforms, Inc. and affiliates
import os
import sys

import pytest

# Allow running the tests from a checkout without installing the package
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src'))

from creational.singleton import ConfigurationManager
from visualizer import ConsoleReporter


@pytest.fixture
def plain_reporter():
    """A reporter without ANSI colours so output can be compared verbatim."""
    return ConsoleReporter(use_color=False)


@pytest.fixture(autouse=True)
def fresh_singleton():
    ConfigurationManager.reset_instance()
    yield
    ConfigurationManager.reset_instance()
