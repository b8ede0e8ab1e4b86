# Copyright (c) Meta Platforms, Inc. and affiliates
from .console import ConsoleReporter
from .tables import render_transition_table, render_demo_table

__all__ = ['ConsoleReporter', 'render_transition_table', 'render_demo_table']
