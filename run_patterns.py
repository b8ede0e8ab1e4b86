#!/usr/bin/env python3
# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Launcher for the design pattern catalogue.

Usage:
    python run_patterns.py [--list] [--pattern NAME ...] [--all] [--show-transitions]
"""

import os
import sys

# Add the source directory to the path so the catalogue runs without installing
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from catalogue.run import main

if __name__ == '__main__':
    sys.exit(main())
