# Copyright (c) Meta Platforms, Inc. and affiliates
from .config_handler import get_default_config, validate_config, load_config
from .registry import DemoEntry, PatternRegistry, UnknownDemoError, default_registry

__all__ = [
    'get_default_config',
    'validate_config',
    'load_config',
    'DemoEntry',
    'PatternRegistry',
    'UnknownDemoError',
    'default_registry',
]
