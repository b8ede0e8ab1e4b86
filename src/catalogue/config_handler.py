# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Configuration handler for the pattern catalogue launcher.

This module handles reading and validating the YAML configuration. The loaded
dictionary is passed explicitly to whoever needs it; nothing here keeps
configuration in module state.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

DEFAULT_CONFIG_PATH = 'config/catalogue_config.yaml'

_DEFAULT_CONFIG = {
    'console': {
        'use_color': True,
        'show_headers': True,
    },
    'logging': {
        'level': 'INFO',
    },
    'demos': {
        'default': [
            'builder', 'factory', 'prototype', 'prototype-copy', 'singleton',
            'adapter', 'bridge', 'proxy', 'state',
        ],
    },
}


def get_default_config() -> Dict[str, Any]:
    """
    Get the built-in configuration used when no config file exists.

    Returns:
        Dictionary containing the default configuration
    """
    return copy.deepcopy(_DEFAULT_CONFIG)


def validate_config(config) -> Tuple[bool, str]:
    """
    Validate that the configuration has the required fields.

    Args:
        config: Dictionary containing the configuration to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(config, dict):
        return False, "Configuration must be a mapping"

    required_keys = ['console', 'logging', 'demos']
    for key in required_keys:
        if key not in config:
            return False, f"Missing required configuration section: {key}"
        if not isinstance(config[key], dict):
            return False, f"Configuration section must be a mapping: {key}"

    for flag in ('use_color', 'show_headers'):
        if flag in config['console'] and not isinstance(config['console'][flag], bool):
            return False, f"console.{flag} must be true or false"

    level = config['logging'].get('level', 'INFO')
    if not isinstance(getattr(logging, str(level).upper(), None), int):
        return False, f"Unknown logging level: {level}"

    default_demos = config['demos'].get('default', [])
    if not isinstance(default_demos, list) or not all(isinstance(name, str) for name in default_demos):
        return False, "demos.default must be a list of demo names"

    return True, ""


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the catalogue configuration from file.

    When no path is given, the default path is tried and the built-in
    defaults are used if it does not exist. Sections missing from the file
    are filled in from the defaults.

    Args:
        config_path: Path to the configuration file. If None, uses default path.

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If an explicitly given configuration file doesn't exist
        ValueError: If the configuration is invalid
    """
    if config_path is None:
        if not Path(DEFAULT_CONFIG_PATH).exists():
            return get_default_config()
        config_path = DEFAULT_CONFIG_PATH

    if not Path(config_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError("Invalid configuration: Configuration must be a mapping")

    config = get_default_config()
    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    is_valid, error_message = validate_config(config)
    if not is_valid:
        raise ValueError(f"Invalid configuration: {error_message}")

    return config
