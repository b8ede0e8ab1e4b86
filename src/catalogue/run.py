# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Entry point for the design pattern catalogue.

Lists the available demos, runs one or more of them by name, or prints the
vending machine transition table.

Usage:
    python run_patterns.py --list
    python run_patterns.py --pattern state [--pattern proxy ...]
    python run_patterns.py --all [--config-path PATH] [--no-color]
"""

import argparse
import logging
import sys
from typing import List, Optional

from visualizer import ConsoleReporter, render_demo_table, render_transition_table
from .config_handler import DEFAULT_CONFIG_PATH, load_config
from .registry import UnknownDemoError, default_registry

logger = logging.getLogger("pattern_catalogue")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Run the design pattern demonstrations.'
    )
    parser.add_argument(
        '--list',
        action='store_true',
        help='List the available pattern demos'
    )
    parser.add_argument(
        '--pattern',
        action='append',
        default=[],
        metavar='NAME',
        help='Run the named demo (can be given more than once)'
    )
    parser.add_argument(
        '--all',
        action='store_true',
        help='Run every demo listed under demos.default in the configuration'
    )
    parser.add_argument(
        '--show-transitions',
        action='store_true',
        help='Print the vending machine transition table'
    )
    parser.add_argument(
        '--config-path',
        type=str,
        default=None,
        help=f'Path to the configuration file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '--no-color',
        action='store_true',
        help='Disable coloured console output'
    )
    return parser


def print_usage_guidance(registry) -> None:
    print("Please run the specific pattern demonstrations:")
    for category, entries in registry.by_category().items():
        names = ', '.join(entry.name for entry in entries)
        print(f"- {category.capitalize()}: {names}")
    print("\nExample: python run_patterns.py --pattern state")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse command line arguments and run the requested demos.

    Args:
        argv: Argument list; defaults to sys.argv[1:]

    Returns:
        Process exit code: 0 on success, 1 for an unknown demo name
    """
    args = build_parser().parse_args(argv)
    config = load_config(args.config_path)

    logging.basicConfig(
        level=getattr(logging, str(config['logging']['level']).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    console = config['console']
    reporter = ConsoleReporter(
        use_color=console.get('use_color', True) and not args.no_color,
        show_headers=console.get('show_headers', True),
    )
    registry = default_registry()

    if args.list:
        print(render_demo_table(registry.entries()))

    if args.show_transitions:
        print(render_transition_table())

    names = list(args.pattern)
    if args.all:
        names.extend(config['demos'].get('default', []))

    if not names:
        if not (args.list or args.show_transitions):
            print_usage_guidance(registry)
        return 0

    try:
        # Resolve every name first so a typo does not leave a half-run batch
        entries = [registry.get(name) for name in names]
    except UnknownDemoError as e:
        logger.error(str(e))
        return 1

    for i, entry in enumerate(entries):
        if i:
            print()
        reporter.header(f"{entry.category.capitalize()}: {entry.name}")
        registry.run(entry.name, reporter=reporter)

    return 0


if __name__ == '__main__':
    sys.exit(main())
