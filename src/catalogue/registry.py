# Copyright (c) Meta Platforms, Inc. and affiliates
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from behavioral.state import demo as state_demo
from creational import builder, factory, prototype, singleton
from structural import adapter, bridge, proxy
from visualizer import ConsoleReporter

logger = logging.getLogger(__name__)


class UnknownDemoError(ValueError):
    """Raised when a demo name is not registered."""

    def __init__(self, name: str, available: List[str]):
        super().__init__(f"Unknown pattern demo: {name}. Available: {', '.join(available)}")
        self.name = name


@dataclass
class DemoEntry:
    name: str
    category: str
    description: str
    entry: Callable[..., None]
    accepts_reporter: bool = False


class PatternRegistry:
    """Keeps the runnable pattern demos by name, in registration order."""

    def __init__(self):
        self._entries: Dict[str, DemoEntry] = {}

    def register(self, entry: DemoEntry) -> None:
        if entry.name in self._entries:
            raise ValueError(f"Demo already registered: {entry.name}")
        self._entries[entry.name] = entry

    def get(self, name: str) -> DemoEntry:
        """Look up a demo by name (case-insensitive).

        Raises:
            UnknownDemoError: If no demo has that name
        """
        key = name.lower()
        if key not in self._entries:
            raise UnknownDemoError(name, self.names())
        return self._entries[key]

    def names(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> List[DemoEntry]:
        return list(self._entries.values())

    def by_category(self) -> Dict[str, List[DemoEntry]]:
        grouped: Dict[str, List[DemoEntry]] = {}
        for entry in self._entries.values():
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    def run(self, name: str, reporter: Optional[ConsoleReporter] = None) -> None:
        """Run a demo by name.

        Args:
            name: Registered demo name
            reporter: Console reporter handed to demos that print transitions
        """
        entry = self.get(name)
        logger.info(f"Running {entry.category} demo: {entry.name}")
        if entry.accepts_reporter and reporter is not None:
            entry.entry(reporter)
        else:
            entry.entry()


def default_registry() -> PatternRegistry:
    """Build a registry holding every demo in the catalogue."""
    registry = PatternRegistry()
    for entry in [
        DemoEntry('builder', 'creational', 'Fluent pizza assembly', builder.main),
        DemoEntry('factory', 'creational', 'User roles created by category name', factory.main),
        DemoEntry('prototype', 'creational', 'Cloning circles and rectangles', prototype.main),
        DemoEntry('prototype-copy', 'creational', 'Shallow versus deep clones',
                  prototype.shallow_vs_deep_main),
        DemoEntry('singleton', 'creational', 'One shared configuration manager', singleton.main),
        DemoEntry('adapter', 'structural', 'Metric weather readings in imperial units', adapter.main),
        DemoEntry('bridge', 'structural', 'Remotes driving TVs and radios', bridge.main),
        DemoEntry('proxy', 'structural', 'Lazy image loading with a cache', proxy.main),
        DemoEntry('state', 'behavioral', 'Vending machine state machine', state_demo.main,
                  accepts_reporter=True),
    ]:
        registry.register(entry)
    return registry
