# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Tabular views of the catalogue for the terminal.

Both helpers return strings so callers decide where the output goes.
"""

from typing import Iterable

from tabulate import tabulate

from behavioral.state import MachineEvent, MachineState, transition


def _describe(state: MachineState, event: MachineEvent, has_product: bool) -> str:
    result = transition(state, event, has_product)
    if result.ignored:
        return f'no-op: "{result.message}"'
    return f'-> {result.new_state.value}: "{result.message}"'


def render_transition_table(tablefmt: str = 'grid') -> str:
    """
    Render every (state, event) pair of the vending machine as a table.

    Select-product in HasMoney depends on inventory, so that cell lists both
    outcomes.

    Args:
        tablefmt: Any format name accepted by tabulate

    Returns:
        The rendered table
    """
    headers = ['State'] + [event.value for event in MachineEvent]
    rows = []
    for state in MachineState:
        row = [state.value]
        for event in MachineEvent:
            in_stock = _describe(state, event, True)
            empty = _describe(state, event, False)
            if in_stock == empty:
                row.append(in_stock)
            else:
                row.append(f"in stock {in_stock}\nempty {empty}")
        rows.append(row)
    return tabulate(rows, headers=headers, tablefmt=tablefmt)


def render_demo_table(entries: Iterable, tablefmt: str = 'simple') -> str:
    """
    Render registered demos as a name/category/description table.

    Args:
        entries: DemoEntry objects from the registry
        tablefmt: Any format name accepted by tabulate

    Returns:
        The rendered table
    """
    rows = [[entry.name, entry.category, entry.description] for entry in entries]
    return tabulate(rows, headers=['Pattern', 'Category', 'Description'], tablefmt=tablefmt)
