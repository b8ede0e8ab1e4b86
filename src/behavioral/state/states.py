# Copyright (c) Meta Platforms, Inc. and affiliates
"""
Vending machine states and the pure transition function.

Each machine state is a stateless handler object implementing the shared
``State`` interface. Handlers never touch a machine: they receive the current
inventory flag and return a ``Transition`` describing what the event did.
``transition`` picks the handler for the current state and dispatches the
event to it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict


class MachineState(Enum):
    NO_MONEY = 'NoMoney'
    HAS_MONEY = 'HasMoney'
    DISPENSING = 'Dispensing'


class MachineEvent(Enum):
    INSERT_MONEY = 'insert_money'
    SELECT_PRODUCT = 'select_product'
    DISPENSE = 'dispense'


@dataclass(frozen=True)
class Transition:
    """Outcome of a single event applied to the vending machine.

    Attributes:
        event: The event that was handled
        old_state: State before the event
        new_state: State after the event
        message: Informational message for the customer
        has_product: Inventory flag after the event
        ignored: True when the event was an informational no-op
    """
    event: MachineEvent
    old_state: MachineState
    new_state: MachineState
    message: str
    has_product: bool
    ignored: bool = False

    @property
    def changed(self) -> bool:
        return self.old_state != self.new_state


class State(ABC):
    """Base class for the per-state event handlers."""

    state: MachineState

    def _move(self, event: MachineEvent, new_state: MachineState, message: str,
              has_product: bool) -> Transition:
        return Transition(event, self.state, new_state, message, has_product)

    def _ignore(self, event: MachineEvent, message: str, has_product: bool) -> Transition:
        return Transition(event, self.state, self.state, message, has_product, ignored=True)

    @abstractmethod
    def insert_money(self, has_product: bool) -> Transition:
        pass

    @abstractmethod
    def select_product(self, has_product: bool) -> Transition:
        pass

    @abstractmethod
    def dispense(self, has_product: bool) -> Transition:
        pass


class NoMoneyState(State):
    state = MachineState.NO_MONEY

    def insert_money(self, has_product: bool) -> Transition:
        return self._move(MachineEvent.INSERT_MONEY, MachineState.HAS_MONEY,
                          "Money accepted!", has_product)

    def select_product(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.SELECT_PRODUCT, "Please insert money first", has_product)

    def dispense(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.DISPENSE, "Please insert money first", has_product)


class HasMoneyState(State):
    state = MachineState.HAS_MONEY

    def insert_money(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.INSERT_MONEY, "Already have money inserted", has_product)

    def select_product(self, has_product: bool) -> Transition:
        if has_product:
            return self._move(MachineEvent.SELECT_PRODUCT, MachineState.DISPENSING,
                              "Product selected", has_product)
        return self._move(MachineEvent.SELECT_PRODUCT, MachineState.NO_MONEY,
                          "Sorry, out of products", has_product)

    def dispense(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.DISPENSE, "Please select a product first", has_product)


class DispensingState(State):
    state = MachineState.DISPENSING

    def insert_money(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.INSERT_MONEY, "Please wait, dispensing product", has_product)

    def select_product(self, has_product: bool) -> Transition:
        return self._ignore(MachineEvent.SELECT_PRODUCT, "Please wait, dispensing product", has_product)

    def dispense(self, has_product: bool) -> Transition:
        return self._move(MachineEvent.DISPENSE, MachineState.NO_MONEY,
                          "Dispensing product...", False)


STATE_HANDLERS: Dict[MachineState, State] = {
    MachineState.NO_MONEY: NoMoneyState(),
    MachineState.HAS_MONEY: HasMoneyState(),
    MachineState.DISPENSING: DispensingState(),
}


def transition(state: MachineState, event: MachineEvent, has_product: bool) -> Transition:
    """Apply an event to a state without touching any machine object.

    Args:
        state: The current machine state
        event: The event to handle
        has_product: Whether the machine still holds a product

    Returns:
        The resulting Transition

    Raises:
        ValueError: If state or event is not a member of its enum
    """
    if not isinstance(state, MachineState):
        raise ValueError(f"Unknown machine state: {state!r}")
    if not isinstance(event, MachineEvent):
        raise ValueError(f"Unknown machine event: {event!r}")

    handler = STATE_HANDLERS[state]
    return getattr(handler, event.value)(has_product)
