# Copyright (c) Meta Platforms, Inc. and affiliates
import logging
from typing import Callable, List, Optional

from .states import MachineEvent, MachineState, Transition, transition

logger = logging.getLogger(__name__)


class VendingMachine:
    """A single-product vending machine driven by the State pattern.

    The machine owns its current state and inventory flag. Behaviour for each
    event lives in the state handlers; the machine only applies the returned
    Transition and hands it to the optional notify callback, so it performs no
    console I/O of its own.
    """

    def __init__(self, notify: Optional[Callable[[Transition], None]] = None):
        """
        Initialize the vending machine.

        Args:
            notify: Optional callback invoked with every Transition
        """
        self.state = MachineState.NO_MONEY
        self.has_product = True
        self.notify = notify
        self._history: List[Transition] = []

    @property
    def history(self) -> List[Transition]:
        return self._history.copy()

    def handle(self, event: MachineEvent) -> Transition:
        """Handle an event in the current state and apply the result.

        Args:
            event: The event to handle

        Returns:
            The Transition produced by the current state's handler
        """
        result = transition(self.state, event, self.has_product)
        self.state = result.new_state
        self.has_product = result.has_product
        self._history.append(result)

        logger.debug(
            f"{result.event.value}: {result.old_state.value} -> {result.new_state.value} "
            f"({'ignored' if result.ignored else 'applied'}) {result.message}"
        )

        if self.notify is not None:
            self.notify(result)
        return result

    def insert_money(self) -> Transition:
        return self.handle(MachineEvent.INSERT_MONEY)

    def select_product(self) -> Transition:
        return self.handle(MachineEvent.SELECT_PRODUCT)

    def dispense(self) -> Transition:
        return self.handle(MachineEvent.DISPENSE)
